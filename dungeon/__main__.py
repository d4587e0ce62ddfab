"""Entry point: ``python -m dungeon``.

Supports two modes:
  - ``python -m dungeon``            → Launch the FastAPI server
  - ``python -m dungeon cli``        → Headless run from a scripted action string
"""

from __future__ import annotations

import argparse
import logging

from dungeon.core.enums import PlayerAction

logger = logging.getLogger(__name__)

# One character per turn in --actions
ACTION_KEYS: dict[str, PlayerAction] = {
    ".": PlayerAction.WAIT,
    "n": PlayerAction.MOVE_NORTH,
    "e": PlayerAction.MOVE_EAST,
    "s": PlayerAction.MOVE_SOUTH,
    "w": PlayerAction.MOVE_WEST,
}


def parse_actions(script: str) -> list[PlayerAction]:
    """Translate an action script; unknown characters are skipped."""
    return [ACTION_KEYS[c] for c in script.lower() if c in ACTION_KEYS]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based dungeon simulation core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--width", type=int, default=80)
    srv.add_argument("--height", type=int, default=50)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--width", type=int, default=80)
    cli.add_argument("--height", type=int, default=50)
    cli.add_argument("--turns", type=int, default=200)
    cli.add_argument("--actions", type=str, default="", help="Action script, e.g. 'nnee..s' (pads with waits)")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from dungeon.api.app import create_app
    from dungeon.config import DungeonConfig

    config = DungeonConfig(
        world_seed=args.seed,
        map_width=args.width,
        map_height=args.height,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from dungeon.config import DungeonConfig
    from dungeon.engine.bootstrap import new_game
    from dungeon.utils.event_log import EventLog
    from dungeon.utils.logging import setup_logging

    config = DungeonConfig(
        world_seed=args.seed,
        map_width=args.width,
        map_height=args.height,
        max_turns=args.turns,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    event_log = EventLog(config.event_log_size)
    loop = new_game(config, event_log)
    loop.tick()

    script = parse_actions(args.actions)
    logger.info("=== Session started (seed=%d, %d scripted actions) ===", config.world_seed, len(script))

    for n in range(config.max_turns):
        action = script[n] if n < len(script) else PlayerAction.WAIT
        events = loop.play(action)
        for event in events:
            logger.info("%s", event)
        if loop.world.turn % 50 == 0:
            player = loop.world.player
            logger.info(
                "Turn %d: player at %s, %d tiles revealed",
                loop.world.turn, player.pos if player else None,
                len(loop.world.game_map.revealed_tiles),
            )

    logger.info("=== Session finished at turn %d ===", loop.world.turn)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
