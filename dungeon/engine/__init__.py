"""Engine layer: player actions, turn pipeline, game loop, world bootstrap."""

from dungeon.engine.bootstrap import build_world, new_game
from dungeon.engine.game_loop import GameLoop
from dungeon.engine.turn_pipeline import TurnPipeline

__all__ = ["GameLoop", "TurnPipeline", "build_world", "new_game"]
