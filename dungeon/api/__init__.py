"""HTTP boundary: renderer data out, player actions in."""
