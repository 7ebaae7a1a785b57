"""Directory change watching."""
