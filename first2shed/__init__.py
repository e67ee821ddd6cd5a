"""A shedding card game engine driven by commands through a finite state machine, with a terminal game."""

__version__ = "0.1.0"

__all__ = ["card", "cli", "events", "game", "hand", "pile"]