"""flapcore - simulation core of a side-scrolling pipe game."""

from flapcore.game import GameController, Frame, Bird, Pipe, PipePair, Ground

__version__ = "0.1.0"

__all__ = ["GameController", "Frame", "Bird", "Pipe", "PipePair", "Ground"]
