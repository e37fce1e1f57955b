"""Simulation core: frame model, pipe lifecycle, physics and collisions."""

from flapcore.game.models import Bird, Pipe, PipePair, Ground, Frame
from flapcore.game.pipes import PipeFactory, PIPE_LABELS, GAP_MIN, GAP_MAX
from flapcore.game.random_source import RandomSource, SystemRandomSource
from flapcore.game.collision import overlaps_bird, has_collided_with_pipe
from flapcore.game.controller import GameController

__all__ = [
    "Bird",
    "Pipe",
    "PipePair",
    "Ground",
    "Frame",
    "PipeFactory",
    "PIPE_LABELS",
    "GAP_MIN",
    "GAP_MAX",
    "RandomSource",
    "SystemRandomSource",
    "overlaps_bird",
    "has_collided_with_pipe",
    "GameController",
]
