"""Value records describing one observable frame of the game."""

import copy
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple


@dataclass
class Bird:
    """The player's square hit-box."""

    top: float
    left: float
    size: float


@dataclass
class Pipe:
    """One vertical obstacle segment. ``text`` is a cosmetic label."""

    top: float
    height: float
    text: str


@dataclass
class PipePair:
    """Top and bottom pipe sharing a horizontal position.

    An inactive pair (``show=False``) is either not yet spawned or fully
    scrolled off; it keeps its stale geometry until respawned.
    """

    top_pipe: Pipe
    bottom_pipe: Pipe
    show: bool
    left: float
    width: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def gap(self) -> float:
        """Vertical opening between the two pipes."""
        return self.bottom_pipe.top - self.top_pipe.height


@dataclass
class Ground:
    height: float


@dataclass
class Frame:
    """Entire externally observable snapshot of a game."""

    first_pipe: PipePair
    second_pipe: PipePair
    bird: Bird
    game_over: bool
    game_started: bool
    width: float
    height: float
    score: int
    ground: Ground

    @property
    def pipes(self) -> Tuple[PipePair, PipePair]:
        return (self.first_pipe, self.second_pipe)

    def snapshot(self) -> "Frame":
        """Deep copy that shares no mutable state with this frame."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
