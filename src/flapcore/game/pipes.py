"""Pipe pair factory."""

import logging
from typing import List

from flapcore.game.models import Pipe, PipePair
from flapcore.game.random_source import RandomSource

logger = logging.getLogger(__name__)

# Inclusive bounds of the randomized vertical opening. Independent of the
# controller's ``pipe_gap`` setting.
GAP_MIN = 155
GAP_MAX = 180

PIPE_LABELS: List[str] = [
    "SubQuery",
    "Decentrailised Data",
    "Indexer",
    "Consumer",
    "Delegator",
    "SubQuery Projects",
    "SubQuery SDK",
    "SubQuery Explorer",
    "SubQuery Network",
    "Web3 Infrastructure",
    "Open-source",
    "SubQuery Token",
    "SQT",
    "Pay As You Go",
    "Closed Agreement",
    "Open Agreement",
    "♥Sally♥",
]


class PipeFactory:
    """Builds pipe pairs that spawn flush with the right edge of the playfield.

    Args:
        width: Playfield width
        height: Playfield height
        pipe_width: Horizontal extent of every pair
        min_top: Lower bound for the top pipe's bottom edge
        max_top: Upper bound for the top pipe's bottom edge
        random_source: Supplier of the random draws
    """

    def __init__(
        self,
        width: float,
        height: float,
        pipe_width: float,
        min_top: float,
        max_top: float,
        random_source: RandomSource,
    ) -> None:
        self.width = width
        self.height = height
        self.pipe_width = pipe_width
        self.min_top = min_top
        self.max_top = max_top
        self._random = random_source

    def random_top_height(self) -> float:
        return self._random.uniform(self.min_top, self.max_top)

    def random_gap(self) -> int:
        return self._random.randint(GAP_MIN, GAP_MAX)

    def random_text(self) -> str:
        return self._random.choice(PIPE_LABELS)

    def create(self, show: bool) -> PipePair:
        """Create a new pair; ``show`` is copied onto the result as-is."""
        height = self.random_top_height()
        text = self.random_text()
        gap = self.random_gap()

        pair = PipePair(
            top_pipe=Pipe(top=0, height=height, text=text),
            bottom_pipe=Pipe(top=height + gap, height=self.height, text=text),
            show=show,
            left=self.width - self.pipe_width,
            width=self.pipe_width,
        )
        logger.debug(f"Pipe created: boundary={height:.1f} gap={gap} show={show}")
        return pair
