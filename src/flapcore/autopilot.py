"""Rule-based pilot that decides when to jump from a frame alone."""

import logging
from typing import Any, Dict, Optional

from flapcore.game.models import Frame, PipePair

logger = logging.getLogger(__name__)


DEFAULT_RULES: Dict[str, Any] = {
    "jump_if_below_gap": True,
    "gap_margin": 12,  # Pixels kept between bird bottom and gap bottom
    "floor_margin": 60,  # Jump anyway when this close to the ground
}


class RuleBasedPilot:
    """Jump whenever the bird sinks below the opening of the next pipe.

    Args:
        rules: Overrides for ``DEFAULT_RULES``
    """

    def __init__(self, rules: Optional[Dict[str, Any]] = None) -> None:
        self.rules = {**DEFAULT_RULES, **(rules or {})}

    def next_pair(self, frame: Frame) -> Optional[PipePair]:
        """Nearest visible pair whose right edge is not yet behind the bird."""
        ahead = [
            pair for pair in frame.pipes
            if pair.show and pair.right >= frame.bird.left
        ]
        if not ahead:
            return None
        return min(ahead, key=lambda pair: pair.left)

    def decide(self, frame: Frame) -> bool:
        """Return True when the pilot wants to jump this step."""
        if frame.game_over or not frame.game_started:
            return False

        bird = frame.bird
        bird_bottom = bird.top + bird.size
        floor = frame.height - frame.ground.height

        if bird_bottom >= floor - self.rules["floor_margin"]:
            return True

        pair = self.next_pair(frame)
        if pair is None or not self.rules["jump_if_below_gap"]:
            return False

        return bird_bottom > pair.bottom_pipe.top - self.rules["gap_margin"]
