"""
Phase machine for a single game.

Phases:
    READY: Fresh frame built, waiting for start
    RUNNING: Frames advance on every tick
    OVER: Bird hit the ground or a pipe; ticks are ignored
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """Game phases."""
    READY = auto()
    RUNNING = auto()
    OVER = auto()


PhaseListener = Callable[[GamePhase, GamePhase], None]


class PhaseMachine:
    """
    Tracks the game phase and notifies listeners of changes.

    Mirrors the frame's ``game_started``/``game_over`` flags so drivers
    can react to transitions instead of polling flags.
    """

    VALID_TRANSITIONS: list[tuple[GamePhase, GamePhase]] = [
        (GamePhase.READY, GamePhase.RUNNING),
        (GamePhase.RUNNING, GamePhase.OVER),
    ]

    def __init__(self, initial_phase: GamePhase = GamePhase.READY) -> None:
        self._phase = initial_phase
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def phase(self) -> GamePhase:
        return self._phase

    def can_transition(self, to_phase: GamePhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: GamePhase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase
        logger.debug(f"Phase transition: {old_phase.name} -> {to_phase.name}")
        self._notify(old_phase, to_phase)
        return True

    def reset(self) -> None:
        """Return to READY from any phase."""
        old_phase = self._phase
        self._phase = GamePhase.READY
        if old_phase != GamePhase.READY:
            self._notify(old_phase, GamePhase.READY)

    def add_listener(self, callback: PhaseListener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, old_phase: GamePhase, new_phase: GamePhase) -> None:
        for listener in self._listeners:
            try:
                listener(old_phase, new_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")
