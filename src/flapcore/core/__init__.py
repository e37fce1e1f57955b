"""Core framework components for flapcore."""

from .state import GamePhase, PhaseMachine
from .events import EventBus, Event, GameEventType

__all__ = ["GamePhase", "PhaseMachine", "EventBus", "Event", "GameEventType"]
