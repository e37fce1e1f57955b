"""Game controller - owns the authoritative frame and advances it one step at a time."""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from flapcore.config.settings import GameSettings
from flapcore.core.events import Event, EventBus, GameEventType
from flapcore.core.state import GamePhase, PhaseMachine
from flapcore.game.collision import has_collided_with_pipe
from flapcore.game.models import Bird, Frame, Ground, PipePair
from flapcore.game.pipes import PipeFactory
from flapcore.game.random_source import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class GameController:
    """State machine for one side-scrolling pipe game.

    Callers drive it through ``new_game``, ``start``, ``next_frame`` and
    ``jump``. Every operation that returns a frame returns a snapshot; the
    internal frame is never handed out.

    Lifecycle:
        1. new_game() - fresh frame, not started
        2. start() - fresh frame, running
        3. next_frame() - one simulation step per call
        4. jump() - upward thrust, applied on the next step

    ``pipe_gap`` is kept for configuration compatibility only. The gap of
    every generated pair is drawn from a fixed range regardless of it.
    """

    def __init__(
        self,
        height: float = 800,
        width: float = 400,
        pipe_width: float = 50,
        pipe_gap: float = 170,
        min_top_for_top_pipe: float = 50,
        max_top_for_top_pipe: float = 350,
        generate_new_pipe_percent: float = 0.7,
        speed: float = 1,
        ground_height: float = 20,
        bird_x: float = 40,
        bird_size: float = 40,
        gravity: float = 1.5,
        jump_velocity: float = 10,
        slow_velocity_by: float = 0.3,
        *,
        random_source: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self._height = height
        self._width = width
        self._pipe_width = pipe_width
        self.pipe_gap = pipe_gap
        self._min_top_for_top_pipe = min_top_for_top_pipe
        self._max_top_for_top_pipe = max_top_for_top_pipe
        self._generate_new_pipe_percent = generate_new_pipe_percent
        self._speed = speed
        self._ground_height = ground_height
        self._bird_x = bird_x
        self._bird_size = bird_size
        self._gravity = gravity
        self._jump_velocity = jump_velocity
        self._slow_velocity_by = slow_velocity_by

        self._pipes = PipeFactory(
            width=width,
            height=height,
            pipe_width=pipe_width,
            min_top=min_top_for_top_pipe,
            max_top=max_top_for_top_pipe,
            random_source=random_source or SystemRandomSource(),
        )
        self._event_bus = event_bus
        self._phases = PhaseMachine()

        self._frame: Optional[Frame] = None
        self._velocity = 0.0

    @classmethod
    def from_settings(
        cls,
        settings: GameSettings,
        random_source: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ) -> "GameController":
        """Build a controller from validated settings."""
        return cls(
            **settings.model_dump(),
            random_source=random_source,
            event_bus=event_bus,
        )

    # Read-only configuration
    @property
    def height(self) -> float:
        return self._height

    @property
    def width(self) -> float:
        return self._width

    @property
    def pipe_width(self) -> float:
        return self._pipe_width

    @property
    def min_top_for_top_pipe(self) -> float:
        return self._min_top_for_top_pipe

    @property
    def max_top_for_top_pipe(self) -> float:
        return self._max_top_for_top_pipe

    @property
    def generate_new_pipe_percent(self) -> float:
        return self._generate_new_pipe_percent

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def ground_height(self) -> float:
        return self._ground_height

    @property
    def bird_x(self) -> float:
        return self._bird_x

    @property
    def bird_size(self) -> float:
        return self._bird_size

    @property
    def gravity(self) -> float:
        return self._gravity

    @property
    def jump_velocity(self) -> float:
        return self._jump_velocity

    @property
    def slow_velocity_by(self) -> float:
        return self._slow_velocity_by

    # Runtime state
    @property
    def velocity(self) -> float:
        """Current upward velocity (positive means rising)."""
        return self._velocity

    @property
    def phase(self) -> GamePhase:
        return self._phases.phase

    @property
    def phases(self) -> PhaseMachine:
        """Phase machine, for attaching transition listeners."""
        return self._phases

    @property
    def frame(self) -> Frame:
        """Snapshot of the current frame."""
        return self._current().snapshot()

    @property
    def ground_limit(self) -> float:
        """Largest ``bird.top`` before the bird touches the ground."""
        return self._height - self._ground_height - self._bird_size

    # Lifecycle
    def new_game(self) -> Frame:
        """Replace the frame with a fresh, not-yet-started one."""
        first_pipe = self._pipes.create(True)
        second_pipe = self._pipes.create(False)

        self._frame = Frame(
            first_pipe=first_pipe,
            second_pipe=second_pipe,
            score=0,
            width=self._width,
            height=self._height,
            game_over=False,
            game_started=False,
            bird=Bird(
                left=self._bird_x,
                top=self._height / 2 - self._bird_size / 2,
                size=self._bird_size,
            ),
            ground=Ground(height=self._ground_height),
        )
        self._velocity = 0.0
        self._phases.reset()

        logger.info("New game")
        self._emit(GameEventType.NEW_GAME)
        return self._frame.snapshot()

    def start(self) -> Frame:
        """Reset and begin running."""
        self.new_game()
        frame = self._current()
        frame.game_started = True
        self._phases.transition(GamePhase.RUNNING)

        logger.info("Game started")
        self._emit(GameEventType.STARTED)
        return frame.snapshot()

    def next_frame(self) -> Frame:
        """Advance the simulation by one step.

        No-op before ``start`` and after the game is over.
        """
        frame = self._current()
        if frame.game_over or not frame.game_started:
            return frame.snapshot()

        # Both pairs observe the other's state from before this step
        first_before = dataclasses.replace(frame.first_pipe)
        second_before = dataclasses.replace(frame.second_pipe)
        frame.first_pipe = self._move_pipe(frame.first_pipe, second_before, "first")
        frame.second_pipe = self._move_pipe(frame.second_pipe, first_before, "second")

        if frame.bird.top >= self.ground_limit:
            frame.bird.top = self.ground_limit
            self._end_game(frame, "ground")
            return frame.snapshot()

        if has_collided_with_pipe(frame, self._pipe_width, self._bird_x, self._bird_size):
            self._end_game(frame, "pipe")
            return frame.snapshot()

        # Jump thrust fades; not clamped at zero
        if self._velocity > 0:
            self._velocity -= self._slow_velocity_by

        # Exact match only; fractional or non-dividing speeds may never score
        for pair in frame.pipes:
            if pair.left + self._pipe_width == self._bird_x - self._speed:
                frame.score += 1
                logger.debug(f"Scored: {frame.score}")
                self._emit(GameEventType.SCORED, score=frame.score)

        frame.bird.top += self._gravity ** 2 - self._velocity

        return frame.snapshot()

    def jump(self) -> None:
        """Add upward thrust unless the bird is still rising."""
        if self._velocity <= 0:
            self._velocity += self._jump_velocity
            self._emit(GameEventType.JUMP, velocity=self._velocity)

    # Internals
    def _move_pipe(self, pipe: PipePair, other_pipe: PipePair, slot: str) -> PipePair:
        if pipe.show and pipe.left <= -self._pipe_width:
            pipe.show = False
            logger.debug(f"Pipe retired: {slot}")
            self._emit(GameEventType.PIPE_RETIRED, slot=slot)
            return pipe

        if pipe.show:
            pipe.left -= self._speed

        if (
            other_pipe.left < self._width * (1 - self._generate_new_pipe_percent)
            and other_pipe.show
            and not pipe.show
        ):
            logger.debug(f"Pipe spawned: {slot}")
            self._emit(GameEventType.PIPE_SPAWNED, slot=slot)
            return self._pipes.create(True)

        return pipe

    def _end_game(self, frame: Frame, reason: str) -> None:
        frame.game_over = True
        self._phases.transition(GamePhase.OVER)
        logger.info(f"Game over ({reason}), score {frame.score}")
        self._emit(GameEventType.GAME_OVER, reason=reason, score=frame.score)

    def _current(self) -> Frame:
        if self._frame is None:
            raise RuntimeError("No game in progress; call new_game() or start() first")
        return self._frame

    def _emit(self, event_type: GameEventType, **data) -> None:
        if self._event_bus is None:
            return
        self._event_bus.emit(Event(event_type, data=data, source="controller"))
