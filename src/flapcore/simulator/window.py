"""
Desktop simulator window using pygame.

Drives a GameController at a fixed cadence and shows each frame.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..autopilot import RuleBasedPilot
from ..config.settings import SimulatorSettings
from ..core.events import EventBus, GameEventType, Event, tick_event
from ..core.state import GamePhase
from ..game.controller import GameController
from ..game.models import Frame
from ..graphics.renderer import FrameRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "flapcore"
    fps: int = 60
    scale: int = 1
    fullscreen: bool = False

    text_color: tuple[int, int, int] = (255, 255, 255)
    accent_color: tuple[int, int, int] = (255, 220, 80)
    alert_color: tuple[int, int, int] = (255, 80, 80)

    @classmethod
    def from_settings(cls, settings: SimulatorSettings) -> "WindowConfig":
        return cls(
            title=settings.title,
            fps=settings.fps,
            scale=settings.scale,
            fullscreen=settings.fullscreen,
        )


class SimulatorWindow:
    """
    Window that owns the tick loop for one controller.

    Keyboard Mapping:
        SPACE / UP: Jump (starts a game when none is running)
        ENTER / R: Start a new game
        N: New game without starting
        A: Toggle autopilot
        D: Toggle debug overlay
        S: Capture screenshot
        ESC / Q: Exit simulator
    """

    def __init__(
        self,
        controller: GameController,
        config: WindowConfig | None = None,
        event_bus: EventBus | None = None,
        autopilot: bool = False,
    ) -> None:
        self.controller = controller
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()

        self._renderer = FrameRenderer()
        self._pilot = RuleBasedPilot()
        self._autopilot = autopilot

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False
        self._best_score = 0

        self._frame: Frame = controller.new_game()

        self.event_bus.subscribe(GameEventType.TICK, self._on_tick)
        self.event_bus.subscribe(GameEventType.GAME_OVER, self._on_game_over)

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        size = (
            int(self.controller.width) * self.config.scale,
            int(self.controller.height) * self.config.scale,
        )
        self._screen = pygame.display.set_mode(size, flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 48)
        self._small_font = pygame.font.SysFont(None, 20)

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key in (pygame.K_SPACE, pygame.K_UP):
            if self.controller.phase == GamePhase.RUNNING:
                self.controller.jump()
            else:
                self._frame = self.controller.start()
        elif key in (pygame.K_RETURN, pygame.K_r):
            self._frame = self.controller.start()
        elif key == pygame.K_n:
            self._frame = self.controller.new_game()
        elif key == pygame.K_a:
            self._autopilot = not self._autopilot
            logger.info(f"Autopilot: {self._autopilot}")
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_s:
            self._capture_screenshot()

    def _on_tick(self, event: Event) -> None:
        """Advance the game by one step per tick."""
        if self._autopilot and self._pilot.decide(self._frame):
            self.controller.jump()
        self._frame = self.controller.next_frame()

    def _on_game_over(self, event: Event) -> None:
        score = event.data.get("score", 0)
        if score > self._best_score:
            self._best_score = score
            logger.info(f"New best score: {score}")

    def _render(self) -> None:
        if not self._screen:
            return

        buffer = self._renderer.render(self._frame)
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        self._render_hud()
        if self._show_debug:
            self._render_debug_panel()

        pygame.display.flip()

    def _render_hud(self) -> None:
        if not self._font:
            return

        width = self._screen.get_width()
        score = self._font.render(str(self._frame.score), True, self.config.text_color)
        self._screen.blit(score, score.get_rect(midtop=(width // 2, 20)))

        center_y = self._screen.get_height() // 2
        if self._frame.game_over:
            text = self._font.render("GAME OVER", True, self.config.alert_color)
            self._screen.blit(text, text.get_rect(center=(width // 2, center_y)))
            hint = self._small_font.render("SPACE to play again", True, self.config.text_color)
            self._screen.blit(hint, hint.get_rect(center=(width // 2, center_y + 40)))
        elif not self._frame.game_started:
            hint = self._small_font.render("SPACE to start", True, self.config.accent_color)
            self._screen.blit(hint, hint.get_rect(center=(width // 2, center_y + 60)))

    def _render_debug_panel(self) -> None:
        if not self._small_font:
            return

        bird = self._frame.bird
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Tick: {self._frame_count}",
            f"Phase: {self.controller.phase.name}",
            f"Bird top: {bird.top:.1f}",
            f"Velocity: {self.controller.velocity:.2f}",
            f"Pipes: {self._frame.first_pipe.left:.0f}/{int(self._frame.first_pipe.show)} "
            f"{self._frame.second_pipe.left:.0f}/{int(self._frame.second_pipe.show)}",
            f"Best: {self._best_score}",
            f"Autopilot: {'on' if self._autopilot else 'off'}",
        ]

        y = 60
        for line in lines:
            text_surface = self._small_font.render(line, True, self.config.text_color)
            self._screen.blit(text_surface, (10, y))
            y += 18

    def _capture_screenshot(self) -> None:
        if self._screen:
            filename = f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            if self._clock:
                delta = self._clock.get_time() / 1000.0
                self.event_bus.queue_event(tick_event(delta, self._frame_count))

            await self.event_bus.process_queue()

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        self._running = False
