import asyncio

import pytest

pygame = pytest.importorskip("pygame")

from flapcore.core.events import EventBus, GameEventType
from flapcore.core.state import GamePhase
from flapcore.game.controller import GameController
from flapcore.simulator.window import SimulatorWindow, WindowConfig

from helpers import FixedRandom


def press(window, key):
    window._handle_keydown(pygame.event.Event(pygame.KEYDOWN, key=key))


@pytest.fixture
def headless_display(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_keys_drive_controller():
    controller = GameController(random_source=FixedRandom())
    window = SimulatorWindow(controller)
    assert controller.phase == GamePhase.READY

    press(window, pygame.K_SPACE)
    assert controller.phase == GamePhase.RUNNING

    press(window, pygame.K_SPACE)
    assert controller.velocity == 10

    press(window, pygame.K_n)
    assert controller.phase == GamePhase.READY

    press(window, pygame.K_a)
    assert window._autopilot

    press(window, pygame.K_ESCAPE)
    assert not window._running


def test_run_loop_with_autopilot_and_debug(headless_display):
    controller = GameController(random_source=FixedRandom())
    bus = EventBus(history_limit=200)
    window = SimulatorWindow(
        controller, WindowConfig(fps=240), event_bus=bus, autopilot=True
    )

    def drive(event):
        tick = event.data["frame"]
        if tick == 0:
            press(window, pygame.K_SPACE)
            press(window, pygame.K_d)
        elif tick == 5:
            press(window, pygame.K_s)
        elif tick >= 30:
            window.stop()

    bus.subscribe(GameEventType.TICK, drive)
    asyncio.run(window.run())

    ticks = bus.get_history(GameEventType.TICK, limit=200)
    assert len(ticks) == 31
    assert window._show_debug
    assert list(headless_display.glob("screenshot_*.png"))

    frame = controller.frame
    assert frame.game_started
    assert not frame.game_over
