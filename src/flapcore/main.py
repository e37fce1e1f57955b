"""
Main entry point for flapcore.

Opens the pygame simulator, or runs the autopilot headless with --headless.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from flapcore.autopilot import RuleBasedPilot
from flapcore.config.settings import Settings, get_settings
from flapcore.core.events import EventBus
from flapcore.game.controller import GameController

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


@dataclass
class HeadlessResult:
    """Outcome of a headless autopilot run."""
    steps: int
    score: int
    game_over: bool


def run_headless(
    controller: GameController,
    steps: int,
    pilot: RuleBasedPilot | None = None,
) -> HeadlessResult:
    """Play one game with the autopilot for at most ``steps`` ticks."""
    pilot = pilot or RuleBasedPilot()
    frame = controller.start()

    taken = 0
    while taken < steps and not frame.game_over:
        if pilot.decide(frame):
            controller.jump()
        frame = controller.next_frame()
        taken += 1

    logger.info(f"Headless run finished after {taken} steps: score={frame.score} over={frame.game_over}")
    return HeadlessResult(steps=taken, score=frame.score, game_over=frame.game_over)


async def run_simulator(settings: Settings, autopilot: bool = False) -> None:
    """Run the pygame simulator."""
    from flapcore.simulator.window import SimulatorWindow, WindowConfig

    event_bus = EventBus()
    controller = GameController.from_settings(settings.game, event_bus=event_bus)
    window = SimulatorWindow(
        controller=controller,
        config=WindowConfig.from_settings(settings.simulator),
        event_bus=event_bus,
        autopilot=autopilot,
    )
    await window.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flapcore", description="Side-scrolling pipe game")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    parser.add_argument("--headless", action="store_true", help="Run the autopilot without a window")
    parser.add_argument("--steps", type=int, default=10_000, help="Tick limit for --headless")
    parser.add_argument("--autopilot", action="store_true", help="Let the autopilot fly in the simulator")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv(Path.cwd() / ".env")
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.debug or settings.debug)

    if args.headless:
        controller = GameController.from_settings(settings.game)
        result = run_headless(controller, args.steps)
        print(f"score={result.score} steps={result.steps} game_over={result.game_over}")
        return 0

    try:
        asyncio.run(run_simulator(settings, autopilot=args.autopilot))
    except KeyboardInterrupt:
        logger.info("Simulator stopped by user")
    except Exception as e:
        logger.exception(f"Simulator error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
