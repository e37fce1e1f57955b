"""Configuration for flapcore."""

from flapcore.config.settings import GameSettings, SimulatorSettings, Settings, get_settings

__all__ = ["GameSettings", "SimulatorSettings", "Settings", "get_settings"]
