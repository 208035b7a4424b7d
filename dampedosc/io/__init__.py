"""Input/output della configurazione."""

from dampedosc.io.serializers import load_config, save_config

__all__ = ["save_config", "load_config"]
