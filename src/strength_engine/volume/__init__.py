"""Recovery-driven volume scaling."""

from strength_engine.volume.scaler import VolumeScaler

__all__ = ["VolumeScaler"]
