"""Client profiles."""

from fittrain.profiles.models import ClientProfile, FitnessLevel, TrainingLocation

__all__ = [
    "ClientProfile",
    "FitnessLevel",
    "TrainingLocation",
]
