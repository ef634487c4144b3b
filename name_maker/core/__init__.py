"""Core types for name-maker."""

from .errors import ArgumentError, InitializationError, NameMakerError, SamplingError
from .models import Family, Gender, RandomName
from .picker import IndexPicker, RandomPicker

__all__ = [
    "ArgumentError",
    "InitializationError",
    "NameMakerError",
    "SamplingError",
    "Family",
    "Gender",
    "RandomName",
    "IndexPicker",
    "RandomPicker",
]
