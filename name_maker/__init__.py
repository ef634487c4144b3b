"""Generates names for a random person, a group of people, or a family.

The main component is ``RandomNameGenerator``:

    from name_maker import RandomNameGenerator, Gender

    gen = RandomNameGenerator.init()
    gen.generate()
    gen.generate_family_specific(2, 1)
"""

from .core import (
    Family,
    Gender,
    IndexPicker,
    InitializationError,
    NameMakerError,
    RandomName,
    RandomPicker,
    SamplingError,
)
from .corpus import NameCorpus, load_corpus
from .generator import RandomNameGenerator

__version__ = "0.1.0"
__all__ = [
    "RandomNameGenerator",
    "RandomName",
    "Family",
    "Gender",
    "NameCorpus",
    "load_corpus",
    "IndexPicker",
    "RandomPicker",
    "NameMakerError",
    "InitializationError",
    "SamplingError",
]
