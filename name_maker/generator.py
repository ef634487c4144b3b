"""Random name, batch and family generation over a name corpus.

Every draw is an independent uniform pick over one pool of the corpus.
Repeats within and across calls are expected.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .core.errors import SamplingError
from .core.models import Family, Gender, RandomName
from .core.picker import IndexPicker, RandomPicker
from .corpus import NameCorpus, get_bundled_corpus

logger = logging.getLogger(__name__)


def _check_count(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


class RandomNameGenerator:
    """Generates names for a person, a group of people, or a family.

    Examples:
        gen = RandomNameGenerator.init()

        gen.generate()                      # "Nora Castillo"
        gen.generate_specific(Gender.MALE)  # masculine first name
        gen.generate_many(5)                # five independent names
        gen.generate_many_specific(0, 5)    # five feminine first names
        gen.generate_family(3)              # father, mother, three children
        gen.generate_family_specific(5, 1)  # five boys, then one girl
    """

    def __init__(
        self,
        corpus: NameCorpus | None = None,
        picker: IndexPicker | None = None,
        *,
        seed: int | None = None,
    ):
        if picker is not None and seed is not None:
            raise ValueError("Pass either picker or seed, not both")
        self.corpus = corpus if corpus is not None else get_bundled_corpus()
        self.picker = picker if picker is not None else RandomPicker(seed)

    @classmethod
    def init(cls, seed: int | None = None) -> "RandomNameGenerator":
        """Bind a generator to the bundled corpus.

        Raises:
            InitializationError: If the bundled corpus cannot be loaded.
        """
        return cls(get_bundled_corpus(), seed=seed)

    @staticmethod
    def generate_default_name() -> RandomName:
        """Placeholder name, ``John Doe``."""
        return RandomName(first_name="John", last_name="Doe")

    # ── Single names ──

    def generate(self) -> str:
        """Return a random name with a random gender."""
        return self.sample_name(self._random_gender()).full_name

    def generate_specific(self, gender: Gender) -> str:
        """Return a random name whose first name matches ``gender``."""
        return self.sample_name(gender).full_name

    def sample_name(self, gender: Gender) -> RandomName:
        """Structured form of ``generate_specific``."""
        gender = _require_gender(gender)
        first_name = self._draw_first_name(gender)
        return RandomName(first_name=first_name, last_name=self._draw_surname())

    # ── Batches ──

    def generate_many(self, count: int) -> list[str]:
        """Return ``count`` independent names in draw order."""
        _check_count("count", count)
        logger.debug("Generating %d names", count)
        return [self.generate() for _ in range(count)]

    def generate_many_specific(self, male_count: int, female_count: int) -> list[str]:
        """Return ``male_count`` male names followed by ``female_count`` female names."""
        _check_count("male_count", male_count)
        _check_count("female_count", female_count)
        logger.debug("Generating %d male and %d female names", male_count, female_count)
        names = [self.generate_specific(Gender.MALE) for _ in range(male_count)]
        names.extend(self.generate_specific(Gender.FEMALE) for _ in range(female_count))
        return names

    # ── Families ──

    def generate_family(self, child_count: int) -> list[str]:
        """Return father, mother and ``child_count`` random-gender children.

        All members share one surname. The result always holds at least the
        two parents.
        """
        _check_count("child_count", child_count)
        return self.sample_family(random_children=child_count).names()

    def generate_family_specific(
        self, male_children: int, female_children: int
    ) -> list[str]:
        """Like ``generate_family`` with fixed child genders, boys before girls."""
        _check_count("male_children", male_children)
        _check_count("female_children", female_children)
        return self.sample_family(male_children, female_children).names()

    def sample_family(
        self,
        male_children: int = 0,
        female_children: int = 0,
        random_children: int = 0,
    ) -> Family:
        """Draw a structured family.

        Children are ordered male, then female, then random-gender.
        """
        for name, value in (
            ("male_children", male_children),
            ("female_children", female_children),
            ("random_children", random_children),
        ):
            _check_count(name, value)
        logger.debug(
            "Generating family with %d male, %d female, %d random children",
            male_children,
            female_children,
            random_children,
        )

        surname = self._draw_surname()
        father = self._member(Gender.MALE, surname)
        mother = self._member(Gender.FEMALE, surname)

        genders = [Gender.MALE] * male_children + [Gender.FEMALE] * female_children
        children = [self._member(gender, surname) for gender in genders]
        children.extend(
            self._member(self._random_gender(), surname)
            for _ in range(random_children)
        )

        return Family(surname=surname, father=father, mother=mother, children=children)

    # ── Draws ──

    def _random_gender(self) -> Gender:
        return Gender.MALE if self.picker.coin() else Gender.FEMALE

    def _member(self, gender: Gender, surname: str) -> RandomName:
        return RandomName(first_name=self._draw_first_name(gender), last_name=surname)

    def _draw_first_name(self, gender: Gender) -> str:
        return self._draw(self.corpus.first_names(gender), f"{gender.value} first names")

    def _draw_surname(self) -> str:
        return self._draw(self.corpus.surnames, "surnames")

    def _draw(self, pool: Sequence[str], label: str) -> str:
        if not pool:
            raise SamplingError(f"Cannot draw from empty pool of {label}")
        return pool[self.picker.pick(len(pool))]


def _require_gender(gender: Gender) -> Gender:
    if not isinstance(gender, Gender):
        raise ValueError(
            f"gender must be Gender.MALE or Gender.FEMALE, got {gender!r}"
        )
    return gender
