"""Loading of the bundled first-name and surname lists.

The lists ship as UTF-8 text files in ``data/``, one name per line. They are
read once per process and handed out as an immutable ``NameCorpus``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from ..core.errors import InitializationError
from ..core.models import Gender

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

MALE_FIRST_NAMES_FILE = "male_first_names.txt"
FEMALE_FIRST_NAMES_FILE = "female_first_names.txt"
LAST_NAMES_FILE = "last_names.txt"


@dataclass(frozen=True)
class NameCorpus:
    """Read-only male first names, female first names and surnames.

    Constructing the dataclass directly performs no validation; use
    ``from_lists`` or ``load_corpus`` to enforce non-empty pools.
    """

    male_first_names: tuple[str, ...]
    female_first_names: tuple[str, ...]
    surnames: tuple[str, ...]

    @classmethod
    def from_lists(
        cls,
        male_first_names: Iterable[str],
        female_first_names: Iterable[str],
        surnames: Iterable[str],
    ) -> "NameCorpus":
        """Build a validated corpus from in-memory sequences.

        Raises:
            InitializationError: If any list is empty after stripping blanks.
        """
        corpus = cls(
            male_first_names=_clean(male_first_names),
            female_first_names=_clean(female_first_names),
            surnames=_clean(surnames),
        )
        corpus.validate()
        return corpus

    def first_names(self, gender: Gender) -> tuple[str, ...]:
        """Return the first-name pool for ``gender``."""
        if gender is Gender.MALE:
            return self.male_first_names
        if gender is Gender.FEMALE:
            return self.female_first_names
        raise ValueError(f"Unknown gender: {gender!r}")

    def validate(self) -> None:
        for label, pool in (
            ("male first names", self.male_first_names),
            ("female first names", self.female_first_names),
            ("surnames", self.surnames),
        ):
            if not pool:
                raise InitializationError(f"Name corpus has no {label}")

    def sizes(self) -> dict[str, int]:
        return {
            "male_first_names": len(self.male_first_names),
            "female_first_names": len(self.female_first_names),
            "surnames": len(self.surnames),
        }


def _clean(names: Iterable[str]) -> tuple[str, ...]:
    return tuple(stripped for name in names if (stripped := name.strip()))


def _read_names(path: Path) -> tuple[str, ...]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InitializationError(f"Could not read name list {path}: {exc}") from exc
    return _clean(text.splitlines())


def load_corpus(data_dir: Path | str | None = None) -> NameCorpus:
    """Read the three name lists from ``data_dir`` (bundled data by default).

    Raises:
        InitializationError: If a file is missing or unreadable, or a list is
            empty.
    """
    base = Path(data_dir) if data_dir is not None else _DATA_DIR
    corpus = NameCorpus(
        male_first_names=_read_names(base / MALE_FIRST_NAMES_FILE),
        female_first_names=_read_names(base / FEMALE_FIRST_NAMES_FILE),
        surnames=_read_names(base / LAST_NAMES_FILE),
    )
    corpus.validate()
    logger.debug("Loaded name corpus from %s: %s", base, corpus.sizes())
    return corpus


@lru_cache(maxsize=1)
def get_bundled_corpus() -> NameCorpus:
    """Return the bundled corpus, loading it on first use."""
    return load_corpus()
