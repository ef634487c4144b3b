"""Shared fixtures for name-maker tests."""

from itertools import cycle

import pytest

from name_maker import config as config_module
from name_maker.corpus import NameCorpus
from name_maker.generator import RandomNameGenerator


class SequencePicker:
    """Picker that replays fixed index and coin sequences, cycling forever."""

    def __init__(self, picks=(0,), coins=(True,)):
        self._picks = cycle(picks)
        self._coins = cycle(coins)
        self.pick_calls: list[int] = []

    def pick(self, n: int) -> int:
        self.pick_calls.append(n)
        return next(self._picks) % n

    def coin(self) -> bool:
        return next(self._coins)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the user's config file, env vars and .env."""
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.setattr(config_module, "_dotenv_loaded", True)
    for var in (
        "NAME_MAKER_AMOUNT",
        "NAME_MAKER_CHILDREN",
        "NAME_MAKER_SEED",
        "NAME_MAKER_CLI_MODE",
    ):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def doe_corpus() -> NameCorpus:
    return NameCorpus.from_lists(["John"], ["Jane"], ["Doe"])


@pytest.fixture
def small_corpus() -> NameCorpus:
    return NameCorpus.from_lists(
        ["Adam", "Brian", "Carl"],
        ["Alice", "Beth", "Cora"],
        ["Smith", "Jones", "Brown", "Nguyen"],
    )


@pytest.fixture
def seeded_generator(small_corpus) -> RandomNameGenerator:
    return RandomNameGenerator(small_corpus, seed=1234)
