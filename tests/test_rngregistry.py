"""Tests for the per-thread generator registry."""

from __future__ import annotations

import threading

import pytest

import rngregistry
from models import TwoValues
from rngregistry import RNGConfig, instance, reset
from simplerng import DEFAULT_M_W, DEFAULT_M_Z


@pytest.fixture(autouse=True)
def clean_registry():
    reset()
    yield
    reset()


class TestRNGConfig:
    """Tests for RNGConfig."""

    def test_defaults(self):
        config = RNGConfig()
        assert (config.M_W, config.M_Z) == (DEFAULT_M_W, DEFAULT_M_Z)
        assert config.SEED is None
        assert config.LOGGING_ON is False

    def test_build_with_state_words(self):
        rng = RNGConfig(M_W=11, M_Z=22).build()
        assert rng.get_state() == (11, 22)

    def test_build_applies_seed(self):
        rng = RNGConfig(SEED=TwoValues(3, 4)).build()
        assert rng.get_state() == (3, 4)


class TestInstance:
    """Tests for instance and reset."""

    def test_same_object_within_thread(self):
        assert instance() is instance()

    def test_config_used_on_first_call_only(self):
        first = instance(RNGConfig(M_W=5, M_Z=6))
        assert first.get_state() == (5, 6)
        assert instance(RNGConfig(M_W=7, M_Z=8)) is first

    def test_reset_creates_fresh_generator(self):
        first = instance()
        first.uniform()
        reset()
        second = instance()
        assert second is not first
        assert second.get_state() == (DEFAULT_M_W, DEFAULT_M_Z)

    def test_reset_without_generator(self):
        reset()
        reset()

    def test_logs_creation(self, capsys):
        instance(RNGConfig(LOGGING_ON=True))
        assert "created for thread" in capsys.readouterr().out

    def test_independent_in_every_thread(self):
        sample_count = 10
        thread_count = 10
        samples = {}
        generators = {}

        def work(index):
            generators[index] = instance()
            samples[index] = [instance().uniform() for _ in range(sample_count)]

        threads = [threading.Thread(target=work, args=(i,)) for i in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(samples) == thread_count
        assert len({tuple(s) for s in samples.values()}) == 1
        assert len({id(g) for g in generators.values()}) == thread_count
        assert not hasattr(rngregistry._local, "rng")
