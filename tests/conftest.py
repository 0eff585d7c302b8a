"""Shared pytest fixtures for breathwork tests."""

from __future__ import annotations

import logging

import pytest

from breathwork.core.sequencer import PhaseSequencer, SequencerConfig

# ============================================================================
# Sequencer Fixtures
# ============================================================================


@pytest.fixture
def single_cycle_config() -> SequencerConfig:
    """4-7-8-4 pattern, one cycle (23 ticks)."""
    return SequencerConfig(
        inhale_seconds=4, hold_seconds=7, exhale_seconds=8, rest_seconds=4, total_cycles=1
    )


@pytest.fixture
def two_cycle_config() -> SequencerConfig:
    """4-7-8-4 pattern, two cycles (46 ticks)."""
    return SequencerConfig(
        inhale_seconds=4, hold_seconds=7, exhale_seconds=8, rest_seconds=4, total_cycles=2
    )


@pytest.fixture
def short_config() -> SequencerConfig:
    """1-2-3-1 pattern, two cycles (14 ticks) for quick runs."""
    return SequencerConfig(
        inhale_seconds=1, hold_seconds=2, exhale_seconds=3, rest_seconds=1, total_cycles=2
    )


@pytest.fixture
def sequencer(single_cycle_config: SequencerConfig) -> PhaseSequencer:
    """Fresh single-cycle sequencer in the ready pose."""
    return PhaseSequencer(single_cycle_config)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove breathwork environment overrides."""
    monkeypatch.delenv("BREATHWORK_LOG_LEVEL", raising=False)
    return monkeypatch


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
