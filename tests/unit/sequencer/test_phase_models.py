"""Tests for phase sequencer models."""

from pydantic import ValidationError
import pytest

from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState


class TestPhase:
    """Test Phase enum."""

    def test_phase_values(self):
        """Test phase string values."""
        assert Phase.INHALE == "inhale"
        assert Phase.HOLD == "hold"
        assert Phase.EXHALE == "exhale"
        assert Phase.REST == "rest"

    def test_declaration_order_is_cycle_order(self):
        """Test members are declared in breathing order."""
        assert list(Phase) == [Phase.INHALE, Phase.HOLD, Phase.EXHALE, Phase.REST]


class TestSequencerConfig:
    """Test SequencerConfig model."""

    def test_defaults_are_four_seven_eight(self):
        """Test default pattern is 4-7-8 with a 4 second rest over 3 cycles."""
        config = SequencerConfig()

        assert config.inhale_seconds == 4
        assert config.hold_seconds == 7
        assert config.exhale_seconds == 8
        assert config.rest_seconds == 4
        assert config.total_cycles == 3

    def test_duration_of(self):
        """Test per-phase duration lookup."""
        config = SequencerConfig(inhale_seconds=2, hold_seconds=3, exhale_seconds=5, rest_seconds=1)

        assert config.duration_of(Phase.INHALE) == 2
        assert config.duration_of(Phase.HOLD) == 3
        assert config.duration_of(Phase.EXHALE) == 5
        assert config.duration_of(Phase.REST) == 1

    def test_cycle_seconds(self):
        """Test cycle length sums all phases."""
        assert SequencerConfig().cycle_seconds == 23

    @pytest.mark.parametrize(
        "field",
        ["inhale_seconds", "hold_seconds", "exhale_seconds", "rest_seconds", "total_cycles"],
    )
    def test_rejects_values_below_one(self, field):
        """Test every duration and the cycle count must be at least 1."""
        with pytest.raises(ValidationError):
            SequencerConfig(**{field: 0})

    def test_rejects_unknown_fields(self):
        """Test typos are not silently ignored."""
        with pytest.raises(ValidationError):
            SequencerConfig(inhale=4)

    def test_immutability(self):
        """Test that SequencerConfig is immutable."""
        config = SequencerConfig()

        with pytest.raises((ValidationError, AttributeError)):
            config.hold_seconds = 3


class TestSequencerState:
    """Test SequencerState model."""

    def test_defaults(self):
        """Test state defaults to a stopped Inhale with no cycles."""
        state = SequencerState(seconds_remaining=4)

        assert state.phase == Phase.INHALE
        assert state.completed_cycles == 0
        assert state.running is False

    def test_rejects_negative_remaining(self):
        """Test remaining seconds cannot be negative."""
        with pytest.raises(ValidationError):
            SequencerState(seconds_remaining=-1)

    def test_immutability(self):
        """Test snapshots cannot be modified by renderers."""
        state = SequencerState(seconds_remaining=4)

        with pytest.raises((ValidationError, AttributeError)):
            state.running = True
