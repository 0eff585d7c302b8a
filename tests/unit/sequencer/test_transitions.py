"""Tests for the pure phase transition functions."""

from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState
from breathwork.core.sequencer.transitions import advance, is_terminal, next_phase, ready_state


def _running(state: SequencerState) -> SequencerState:
    return state.model_copy(update={"running": True})


def test_next_phase_follows_cycle_order():
    """Each phase hands over to the next, Rest wraps to Inhale."""
    assert next_phase(Phase.INHALE) == Phase.HOLD
    assert next_phase(Phase.HOLD) == Phase.EXHALE
    assert next_phase(Phase.EXHALE) == Phase.REST
    assert next_phase(Phase.REST) == Phase.INHALE


def test_ready_state_is_stopped_at_full_inhale(single_cycle_config):
    """Ready pose uses the configured inhale duration."""
    state = ready_state(single_cycle_config)

    assert state == SequencerState(
        phase=Phase.INHALE, seconds_remaining=4, completed_cycles=0, running=False
    )


def test_advance_ignores_stopped_state(single_cycle_config):
    """A stopped state is returned unchanged."""
    state = ready_state(single_cycle_config)

    assert advance(state, single_cycle_config) is state


def test_advance_counts_down_within_phase(single_cycle_config):
    """Ticks inside a phase only decrement the remaining seconds."""
    state = advance(_running(ready_state(single_cycle_config)), single_cycle_config)

    assert state.phase == Phase.INHALE
    assert state.seconds_remaining == 3
    assert state.running is True


def test_advance_rolls_over_when_phase_empties(single_cycle_config):
    """The tick that empties a phase starts the successor at full duration."""
    state = SequencerState(phase=Phase.HOLD, seconds_remaining=1, running=True)

    state = advance(state, single_cycle_config)

    assert state.phase == Phase.EXHALE
    assert state.seconds_remaining == 8
    assert state.completed_cycles == 0


def test_advance_rolls_over_immediately_from_zero(single_cycle_config):
    """A state already at zero is on its boundary."""
    state = SequencerState(phase=Phase.EXHALE, seconds_remaining=0, running=True)

    state = advance(state, single_cycle_config)

    assert state.phase == Phase.REST
    assert state.seconds_remaining == 4


def test_advance_counts_cycle_on_rest_completion(two_cycle_config):
    """Finishing Rest completes a cycle and keeps running when cycles remain."""
    state = SequencerState(phase=Phase.REST, seconds_remaining=1, running=True)

    state = advance(state, two_cycle_config)

    assert state.phase == Phase.INHALE
    assert state.seconds_remaining == 4
    assert state.completed_cycles == 1
    assert state.running is True


def test_advance_stops_after_last_cycle(single_cycle_config):
    """Finishing the last cycle stops at the fresh Inhale pose."""
    state = SequencerState(phase=Phase.REST, seconds_remaining=1, running=True)

    state = advance(state, single_cycle_config)

    assert state == SequencerState(
        phase=Phase.INHALE, seconds_remaining=4, completed_cycles=1, running=False
    )
    assert is_terminal(state, single_cycle_config)


def test_advance_uses_config_for_successor_duration():
    """Successor durations come from the config passed in."""
    config = SequencerConfig(hold_seconds=2)
    state = SequencerState(phase=Phase.INHALE, seconds_remaining=1, running=True)

    assert advance(state, config).seconds_remaining == 2


def test_is_terminal_requires_stopped_and_all_cycles(single_cycle_config):
    """Only a stopped run with every cycle done is terminal."""
    assert not is_terminal(ready_state(single_cycle_config), single_cycle_config)
    assert not is_terminal(
        SequencerState(seconds_remaining=4, completed_cycles=1, running=True),
        single_cycle_config,
    )
    assert is_terminal(
        SequencerState(seconds_remaining=4, completed_cycles=1, running=False),
        single_cycle_config,
    )
