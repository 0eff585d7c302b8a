"""Pure state transitions for the phase sequencer.

Every function here takes values and returns values; nothing is mutated and
nothing reads a clock. ``PhaseSequencer`` and the timeline planner are thin
shells around ``advance``.
"""

from __future__ import annotations

from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState

_SUCCESSOR: dict[Phase, Phase] = {
    Phase.INHALE: Phase.HOLD,
    Phase.HOLD: Phase.EXHALE,
    Phase.EXHALE: Phase.REST,
    Phase.REST: Phase.INHALE,
}


def next_phase(phase: Phase) -> Phase:
    """Return the phase that follows ``phase`` in the breathing cycle.

    Example:
        >>> next_phase(Phase.REST)
        <Phase.INHALE: 'inhale'>
    """
    return _SUCCESSOR[phase]


def ready_state(config: SequencerConfig) -> SequencerState:
    """Return the ready pose for ``config``: stopped at the start of Inhale."""
    return SequencerState(
        phase=Phase.INHALE,
        seconds_remaining=config.inhale_seconds,
        completed_cycles=0,
        running=False,
    )


def is_terminal(state: SequencerState, config: SequencerConfig) -> bool:
    """Check whether the run has finished all configured cycles."""
    return not state.running and state.completed_cycles >= config.total_cycles


def advance(state: SequencerState, config: SequencerConfig) -> SequencerState:
    """Apply one tick of elapsed time.

    A stopped state is returned unchanged. Otherwise one second of the
    current phase is consumed; when that empties the phase, the state rolls
    over to the successor with its full configured duration. Completing Rest
    counts a cycle, and the last cycle stops the run at the fresh Inhale pose.

    Args:
        state: Current snapshot
        config: Configuration used for duration and cycle lookups

    Returns:
        The snapshot after the tick
    """
    if not state.running:
        return state

    remaining = max(state.seconds_remaining - 1, 0)
    if remaining > 0:
        return state.model_copy(update={"seconds_remaining": remaining})

    successor = next_phase(state.phase)
    completed = state.completed_cycles
    running = True
    if successor is Phase.INHALE:
        completed += 1
        if completed >= config.total_cycles:
            running = False

    return SequencerState(
        phase=successor,
        seconds_remaining=config.duration_of(successor),
        completed_cycles=completed,
        running=running,
    )
