"""Run planning without a clock.

Drives the pure transition function from a started ready pose to the end of
the run, so previews show exactly the ticks the live sequencer will switch on.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from breathwork.core.sequencer.models import Phase, SequencerConfig
from breathwork.core.sequencer.transitions import advance, ready_state


class PhaseBoundary(BaseModel):
    """A phase rollover at a given tick.

    Attributes:
        tick: 1-indexed tick on which the rollover happens
        from_phase: Phase that just ended
        to_phase: Phase that begins
        completed_cycles: Completed cycles after the rollover
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tick: int = Field(ge=1)
    from_phase: Phase
    to_phase: Phase
    completed_cycles: int = Field(ge=0)


def total_ticks(config: SequencerConfig) -> int:
    """Ticks needed to run every configured cycle."""
    return config.cycle_seconds * config.total_cycles


def phase_boundaries(config: SequencerConfig) -> list[PhaseBoundary]:
    """List every phase rollover of a full run.

    Args:
        config: Sequencer configuration

    Returns:
        Boundaries in tick order; the last one ends the run

    Example:
        >>> boundaries = phase_boundaries(SequencerConfig(total_cycles=1))
        >>> [b.tick for b in boundaries]
        [4, 11, 19, 23]
    """
    state = ready_state(config).model_copy(update={"running": True})
    boundaries: list[PhaseBoundary] = []
    tick = 0

    while state.running:
        tick += 1
        next_state = advance(state, config)
        if next_state.phase is not state.phase:
            boundaries.append(
                PhaseBoundary(
                    tick=tick,
                    from_phase=state.phase,
                    to_phase=next_state.phase,
                    completed_cycles=next_state.completed_cycles,
                )
            )
        state = next_state

    return boundaries
