"""Presentation policy for breathing runs.

Maps sequencer snapshots to the text and visuals shown to the user. The
sequencer itself knows nothing about any of this.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState
from breathwork.core.sequencer.transitions import is_terminal

# Cycle counts offered by the cycle selector
CYCLE_CHOICES: tuple[int, ...] = tuple(range(3, 11))


class PhaseGuidance(BaseModel):
    """What to show during a phase.

    Attributes:
        instruction: Text prompt for the user
        scale: Relative size of the breathing circle (1.0 = fully expanded)
    """

    model_config = ConfigDict(frozen=True)

    instruction: str
    scale: float = Field(gt=0.0, le=1.0)


_GUIDANCE: dict[Phase, PhaseGuidance] = {
    Phase.INHALE: PhaseGuidance(instruction="Breathe in slowly through your nose", scale=1.0),
    Phase.HOLD: PhaseGuidance(instruction="Hold your breath", scale=1.0),
    Phase.EXHALE: PhaseGuidance(instruction="Exhale slowly through your mouth", scale=0.75),
    Phase.REST: PhaseGuidance(instruction="Rest and prepare for next breath", scale=0.75),
}


def guidance_for(phase: Phase) -> PhaseGuidance:
    """Return the instruction and circle scale for a phase."""
    return _GUIDANCE[phase]


def cycle_label(state: SequencerState, config: SequencerConfig) -> str:
    """Describe run progress, e.g. ``"Cycle 2 of 3"``.

    The cycle in progress is never reported past the configured total, and a
    finished run reads ``"Complete (3 of 3)"``.
    """
    if is_terminal(state, config):
        return f"Complete ({config.total_cycles} of {config.total_cycles})"
    current = min(state.completed_cycles + 1, config.total_cycles)
    return f"Cycle {current} of {config.total_cycles}"
