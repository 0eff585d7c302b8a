"""Phase sequencer data models.

Phases, per-run configuration and the immutable state snapshot handed to
renderers after every tick or command.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Phase(str, Enum):
    """Stage of a single breathing cycle.

    Cyclic order is fixed: INHALE -> HOLD -> EXHALE -> REST -> INHALE.

    Attributes:
        INHALE: Breathe in.
        HOLD: Hold the breath.
        EXHALE: Breathe out.
        REST: Pause before the next breath.
    """

    INHALE = "inhale"
    HOLD = "hold"
    EXHALE = "exhale"
    REST = "rest"


class SequencerConfig(BaseModel):
    """Phase durations and cycle count for one run.

    Durations are whole-second tick counts. Defaults reproduce the
    4-7-8 breathing technique (with a 4 second rest) over 3 cycles.

    Example:
        >>> config = SequencerConfig(inhale_seconds=4, hold_seconds=7, exhale_seconds=8)
        >>> config.duration_of(Phase.HOLD)
        7
        >>> config.cycle_seconds
        23
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    inhale_seconds: int = Field(default=4, ge=1, description="Inhale duration in ticks")
    hold_seconds: int = Field(default=7, ge=1, description="Hold duration in ticks")
    exhale_seconds: int = Field(default=8, ge=1, description="Exhale duration in ticks")
    rest_seconds: int = Field(default=4, ge=1, description="Rest duration in ticks")
    total_cycles: int = Field(default=3, ge=1, description="Cycles before the run ends")

    def duration_of(self, phase: Phase) -> int:
        """Return the configured duration of a phase in ticks."""
        if phase is Phase.INHALE:
            return self.inhale_seconds
        if phase is Phase.HOLD:
            return self.hold_seconds
        if phase is Phase.EXHALE:
            return self.exhale_seconds
        return self.rest_seconds

    @property
    def cycle_seconds(self) -> int:
        """Ticks in one full Inhale -> Rest traversal."""
        return self.inhale_seconds + self.hold_seconds + self.exhale_seconds + self.rest_seconds


class SequencerState(BaseModel):
    """Immutable snapshot of a sequencer run.

    Attributes:
        phase: Current phase.
        seconds_remaining: Ticks left in the current phase.
        completed_cycles: Full cycles finished so far.
        running: Whether ticks currently advance the run.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    phase: Phase = Phase.INHALE
    seconds_remaining: int = Field(ge=0)
    completed_cycles: int = Field(default=0, ge=0)
    running: bool = False
