"""Timed phase sequencer - the breathing cycle state machine.

Pure transitions live in ``transitions``; ``PhaseSequencer`` wraps them with
start/pause/reset commands for a single driver.
"""

from breathwork.core.sequencer.engine import PhaseSequencer, coerce_config
from breathwork.core.sequencer.errors import InvalidConfigError
from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState
from breathwork.core.sequencer.timeline import PhaseBoundary, phase_boundaries, total_ticks
from breathwork.core.sequencer.transitions import (
    advance,
    is_terminal,
    next_phase,
    ready_state,
)

__all__ = [
    # Models
    "Phase",
    "SequencerConfig",
    "SequencerState",
    # Engine
    "PhaseSequencer",
    "coerce_config",
    "InvalidConfigError",
    # Transitions
    "advance",
    "is_terminal",
    "next_phase",
    "ready_state",
    # Timeline
    "PhaseBoundary",
    "phase_boundaries",
    "total_ticks",
]
