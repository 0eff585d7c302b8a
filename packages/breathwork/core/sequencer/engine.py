"""Phase sequencer - owns a breathing run and reacts to external ticks."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from pydantic import ValidationError

from breathwork.core.sequencer.errors import InvalidConfigError
from breathwork.core.sequencer.models import Phase, SequencerConfig, SequencerState
from breathwork.core.sequencer.transitions import advance, is_terminal, ready_state

logger = logging.getLogger(__name__)


def coerce_config(config: SequencerConfig | Mapping[str, Any]) -> SequencerConfig:
    """Validate a sequencer config given as a model or a mapping of its fields.

    Model instances are re-validated so configs built with
    ``SequencerConfig.model_construct`` cannot bypass the duration checks.

    Args:
        config: SequencerConfig instance or dict of its fields

    Returns:
        Validated SequencerConfig

    Raises:
        InvalidConfigError: If any duration or the cycle count is below 1
    """
    if isinstance(config, SequencerConfig):
        raw: Any = config.model_dump()
    elif isinstance(config, Mapping):
        raw = dict(config)
    else:
        raise InvalidConfigError(
            f"Expected SequencerConfig or mapping; got {type(config).__name__}"
        )

    try:
        return SequencerConfig.model_validate(raw)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise InvalidConfigError(f"Invalid sequencer config: {', '.join(fields)}", fields) from e


class PhaseSequencer:
    """Four-phase breathing timer driven by external ticks.

    The sequencer has no clock of its own. A tick source calls ``tick()``
    once per elapsed second and a renderer reads the returned snapshot.
    Commands and ticks must be issued serially from one thread or task.

    Example:
        >>> sequencer = PhaseSequencer(SequencerConfig(total_cycles=1))
        >>> sequencer.start()
        >>> for _ in range(4):
        ...     state = sequencer.tick()
        >>> state.phase
        <Phase.HOLD: 'hold'>
    """

    def __init__(self, config: SequencerConfig | Mapping[str, Any]):
        """Create a sequencer in the ready pose.

        Args:
            config: Phase durations and cycle count

        Raises:
            InvalidConfigError: If the config is rejected
        """
        self._config = coerce_config(config)
        self._state = ready_state(self._config)

    @property
    def config(self) -> SequencerConfig:
        """Configuration used for duration lookups."""
        return self._config

    @property
    def state(self) -> SequencerState:
        """Current snapshot."""
        return self._state

    @property
    def is_terminal(self) -> bool:
        """True once every configured cycle has completed."""
        return is_terminal(self._state, self._config)

    def start(self) -> None:
        """Run from the current position. Does nothing once the run is finished."""
        if self._state.running:
            return
        if self.is_terminal:
            logger.debug("Start ignored: run finished, reset required")
            return
        self._state = self._state.model_copy(update={"running": True})
        logger.debug(
            f"Started at {self._state.phase.value} "
            f"({self._state.seconds_remaining}s left, cycle {self._state.completed_cycles + 1})"
        )

    def pause(self) -> None:
        """Stop advancing, keeping phase, remaining seconds and cycle count."""
        if not self._state.running:
            return
        self._state = self._state.model_copy(update={"running": False})
        logger.debug(
            f"Paused at {self._state.phase.value} ({self._state.seconds_remaining}s left)"
        )

    def toggle(self) -> None:
        """Pause when running, otherwise start."""
        if self._state.running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        """Return to the ready pose of the current config."""
        self._state = ready_state(self._config)
        logger.debug("Reset to ready pose")

    def tick(self) -> SequencerState:
        """Advance one second of phase time if running.

        Returns:
            Snapshot after the tick (unchanged when not running)
        """
        previous = self._state
        self._state = advance(previous, self._config)

        if self._state.phase is not previous.phase:
            logger.debug(f"Phase {previous.phase.value} -> {self._state.phase.value}")
            if self._state.phase is Phase.INHALE:
                logger.info(
                    f"Cycle {self._state.completed_cycles}/{self._config.total_cycles} complete"
                )
                if not self._state.running:
                    logger.info("Breathing run finished")

        return self._state

    def reconfigure(self, config: SequencerConfig | Mapping[str, Any]) -> None:
        """Install a new config for future duration lookups.

        The current position is left as is; call ``reset()`` to apply the new
        durations from the ready pose. A running sequencer whose completed
        cycles already reach the new total stops where it is.

        Args:
            config: New phase durations and cycle count

        Raises:
            InvalidConfigError: If the config is rejected (nothing changes)
        """
        try:
            new_config = coerce_config(config)
        except InvalidConfigError as e:
            logger.warning(f"Rejected sequencer config: {e}")
            raise

        self._config = new_config
        logger.info(
            "Reconfigured: "
            f"{new_config.inhale_seconds}-{new_config.hold_seconds}-"
            f"{new_config.exhale_seconds}-{new_config.rest_seconds} "
            f"x {new_config.total_cycles}"
        )

        if self._state.running and self._state.completed_cycles >= new_config.total_cycles:
            self._state = self._state.model_copy(update={"running": False})
            logger.info("Breathing run finished")
