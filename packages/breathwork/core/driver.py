"""Async tick source for a phase sequencer.

The driver owns the clock: it sleeps one interval, ticks the sequencer and
hands the snapshot to a render callback, until the run ends or is cancelled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
import logging

from breathwork.core.sequencer.engine import PhaseSequencer
from breathwork.core.sequencer.models import SequencerState
from breathwork.core.utils.logging import get_logger

TickCallback = Callable[[SequencerState], None]


class SessionDriver:
    """Drives a PhaseSequencer from a single asyncio task.

    Example:
        >>> driver = SessionDriver(sequencer, on_tick=render, session_id="a1b2c3d4")
        >>> final_state = await driver.run()
    """

    def __init__(
        self,
        sequencer: PhaseSequencer,
        *,
        tick_interval_seconds: float = 1.0,
        on_tick: TickCallback | None = None,
        cancel_token: asyncio.Event | None = None,
        session_id: str | None = None,
    ):
        """Initialize driver.

        Args:
            sequencer: Sequencer to drive
            tick_interval_seconds: Wall-clock seconds between ticks
            on_tick: Called with the snapshot after every tick
            cancel_token: Optional cancellation token (asyncio.Event)
            session_id: Tagged onto every driver log record when given

        Raises:
            ValueError: If tick_interval_seconds is negative
        """
        if tick_interval_seconds < 0:
            raise ValueError(f"tick_interval_seconds must be >= 0, got {tick_interval_seconds}")

        self.sequencer = sequencer
        self.tick_interval_seconds = tick_interval_seconds
        self.on_tick = on_tick
        self.cancel_token = cancel_token
        self.session_id = session_id

        context = {"session_id": session_id} if session_id else {}
        self.logger: logging.Logger | logging.LoggerAdapter = get_logger(__name__, **context)

    def is_cancelled(self) -> bool:
        """Check if the run has been cancelled.

        Returns:
            True if cancel_token is set and signaled
        """
        return self.cancel_token is not None and self.cancel_token.is_set()

    async def run(self, max_ticks: int | None = None) -> SequencerState:
        """Start the sequencer and tick it until it stops.

        A run starts by clearing the cancel token. Cancellation pauses the
        sequencer, so a later ``run`` resumes from the same position.

        Args:
            max_ticks: Stop after this many ticks (None = run to completion)

        Returns:
            Final snapshot
        """
        if self.cancel_token is not None:
            self.cancel_token.clear()

        self.sequencer.start()
        ticks = 0

        while self.sequencer.state.running:
            if max_ticks is not None and ticks >= max_ticks:
                break

            await asyncio.sleep(self.tick_interval_seconds)

            if self.is_cancelled():
                self.logger.info("Breathing run cancelled")
                self.sequencer.pause()
                break

            state = self.sequencer.tick()
            ticks += 1
            if self.on_tick is not None:
                self.on_tick(state)

        self.logger.debug(f"Driver stopped after {ticks} ticks")
        return self.sequencer.state
