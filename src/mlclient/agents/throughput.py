"""Step and reset counters for benchmarking agent throughput."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

SPINNER = "|\\-/"
RESETS_PER_REPORT = 10


@dataclass(frozen=True, slots=True)
class ThroughputSample:
    """One throughput report covering ``resets`` battles."""

    steps: int
    resets: int
    elapsed_s: float

    @property
    def steps_per_second(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.steps / self.elapsed_s

    @property
    def resets_per_second(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.resets / self.elapsed_s


class ThroughputMeter:
    """Count agent calls and battle resets.

    Every reset writes a spinner glyph. When benchmarking, every
    :data:`RESETS_PER_REPORT` resets a ``steps/s`` and ``resets/s`` line is
    written and both counters start over.

    Parameters
    ----------
    benchmark : bool
        Whether throughput reports are emitted.
    clock : Callable[[], float], optional
        Monotonic clock in seconds.
    stream : TextIO | None, optional
        Console stream; ``None`` writes to the current ``sys.stdout``.
    """

    def __init__(
        self,
        *,
        benchmark: bool,
        clock: Callable[[], float] = time.perf_counter,
        stream: TextIO | None = None,
    ) -> None:
        self.benchmark = benchmark
        self.steps = 0
        self.resets = 0
        self._clock = clock
        self._stream = stream
        self._t0 = 0.0

    def step(self) -> None:
        if self.steps == 0 and self.benchmark:
            self._t0 = self._clock()
        self.steps += 1

    def reset(self) -> ThroughputSample | None:
        """Record one battle reset.

        Returns
        -------
        ThroughputSample | None
            The report emitted by this reset, if any.
        """

        out = self._stream or sys.stdout
        self.resets += 1
        out.write("\r" + SPINNER[self.resets % len(SPINNER)])

        sample = None
        if self.benchmark and self.resets == RESETS_PER_REPORT:
            now = self._clock()
            sample = ThroughputSample(steps=self.steps, resets=self.resets, elapsed_s=now - self._t0)
            out.write(
                "  steps/s: %-6.0f resets/s: %-6.2f\n"
                % (sample.steps_per_second, sample.resets_per_second)
            )
            self.steps = 0
            self.resets = 0
            self._t0 = now

        out.flush()
        return sample
