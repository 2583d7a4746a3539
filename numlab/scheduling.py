"""Common records for CPU scheduling simulations."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Process:
    """A job to be scheduled: when it arrives, how long it runs, and its priority.

    A larger ``priority`` value means a more urgent process.
    """

    pid: int
    arrival: int
    burst: int
    priority: int = 0

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"process {self.pid}: arrival time must not be negative")
        if self.burst <= 0:
            raise ValueError(f"process {self.pid}: burst time must be positive")


@dataclass(frozen=True)
class ProcessStats:
    """Timing of one process in a finished schedule."""

    process: Process
    start: int
    completion: int
    turnaround: int = field(init=False)
    waiting: int = field(init=False)
    response: int = field(init=False)

    def __post_init__(self) -> None:
        if self.start < self.process.arrival:
            raise ValueError(f"process {self.process.pid} starts before it arrives")
        if self.completion < self.start + 1:
            raise ValueError(f"process {self.process.pid} completes before it starts")
        turnaround = self.completion - self.process.arrival
        object.__setattr__(self, "turnaround", turnaround)
        object.__setattr__(self, "waiting", turnaround - self.process.burst)
        object.__setattr__(self, "response", self.start - self.process.arrival)


@dataclass(frozen=True)
class Schedule:
    """The outcome of a scheduling run.

    ``stats`` holds one entry per process, ordered by pid; ``order`` lists the
    pids in the order the CPU was given to them.
    """

    stats: tuple[ProcessStats, ...]
    order: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.stats:
            raise ValueError("a schedule needs at least one process")
        ordered = tuple(sorted(self.stats, key=lambda s: s.process.pid))
        object.__setattr__(self, "stats", ordered)
        object.__setattr__(self, "order", tuple(self.order))

    def _end(self) -> int:
        return max(s.completion for s in self.stats)

    def _busy(self) -> int:
        return sum(s.process.burst for s in self.stats)

    def average_turnaround(self) -> float:
        """Mean turnaround time over all processes."""
        return sum(s.turnaround for s in self.stats) / len(self.stats)

    def average_waiting(self) -> float:
        """Mean waiting time over all processes."""
        return sum(s.waiting for s in self.stats) / len(self.stats)

    def schedule_length(self) -> int:
        """Time from the first arrival to the last completion."""
        return self._end() - min(s.process.arrival for s in self.stats)

    def throughput(self) -> float:
        """Processes completed per unit of schedule length."""
        return len(self.stats) / self.schedule_length()

    def cpu_utilization(self) -> float:
        """Percentage of time from zero to the last completion that the CPU was busy."""
        return self._busy() / self._end() * 100

    def table(self) -> str:
        """Render the per-process timings as a tab-separated table."""
        lines = ["PID\tAT\tBT\tST\tCT\tWT\tTAT\tRT"]
        lines.extend(
            "\t".join(
                str(value)
                for value in (
                    s.process.pid,
                    s.process.arrival,
                    s.process.burst,
                    s.start,
                    s.completion,
                    s.waiting,
                    s.turnaround,
                    s.response,
                )
            )
            for s in self.stats
        )
        return "\n".join(lines)