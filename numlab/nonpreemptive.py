"""Non-preemptive CPU scheduling: each process runs to completion once started."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from numlab.scheduling import Process, ProcessStats, Schedule

_Key = Callable[[Process], Any]


def _validated(processes: Iterable[Process]) -> list[Process]:
    procs = list(processes)
    if not procs:
        raise ValueError("at least one process is needed")
    pids = [p.pid for p in procs]
    if len(set(pids)) != len(pids):
        raise ValueError("process ids must be distinct")
    return procs


def _run(processes: Iterable[Process], key: _Key) -> Schedule:
    pending = sorted(_validated(processes), key=lambda p: (p.arrival, p.pid))
    time = 0
    stats: list[ProcessStats] = []
    order: list[int] = []
    while pending:
        ready = [p for p in pending if p.arrival <= time]
        if not ready:
            time = pending[0].arrival
            continue
        chosen = min(ready, key=key)
        pending.remove(chosen)
        stats.append(ProcessStats(chosen, start=time, completion=time + chosen.burst))
        order.append(chosen.pid)
        time += chosen.burst
    return Schedule(tuple(stats), tuple(order))


def fcfs(processes: Iterable[Process]) -> Schedule:
    """First come, first served; ties in arrival go to the smaller pid."""
    return _run(processes, lambda p: (p.arrival, p.pid))


def sjf(processes: Iterable[Process]) -> Schedule:
    """Shortest job first among the arrived processes."""
    return _run(processes, lambda p: (p.burst, p.arrival, p.pid))


def ljf(processes: Iterable[Process]) -> Schedule:
    """Longest job first among the arrived processes."""
    return _run(processes, lambda p: (-p.burst, p.arrival, p.pid))


def priority_nonpreemptive(processes: Iterable[Process]) -> Schedule:
    """Highest priority value first among the arrived processes."""
    return _run(processes, lambda p: (-p.priority, p.arrival, p.pid))