"""Preemptive CPU scheduling: the CPU may be taken from a running process."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterable

from numlab.nonpreemptive import _validated
from numlab.scheduling import Process, ProcessStats, Schedule

_Key = Callable[[Process, int], Any]


def _by_arrival(processes: Iterable[Process]) -> list[Process]:
    return sorted(_validated(processes), key=lambda p: (p.arrival, p.pid))


def _note_dispatch(order: list[int], pid: int) -> None:
    if not order or order[-1] != pid:
        order.append(pid)


def _run_units(processes: Iterable[Process], key: _Key) -> Schedule:
    """Give the CPU, one time unit at a time, to the ready process with the least key."""
    active = _by_arrival(processes)
    remaining = {p.pid: p.burst for p in active}
    starts: dict[int, int] = {}
    stats: list[ProcessStats] = []
    order: list[int] = []
    time = 0
    while active:
        ready = [p for p in active if p.arrival <= time]
        if not ready:
            time = min(p.arrival for p in active)
            continue
        chosen = min(ready, key=lambda p: key(p, remaining[p.pid]))
        starts.setdefault(chosen.pid, time)
        _note_dispatch(order, chosen.pid)
        remaining[chosen.pid] -= 1
        time += 1
        if remaining[chosen.pid] == 0:
            active.remove(chosen)
            stats.append(ProcessStats(chosen, start=starts[chosen.pid], completion=time))
    return Schedule(tuple(stats), tuple(order))


def srtf(processes: Iterable[Process]) -> Schedule:
    """Shortest remaining time first; ties go to the earlier arrival, then the smaller pid."""
    return _run_units(processes, lambda p, left: (left, p.arrival, p.pid))


def lrtf(processes: Iterable[Process]) -> Schedule:
    """Longest remaining time first; ties go to the earlier arrival, then the smaller pid."""
    return _run_units(processes, lambda p, left: (-left, p.arrival, p.pid))


def priority_preemptive(processes: Iterable[Process]) -> Schedule:
    """Highest priority value first, re-evaluated every time unit."""
    return _run_units(processes, lambda p, left: (-p.priority, p.arrival, p.pid))


def round_robin(processes: Iterable[Process], quantum: int) -> Schedule:
    """Round robin with time slice ``quantum``.

    Processes that arrive while a slice runs join the queue ahead of the
    process whose slice has just expired.
    """
    if quantum <= 0:
        raise ValueError("the time quantum must be positive")
    pending = deque(_by_arrival(processes))
    remaining = {p.pid: p.burst for p in pending}
    ready: deque[Process] = deque()
    preempted: Process | None = None
    starts: dict[int, int] = {}
    stats: list[ProcessStats] = []
    order: list[int] = []
    time = 0
    while pending or ready or preempted is not None:
        while pending and pending[0].arrival <= time:
            ready.append(pending.popleft())
        if preempted is not None:
            ready.append(preempted)
            preempted = None
        if not ready:
            time = pending[0].arrival
            continue
        current = ready.popleft()
        starts.setdefault(current.pid, time)
        _note_dispatch(order, current.pid)
        run = min(quantum, remaining[current.pid])
        time += run
        remaining[current.pid] -= run
        if remaining[current.pid] == 0:
            stats.append(ProcessStats(current, start=starts[current.pid], completion=time))
        else:
            preempted = current
    return Schedule(tuple(stats), tuple(order))