import pytest

from numlab.scheduling import Process, ProcessStats, Schedule


def test_process_rejects_negative_arrival():
    with pytest.raises(ValueError):
        Process(pid=0, arrival=-1, burst=3)


@pytest.mark.parametrize("burst", [0, -2])
def test_process_rejects_non_positive_burst(burst):
    with pytest.raises(ValueError):
        Process(pid=0, arrival=0, burst=burst)


def test_stats_derived_times():
    proc = Process(pid=1, arrival=2, burst=3)
    stats = ProcessStats(proc, start=4, completion=7)
    assert stats.turnaround == stats.completion - proc.arrival
    assert stats.waiting == stats.turnaround - proc.burst
    assert stats.response == stats.start - proc.arrival


def test_stats_start_before_arrival_rejected():
    with pytest.raises(ValueError):
        ProcessStats(Process(pid=0, arrival=5, burst=1), start=4, completion=5)


def test_stats_completion_not_after_start_rejected():
    with pytest.raises(ValueError):
        ProcessStats(Process(pid=0, arrival=0, burst=1), start=3, completion=3)


def test_empty_schedule_rejected():
    with pytest.raises(ValueError):
        Schedule((), ())


def test_stats_sorted_by_pid():
    a = ProcessStats(Process(pid=2, arrival=0, burst=2), start=0, completion=2)
    b = ProcessStats(Process(pid=0, arrival=0, burst=2), start=2, completion=4)
    schedule = Schedule((a, b), (2, 0))
    assert [s.process.pid for s in schedule.stats] == [0, 2]
    assert schedule.order == (2, 0)


def test_single_process_figures():
    proc = Process(pid=0, arrival=0, burst=4)
    schedule = Schedule((ProcessStats(proc, start=0, completion=4),), (0,))
    assert schedule.average_turnaround() == proc.burst
    assert schedule.average_waiting() == 0
    assert schedule.schedule_length() == proc.burst
    assert schedule.throughput() == pytest.approx(1 / proc.burst)
    assert schedule.cpu_utilization() == pytest.approx(100.0)


def test_idle_time_lowers_utilization():
    first = Process(pid=0, arrival=0, burst=3)
    second = Process(pid=1, arrival=6, burst=3)
    schedule = Schedule(
        (
            ProcessStats(first, start=0, completion=3),
            ProcessStats(second, start=6, completion=9),
        ),
        (0, 1),
    )
    assert schedule.cpu_utilization() < 100
    assert schedule.average_turnaround() == first.burst
    assert schedule.average_waiting() == 0
    assert schedule.schedule_length() == second.arrival + second.burst - first.arrival
    assert schedule.throughput() * schedule.schedule_length() == pytest.approx(2)


def test_schedule_length_starts_at_first_arrival():
    proc = Process(pid=0, arrival=5, burst=2)
    schedule = Schedule((ProcessStats(proc, start=5, completion=7),), (0,))
    assert schedule.schedule_length() == proc.burst


def test_table_layout():
    proc = Process(pid=3, arrival=1, burst=2)
    schedule = Schedule((ProcessStats(proc, start=4, completion=6),), (3,))
    lines = schedule.table().splitlines()
    assert lines[0] == "PID\tAT\tBT\tST\tCT\tWT\tTAT\tRT"
    assert len(lines) == 2
    fields = [int(v) for v in lines[1].split("\t")]
    stats = schedule.stats[0]
    assert fields == [
        proc.pid,
        proc.arrival,
        proc.burst,
        stats.start,
        stats.completion,
        stats.waiting,
        stats.turnaround,
        stats.response,
    ]