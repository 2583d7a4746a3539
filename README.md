# numlab

A small library of textbook numerical methods and CPU scheduling
algorithms, written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Numerical methods

### Roots of equations (`numlab.roots`)

- `bisection(f, a, b, tol=1e-5)` halves `[a, b]` until its width drops
  below `tol`. `f(a)` and `f(b)` must have strictly opposite signs.
- `regula_falsi(f, a, b, tol=1e-4)` uses false position and stops when two
  successive estimates differ by less than `tol`.
- `fixed_point(f, g, x0, tol=1e-6, max_steps=100)` iterates `x = g(x)` until
  `|f(x)| <= tol`.
- `newton_raphson(f, df, x0, tol=1e-6, max_steps=100)` applies Newton's
  method with derivative `df` until `|f(x)| <= tol`.

```python
import math
from numlab.roots import regula_falsi, fixed_point

root = regula_falsi(lambda x: x**3 - 2*x - 5, 2.0, 3.0)

root = fixed_point(
    lambda x: math.cos(x) - 3*x + 1,
    lambda x: (1 + math.cos(x)) / 3,
    0.0,
)
```

`RootNotBracketedError` (a `ValueError`) is raised when the end points given
to `bisection` or `regula_falsi` do not enclose a sign change.
`NotConvergentError` (a `RuntimeError`) is raised when `fixed_point` or
`newton_raphson` use up `max_steps`, when `fixed_point` overflows, when
`newton_raphson` meets a zero derivative, and when `regula_falsi` finds equal
function values at both end points.

### Integration (`numlab.integration`)

`trapezoidal`, `simpson_one_third` and `simpson_three_eighths` each take
`(f, lower, upper, intervals)` and return the composite rule's estimate.
The number of intervals must be positive; Simpson's 1/3 rule also needs an
even number and Simpson's 3/8 rule a multiple of 3. Otherwise `ValueError`
is raised.

```python
from numlab.integration import trapezoidal
trapezoidal(lambda x: 1 / (1 + x * x), 0.0, 1.0, 6)
```

### Ordinary differential equations (`numlab.odes`)

For `y' = f(x, y)` with `y(x0) = y0`, each function returns the approximate
value of `y` at `xn`:

- `euler(f, x0, y0, xn, steps)` — Euler's method with `steps` equal steps.
- `modified_euler(f, x0, y0, xn, h)` — Euler's predictor-corrector method
  with step `h` (which may be negative, but not zero).
- `runge_kutta4(f, x0, y0, xn, h)` — classical fourth-order Runge-Kutta with
  a positive step `h`.

### Curve fitting (`numlab.fitting`)

`fit_straight_line(xs, ys)` fits `y = a + b x` by least squares and returns
a frozen `Line` with `intercept` and `slope`. A `Line` can be called to
evaluate it at a point. At least two observations with differing x values
are needed.

### Linear systems (`numlab.linear`)

Each solver takes the augmented matrix `[A | b]` as `n` rows of `n + 1`
numbers and returns the solution as a list of floats.

- `gauss_elimination(augmented)` — forward elimination and back
  substitution.
- `gauss_jordan(augmented)` — reduction to diagonal form.
- `gauss_seidel(augmented, tol=1e-6, max_iterations=100)` — iteration from
  zero until no unknown changes by `tol` or more in a sweep.

When a pivot is zero the direct solvers exchange rows; if no usable pivot
exists they raise `SingularMatrixError`. `gauss_seidel` raises `ValueError`
for a zero diagonal coefficient and `NotConvergentError` if it diverges or
runs out of iterations.

### Interpolation (`numlab.interpolation`)

- `forward_differences(ys)` and `backward_differences(ys)` build difference
  tables, one row per point.
- `newton_forward(xs, ys, x)` and `newton_backward(xs, ys, x)` use Newton's
  formulas on equally spaced points.
- `gauss_forward(xs, ys, x)` uses Gauss's forward formula on increasing,
  equally spaced points, with `x` inside the tabulated range.
- `lagrange(xs, ys, x)` works with any distinct x values.

```python
from numlab.interpolation import lagrange
lagrange([5, 7, 11, 13, 17], [150, 392, 1452, 2366, 5202], 9)
```

## CPU scheduling

`numlab.scheduling` defines the records:

- `Process(pid, arrival, burst, priority=0)` — a larger `priority` value is
  more urgent. Arrival must not be negative and burst must be positive.
- `ProcessStats` — a process's `start` and `completion`, with `turnaround`,
  `waiting` and `response` derived from them.
- `Schedule` — `stats` (one entry per process, ordered by pid) and `order`
  (pids in the order the CPU was given to them). It offers
  `average_turnaround()`, `average_waiting()`, `schedule_length()` (first
  arrival to last completion), `throughput()`, `cpu_utilization()` (busy
  percentage of the time from zero to the last completion) and `table()`, a
  tab-separated table with columns PID, AT, BT, ST, CT, WT, TAT, RT.

Non-preemptive algorithms (`numlab.nonpreemptive`): `fcfs`, `sjf`, `ljf` and
`priority_nonpreemptive`. Preemptive algorithms (`numlab.preemptive`):
`srtf`, `lrtf`, `priority_preemptive` and `round_robin(processes, quantum)`.
Ties go to the earlier arrival, then the smaller pid. In round robin,
processes that arrive during a slice join the queue ahead of the process
whose slice has just expired. Every algorithm needs at least one process and
distinct pids.

```python
from numlab.scheduling import Process
from numlab.nonpreemptive import fcfs

schedule = fcfs([Process(0, 0, 5), Process(1, 1, 3), Process(2, 2, 8)])
print(schedule.order)            # (0, 1, 2)
print(schedule.table())
```

## What it does not do

numlab is a library only. It has no command-line program and reads no input
interactively; every method is called from Python with its function and
data passed as arguments.