import pytest

from numlab.fitting import Line, fit_straight_line


def test_exact_line_is_recovered():
    xs = [0.0, 1.0, 2.0, 3.0, 4.0]
    ys = [1.5 + 2.0 * x for x in xs]
    line = fit_straight_line(xs, ys)
    assert line.intercept == pytest.approx(1.5)
    assert line.slope == pytest.approx(2.0)


def test_residuals_sum_to_zero():
    xs = [1.0, 2.0, 3.0, 4.0, 6.0]
    ys = [2.1, 3.9, 6.2, 7.8, 12.5]
    line = fit_straight_line(xs, ys)
    residuals = [y - line(x) for x, y in zip(xs, ys)]
    assert sum(residuals) == pytest.approx(0.0, abs=1e-9)
    assert sum(r * x for r, x in zip(residuals, xs)) == pytest.approx(0.0, abs=1e-9)


def test_line_passes_through_centroid():
    xs = [2.0, 4.0, 5.0, 9.0]
    ys = [3.0, 1.0, 8.0, 4.0]
    line = fit_straight_line(xs, ys)
    assert line(sum(xs) / 4) == pytest.approx(sum(ys) / 4)


def test_accepts_generators():
    line = fit_straight_line((x for x in range(3)), (3 * x for x in range(3)))
    assert line.slope == pytest.approx(3.0)


def test_line_call():
    assert Line(intercept=1.0, slope=-2.0)(3.0) == -5.0


def test_length_mismatch():
    with pytest.raises(ValueError):
        fit_straight_line([1.0, 2.0], [1.0])


def test_too_few_points():
    with pytest.raises(ValueError):
        fit_straight_line([1.0], [1.0])


def test_vertical_data():
    with pytest.raises(ValueError):
        fit_straight_line([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])