from datetime import timedelta

import pytest

from fittracker.spentenergy import (
    check_height,
    check_weight,
    distance,
    mean_speed,
    running_spent_calories,
    walking_spent_calories,
)

HOUR = timedelta(hours=1)


@pytest.mark.parametrize(
    ("steps", "height", "want"),
    [
        (1000, 1.75, 0.7875),
        (10000, 1.75, 7.875),
        (100, 1.75, 0.07875),
        (0, 1.75, 0),
    ],
)
def test_distance(steps, height, want):
    assert distance(steps, height) == want


def test_distance_reports_invalid_steps(capsys):
    assert distance(-5, 1.75) == 0
    assert "неверное значение шагов" in capsys.readouterr().out


def test_distance_reports_invalid_height(capsys):
    assert distance(1000, 0.0) == 0
    assert "неверное значение роста" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("steps", "height", "duration", "want"),
    [
        (6000, 1.75, HOUR, 4.725),
        (3000, 1.75, timedelta(minutes=30), 4.725),
        (12000, 1.75, timedelta(hours=2), 4.725),
        (1000, 1.75, timedelta(hours=2), 0.39375),
        (20000, 1.75, HOUR, 15.75),
        (1000, 1.75, timedelta(0), 0),
        (1000, 1.75, -HOUR, 0),
        (0, 1.75, HOUR, 0),
    ],
)
def test_mean_speed(steps, height, duration, want):
    assert mean_speed(steps, height, duration) == want


def test_mean_speed_reports_invalid_duration(capsys):
    assert mean_speed(1000, 1.75, timedelta(0)) == 0
    assert "неверное значение продолжительности" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("steps", "weight", "height", "duration", "want"),
    [
        (6000, 75.0, 1.75, HOUR, 354.375),
        (3000, 75.0, 1.75, timedelta(minutes=30), 177.1875),
        (20000, 75.0, 1.75, HOUR, 1181.25),
        (1000, 75.0, 1.75, timedelta(hours=2), 59.0625),
        (6000, 60.0, 1.75, HOUR, 283.5),
    ],
)
def test_running_spent_calories(steps, weight, height, duration, want):
    got = running_spent_calories(steps, weight, height, duration)
    assert got == pytest.approx(want, abs=0.1)


@pytest.mark.parametrize(
    ("steps", "weight", "height", "duration"),
    [
        (1000, 75.0, 1.75, timedelta(0)),
        (1000, 75.0, 1.75, -HOUR),
        (0, 75.0, 1.75, HOUR),
        (-1000, 75.0, 1.75, HOUR),
        (1000, 0, 1.75, HOUR),
        (1000, -75.0, 1.75, HOUR),
        (1000, 75.0, -1.75, HOUR),
    ],
)
def test_running_spent_calories_errors(steps, weight, height, duration):
    with pytest.raises(ValueError):
        running_spent_calories(steps, weight, height, duration)


def test_running_error_order_steps_first():
    with pytest.raises(ValueError, match="шагов"):
        running_spent_calories(0, 0, 0, timedelta(0))


@pytest.mark.parametrize(
    ("steps", "weight", "height", "duration", "want"),
    [
        (6000, 75.0, 1.75, HOUR, 177.19),
        (3000, 75.0, 1.75, timedelta(minutes=30), 88.594),
        (20000, 75.0, 1.75, HOUR, 590.62),
        (6000, 60.0, 1.75, HOUR, 141.75),
        (6000, 75.0, 1.85, HOUR, 187.313),
    ],
)
def test_walking_spent_calories(steps, weight, height, duration, want):
    got = walking_spent_calories(steps, weight, height, duration)
    assert got == pytest.approx(want, abs=0.1)


@pytest.mark.parametrize(
    ("steps", "weight", "height", "duration"),
    [
        (0, 75.0, 1.75, HOUR),
        (-1000, 75.0, 1.75, HOUR),
        (6000, 0, 1.75, HOUR),
        (6000, -75.0, 1.75, HOUR),
        (6000, 75.0, 0, HOUR),
        (6000, 75.0, -1.75, HOUR),
    ],
)
def test_walking_spent_calories_errors(steps, weight, height, duration):
    with pytest.raises(ValueError):
        walking_spent_calories(steps, weight, height, duration)


def test_walking_is_half_of_running():
    running = running_spent_calories(6000, 75.0, 1.75, HOUR)
    walking = walking_spent_calories(6000, 75.0, 1.75, HOUR)
    assert walking == running * 0.5


@pytest.mark.parametrize(
    ("weight", "ok"),
    [(2.0, True), (635.0, True), (75.0, True), (1.99, False), (635.01, False), (0, False)],
)
def test_check_weight(weight, ok):
    assert check_weight(weight) is ok


@pytest.mark.parametrize(
    ("height", "ok"),
    [(0.50, True), (2.75, True), (1.75, True), (0.49, False), (2.76, False), (-1.75, False)],
)
def test_check_height(height, ok):
    assert check_height(height) is ok