"""Distance, speed and calorie calculations for walking and running."""

from __future__ import annotations

from datetime import timedelta

M_IN_KM = 1000
MIN_IN_H = 60
STEP_LENGTH_COEFFICIENT = 0.45
WALKING_CALORIES_COEFFICIENT = 0.5

MIN_WEIGHT = 2.0
MAX_WEIGHT = 635.0
MIN_HEIGHT = 0.50
MAX_HEIGHT = 2.75

_NS_PER_MINUTE = 60 * 1_000_000_000
_NS_PER_HOUR = 60 * _NS_PER_MINUTE


def _nanoseconds(duration: timedelta) -> int:
    seconds = duration.days * 86400 + duration.seconds
    return (seconds * 1_000_000 + duration.microseconds) * 1_000


def _in_units(duration: timedelta, unit: int) -> float:
    nanoseconds = _nanoseconds(duration)
    whole, rest = divmod(abs(nanoseconds), unit)
    value = whole + rest / unit
    return -value if nanoseconds < 0 else value


def _hours(duration: timedelta) -> float:
    return _in_units(duration, _NS_PER_HOUR)


def _minutes(duration: timedelta) -> float:
    return _in_units(duration, _NS_PER_MINUTE)


def check_weight(weight: float) -> bool:
    """Return whether the weight lies within the accepted range."""
    return MIN_WEIGHT <= weight <= MAX_WEIGHT


def check_height(height: float) -> bool:
    """Return whether the height lies within the accepted range."""
    return MIN_HEIGHT <= height <= MAX_HEIGHT


def distance(steps: int, height: float) -> float:
    """Return the distance covered in kilometres, or 0 for invalid input."""
    if not check_height(height):
        print("неверное значение роста:", height)
        return 0.0
    if steps <= 0:
        print("неверное значение шагов:", steps)
        return 0.0
    step_length = height * STEP_LENGTH_COEFFICIENT
    return (steps * step_length) / M_IN_KM


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Return the mean speed in km/h, or 0 for a non-positive duration."""
    if duration <= timedelta(0):
        print("неверное значение продолжительности:", duration)
        return 0.0
    return distance(steps, height) / _hours(duration)


def running_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Return the calories burned while running.

    Raises ValueError for non-positive steps or duration and for weight or
    height outside the accepted ranges.
    """
    if steps <= 0:
        raise ValueError("неверное значение шагов")
    if not check_weight(weight):
        raise ValueError("неверное значение веса")
    if not check_height(height):
        raise ValueError("неверное значение роста")
    if duration <= timedelta(0):
        raise ValueError("неверное значение продолжительности:")

    speed = mean_speed(steps, height, duration)
    return (weight * speed * _minutes(duration)) / MIN_IN_H


def walking_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Return the calories burned while walking (running rate, scaled down)."""
    calories = running_spent_calories(steps, weight, height, duration)
    return calories * WALKING_CALORIES_COEFFICIENT