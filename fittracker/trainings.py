"""Training sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from fittracker.actioninfo import DataParser
from fittracker.parsing import parse_duration, parse_steps
from fittracker.personaldata import Personal
from fittracker.spentenergy import (
    distance,
    mean_speed,
    running_spent_calories,
    walking_spent_calories,
)

_CALCULATORS = {"Бег": running_spent_calories, "Ходьба": walking_spent_calories}


@dataclass
class Training(DataParser):
    """A training session of a given type."""

    steps: int = 0
    training_type: str = ""
    duration: timedelta = timedelta(0)
    personal: Personal = field(default_factory=Personal)

    def parse(self, datastring: str) -> None:
        """Read ``"steps,activityType,duration"``, for example ``"5000,Бег,1h30m"``."""
        parts = datastring.split(",")
        if len(parts) != 3:
            raise ValueError("неправильное количество параметров")
        steps = parse_steps(parts[0])
        if steps <= 0:
            raise ValueError("неверное значение шагов")
        duration = parse_duration(parts[2])
        if duration <= timedelta(0):
            raise ValueError("неверная продолжительность - ноль")
        self.steps, self.duration, self.training_type = steps, duration, parts[1]

    def action_info(self) -> str:
        """Return the training report."""
        p = self.personal
        covered = distance(self.steps, p.height)
        speed = mean_speed(self.steps, p.height, self.duration)
        try:
            calculator = _CALCULATORS.get(self.training_type)
            if calculator is None:
                raise ValueError("неизвестный тип тренировки")
            calories = calculator(self.steps, p.weight, p.height, self.duration)
        except ValueError as err:
            raise ValueError(f"ошибка расчета калорий: {err}") from err
        hours = self.duration / timedelta(hours=1)
        return (
            f"Тип тренировки: {self.training_type}\n"
            f"Длительность: {hours:.2f} ч.\n"
            f"Дистанция: {covered:.2f} км.\n"
            f"Скорость: {speed:.2f} км/ч\n"
            f"Сожгли калорий: {calories:.2f}\n"
        )