"""Daily step activity."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from fittracker.actioninfo import DataParser
from fittracker.parsing import parse_duration, parse_steps
from fittracker.personaldata import Personal
from fittracker.spentenergy import distance, walking_spent_calories


@dataclass
class DaySteps(DataParser):
    """Steps walked over a period by a person."""

    steps: int = 0
    duration: timedelta = timedelta(0)
    personal: Personal = field(default_factory=Personal)

    def parse(self, datastring: str) -> None:
        """Read ``"steps,duration"``, for example ``"678,0h50m"``."""
        parts = datastring.split(",")
        if len(parts) != 2:
            raise ValueError("неправильное количество параметров")
        steps = parse_steps(parts[0])
        if steps <= 0:
            raise ValueError("неверное значение шагов")
        duration = parse_duration(parts[1])
        if duration <= timedelta(0):
            raise ValueError("неверная продолжительность - ноль")
        self.steps, self.duration = steps, duration

    def action_info(self) -> str:
        """Return the walk report."""
        p = self.personal
        walked = distance(self.steps, p.height)
        calories = walking_spent_calories(self.steps, p.weight, p.height, self.duration)
        return (
            f"Количество шагов: {self.steps}.\n"
            f"Дистанция составила {walked:.2f} км.\n"
            f"Вы сожгли {calories:.2f} ккал.\n"
        )