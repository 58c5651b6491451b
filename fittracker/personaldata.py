"""Personal data of the tracked person."""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Personal:
    """Name, weight in kilograms and height in metres."""

    name: str = ""
    weight: float = 0.0
    height: float = 0.0

    def describe(self) -> str:
        """Return the personal data as report lines."""
        return f"Имя: {self.name}\nВес: {self.weight:.2f} кг.\nРост: {self.height:.2f} м.\n"

    def print(self) -> None:
        """Write the personal data report to standard output."""
        sys.stdout.write(self.describe())