"""Print the daily activity and training reports for a sample person."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fittracker.actioninfo import info
from fittracker.daysteps import DaySteps
from fittracker.personaldata import Personal
from fittracker.trainings import Training

_DEMO_PERSON = {"name": "Витя", "weight": 84.6, "height": 1.87}

# One record per line; malformed records are deliberate and get logged.
_DAY_RECORDS = """\
678,0h50m
792,1h14m
1078,1h30m
7830,2h40m
,3456
12:40:00, 3456
something is wrong
"""

_TRAINING_RECORDS = """\
3456,Ходьба,3h00m
something is wrong
678,Бег,0h5m
1078,Бег,0h10m
,3456 Ходьба
7892,Ходьба,3h10m
15392,Бег,0h45m
"""


def _records(block: str) -> list[str]:
    return block.splitlines()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample daily activity and training journal."""
    logging.basicConfig(
        format="%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S"
    )
    person = Personal(**_DEMO_PERSON)

    reports = (
        ("Активность в течение дня", _DAY_RECORDS, DaySteps),
        ("Журнал тренировок", _TRAINING_RECORDS, Training),
    )
    for title, block, kind in reports:
        print(title)
        person.print()
        info(_records(block), kind(personal=person))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())