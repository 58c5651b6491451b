# fittracker

A small fitness tracker. It reads activity records from short text lines and reports
the distance, the mean speed and the calories burned. Reports and error messages are
in Russian.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
fittracker
```

The command prints a sample report for one built-in person. The report has a day of
walking records and a log of workouts. Some sample records are malformed on purpose.
They are logged through `logging` and skipped. The command takes no options.

## Record formats

- Daily steps (`fittracker.daysteps.DaySteps`): `steps,duration`, for example
  `678,0h50m`.
- Workouts (`fittracker.trainings.Training`): `steps,type,duration`, for example
  `5000,Бег,1h30m`. The type is `Бег` (running) or `Ходьба` (walking).

The step count is a decimal integer with an optional sign. It may not contain spaces,
and it must be positive. A duration is one or more numbers, each followed by a unit:
`ns`, `us`, `µs`, `ms`, `s`, `m` or `h`. Examples are `1.5h`, `30m` and `1h30m`. A
sign is allowed before the first number. The duration must be positive, and it is
truncated to whole microseconds. Both parsers are available on their own, in
`fittracker.parsing`, as `parse_steps` and `parse_duration`. `parse_duration` returns
a `datetime.timedelta`.

## Library use

```python
from fittracker.personaldata import Personal
from fittracker.daysteps import DaySteps
from fittracker.trainings import Training
from fittracker.actioninfo import info

person = Personal(name="Витя", weight=84.6, height=1.87)
print(person.describe())

day = DaySteps(personal=person)
day.parse("6000,1h00m")
print(day.action_info())

training = Training(personal=person)
info(["3456,Ходьба,3h00m", "15392,Бег,0h45m"], training)
```

`Personal.describe` returns the person's name, weight and height as report lines.
`Personal.print` writes those lines to standard output.

`parse` raises `ValueError` on bad input and leaves the record unchanged. `action_info`
raises `ValueError` when the stored values cannot be used. That happens with
non-positive steps or duration, a weight outside 2–635 kg, a height outside
0.5–2.75 m, or an unknown workout type. For `Training`, the message starts with
`ошибка расчета калорий:`.

`fittracker.actioninfo.info` takes any `DataParser` and processes the records in
order. It prints each report. When a record fails with a `ValueError`, it logs a
warning and carries on with the next record.

The calculations are in `fittracker.spentenergy`:

- `distance` and `mean_speed` return 0 for invalid input and print a message about it.
- `running_spent_calories` and `walking_spent_calories` raise `ValueError` on invalid
  input. Walking uses half the running rate.
- `check_weight` and `check_height` report whether a value is within range.

## What it does not do

The package does not read records from files or standard input, and it stores
nothing. The `fittracker` command only prints its built-in sample. To process your
own records, call the library.