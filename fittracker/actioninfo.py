"""Reporting a batch of activity records."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

_log = logging.getLogger(__name__)


class DataParser(ABC):
    """A record that can be parsed from a string and reported."""

    @abstractmethod
    def parse(self, datastring: str) -> None:
        """Fill the record from a string; raise ValueError if invalid."""

    @abstractmethod
    def action_info(self) -> str:
        """Return the record's report; raise ValueError on failure."""


def info(dataset: Iterable[str], parser: DataParser) -> None:
    """Print the report of each entry, logging and skipping failures."""
    for datastring in dataset:
        try:
            parser.parse(datastring)
            report = parser.action_info()
        except ValueError as err:
            _log.warning("%s", err)
            continue
        print(report)