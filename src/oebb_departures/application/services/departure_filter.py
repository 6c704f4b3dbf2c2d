"""Train-name filtering of departures."""

import re

from oebb_departures.domain.models.departure import Departure

_WHITESPACE = re.compile(r"\s+")


def _normalize(name: str) -> str:
    return _WHITESPACE.sub("", name).upper()


class DepartureFilter:
    """Applies the comma-separated train filter and the display count."""

    @staticmethod
    def parse_tokens(train_filter: str | None) -> list[str]:
        """Split a filter string into normalized tokens.

        "S80, rex 1" becomes ["S80", "REX1"]; empty tokens are dropped.
        """
        if not train_filter or not train_filter.strip():
            return []
        return [token for token in (_normalize(part) for part in train_filter.split(",")) if token]

    @staticmethod
    def filter(departures: list[Departure], train_filter: str | None = None) -> list[Departure]:
        """Keep departures whose train name contains any filter token.

        Without a (non-empty) filter the input is returned unchanged.
        """
        tokens = DepartureFilter.parse_tokens(train_filter)
        if not tokens:
            return list(departures)
        return [
            departure
            for departure in departures
            if any(token in _normalize(departure.train) for token in tokens)
        ]

    @staticmethod
    def apply(
        departures: list[Departure], train_filter: str | None, count: int
    ) -> list[Departure]:
        """Filter and keep the first ``count`` departures."""
        return DepartureFilter.filter(departures, train_filter)[: max(count, 0)]
