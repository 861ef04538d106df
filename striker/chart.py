"""A strategy chart: rows keyed by hand, columns by the dealer's up card."""

from __future__ import annotations

TABLE_SIZE = 21
NUM_COLUMNS = 12

_EMPTY_VALUE = "---"
_HEADER = "--------------------2-----3-----4-----5-----6-----7-----8-----9-----X-----A---"
_FOOTER = "------------------------------------------------------------------------------"


class Chart:
    """A named table of decisions, looked up by hand key and up-card value."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._rows: dict[str, list[str]] = {}

    def __repr__(self) -> str:
        return f"Chart(name={self.name!r}, rows={len(self._rows)})"

    def insert(self, key: str, up: int, value: str) -> None:
        """Store ``value`` for hand ``key`` against up-card value ``up``."""
        row_key = key.upper()
        row = self._rows.get(row_key)
        if row is None:
            if len(self._rows) >= TABLE_SIZE:
                raise ValueError(f"Chart {self.name} cannot hold more than {TABLE_SIZE} rows")
            row = [_EMPTY_VALUE] * NUM_COLUMNS
            self._rows[row_key] = row
        row[up] = value.upper()

    def get_value(self, key: str, up: int) -> str:
        """Return the entry for hand ``key`` against up-card value ``up``."""
        row = self._rows.get(key.upper())
        if row is None:
            raise KeyError(f"Cannot find value in {self.name} for {key} vs {up}")
        return row[up]

    def __str__(self) -> str:
        lines = [self.name, _HEADER]
        for key, values in self._rows.items():
            lines.append(f"{key:>2} : " + "".join(f"{value:>4}, " for value in values))
        lines.append(_FOOTER + "\n")
        return "\n".join(lines)