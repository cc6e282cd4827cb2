from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Row:
    """One table row; a ``None`` cell is a missing value."""

    key: str
    cells: tuple[object | None, ...]
