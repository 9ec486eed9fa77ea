"""Domain model: the guestbook entry."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Entry:
    """A signed guestbook message.

    Entries carry no identity beyond their two fields and are never
    mutated once stored. Empty strings are accepted as-is.

    Attributes:
        who: Author identifier
        message: Free-form body
    """

    who: str
    message: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any] | Sequence[Any]) -> Entry:
        """Materialise a ``(who, message)`` row from the store."""
        # sqlite3.Row is not a Mapping but exposes keys()
        if isinstance(row, Mapping) or hasattr(row, "keys"):
            return cls(who=row["who"], message=row["message"])  # type: ignore[call-overload]
        who, message = row
        return cls(who=who, message=message)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


__all__ = ["Entry"]
