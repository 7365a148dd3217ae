"""Item and Page: the immutable records handed around by the core."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Mapping


# Display columns in table order, with their header titles.
DISPLAY_COLUMNS: tuple[tuple[str, str], ...] = (
    ("title", "Title"),
    ("place_of_origin", "Place of Origin"),
    ("artist_display", "Artist"),
    ("inscriptions", "Inscriptions"),
    ("date_start", "Start Date"),
    ("date_end", "End Date"),
)

# Fields requested from the API for each record.
RECORD_FIELDS: tuple[str, ...] = ("id",) + tuple(name for name, _ in DISPLAY_COLUMNS)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _year(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class Item:
    """One artwork record.

    ``id`` is the identity key used to deduplicate an item across fetches.
    The remaining attributes are display-only and may differ between two
    fetches of the same id.
    """

    id: int
    title: str = ""
    place_of_origin: str = ""
    artist_display: str = ""
    inscriptions: str = ""
    date_start: int | None = None
    date_end: int | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Item:
        """Build an Item from an API record.

        Null text fields become empty strings and unparsable years become
        None. Raises ``ValueError`` when the record has no integer ``id``.
        """
        raw_id = record.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"Record has no integer 'id': {raw_id!r}")
        return cls(
            id=raw_id,
            title=_text(record.get("title")),
            place_of_origin=_text(record.get("place_of_origin")),
            artist_display=_text(record.get("artist_display")),
            inscriptions=_text(record.get("inscriptions")),
            date_start=_year(record.get("date_start")),
            date_end=_year(record.get("date_end")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Page:
    """An ordered page of items plus the dataset's total item count."""

    items: tuple[Item, ...]
    total_count: int
    page_index: int = 1
    page_size: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the page stays immutable.
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def ids(self) -> list[int]:
        return [item.id for item in self.items]
