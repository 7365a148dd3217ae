"""Convert items to the pandas DataFrame shown by the page table."""

from __future__ import annotations

from typing import Sequence

import pandas as pd

from .item import Item, DISPLAY_COLUMNS


def items_to_frame(items: Sequence[Item]) -> pd.DataFrame:
    """Build a DataFrame with one row per item, in page order.

    The index is positional (0..n-1) so widget selection indices map
    straight back onto ``items``. The item id is kept as the first column.
    """
    columns = ["id"] + [name for name, _ in DISPLAY_COLUMNS]
    df = pd.DataFrame([item.to_dict() for item in items], columns=columns)
    # Missing years stay integer-typed instead of turning the column to float.
    for col in ("date_start", "date_end"):
        df[col] = df[col].astype("Int64")
    return df.reset_index(drop=True)


def column_titles() -> dict[str, str]:
    """Header titles keyed by DataFrame column."""
    titles = {"id": "ID"}
    titles.update(dict(DISPLAY_COLUMNS))
    return titles


def indices_of(items: Sequence[Item], subset: Sequence[Item]) -> list[int]:
    """Row positions in ``items`` of the items in ``subset`` (by id)."""
    wanted = {item.id for item in subset}
    return [i for i, item in enumerate(items) if item.id in wanted]


def items_at(items: Sequence[Item], indices: Sequence[int]) -> list[Item]:
    """Items at the given row positions; out-of-range positions are skipped."""
    n = len(items)
    return [items[i] for i in sorted(set(indices)) if 0 <= i < n]
