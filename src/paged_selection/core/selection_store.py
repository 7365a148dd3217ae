"""SelectionStore: cross-page selection that survives page navigation.

Only the current page is ever resident, so the store keeps its own snapshot
of every selected item, keyed by item id. The checkbox widget only knows
about the page it shows; ``reconcile`` merges its report into the global
selection without touching entries that belong to other pages.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from .item import Item


SelectionChangeCallback = Callable[[list[Item]], Any]


class SelectionStore:
    """Mapping of item id to the item as last seen on some page.

    All operations are synchronous and total: they never raise and never
    perform I/O. Registered callbacks are notified whenever the selection
    actually changes.
    """

    def __init__(self) -> None:
        self._selected: dict[int, Item] = {}
        self._callbacks: list[SelectionChangeCallback] = []

    # --- Queries ---

    def visible_selection(self, current_page: Iterable[Item]) -> list[Item]:
        """Items of ``current_page`` that are selected, in page order."""
        return [item for item in current_page if item.id in self._selected]

    def selected_items(self) -> list[Item]:
        """All selected items in insertion order."""
        return list(self._selected.values())

    @property
    def selected_ids(self) -> list[int]:
        return list(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._selected

    # --- Mutations ---

    def reconcile(
        self,
        current_page: Sequence[Item],
        checked_subset: Iterable[Item],
    ) -> None:
        """Merge the widget's checked subset of ``current_page``.

        Checked items are inserted (or replace the stored copy), unchecked
        page items are removed. Checked items whose id is not on
        ``current_page`` are ignored, and ids absent from the page are left
        as they are. Callbacks fire only if the selection changed.
        """
        page_ids = {item.id for item in current_page}
        checked_ids, added = self._add_pass(page_ids, checked_subset)
        removed = self._remove_pass(current_page, checked_ids)
        if added or removed:
            self._notify()

    def _add_pass(
        self, page_ids: set[int], checked_subset: Iterable[Item],
    ) -> tuple[set[int], bool]:
        checked_ids: set[int] = set()
        changed = False
        for item in checked_subset:
            if item.id not in page_ids:
                continue
            changed |= self._put(item)
            checked_ids.add(item.id)
        return checked_ids, changed

    def _remove_pass(self, current_page: Sequence[Item], checked_ids: set[int]) -> bool:
        changed = False
        for item in current_page:
            if item.id not in checked_ids and item.id in self._selected:
                del self._selected[item.id]
                changed = True
        return changed

    def _put(self, item: Item) -> bool:
        """Insert or replace ``item``; True if the stored value changed."""
        if self._selected.get(item.id) == item:
            return False
        self._selected[item.id] = item
        return True

    def bulk_select_first_n(
        self,
        dataset_prefix: Iterable[Item],
        n: int | None = None,
    ) -> None:
        """Union the first items of the dataset into the selection.

        ``dataset_prefix`` must already be the first items of the dataset in
        display order, possibly spanning several pages: the caller assembles
        it (see ``paged_selection.source.fetch_prefix``). When ``n`` is given
        only the first ``n`` items of the prefix are inserted. Existing
        selections are never removed.
        """
        changed = False
        for count, item in enumerate(dataset_prefix):
            if n is not None and count >= n:
                break
            changed |= self._put(item)
        if changed:
            self._notify()

    def clear(self) -> None:
        """Empty the selection."""
        if not self._selected:
            return
        self._selected.clear()
        self._notify()

    # --- Callbacks ---

    def on_change(self, callback: SelectionChangeCallback) -> None:
        """Register a callback: fn(selected_items)."""
        self._callbacks.append(callback)

    def _notify(self) -> None:
        items = self.selected_items()
        for cb in self._callbacks:
            cb(items)

    def __repr__(self) -> str:
        return f"SelectionStore(selected={len(self._selected)})"
