"""Tests for SelectionStore: the cross-page selection core."""

from dataclasses import replace

from paged_selection.core.selection_store import SelectionStore

from conftest import make_items


def ids(items):
    return [item.id for item in items]


class TestVisibleSelection:
    def test_empty_store(self, store, page1):
        assert store.visible_selection(page1) == []

    def test_page_order_preserved(self, store, page1):
        store.reconcile(page1, [page1[7], page1[2], page1[5]])
        assert ids(store.visible_selection(page1)) == [3, 6, 8]

    def test_only_current_page(self, store, page1, page2):
        store.reconcile(page1, page1[:3])
        assert store.visible_selection(page2) == []

    def test_pure(self, store, page1):
        store.reconcile(page1, page1[:2])
        store.visible_selection(page1)
        store.visible_selection(page1)
        assert len(store) == 2


class TestReconcile:
    def test_select_whole_page(self, store, page1):
        store.reconcile(page1, page1)
        assert len(store.selected_items()) == 10

    def test_uncheck_one(self, store, page1):
        store.reconcile(page1, page1)
        store.reconcile(page1, [item for item in page1 if item.id != 3])
        selected = ids(store.selected_items())
        assert 3 not in selected
        assert sorted(selected) == [1, 2, 4, 5, 6, 7, 8, 9, 10]

    def test_off_page_entries_untouched(self, store, page1, page2):
        store.reconcile(page1, page1[:4])
        before = {item.id: item for item in store.selected_items() if item.id <= 10}
        store.reconcile(page2, page2[:2])
        store.reconcile(page2, [])
        after = {item.id: item for item in store.selected_items() if item.id <= 10}
        assert after == before

    def test_only_page_ids_change(self, store, page1, page2):
        store.reconcile(page1, page1[:5])
        page1_ids = set(ids(page1))
        outside_before = [i for i in store.selected_ids if i not in set(ids(page2))]
        store.reconcile(page2, page2[3:6])
        outside_after = [i for i in store.selected_ids if i not in set(ids(page2))]
        assert outside_after == outside_before
        assert set(outside_after) <= page1_ids

    def test_idempotent(self, store, page1):
        store.reconcile(page1, page1[2:6])
        once = store.selected_items()
        store.reconcile(page1, page1[2:6])
        assert store.selected_items() == once

    def test_checked_item_not_on_page_ignored(self, store, page1, page2):
        store.reconcile(page1, [page1[0], page2[0]])
        assert store.selected_ids == [1]

    def test_checked_copy_replaces_stored_copy(self, store, page1):
        store.reconcile(page1, [page1[0]])
        refreshed = replace(page1[0], title="Renamed")
        page = [refreshed] + list(page1[1:])
        store.reconcile(page, [refreshed])
        assert store.selected_items()[0].title == "Renamed"

    def test_update_keeps_insertion_position(self, store, page1):
        store.reconcile(page1, page1[:3])
        store.reconcile(page1, [page1[2], page1[0], page1[1]])
        assert store.selected_ids == [1, 2, 3]

    def test_empty_page_is_noop(self, store, page1):
        store.reconcile(page1, page1[:2])
        store.reconcile([], [])
        assert store.selected_ids == [1, 2]


class TestBulkSelect:
    def test_first_five(self, store, page1):
        store.bulk_select_first_n(page1[:5])
        assert ids(store.selected_items()) == [1, 2, 3, 4, 5]

    def test_n_truncates_prefix(self, store, page1):
        store.bulk_select_first_n(page1, 5)
        assert ids(store.selected_items()) == [1, 2, 3, 4, 5]

    def test_union_not_reset(self, store, page1, page2):
        store.reconcile(page2, page2[-2:])
        before = set(store.selected_ids)
        store.bulk_select_first_n(page1[:3])
        assert set(store.selected_ids) == before | {1, 2, 3}

    def test_spans_pages(self, store, dataset):
        store.bulk_select_first_n(dataset[:15])
        assert len(store) == 15
        assert 15 in store

    def test_empty_prefix(self, store):
        store.bulk_select_first_n([])
        assert len(store) == 0


class TestClear:
    def test_clear_everything(self, store, page1, page2):
        store.reconcile(page1, page1)
        store.bulk_select_first_n(page2)
        store.clear()
        assert store.selected_items() == []
        assert store.visible_selection(page1) == []
        assert store.visible_selection(page2) == []

    def test_clear_empty_store(self, store):
        store.clear()
        assert len(store) == 0


class TestPersistenceScenario:
    def test_navigate_away_and_back(self, store, page1, page2):
        store.reconcile(page1, page1)
        assert len(store.selected_items()) == 10

        # Page 2 starts with nothing checked.
        store.reconcile(page2, store.visible_selection(page2))
        store.reconcile(page2, [page2[0], page2[1]])
        assert len(store.selected_items()) == 12

        assert ids(store.visible_selection(page1)) == ids(page1)


class TestCallbacks:
    def test_notified_on_every_mutation(self, store, page1):
        calls = []
        store.on_change(lambda items: calls.append(len(items)))
        store.reconcile(page1, page1[:2])
        store.bulk_select_first_n(page1[:4])
        store.clear()
        assert calls == [2, 4, 0]

    def test_repr(self):
        store = SelectionStore()
        store.bulk_select_first_n(make_items(3))
        assert repr(store) == "SelectionStore(selected=3)"

    def test_unchanged_reconcile_does_not_notify(self, store, page1, page2):
        store.reconcile(page1, page1[:3])
        calls = []
        store.on_change(lambda items: calls.append(len(items)))
        store.reconcile(page1, page1[:3])
        store.reconcile(page2, [])
        store.bulk_select_first_n(page1[:2])
        assert calls == []

    def test_clear_empty_store_does_not_notify(self, store):
        calls = []
        store.on_change(calls.append)
        store.clear()
        assert calls == []

    def test_renamed_copy_notifies(self, store, page1):
        store.reconcile(page1, [page1[0]])
        calls = []
        store.on_change(lambda items: calls.append(items[0].title))
        refreshed = replace(page1[0], title="Renamed")
        store.reconcile([refreshed], [refreshed])
        assert calls == ["Renamed"]
