"""Shared test fixtures for paged-selection."""

import pytest

from paged_selection.core.item import Item
from paged_selection.core.selection_store import SelectionStore
from paged_selection.source.memory import InMemoryPageSource


def make_items(n, start=1):
    """n artworks with ids start..start+n-1."""
    return [
        Item(
            id=i,
            title=f"Artwork {i}",
            place_of_origin="Paris",
            artist_display=f"Artist {i}",
            inscriptions="",
            date_start=1900 + i,
            date_end=1901 + i,
        )
        for i in range(start, start + n)
    ]


@pytest.fixture
def dataset():
    """25 items: pages of 10, 10 and 5 at the default page size."""
    return make_items(25)


@pytest.fixture
def page1(dataset):
    return dataset[0:10]


@pytest.fixture
def page2(dataset):
    return dataset[10:20]


@pytest.fixture
def page3(dataset):
    return dataset[20:25]


@pytest.fixture
def store():
    return SelectionStore()


@pytest.fixture
def source(dataset):
    return InMemoryPageSource(dataset)
