"""Tests for input validation."""

import pytest

from paged_selection.core.errors import InvalidBulkCount
from paged_selection.core.validation import (
    clamp_bulk_count,
    parse_bulk_count,
    validate_page_index,
    validate_page_size,
)


class TestParseBulkCount:
    @pytest.mark.parametrize("raw, expected", [("5", 5), (" 12 ", 12), (7, 7), ("+3", 3)])
    def test_valid(self, raw, expected):
        assert parse_bulk_count(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "0", "-3", "2.5", "1e3", None, 0, -1, 2.0, True])
    def test_invalid(self, raw):
        with pytest.raises(InvalidBulkCount):
            parse_bulk_count(raw)

    def test_is_value_error(self):
        with pytest.raises(ValueError, match="positive whole number"):
            parse_bulk_count("nope")


class TestClampBulkCount:
    def test_within_range(self):
        assert clamp_bulk_count(5, 25) == 5

    def test_above_dataset_size(self):
        assert clamp_bulk_count(100, 25) == 25

    def test_empty_dataset(self):
        assert clamp_bulk_count(5, 0) == 0


class TestPageChecks:
    def test_page_index_one_based(self):
        assert validate_page_index(1) == 1
        with pytest.raises(ValueError, match="1-based"):
            validate_page_index(0)

    def test_page_index_type(self):
        with pytest.raises(TypeError):
            validate_page_index("2")

    def test_page_size_options(self):
        assert validate_page_size(20, [10, 20, 50]) == 20
        with pytest.raises(ValueError, match="Unsupported page size"):
            validate_page_size(15, [10, 20, 50])

    def test_page_size_positive(self):
        with pytest.raises(ValueError, match="positive"):
            validate_page_size(0)
