"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from datetime import date, datetime

import pytest

from club.domain import EventDate, EventId, EventTypeId, EventTypeName, MemberId, Name
from club.domain.errors import (
    AlreadyRegisteredError,
    ErrorCode,
    ErrorKind,
    InvalidIdError,
    StoreFailureError,
)


class TestIdentifiers:
    """Tests for the integer id value objects."""

    @pytest.mark.parametrize("raw", ["7", " 7 ", 7])
    def test_from_string_accepts_positive_integers(self, raw):
        assert EventTypeId.from_string(raw) == EventTypeId(7)

    @pytest.mark.parametrize(
        "raw",
        ["abc", "0", "-3", "1.5", "", None, 1.5, True, "2147483648", "99999999999999999999"],
    )
    def test_from_string_rejects_non_identifiers(self, raw):
        with pytest.raises(ValueError):
            MemberId.from_string(raw)

    def test_largest_database_id_is_accepted(self):
        assert EventId.from_string("2147483647").value == 2**31 - 1

    def test_ids_of_different_entities_are_not_equal(self):
        assert EventId(1) != EventTypeId(1)

    def test_str_is_the_number(self):
        assert str(EventId(12)) == "12"


class TestName:
    """Tests for Name value objects."""

    def test_from_input_trims_whitespace(self):
        assert Name.from_input("  Ana  ").value == "Ana"

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_from_input_rejects_missing_name(self, raw):
        with pytest.raises(ValueError, match="Name is required"):
            Name.from_input(raw)

    def test_from_input_rejects_non_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            Name.from_input(42)

    def test_event_type_name_is_capped_at_100_characters(self):
        EventTypeName.from_input("x" * 100)
        with pytest.raises(ValueError, match="at most 100"):
            EventTypeName.from_input("x" * 101)

    def test_member_name_is_capped_at_200_characters(self):
        with pytest.raises(ValueError, match="at most 200"):
            Name.from_input("x" * 201)


class TestEventDate:
    """Tests for EventDate."""

    def test_parses_iso_date(self):
        assert EventDate.from_input("2025-06-01").value == date(2025, 6, 1)

    def test_truncates_iso_datetime(self):
        assert EventDate.from_input("2025-06-01T18:30:00").value == date(2025, 6, 1)

    def test_accepts_date_and_datetime_objects(self):
        assert EventDate.from_input(date(2025, 6, 1)).value == date(2025, 6, 1)
        assert EventDate.from_input(datetime(2025, 6, 1, 9)).value == date(2025, 6, 1)

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing_date(self, raw):
        with pytest.raises(ValueError, match="Date is required"):
            EventDate.from_input(raw)

    @pytest.mark.parametrize("raw", ["2025-13-01", "next tuesday", 20250601])
    def test_malformed_date(self, raw):
        with pytest.raises(ValueError, match="Invalid date format"):
            EventDate.from_input(raw)


class TestDomainErrors:
    """Tests for the error taxonomy."""

    def test_errors_carry_kind_code_and_message(self):
        error = AlreadyRegisteredError()
        assert error.kind is ErrorKind.CONFLICT
        assert error.code is ErrorCode.ALREADY_REGISTERED
        assert str(error) == "ALREADY_REGISTERED: Member is already registered for this event"

    def test_invalid_id_names_the_resource(self):
        assert InvalidIdError("event type").message == "Invalid event type ID"

    def test_store_failure_message_is_generic(self):
        error = StoreFailureError()
        assert error.kind is ErrorKind.INTERNAL
        assert error.message == "Database query failed"
