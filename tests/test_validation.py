"""Tests for draft validation."""

import pytest

from activity_journal.domain.activities import ActivityDraft
from activity_journal.services.validation import validate_draft


def _draft(**overrides: str) -> ActivityDraft:
    values = {"title": "Walk", "description": "Evening walk", "date": "2024-01-01"}
    values.update(overrides)
    return ActivityDraft(id=1, **values)


def test_complete_draft_has_no_errors() -> None:
    assert validate_draft(_draft()) == {}


@pytest.mark.parametrize(
    ("field_name", "message"),
    [
        ("title", "Title is required"),
        ("description", "Description is required"),
        ("date", "Date is required"),
    ],
)
def test_empty_field_reports_required(field_name: str, message: str) -> None:
    errors = validate_draft(_draft(**{field_name: ""}))

    assert errors == {field_name: message}


def test_whitespace_title_is_empty() -> None:
    assert validate_draft(_draft(title="   ")) == {"title": "Title is required"}


def test_whitespace_description_counts_as_filled() -> None:
    assert validate_draft(_draft(description="  ")) == {}


def test_all_errors_reported_together() -> None:
    errors = validate_draft(_draft(title="", description="", date=""))

    assert set(errors) == {"title", "description", "date"}


def test_photo_is_optional() -> None:
    draft = _draft()
    draft.photo = None

    assert validate_draft(draft) == {}
