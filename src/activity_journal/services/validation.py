"""Field rules for activity drafts."""

from activity_journal.domain.activities import ActivityDraft

FieldErrors = dict[str, str]

_REQUIRED_MESSAGES: dict[str, str] = {
    "title": "Title is required",
    "description": "Description is required",
    "date": "Date is required",
}

# Only the title is checked after trimming.
_TRIMMED_FIELDS: frozenset[str] = frozenset({"title"})


def validate_draft(draft: ActivityDraft) -> FieldErrors:
    """Return an error message for every required field left empty."""
    errors: FieldErrors = {}
    for name, message in _REQUIRED_MESSAGES.items():
        value = getattr(draft, name, None)
        if value is None:
            errors[name] = message
            continue
        text = str(value)
        if name in _TRIMMED_FIELDS:
            text = text.strip()
        if not text:
            errors[name] = message
    return errors
