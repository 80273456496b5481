# src/task_tracker/tasks/task_validation.py

"""
Form validation for task drafts.

Returns field -> FieldError; an empty dict means the draft is acceptable.
All length checks run on the trimmed value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .task_models import Priority, TaskDraft

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class ValidationReason(StrEnum):
    REQUIRED = "required"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class FieldError:
    reason: ValidationReason
    message: str


def _check_title(title: str) -> FieldError | None:
    if not title:
        return FieldError(ValidationReason.REQUIRED, "Title is required")
    if len(title) < TITLE_MIN_LENGTH:
        return FieldError(
            ValidationReason.TOO_SHORT,
            f"Title must be at least {TITLE_MIN_LENGTH} characters long",
        )
    if len(title) > TITLE_MAX_LENGTH:
        return FieldError(
            ValidationReason.TOO_LONG,
            f"Title must be less than {TITLE_MAX_LENGTH} characters",
        )
    return None


def _check_description(description: str) -> FieldError | None:
    if len(description) > DESCRIPTION_MAX_LENGTH:
        return FieldError(
            ValidationReason.TOO_LONG,
            f"Description must be less than {DESCRIPTION_MAX_LENGTH} characters",
        )
    return None


def _check_priority(priority: str) -> FieldError | None:
    if Priority.from_raw(priority) is None:
        return FieldError(ValidationReason.INVALID, "Priority must be low, medium or high")
    return None


def validate_draft(draft: TaskDraft) -> dict[str, FieldError]:
    clean = draft.normalized()
    errors: dict[str, FieldError] = {}

    for field_name, err in (
        ("title", _check_title(clean.title)),
        ("description", _check_description(clean.description)),
        ("priority", _check_priority(clean.priority)),
    ):
        if err is not None:
            errors[field_name] = err

    return errors


def validate_fields(
    *,
    title: str | None = None,
    description: str | None = None,
    priority: str | None = None,
) -> dict[str, FieldError]:
    """Validate only the fields an edit actually touches."""
    errors: dict[str, FieldError] = {}

    if title is not None:
        err = _check_title(title.strip())
        if err is not None:
            errors["title"] = err

    if description is not None:
        err = _check_description(description.strip())
        if err is not None:
            errors["description"] = err

    if priority is not None:
        err = _check_priority(priority)
        if err is not None:
            errors["priority"] = err

    return errors
