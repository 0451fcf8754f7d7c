"""Task form validation for taskboard.

Turns a task form into a FieldErrors mapping (wire field name -> message).
A field missing from the mapping is valid; an empty mapping means the whole
form can be submitted. Each field reports at most one error, checked in the
order presence, format, then length/range.

Validation is a pure function of the form and the current date. The date is
re-read on every call so the boundary is the day of submission, not the day
the form was opened.
"""

import re
from datetime import date
from typing import Any, Dict, Optional, Tuple

from taskboard.models.constants import TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
from taskboard.models.task import TaskStatus, TaskPriority
from taskboard.models.task_form import TASK_FORM_FIELDS, EditTaskForm, TaskFormState
from taskboard.models.task_factory import today_utc


FieldErrors = Dict[str, str]

TITLE_PATTERN = re.compile(r"[a-zA-Z0-9\s.,;:_!?()&'#-]*")
GUID_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")

TITLE_REQUIRED = "El título no puede estar vacío."
TITLE_INVALID_CHARACTERS = (
    "El título solo puede contener letras, números, espacios y símbolos "
    "como . , ; : _ ! ? ( ) & ' # -."
)
TITLE_TOO_LONG = f"El título no puede exceder los {TITLE_MAX_LENGTH} caracteres."
DUE_DATE_REQUIRED = "La fecha de vencimiento es requerida."
DUE_DATE_INVALID = "La fecha de vencimiento no es una fecha válida."
DUE_DATE_IN_PAST = "La fecha de vencimiento no puede ser anterior a hoy."
DESCRIPTION_TOO_LONG = f"La descripción no puede exceder los {DESCRIPTION_MAX_LENGTH} caracteres."
ASSIGNEE_INVALID = "El ID de usuario asignado debe ser un formato GUID válido."
STATUS_INVALID = "Estado inválido."
PRIORITY_INVALID = "Prioridad inválida."
PROJECT_REQUIRED = "La tarea debe pertenecer a un proyecto."
TASK_ID_REQUIRED = "Falta el identificador de la tarea."

_STATUS_VALUES = {status.value for status in TaskStatus}
_PRIORITY_VALUES = {priority.value for priority in TaskPriority}


def parse_form_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string, returning None if it is not a real calendar date."""
    if not value or not DATE_PATTERN.fullmatch(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_guid(value: str) -> bool:
    """Check the canonical 8-4-4-4-12 hexadecimal identifier format."""
    return GUID_PATTERN.fullmatch(value) is not None


def validate_title(title: Optional[str]) -> Optional[str]:
    if not title or title.strip() == "":
        return TITLE_REQUIRED
    if not TITLE_PATTERN.fullmatch(title):
        return TITLE_INVALID_CHARACTERS
    if len(title) > TITLE_MAX_LENGTH:
        return TITLE_TOO_LONG
    return None


def validate_due_date(due_date: Optional[str], today: date) -> Optional[str]:
    if not due_date:
        return DUE_DATE_REQUIRED
    parsed = parse_form_date(due_date)
    if parsed is None:
        return DUE_DATE_INVALID
    if parsed < today:
        return DUE_DATE_IN_PAST
    return None


def validate_description(description: Optional[str]) -> Optional[str]:
    if description and len(description) > DESCRIPTION_MAX_LENGTH:
        return DESCRIPTION_TOO_LONG
    return None


def validate_assignee(user_id: Optional[str]) -> Optional[str]:
    if user_id and not is_guid(user_id):
        return ASSIGNEE_INVALID
    return None


def validate_status(status: Optional[str]) -> Optional[str]:
    if not status or status not in _STATUS_VALUES:
        return STATUS_INVALID
    return None


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if not priority or priority not in _PRIORITY_VALUES:
        return PRIORITY_INVALID
    return None


def validate_task_form(form: TaskFormState, today: Optional[date] = None) -> FieldErrors:
    """Validate a task form.

    Status and priority are only checked for edit forms; a create form never
    reports them, whatever the input held.

    Args:
        form: Create or edit form state
        today: Current date (defaults to today in UTC)

    Returns:
        FieldErrors keyed by wire field name (empty if the form is valid)
    """
    today = today or today_utc()
    checks = {
        "title": validate_title(form.title),
        "dueDate": validate_due_date(form.due_date, today),
        "description": validate_description(form.description),
        "assignedToUserId": validate_assignee(form.assigned_to_user_id),
    }
    if isinstance(form, EditTaskForm):
        checks["status"] = validate_status(form.status)
        checks["priority"] = validate_priority(form.priority)

    return {field: message for field, message in checks.items() if message is not None}


def validate_identifiers(form: TaskFormState) -> FieldErrors:
    """Check the identifiers a command needs but the user never types.

    The owning project is required in both modes; an edit form must also
    carry the id of the task it edits.
    """
    errors = {}
    if not form.project_id:
        errors["projectId"] = PROJECT_REQUIRED
    if isinstance(form, EditTaskForm) and not form.id:
        errors["id"] = TASK_ID_REQUIRED
    return errors


def apply_field_change(
    form: TaskFormState,
    field: str,
    value: Any,
    errors: Optional[FieldErrors] = None,
    today: Optional[date] = None,
) -> Tuple[TaskFormState, FieldErrors]:
    """Apply a single field edit and refresh only that field's error.

    The whole form is re-validated, but errors already shown for other fields
    are kept as they were so typing in one input never flags an untouched one.

    Args:
        form: Current form state
        field: Wire name of the changed field (e.g. "dueDate")
        value: New raw value; an empty string clears the field
        errors: Errors currently shown
        today: Current date (defaults to today in UTC)

    Returns:
        Tuple of (updated form, updated errors)

    Raises:
        ValueError: If field is not an editable form input
    """
    if field not in TASK_FORM_FIELDS:
        raise ValueError(f"Unknown form field: {field!r}")

    data = form.model_dump(by_alias=True)
    data[field] = value
    updated = type(form).model_validate(data)

    current = validate_task_form(updated, today=today)
    merged = dict(errors or {})
    if field in current:
        merged[field] = current[field]
    else:
        merged.pop(field, None)
    return updated, merged
