"""Form validation and command mapping for taskboard."""

from taskboard.engine.validation import FieldErrors, validate_task_form, validate_identifiers, apply_field_change
from taskboard.engine.commands import to_task_command, build_task_command, to_project_command
from taskboard.engine.mutators import with_status, with_assignee

__all__ = [
    "FieldErrors",
    "validate_task_form",
    "validate_identifiers",
    "apply_field_change",
    "to_task_command",
    "build_task_command",
    "to_project_command",
    "with_status",
    "with_assignee",
]
