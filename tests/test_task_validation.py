"""Tests for task form validation."""

import pytest
from datetime import timedelta

from taskboard.engine.validation import (
    ASSIGNEE_INVALID,
    DESCRIPTION_TOO_LONG,
    DUE_DATE_IN_PAST,
    DUE_DATE_INVALID,
    DUE_DATE_REQUIRED,
    PRIORITY_INVALID,
    PROJECT_REQUIRED,
    STATUS_INVALID,
    TASK_ID_REQUIRED,
    TITLE_INVALID_CHARACTERS,
    TITLE_REQUIRED,
    TITLE_TOO_LONG,
    apply_field_change,
    validate_identifiers,
    validate_task_form,
)
from taskboard.models.task_form import CreateTaskForm, EditTaskForm


class TestValidForms:
    """Forms that should pass."""

    def test_valid_create_form_has_no_errors(self, valid_create_form, today):
        assert validate_task_form(valid_create_form, today=today) == {}

    def test_valid_edit_form_has_no_errors(self, valid_edit_form, today):
        assert validate_task_form(valid_edit_form, today=today) == {}

    def test_validation_is_idempotent(self, today):
        form = EditTaskForm(title="Fix <script> bug", due_date="2020-01-01", status="Done")
        first = validate_task_form(form, today=today)
        second = validate_task_form(form, today=today)
        assert first == second
        assert first != {}


class TestTitle:
    def test_missing_title(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": None})
        assert validate_task_form(form, today=today) == {"title": TITLE_REQUIRED}

    def test_blank_title(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "    "})
        assert validate_task_form(form, today=today)["title"] == TITLE_REQUIRED

    def test_empty_string_title_is_absent(self, today):
        form = CreateTaskForm(title="", due_date=today.isoformat())
        assert form.title is None
        assert validate_task_form(form, today=today)["title"] == TITLE_REQUIRED

    def test_allowed_symbols_pass(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "Fix bug #42 (urgent)!"})
        assert "title" not in validate_task_form(form, today=today)

    def test_punctuation_set_passes(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "Plan: Q1 & Q2 - docs, tests; o'clock_ok?"})
        assert "title" not in validate_task_form(form, today=today)

    def test_angle_brackets_rejected(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "Fix <script> bug"})
        assert validate_task_form(form, today=today)["title"] == TITLE_INVALID_CHARACTERS

    def test_non_ascii_letters_rejected(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "Revisión"})
        assert validate_task_form(form, today=today)["title"] == TITLE_INVALID_CHARACTERS

    def test_title_at_limit(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "a" * 100})
        assert "title" not in validate_task_form(form, today=today)

    def test_title_over_limit(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "a" * 101})
        assert validate_task_form(form, today=today)["title"] == TITLE_TOO_LONG

    def test_format_reported_before_length(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"title": "<" * 150})
        assert validate_task_form(form, today=today)["title"] == TITLE_INVALID_CHARACTERS


class TestDueDate:
    def test_due_today_is_valid(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"due_date": today.isoformat()})
        assert "dueDate" not in validate_task_form(form, today=today)

    def test_due_yesterday_is_invalid(self, valid_create_form, today):
        yesterday = (today - timedelta(days=1)).isoformat()
        form = valid_create_form.model_copy(update={"due_date": yesterday})
        assert validate_task_form(form, today=today) == {"dueDate": DUE_DATE_IN_PAST}

    def test_due_date_required(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"due_date": None})
        assert validate_task_form(form, today=today)["dueDate"] == DUE_DATE_REQUIRED

    @pytest.mark.parametrize("value", ["2026-02-30", "26/01/2026", "tomorrow", "2026-1-5"])
    def test_not_a_calendar_date(self, valid_create_form, today, value):
        form = valid_create_form.model_copy(update={"due_date": value})
        assert validate_task_form(form, today=today)["dueDate"] == DUE_DATE_INVALID

    def test_boundary_follows_the_given_day(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"due_date": today.isoformat()})
        assert validate_task_form(form, today=today + timedelta(days=1)) == {"dueDate": DUE_DATE_IN_PAST}


class TestOptionalFields:
    def test_description_over_limit(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"description": "x" * 501})
        assert validate_task_form(form, today=today) == {"description": DESCRIPTION_TOO_LONG}

    def test_description_at_limit(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"description": "x" * 500})
        assert validate_task_form(form, today=today) == {}

    def test_empty_description_behaves_like_missing(self, today):
        empty = CreateTaskForm(title="Task", due_date=today.isoformat(), description="")
        missing = CreateTaskForm(title="Task", due_date=today.isoformat())
        assert empty.description is None
        assert validate_task_form(empty, today=today) == validate_task_form(missing, today=today)

    def test_short_assignee_rejected(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"assigned_to_user_id": "123"})
        assert validate_task_form(form, today=today) == {"assignedToUserId": ASSIGNEE_INVALID}

    def test_guid_assignee_accepted(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"assigned_to_user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"})
        assert validate_task_form(form, today=today) == {}

    def test_uppercase_guid_accepted(self, valid_create_form, today):
        form = valid_create_form.model_copy(update={"assigned_to_user_id": "A1B2C3D4-E5F6-7890-ABCD-EF1234567890"})
        assert validate_task_form(form, today=today) == {}

    def test_empty_assignee_is_absent(self, today):
        form = CreateTaskForm(title="Task", due_date=today.isoformat(), assigned_to_user_id="")
        assert form.assigned_to_user_id is None
        assert validate_task_form(form, today=today) == {}


class TestModeDependentFields:
    def test_edit_form_requires_status_and_priority(self, valid_edit_form, today):
        form = valid_edit_form.model_copy(update={"status": None, "priority": None})
        assert validate_task_form(form, today=today) == {
            "status": STATUS_INVALID,
            "priority": PRIORITY_INVALID,
        }

    def test_edit_form_reports_other_invalid_fields_too(self, valid_edit_form, today):
        form = valid_edit_form.model_copy(update={"status": None, "priority": None, "title": "a" * 101})
        assert set(validate_task_form(form, today=today)) == {"status", "priority", "title"}

    def test_unknown_enum_values_rejected(self, valid_edit_form, today):
        form = valid_edit_form.model_copy(update={"status": "Done", "priority": "Urgent"})
        assert validate_task_form(form, today=today) == {
            "status": STATUS_INVALID,
            "priority": PRIORITY_INVALID,
        }

    def test_create_form_never_reports_status(self, today):
        form = CreateTaskForm.model_validate(
            {"title": "Task", "dueDate": today.isoformat(), "status": "Nope", "priority": None}
        )
        errors = validate_task_form(form, today=today)
        assert "status" not in errors
        assert "priority" not in errors

    def test_same_input_differs_by_mode(self, today):
        data = {"title": "Task", "dueDate": today.isoformat()}
        assert validate_task_form(CreateTaskForm.model_validate(data), today=today) == {}
        assert "status" in validate_task_form(EditTaskForm.model_validate(data), today=today)


class TestIdentifiers:
    def test_complete_forms_pass(self, valid_create_form, valid_edit_form):
        assert validate_identifiers(valid_create_form) == {}
        assert validate_identifiers(valid_edit_form) == {}

    def test_create_form_needs_project(self, today):
        form = CreateTaskForm(title="Task", due_date=today.isoformat())
        assert validate_identifiers(form) == {"projectId": PROJECT_REQUIRED}

    def test_edit_form_needs_project_and_id(self, valid_edit_form):
        form = valid_edit_form.model_copy(update={"project_id": None, "id": None})
        assert validate_identifiers(form) == {"projectId": PROJECT_REQUIRED, "id": TASK_ID_REQUIRED}

    def test_field_rules_do_not_check_identifiers(self, valid_edit_form, today):
        form = valid_edit_form.model_copy(update={"project_id": None})
        assert validate_task_form(form, today=today) == {}

class TestApplyFieldChange:
    """Single-field edits refresh only that field's error."""

    def test_new_error_for_changed_field(self, valid_create_form, today):
        form, errors = apply_field_change(valid_create_form, "title", "Fix <b>", {}, today=today)
        assert form.title == "Fix <b>"
        assert errors == {"title": TITLE_INVALID_CHARACTERS}

    def test_other_errors_left_untouched(self, today):
        form = CreateTaskForm(title=None, due_date=today.isoformat())
        shown = {"dueDate": "previous message"}
        _, errors = apply_field_change(form, "description", "ok", shown, today=today)
        # The untouched invalid title is not flagged; the stale dueDate entry stays
        assert errors == {"dueDate": "previous message"}

    def test_error_cleared_when_fixed(self, valid_create_form, today):
        shown = {"title": TITLE_REQUIRED}
        _, errors = apply_field_change(valid_create_form, "title", "Now valid", shown, today=today)
        assert errors == {}

    def test_empty_value_clears_optional_field(self, valid_create_form, today):
        form, errors = apply_field_change(valid_create_form, "description", "", {}, today=today)
        assert form.description is None
        assert errors == {}

    def test_keeps_mode(self, valid_edit_form, today):
        form, errors = apply_field_change(valid_edit_form, "status", "", {}, today=today)
        assert isinstance(form, EditTaskForm)
        assert form.status is None
        assert errors == {"status": STATUS_INVALID}

    def test_does_not_mutate_input(self, valid_create_form, today):
        shown = {"title": TITLE_REQUIRED}
        apply_field_change(valid_create_form, "dueDate", "2000-01-01", shown, today=today)
        assert valid_create_form.due_date == today.isoformat()
        assert shown == {"title": TITLE_REQUIRED}

    @pytest.mark.parametrize("field", ["mode", "id", "projectName"])
    def test_unknown_field_rejected(self, valid_create_form, today, field):
        with pytest.raises(ValueError):
            apply_field_change(valid_create_form, field, "edit", {}, today=today)
