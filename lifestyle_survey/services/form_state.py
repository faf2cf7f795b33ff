"""
Survey form state and transitions.

The form is modelled as an immutable FormState plus one pure function per
user action. SurveyFormController runs a submission attempt against an
injected backend, which is the only step with side effects.

    editing -> editing_with_errors            (validation failed, no insert)
    editing -> submitting -> success          (draft reset)
    editing -> submitting -> failed           (draft kept for retry)
"""

from dataclasses import dataclass, field, replace
from typing import Optional

from flask import current_app

from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.models.record import FOOD_FIELDS
from lifestyle_survey.services.survey_backend import BackendError
from lifestyle_survey.services.validation import first_error_field, validate_draft

EDITING = 'editing'
EDITING_WITH_ERRORS = 'editing_with_errors'
SUBMITTING = 'submitting'
SUCCESS = 'success'
FAILED = 'failed'

SUCCESS_MESSAGE = 'Survey Submitted Successfully!'
FAILURE_MESSAGE = 'Failed to submit survey. Please try again.'


@dataclass(frozen=True)
class FormState:
    draft: SurveyDraft = field(default_factory=SurveyDraft)
    errors: dict = field(default_factory=dict)
    status: str = EDITING
    first_error_field: Optional[str] = None
    notice: Optional[str] = None

    @property
    def is_submitting(self) -> bool:
        return self.status == SUBMITTING


def update_field(state: FormState, name: str, value) -> FormState:
    """Apply one field change and clear that field's error."""
    errors = state.errors
    if name in errors and name not in FOOD_FIELDS:
        errors = {key: message for key, message in errors.items() if key != name}

    return replace(
        state,
        draft=state.draft.with_value(name, value),
        errors=errors,
        status=EDITING_WITH_ERRORS if errors else EDITING,
        first_error_field=first_error_field(errors),
        notice=None,
    )


def request_submit(state: FormState) -> FormState:
    """Validate the draft; move to submitting only if it is complete."""
    errors = validate_draft(state.draft)
    if errors:
        return replace(
            state,
            errors=errors,
            status=EDITING_WITH_ERRORS,
            first_error_field=first_error_field(errors),
            notice=None,
        )
    return replace(state, errors={}, status=SUBMITTING, first_error_field=None, notice=None)


def submit_succeeded(state: FormState) -> FormState:
    return FormState(status=SUCCESS, notice=SUCCESS_MESSAGE)


def submit_failed(state: FormState) -> FormState:
    return replace(state, status=FAILED, notice=FAILURE_MESSAGE)


class SurveyFormController:
    """Runs survey submissions against a storage backend."""

    def __init__(self, backend):
        self.backend = backend

    def submit(self, state: FormState) -> FormState:
        state = request_submit(state)
        if state.status != SUBMITTING:
            return state

        try:
            self.backend.insert(state.draft.to_insert_payload())
        except BackendError as e:
            current_app.logger.error(f"Error submitting survey: {e}")
            return submit_failed(state)

        current_app.logger.info("Survey stored")
        return submit_succeeded(state)
