"""
Survey form routes - the default "Fill Out Survey" view.
"""

from flask import Blueprint, render_template, request, redirect, url_for, flash, current_app

from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.models.record import FOOD_FIELDS, FOOD_LABELS, RATING_FIELDS, RATING_LABELS
from lifestyle_survey.services.form_state import (
    FormState,
    SurveyFormController,
    EDITING_WITH_ERRORS,
    SUCCESS,
)
from lifestyle_survey.services.survey_backend import current_backend

survey_bp = Blueprint('survey', __name__)


def render_form(state, status_code=200):
    return render_template(
        'survey/form.html',
        state=state,
        draft=state.draft,
        errors=state.errors,
        food_fields=[(name, FOOD_LABELS[name]) for name in FOOD_FIELDS],
        rating_fields=[(name, RATING_LABELS[name]) for name in RATING_FIELDS],
        success_seconds=current_app.config['SUCCESS_BANNER_SECONDS'],
    ), status_code


@survey_bp.route('/')
def index():
    """Empty survey form."""
    return render_form(FormState())


@survey_bp.route('/', methods=['POST'])
def submit():
    """Validate and store one survey response."""
    state = FormState(draft=SurveyDraft.from_form(request.form))
    state = SurveyFormController(current_backend()).submit(state)

    if state.status == SUCCESS:
        # Redirect so a refresh does not resubmit; the banner comes from the flash
        flash(state.notice, 'success')
        return redirect(url_for('survey.index'))

    if state.status == EDITING_WITH_ERRORS:
        return render_form(state, 400)

    return render_form(state)
