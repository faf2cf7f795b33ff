"""
API routes for JSON clients.

Includes:
- Survey submission
- Summary statistics over all stored surveys
"""

from flask import Blueprint, request, jsonify

from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.services.form_state import FormState, SurveyFormController, EDITING_WITH_ERRORS, SUCCESS
from lifestyle_survey.services.results import ResultsController, ERROR
from lifestyle_survey.services.survey_backend import current_backend

api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/surveys', methods=['POST'])
def submit_survey():
    """
    Store one survey response.

    Body: JSON object with the survey fields (date as YYYY-MM-DD).

    Returns:
        201 with 'success' on insert, 400 with per-field 'errors' when
        validation fails, 502 with 'error' when the backend rejects it.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'success': False, 'error': 'Expected a JSON object'}), 400

    state = FormState(draft=SurveyDraft.from_json(data))
    state = SurveyFormController(current_backend()).submit(state)

    if state.status == SUCCESS:
        return jsonify({'success': True}), 201

    if state.status == EDITING_WITH_ERRORS:
        return jsonify({'success': False, 'errors': state.errors}), 400

    return jsonify({'success': False, 'error': state.notice}), 502


@api_bp.route('/results')
def get_results():
    """
    Summary statistics over every stored survey.

    Returns:
        JSON with 'success' and 'summary' (null when no surveys exist yet)
    """
    view = ResultsController(current_backend()).load()

    if view.status == ERROR:
        return jsonify({'success': False, 'error': view.message}), 502

    return jsonify({
        'success': True,
        'summary': view.summary.to_dict() if view.summary else None,
    })
