from flask import Blueprint, render_template

from lifestyle_survey.services.results import ResultsController
from lifestyle_survey.services.statistics import format_one_decimal
from lifestyle_survey.services.survey_backend import current_backend

results_bp = Blueprint('results', __name__)


@results_bp.app_template_filter('one_decimal')
def one_decimal_filter(value):
    return format_one_decimal(value)


@results_bp.route('/results')
def index():
    """Summary of every survey collected so far."""
    view = ResultsController(current_backend()).load()
    return render_template('results/index.html', view=view, summary=view.summary)
