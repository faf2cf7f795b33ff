# Business logic services
from lifestyle_survey.services.survey_backend import (
    BackendError,
    SurveyBackend,
    SupabaseBackend,
    DatabaseBackend,
    build_backend,
)
from lifestyle_survey.services.validation import validate_draft
from lifestyle_survey.services.statistics import summarize
from lifestyle_survey.services.form_state import FormState, SurveyFormController
from lifestyle_survey.services.results import ResultsController, ResultsView

__all__ = [
    'BackendError',
    'SurveyBackend',
    'SupabaseBackend',
    'DatabaseBackend',
    'build_backend',
    'validate_draft',
    'summarize',
    'FormState',
    'SurveyFormController',
    'ResultsController',
    'ResultsView',
]
