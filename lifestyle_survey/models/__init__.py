# Import all models here so they're registered with SQLAlchemy
from lifestyle_survey.models.record import SurveyRecord, FOOD_FIELDS, RATING_FIELDS
from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.models.summary import SurveySummary
from lifestyle_survey.models.survey import Survey

__all__ = ['SurveyRecord', 'SurveyDraft', 'SurveySummary', 'Survey', 'FOOD_FIELDS', 'RATING_FIELDS']
