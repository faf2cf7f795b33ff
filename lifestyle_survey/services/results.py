"""
Results view model: fetch every stored survey once and summarise it.
"""

from dataclasses import dataclass
from typing import Optional

from flask import current_app

from lifestyle_survey.models.summary import SurveySummary
from lifestyle_survey.services.statistics import summarize
from lifestyle_survey.services.survey_backend import BackendError

READY = 'ready'
EMPTY = 'empty'
ERROR = 'error'

LOAD_ERROR_MESSAGE = 'Failed to load survey results. Please try again later.'


@dataclass(frozen=True)
class ResultsView:
    status: str
    summary: Optional[SurveySummary] = None
    message: Optional[str] = None


class ResultsController:
    """Loads survey results from a storage backend."""

    def __init__(self, backend):
        self.backend = backend

    def load(self) -> ResultsView:
        try:
            records = self.backend.select_all()
        except BackendError as e:
            current_app.logger.error(f"Error fetching survey results: {e}")
            return ResultsView(status=ERROR, message=LOAD_ERROR_MESSAGE)

        summary = summarize(records)
        if summary is None:
            return ResultsView(status=EMPTY)
        return ResultsView(status=READY, summary=summary)
