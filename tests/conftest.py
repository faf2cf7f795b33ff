import pytest

from lifestyle_survey import create_app
from lifestyle_survey.models.record import SurveyRecord
from lifestyle_survey.services.survey_backend import BackendError, SurveyBackend


class FakeBackend(SurveyBackend):
    """In-memory backend that records every call."""

    def __init__(self, rows=None, fail_insert=False, fail_select=False):
        self.rows = list(rows or [])
        self.inserted = []
        self.fail_insert = fail_insert
        self.fail_select = fail_select

    def insert(self, payload):
        if self.fail_insert:
            raise BackendError('insert rejected')
        self.inserted.append(payload)
        row = dict(payload, id=len(self.rows) + 1, created_at='2024-03-01T10:00:00+00:00')
        self.rows.append(row)

    def select_all(self):
        if self.fail_select:
            raise BackendError('select rejected')
        return [SurveyRecord.from_row(row) for row in self.rows]


def make_row(**overrides):
    row = {
        'full_name': 'Jane Doe',
        'contact_number': '0821234567',
        'date': '2024-03-01',
        'age': 29,
        'likes_pizza': False,
        'likes_pasta': False,
        'likes_papandwors': False,
        'likes_chickenstirfry': False,
        'rating_eatout': 4,
        'rating_watchmovies': 4,
        'rating_watchtv': 4,
        'rating_listenradio': 4,
    }
    row.update(overrides)
    return row


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def app(backend):
    return create_app('testing', backend=backend)


@pytest.fixture
def client(app):
    return app.test_client()
