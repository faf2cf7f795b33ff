"""
Storage backends for survey responses.

Both backends expose the same two operations:
- insert(payload): append one row; the backend assigns id and created_at
- select_all(): every stored row as a list of SurveyRecord

The hosted backend talks to the Supabase REST API (PostgREST).
The database backend writes to the same `surveys` table through
Flask-SQLAlchemy, for local development or a direct Postgres connection.

Failures of either kind are raised as BackendError.
"""

from datetime import date

import requests
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from lifestyle_survey import db
from lifestyle_survey.models.record import SurveyRecord
from lifestyle_survey.models.survey import Survey


class BackendError(Exception):
    """A backend call was rejected or could not be completed."""


class SurveyBackend:
    """Interface every storage backend implements."""

    def insert(self, payload: dict) -> None:
        raise NotImplementedError

    def select_all(self) -> list:
        raise NotImplementedError


class SupabaseBackend(SurveyBackend):
    """Survey storage in a hosted Supabase table."""

    def __init__(self, url: str, api_key: str, table: str = 'surveys', timeout: float = 10, session=None):
        if not url or not api_key:
            raise ValueError("Supabase URL and anon key are required")
        self.base_url = url.rstrip('/')
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/rest/v1/{self.table}"

    def _headers(self, **extra) -> dict:
        headers = {
            'apikey': self.api_key,
            'Authorization': f'Bearer {self.api_key}',
            'Content-Type': 'application/json',
        }
        headers.update(extra)
        return headers

    def _request(self, method: str, **kwargs):
        try:
            response = self.session.request(method, self.endpoint, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            current_app.logger.error("Supabase API timeout")
            raise BackendError('Request timed out') from e
        except requests.exceptions.RequestException as e:
            current_app.logger.error(f"Supabase API exception: {e}")
            raise BackendError(str(e)) from e

        if not response.ok:
            current_app.logger.error(f"Supabase API error: {response.status_code} - {response.text}")
            raise BackendError(f'API error: {response.status_code}')
        return response

    def insert(self, payload: dict) -> None:
        self._request(
            'POST',
            headers=self._headers(Prefer='return=minimal'),
            json=[payload],
        )

    def select_all(self) -> list:
        response = self._request(
            'GET',
            headers=self._headers(),
            params={'select': '*'},
        )
        try:
            rows = response.json()
            return [SurveyRecord.from_row(row) for row in rows]
        except (ValueError, KeyError, TypeError) as e:
            raise BackendError(f'Unexpected response: {e}') from e


class DatabaseBackend(SurveyBackend):
    """Survey storage through the application's SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def insert(self, payload: dict) -> None:
        row = dict(payload)
        if isinstance(row.get('date'), str):
            row['date'] = date.fromisoformat(row['date'])

        try:
            self.session.add(Survey(**row))
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise BackendError(str(e)) from e

    def select_all(self) -> list:
        try:
            return [survey.to_record() for survey in self.session.query(Survey).all()]
        except SQLAlchemyError as e:
            self.session.rollback()
            raise BackendError(str(e)) from e


def build_backend(config) -> SurveyBackend:
    """Pick a backend from the app configuration.

    SURVEY_BACKEND may be 'supabase', 'database' or 'auto'. With 'auto' the
    hosted table is used whenever its URL and key are configured.
    """
    choice = (config.get('SURVEY_BACKEND') or 'auto').lower()
    url = config.get('SUPABASE_URL')
    api_key = config.get('SUPABASE_ANON_KEY')

    if choice == 'auto':
        choice = 'supabase' if url and api_key else 'database'

    if choice == 'supabase':
        return SupabaseBackend(
            url,
            api_key,
            table=config.get('SURVEY_TABLE', 'surveys'),
            timeout=config.get('SUPABASE_TIMEOUT', 10),
        )
    if choice == 'database':
        return DatabaseBackend(db.session)

    raise ValueError(f"Unknown SURVEY_BACKEND: {choice}")


def current_backend() -> SurveyBackend:
    """The backend configured for the running app."""
    return current_app.extensions['survey_backend']
