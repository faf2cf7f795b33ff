"""
Tests for the results controller.
"""

from lifestyle_survey.services.results import EMPTY, ERROR, LOAD_ERROR_MESSAGE, READY, ResultsController
from conftest import FakeBackend, make_row


def test_load_with_rows(app):
    backend = FakeBackend(rows=[make_row(age=20), make_row(age=40, likes_pizza=True)])
    with app.app_context():
        view = ResultsController(backend).load()

    assert view.status == READY
    assert view.summary.total_surveys == 2
    assert view.summary.percentage_pizza_lovers == 50.0


def test_load_without_rows(app):
    with app.app_context():
        view = ResultsController(FakeBackend()).load()

    assert view.status == EMPTY
    assert view.summary is None


def test_load_failure(app):
    with app.app_context():
        view = ResultsController(FakeBackend(fail_select=True)).load()

    assert view.status == ERROR
    assert view.message == LOAD_ERROR_MESSAGE
    assert view.summary is None
