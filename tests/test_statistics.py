"""
Unit tests for the survey statistics reducer.
"""

import pytest

from lifestyle_survey.models.record import SurveyRecord
from lifestyle_survey.services.statistics import format_one_decimal, summarize
from conftest import make_row


def records(*rows):
    return [SurveyRecord.from_row(make_row(**row)) for row in rows]


def test_empty_input_has_no_summary():
    assert summarize([]) is None


def test_total_matches_record_count():
    summary = summarize(records(*[{} for _ in range(7)]))
    assert summary.total_surveys == 7


def test_age_statistics():
    summary = summarize(records({'age': 20}, {'age': 30}, {'age': 40}))

    assert summary.average_age == 30.0
    assert summary.oldest_person == 40
    assert summary.youngest_person == 20


def test_pizza_percentage():
    summary = summarize(records(
        {'likes_pizza': True},
        {'likes_pizza': False},
        {'likes_pizza': False},
        {'likes_pizza': False},
    ))
    assert summary.percentage_pizza_lovers == 25.0


def test_averages_keep_full_precision():
    summary = summarize(records(
        {'age': 20, 'rating_eatout': 1, 'likes_pizza': True},
        {'age': 21, 'rating_eatout': 2},
        {'age': 21, 'rating_eatout': 2},
    ))

    assert summary.average_age == pytest.approx(62 / 3)
    assert summary.average_eat_out_rating == pytest.approx(5 / 3)
    assert summary.percentage_pizza_lovers == pytest.approx(100 / 3)
    assert format_one_decimal(summary.average_age) == '20.7'
    assert format_one_decimal(summary.percentage_pizza_lovers) == '33.3'


def test_single_record():
    summary = summarize(records({'age': 55, 'rating_eatout': 5, 'likes_pizza': True}))

    assert summary.total_surveys == 1
    assert summary.oldest_person == summary.youngest_person == 55
    assert summary.percentage_pizza_lovers == 100.0
    assert summary.average_eat_out_rating == 5.0


def test_accepts_a_generator():
    rows = (SurveyRecord.from_row(make_row(age=age)) for age in (10, 90))
    summary = summarize(rows)
    assert summary.total_surveys == 2
    assert summary.average_age == 50.0
