"""
Tests for building drafts and records from incoming data.
"""

from datetime import date

from werkzeug.datastructures import MultiDict

from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.models.record import SurveyRecord


def test_draft_from_form():
    form = MultiDict({
        'full_name': 'Jane Doe',
        'contact_number': '0821234567',
        'date': '2024-03-01',
        'age': ' 29 ',
        'likes_pizza': 'on',
        'rating_eatout': '4',
        'rating_watchtv': '2',
    })
    draft = SurveyDraft.from_form(form)

    assert draft.date == date(2024, 3, 1)
    assert draft.age == '29'
    assert draft.likes_pizza is True
    assert draft.likes_pasta is False
    assert draft.rating_eatout == 4
    assert draft.rating_watchtv == 2
    assert draft.rating_watchmovies == 0


def test_draft_from_form_with_bad_values():
    draft = SurveyDraft.from_form(MultiDict({'date': 'yesterday', 'rating_eatout': 'five'}))
    assert draft.date is None
    assert draft.rating_eatout == 0


def test_draft_from_json():
    draft = SurveyDraft.from_json({
        'full_name': 'Jane Doe',
        'date': '2024-03-01',
        'age': 29,
        'likes_papandwors': True,
        'rating_listenradio': 5,
    })

    assert draft.age == '29'
    assert draft.contact_number == ''
    assert draft.likes_papandwors is True
    assert draft.rating_listenradio == 5


def test_insert_payload_converts_types():
    draft = SurveyDraft(full_name='Jane Doe', contact_number='1', date=date(2024, 12, 31), age='120')
    payload = draft.to_insert_payload()

    assert payload['date'] == '2024-12-31'
    assert payload['age'] == 120
    assert set(payload) == {
        'full_name', 'contact_number', 'date', 'age',
        'likes_pizza', 'likes_pasta', 'likes_papandwors', 'likes_chickenstirfry',
        'rating_eatout', 'rating_watchmovies', 'rating_watchtv', 'rating_listenradio',
    }


def test_record_from_row_accepts_date_objects():
    record = SurveyRecord.from_row({
        'full_name': 'Jane', 'contact_number': '1', 'date': date(2024, 3, 1), 'age': 29,
        'rating_watchMovies': 3,
    })
    assert record.date == '2024-03-01'
    assert record.rating_watchmovies == 3
    assert record.created_at is None


def test_draft_from_json_reads_whole_ratings_only():
    draft = SurveyDraft.from_json({'rating_eatout': 4.9, 'rating_watchtv': '4.9', 'rating_listenradio': ' 3 '})

    assert draft.rating_eatout == 0
    assert draft.rating_watchtv == 0
    assert draft.rating_listenradio == 3
