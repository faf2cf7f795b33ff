"""Seed script for sample survey responses (local development)."""
from lifestyle_survey.models.draft import SurveyDraft
from lifestyle_survey.services.survey_backend import current_backend
from lifestyle_survey.services.validation import validate_draft


SAMPLE_SURVEYS = [
    {
        'full_name': 'Thandi Mokoena', 'contact_number': '0821234567', 'date': '2024-03-01', 'age': 34,
        'likes_pizza': True, 'likes_papandwors': True,
        'rating_eatout': 2, 'rating_watchmovies': 1, 'rating_watchtv': 3, 'rating_listenradio': 4,
    },
    {
        'full_name': 'Pieter van Wyk', 'contact_number': '0839876543', 'date': '2024-03-02', 'age': 58,
        'likes_pasta': True, 'likes_chickenstirfry': True,
        'rating_eatout': 4, 'rating_watchmovies': 3, 'rating_watchtv': 1, 'rating_listenradio': 1,
    },
    {
        'full_name': 'Aisha Patel', 'contact_number': '0715550101', 'date': '2024-03-02', 'age': 21,
        'likes_pizza': True, 'likes_pasta': True,
        'rating_eatout': 1, 'rating_watchmovies': 2, 'rating_watchtv': 2, 'rating_listenradio': 5,
    },
    {
        'full_name': 'Sipho Dlamini', 'contact_number': '0607778888', 'date': '2024-03-04', 'age': 12,
        'likes_papandwors': True,
        'rating_eatout': 3, 'rating_watchmovies': 1, 'rating_watchtv': 1, 'rating_listenradio': 3,
    },
]


def seed_surveys(backend=None):
    """Insert the sample surveys through the backend. Returns summary."""
    backend = backend or current_backend()
    added = 0
    skipped = 0

    for sample in SAMPLE_SURVEYS:
        draft = SurveyDraft.from_json(sample)
        if validate_draft(draft):
            skipped += 1
            continue
        backend.insert(draft.to_insert_payload())
        added += 1

    return {
        'added': added,
        'skipped': skipped,
        'total': len(backend.select_all())
    }
