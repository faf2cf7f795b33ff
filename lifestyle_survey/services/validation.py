"""
Field validation for survey drafts.

Validation is a pure function of the draft: it returns a mapping of field
name to error message, and an empty mapping means the draft can be stored.
"""

from lifestyle_survey.models.record import RATING_FIELDS

MIN_AGE = 5
MAX_AGE = 120

# Order in which fields appear on the form; used to pick the first error.
FIELD_ORDER = ('full_name', 'contact_number', 'date', 'age') + RATING_FIELDS


def validate_age(age: str):
    """Return an error message for the raw age text, or None if it is valid."""
    if not age:
        return 'Age is required'
    # Plain ASCII digits only
    if not (age.isascii() and age.isdigit()):
        return f'Age must be between {MIN_AGE} and {MAX_AGE}'
    value = int(age)
    if value < MIN_AGE or value > MAX_AGE:
        return f'Age must be between {MIN_AGE} and {MAX_AGE}'
    return None


def validate_draft(draft) -> dict:
    """Check every field of a draft and collect the failures."""
    errors = {}

    if not draft.full_name.strip():
        errors['full_name'] = 'Full name is required'

    if not draft.contact_number.strip():
        errors['contact_number'] = 'Contact number is required'

    if draft.date is None:
        errors['date'] = 'Date is required'

    age_error = validate_age(draft.age)
    if age_error:
        errors['age'] = age_error

    for field in RATING_FIELDS:
        rating = getattr(draft, field)
        if not 1 <= rating <= 5:
            errors[field] = 'Please select a rating'

    return errors


def first_error_field(errors: dict):
    """The invalid field that comes first on the form, if any."""
    for field in FIELD_ORDER:
        if field in errors:
            return field
    return None
