"""Phone number formatting for display. Stored values are never rewritten."""

import phonenumbers


def format_phone(raw: str, default_region: str | None = None) -> str:
    """Render a stored phone for a contact card, e.g. "+39 312 345 6789".

    Numbers stored without a country code are read against default_region
    (the CONTACTS_DEFAULT_REGION setting).
    Anything phonenumbers does not accept as a valid number is shown as typed.
    """
    if not raw or not raw.strip():
        return raw
    try:
        parsed = phonenumbers.parse(raw.strip(), default_region)
    except phonenumbers.NumberParseException:
        return raw
    if not phonenumbers.is_valid_number(parsed):
        return raw
    return phonenumbers.format_number(
        parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL
    )
