"""Unit tests for ContactCard parsing and accessors."""

from datetime import date

import pytest

from skillbench.contexts.text.contact_card import Age, ContactCard, period_between
from skillbench.exceptions import FormatMismatchError, MissingElementError

CARD = "\r\n".join(
    [
        "BEGIN:VCARD",
        "FN:Forrest Gump",
        "ORG:Bubba Gump Shrimp Co.",
        "BDAY:06-06-1944",
        "TEL;TYPE=WORK,VOICE:4951234567",
        "TEL;TYPE=CELL:9150123456",
        "END:VCARD",
    ]
)


def card_with(*fields: str) -> str:
    return "\n".join(["BEGIN:VCARD", *fields, "END:VCARD"])


@pytest.mark.unit
def test_parse_full_card():
    """Test parsing a card with every field present."""
    card = ContactCard.from_text(CARD)

    assert card.full_name == "Forrest Gump"
    assert card.organization == "Bubba Gump Shrimp Co."
    assert card.birthday == date(1944, 6, 6)
    assert card.phones == {"WORK,VOICE": "4951234567", "CELL": "9150123456"}


@pytest.mark.unit
def test_parse_minimal_card_lf_endings():
    """Test that optional fields are absent and LF line endings work."""
    card = ContactCard.from_text(card_with("FN:Jenny Curran", "ORG:Greenbow"))

    assert card.gender is None
    assert card.birthday is None
    assert card.phones == {}
    assert card.is_woman() is False


@pytest.mark.unit
def test_gender_and_is_woman():
    """Test GENDER:F and GENDER:M."""
    woman = ContactCard.from_text(card_with("FN:Jenny Curran", "ORG:Greenbow", "GENDER:F"))
    man = ContactCard.from_text(card_with("FN:Forrest Gump", "ORG:Greenbow", "GENDER:M"))

    assert woman.is_woman() is True
    assert man.is_woman() is False


@pytest.mark.unit
def test_duplicate_phone_type_overwrites():
    """Test that a repeated TEL type keeps the last number."""
    card = ContactCard.from_text(
        card_with("FN:A B", "ORG:C", "TEL;TYPE=HOME:1111111111", "TEL;TYPE=HOME:2222222222")
    )
    assert card.phones == {"HOME": "2222222222"}


@pytest.mark.unit
def test_get_phone_formats_digits():
    """Test "(ddd) ddd-dddd" phone formatting."""
    card = ContactCard.from_text(CARD)
    assert card.get_phone("WORK,VOICE") == "(495) 123-4567"


@pytest.mark.unit
def test_get_phone_unknown_type():
    """Test that an unknown phone type is a missing element."""
    card = ContactCard.from_text(CARD)
    with pytest.raises(MissingElementError):
        card.get_phone("FAX")


@pytest.mark.unit
def test_missing_org_raises_missing_element():
    """Test that a card without ORG raises MissingElementError."""
    with pytest.raises(MissingElementError) as exc_info:
        ContactCard.from_text(card_with("FN:Forrest Gump", "GENDER:M"))
    assert exc_info.value.element == "ORG"


@pytest.mark.unit
def test_empty_org_is_accepted():
    """Test that an ORG line with no value gives an empty organization."""
    card = ContactCard.from_text(card_with("FN:Forrest Gump", "ORG:"))
    assert card.organization == ""


@pytest.mark.unit
def test_missing_end_raises_missing_element():
    """Test that running out of lines is a missing element."""
    with pytest.raises(MissingElementError):
        ContactCard.from_text("BEGIN:VCARD\nFN:Forrest Gump\nORG:Greenbow")


@pytest.mark.unit
@pytest.mark.parametrize(
    "field",
    [
        "GENDER:X",
        "BDAY:1944-06-06",
        "BDAY:31-02-2000",
        "TEL;TYPE=HOME:12345",
        "TEL;TYPE=HOME",
    ],
)
def test_malformed_fields_raise_format_mismatch(field):
    """Test that a present but malformed field raises FormatMismatchError."""
    with pytest.raises(FormatMismatchError):
        ContactCard.from_text(card_with("FN:Forrest Gump", "ORG:Greenbow", field))


@pytest.mark.unit
def test_fn_without_colon_is_format_mismatch():
    """Test that FN with no colon is malformed, not missing."""
    with pytest.raises(FormatMismatchError):
        ContactCard.from_text(card_with("FN Forrest Gump", "ORG:Greenbow"))


@pytest.mark.unit
def test_birthday_accessors_without_bday():
    """Test that birthday and age accessors need a BDAY field."""
    card = ContactCard.from_text(card_with("FN:A B", "ORG:C"))

    with pytest.raises(MissingElementError):
        card.get_birthday()
    with pytest.raises(MissingElementError):
        card.get_age()


@pytest.mark.unit
def test_age_with_reference_date():
    """Test years/months/days age computation."""
    card = ContactCard.from_text(CARD)

    assert card.get_age(today=date(2018, 8, 10)) == Age(74, 2, 4)
    assert card.get_age_years(today=date(2018, 6, 5)) == 73
    assert card.get_age_years(today=date(2018, 6, 6)) == 74


@pytest.mark.unit
def test_period_between_month_end():
    """Test that a month-end start date clamps to shorter months."""
    assert period_between(date(2020, 1, 31), date(2020, 2, 29)) == Age(0, 0, 29)
    assert period_between(date(2020, 1, 31), date(2020, 3, 1)) == Age(0, 1, 1)
