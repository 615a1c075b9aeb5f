"""Unit tests for CurriculumVitae extraction, editing and redaction."""

import pytest

from skillbench.contexts.text.curriculum_vitae import NO_VALUE, CurriculumVitae, Phone
from skillbench.exceptions import ArgumentNotFoundError, MissingElementError, NotConfiguredError

RESUME = (
    "John A. Smith\n"
    "Senior engineer, contact john@hp.com\n"
    "Phones: (916) 123-4567 ext 12, 456.78.90\n"
    "Previously worked with Jane Doe at HP.\n"
)


@pytest.fixture
def cv():
    resume = CurriculumVitae()
    resume.set_text(RESUME)
    return resume


@pytest.mark.unit
def test_operations_before_set_text():
    """Test that every operation requires text."""
    resume = CurriculumVitae()

    with pytest.raises(NotConfiguredError):
        resume.text
    with pytest.raises(NotConfiguredError):
        resume.get_phones()
    with pytest.raises(NotConfiguredError):
        resume.get_full_name()
    with pytest.raises(NotConfiguredError):
        resume.unhide_all()


@pytest.mark.unit
def test_get_phones(cv):
    """Test phone extraction with optional area code and extension."""
    phones = cv.get_phones()

    assert phones == [
        Phone("(916) 123-4567 ext 12", 916, 12),
        Phone("456.78.90", NO_VALUE, NO_VALUE),
    ]


@pytest.mark.unit
def test_get_phones_empty():
    """Test that a text without phones yields an empty list."""
    resume = CurriculumVitae()
    resume.set_text("No numbers here")
    assert resume.get_phones() == []


@pytest.mark.unit
def test_full_name_parts(cv):
    """Test first, middle and last name of a three-word name."""
    assert cv.get_full_name() == "John A. Smith"
    assert cv.get_first_name() == "John"
    assert cv.get_middle_name() == "A."
    assert cv.get_last_name() == "Smith"


@pytest.mark.unit
def test_two_word_name_has_no_middle():
    """Test that a two-word name has no middle name."""
    resume = CurriculumVitae()
    resume.set_text("resume of Jane Doe, engineer")

    assert resume.get_full_name() == "Jane Doe"
    assert resume.get_middle_name() is None


@pytest.mark.unit
def test_missing_full_name():
    """Test that a text without a name raises MissingElementError."""
    resume = CurriculumVitae()
    resume.set_text("nothing capitalised here")
    with pytest.raises(MissingElementError):
        resume.get_full_name()


@pytest.mark.unit
def test_update_last_name_replaces_all(cv):
    """Test that every occurrence of the last name is replaced."""
    cv.set_text("John Smith\nSmith family")
    cv.update_last_name("Brown")
    assert cv.text == "John Brown\nBrown family"


@pytest.mark.unit
def test_update_phone(cv):
    """Test literal phone replacement."""
    cv.update_phone(Phone("456.78.90"), Phone("987-65-43"))
    assert "987-65-43" in cv.text
    assert "456.78.90" not in cv.text


@pytest.mark.unit
def test_update_phone_absent(cv):
    """Test that replacing an absent phone raises ArgumentNotFoundError."""
    with pytest.raises(ArgumentNotFoundError):
        cv.update_phone(Phone("000-00-00"), Phone("111-11-11"))


@pytest.mark.unit
def test_hide_keeps_separators(cv):
    """Test hiding a name and an e-mail address."""
    cv.hide("John A. Smith")
    cv.hide("john@hp.com")

    assert cv.text.startswith("XXXX X. XXXXX\n")
    assert "XXXX@XX.XXX" in cv.text


@pytest.mark.unit
def test_hide_absent_piece(cv):
    """Test that hiding text that is not present raises ArgumentNotFoundError."""
    with pytest.raises(ArgumentNotFoundError):
        cv.hide("Nobody")


@pytest.mark.unit
def test_hide_phone_masks_digits():
    """Test that only digits are masked."""
    resume = CurriculumVitae()
    resume.set_text("call (123)456 7890 now")
    resume.hide_phone("(123)456 7890")
    assert resume.text == "call (XXX)XXX XXXX now"


@pytest.mark.unit
def test_unhide_all_restores_and_is_idempotent(cv):
    """Test that unhide_all restores the text and a second call does nothing."""
    cv.hide("John A. Smith")
    cv.hide_phone("456.78.90")

    assert cv.unhide_all() == 2
    assert cv.text == RESUME
    assert cv.unhide_all() == 0
    assert cv.text == RESUME


@pytest.mark.unit
def test_unhide_all_keeps_same_length_pieces_apart():
    """Test that pieces masking to the same placeholder are restored to their own text."""
    resume = CurriculumVitae()
    resume.set_text("John and Mary")
    resume.hide("John")
    resume.hide("Mary")
    assert resume.text == "XXXX and XXXX"

    assert resume.unhide_all() == 2
    assert resume.text == "John and Mary"


@pytest.mark.unit
def test_unhide_all_after_length_changing_edit(cv):
    """Test that restoring still finds hidden pieces after an earlier part of the text grew."""
    cv.hide("john@hp.com")
    cv.hide("Jane Doe")
    cv.update_last_name("Smithson")

    assert cv.unhide_all() == 2
    assert cv.text == RESUME.replace("Smith", "Smithson")


@pytest.mark.unit
def test_hide_empty_piece():
    """Test that an empty piece is rejected and leaves nothing to restore."""
    resume = CurriculumVitae()
    resume.set_text("abc")

    with pytest.raises(ArgumentNotFoundError):
        resume.hide("")
    with pytest.raises(ArgumentNotFoundError):
        resume.hide_phone("")
    assert resume.unhide_all() == 0
    assert resume.text == "abc"


@pytest.mark.unit
def test_set_text_forgets_hidden_pieces(cv):
    """Test that a new text clears the hidden-piece record."""
    cv.hide("john@hp.com")
    cv.set_text("fresh text")
    assert cv.unhide_all() == 0


@pytest.mark.unit
def test_custom_placeholder():
    """Test a placeholder other than the configured default."""
    resume = CurriculumVitae(placeholder="*")
    resume.set_text("Jane Doe")
    resume.hide("Jane Doe")
    assert resume.text == "**** ***"
