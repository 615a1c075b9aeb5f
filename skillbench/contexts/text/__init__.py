"""
Text Context

Responsibilities:
- Parses semi-structured text into typed records (contact cards, names, shirts)
- Edits and redacts resume text by literal substitution
- Provides named regex patterns and generic match utilities
- Counts word frequencies

Owns: Text field extraction, pattern constants, text templates
Never: Reads files or streams on behalf of other contexts
"""

from skillbench.contexts.text.contact_card import Age, ContactCard
from skillbench.contexts.text.curriculum_vitae import CurriculumVitae, Phone
from skillbench.contexts.text.pattern_library import count_matches, find_all, get_pattern
from skillbench.contexts.text.person import Person
from skillbench.contexts.text.phone_number import PhoneNumber
from skillbench.contexts.text.shirt import Shirt
from skillbench.contexts.text.word_counter import WordCounter

__all__ = [
    # Field extractors
    "ContactCard",
    "Age",
    "CurriculumVitae",
    "Phone",
    "Person",
    "PhoneNumber",
    "Shirt",
    # Pattern library
    "find_all",
    "count_matches",
    "get_pattern",
    # Word statistics
    "WordCounter",
]
