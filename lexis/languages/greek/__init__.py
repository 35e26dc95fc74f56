"""Greek language module."""
from .module import GreekModule
from .orthography import alternate_encodings, normalize_word, strip_diaeresis, strip_vowel_length
from .pronouns import get_pronoun_classes, load_pronoun_forms

__all__ = [
    "GreekModule",
    "alternate_encodings",
    "normalize_word",
    "strip_diaeresis",
    "strip_vowel_length",
    "get_pronoun_classes",
    "load_pronoun_forms",
]
