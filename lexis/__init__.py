"""lexis - grammatical features of words across languages.

Features hold one or more canonically ordered values, importers translate
external tagsets into canonical values, and per-language models normalize
words and resolve pronoun classes.
"""
__version__ = "0.1.0"

from lexis.core.languages import LanguageID, compare_languages
from lexis.core.errors import (
    LexisError,
    InvalidFeatureType,
    EmptyValue,
    UnknownValue,
    MissingImporter,
    UnsupportedLanguage,
)
from lexis.features import Feature, FeatureImporter, FeatureType, FeatureValue
from lexis.models import Form, Inflection, Lemma, Translation
from lexis.languages import get_module, register, list_languages

__all__ = [
    "__version__",
    "LanguageID",
    "compare_languages",
    "LexisError",
    "InvalidFeatureType",
    "EmptyValue",
    "UnknownValue",
    "MissingImporter",
    "UnsupportedLanguage",
    "Feature",
    "FeatureImporter",
    "FeatureType",
    "FeatureValue",
    "Form",
    "Inflection",
    "Lemma",
    "Translation",
    "get_module",
    "register",
    "list_languages",
]
