"""Greek word normalization and alternate spellings.

Lexicon lookups compare words in Unicode canonical composition (NFC). For
fuzzy lookups, alternate spellings drop vowel length marks or diaeresis.
"""
import unicodedata

from lexis.core.config import get_settings
from lexis.languages.types import AlternateEncoding

from .maps import DIAERESIS_MAP, STRIPPED_DIAERESIS, VOWEL_LENGTH_MAP


def normalize_word(word: str | None) -> str | None:
    """NFC form of a word. Empty or missing words are returned unchanged."""
    if not word:
        return word
    return unicodedata.normalize("NFC", word)


def strip_vowel_length(word: str) -> str:
    return word.translate(VOWEL_LENGTH_MAP)


def strip_diaeresis(word: str) -> str:
    return word.translate(DIAERESIS_MAP)


def alternate_encodings(
    word: str,
    preceding: str | None = None,
    following: str | None = None,
    encoding: AlternateEncoding | None = None,
) -> list[str]:
    """Alternate spelling of a word for lexicon lookup.

    The word is normalized and lower-cased, then either vowel length marks
    (default) or diaeresis (encoding="strippedDiaeresis") are removed. One
    spelling is returned per call. The surrounding words are accepted for
    interface compatibility and not consulted.

    Args:
        word: Word to re-encode
        preceding: Word before it in the text
        following: Word after it in the text
        encoding: "strippedVowelLength" or "strippedDiaeresis"; defaults to
            LEXIS_GREEK_ALTERNATE_ENCODING
    """
    if word is None:
        return []
    if encoding is None:
        encoding = get_settings().GREEK_ALTERNATE_ENCODING
    normalized = normalize_word(word).lower()
    if encoding == STRIPPED_DIAERESIS:
        return [strip_diaeresis(normalized)]
    return [strip_vowel_length(normalized)]
