"""Feature types supported by the library."""
from enum import Enum

from lexis.core.errors import invalid_feature_type, raise_error


class FeatureType(str, Enum):
    """Closed set of grammatical feature types.

    Values are the canonical spellings. Older spellings ("grmCase",
    "grmClass", "part") resolve to the same member, see parse().
    """

    WORD = "word"
    PART = "part of speech"
    NUMBER = "number"
    CASE = "case"
    DECLENSION = "declension"
    GENDER = "gender"
    TYPE = "type"
    CLASS = "class"
    CONJUGATION = "conjugation"
    COMPARISON = "comparison"
    TENSE = "tense"
    VOICE = "voice"
    MOOD = "mood"
    PERSON = "person"
    FREQUENCY = "frequency"  # How frequent this word is
    MEANING = "meaning"
    SOURCE = "source"  # Source of word definition
    FOOTNOTE = "footnote"  # A footnote for a word's ending
    DIALECT = "dialect"
    NOTE = "note"
    PRONUNCIATION = "pronunciation"
    AGE = "age"
    AREA = "area"
    GEO = "geo"  # Geographical data
    KIND = "kind"  # Verb kind
    DERIVTYPE = "derivtype"
    STEMTYPE = "stemtype"
    MORPH = "morph"  # General morphological information
    VAR = "var"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            return SYNONYMS.get(value) or cls.__members__.get(value.upper())
        return None

    @classmethod
    def parse(cls, value: "FeatureType | str") -> "FeatureType":
        """Resolve a canonical spelling, synonym or member name.

        Raises:
            InvalidFeatureType: value names no supported feature type
        """
        try:
            return cls(value)
        except ValueError:
            raise_error(invalid_feature_type(value, origin="feature_type"))

    @classmethod
    def is_allowed(cls, value: object) -> bool:
        try:
            cls(value)
        except ValueError:
            return False
        return True

    def __str__(self) -> str:
        return self.value


SYNONYMS: dict[str, FeatureType] = {
    "part": FeatureType.PART,
    "grmCase": FeatureType.CASE,
    "grmClass": FeatureType.CLASS,
}
