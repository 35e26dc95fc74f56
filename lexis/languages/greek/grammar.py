"""Greek grammatical vocabularies."""
from lexis.features import FeatureType
from lexis.languages.types import (
    COMPARISONS,
    GENDERS,
    ORDINALS,
    PARTS_OF_SPEECH,
    PERSONS,
    PRONOUN_CLASSES,
)

CASES = ["nominative", "genitive", "dative", "accusative", "vocative"]
NUMBERS = ["singular", "plural", "dual"]
TENSES = ["present", "imperfect", "future", "perfect", "pluperfect", "future perfect", "aorist"]
VOICES = ["passive", "active", "mediopassive", "middle"]
MOODS = ["indicative", "subjunctive", "optative", "imperative"]
# TODO: full list of Greek dialects
DIALECTS = ["attic", "epic", "doric"]

GREEK_FEATURE_VALUES: dict[FeatureType, list[str]] = {
    FeatureType.PART: PARTS_OF_SPEECH,
    FeatureType.GENDER: GENDERS,
    FeatureType.PERSON: PERSONS,
    FeatureType.COMPARISON: COMPARISONS,
    FeatureType.CLASS: PRONOUN_CLASSES,
    FeatureType.NUMBER: NUMBERS,
    FeatureType.CASE: CASES,
    FeatureType.DECLENSION: ORDINALS[:3],
    FeatureType.TENSE: TENSES,
    FeatureType.VOICE: VOICES,
    FeatureType.MOOD: MOODS,
    FeatureType.DIALECT: DIALECTS,
}

# Feature types that link into Greek grammar references
GRAMMAR_FEATURES = [
    FeatureType.PART,
    FeatureType.CASE,
    FeatureType.MOOD,
    FeatureType.DECLENSION,
    FeatureType.TENSE,
    FeatureType.VOICE,
]
