"""Shared grammatical values used by language modules."""
from typing import Literal

# Parts of speech
POFS_ADJECTIVE = "adjective"
POFS_ADVERB = "adverb"
POFS_ARTICLE = "article"
POFS_CONJUNCTION = "conjunction"
POFS_EXCLAMATION = "exclamation"
POFS_INTERJECTION = "interjection"
POFS_NOUN = "noun"
POFS_NUMERAL = "numeral"
POFS_PARTICLE = "particle"
POFS_PREFIX = "prefix"
POFS_PREPOSITION = "preposition"
POFS_PRONOUN = "pronoun"
POFS_SUFFIX = "suffix"
POFS_SUPINE = "supine"
POFS_VERB = "verb"
POFS_VERB_PARTICIPLE = "verb participle"

PARTS_OF_SPEECH = [
    POFS_ADJECTIVE, POFS_ADVERB, POFS_ARTICLE, POFS_CONJUNCTION, POFS_EXCLAMATION,
    POFS_INTERJECTION, POFS_NOUN, POFS_NUMERAL, POFS_PARTICLE, POFS_PREFIX,
    POFS_PREPOSITION, POFS_PRONOUN, POFS_SUFFIX, POFS_SUPINE, POFS_VERB, POFS_VERB_PARTICIPLE,
]

# Pronoun classes
CLASS_DEMONSTRATIVE = "demonstrative"
CLASS_GENERAL_RELATIVE = "general relative"
CLASS_INDEFINITE = "indefinite"
CLASS_INTENSIVE = "intensive"
CLASS_INTERROGATIVE = "interrogative"
CLASS_PERSONAL = "personal"
CLASS_POSSESSIVE = "possessive"
CLASS_RECIPROCAL = "reciprocal"
CLASS_REFLEXIVE = "reflexive"
CLASS_RELATIVE = "relative"

PRONOUN_CLASSES = [
    CLASS_DEMONSTRATIVE, CLASS_GENERAL_RELATIVE, CLASS_INDEFINITE, CLASS_INTENSIVE,
    CLASS_INTERROGATIVE, CLASS_PERSONAL, CLASS_POSSESSIVE, CLASS_RECIPROCAL,
    CLASS_REFLEXIVE, CLASS_RELATIVE,
]

GENDERS = ["masculine", "feminine", "neuter", "common", "animate", "inanimate", "personal", "not personal"]
PERSONS = ["1st", "2nd", "3rd"]
COMPARISONS = ["positive", "comparative", "superlative"]
ORDINALS = ["1st", "2nd", "3rd", "4th", "5th"]

AlternateEncoding = Literal["strippedVowelLength", "strippedDiaeresis"]
