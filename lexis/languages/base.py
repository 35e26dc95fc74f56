"""Language model interface and default behavior."""
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from lexis.core.errors import invalid_feature_type, raise_error
from lexis.core.languages import LanguageID
from lexis.core.logging import language_logger
from lexis.features import Feature, FeatureType
from lexis.models import Form, Inflection

from .types import COMPARISONS, GENDERS, PARTS_OF_SPEECH, PERSONS, POFS_PRONOUN

log = language_logger()

# Characters that delimit words, shared by most languages
PUNCTUATION = frozenset(
    ".,;:!?'\"(){}[]<>/\\"
    "\u00a0\u2010\u2011\u2012\u2013\u2014\u2015\u2018\u2019\u201c\u201d\u0387\u00b7\n\r"
)


@dataclass(slots=True)
class InflectionGrammar:
    """How an inflection should be matched against inflection tables."""
    full_form_based: bool = False
    suffix_based: bool = False
    pronoun_class_required: bool = False


def parts_of_speech(inflection: Inflection) -> list[str] | None:
    """Part of speech values of an inflection, None when missing or not a Feature."""
    part = inflection.features.get(FeatureType.PART)
    if not isinstance(part, Feature):
        return None
    return part.values


@runtime_checkable
class LanguageModel(Protocol):
    """Capabilities every language model provides."""

    @property
    def language_id(self) -> LanguageID: ...

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    def normalize_word(self, word: str | None) -> str | None: ...

    def alternate_encodings(
        self, word: str, preceding: str | None = None, following: str | None = None,
        encoding: str | None = None,
    ) -> list[str]: ...

    def get_punctuation(self) -> frozenset[str]: ...

    def grammar_features(self) -> list[FeatureType]: ...

    def get_feature_type(self, feature_type: FeatureType | str) -> Feature: ...

    def get_inflection_grammar(self, inflection: Inflection) -> InflectionGrammar: ...

    def get_pronoun_classes(
        self, forms: Sequence[Form] | None, word: str, normalize: bool = True
    ) -> list[Feature]: ...


class LanguageModule(ABC):
    """Default behavior for language models. Language modules override what differs."""

    @property
    @abstractmethod
    def language_id(self) -> LanguageID:
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable language name."""
        ...

    @property
    def code(self) -> str:
        """Primary ISO 639 code."""
        return self.language_id.code

    @property
    def codes(self) -> tuple[str, ...]:
        return self.language_id.codes

    def has_code(self, code: str) -> bool:
        return self.language_id.has_code(code)

    # === Feature vocabularies ===

    @property
    def feature_values(self) -> dict[FeatureType, list[str]]:
        """Closed vocabularies of the feature types this language defines."""
        return {
            FeatureType.PART: PARTS_OF_SPEECH,
            FeatureType.GENDER: GENDERS,
            FeatureType.PERSON: PERSONS,
            FeatureType.COMPARISON: COMPARISONS,
        }

    def get_feature_type(self, feature_type: FeatureType | str) -> Feature:
        """Prototype feature whose allowed values are the language's vocabulary.

        New features of that type are derived from it with create_feature().

        Raises:
            InvalidFeatureType: the type is unknown or not defined for this language
        """
        ftype = FeatureType.parse(feature_type)
        values = self.feature_values.get(ftype)
        if not values:
            raise_error(invalid_feature_type(ftype, f"not defined for {self.name}", origin=self.code))
        return Feature(ftype, values, self.language_id, allowed_values=values)

    @property
    def features(self) -> dict[FeatureType, Feature]:
        return {ftype: self.get_feature_type(ftype) for ftype in self.feature_values}

    def grammar_features(self) -> list[FeatureType]:
        """Feature types that link into grammar references."""
        return []

    # === Words ===

    def normalize_word(self, word: str | None) -> str | None:
        """Form of a word suitable for equality comparison. Identity by default."""
        return word

    def alternate_encodings(
        self, word: str, preceding: str | None = None, following: str | None = None,
        encoding: str | None = None,
    ) -> list[str]:
        """Alternate spellings to try in lexicon lookups. None by default."""
        return []

    def get_punctuation(self) -> frozenset[str]:
        return PUNCTUATION

    # === Inflections ===

    def get_inflection_grammar(self, inflection: Inflection) -> InflectionGrammar:
        """Decide whether an inflection is matched by full form or by suffix.

        Pronouns are matched by full form, everything else by suffix. An
        inflection without a single part of speech gets neither; a warning
        is logged and matching continues with default flags.
        """
        grammar = InflectionGrammar()
        parts = parts_of_speech(inflection)
        if parts is not None and len(parts) == 1:
            if parts[0] == POFS_PRONOUN:
                grammar.full_form_based = True
            else:
                grammar.suffix_based = True
        else:
            log.warning(
                "inflection_grammar_unresolved",
                reason="part of speech data is missing or is incorrect",
                part_of_speech=repr(inflection.features.get(FeatureType.PART)),
                language=self.code,
            )
        return grammar

    def get_pronoun_classes(
        self, forms: Sequence[Form] | None, word: str, normalize: bool = True
    ) -> list[Feature]:
        """Pronoun classes of a word. Languages without pronoun classes return none."""
        return []

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageModule):
            return NotImplemented
        return self.language_id is other.language_id

    def __hash__(self) -> int:
        return hash(self.language_id)
