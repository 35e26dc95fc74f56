"""Lexical records that hold features."""
from dataclasses import dataclass, field
from typing import Any

from lexis.core.errors import empty_value, raise_error
from lexis.core.languages import LanguageID
from lexis.features import Feature, FeatureType


@dataclass(slots=True)
class Form:
    """A known word form from a catalogue, with its grammatical features."""
    value: str
    features: dict[FeatureType, Feature] = field(default_factory=dict)

    def feature(self, feature_type: FeatureType | str) -> Feature | None:
        return self.features.get(FeatureType.parse(feature_type))


@dataclass(slots=True)
class Inflection:
    """An inflected form of a word: stem, optional suffix and features."""
    stem: str
    language_id: Any
    suffix: str | None = None
    features: dict[FeatureType, Feature] = field(default_factory=dict)

    def __post_init__(self):
        if not self.stem:
            raise_error(empty_value("stem", origin="inflection"))
        if self.language_id is None:
            raise_error(empty_value("language id", origin="inflection"))

    def add_feature(self, feature: Feature) -> "Inflection":
        self.features[feature.type] = feature
        return self

    def feature(self, feature_type: FeatureType | str) -> Feature | None:
        return self.features.get(FeatureType.parse(feature_type))


@dataclass(slots=True)
class Lemma:
    """Dictionary form of a word."""
    word: str
    language_code: str
    principal_parts: list[str] = field(default_factory=list)
    features: dict[FeatureType, Feature] = field(default_factory=dict)
    translation: "Translation | None" = None

    def __post_init__(self):
        if not self.word:
            raise_error(empty_value("word", "Word should not be empty.", origin="lemma"))
        if not self.language_code:
            raise_error(empty_value("language code", "Language should not be empty.", origin="lemma"))

    @property
    def language_id(self) -> LanguageID:
        return LanguageID.from_code(self.language_code)

    @property
    def key(self) -> str:
        """Identifies a lemma by word, language and feature values."""
        return "-".join([self.word, self.language_code, *(f.value for f in self.features.values())])

    def add_feature(self, feature: Feature) -> "Lemma":
        if feature is None:
            raise_error(empty_value("feature", origin="lemma"))
        self.features[feature.type] = feature
        return self

    def add_features(self, features: list[Feature]) -> "Lemma":
        for feature in features:
            self.add_feature(feature)
        return self

    def add_translation(self, translation: "Translation") -> "Lemma":
        if translation is None:
            raise_error(empty_value("translation", "Translation should not be empty.", origin="lemma"))
        if not isinstance(translation, Translation):
            raise TypeError("Translation should be a Translation object.")
        self.translation = translation
        return self


@dataclass(slots=True)
class Translation:
    """Meanings of a lemma in another language."""
    lemma: Lemma
    meanings: list[str] = field(default_factory=list)

    @property
    def glosses(self) -> str:
        return "; ".join(self.meanings)
