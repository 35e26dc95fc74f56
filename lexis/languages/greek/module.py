"""Greek language module implementation."""
from collections.abc import Sequence

from lexis.core.languages import LanguageID, compare_languages
from lexis.features import Feature, FeatureType
from lexis.languages.base import InflectionGrammar, LanguageModule, parts_of_speech
from lexis.languages.types import POFS_PRONOUN, AlternateEncoding
from lexis.models import Form, Inflection

from . import orthography, pronouns
from .grammar import GRAMMAR_FEATURES, GREEK_FEATURE_VALUES


class GreekModule(LanguageModule):
    """Ancient Greek: NFC normalization, fuzzy spellings, pronoun classes."""

    __slots__ = ()

    @property
    def language_id(self) -> LanguageID:
        return LanguageID.GREEK

    @property
    def name(self) -> str:
        return "Greek"

    @property
    def feature_values(self) -> dict[FeatureType, list[str]]:
        return GREEK_FEATURE_VALUES

    def grammar_features(self) -> list[FeatureType]:
        return list(GRAMMAR_FEATURES)

    def normalize_word(self, word: str | None) -> str | None:
        return orthography.normalize_word(word)

    def alternate_encodings(
        self, word: str, preceding: str | None = None, following: str | None = None,
        encoding: AlternateEncoding | None = None,
    ) -> list[str]:
        return orthography.alternate_encodings(word, preceding, following, encoding)

    def get_inflection_grammar(self, inflection: Inflection) -> InflectionGrammar:
        """Inflection grammar; Greek pronouns also need their class resolved."""
        grammar = super().get_inflection_grammar(inflection)
        parts = parts_of_speech(inflection)
        grammar.pronoun_class_required = (
            compare_languages(self.language_id, inflection.language_id)
            and bool(parts)
            and parts[0] == POFS_PRONOUN
        )
        return grammar

    def get_pronoun_classes(
        self, forms: Sequence[Form] | None, word: str, normalize: bool = True
    ) -> list[Feature]:
        """Pronoun classes of a word; the bundled catalogue is used when forms is None."""
        if forms is None:
            forms = pronouns.load_pronoun_forms()
        return pronouns.get_pronoun_classes(forms, word, normalize)
