"""Tests for the language registry and default language model behavior."""
import pytest

from lexis.core.errors import InvalidFeatureType, UnsupportedLanguage
from lexis.core.languages import LanguageID
from lexis.features import Feature, FeatureType
from lexis.languages import (
    InflectionGrammar,
    LanguageModel,
    LanguageModule,
    get_module,
    has_module,
    list_languages,
    register,
    unregister,
)
from lexis.languages.greek import GreekModule
from lexis.models import Inflection


class LatinModule(LanguageModule):
    """Minimal module relying on the defaults."""

    @property
    def language_id(self) -> LanguageID:
        return LanguageID.LATIN

    @property
    def name(self) -> str:
        return "Latin"


@pytest.fixture
def latin():
    module = LatinModule()
    register(module)
    yield module
    unregister(LanguageID.LATIN)


# === Registry ===

def test_greek_registered_on_import():
    assert has_module("grc")
    assert isinstance(get_module(LanguageID.GREEK), GreekModule)
    assert {"code": "grc", "name": "Greek", "languageId": "GREEK"} in list_languages()


def test_lookup_by_any_code(latin):
    assert get_module("la") is latin
    assert get_module("lat") is latin
    assert get_module(LanguageID.LATIN) is latin


def test_unsupported_language():
    with pytest.raises(UnsupportedLanguage, match="Available: .*grc") as excinfo:
        get_module("ara")
    assert excinfo.value.metadata["language"] == "ara"


def test_unregister(latin):
    unregister("lat")
    assert not has_module(LanguageID.LATIN)
    unregister("lat")


def test_register_replaces(latin):
    replacement = LatinModule()
    register(replacement)
    assert get_module("lat") is replacement


def test_modules_satisfy_protocol(latin):
    assert isinstance(latin, LanguageModel)
    assert isinstance(get_module("grc"), LanguageModel)


# === Defaults ===

def test_default_word_handling(latin):
    assert latin.normalize_word("Rosa") == "Rosa"
    assert latin.normalize_word(None) is None
    assert latin.alternate_encodings("rosa") == []
    assert "." in latin.get_punctuation()
    assert latin.grammar_features() == []
    assert latin.get_pronoun_classes([], "qui") == []


def test_default_feature_types(latin):
    part = latin.get_feature_type("part")
    assert part.type is FeatureType.PART
    assert part.language_id is LanguageID.LATIN
    assert "noun" in part.allowed_values
    with pytest.raises(InvalidFeatureType, match="Latin"):
        latin.get_feature_type(FeatureType.CASE)


def test_default_inflection_grammar(latin):
    infl = Inflection(stem="qu", language_id=LanguageID.LATIN)
    infl.add_feature(Feature(FeatureType.PART, "pronoun", LanguageID.LATIN))
    assert latin.get_inflection_grammar(infl) == InflectionGrammar(full_form_based=True)


def test_module_identity(latin):
    assert latin == LatinModule()
    assert latin != get_module("grc")
    assert hash(latin) == hash(LanguageID.LATIN)
    assert latin.codes == ("lat", "la")
