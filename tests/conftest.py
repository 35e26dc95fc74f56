"""Pytest configuration and fixtures."""
import pytest

from lexis.core.config import get_settings
from lexis.core.languages import LanguageID
from lexis.features import Feature, FeatureImporter, FeatureType
from lexis.languages import get_module
from lexis.models import Form


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def greek():
    return get_module(LanguageID.GREEK)


@pytest.fixture
def case_feature():
    return Feature(FeatureType.CASE, ["nominative", "accusative"], LanguageID.LATIN)


@pytest.fixture
def case_importer():
    """Maps Universal Dependencies case tags to library values."""
    return FeatureImporter.from_mapping({
        "Nom": "nominative",
        "Gen": "genitive",
        "Acc": "accusative",
        "Abl": "ablative",
        "Nom,Acc": ["nominative", "accusative"],
    })


def make_form(value: str, grm_class: str | None = None, **features) -> Form:
    form_features = {}
    if grm_class is not None:
        form_features[FeatureType.CLASS] = Feature(FeatureType.CLASS, grm_class, LanguageID.GREEK)
    for key, feature_value in features.items():
        ftype = FeatureType.parse(key)
        form_features[ftype] = Feature(ftype, feature_value, LanguageID.GREEK)
    return Form(value=value, features=form_features)


@pytest.fixture
def form_factory():
    return make_form
