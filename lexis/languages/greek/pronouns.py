"""Greek pronoun classes.

Pronoun class (demonstrative, personal, relative, ...) is not derivable from
a pronoun's ending, so it is resolved by matching the word against a
catalogue of known pronoun forms.
"""
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Annotated

import yaml
from pydantic import BaseModel, ConfigDict, StringConstraints

from lexis.core.config import get_settings
from lexis.core.languages import LanguageID
from lexis.core.logging import language_logger
from lexis.features import Feature, FeatureType
from lexis.models import Form

from .grammar import GREEK_FEATURE_VALUES
from .orthography import normalize_word

log = language_logger()

DATA_DIR = Path(__file__).parent / "data"
PRONOUN_FORMS_FILE = DATA_DIR / "pronoun_forms.yaml"


def get_pronoun_classes(forms: Iterable[Form], word: str, normalize: bool = True) -> list[Feature]:
    """Find the grammatical classes of a pronoun.

    Args:
        forms: Known pronoun forms
        word: Pronoun to classify
        normalize: Compare NFC-normalized spellings instead of raw strings

    Returns:
        One class feature per distinct class among the matching forms, in
        the order the classes are first met. Empty if no form matches.
    """
    target = normalize_word(word) if normalize else word
    matching_values: dict[str, None] = {}  # Ordered set of class values
    for form in forms:
        if not form.value:
            continue
        spelling = normalize_word(form.value) if normalize else form.value
        if spelling != target:
            continue
        grm_class = form.features.get(FeatureType.CLASS)
        if grm_class is not None:
            for value in grm_class.values:
                matching_values.setdefault(value)

    allowed = GREEK_FEATURE_VALUES[FeatureType.CLASS]
    return [Feature(FeatureType.CLASS, value, LanguageID.GREEK, allowed_values=allowed) for value in matching_values]


def load_pronoun_forms(path: str | Path | None = None) -> list[Form]:
    """Load a pronoun form catalogue from YAML.

    Uses LEXIS_GREEK_PRONOUN_FORMS_FILE, or the bundled catalogue, when no
    path is given. Each entry has a "form" key; every other key names a
    feature type ("class", "case", "number", ...). Every call builds new
    Form objects, so callers may modify them.
    """
    if path is None:
        path = get_settings().GREEK_PRONOUN_FORMS_FILE or PRONOUN_FORMS_FILE
    catalogue = _load_catalogue(Path(path))

    forms = []
    for entry in catalogue.forms:
        features = {}
        for key, feature_value in entry.feature_data.items():
            ftype = FeatureType.parse(key)
            features[ftype] = Feature(
                ftype, feature_value, LanguageID.GREEK,
                allowed_values=GREEK_FEATURE_VALUES.get(ftype, ()),
            )
        forms.append(Form(value=entry.form, features=features))
    return forms


class PronounFormEntry(BaseModel):
    """One catalogue entry: the form plus feature type -> value(s)."""
    model_config = ConfigDict(extra="allow", frozen=True)

    form: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    @property
    def feature_data(self) -> dict[str, str | list[str]]:
        return dict(self.model_extra or {})


class PronounCatalogue(BaseModel):
    model_config = ConfigDict(frozen=True)

    forms: tuple[PronounFormEntry, ...] = ()


@lru_cache(maxsize=8)
def _load_catalogue(path: Path) -> PronounCatalogue:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    # Raises pydantic.ValidationError for entries without a form
    catalogue = PronounCatalogue.model_validate(data)
    log.debug("pronoun_forms_loaded", path=str(path), count=len(catalogue.forms))
    return catalogue
