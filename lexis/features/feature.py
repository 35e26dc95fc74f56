"""Grammatical feature: a typed, language-scoped, ordered set of values."""
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from lexis.core.errors import empty_value, missing_importer, raise_error
from lexis.core.languages import compare_languages
from lexis.core.logging import feature_logger

from .importer import FeatureImporter
from .types import FeatureType
from .values import (
    DEFAULT_SORT_ORDER,
    JOIN_SEPARATOR,
    FeatureValue,
    from_input,
    from_list,
    from_pairs,
    from_single,
    is_empty_input,
    sort_key,
)

log = feature_logger()

DEFAULT_IMPORTER = "default"


class Feature:
    """A grammatical feature of a word (case, tense, number, ...).

    A feature has a type, a language and one or more values. Values carry a
    sort order and are always kept sorted: by sort order first, then
    alphabetically. A multi-valued feature therefore renders the same way
    no matter in which order its values were added.

    Args:
        type: A FeatureType, or a canonical or synonym spelling of one
        data: A single value, a list of values, or a list of
            (value, sort_order) pairs. See lexis.features.values.
        language_id: Language of the feature (a LanguageID or language code)
        allowed_values: Closed vocabulary for this feature, empty if unrestricted

    Raises:
        InvalidFeatureType: type is not supported
        EmptyValue: data or language_id is missing
    """

    __slots__ = ("type", "language_id", "allowed_values", "_data", "importers")

    def __init__(
        self,
        type: FeatureType | str,
        data: Any,
        language_id: Any,
        allowed_values: Iterable[str] = (),
    ):
        feature_type = FeatureType.parse(type)
        if is_empty_input(data):
            raise_error(empty_value("data", "Feature should have a non-empty value(s).", origin="feature"))
        if is_empty_input(language_id):
            raise_error(empty_value("language id", "No language ID is provided.", origin="feature"))

        self.type: FeatureType = feature_type
        self.language_id = language_id
        self.allowed_values: list[str] = list(allowed_values)
        self._data: list[FeatureValue] = sorted(from_input(data), key=sort_key)
        self.importers: dict[str, FeatureImporter] = {}

    # === Explicit constructors ===

    @classmethod
    def from_value(
        cls, type: FeatureType | str, value: str, language_id: Any,
        sort_order: int = DEFAULT_SORT_ORDER, allowed_values: Iterable[str] = (),
    ) -> "Feature":
        return cls(type, from_single(value, sort_order), language_id, allowed_values)

    @classmethod
    def from_values(
        cls, type: FeatureType | str, values: Sequence[str], language_id: Any,
        allowed_values: Iterable[str] = (),
    ) -> "Feature":
        return cls(type, from_list(values), language_id, allowed_values)

    @classmethod
    def from_pairs(
        cls, type: FeatureType | str, pairs: Sequence[Sequence], language_id: Any,
        allowed_values: Iterable[str] = (),
    ) -> "Feature":
        return cls(type, from_pairs(pairs), language_id, allowed_values)

    # === Values ===

    def sort(self) -> None:
        """Restore canonical order. Every mutation calls this."""
        self._data.sort(key=sort_key)

    @property
    def data(self) -> list[FeatureValue]:
        return list(self._data)

    @property
    def values(self) -> list[str]:
        """Values in canonical order."""
        return [fv.value for fv in self._data]

    @property
    def value(self) -> str:
        """All values joined into a single string, in canonical order."""
        return JOIN_SEPARATOR.join(str(v) for v in self.values)

    @property
    def allows_unrestricted_values(self) -> bool:
        return not self.allowed_values

    def is_allowed(self, value: str) -> bool:
        return self.allows_unrestricted_values or value in self.allowed_values

    def has_value(self, value: str) -> bool:
        return value in self.values

    def is_equal(
        self, other: "Feature",
        compare: Callable[[Any, Any], bool] = compare_languages,
    ) -> bool:
        """Same type, same language, and the same values in the same order."""
        return (
            self.type == other.type
            and compare(self.language_id, other.language_id)
            and self.values == other.values
        )

    # === Mutation ===

    def add_value(self, value: str, sort_order: int = DEFAULT_SORT_ORDER) -> "Feature":
        """Add a single value. Chainable."""
        if is_empty_input(value):
            raise_error(empty_value("value", origin="feature"))
        return self._extend(from_single(value, sort_order))

    def add_values(self, data: Any) -> "Feature":
        """Add values given in any accepted input shape. Chainable."""
        if is_empty_input(data):
            raise_error(empty_value("data", origin="feature"))
        return self._extend(from_input(data))

    def _extend(self, values: list[FeatureValue]) -> "Feature":
        self._data.extend(values)
        self.sort()
        return self

    # === Derivation ===

    def create_feature(self, value: str, sort_order: int = DEFAULT_SORT_ORDER) -> "Feature":
        """New single-valued feature of the same type, language and vocabulary."""
        return Feature(self.type, from_single(value, sort_order), self.language_id, self.allowed_values)

    def create_features(self, data: Any) -> "Feature":
        """New feature of the same type, language and vocabulary with different values."""
        return Feature(self.type, data, self.language_id, self.allowed_values)

    def copy(self) -> "Feature":
        """Copy with its own values; registered importers are shared."""
        clone = Feature(self.type, self._data, self.language_id, self.allowed_values)
        clone.importers = dict(self.importers)
        return clone

    # === Importers ===

    def add_importer(self, importer: FeatureImporter, name: str = DEFAULT_IMPORTER) -> "Feature":
        """Register an importer under a name, replacing any previous one."""
        self.importers[name] = importer
        log.debug("importer_registered", feature_type=str(self.type), name=name)
        return self

    def get_importer(self, name: str = DEFAULT_IMPORTER) -> FeatureImporter:
        """Raises MissingImporter when no importer has that name."""
        if name not in self.importers:
            raise_error(missing_importer(name, sorted(self.importers), origin="feature"))
        return self.importers[name]

    def add_from_importer(self, foreign_data: Any, name: str = DEFAULT_IMPORTER) -> "Feature":
        """Translate third-party values with a registered importer and add them.

        Raises:
            MissingImporter: no importer registered under name
            UnknownValue: importer rejects a value; nothing is added
        """
        imported = self._import(foreign_data, name)
        log.debug("values_imported", feature_type=str(self.type), importer=name, count=len(imported))
        return self._extend(imported)

    def create_from_importer(self, foreign_data: Any, name: str = DEFAULT_IMPORTER) -> "Feature":
        """Like add_from_importer, but returns a new feature of the same kind."""
        return Feature(self.type, self._import(foreign_data, name), self.language_id, self.allowed_values)

    def _import(self, foreign_data: Any, name: str) -> list[FeatureValue]:
        importer = self.get_importer(name)
        if is_empty_input(foreign_data):
            raise_error(empty_value("data", origin="feature"))
        imported = []
        for fv in from_input(foreign_data):
            mapped = importer.get(fv.value)
            # One external value may map to several library values
            targets = mapped if isinstance(mapped, list) else [mapped]
            imported.extend(FeatureValue(v, fv.sort_order) for v in targets)
        return imported

    # === Python protocol ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Feature):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None  # mutable

    def __contains__(self, value: object) -> bool:
        return value in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Feature({self.type.value!r}, {self.values!r}, {str(self.language_id)!r})"
