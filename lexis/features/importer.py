"""External tag translation."""
from collections.abc import Iterable, Mapping

from lexis.core.errors import (
    AppError,
    Ok,
    Result,
    empty_value,
    raise_error,
    raise_result,
    unknown_value,
)
from lexis.core.logging import importer_logger

from .values import is_empty_input

log = importer_logger()

LibraryValue = str | list[str]


class FeatureImporter:
    """Maps values of a third-party tagset to one or more library values.

    With return_unknown=True, values that have no mapping pass through
    unchanged; otherwise looking them up raises UnknownValue. The policy is
    fixed for the lifetime of the importer.
    """

    __slots__ = ("_table", "_return_unknown")

    def __init__(self, defaults: Iterable[str] = (), return_unknown: bool = False):
        self._table: dict[str, LibraryValue] = {}
        self._return_unknown = return_unknown
        for value in defaults:
            self.map(value, value)

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, LibraryValue], return_unknown: bool = False
    ) -> "FeatureImporter":
        """Build an importer from a dict of external -> library values."""
        importer = cls(return_unknown=return_unknown)
        for imported_value, library_value in mapping.items():
            importer.map(imported_value, library_value)
        return importer

    @property
    def return_unknown(self) -> bool:
        return self._return_unknown

    def map(self, imported_value: str, library_value: LibraryValue) -> "FeatureImporter":
        """Set the library value(s) for an external value. Last write wins.

        Raises:
            EmptyValue: either argument is missing or empty
        """
        if is_empty_input(imported_value):
            raise_error(empty_value("imported value", origin="feature_importer"))
        if is_empty_input(library_value):
            raise_error(empty_value("library value", origin="feature_importer"))
        if isinstance(library_value, (list, tuple)):
            library_value = list(library_value)
        self._table[imported_value] = library_value
        return self

    def has(self, imported_value: str) -> bool:
        return imported_value in self._table

    def get(self, source_value: str) -> LibraryValue:
        """Return the library value(s) for an external value.

        Raises:
            UnknownValue: value is not mapped and unknown values are not passed through
        """
        return raise_result(self.get_result(source_value))

    def get_result(self, source_value: str) -> Result[LibraryValue, AppError]:
        """Non-raising variant of get()."""
        if source_value in self._table:
            return Ok(self._table[source_value])
        if self._return_unknown:
            log.debug("importer_passthrough", value=source_value)
            return Ok(source_value)
        return unknown_value(source_value, origin="feature_importer")

    def __contains__(self, imported_value: object) -> bool:
        return imported_value in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"FeatureImporter({len(self._table)} values, return_unknown={self._return_unknown})"
