"""Language identity and comparison."""
from enum import Enum


class LanguageID(Enum):
    """Languages known to the library, each with its ISO 639 codes (primary first)."""

    UNDEFINED = ("und",)
    LATIN = ("lat", "la")
    GREEK = ("grc",)
    ARABIC = ("ara", "ar")
    PERSIAN = ("per", "fas", "fa", "fa-IR")
    ENGLISH = ("eng", "en")
    GEEZ = ("gez",)
    SYRIAC = ("syr", "syc")
    CHINESE = ("zho", "zh", "zh-Hant", "zh-Hans")

    @property
    def codes(self) -> tuple[str, ...]:
        return self.value

    @property
    def code(self) -> str:
        """Primary language code."""
        return self.value[0]

    def has_code(self, code: str) -> bool:
        return code in self.value

    @classmethod
    def from_code(cls, code: str | None) -> "LanguageID":
        """Resolve a language code, UNDEFINED when the code is not known."""
        if code:
            for language in cls:
                if language.has_code(code):
                    return language
        return cls.UNDEFINED

    def __str__(self) -> str:
        return self.name.lower()


def resolve_language(language: "LanguageID | str | None") -> LanguageID | None:
    """Coerce a LanguageID or a language code to a LanguageID."""
    if language is None:
        return None
    if isinstance(language, LanguageID):
        return language
    return LanguageID.from_code(str(language))


def compare_languages(a: "LanguageID | str | None", b: "LanguageID | str | None") -> bool:
    """Check whether two language identifiers name the same language.

    Accepts LanguageID members or language codes in any mix, so that
    "grc" and LanguageID.GREEK compare equal. None never matches.
    """
    left, right = resolve_language(a), resolve_language(b)
    if left is None or right is None:
        return False
    if left is LanguageID.UNDEFINED and right is LanguageID.UNDEFINED:
        # Unknown codes only match themselves
        return _code_of(a) == _code_of(b)
    return left is right


def _code_of(language: "LanguageID | str") -> str:
    return language.code if isinstance(language, LanguageID) else str(language)
