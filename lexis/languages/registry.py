"""Language model registry - models are looked up by language, not by class."""
from lexis.core.errors import raise_error, unsupported_language
from lexis.core.languages import LanguageID, resolve_language

from .base import LanguageModel

_MODULES: dict[LanguageID, LanguageModel] = {}


def register(module: LanguageModel) -> None:
    """Register a language model, replacing any model for the same language."""
    _MODULES[module.language_id] = module


def unregister(language: LanguageID | str) -> None:
    _MODULES.pop(resolve_language(language), None)


def has_module(language: LanguageID | str) -> bool:
    return resolve_language(language) in _MODULES


def get_module(language: LanguageID | str) -> LanguageModel:
    """Get the language model for a LanguageID or language code.

    Raises:
        UnsupportedLanguage: no model is registered for the language
    """
    language_id = resolve_language(language)
    if language_id not in _MODULES:
        available = [m.code for m in _MODULES.values()]
        raise_error(unsupported_language(language, available, origin="language_registry"))
    return _MODULES[language_id]


def list_languages() -> list[dict]:
    """List all registered languages."""
    return [{"code": m.code, "name": m.name, "languageId": m.language_id.name} for m in _MODULES.values()]


def _auto_register() -> None:
    """Auto-register language modules on import."""
    from .greek import GreekModule
    register(GreekModule())


_auto_register()
