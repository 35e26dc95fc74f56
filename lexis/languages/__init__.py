"""Language models for multi-language support.

Language-specific behavior is looked up through a registry keyed by language.
"""
from .registry import get_module, register, unregister, has_module, list_languages
from .base import LanguageModel, LanguageModule, InflectionGrammar

__all__ = [
    "get_module",
    "register",
    "unregister",
    "has_module",
    "list_languages",
    "LanguageModel",
    "LanguageModule",
    "InflectionGrammar",
]
