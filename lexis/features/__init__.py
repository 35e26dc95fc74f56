"""Grammatical features and external tag importers."""
from .types import FeatureType
from .values import FeatureValue
from .importer import FeatureImporter
from .feature import Feature

__all__ = [
    "FeatureType",
    "FeatureValue",
    "FeatureImporter",
    "Feature",
]
