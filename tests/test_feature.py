"""Tests for Feature construction, ordering, derivation and importers."""
import itertools

import pytest

from lexis.core.errors import EmptyValue, InvalidFeatureType, MissingImporter, UnknownValue
from lexis.core.languages import LanguageID
from lexis.features import Feature, FeatureImporter, FeatureType, FeatureValue

LAT = LanguageID.LATIN


def assert_canonical(feature: Feature):
    keys = [(fv.sort_order, fv.value.casefold()) for fv in feature.data]
    assert feature.values
    assert keys == sorted(keys)


# === Construction ===

def test_single_value():
    f = Feature(FeatureType.CASE, "x", LAT)
    assert f.value == "x"
    assert f.values == ["x"]
    assert f.data == [FeatureValue("x", 1)]


def test_list_keeps_position_order():
    f = Feature(FeatureType.CASE, ["b", "a"], LAT)
    assert f.values == ["b", "a"]
    assert [fv.sort_order for fv in f.data] == [1, 2]


def test_pairs_sorted_by_sort_order():
    f = Feature(FeatureType.CASE, [["a", 2], ["b", 1]], LAT)
    assert f.values == ["b", "a"]
    assert f.value == "b a"


def test_pairs_missing_or_invalid_sort_order_default_to_one():
    f = Feature(FeatureType.GENDER, [("masculine", 2), ("neuter",), ("feminine", "x")], LAT)
    assert f.values == ["feminine", "neuter", "masculine"]
    assert [fv.sort_order for fv in f.data] == [1, 1, 2]


def test_numeric_string_sort_order_is_parsed():
    f = Feature(FeatureType.GENDER, [("masculine", "2"), ("feminine", "1")], LAT)
    assert f.values == ["feminine", "masculine"]


def test_equal_sort_order_ties_broken_alphabetically():
    f = Feature(FeatureType.GENDER, [("neuter", 1), ("Feminine", 1), ("masculine", 1)], LAT)
    assert f.values == ["Feminine", "masculine", "neuter"]


def test_order_independent_of_insertion():
    pairs = [("b", 1), ("a", 1), ("c", 2), ("d", 1)]
    orders = {tuple(Feature(FeatureType.NOTE, list(p), LAT).values) for p in itertools.permutations(pairs)}
    assert orders == {("a", "b", "d", "c")}


def test_explicit_constructors():
    assert Feature.from_value(FeatureType.CASE, "dative", LAT, sort_order=3).data == [FeatureValue("dative", 3)]
    assert Feature.from_values(FeatureType.CASE, ["b", "a"], LAT).values == ["b", "a"]
    assert Feature.from_pairs(FeatureType.CASE, [("a", 2), ("b", 1)], LAT).values == ["b", "a"]


def test_explicit_list_constructor_does_not_guess_shape():
    f = Feature.from_values(FeatureType.NOTE, ["a b", "c"], LAT)
    assert f.values == ["a b", "c"]


@pytest.mark.parametrize("spelling,expected", [
    ("case", FeatureType.CASE),
    ("grmCase", FeatureType.CASE),
    ("class", FeatureType.CLASS),
    ("grmClass", FeatureType.CLASS),
    ("part", FeatureType.PART),
    ("part of speech", FeatureType.PART),
    (FeatureType.TENSE, FeatureType.TENSE),
])
def test_type_synonyms_resolve_to_one_type(spelling, expected):
    assert Feature(spelling, "x", LAT).type is expected


def test_invalid_type():
    with pytest.raises(InvalidFeatureType, match="not supported"):
        Feature("colour", "red", LAT)


@pytest.mark.parametrize("data", [None, "", []])
def test_empty_data(data):
    with pytest.raises(EmptyValue):
        Feature(FeatureType.CASE, data, LAT)


@pytest.mark.parametrize("language_id", [None, ""])
def test_missing_language(language_id):
    with pytest.raises(EmptyValue, match="language"):
        Feature(FeatureType.CASE, "x", language_id)


def test_allowed_values():
    unrestricted = Feature(FeatureType.CASE, "x", LAT)
    assert unrestricted.allows_unrestricted_values
    assert unrestricted.is_allowed("anything")

    restricted = Feature(FeatureType.CASE, "nominative", LAT, allowed_values=["nominative", "genitive"])
    assert not restricted.allows_unrestricted_values
    assert restricted.is_allowed("genitive")
    assert not restricted.is_allowed("ablative")


# === Accessors and equality ===

def test_has_value(case_feature):
    assert case_feature.has_value("accusative")
    assert not case_feature.has_value("dative")
    assert "nominative" in case_feature
    assert list(case_feature) == ["nominative", "accusative"]
    assert len(case_feature) == 2
    assert str(case_feature) == "nominative accusative"


def test_equality():
    a = Feature(FeatureType.CASE, [("b", 2), ("a", 1)], LAT)
    b = Feature(FeatureType.CASE, [("a", 1), ("b", 2)], "lat")
    assert a.is_equal(b)
    assert a == b


def test_not_equal_when_language_differs():
    a = Feature(FeatureType.CASE, "nominative", LAT)
    b = Feature(FeatureType.CASE, "nominative", LanguageID.GREEK)
    assert not a.is_equal(b)


def test_not_equal_when_type_or_values_differ():
    a = Feature(FeatureType.CASE, "nominative", LAT)
    assert not a.is_equal(Feature(FeatureType.NUMBER, "nominative", LAT))
    assert not a.is_equal(Feature(FeatureType.CASE, "genitive", LAT))
    assert not a.is_equal(Feature(FeatureType.CASE, ["nominative", "genitive"], LAT))


def test_equality_uses_injected_language_comparison():
    a = Feature(FeatureType.CASE, "x", LAT)
    b = Feature(FeatureType.CASE, "x", LanguageID.GREEK)
    assert a.is_equal(b, compare=lambda left, right: True)


# === Mutation ===

def test_add_value_lower_sort_order_first():
    f = Feature(FeatureType.CASE, ["a"], LAT)
    f.add_value("z", 0)
    assert f.values[0] == "z"


def test_add_value_default_sort_order_and_chaining():
    f = Feature(FeatureType.CASE, [("m", 1), ("y", 2)], LAT)
    assert f.add_value("b").add_value("c", 2) is f
    assert f.values == ["b", "m", "c", "y"]
    assert_canonical(f)


def test_add_value_rejects_empty():
    f = Feature(FeatureType.CASE, "x", LAT)
    with pytest.raises(EmptyValue):
        f.add_value("")
    assert f.values == ["x"]


def test_add_values_accepts_every_shape():
    f = Feature(FeatureType.NOTE, "m", LAT)
    f.add_values("a").add_values(["c", "b"]).add_values([("z", 0)])
    assert f.values == ["z", "a", "c", "m", "b"]
    assert_canonical(f)


# === Derivation ===

def test_create_feature_shares_kind():
    f = Feature(FeatureType.CASE, "nominative", LAT, allowed_values=["nominative", "genitive"])
    g = f.create_feature("genitive")
    assert g.value == "genitive"
    assert (g.type, g.language_id, g.allowed_values) == (f.type, f.language_id, f.allowed_values)
    assert f.value == "nominative"


def test_create_features(case_feature):
    g = case_feature.create_features([("vocative", 2), ("dative", 1)])
    assert g.values == ["dative", "vocative"]
    assert g.type is FeatureType.CASE
    assert case_feature.values == ["nominative", "accusative"]


def test_copy_is_independent(case_feature, case_importer):
    case_feature.add_importer(case_importer)
    clone = case_feature.copy()
    clone.add_value("dative", 3)
    assert case_feature.values == ["nominative", "accusative"]
    assert clone.is_equal(case_feature) is False
    assert clone.importers["default"] is case_importer


# === Importers ===

def test_add_from_importer(case_importer):
    f = Feature(FeatureType.CASE, [("genitive", 2)], LAT)
    f.add_importer(case_importer)
    assert f.add_from_importer("Nom") is f
    assert f.values == ["nominative", "genitive"]


def test_add_from_importer_keeps_source_sort_order(case_importer):
    f = Feature(FeatureType.CASE, "genitive", LAT).add_importer(case_importer)
    f.add_from_importer(["Acc", "Abl"])
    assert f.data == [
        FeatureValue("accusative", 1),
        FeatureValue("genitive", 1),
        FeatureValue("ablative", 2),
    ]


def test_multi_valued_mapping_adds_every_value(case_importer):
    f = Feature(FeatureType.CASE, "genitive", LAT).add_importer(case_importer)
    f.add_from_importer([("Nom,Acc", 2)])
    assert f.values == ["genitive", "accusative", "nominative"]


def test_named_importers(case_importer):
    f = Feature(FeatureType.CASE, "genitive", LAT)
    f.add_importer(case_importer, "ud")
    f.add_importer(FeatureImporter(return_unknown=True), "passthrough")
    f.add_from_importer("Acc", "ud").add_from_importer("locative", "passthrough")
    assert sorted(f.values) == ["accusative", "genitive", "locative"]


def test_last_importer_registration_wins():
    f = Feature(FeatureType.CASE, "genitive", LAT)
    f.add_importer(FeatureImporter().map("N", "nominative"), "tags")
    f.add_importer(FeatureImporter().map("N", "neuter"), "tags")
    assert f.create_from_importer("N", "tags").value == "neuter"


def test_missing_importer_is_reported(case_feature):
    with pytest.raises(MissingImporter, match="default"):
        case_feature.add_from_importer("Nom")
    with pytest.raises(MissingImporter):
        case_feature.create_from_importer("Nom", "ud")
    assert case_feature.values == ["nominative", "accusative"]


def test_unknown_value_leaves_feature_unchanged(case_importer):
    f = Feature(FeatureType.CASE, "genitive", LAT).add_importer(case_importer)
    with pytest.raises(UnknownValue, match="Ins"):
        f.add_from_importer(["Nom", "Ins"])
    assert f.values == ["genitive"]


def test_create_from_importer(case_importer):
    f = Feature(FeatureType.CASE, "genitive", LAT, allowed_values=["nominative", "genitive"])
    f.add_importer(case_importer)
    g = f.create_from_importer(["Nom", "Acc"])
    assert g.values == ["nominative", "accusative"]
    assert (g.type, g.language_id, g.allowed_values) == (f.type, f.language_id, f.allowed_values)
    assert f.values == ["genitive"]


@pytest.mark.parametrize("value", [None, ""])
def test_create_feature_rejects_empty(case_feature, value):
    with pytest.raises(EmptyValue):
        case_feature.create_feature(value)


def test_from_value_rejects_empty():
    with pytest.raises(EmptyValue):
        Feature.from_value(FeatureType.CASE, None, LAT)
    with pytest.raises(EmptyValue):
        Feature.from_value(FeatureType.CASE, "", LAT)


@pytest.mark.parametrize("data", [["a", ""], ["a", None], [("a", 1), ("", 2)], [(None, 1)]])
def test_empty_elements_rejected(data):
    with pytest.raises(EmptyValue):
        Feature(FeatureType.CASE, data, LAT)


def test_create_features_rejects_empty_elements(case_feature):
    with pytest.raises(EmptyValue):
        case_feature.create_features(["dative", ""])
    with pytest.raises(EmptyValue):
        case_feature.add_values([("dative", 1), (None, 2)])
    assert case_feature.values == ["nominative", "accusative"]
