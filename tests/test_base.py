"""
Tests for enumeration declaration and class-level helpers.
"""

import json

import pytest

from enumerate_it import (
    Base,
    BehaviorNotFoundError,
    ConfigurationError,
    EnumerationNotFoundError,
    EnumerationRegistry,
    EnumerationValue,
    InvalidEnumerationError,
    SortMode,
)


class RelationshipStatus(Base):
    associate_values = dict(
        single=(1, "Single"),
        married=(2, "Married"),
        widow=(3, "Widow"),
        divorced=(4, "Divorced"),
    )


class TestDeclaration:
    """Tests for the accepted declaration forms."""

    def test_pairs_create_constants(self):
        assert RelationshipStatus.SINGLE == 1
        assert RelationshipStatus.MARRIED == 2
        assert RelationshipStatus.WIDOW == 3
        assert RelationshipStatus.DIVORCED == 4

    def test_bare_values_use_humanized_keys(self):
        class Answer(Base):
            associate_values = dict(not_sure=1, yes_please=2)

        assert Answer.NOT_SURE == 1
        assert Answer.to_a() == [("Not sure", 1), ("Yes please", 2)]

    def test_list_of_keys_uses_key_as_value(self):
        class Gender(Base):
            associate_values = ["male", "female"]

        assert Gender.MALE == "male"
        assert Gender.FEMALE == "female"
        assert Gender.list() == ["female", "male"]

    def test_mapping_entries_with_label(self):
        class Priority(Base):
            associate_values = dict(
                low={"value": 1, "label": "Low priority"},
                high={"value": 9},
            )

        assert Priority.enumeration() == {
            "low": (1, "Low priority"),
            "high": (9, "High"),
        }

    def test_associate_values_classmethod(self):
        class Color(Base):
            pass

        Color.associate_values("red", blue=("b", "Blue"))

        assert Color.RED == "red"
        assert Color.BLUE == "b"
        assert Color.keys() == ["red", "blue"]

    def test_redeclaration_drops_stale_constants(self):
        class Color(Base):
            associate_values = ["red", "green"]

        Color.associate_values("blue")

        assert Color.keys() == ["blue"]
        assert not hasattr(Color, "RED")

    def test_duplicate_keys_are_rejected(self):
        with pytest.raises(InvalidEnumerationError) as exc_info:
            class Broken(Base):
                associate_values = ["on", "on"]

        assert exc_info.value.details["key"] == "on"

    def test_invalid_key_is_rejected(self):
        with pytest.raises(InvalidEnumerationError):
            class Broken(Base):
                associate_values = {"not valid": 1}

    def test_entry_with_too_many_items_is_rejected(self):
        with pytest.raises(InvalidEnumerationError):
            class Broken(Base):
                associate_values = dict(one=(1, "One", "extra"))

    def test_mapping_entry_without_value_is_rejected(self):
        with pytest.raises(InvalidEnumerationError):
            class Broken(Base):
                associate_values = dict(one={"label": "One"})

    def test_declaration_of_wrong_type_is_rejected(self):
        with pytest.raises(InvalidEnumerationError):
            class Broken(Base):
                associate_values = 42

    def test_unknown_sort_mode_is_rejected(self):
        with pytest.raises(ConfigurationError):
            class Broken(Base):
                sort_by = "random"
                associate_values = ["a"]

    def test_enumerations_are_registered_by_name(self):
        class ShippingMethod(Base):
            associate_values = ["ground", "air"]

        assert EnumerationRegistry.get("ShippingMethod") is ShippingMethod
        assert EnumerationRegistry.get_or_raise("ShippingMethod") is ShippingMethod

    def test_unregistered_name_raises(self):
        with pytest.raises(EnumerationNotFoundError):
            EnumerationRegistry.get_or_raise("NoSuchEnumeration")

    def test_subclass_inherits_values(self):
        class ExtendedStatus(RelationshipStatus):
            pass

        assert ExtendedStatus.list() == [1, 2, 3, 4]
        assert EnumerationRegistry.get("ExtendedStatus") is ExtendedStatus

    def test_definitions_expose_entries(self):
        first = RelationshipStatus.definitions()[0]

        assert first == EnumerationValue("single", 1, "Single")
        assert first.constant == "SINGLE"
        assert first.behavior_name == "Single"
        assert first.to_dict()["label"] == "Single"


class TestListing:
    """Tests for listing helpers."""

    def test_list_returns_sorted_codes(self):
        class Unordered(Base):
            associate_values = dict(c=3, a=1, b=2)

        assert Unordered.list() == [1, 2, 3]

    def test_to_a_sorted_by_translation(self):
        assert RelationshipStatus.to_a() == [
            ("Divorced", 4),
            ("Married", 2),
            ("Single", 1),
            ("Widow", 3),
        ]

    def test_to_a_sorted_by_value(self):
        class ByValue(Base):
            sort_by = "value"
            associate_values = dict(b=(2, "Alpha"), a=(1, "Beta"))

        assert ByValue.sort_mode() == SortMode.VALUE
        assert ByValue.to_a() == [("Beta", 1), ("Alpha", 2)]

    def test_to_a_sorted_by_name(self):
        class ByName(Base):
            sort_by = "name"
            associate_values = dict(zeta=(1, "A"), alpha=(2, "Z"))

        assert ByName.to_a() == [("Z", 2), ("A", 1)]

    def test_to_a_keeps_declaration_order(self):
        class Unsorted(Base):
            sort_by = "none"
            associate_values = dict(zeta=(3, "Z"), alpha=(1, "A"), mid=(2, "M"))

        assert Unsorted.to_a() == [("Z", 3), ("A", 1), ("M", 2)]

    def test_to_json(self):
        data = json.loads(RelationshipStatus.to_json())

        assert data[0] == {"value": 4, "label": "Divorced"}
        assert len(data) == 4

    def test_each_value_and_each_translation(self):
        assert list(RelationshipStatus.each_value()) == [1, 2, 3, 4]
        assert list(RelationshipStatus.each_translation()) == [
            "Divorced",
            "Married",
            "Single",
            "Widow",
        ]

    def test_length(self):
        assert RelationshipStatus.length() == 4


class TestLookup:
    """Tests for lookups by name, key and value."""

    def test_value_for(self):
        assert RelationshipStatus.value_for("MARRIED") == 2
        assert RelationshipStatus.value_for("married") == 2
        assert RelationshipStatus.value_for("ENGAGED") is None

    def test_values_for(self):
        assert RelationshipStatus.values_for(["MARRIED", "SINGLE"]) == [2, 1]

    def test_value_from_key(self):
        assert RelationshipStatus.value_from_key("widow") == 3
        assert RelationshipStatus.value_from_key("unknown") is None

    def test_key_for(self):
        assert RelationshipStatus.key_for(RelationshipStatus.MARRIED) == "married"
        assert RelationshipStatus.key_for(99) is None

    def test_includes(self):
        assert RelationshipStatus.includes(1)
        assert not RelationshipStatus.includes(5)

    def test_booleans_are_not_integer_codes(self):
        assert not RelationshipStatus.includes(True)
        assert RelationshipStatus.key_for(True) is None
        assert RelationshipStatus.translate(True) is True

    def test_boolean_codes(self):
        class Toggle(Base):
            associate_values = dict(on=(True, "On"), off=(False, "Off"))

        assert Toggle.includes(False)
        assert not Toggle.includes(0)
        assert Toggle.translate(True) == "On"

    def test_translate_returns_label(self):
        assert RelationshipStatus.translate(4) == "Divorced"

    def test_translate_returns_unknown_value_unchanged(self):
        assert RelationshipStatus.translate(7) == 7

    def test_enumeration_name(self):
        assert RelationshipStatus.enumeration_name() == "relationship_status"


class TestBehaviorClasses:
    """Tests for nested per-value behavior classes."""

    def test_behavior_class_for_value(self):
        class Plan(Base):
            associate_values = ["married", "single"]

            class Married:
                pass

            class Single:
                pass

        assert Plan.behavior_class_for("married") is Plan.Married
        assert Plan.behavior_class_for("unknown") is None

    def test_missing_behavior_class_raises(self):
        class Plan(Base):
            associate_values = ["married"]

        with pytest.raises(BehaviorNotFoundError) as exc_info:
            Plan.behavior_class_for("married")

        assert exc_info.value.to_dict()["details"]["behavior"] == "Married"

    def test_explicit_behavior_name(self):
        class Plan(Base):
            associate_values = dict(married={"value": 1, "behavior": "Couple"})

            class Couple:
                pass

        assert Plan.behavior_class_for(1) is Plan.Couple

    @pytest.mark.parametrize("key", ["a", "NEW"])
    def test_constant_clashing_with_behavior_class_is_rejected(self, key):
        behavior = key.upper()

        with pytest.raises(InvalidEnumerationError) as exc_info:
            type("Grade", (Base,), {"associate_values": [key], behavior: type(behavior, (), {})})

        assert exc_info.value.to_dict()["details"]["key"] == key

    def test_short_keys_can_name_their_behavior_class(self):
        class Grade(Base):
            associate_values = dict(a={"value": "a", "behavior": "GradeA"})

            class GradeA:
                pass

        assert Grade.A == "a"
        assert Grade.behavior_class_for("a") is Grade.GradeA

    def test_short_keys_without_behavior_classes_are_accepted(self):
        class Grade(Base):
            associate_values = ["a", "b"]

        assert Grade.A == "a"
        assert Grade.list() == ["a", "b"]
