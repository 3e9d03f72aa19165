"""
Unit tests for enum external names.

Covers:
  • json_property decorator (table population, unknown members)
  • external_name (override, literal fallback, malformed entries)
  • from_external_name reverse lookup
"""

from enum import Enum, IntEnum

import pytest

from custom_extensions.exceptions import NotFoundError
from custom_extensions.runtime.json_names import (
    external_name,
    from_external_name,
    json_property,
)


@json_property(Pending="custom_name", IN_PROGRESS="in_progress")
class Status(Enum):
    Active      = 1
    Pending     = 2
    IN_PROGRESS = 3


class Plain(Enum):
    Active = "active"
    Closed = "closed"


@json_property(Low="low")
class Priority(IntEnum):
    Low  = 0
    High = 1


class TestExternalName:
    def test_override_returned(self):
        assert external_name(Status.Pending) == "custom_name"

    def test_unannotated_member_uses_literal_name(self):
        assert external_name(Status.Active) == "Active"

    def test_enum_without_table_uses_literal_name(self):
        assert external_name(Plain.Active) == "Active"

    def test_literal_name_not_value(self):
        assert external_name(Plain.Closed) != Plain.Closed.value

    def test_int_enum_supported(self):
        assert external_name(Priority.Low) == "low"
        assert external_name(Priority.High) == "High"

    def test_idempotent(self):
        assert external_name(Status.IN_PROGRESS) == external_name(Status.IN_PROGRESS)

    def test_empty_override_falls_back(self):
        @json_property(On="")
        class Switch(Enum):
            On  = 1
            Off = 0

        assert external_name(Switch.On) == "On"

    def test_non_string_override_falls_back(self):
        class Mode(Enum):
            Fast = 1
            Slow = 2

        Mode.__json_property_names__ = {"Fast": 42}
        assert external_name(Mode.Fast) == "Fast"

    def test_malformed_table_falls_back(self):
        class Shape(Enum):
            Round = 1

        Shape.__json_property_names__ = ["Round"]
        assert external_name(Shape.Round) == "Round"


class TestJsonPropertyDecorator:
    def test_unknown_member_rejected(self):
        with pytest.raises(ValueError, match="Missing"):
            @json_property(Missing="x")
            class Color(Enum):
                Red = 1

    def test_alias_member_rejected(self):
        with pytest.raises(ValueError, match="Second"):
            @json_property(Second="bee")
            class Letters(Enum):
                First  = 1
                Second = 1

    def test_decorator_returns_same_class(self):
        class Axis(Enum):
            X = 1

        assert json_property(X="x")(Axis) is Axis

    def test_stacked_decorators_merge(self):
        @json_property(B="bee")
        @json_property(A="ay")
        class Letters(Enum):
            A = 1
            B = 2

        assert external_name(Letters.A) == "ay"
        assert external_name(Letters.B) == "bee"


class TestFromExternalName:
    def test_override_name_resolves_member(self):
        assert from_external_name(Status, "custom_name") is Status.Pending

    def test_literal_name_resolves_unannotated_member(self):
        assert from_external_name(Status, "Active") is Status.Active

    def test_overridden_literal_name_not_accepted(self):
        with pytest.raises(NotFoundError):
            from_external_name(Status, "Pending")

    def test_unknown_name_raises(self):
        with pytest.raises(NotFoundError):
            from_external_name(Plain, "active")
