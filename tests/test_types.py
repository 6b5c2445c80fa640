"""Tests for enums, protocols, Shortfall and the error types."""

from __future__ import annotations

import pytest

from conftest import make_requirement, make_resource, prop


# ---------------------------------------------------------------------------
# Sense / Modifier
# ---------------------------------------------------------------------------
class TestEnums:

    def test_four_senses(self):
        from bulk_resource_scheduler.types import Sense

        assert [s.value for s in Sense] == ["require", "prefer", "avoid", "never"]

    def test_four_modifiers(self):
        from bulk_resource_scheduler.types import Modifier

        assert [m.value for m in Modifier] == [
            "equal", "contains", "greater_than_equal", "less_than_equal",
        ]

    def test_lookup_by_value(self):
        from bulk_resource_scheduler.types import Modifier, Sense

        assert Sense("avoid") is Sense.AVOID
        assert Modifier("contains") is Modifier.CONTAINS
        with pytest.raises(ValueError):
            Sense("maybe")


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------
class TestProtocols:
    """The concrete model satisfies the runtime-checkable protocols."""

    def test_value_property_is_property(self):
        from bulk_resource_scheduler.types import Property

        assert isinstance(prop("P1", 1), Property)

    def test_simple_resource_is_resource(self):
        from bulk_resource_scheduler.types import Resource

        assert isinstance(make_resource("R1", P1=1), Resource)

    def test_simple_requirement_is_requirement(self):
        from bulk_resource_scheduler.types import Requirement

        assert isinstance(make_requirement("Req1", prop("P1", 1)), Requirement)


# ---------------------------------------------------------------------------
# Shortfall
# ---------------------------------------------------------------------------
class TestShortfall:

    def test_message(self):
        from bulk_resource_scheduler.types import Shortfall

        s = Shortfall("Req2", minimum=3, assigned=1)
        assert s.message == "Unable to find 3 resources for Req2 requirement"
        assert s.missing == 2

    def test_frozen(self):
        from bulk_resource_scheduler.types import Shortfall

        s = Shortfall("Req2", minimum=3, assigned=1)
        with pytest.raises(AttributeError):
            s.assigned = 3  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class TestUnmetMinimumError:

    def test_messages_joined_by_newline(self):
        from bulk_resource_scheduler.types import Shortfall, UnmetMinimumError

        err = UnmetMinimumError([
            Shortfall("Req1", 2, 0),
            Shortfall("Req2", 1, 0),
        ])
        assert str(err) == (
            "Unable to find 2 resources for Req1 requirement\n"
            "Unable to find 1 resources for Req2 requirement"
        )
        assert err.requirement_names == ["Req1", "Req2"]

    def test_keeps_copy_of_assignment(self):
        from bulk_resource_scheduler.types import Shortfall, UnmetMinimumError

        req = make_requirement("Req1", prop("P1", 1))
        assignment = {"R1": req}
        err = UnmetMinimumError([Shortfall("Req2", 1, 0)], assignment)
        assignment.clear()
        assert err.assignment == {"R1": req}

    def test_default_assignment_empty(self):
        from bulk_resource_scheduler.types import Shortfall, UnmetMinimumError

        err = UnmetMinimumError([Shortfall("Req1", 1, 0)])
        assert err.assignment == {}
        assert isinstance(err, Exception)


class TestPropertyMatchErrors:

    def test_hierarchy(self):
        from bulk_resource_scheduler.types import (
            PropertyMatchError,
            PropertyNameError,
            PropertyTypeError,
        )

        assert issubclass(PropertyTypeError, PropertyMatchError)
        assert issubclass(PropertyNameError, PropertyMatchError)

    def test_name_error_attributes(self):
        from bulk_resource_scheduler.types import PropertyNameError

        a, b = prop("P1", 1), prop("P2", 1)
        err = PropertyNameError(a, b)
        assert err.prop is a
        assert err.other is b
        assert "'P1' != 'P2'" in str(err)

    def test_type_error_mentions_foreign_type(self):
        from bulk_resource_scheduler.types import PropertyTypeError

        err = PropertyTypeError(prop("P1", 1), object(), "wrong kind")
        assert "object" in str(err)
        assert "wrong kind" in str(err)
