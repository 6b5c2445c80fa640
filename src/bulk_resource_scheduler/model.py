"""Concrete properties, resources and requirements.

Callers may bring their own implementations of the Property, Resource and
Requirement protocols; these cover the common case of comparing plain values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from bulk_resource_scheduler.types import (
    Modifier,
    Property,
    PropertyNameError,
    PropertyTypeError,
    Sense,
)


@dataclass(frozen=True)
class ValueProperty:
    """A property holding a single comparable value.

    On a requirement, ``value`` is the threshold or expected value; the
    modifier says how the resource-side value must relate to it:

        EQUAL               resource.value == value
        CONTAINS            value in resource.value
        GREATER_THAN_EQUAL  resource.value >= value
        LESS_THAN_EQUAL     resource.value <= value

    On a resource, sense and modifier are ignored.
    """

    name: str
    value: Any
    sense: Sense = Sense.REQUIRE
    modifier: Modifier = Modifier.EQUAL

    def matches(self, other: Property) -> bool:
        """Compare against the resource-side property ``other``.

        Raises PropertyTypeError if other is not a ValueProperty or the two
        values cannot be compared, PropertyNameError if the names differ.
        """
        if not isinstance(other, ValueProperty):
            raise PropertyTypeError(self, other)
        if other.name != self.name:
            raise PropertyNameError(self, other)

        try:
            if self.modifier is Modifier.EQUAL:
                return bool(other.value == self.value)
            if self.modifier is Modifier.CONTAINS:
                return self.value in other.value
            if self.modifier is Modifier.GREATER_THAN_EQUAL:
                return bool(other.value >= self.value)
            if self.modifier is Modifier.LESS_THAN_EQUAL:
                return bool(other.value <= self.value)
        except TypeError as e:
            raise PropertyTypeError(self, other, str(e)) from e
        raise PropertyTypeError(self, other, f"unknown modifier {self.modifier!r}")


def _index_properties(
    props: Mapping[str, Property] | Iterable[Property],
) -> Mapping[str, Property]:
    """Read-only name -> property view. Later duplicates win."""
    if isinstance(props, Mapping):
        return MappingProxyType(dict(props))
    return MappingProxyType({p.name: p for p in props})


@dataclass(frozen=True)
class SimpleResource:
    """A named resource with name-keyed properties.

    Accepts either a mapping or an iterable of properties.
    """

    name: str
    properties: Mapping[str, Property] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", _index_properties(self.properties))

    @classmethod
    def of(cls, name: str, *props: Property) -> SimpleResource:
        return cls(name, props)


@dataclass(frozen=True)
class SimpleRequirement:
    """A named requirement for between ``minimum`` and ``maximum`` resources."""

    name: str
    properties: tuple[Property, ...] = ()
    minimum: int = 1
    maximum: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", tuple(self.properties))

    def count(self) -> tuple[int, int]:
        return self.minimum, self.maximum

    @classmethod
    def of(
        cls,
        name: str,
        *props: Property,
        minimum: int = 1,
        maximum: int = 1,
    ) -> SimpleRequirement:
        return cls(name, props, minimum, maximum)
