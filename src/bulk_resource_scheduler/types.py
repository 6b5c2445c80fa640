"""Shared types: senses, modifiers, the matching protocols, and errors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Protocol, Sequence, runtime_checkable


class Sense(Enum):
    """How a requirement property affects a resource's acceptability."""

    REQUIRE = "require"  # must be present and match
    PREFER = "prefer"    # soft: missing or mismatching costs a point
    AVOID = "avoid"      # soft: a match is counted against the resource
    NEVER = "never"      # must not be present and match


class Modifier(Enum):
    """Comparison operator used inside a concrete Property's matches().

    Opaque to the matcher and scheduler.
    """

    EQUAL = "equal"
    CONTAINS = "contains"
    GREATER_THAN_EQUAL = "greater_than_equal"
    LESS_THAN_EQUAL = "less_than_equal"


@runtime_checkable
class Property(Protocol):
    """A named, comparable characteristic.

    matches() returns True or False when the comparison has a definite
    answer and raises a PropertyMatchError when it does not.
    """

    @property
    def name(self) -> str: ...

    @property
    def sense(self) -> Sense: ...

    @property
    def modifier(self) -> Modifier: ...

    def matches(self, other: Property) -> bool: ...


@runtime_checkable
class Resource(Protocol):
    """Something that can fill at most one requirement.

    properties may be a name-keyed mapping or a plain sequence; the matcher
    indexes a sequence by name.
    """

    @property
    def name(self) -> str: ...

    @property
    def properties(self) -> Mapping[str, Property] | Sequence[Property]: ...


@runtime_checkable
class Requirement(Protocol):
    """A demand for between min and max resources matching its properties."""

    @property
    def name(self) -> str: ...

    @property
    def properties(self) -> Sequence[Property]: ...

    def count(self) -> tuple[int, int]: ...


class PropertyMatchError(Exception):
    """A property comparison has no definite answer."""


class PropertyTypeError(PropertyMatchError):
    """Raised when a property is compared with a foreign concrete variant."""

    def __init__(self, prop: Property, other: object, reason: str = "") -> None:
        self.prop = prop
        self.other = other
        detail = f" ({reason})" if reason else ""
        super().__init__(
            f"Cannot compare property {prop.name!r} with "
            f"{type(other).__name__}{detail}"
        )


class PropertyNameError(PropertyMatchError):
    """Raised when two compared properties do not share a name."""

    def __init__(self, prop: Property, other: Property) -> None:
        self.prop = prop
        self.other = other
        super().__init__(
            f"Property names don't match: {prop.name!r} != {other.name!r}"
        )


@dataclass(frozen=True)
class Shortfall:
    """One requirement that min-fill could not satisfy."""

    requirement: str
    minimum: int
    assigned: int

    @property
    def missing(self) -> int:
        return self.minimum - self.assigned

    @property
    def message(self) -> str:
        return (
            f"Unable to find {self.minimum} resources for "
            f"{self.requirement} requirement"
        )


class UnmetMinimumError(Exception):
    """One or more requirements received fewer resources than their minimum.

    The assignment that was built regardless is kept on the error so that
    callers who raise it (schedule(..., strict=True)) do not lose it.
    """

    def __init__(
        self,
        shortfalls: Iterable[Shortfall],
        assignment: dict[str, Requirement] | None = None,
    ) -> None:
        self.shortfalls = tuple(shortfalls)
        self.assignment = dict(assignment) if assignment is not None else {}
        super().__init__("\n".join(s.message for s in self.shortfalls))

    @property
    def requirement_names(self) -> list[str]:
        return [s.requirement for s in self.shortfalls]
