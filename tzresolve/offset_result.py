from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

from .errors import AmbiguousOffsetError, UndefinedOffsetError

T = TypeVar("T")
U = TypeVar("U")


class OffsetResultKind(Enum):
    UNAMBIGUOUS = 0
    AMBIGUOUS = 1
    UNDEFINED = 2


@dataclass(frozen=True)
class OffsetResult(Generic[T]):
    """
    Result of resolving a wall-clock time against a timezone.

    Either unambiguous (one value), ambiguous (two values, earlier transition
    side first) or undefined (the wall-clock time falls in a gap).
    Build instances with the `unambiguous`, `ambiguous` and `undefined`
    constructors.
    """

    kind: OffsetResultKind
    first: T | None = None
    second: T | None = None

    @classmethod
    def unambiguous(cls, value: T) -> "OffsetResult[T]":
        return cls(OffsetResultKind.UNAMBIGUOUS, value)

    @classmethod
    def ambiguous(cls, earlier: T, later: T) -> "OffsetResult[T]":
        return cls(OffsetResultKind.AMBIGUOUS, earlier, later)

    @classmethod
    def undefined(cls) -> "OffsetResult[T]":
        return cls(OffsetResultKind.UNDEFINED)

    def unwrap(self) -> T:
        """Return the value, treating ambiguity as an error."""
        if self.kind is OffsetResultKind.AMBIGUOUS:
            raise AmbiguousOffsetError("Attempt to unwrap an ambiguous offset")
        return self._value(self.first)

    def unwrap_first(self) -> T:
        return self._value(self.first)

    def unwrap_second(self) -> T:
        if self.kind is OffsetResultKind.AMBIGUOUS:
            return self._value(self.second)
        return self._value(self.first)

    def take(self) -> T | None:
        if self.kind is OffsetResultKind.UNAMBIGUOUS:
            return self.first
        return None

    def take_first(self) -> T | None:
        return self.first

    def take_second(self) -> T | None:
        if self.kind is OffsetResultKind.AMBIGUOUS:
            return self.second
        return self.first

    def is_some(self) -> bool:
        return self.kind is OffsetResultKind.UNAMBIGUOUS

    def is_none(self) -> bool:
        return self.kind is OffsetResultKind.UNDEFINED

    def is_ambiguous(self) -> bool:
        return self.kind is OffsetResultKind.AMBIGUOUS

    def map(self, func: Callable[[T], U]) -> "OffsetResult[U]":
        """Apply `func` to every value held by this result."""
        match self.kind:
            case OffsetResultKind.UNAMBIGUOUS:
                first = func(self.first)  # type: ignore[arg-type]
                return OffsetResult.unambiguous(first)
            case OffsetResultKind.AMBIGUOUS:
                return OffsetResult.ambiguous(
                    func(self.first), func(self.second)  # type: ignore[arg-type]
                )
            case _:
                return OffsetResult.undefined()

    def _value(self, value: T | None) -> T:
        if self.kind is OffsetResultKind.UNDEFINED:
            raise UndefinedOffsetError("Attempt to unwrap an invalid offset")
        return value  # type: ignore[return-value]

    def __repr__(self) -> str:
        match self.kind:
            case OffsetResultKind.UNAMBIGUOUS:
                return f"OffsetResult.unambiguous({self.first!r})"
            case OffsetResultKind.AMBIGUOUS:
                return f"OffsetResult.ambiguous({self.first!r}, {self.second!r})"
            case _:
                return "OffsetResult.undefined()"
