from enum import Enum


class TzResolveError(Exception):
    """
    Base class for every error raised by tzresolve.
    """


class PosixTzError(TzResolveError, ValueError):
    """
    Raised when a POSIX TZ string cannot be used.
    """


class GrammarRule(Enum):
    """
    The grammar rule of a POSIX TZ string that failed to match.
    """

    NAME = "name"
    OFFSET = "offset"
    TIME = "time"
    DATE = "date"
    RULE = "rule"
    END = "end of input"


class ParseError(PosixTzError):
    def __init__(self, text: str, rule: GrammarRule, position: int) -> None:
        self.text = text
        self.rule = rule
        self.position = position
        super().__init__(
            f"Invalid TZ string {text!r}: expected {rule.value} at position {position}"
        )


class RangeErrorKind(Enum):
    TIME = "time"
    DATE = "date"


class RangeError(PosixTzError):
    def __init__(self, text: str, kind: RangeErrorKind) -> None:
        self.text = text
        self.kind = kind
        super().__init__(f"{kind.value} field out of range in TZ string {text!r}")


class PosixTzConversionError(PosixTzError):
    """
    Raised when a date cannot be represented in a POSIX "timezone".
    """


class UnknownNameError(TzResolveError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown timezone name {self.name!r}"


class AmbiguousOffsetError(TzResolveError, ValueError):
    pass


class UndefinedOffsetError(TzResolveError, ValueError):
    pass


class TimespanInvariantError(TzResolveError, RuntimeError):
    """
    A timespan table has no span for an instant. Only corrupted data can cause this.
    """


class UndeterminedTimezoneError(TzResolveError, LookupError):
    pass
