"""
Exception hierarchy for combat log parsing.

Every failure is scoped to a single line. Decoders raise the most specific
subclass; the event assembler wraps it in LineParseError with the raw fields.
"""

from typing import Optional, Sequence


class ParseError(ValueError):
    """Base class for all combat log parse failures."""


class InvalidNumber(ParseError):
    def __init__(self, field: str, expected_type: str):
        self.field = field
        self.expected_type = expected_type
        super().__init__(f"Could not parse {field!r} as {expected_type}")


class InvalidBool(ParseError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Could not parse {field!r} as bool (expected nil, 0 or 1)")


class InvalidHex(ParseError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Could not parse {field!r} as hex")


class UnknownGuidKind(ParseError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"GUID type not found: {token!r}")


class UnknownEnumValue(ParseError):
    def __init__(self, kind: str, raw: str):
        self.kind = kind
        self.raw = raw
        super().__init__(f"Failed to parse {kind}: {raw!r}")


class UnknownPowerType(UnknownEnumValue):
    def __init__(self, code: int):
        self.code = code
        super().__init__("PowerType", str(code))


class UnknownPrefix(ParseError):
    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unknown prefix: {event_type}")


class UnknownSuffix(ParseError):
    def __init__(self, event_type: str):
        self.event_type = event_type
        super().__init__(f"Unknown suffix: {event_type}")


class MalformedPowerInfo(ParseError):
    def __init__(self, cells: Sequence[str]):
        self.cells = tuple(cells)
        super().__init__(f"Power info cells have unequal arity: {list(cells)}")


class MalformedCombatantInfo(ParseError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed COMBATANT_INFO: {reason}")


class DateParseFailure(ParseError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Failed to parse date: {raw!r}")


class FieldSplitFailure(ParseError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Error splitting date & event type: {raw!r}")


class TruncatedRecord(ParseError):
    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} needs {expected} fields, got {actual}")


class MissingActor(ParseError):
    def __init__(self, what: str):
        self.what = what
        super().__init__(f"{what} requires an actor but the GUID is empty")


class LineParseError(ParseError):
    """A parse failure together with the line that caused it."""

    def __init__(self, fields: Sequence[str], cause: ParseError, line_number: Optional[int] = None):
        self.fields = list(fields)
        self.cause = cause
        self.line_number = line_number
        # Original text, when the caller still has it
        self.line: Optional[str] = None
        super().__init__(f"Error parsing line: {self.fields!r}: {cause}")

    @property
    def raw_line(self) -> str:
        if self.line is not None:
            return self.line
        return ",".join(self.fields)


def require(fields: Sequence[str], count: int, what: str) -> None:
    """Raise TruncatedRecord unless at least `count` fields are present."""
    if len(fields) < count:
        raise TruncatedRecord(what, count, len(fields))
