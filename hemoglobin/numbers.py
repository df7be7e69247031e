"""Bloodless numbers: constants, variables and numeric comparisons."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Any

from hemoglobin.ternary import Ternary

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    number = int(text)
    return number if number <= _USIZE_MAX else None


def _is_unsigned(value: object) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= _USIZE_MAX
    )


class InvalidComparisonError(ValueError):
    """Raised when a string is not a valid comparison."""


class Operator(enum.Enum):
    """A comparison operator; the value is its serialised tag."""

    GREATER_THAN = "GreaterThan"
    GREATER_THAN_OR_EQUAL = "GreaterThanOrEqual"
    LOWER_THAN_OR_EQUAL = "LowerThanOrEqual"
    EQUAL = "Equal"
    LOWER_THAN = "LowerThan"
    NOT_EQUAL = "NotEqual"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Operator.GREATER_THAN: ">",
    Operator.GREATER_THAN_OR_EQUAL: ">=",
    Operator.LOWER_THAN_OR_EQUAL: "<=",
    Operator.EQUAL: "=",
    Operator.LOWER_THAN: "<",
    Operator.NOT_EQUAL: "!=",
}

# Order matters: two-character operators must be tried before their prefixes.
_PREFIXES = (
    (">=", Operator.GREATER_THAN_OR_EQUAL),
    ("<=", Operator.LOWER_THAN_OR_EQUAL),
    (">", Operator.GREATER_THAN),
    ("<", Operator.LOWER_THAN),
    ("=", Operator.EQUAL),
    ("!=", Operator.NOT_EQUAL),
)

_INT_TESTS = {
    Operator.GREATER_THAN: lambda a, b: a > b,
    Operator.GREATER_THAN_OR_EQUAL: lambda a, b: a >= b,
    Operator.LOWER_THAN_OR_EQUAL: lambda a, b: a <= b,
    Operator.EQUAL: lambda a, b: a == b,
    Operator.LOWER_THAN: lambda a, b: a < b,
    Operator.NOT_EQUAL: lambda a, b: a != b,
}

_METHOD_NAMES = {
    Operator.GREATER_THAN: "gt",
    Operator.GREATER_THAN_OR_EQUAL: "gt_eq",
    Operator.LOWER_THAN_OR_EQUAL: "lt_eq",
    Operator.EQUAL: "eq",
    Operator.LOWER_THAN: "lt",
    Operator.NOT_EQUAL: "ne",
}


@dataclass(frozen=True)
class Comparison:
    """A comparison against a fixed non-negative number, such as ``>= 3``."""

    operator: Operator
    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.operator, Operator):
            raise TypeError(f"expected an Operator, got {self.operator!r}")
        if not _is_unsigned(self.number):
            raise ValueError(f"{self.number!r} is not a non-negative integer")

    def __str__(self) -> str:
        return f"{self.operator.symbol} {self.number}"

    @classmethod
    def from_string(cls, string: str) -> Comparison:
        """Parse ``"5"``, ``">=5"``, ``"!=2"`` and the like.

        Spaces anywhere make the string invalid.
        """
        number = _parse_unsigned(string)
        if number is not None:
            return cls(Operator.EQUAL, number)
        for prefix, operator in _PREFIXES:
            if string.startswith(prefix):
                number = _parse_unsigned(string[len(prefix):])
                if number is None:
                    raise InvalidComparisonError(string)
                return cls(operator, number)
        raise InvalidComparisonError(string)

    def compare(self, value: Any) -> Ternary:
        """Check ``value`` against this comparison.

        ``None`` yields ``Ternary.VOID``; integers are compared directly;
        other values are asked through their ``gt``/``eq``/... methods.
        """
        if value is None:
            return Ternary.VOID
        if isinstance(value, int) and not isinstance(value, bool):
            return Ternary.from_bool(_INT_TESTS[self.operator](value, self.number))
        return getattr(value, _METHOD_NAMES[self.operator])(self.number)

    def to_json(self) -> dict[str, int]:
        return {self.operator.value: self.number}

    @classmethod
    def from_json(cls, value: Any) -> Comparison:
        if not isinstance(value, dict) or len(value) != 1:
            raise ValueError(f"expected a single-key object, got {value!r}")
        ((tag, number),) = value.items()
        try:
            operator = Operator(tag)
        except ValueError:
            raise ValueError(f"unknown comparison {tag!r}") from None
        if not _is_unsigned(number):
            raise ValueError(f"{number!r} is not a non-negative integer")
        return cls(operator, number)


@dataclass(frozen=True)
class MaybeVar:
    """A Bloodless number: a non-negative constant or a one-letter variable."""

    value: int | str = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool):
            raise TypeError("a number cannot be a boolean")
        if isinstance(self.value, int):
            if not _is_unsigned(self.value):
                raise ValueError(f"{self.value} is not a non-negative integer")
        elif isinstance(self.value, str):
            if len(self.value) != 1:
                raise ValueError("a variable must be a single character")
        else:
            raise TypeError(f"expected int or str, got {self.value!r}")

    @property
    def is_variable(self) -> bool:
        return isinstance(self.value, str)

    def __str__(self) -> str:
        return str(self.value)

    def assume(self) -> int:
        """The constant's value; variables are assumed to be zero."""
        return 0 if isinstance(self.value, str) else self.value

    def to_json(self) -> int | str:
        return self.value

    @classmethod
    def from_json(cls, value: Any) -> MaybeVar:
        if isinstance(value, str):
            if value and value[0].isalpha():
                return cls(value[0])
            raise ValueError("numbers can only be single letters or integers")
        if isinstance(value, int) and not isinstance(value, bool):
            if _is_unsigned(value):
                return cls(value)
            raise ValueError(f"{value} is out of range for a number")
        raise ValueError("expected a single character string or number")


@dataclass(frozen=True)
class MaybeImprecise:
    """A number that is either exact (a :class:`MaybeVar`) or a range (a :class:`Comparison`)."""

    value: MaybeVar | Comparison = field(default_factory=MaybeVar)

    def __post_init__(self) -> None:
        if not isinstance(self.value, (MaybeVar, Comparison)):
            raise TypeError(f"expected MaybeVar or Comparison, got {self.value!r}")

    @property
    def is_precise(self) -> bool:
        return isinstance(self.value, MaybeVar)

    def __str__(self) -> str:
        return str(self.value)

    def as_comparison(self) -> Comparison:
        if isinstance(self.value, MaybeVar):
            return Comparison(Operator.EQUAL, self.value.assume())
        return self.value

    def gt(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(value.assume() > comparison)
        op, x = value.operator, value.number
        if op in (Operator.GREATER_THAN, Operator.GREATER_THAN_OR_EQUAL, Operator.NOT_EQUAL):
            return Ternary.TRUE
        if op is Operator.LOWER_THAN:
            return Ternary.from_bool(x > comparison + 1)
        return Ternary.from_bool(x > comparison)

    def gt_eq(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(value.assume() >= comparison)
        op, x = value.operator, value.number
        if op is Operator.EQUAL:
            return Ternary.from_bool(x >= comparison)
        if op in (Operator.GREATER_THAN, Operator.GREATER_THAN_OR_EQUAL, Operator.NOT_EQUAL):
            return Ternary.TRUE
        return Ternary.from_bool(x > comparison)

    def lt(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(value.assume() < comparison)
        op, x = value.operator, value.number
        if op is Operator.GREATER_THAN:
            return Ternary.from_bool(x < comparison - 1)
        if op in (Operator.GREATER_THAN_OR_EQUAL, Operator.EQUAL):
            return Ternary.from_bool(x < comparison)
        return Ternary.TRUE

    def lt_eq(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(value.assume() <= comparison)
        op, x = value.operator, value.number
        if op is Operator.EQUAL:
            return Ternary.from_bool(x <= comparison)
        if op in (Operator.GREATER_THAN, Operator.GREATER_THAN_OR_EQUAL):
            return Ternary.from_bool(x < comparison)
        return Ternary.TRUE

    def eq(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(comparison == value.assume())
        return Ternary.from_bool(_INT_TESTS[value.operator](comparison, value.number))

    def ne(self, comparison: int) -> Ternary:
        value = self.value
        if isinstance(value, MaybeVar):
            return Ternary.from_bool(comparison != value.assume())
        if value.operator is Operator.EQUAL:
            return Ternary.from_bool(comparison != value.number)
        return Ternary.TRUE

    def to_json(self) -> int | str:
        value = self.value
        if isinstance(value, MaybeVar):
            return value.to_json()
        if value.operator is Operator.EQUAL:
            return value.number
        return f"{value.operator.symbol}{value.number}"

    @classmethod
    def from_json(cls, value: Any) -> MaybeImprecise:
        if isinstance(value, str):
            if value and value[0].isalpha():
                return cls(MaybeVar(value[0]))
            try:
                return cls(Comparison.from_string(value))
            except InvalidComparisonError:
                raise ValueError(
                    "expected a bloodless number or a comparison"
                ) from None
        return cls(MaybeVar.from_json(value))