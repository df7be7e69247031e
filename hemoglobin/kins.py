"""Kins and the kin tree, plus comparisons used to match a card's kin."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Union


class InsectKin(enum.Enum):
    """Children of the insect kin."""

    ANT = "ant"
    BEE = "bee"

    def __str__(self) -> str:
        return _CHILD_DISPLAY[self]

    def canonical_name(self) -> str:
        return self.value

    def equalness(self, other: InsectKin) -> float:
        """1.0 for the same insect kin, otherwise 0.0."""
        if not isinstance(other, InsectKin):
            raise TypeError(f"expected an InsectKin, got {other!r}")
        return 1.0 if self is other else 0.0


class PiezanKin(enum.Enum):
    """Children of the piezan kin."""

    RED_KINGDOM = "red kingdom"
    BLUE_KINGDOM = "blue kingdom"
    BLACK_KINGDOM = "black kingdom"
    GREEN_KINGDOM = "green kingdom"

    def __str__(self) -> str:
        return _CHILD_DISPLAY[self]

    def canonical_name(self) -> str:
        return self.value

    def equalness(self, other: PiezanKin) -> float:
        """1.0 for the same piezan kin, otherwise 0.0."""
        if not isinstance(other, PiezanKin):
            raise TypeError(f"expected a PiezanKin, got {other!r}")
        return 1.0 if self is other else 0.0


class MachineKin(enum.Enum):
    """Children of the machine kin."""

    BLIGHT = "blight"

    def __str__(self) -> str:
        return _CHILD_DISPLAY[self]

    def canonical_name(self) -> str:
        return self.value

    def equalness(self, other: MachineKin) -> float:
        """1.0 for the same machine kin, otherwise 0.0."""
        if not isinstance(other, MachineKin):
            raise TypeError(f"expected a MachineKin, got {other!r}")
        return 1.0 if self is other else 0.0


ChildKin = Union[InsectKin, PiezanKin, MachineKin]

_CHILD_DISPLAY: dict[Any, str] = {
    InsectKin.ANT: "Ant Kin",
    InsectKin.BEE: "Bee Kin",
    PiezanKin.RED_KINGDOM: "Red Kingdom Kin",
    PiezanKin.BLUE_KINGDOM: "Blue Kingdom Kin",
    PiezanKin.BLACK_KINGDOM: "Black Kingdom Kin",
    PiezanKin.GREEN_KINGDOM: "Green Kingdom Kin",
    MachineKin.BLIGHT: "Blight Kin",
}


class KinFamily(enum.Enum):
    """Top-level kins; the value is the canonical name."""

    ASSASSIN = "assassin"
    UNDEAD = "undead"
    REPTILE = "reptile"
    CULT_OF_NA = "cult of na"
    SORCERY = "sorcery"
    THEIR = "THEIR"
    INSECT = "insect"
    PIEZAN = "piezan"
    MACHINE = "machine"


_CHILD_TYPES: dict[KinFamily, type] = {
    KinFamily.INSECT: InsectKin,
    KinFamily.PIEZAN: PiezanKin,
    KinFamily.MACHINE: MachineKin,
}

_CHILDLESS_SELF_MATCHING = frozenset(
    {
        KinFamily.UNDEAD,
        KinFamily.ASSASSIN,
        KinFamily.REPTILE,
        KinFamily.SORCERY,
        KinFamily.THEIR,
    }
)

_FAMILY_DISPLAY = {
    KinFamily.UNDEAD: "Undead Kin",
    KinFamily.ASSASSIN: "Assassin Kin",
    KinFamily.REPTILE: "Reptile Kin",
    KinFamily.CULT_OF_NA: "Cult of Nä Kin",
    KinFamily.SORCERY: "Sorcery Kin",
    KinFamily.THEIR: "THEIR_KIN",
    KinFamily.INSECT: "Insect Kin",
    KinFamily.PIEZAN: "Insect Kin",
    KinFamily.MACHINE: "Insect Kin",
}


@dataclass(frozen=True)
class Kin:
    """A kin: a family and, for families with children, an optional child."""

    family: KinFamily
    child: ChildKin | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.family, KinFamily):
            raise TypeError(f"expected a KinFamily, got {self.family!r}")
        if self.child is None:
            return
        expected = _CHILD_TYPES.get(self.family)
        if expected is None or not isinstance(self.child, expected):
            raise ValueError(f"{self.child!r} is not a child of {self.family.name}")

    def __str__(self) -> str:
        if self.child is not None:
            return str(self.child)
        return _FAMILY_DISPLAY[self.family]

    def canonical_name(self) -> str:
        if self.child is not None:
            return self.child.canonical_name()
        return self.family.value

    def is_same_or_child(self, other: Kin) -> bool:
        """True if ``self`` is ``other`` or one of ``other``'s children."""
        if self.family is not other.family:
            return False
        if self.family in _CHILDLESS_SELF_MATCHING:
            return True
        if self.family is KinFamily.CULT_OF_NA:
            return False
        if other.child is None:
            return True
        if self.child is None:
            return False
        return self.child is other.child

    def equalness(self, other: Kin) -> float:
        """1.0 for the same kin, 0.5 for a child of ``other``, otherwise 0.0."""
        if self.is_same_or_child(other):
            return 1.0 if self == other else 0.5
        return 0.0

    @classmethod
    def from_string(cls, string: str) -> Kin | None:
        """Look a kin up by name; ``None`` if the name is unknown."""
        return _BY_NAME.get(string)

    def to_json(self) -> str:
        return self.canonical_name()

    @classmethod
    def from_json(cls, value: Any) -> Kin:
        if not isinstance(value, str):
            raise ValueError(f"expected a valid kin name, got {value!r}")
        kin = cls.from_string(value)
        if kin is None:
            raise ValueError(f"{value} is not a valid kin")
        return kin


_THEIR = Kin(KinFamily.THEIR)
_CULT = Kin(KinFamily.CULT_OF_NA)

_BY_NAME: dict[str, Kin] = {
    "THEIR": _THEIR,
    "their": _THEIR,
    "THEY": _THEIR,
    "they": _THEIR,
    "sorcery": Kin(KinFamily.SORCERY),
    "assassin": Kin(KinFamily.ASSASSIN),
    "reptile": Kin(KinFamily.REPTILE),
    "cult of na": _CULT,
    "cult of nä": _CULT,
    "undead": Kin(KinFamily.UNDEAD),
    "insect": Kin(KinFamily.INSECT),
    "piezan": Kin(KinFamily.PIEZAN),
    "machine": Kin(KinFamily.MACHINE),
    "ant": Kin(KinFamily.INSECT, InsectKin.ANT),
    "bee": Kin(KinFamily.INSECT, InsectKin.BEE),
    "blight": Kin(KinFamily.MACHINE, MachineKin.BLIGHT),
    "red kingdom": Kin(KinFamily.PIEZAN, PiezanKin.RED_KINGDOM),
    "blue kingdom": Kin(KinFamily.PIEZAN, PiezanKin.BLUE_KINGDOM),
    "green kingdom": Kin(KinFamily.PIEZAN, PiezanKin.GREEN_KINGDOM),
    "black kingdom": Kin(KinFamily.PIEZAN, PiezanKin.BLACK_KINGDOM),
}


class KinComparisonKind(enum.Enum):
    """How a :class:`KinComparison` matches; the value is its serialised tag."""

    EQUAL = "equal"
    SIMILAR = "similar"
    TEXT_CONTAINS = "text_contains"
    TEXT_EQUAL = "text_equal"
    REGEX_MATCH = "regex_match"


_KIN_KINDS = frozenset({KinComparisonKind.EQUAL, KinComparisonKind.SIMILAR})
_TEXT_KINDS = frozenset({KinComparisonKind.TEXT_CONTAINS, KinComparisonKind.TEXT_EQUAL})


@dataclass(frozen=True)
class KinComparison:
    """A test against a kin.

    ``EQUAL`` and ``SIMILAR`` take a :class:`Kin`, the text kinds a string and
    ``REGEX_MATCH`` a pattern (a string is compiled).
    """

    kind: KinComparisonKind
    operand: Kin | str | re.Pattern[str]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, KinComparisonKind):
            raise TypeError(f"expected a KinComparisonKind, got {self.kind!r}")
        if self.kind in _KIN_KINDS:
            if not isinstance(self.operand, Kin):
                raise TypeError(f"{self.kind.name} needs a Kin")
        elif self.kind in _TEXT_KINDS:
            if not isinstance(self.operand, str):
                raise TypeError(f"{self.kind.name} needs a string")
        elif isinstance(self.operand, str):
            try:
                compiled = re.compile(self.operand)
            except re.error as error:
                raise ValueError(f"invalid regex {self.operand!r}: {error}") from None
            object.__setattr__(self, "operand", compiled)
        elif not isinstance(self.operand, re.Pattern):
            raise TypeError("REGEX_MATCH needs a pattern")

    def is_match(self, other: Kin) -> bool:
        """``EQUAL`` matches exactly; ``SIMILAR`` also matches child kins."""
        operand = self.operand
        if self.kind is KinComparisonKind.EQUAL:
            return other == operand
        if self.kind is KinComparisonKind.SIMILAR:
            return other.is_same_or_child(operand)
        name = other.canonical_name()
        if self.kind is KinComparisonKind.TEXT_CONTAINS:
            return operand in name
        if self.kind is KinComparisonKind.TEXT_EQUAL:
            return name.lower() == operand.lower()
        return operand.search(name) is not None

    def to_json(self) -> dict[str, str]:
        operand = self.operand
        if isinstance(operand, Kin):
            payload = operand.to_json()
        elif isinstance(operand, re.Pattern):
            payload = operand.pattern
        else:
            payload = operand
        return {self.kind.value: payload}

    @classmethod
    def from_json(cls, value: Any) -> KinComparison:
        if not isinstance(value, dict) or len(value) != 1:
            raise ValueError(f"expected a single-key object, got {value!r}")
        ((tag, payload),) = value.items()
        try:
            kind = KinComparisonKind(tag)
        except ValueError:
            raise ValueError(f"unknown kin comparison {tag!r}") from None
        if kind in _KIN_KINDS:
            return cls(kind, Kin.from_json(payload))
        if not isinstance(payload, str):
            raise ValueError(f"expected a string, got {payload!r}")
        return cls(kind, payload)