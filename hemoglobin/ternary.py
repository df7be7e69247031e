"""Three-valued logic for matching card properties that may be absent."""

from __future__ import annotations

import enum


class Ternary(enum.Enum):
    """Result of a match: the property is missing, did not match, or matched.

    Values are ordered ``VOID < FALSE < TRUE``.
    """

    VOID = 0
    FALSE = 1
    TRUE = 2

    @classmethod
    def from_bool(cls, value: bool) -> Ternary:
        return cls.TRUE if value else cls.FALSE

    def __bool__(self) -> bool:
        return self is Ternary.TRUE

    def _key(self, other: object) -> int | None:
        if isinstance(other, Ternary):
            return other.value
        return None

    def __lt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value < key

    def __le__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value <= key

    def __gt__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value > key

    def __ge__(self, other: object) -> bool:
        key = self._key(other)
        if key is None:
            return NotImplemented
        return self.value >= key

    def __invert__(self) -> Ternary:
        if self is Ternary.TRUE:
            return Ternary.FALSE
        if self is Ternary.FALSE:
            return Ternary.TRUE
        return Ternary.VOID

    def is_true(self) -> bool:
        return self is Ternary.TRUE

    def is_false(self) -> bool:
        return self is Ternary.FALSE

    def is_void(self) -> bool:
        return self is Ternary.VOID

    def either(self, other: Ternary) -> Ternary:
        """Ternary OR: the higher of the two values."""
        return max(self, other)

    def both(self, other: Ternary) -> Ternary:
        """Ternary AND: the lower of the two values."""
        return min(self, other)

    def xor(self, other: Ternary) -> Ternary:
        """Ternary XOR.

        ``TRUE`` when exactly one side is ``TRUE``, ``VOID`` when both are
        ``VOID``, otherwise ``FALSE``.
        """
        if self is Ternary.VOID and other is Ternary.VOID:
            return Ternary.VOID
        if (self is Ternary.TRUE) != (other is Ternary.TRUE):
            return Ternary.TRUE
        return Ternary.FALSE

    __or__ = either
    __and__ = both
    __xor__ = xor