"""Loose equality and ordering over Bloodless numbers and number ranges.

Bloodless numbers may be ranges (``> 3``), so ordinary equality and ordering
do not apply. The functions here give the looser notions used for matching
and sorting cards.
"""

from __future__ import annotations

import operator as _op
from typing import Any, Callable

from hemoglobin.numbers import Comparison, MaybeImprecise, MaybeVar, Operator

_EQ = Operator.EQUAL
_NE = Operator.NOT_EQUAL
_GT = Operator.GREATER_THAN
_GTE = Operator.GREATER_THAN_OR_EQUAL
_LT = Operator.LOWER_THAN
_LTE = Operator.LOWER_THAN_OR_EQUAL

_EQ_RULES: dict[Operator, tuple[frozenset[Operator], Callable[[int, int], bool]]] = {
    _EQ: (frozenset({_EQ, _GTE, _LTE}), _op.eq),
    _GT: (frozenset({_GT, _EQ, _NE}), _op.gt),
    _GTE: (frozenset({_GTE, _LTE, _GT, _EQ}), _op.ge),
    _LT: (frozenset({_LT, _EQ, _NE}), _op.lt),
    _LTE: (frozenset({_LTE, _GTE, _LT, _EQ}), _op.le),
}

_CMP_FORWARD = {
    _GT: frozenset({_GT, _EQ, _NE}),
    _GTE: frozenset({_GTE, _LTE, _GT, _EQ}),
    _EQ: frozenset({_EQ, _GTE, _LTE}),
}

_CMP_REVERSED = {
    _LT: frozenset({_LT, _EQ, _NE}),
    _LTE: frozenset({_LTE, _GTE, _LT, _EQ}),
}


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_int(value) or isinstance(value, MaybeVar)


def _assume(value: int | MaybeVar) -> int:
    return value.assume() if isinstance(value, MaybeVar) else value


def _unwrap(value: Any) -> Any:
    return value.value if isinstance(value, MaybeImprecise) else value


def _eq_comparisons(a: Comparison, b: Comparison) -> bool:
    if a.operator is _NE:
        return b.operator is not _EQ
    accepted, test = _EQ_RULES[a.operator]
    if b.operator in accepted:
        return test(a.number, b.number)
    return False


def imprecise_eq(left: Any, right: Any) -> bool:
    """Loose equality between integers, :class:`MaybeVar`, :class:`Comparison`
    and :class:`MaybeImprecise` values.

    Variables are assumed to be zero. A number equals a comparison when it
    satisfies it.
    """
    a, b = _unwrap(left), _unwrap(right)
    if isinstance(a, Comparison) and isinstance(b, Comparison):
        return _eq_comparisons(a, b)
    if isinstance(a, Comparison) and _is_number(b):
        return bool(a.compare(_assume(b)))
    if isinstance(b, Comparison) and _is_number(a):
        return bool(b.compare(_assume(a)))
    if _is_number(a) and _is_number(b):
        return _assume(a) == _assume(b)
    raise TypeError(f"cannot compare {left!r} with {right!r}")


def _cmp_comparisons(a: Comparison, b: Comparison) -> int:
    if b.operator in _CMP_FORWARD.get(a.operator, ()):
        return _sign(a.number, b.number)
    if b.operator in _CMP_REVERSED.get(a.operator, ()):
        return -_sign(a.number, b.number)
    if a.operator is _NE:
        return -1 if b.operator is _EQ else 0
    return -1


def _cmp_comparison_var(comparison: Comparison, var: MaybeVar) -> int:
    return _cmp_comparisons(comparison, Comparison(_EQ, var.assume()))


def imprecise_cmp(left: Any, right: Any) -> int:
    """Loose three-way comparison; returns a negative, zero or positive int.

    ``None`` sorts below any value, and also below another ``None``. Plain
    integers are not accepted.
    """
    if left is None:
        return -1
    if right is None:
        return 1
    if isinstance(left, MaybeImprecise):
        if isinstance(right, MaybeImprecise):
            a, b = left.value, right.value
            # A precise side is always compared against the range, whichever
            # side it is on.
            if isinstance(a, MaybeVar) and isinstance(b, Comparison):
                return -_cmp_comparison_var(b, a)
            if isinstance(a, Comparison) and isinstance(b, MaybeVar):
                return -_cmp_comparison_var(a, b)
            return imprecise_cmp(a, b)
        if isinstance(right, Comparison):
            return imprecise_cmp(left.value, right)
    elif isinstance(right, MaybeImprecise) and isinstance(left, Comparison):
        return -imprecise_cmp(right, left)

    if isinstance(left, Comparison) and isinstance(right, Comparison):
        return _cmp_comparisons(left, right)
    if isinstance(left, MaybeVar) and isinstance(right, MaybeVar):
        return _sign(left.assume(), right.assume())
    if isinstance(left, Comparison) and isinstance(right, MaybeVar):
        return _cmp_comparison_var(left, right)
    if isinstance(left, MaybeVar) and isinstance(right, Comparison):
        return -_cmp_comparison_var(right, left)
    raise TypeError(f"cannot order {left!r} against {right!r}")