import pytest
from hypothesis import given
from hypothesis import strategies as st

from hemoglobin.numbers import (
    Comparison,
    InvalidComparisonError,
    MaybeImprecise,
    MaybeVar,
    Operator,
)
from hemoglobin.ternary import Ternary

USIZE_MAX = 2**64 - 1
small = st.integers(min_value=0, max_value=1000)
unsigned = st.integers(min_value=0, max_value=USIZE_MAX)
operators = st.sampled_from(list(Operator))
letters = st.sampled_from("abcxyzXYZ")


@pytest.mark.parametrize(
    "text,operator",
    [
        ("5", Operator.EQUAL),
        (">=5", Operator.GREATER_THAN_OR_EQUAL),
        ("<=5", Operator.LOWER_THAN_OR_EQUAL),
        (">5", Operator.GREATER_THAN),
        ("<5", Operator.LOWER_THAN),
        ("=5", Operator.EQUAL),
        ("!=5", Operator.NOT_EQUAL),
    ],
)
def test_from_string(text, operator):
    assert Comparison.from_string(text) == Comparison(operator, 5)


def test_from_string_accepts_plus_sign():
    assert Comparison.from_string("+5") == Comparison(Operator.EQUAL, 5)


@pytest.mark.parametrize(
    "text", ["", "> 3", " 3", "abc", ">=", "-1", "3.5", "!3", "=<3", str(2**64)]
)
def test_from_string_rejects(text):
    with pytest.raises(InvalidComparisonError):
        Comparison.from_string(text)


def test_invalid_comparison_is_value_error():
    with pytest.raises(ValueError):
        Comparison.from_string("nope")


@pytest.mark.parametrize(
    "operator,text",
    [
        (Operator.GREATER_THAN, "> 4"),
        (Operator.GREATER_THAN_OR_EQUAL, ">= 4"),
        (Operator.LOWER_THAN_OR_EQUAL, "<= 4"),
        (Operator.EQUAL, "= 4"),
        (Operator.LOWER_THAN, "< 4"),
        (Operator.NOT_EQUAL, "!= 4"),
    ],
)
def test_comparison_display(operator, text):
    assert str(Comparison(operator, 4)) == text


def test_comparison_validates_number():
    with pytest.raises(ValueError):
        Comparison(Operator.EQUAL, -1)


def test_comparison_to_json_uses_variant_tag():
    assert Comparison(Operator.GREATER_THAN, 4).to_json() == {"GreaterThan": 4}


@given(operators, unsigned)
def test_comparison_json_round_trip(operator, number):
    comparison = Comparison(operator, number)
    assert Comparison.from_json(comparison.to_json()) == comparison


@pytest.mark.parametrize(
    "value", [{}, {"Bigger": 1}, {"Equal": -1}, {"Equal": 1, "NotEqual": 2}, [1], "5"]
)
def test_comparison_from_json_rejects(value):
    with pytest.raises(ValueError):
        Comparison.from_json(value)


def test_compare_dispatch():
    comparison = Comparison(Operator.GREATER_THAN, 3)
    assert comparison.compare(5) is Ternary.TRUE
    assert comparison.compare(3) is Ternary.FALSE
    assert comparison.compare(None) is Ternary.VOID
    assert comparison.compare(MaybeImprecise(MaybeVar(5))) is Ternary.TRUE
    assert comparison.compare(MaybeImprecise(MaybeVar(2))) is Ternary.FALSE


def test_maybe_var_assume():
    assert MaybeVar(7).assume() == 7
    assert MaybeVar("X").assume() == 0
    assert MaybeVar().assume() == 0


def test_maybe_var_display():
    assert str(MaybeVar(7)) == "7"
    assert str(MaybeVar("X")) == "X"


@pytest.mark.parametrize("value", ["ab", "", -1, 2**64])
def test_maybe_var_validation(value):
    with pytest.raises(ValueError):
        MaybeVar(value)


def test_maybe_var_rejects_other_types():
    with pytest.raises(TypeError):
        MaybeVar(1.5)


def test_maybe_var_from_json():
    assert MaybeVar.from_json(3) == MaybeVar(3)
    assert MaybeVar.from_json("X") == MaybeVar("X")
    assert MaybeVar.from_json("Xyz") == MaybeVar("X")


@pytest.mark.parametrize("value", ["5", "", -1, 1.5, True, None, 2**64])
def test_maybe_var_from_json_rejects(value):
    with pytest.raises(ValueError):
        MaybeVar.from_json(value)


@given(st.one_of(unsigned, letters))
def test_maybe_var_json_round_trip(value):
    var = MaybeVar(value)
    assert MaybeVar.from_json(var.to_json()) == var


def test_maybe_imprecise_default_is_zero():
    assert MaybeImprecise() == MaybeImprecise(MaybeVar(0))
    assert MaybeImprecise().is_precise


def test_maybe_imprecise_display():
    assert str(MaybeImprecise(MaybeVar(3))) == "3"
    assert str(MaybeImprecise(Comparison(Operator.LOWER_THAN, 2))) == "< 2"


def test_maybe_imprecise_rejects_other_values():
    with pytest.raises(TypeError):
        MaybeImprecise(3)


def test_as_comparison():
    assert MaybeImprecise(MaybeVar("X")).as_comparison() == Comparison(Operator.EQUAL, 0)
    assert MaybeImprecise(MaybeVar(6)).as_comparison() == Comparison(Operator.EQUAL, 6)
    comparison = Comparison(Operator.NOT_EQUAL, 2)
    assert MaybeImprecise(comparison).as_comparison() == comparison


@given(small, small)
def test_precise_matches_integer_relations(a, c):
    number = MaybeImprecise(MaybeVar(a))
    assert number.gt(c) is Ternary.from_bool(a > c)
    assert number.gt_eq(c) is Ternary.from_bool(a >= c)
    assert number.lt(c) is Ternary.from_bool(a < c)
    assert number.lt_eq(c) is Ternary.from_bool(a <= c)
    assert number.eq(c) is Ternary.from_bool(a == c)
    assert number.ne(c) is Ternary.from_bool(a != c)


@given(small, small)
def test_imprecise_equal_behaves_like_precise(a, c):
    precise = MaybeImprecise(MaybeVar(a))
    imprecise = MaybeImprecise(Comparison(Operator.EQUAL, a))
    for name in ("gt", "gt_eq", "lt", "lt_eq", "eq", "ne"):
        assert getattr(imprecise, name)(c) is getattr(precise, name)(c)


@given(operators, small, small)
def test_imprecise_eq_is_membership(operator, x, c):
    comparison = Comparison(operator, x)
    assert MaybeImprecise(comparison).eq(c) is comparison.compare(c)


@given(operators, small, small)
def test_ne_only_false_for_exact_equal(operator, x, c):
    result = MaybeImprecise(Comparison(operator, x)).ne(c)
    if operator is Operator.EQUAL:
        assert result is Ternary.from_bool(c != x)
    else:
        assert result is Ternary.TRUE


def test_open_ranges_are_always_greater():
    for operator in (Operator.GREATER_THAN, Operator.GREATER_THAN_OR_EQUAL, Operator.NOT_EQUAL):
        number = MaybeImprecise(Comparison(operator, 1))
        assert number.gt(100) is Ternary.TRUE
        assert number.gt_eq(100) is Ternary.TRUE


def test_lower_than_gt():
    number = MaybeImprecise(Comparison(Operator.LOWER_THAN, 3))
    assert number.gt(1) is Ternary.TRUE
    assert number.gt(2) is Ternary.FALSE
    assert number.lt(0) is Ternary.TRUE


def test_greater_than_lt():
    number = MaybeImprecise(Comparison(Operator.GREATER_THAN, 1))
    assert number.lt(3) is Ternary.TRUE
    assert number.lt(2) is Ternary.FALSE
    assert number.lt_eq(2) is Ternary.TRUE
    assert number.lt_eq(1) is Ternary.FALSE


def test_maybe_imprecise_to_json():
    assert MaybeImprecise(MaybeVar(3)).to_json() == 3
    assert MaybeImprecise(MaybeVar("X")).to_json() == "X"
    assert MaybeImprecise(Comparison(Operator.EQUAL, 5)).to_json() == 5
    assert MaybeImprecise(Comparison(Operator.GREATER_THAN, 5)).to_json() == ">5"


def test_maybe_imprecise_from_json():
    assert MaybeImprecise.from_json(7) == MaybeImprecise(MaybeVar(7))
    assert MaybeImprecise.from_json("x") == MaybeImprecise(MaybeVar("x"))
    assert MaybeImprecise.from_json("<=4") == MaybeImprecise(
        Comparison(Operator.LOWER_THAN_OR_EQUAL, 4)
    )
    assert MaybeImprecise.from_json("7") == MaybeImprecise(Comparison(Operator.EQUAL, 7))


@pytest.mark.parametrize("value", ["??", "", "> 3", None, -3, 2.5, [1]])
def test_maybe_imprecise_from_json_rejects(value):
    with pytest.raises(ValueError):
        MaybeImprecise.from_json(value)


round_trippable = st.one_of(
    unsigned.map(lambda n: MaybeImprecise(MaybeVar(n))),
    letters.map(lambda c: MaybeImprecise(MaybeVar(c))),
    st.builds(
        lambda op, n: MaybeImprecise(Comparison(op, n)),
        st.sampled_from([op for op in Operator if op is not Operator.EQUAL]),
        unsigned,
    ),
)


@given(round_trippable)
def test_maybe_imprecise_json_round_trip(number):
    assert MaybeImprecise.from_json(number.to_json()) == number


@given(unsigned)
def test_imprecise_equal_serialises_as_precise(n):
    number = MaybeImprecise(Comparison(Operator.EQUAL, n))
    assert MaybeImprecise.from_json(number.to_json()) == MaybeImprecise(MaybeVar(n))