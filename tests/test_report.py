"""Test mismatch report formatting."""

from collections.abc import Sequence

import pytest

from sigguard import (
    NullableTokenless, UndefinedToken, Undefined, SignatureSet, SignatureMismatch,
    build_signature, declare, describe_value, format_mismatch,
)


class Point:
    pass


class BrokenSequence(Sequence):
    def __len__(self):
        raise RuntimeError("no length")

    def __getitem__(self, index):
        raise RuntimeError("no items")


def is_even(value):
    return value % 2 == 0


@pytest.fixture
def signatures():
    return SignatureSet((
        build_signature(str),
        build_signature(float, {"rest": {"nullable": str}}, UndefinedToken),
    ))


@pytest.mark.unit
class TestDescribeValue:
    """Test rendering of call arguments."""

    @pytest.mark.parametrize("value,text", [
        ("a", "str"),
        (3, "int"),
        (2.5, "float"),
        (True, "bool"),
        (None, "None"),
        (Undefined, "Undefined"),
        ([], "list"),
        ([1, "a", 2], "list[int | str]"),
        ((None,), "tuple[None]"),
        ([["a"], [1]], "list[list[str] | list[int]]"),
        ({"a": 1}, "dict"),
        (str, "type[str]"),
        (Point(), "Point"),
    ])
    def test_describe(self, value, text):
        assert describe_value(value) == text

    def test_describe_never_raises(self):
        assert describe_value(BrokenSequence()) == "<?>"

    def test_self_referencing_list(self):
        items = []
        items.append(items)
        items.append(items)
        assert describe_value(items) == "list[...]"

    def test_large_range_is_sampled(self):
        assert describe_value(range(10 ** 9)) == "range[int | ...]"

    def test_long_list_is_sampled(self):
        assert describe_value([1] * 10 + ["a"]) == "list[int | ...]"
        assert describe_value([1] * 9 + ["a"]) == "list[int | str]"

    def test_nesting_is_cut_off(self):
        assert describe_value([[["a"]]]) == "list[list[list[str]]]"
        assert describe_value([[[["a"]]]]) == "list[list[list[...]]]"


@pytest.mark.unit
class TestFormatMismatch:
    """Test the full comparative report."""

    def test_layout(self, signatures):
        report = format_mismatch(signatures, (True,), name="f")
        assert report == (
            "No signature of f() matches the call.\n"
            "Accepted signatures:\n"
            "  (str)  <- argument 0 is not str\n"
            "  (float, {rest: {nullable: str}}, UndefinedToken)  <- expects at least 2 argument(s), got 1\n"
            "Called with:\n"
            "  (bool)"
        )

    def test_deterministic(self, signatures):
        args = ("a", None, [1, 2])
        assert format_mismatch(signatures, args) == format_mismatch(signatures, args)

    def test_without_name(self, signatures):
        report = format_mismatch(signatures, ())
        assert report.splitlines()[0] == "No signature of function matches the call."
        assert report.splitlines()[-1] == "  ()"

    def test_declared_order_preserved(self):
        signatures = SignatureSet(tuple(build_signature(t) for t in (bool, str, float)))
        lines = format_mismatch(signatures, (None,)).splitlines()
        assert lines[2:5] == [
            "  (bool)  <- argument 0 is not bool",
            "  (str)  <- argument 0 is not str",
            "  (float)  <- argument 0 is not float",
        ]

    def test_modifier_notation(self):
        signatures = SignatureSet((
            build_signature({"regex": "^a"}, {"custom": is_even}, NullableTokenless(Point)),
        ))
        report = format_mismatch(signatures, (1,))
        assert "({regex: '^a'}, {custom: is_even}, NullableTokenless(Point))" in report

    def test_empty_set(self):
        report = format_mismatch(SignatureSet(), (1,))
        assert "(none declared)" in report

    def test_unrenderable_argument(self, signatures):
        report = format_mismatch(signatures, (BrokenSequence(),))
        assert report.endswith("  (<?>)")

    def test_points_at_first_bad_position(self):
        signatures = SignatureSet((
            build_signature(float, str),
            build_signature(str, {"rest": float}),
            build_signature(float),
        ))
        lines = format_mismatch(signatures, (1, 2)).splitlines()
        assert lines[2] == "  (float, str)  <- argument 1 is not str"
        assert lines[3] == "  (str, {rest: float})  <- argument 0 is not str"
        assert lines[4] == "  (float)  <- expects 1 argument(s), got 2"

    def test_rest_position_names_inner_constraint(self):
        signatures = SignatureSet((build_signature(str, {"rest": float}),))
        report = format_mismatch(signatures, ("a", 1, "b"))
        assert "<- argument 2 is not float" in report

    def test_broken_predicate_gives_no_reason(self):
        signatures = SignatureSet((build_signature({"custom": lambda value: value.missing}),))
        lines = format_mismatch(signatures, (1,)).splitlines()
        assert lines[2] == "  ({custom: <lambda>})"


@pytest.mark.integration
class TestMismatchTermination:
    """Test that failing calls with awkward arguments still report promptly."""

    def test_cyclic_argument(self):
        @declare(str)
        def f(value):
            return value

        items = []
        items.append(items)
        items.append(items)
        with pytest.raises(SignatureMismatch) as excinfo:
            f(items)
        assert excinfo.value.report.endswith("  (list[...])")

    def test_huge_range_argument(self):
        @declare(str)
        def f(value):
            return value

        with pytest.raises(SignatureMismatch) as excinfo:
            f(range(10 ** 9))
        assert excinfo.value.report.endswith("  (range[int | ...])")
