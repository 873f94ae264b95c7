"""Tests for the Dec value type: construction, alignment and exact arithmetic."""

import pickle

import pytest

from bigdec import Dec, upscale
from tests.helpers import make_dec, make_int


class TestDecConstruction:
    """Tests for Dec construction and accessors."""

    def test_default_is_zero_scale_zero(self):
        d = Dec()
        assert d.unscaled == 0
        assert d.scale == 0
        assert str(d) == "0"

    def test_zero_constructor(self):
        assert Dec.zero() == Dec(0, 0)

    def test_from_unscaled_and_scale(self):
        d = Dec(12345, 2)
        assert d.unscaled == 12345
        assert d.scale == 2
        assert str(d) == "123.45"

    def test_from_int(self):
        d = Dec.from_int(-42)
        assert d.unscaled == -42
        assert d.scale == 0

    def test_negative_scale(self):
        d = Dec(1, -3)
        assert str(d) == "1000"
        assert d == 1000

    def test_large_unscaled(self):
        d = Dec(10**50 + 1, 10)
        assert d.unscaled == 10**50 + 1

    def test_invalid_types_raise(self):
        with pytest.raises(TypeError):
            Dec("1")  # type: ignore
        with pytest.raises(TypeError):
            Dec(1, 1.5)  # type: ignore
        with pytest.raises(TypeError):
            Dec(True)  # type: ignore

    def test_with_scale_keeps_unscaled(self):
        """Changing the scale alone multiplies the value by a power of ten."""
        d = Dec(125, 2).with_scale(1)
        assert d.unscaled == 125
        assert str(d) == "12.5"

    def test_with_unscaled_keeps_scale(self):
        d = Dec(125, 2).with_unscaled(7)
        assert str(d) == "0.07"

    def test_values_are_immutable(self):
        d = Dec(1, 0)
        with pytest.raises(AttributeError):
            d.scale = 3  # type: ignore

    def test_pickle_preserves_representation(self):
        d = Dec(-1250, 2)
        restored = pickle.loads(pickle.dumps(d))
        assert (restored.unscaled, restored.scale) == (-1250, 2)


class TestRescale:
    """Tests for rescale and upscale."""

    def test_rescale_up_is_exact(self):
        d = Dec(15, 1).rescale(4)
        assert (d.unscaled, d.scale) == (15000, 4)
        assert d == Dec(15, 1)

    def test_rescale_down_truncates_toward_zero(self):
        assert Dec(159, 2).rescale(1) == Dec(15, 1)
        assert Dec(-159, 2).rescale(1) == Dec(-15, 1)

    def test_rescale_same_scale_returns_self(self):
        d = Dec(7, 3)
        assert d.rescale(3) is d

    def test_rescale_to_negative_scale(self):
        d = Dec(12345, 0).rescale(-2)
        assert (d.unscaled, d.scale) == (123, -2)

    def test_upscale_equal_scales_unchanged(self):
        a, b = Dec(1, 2), Dec(3, 2)
        assert upscale(a, b) == (a, b)
        aa, bb = upscale(a, b)
        assert aa is a and bb is b

    def test_upscale_raises_lower_scale(self):
        aa, bb = upscale(Dec(1, 0), Dec(25, 2))
        assert (aa.unscaled, aa.scale) == (100, 2)
        assert (bb.unscaled, bb.scale) == (25, 2)

        aa, bb = upscale(Dec(25, 2), Dec(1, -1))
        assert (aa.unscaled, aa.scale) == (25, 2)
        assert (bb.unscaled, bb.scale) == (1000, 2)


class TestExactArithmetic:
    """Tests for neg, abs, sign, cmp, add, sub, mul."""

    def test_neg_and_abs_keep_scale(self):
        d = make_dec("-1.50")
        assert (d.neg().unscaled, d.neg().scale) == (150, 2)
        assert (d.abs().unscaled, d.abs().scale) == (150, 2)
        assert -d == make_dec("1.50")
        assert abs(d) == make_dec("1.5")

    @pytest.mark.parametrize("text,expected", [("-0.01", -1), ("0.000", 0), ("7", 1), ("-0", 0)])
    def test_sign(self, text, expected):
        assert make_dec(text).sign() == expected

    @pytest.mark.parametrize(
        "x,y,expected",
        [
            ("1", "1.0", 0),
            ("1.01", "1.1", -1),
            ("-1", "-1.5", 1),
            ("0.00", "0", 0),
        ],
    )
    def test_cmp(self, x, y, expected):
        assert make_dec(x).cmp(make_dec(y)) == expected

    def test_cmp_with_negative_scale(self):
        assert Dec(10, 0).cmp(Dec(1, -1)) == 0
        assert Dec(11, 0).cmp(Dec(1, -1)) == 1

    def test_add_uses_larger_scale(self):
        result = make_dec("1.5").add(make_dec("2.125"))
        assert (result.unscaled, result.scale) == (3625, 3)
        assert str(result) == "3.625"

    def test_sub_uses_larger_scale(self):
        result = make_dec("1.5").sub(make_dec("2.125"))
        assert str(result) == "-0.625"

    def test_mul_adds_scales(self):
        result = make_dec("1.5").mul(make_dec("2.25"))
        assert (result.unscaled, result.scale) == (3375, 3)
        assert str(result) == "3.375"

    def test_mul_with_negative_scale(self):
        result = Dec(3, -2).mul(Dec(25, 1))
        assert result.scale == -1
        assert result == 750

    def test_operators(self):
        a, b = make_dec("2.50"), make_dec("0.5")
        assert str(a + b) == "3.00"
        assert str(a - b) == "2.00"
        assert str(a * b) == "1.250"
        assert str(a + 1) == "3.50"
        assert str(1 + a) == "3.50"
        assert str(3 - a) == "0.50"
        assert str(2 * a) == "5.00"

    def test_no_true_division_operator(self):
        with pytest.raises(TypeError):
            make_int(1) / make_int(3)  # type: ignore

    def test_unsupported_operand_type(self):
        with pytest.raises(TypeError):
            make_int(1) + 1.5  # type: ignore
        assert (make_int(1) == "1") is False

    def test_ordering(self):
        values = [make_dec(t) for t in ("2", "-1.5", "0.25", "0.250", "-10")]
        assert [str(v) for v in sorted(values)] == ["-10", "-1.5", "0.25", "0.250", "2"]
        assert make_dec("0.1") < make_dec("0.10001")
        assert make_dec("2") >= 2
        assert make_dec("1.99") <= 2
        assert make_dec("-0.1") > -1

    def test_bool(self):
        assert not make_dec("0.000")
        assert make_dec("0.001")


class TestHash:
    """Equal values hash equal regardless of scale."""

    def test_equal_values_equal_hash(self):
        assert hash(Dec(1, 0)) == hash(Dec(100, 2)) == hash(Dec(1000, 3))
        assert hash(Dec(10, 0)) == hash(Dec(1, -1))
        assert hash(Dec(15, 1)) == hash(Dec(150, 2))

    def test_integral_values_hash_like_int(self):
        assert hash(Dec(500, 2)) == hash(5)
        assert hash(Dec(0, 7)) == hash(0)

    def test_usable_in_sets(self):
        values = {make_dec("1.0"), make_dec("1.00"), make_dec("1"), make_dec("1.5")}
        assert len(values) == 2


class TestExactnessProperties:
    """Add, sub and mul never lose precision."""

    SAMPLES = ["0", "1", "-1", "0.001", "-123.4500", "99999999999999999999.99"]

    @pytest.fixture
    def samples(self):
        return [make_dec(t) for t in self.SAMPLES] + [Dec(7, -3), Dec(-3, 25)]

    def test_add_then_sub_round_trips(self, samples):
        for x in samples:
            for y in samples:
                assert x.add(y).sub(y) == x

    def test_scale_rules(self, samples):
        for x in samples:
            for y in samples:
                assert x.add(y).scale == max(x.scale, y.scale)
                assert x.sub(y).scale == max(x.scale, y.scale)
                assert x.mul(y).scale == x.scale + y.scale
