"""Tests for easing functions."""

from tick_motion import EASINGS
from tick_motion.easing import (
    in_bounce,
    in_cubic,
    in_expo,
    in_out_quad,
    in_quad,
    linear,
    out_bounce,
    out_in_quad,
    out_quad,
)

FAMILIES = ["quad", "cubic", "quart", "quint", "sine", "expo", "circ", "elastic", "back", "bounce"]


class TestLinearEasing:
    """Test linear easing function."""

    def test_linear_at_zero(self):
        """Linear easing should return begin at t=0."""
        assert linear(0.0, 0.0, 10.0, 10.0) == 0.0

    def test_linear_at_half(self):
        """Linear easing should return begin + c/2 at t=d/2."""
        assert linear(5.0, 0.0, 10.0, 10.0) == 5.0

    def test_linear_at_end(self):
        """Linear easing should return begin + change at t=d."""
        assert linear(10.0, 0.0, 10.0, 10.0) == 10.0

    def test_linear_offset_and_negative_change(self):
        """Linear easing honours begin and a negative change."""
        assert linear(1.0, 5.0, -5.0, 2.0) == 2.5


class TestQuadEasing:
    """Test the quadratic family."""

    def test_in_quad_at_half(self):
        """In-quad at half duration is 25% of the change."""
        assert in_quad(0.5, 0.0, 1.0, 1.0) == 0.25

    def test_out_quad_at_half(self):
        """Out-quad at half duration is 75% of the change."""
        assert out_quad(0.5, 0.0, 1.0, 1.0) == 0.75

    def test_in_out_quad_quarter_points(self):
        """In-out-quad is slow at both ends and crosses the midpoint."""
        assert in_out_quad(0.25, 0.0, 1.0, 1.0) == 0.125
        assert in_out_quad(0.5, 0.0, 1.0, 1.0) == 0.5
        assert abs(in_out_quad(0.75, 0.0, 1.0, 1.0) - 0.875) < 1e-9

    def test_out_in_quad_halves(self):
        """Out-in-quad covers half the change in each half of the duration."""
        assert out_in_quad(0.25, 0.0, 1.0, 1.0) == 0.375
        assert out_in_quad(0.5, 0.0, 1.0, 1.0) == 0.5
        assert out_in_quad(0.75, 0.0, 1.0, 1.0) == 0.625


class TestOtherCurves:
    """Spot checks for the remaining families."""

    def test_in_cubic_at_half(self):
        assert in_cubic(0.5, 0.0, 1.0, 1.0) == 0.125

    def test_in_expo_starts_exactly_at_begin(self):
        """In-expo special-cases t=0 and lands slightly short of the end."""
        assert in_expo(0.0, 3.0, 1.0, 1.0) == 3.0
        assert abs(in_expo(1.0, 0.0, 1.0, 1.0) - 0.999) < 1e-9

    def test_out_bounce_is_mirror_of_in_bounce(self):
        """In-bounce is the out-bounce curve played backwards."""
        for t in (0.1, 0.3, 0.6, 0.9):
            assert abs(in_bounce(t, 0.0, 1.0, 1.0) - (1.0 - out_bounce(1.0 - t, 0.0, 1.0, 1.0))) < 1e-9

    def test_out_bounce_first_segment(self):
        """Before the first bounce out-bounce is a plain parabola."""
        t = 0.2
        assert abs(out_bounce(t, 0.0, 1.0, 1.0) - 7.5625 * t * t) < 1e-9


class TestEasingsDict:
    """Test EASINGS dictionary completeness."""

    def test_easings_contains_all_functions(self):
        """EASINGS holds linear plus four forms of every family."""
        expected = {"linear"}
        for family in FAMILIES:
            expected |= {f"in_{family}", f"out_{family}", f"in_out_{family}", f"out_in_{family}"}
        assert set(EASINGS.keys()) == expected
        assert len(EASINGS) == 41

    def test_easings_values_are_callable(self):
        """All EASINGS values should be callable functions."""
        for name, func in EASINGS.items():
            assert callable(func), f"{name} is not callable"

    def test_easings_start_at_begin(self):
        """Every curve starts at the begin value."""
        for name, func in EASINGS.items():
            result = func(0.0, 2.0, 4.0, 3.0)
            assert abs(result - 2.0) < 1e-9, f"{name}(0) = {result}"

    def test_easings_end_near_end(self):
        """Every curve ends at begin + change (expo forms within 0.1%)."""
        for name, func in EASINGS.items():
            result = func(3.0, 2.0, 4.0, 3.0)
            assert abs(result - 6.0) < 0.005, f"{name}(d) = {result}"

    def test_easings_scale_with_duration(self):
        """Curves depend only on t/d, so doubling both gives the same value."""
        for name, func in EASINGS.items():
            a = func(0.3, 0.0, 1.0, 1.0)
            b = func(0.6, 0.0, 1.0, 2.0)
            assert abs(a - b) < 1e-9, f"{name} depends on duration"
