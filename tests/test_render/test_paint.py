"""Tests for colors and gradient stops."""

from __future__ import annotations

import pytest

from streaklab.errors import GradientStopError
from streaklab.render.paint import WHITE, Color, LinearGradient, RadialGradient


class TestColor:
    def test_with_alpha_keeps_channels(self):
        c = WHITE.with_alpha(0.25)
        assert (c.r, c.g, c.b, c.a) == (255, 255, 255, 0.25)

    def test_as_cairo_normalizes(self):
        assert Color(255, 0, 51, 0.5).as_cairo() == (1.0, 0.0, 0.2, 0.5)

    @pytest.mark.parametrize("args", [(256, 0, 0, 1.0), (0, -1, 0, 1.0), (0, 0, 0, 1.5)])
    def test_rejects_out_of_range(self, args):
        with pytest.raises(ValueError):
            Color(*args)


class TestGradientStops:
    def test_increasing_stops_accepted(self):
        g = LinearGradient(x0=0, y0=0, x1=0, y1=10)
        g.add_stop(0.0, WHITE).add_stop(0.8, WHITE).add_stop(1.0, WHITE)
        assert [s.offset for s in g.stops] == [0.0, 0.8, 1.0]

    def test_out_of_order_stop_rejected(self):
        g = LinearGradient(x0=0, y0=0, x1=0, y1=10).add_stop(0.8, WHITE)
        with pytest.raises(GradientStopError):
            g.add_stop(0.5, WHITE)

    def test_offset_outside_unit_interval_rejected(self):
        with pytest.raises(GradientStopError):
            RadialGradient(r1=5).add_stop(1.2, WHITE)

    def test_gradient_stop_error_is_value_error(self):
        with pytest.raises(ValueError):
            RadialGradient(r1=5).add_stop(-0.1, WHITE)

    def test_to_pattern_builds_cairo_pattern(self):
        g = RadialGradient(cx0=5, cy0=5, r0=0, cx1=5, cy1=5, r1=5).add_stop(0.0, WHITE)
        assert g.to_pattern() is not None
