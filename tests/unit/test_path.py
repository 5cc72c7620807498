"""Unit tests for path data generation.

Tests freehand.render.path:
    - get_path_commands: M / Q / Z commands through outline midpoints
    - format_svg_path: number formatting and operator grouping
    - to_path: dispatch on the clip option and clip failures
"""

import pytest

from freehand.domain import StrokeOptions
from freehand.render.clipping import ClipUnavailableError
from freehand.render.path import (
    PathCommand,
    format_svg_path,
    get_flat_svg_path_from_stroke,
    get_path_commands,
    get_svg_path_from_stroke,
    to_path,
)
from freehand.stroke import get_stroke

TRIANGLE = [(0, 0), (10, 0), (10, 10)]


class TestPathCommands:
    """Tests for get_path_commands."""

    def test_empty_outline(self):
        assert get_path_commands([]) == []

    def test_structure(self):
        commands = get_path_commands(TRIANGLE)
        assert [c.op for c in commands] == ['M', 'Q', 'Q', 'Q', 'Z']
        assert commands[0] == PathCommand('M', (0.0, 0.0))
        assert commands[-1] == PathCommand('Z')

    def test_quadratics_end_at_midpoints(self):
        commands = get_path_commands(TRIANGLE)
        assert commands[1].coords == (0.0, 0.0, 5.0, 0.0)
        assert commands[2].coords == (10.0, 0.0, 10.0, 5.0)
        # Last segment wraps back toward the first point
        assert commands[3].coords == (10.0, 10.0, 5.0, 5.0)

    def test_one_quadratic_per_outline_point(self, wiggly_points):
        outline = get_stroke(wiggly_points)
        commands = get_path_commands(outline)
        assert len(commands) == len(outline) + 2


class TestFormatSvgPath:
    """Tests for format_svg_path and get_svg_path_from_stroke."""

    def test_triangle(self):
        assert get_svg_path_from_stroke(TRIANGLE) == 'M 0 0 Q 0 0 5 0 10 0 10 5 10 10 5 5 Z'

    def test_empty(self):
        assert get_svg_path_from_stroke([]) == ''
        assert format_svg_path([]) == ''

    def test_precision(self):
        commands = [PathCommand('M', (1.23456, -0.5)), PathCommand('Z')]
        assert format_svg_path(commands, precision=3) == 'M 1.235 -0.5 Z'
        assert format_svg_path(commands, precision=0) == 'M 1 0 Z'

    def test_negative_zero_written_as_zero(self):
        commands = [PathCommand('M', (-0.001, -0.0))]
        assert format_svg_path(commands) == 'M 0 0'

    def test_repeated_operator_written_once(self):
        commands = [
            PathCommand('M', (0, 0)),
            PathCommand('Q', (1, 1, 2, 2)),
            PathCommand('Q', (3, 3, 4, 4)),
            PathCommand('Z'),
        ]
        assert format_svg_path(commands) == 'M 0 0 Q 1 1 2 2 3 3 4 4 Z'


class TestToPath:
    """Tests for to_path and get_flat_svg_path_from_stroke."""

    def test_unclipped(self):
        assert to_path(TRIANGLE, StrokeOptions()) == get_svg_path_from_stroke(TRIANGLE)

    def test_default_options_do_not_clip(self):
        assert to_path(TRIANGLE) == get_svg_path_from_stroke(TRIANGLE)

    def test_clip_without_union_raises(self):
        with pytest.raises(ClipUnavailableError):
            to_path(TRIANGLE, StrokeOptions(clip=True))

    def test_clip_routes_through_union(self, identity_union):
        d = to_path(TRIANGLE, StrokeOptions(clip=True), identity_union)
        assert d == get_svg_path_from_stroke(TRIANGLE)
        assert identity_union.calls == [[TRIANGLE]]

    def test_clip_failure_propagates(self, failing_union):
        with pytest.raises(ClipUnavailableError, match='offline'):
            to_path(TRIANGLE, StrokeOptions(clip=True), failing_union)

    def test_each_ring_becomes_subpath(self):
        class TwoRings:
            def union(self, rings):
                return [[(0, 0), (1, 0), (1, 1)], [(5, 5), (6, 5), (6, 6)]]

        d = get_flat_svg_path_from_stroke(TRIANGLE, TwoRings())
        assert d.count('M') == 2
        assert d.count('Z') == 2

    def test_empty_outline_with_clip(self, identity_union):
        assert get_flat_svg_path_from_stroke([], identity_union) == ''
        assert identity_union.calls == []
