"""Tests for the SVG builder and path helpers."""

import pytest

from conftest import SVG_NS, local, parse_svg
from svg_builder import PathData, SvgBuilder, clamp, polar, regular_polygon, rotate


class TestHelpers:
    def test_clamp(self):
        assert clamp(-50) == -10
        assert clamp(500) == 110
        assert clamp(42) == 42

    def test_polar(self):
        x, y = polar(50, 50, 10, 0)
        assert (x, y) == pytest.approx((60, 50))
        x, y = polar(50, 50, 10, 90)
        assert (x, y) == pytest.approx((50, 60))

    def test_regular_polygon_starts_at_top(self):
        points = regular_polygon(50, 50, 20, 4)
        assert len(points) == 4
        assert points[0] == pytest.approx((50, 30))

    def test_rotate_transform(self):
        assert rotate(45) == 'rotate(45 50 50)'
        assert rotate(12.5, 10, 20) == 'rotate(12.5 10 20)'


class TestPathData:
    """Path strings with clamped, rounded coordinates."""

    def test_commands(self):
        d = PathData().move_to(0, 0).line_to(10.256, 20).close()
        assert str(d) == 'M 0 0 L 10.26 20 Z'
        assert len(d) == 3

    def test_out_of_range_points_are_clamped(self):
        d = PathData().move_to(-100, 200).line_to(50, 50)
        assert str(d) == 'M -10 110 L 50 50'

    def test_curves_and_arcs(self):
        d = PathData().move_to(0, 0).quad_to(5, 5, 10, 0).curve_to(1, 2, 3, 4, 5, 6).arc_to(-5, 500, 10, 10)
        assert str(d) == 'M 0 0 Q 5 5 10 0 C 1 2 3 4 5 6 A 5 110 0 0 1 10 10'

    def test_polyline(self):
        d = PathData().polyline([(0, 0), (10, 0), (10, 10)], closed=True)
        assert str(d) == 'M 0 0 L 10 0 L 10 10 Z'


class TestSvgBuilder:
    """Document structure and element emission."""

    def test_empty_document(self):
        root = parse_svg(SvgBuilder().build())
        assert root.tag == f'{SVG_NS}svg'
        assert root.get('viewBox') == '0 0 100 100'
        assert root.get('fill') == 'none'

    def test_rect_is_clamped(self):
        b = SvgBuilder()
        b.rect(-50, 0, 500, 20, fill='#ff0000')
        rect = parse_svg(b.build()).find(f'{SVG_NS}rect')
        assert float(rect.get('x')) == -10
        assert float(rect.get('width')) == 120
        assert float(rect.get('height')) == 20
        assert rect.get('fill') == '#ff0000'

    def test_circle_center_is_clamped(self):
        b = SvgBuilder()
        b.circle(200, 50, 10, stroke='currentColor', stroke_width=2.5)
        circle = parse_svg(b.build()).find(f'{SVG_NS}circle')
        assert float(circle.get('cx')) == 110
        assert circle.get('stroke') == 'currentColor'
        assert float(circle.get('stroke-width')) == 2.5

    def test_none_attributes_are_dropped(self):
        b = SvgBuilder()
        b.line(0, 0, 10, 10, stroke='#000000', opacity=None)
        line = parse_svg(b.build()).find(f'{SVG_NS}line')
        assert 'opacity' not in line.attrib

    def test_text(self):
        b = SvgBuilder()
        b.text('A', 50, 60, font_size=40, text_anchor='middle')
        text = parse_svg(b.build()).find(f'{SVG_NS}text')
        assert text.text == 'A'
        assert text.get('text-anchor') == 'middle'

    def test_linear_gradient(self):
        b = SvgBuilder()
        ref = b.add_gradient('g1', 'linear', 0, [(0, '#ffffff', 1), (1, '#000000', 0.5)])
        assert ref == 'url(#g1)'
        root = parse_svg(b.build())
        gradient = root.find(f'.//{SVG_NS}linearGradient')
        assert gradient.get('id') == 'g1'
        stops = gradient.findall(f'{SVG_NS}stop')
        assert [s.get('stop-color') for s in stops] == ['#ffffff', '#000000']

    def test_radial_gradient(self):
        b = SvgBuilder()
        b.add_gradient('g2', 'radial', stops=[(0, 'currentColor', None), (1, 'currentColor', 0)])
        root = parse_svg(b.build())
        assert root.find(f'.//{SVG_NS}radialGradient').get('id') == 'g2'

    def test_blur_filter(self):
        b = SvgBuilder()
        assert b.add_blur_filter('blur-1', 3) == 'url(#blur-1)'
        root = parse_svg(b.build())
        blur = root.find(f'.//{SVG_NS}filter/{SVG_NS}feGaussianBlur')
        assert float(blur.get('stdDeviation')) == 3

    def test_mask_collects_children(self):
        b = SvgBuilder()
        with b.define_mask('m1') as mask:
            b.rect(0, 0, 100, 100, fill='#ffffff')
        b.circle(50, 50, 20, fill='currentColor', mask=mask)
        root = parse_svg(b.build())
        mask_element = root.find(f'.//{SVG_NS}mask')
        assert mask_element.get('id') == 'm1'
        assert [local(c.tag) for c in mask_element] == ['rect']
        assert root.find(f'{SVG_NS}circle').get('mask') == 'url(#m1)'

    def test_clip_path(self):
        b = SvgBuilder()
        with b.define_clip_path('c1') as clip:
            b.circle(50, 50, 30)
        b.rect(0, 0, 100, 100, clip_path=clip)
        root = parse_svg(b.build())
        assert root.find(f'.//{SVG_NS}clipPath/{SVG_NS}circle') is not None
        assert root.find(f'{SVG_NS}rect').get('clip-path') == 'url(#c1)'

    def test_group_nests_and_transforms(self):
        b = SvgBuilder()
        with b.group(transform=rotate(30), stroke='currentColor'):
            b.line(0, 0, 10, 10)
        b.circle(50, 50, 5)
        root = parse_svg(b.build())
        group = root.find(f'{SVG_NS}g')
        assert group.get('transform') == 'rotate(30 50 50)'
        assert group.find(f'{SVG_NS}line') is not None
        assert root.find(f'{SVG_NS}circle') is not None

    def test_no_external_references(self):
        b = SvgBuilder()
        b.add_gradient('g1', stops=[(0, '#000000', 1)])
        svg = b.build()
        assert 'http://' not in svg.replace('http://www.w3.org', '')
