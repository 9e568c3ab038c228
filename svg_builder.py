"""
SVG Builder
===========
Append-only vector assembly on top of svgwrite.

Every document has viewBox "0 0 100 100" and a root fill of "none". Positional
attributes are clamped to [COORD_MIN, COORD_MAX] and rounded, so algorithms
never have to guard their own arithmetic. Color strings are passed through
exactly as given.
"""

import math
from contextlib import contextmanager

import svgwrite

from settings import CENTER, COORD_MAX, COORD_MIN, VIEWBOX


def clamp(value, lo=COORD_MIN, hi=COORD_MAX):
    return max(lo, min(hi, value))


def _num(value, places=2):
    n = round(float(value), places)
    return 0.0 if n == 0 else n


def _coord(value):
    return _num(clamp(value))


def _fmt(value):
    text = '%.2f' % _num(value)
    return text.rstrip('0').rstrip('.')


def polar(cx, cy, radius, degrees):
    """Point at `degrees` (0 = east, clockwise in SVG space) around a center"""
    rad = math.radians(degrees)
    return cx + math.cos(rad) * radius, cy + math.sin(rad) * radius


def regular_polygon(cx, cy, radius, sides, start=-90.0):
    return [polar(cx, cy, radius, start + i * 360.0 / sides) for i in range(sides)]


def star_points(cx, cy, outer, inner, tips=5, start=-90.0):
    points = []
    for i in range(tips * 2):
        r = outer if i % 2 == 0 else inner
        points.append(polar(cx, cy, r, start + i * 180.0 / tips))
    return points


def lerp(a, b, t):
    return a + (b - a) * t


def rotate(angle, cx=CENTER, cy=CENTER):
    """Transform string for a rotation about (cx, cy)"""
    return f'rotate({_fmt(angle)} {_fmt(cx)} {_fmt(cy)})'


class PathData:
    """Path `d` builder with clamped, rounded coordinates"""

    def __init__(self):
        self._parts = []

    def _push(self, command, *values):
        self._parts.append(' '.join([command] + [_fmt(v) for v in values]))
        return self

    def move_to(self, x, y):
        return self._push('M', clamp(x), clamp(y))

    def line_to(self, x, y):
        return self._push('L', clamp(x), clamp(y))

    def quad_to(self, cx, cy, x, y):
        return self._push('Q', clamp(cx), clamp(cy), clamp(x), clamp(y))

    def curve_to(self, c1x, c1y, c2x, c2y, x, y):
        return self._push('C', clamp(c1x), clamp(c1y), clamp(c2x), clamp(c2y), clamp(x), clamp(y))

    def arc_to(self, rx, ry, x, y, large_arc=False, sweep=True):
        rx = clamp(abs(rx), 0, COORD_MAX)
        ry = clamp(abs(ry), 0, COORD_MAX)
        return self._push('A', rx, ry, 0, int(large_arc), int(sweep), clamp(x), clamp(y))

    def close(self):
        self._parts.append('Z')
        return self

    def polyline(self, points, closed=False):
        for i, (x, y) in enumerate(points):
            if i == 0:
                self.move_to(x, y)
            else:
                self.line_to(x, y)
        if closed and points:
            self.close()
        return self

    def __len__(self):
        return len(self._parts)

    def __str__(self):
        return ' '.join(self._parts)


class SvgBuilder:
    def __init__(self):
        self.dwg = svgwrite.Drawing(size=None, viewBox=VIEWBOX, fill='none', debug=False)
        self._stack = [self.dwg]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _attrs(attrs):
        clean = {}
        for key, value in attrs.items():
            if value is None:
                continue
            if isinstance(value, float):
                value = _num(value, 3)
            clean[key] = value
        return clean

    def _add(self, element):
        self._stack[-1].add(element)
        return element

    @contextmanager
    def _inside(self, container):
        self._stack.append(container)
        try:
            yield container
        finally:
            self._stack.pop()

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def path(self, d, **attrs):
        return self._add(self.dwg.path(d=str(d), **self._attrs(attrs)))

    def rect(self, x, y, width, height, **attrs):
        x, y = _coord(x), _coord(y)
        width = _num(max(0.0, min(width, COORD_MAX - x)))
        height = _num(max(0.0, min(height, COORD_MAX - y)))
        return self._add(self.dwg.rect(insert=(x, y), size=(width, height), **self._attrs(attrs)))

    def circle(self, cx, cy, r, **attrs):
        return self._add(self.dwg.circle(center=(_coord(cx), _coord(cy)), r=_num(max(0.0, r)),
                                         **self._attrs(attrs)))

    def ellipse(self, cx, cy, rx, ry, **attrs):
        return self._add(self.dwg.ellipse(center=(_coord(cx), _coord(cy)),
                                          r=(_num(max(0.0, rx)), _num(max(0.0, ry))),
                                          **self._attrs(attrs)))

    def line(self, x1, y1, x2, y2, **attrs):
        return self._add(self.dwg.line(start=(_coord(x1), _coord(y1)), end=(_coord(x2), _coord(y2)),
                                       **self._attrs(attrs)))

    def polygon(self, points, **attrs):
        return self._add(self.dwg.polygon(points=[(_coord(x), _coord(y)) for x, y in points],
                                          **self._attrs(attrs)))

    def text(self, content, x, y, **attrs):
        return self._add(self.dwg.text(content, insert=(_coord(x), _coord(y)), **self._attrs(attrs)))

    # ------------------------------------------------------------------
    # Definitions
    # ------------------------------------------------------------------

    def add_gradient(self, gradient_id, gradient_type='linear', angle=0.0, stops=(), spread=0.5):
        """Define a gradient and return its `url(#id)` reference.

        `stops` is a sequence of (offset, color, opacity) tuples with offsets
        in [0, 1]. Linear gradients run along `angle` degrees through the
        center of the bounding box; radial ones use `spread` as the radius.
        """
        if gradient_type == 'radial':
            gradient = self.dwg.radialGradient(center=('50%', '50%'), r=f'{_fmt(spread * 100)}%',
                                               id=gradient_id)
        else:
            dx = math.cos(math.radians(angle)) * 50
            dy = math.sin(math.radians(angle)) * 50
            gradient = self.dwg.linearGradient(
                start=(f'{_fmt(50 - dx)}%', f'{_fmt(50 - dy)}%'),
                end=(f'{_fmt(50 + dx)}%', f'{_fmt(50 + dy)}%'),
                id=gradient_id,
            )
        for offset, color, opacity in stops:
            gradient.add_stop_color(offset=_num(offset, 3), color=color,
                                    opacity=None if opacity is None else _num(opacity, 3))
        self.dwg.defs.add(gradient)
        return f'url(#{gradient_id})'

    def add_blur_filter(self, filter_id, std_deviation):
        """Gaussian blur filter with a generous region; returns `url(#id)`"""
        blur = self.dwg.filter(id=filter_id, start=('-50%', '-50%'), size=('200%', '200%'))
        blur.feGaussianBlur(in_='SourceGraphic', stdDeviation=_num(std_deviation, 3))
        self.dwg.defs.add(blur)
        return f'url(#{filter_id})'

    @contextmanager
    def define_mask(self, mask_id):
        """Shapes drawn inside the block become the mask content"""
        mask = self.dwg.mask(id=mask_id)
        self.dwg.defs.add(mask)
        with self._inside(mask):
            yield f'url(#{mask_id})'

    @contextmanager
    def define_clip_path(self, clip_id):
        clip = self.dwg.clipPath(id=clip_id)
        self.dwg.defs.add(clip)
        with self._inside(clip):
            yield f'url(#{clip_id})'

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @contextmanager
    def group(self, transform=None, **attrs):
        """Wrap everything drawn inside the block in a <g>"""
        element = self.dwg.g(**self._attrs(attrs))
        if transform:
            element['transform'] = transform
        self._add(element)
        with self._inside(element):
            yield element

    def build(self):
        return self.dwg.tostring()
