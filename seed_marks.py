"""
Seed Marks
==========
Logo marks driven entirely by a MasterSeed. Every dimension, angle and
choice below reads from the seed parameters, so one hash always yields
one drawing. Marks are monochrome and resolve through currentColor.
"""

import math

from letterforms import STROKE_WEIGHTS, anatomy, initial_of, second_initial_of
from models import Algorithm
from settings import CENTER, VIEWBOX_SIZE
from svg_builder import PathData, SvgBuilder, lerp, polar, regular_polygon, rotate

SIZE = VIEWBOX_SIZE
CX = CY = CENTER
INK = 'currentColor'

# Letters whose main strokes are diagonal
ANGULAR_LETTERS = set('AKMNVWXYZ')


class SeedMarks:
    def __init__(self, seed):
        self.seed = seed
        self.p = seed.params
        self.tag = seed.hash_hex[:8]
        self.letter = initial_of(seed.brand_name)
        self.svg = SvgBuilder()

    def render(self):
        style_map = {
            Algorithm.LETTER_FUSION: self._letter_fusion,
            Algorithm.INTERLOCKING_GEOMETRY: self._interlocking_geometry,
            Algorithm.NEGATIVE_SPACE_LETTER: self._negative_space_letter,
            Algorithm.MONOGRAM_MERGE_V2: self._monogram_merge,
            Algorithm.CLOVER_RADIAL_V2: self._clover_radial,
            Algorithm.SINGLE_STROKE: self._single_stroke,
            Algorithm.LETTER_EXTRACT: self._letter_extract,
            Algorithm.GRADIENT_GLOW: self._gradient_glow,
        }
        style_map[self.seed.algorithm]()
        return self.svg.build()

    @property
    def weighted_stroke(self):
        return self.p.stroke_width * STROKE_WEIGHTS[self.p.letter_weight]

    # ------------------------------------------------------------------
    # Concept shapes
    # ------------------------------------------------------------------

    def _concept(self, name, cx, cy, size):
        """Small symbolic shape fused onto a letterform"""
        p = self.p
        tension = p.curve_tension
        if name == 'leaf':
            d = (PathData()
                 .move_to(cx, cy - size * 0.5)
                 .quad_to(cx + size * 0.4 * tension, cy - size * 0.2, cx + size * 0.3, cy + size * 0.3)
                 .quad_to(cx, cy + size * 0.5, cx - size * 0.3, cy + size * 0.3)
                 .quad_to(cx - size * 0.4 * tension, cy - size * 0.2, cx, cy - size * 0.5))
            self.svg.path(d, fill=INK)
        elif name == 'arrow':
            w, h = size * 0.3, size * 0.5
            self.svg.polygon([
                (cx, cy - h), (cx + w, cy + h * 0.3), (cx + w * 0.3, cy + h * 0.3),
                (cx + w * 0.3, cy + h), (cx - w * 0.3, cy + h), (cx - w * 0.3, cy + h * 0.3),
                (cx - w, cy + h * 0.3),
            ], fill=INK)
        elif name == 'wave':
            amp = size * 0.2 * max(tension, p.wave_amplitude)
            d = PathData().move_to(cx - size * 0.4, cy)
            steps = p.wave_frequency * 2
            for i in range(steps):
                x0 = lerp(cx - size * 0.4, cx + size * 0.4, i / steps)
                x1 = lerp(cx - size * 0.4, cx + size * 0.4, (i + 1) / steps)
                d.quad_to((x0 + x1) / 2, cy + (-amp if i % 2 == 0 else amp), x1, cy)
            self.svg.path(d, stroke=INK, stroke_width=p.stroke_width, stroke_linecap='round')
        elif name == 'circle':
            self.svg.circle(cx, cy, size * 0.3, stroke=INK, stroke_width=p.stroke_width)
        elif name == 'diamond':
            s = size * 0.35
            self.svg.polygon([(cx, cy - s), (cx + s, cy), (cx, cy + s), (cx - s, cy)], fill=INK,
                             stroke=INK, stroke_width=p.corner_radius * 0.05, stroke_linejoin='round')
        else:
            d = (PathData()
                 .move_to(cx, cy - size * 0.4)
                 .quad_to(cx + size * 0.3 * tension, cy, cx, cy + size * 0.4)
                 .quad_to(cx - size * 0.3 * tension, cy, cx, cy - size * 0.4))
            self.svg.path(d, fill=INK)

    # ------------------------------------------------------------------
    # Marks
    # ------------------------------------------------------------------

    def _letter_fusion(self):
        """Initial skeleton fused with a concept shape"""
        p = self.p
        form = anatomy(self.letter)
        scale = 0.7
        ox, oy = CX * (1 - scale), CY * (1 - scale)
        width = self.weighted_stroke
        cap = 'round' if p.stroke_taper > 50 else p.stroke_cap

        with self.svg.group(transform=rotate(p.rotation * 0.1), stroke=INK, stroke_width=width):
            for x1, y1, x2, y2 in form.stems:
                self.svg.line(x1 * scale + ox, y1 * scale + oy, x2 * scale + ox, y2 * scale + oy,
                              stroke_linecap=cap)
            for cx, cy, rx, ry in form.bowls:
                self.svg.ellipse(cx * scale + ox, cy * scale + oy, rx * scale, ry * scale)
            for x1, y1, x2, y2 in form.crossbars:
                self.svg.line(x1 * scale + ox, y1 * scale + oy, x2 * scale + ox, y2 * scale + oy,
                              stroke_width=width * (1 - p.stroke_contrast * 0.4))

        fusion_x = CX + (p.cutout_position - 6) * 3
        fusion_y = form.apex[1] * scale + oy + p.offset_y * 0.5
        self._concept(p.concept_shape, fusion_x, fusion_y, SIZE * 0.25 * p.scale_variance)

    def _interlocking_geometry(self):
        """Rectangles, ellipses and triangles woven around the center"""
        p = self.p
        count = max(3, p.element_count)
        depth = p.interlock_depth / 100
        base = SIZE * 0.25
        distance = SIZE * 0.15 * (1 - depth * 0.5)

        with self.svg.group(stroke=INK, stroke_width=p.stroke_width, stroke_linejoin=p.stroke_join):
            for i in range(count):
                angle = i * 360 / count + p.rotation
                cx, cy = polar(CX, CY, distance, angle)
                size = base * (0.8 + i / count * 0.4 * p.scale_variance)
                kind = (i + int(p.corner_radius // 20)) % 3

                if kind == 0:
                    w, h = size, size * p.aspect_ratio
                    self.svg.rect(cx - w / 2, cy - h / 2, w, h, rx=p.corner_radius * 0.01 * min(w, h) * 0.5,
                                  transform=rotate(angle + p.rotation * 0.5, cx, cy))
                elif kind == 1:
                    rx = size * 0.5
                    self.svg.ellipse(cx, cy, rx, rx * p.aspect_ratio)
                else:
                    self.svg.polygon(regular_polygon(cx, cy, size * 0.5, 3, start=angle - 90))

        if p.interlock_depth > 30:
            with self.svg.group(stroke=INK, stroke_width=p.stroke_width * 0.5, opacity=0.5):
                for i in range(count):
                    x1, y1 = polar(CX, CY, SIZE * 0.1, i * 360 / count)
                    x2, y2 = polar(CX, CY, SIZE * 0.1, (i + 1) * 360 / count)
                    self.svg.line(x1, y1, x2, y2)

    def _cutout_positions(self, size):
        p = self.p
        offset = size * 0.2
        if self.letter == 'K':
            return [(CX + offset, CY - offset), (CX + offset, CY + offset), (CX - offset * 0.5, CY)]
        if self.letter == 'A':
            return [(CX, CY + offset), (CX - offset, CY + offset * 0.5), (CX + offset, CY + offset * 0.5)]
        if self.letter == 'H':
            return [(CX, CY - offset), (CX, CY + offset)]
        if self.letter == 'N':
            return [(CX - offset * 0.8, CY + offset * 0.5), (CX + offset * 0.8, CY - offset * 0.5)]
        count = 2 + p.cutout_position // 4
        return [polar(CX, CY, offset, i * 360 / count + p.rotation) for i in range(count)]

    def _negative_space_letter(self):
        """Solid tile whose cutouts suggest the initial"""
        p = self.p
        size = SIZE * 0.7
        corner = p.corner_radius * 0.01 * size * 0.3
        x, y = CX - size / 2, CY - size / 2
        cut_r = size * p.counter_ratio * (0.5 + p.scale_variance * 0.3)

        with self.svg.define_mask(f'cut-{self.tag}') as mask:
            self.svg.rect(0, 0, SIZE, SIZE, fill='#ffffff')
            for i, (px, py) in enumerate(self._cutout_positions(size)):
                if p.symmetry_type == 'radial' or i % 2 == 0:
                    self.svg.circle(px, py, cut_r, fill='#000000')
                else:
                    side = cut_r * 1.5
                    self.svg.rect(px - side / 2, py - side / 2, side, side,
                                  rx=p.corner_radius * 0.01 * side * 0.5, fill='#000000',
                                  transform=rotate(p.rotation * 0.5, px, py))

        self.svg.rect(x, y, size, size, rx=corner, fill=INK, mask=mask)
        if p.layer_count > 2:
            inset = p.layer_spacing * 3
            self.svg.rect(x - inset, y - inset, size + inset * 2, size + inset * 2, rx=corner + inset,
                          stroke=INK, stroke_width=p.stroke_width * 0.4)

    def _monogram_merge(self):
        """Two initials sharing a central stroke"""
        p = self.p
        first = self.letter
        second = second_initial_of(self.seed.brand_name)
        width = self.weighted_stroke
        top, bottom = CY - SIZE * 0.25, CY + SIZE * 0.25

        left = CX - SIZE * 0.15 - SIZE * 0.1
        right = CX + SIZE * 0.15 * (1 - p.overlap_amount / 100) + SIZE * 0.1
        shared = (left + right) / 2
        lean = SIZE * 0.06

        with self.svg.group(stroke=INK, stroke_width=width, stroke_linecap='round',
                            stroke_linejoin=p.stroke_join):
            # Outer strokes lean in for diagonal letters
            self.svg.line(left + (lean if first in ANGULAR_LETTERS else 0), top, left, bottom)
            self.svg.line(shared, top, shared, bottom)
            self.svg.line(right - (lean if second in ANGULAR_LETTERS else 0), top, right, bottom)

            bar_y = SIZE * 0.1 * (1 + p.alignment_bias * 0.3)
            self.svg.line(left, CY - bar_y, shared, CY - bar_y, stroke_width=width * 0.8)
            self.svg.line(shared, CY + bar_y, right, CY + bar_y, stroke_width=width * 0.8)

        if p.interlock_depth > 50:
            self.svg.circle(shared, CY, width * 1.5, fill=INK)

    def _clover_radial(self):
        """Three to six petals in rotational symmetry"""
        p = self.p
        count = max(3, min(6, p.element_count + p.ornament_count // 2))
        size = SIZE * 0.18
        distance = SIZE * 0.12 * p.spacing_ratio
        rx, ry = size * p.scale_variance, size * min(p.aspect_ratio, 1.4)

        for i in range(count):
            angle = i * 360 / count - 90 + p.rotation
            cx, cy = polar(CX, CY, distance, angle)
            attrs = {'fill': INK, 'opacity': round(lerp(p.fill_opacity, 1.0, 0.5), 3),
                     'transform': rotate(angle, cx, cy)}
            if p.petal_shape == 'circle':
                self.svg.circle(cx, cy, rx, fill=INK)
            elif p.petal_shape == 'rounded':
                self.svg.rect(cx - rx, cy - ry / 2, rx * 2, ry, rx=p.corner_radius * 0.01 * rx, **attrs)
            elif p.petal_shape == 'teardrop':
                d = (PathData()
                     .move_to(cx + rx, cy)
                     .quad_to(cx, cy - ry * p.curve_tension, cx - rx, cy)
                     .quad_to(cx, cy + ry * p.curve_tension, cx + rx, cy)
                     .close())
                self.svg.path(d, **attrs)
            else:
                d = (PathData()
                     .move_to(cx - rx, cy)
                     .curve_to(cx - rx * 0.3, cy - ry, cx + rx * 0.3, cy - ry, cx + rx, cy)
                     .curve_to(cx + rx * 0.3, cy + ry, cx - rx * 0.3, cy + ry, cx - rx, cy))
                self.svg.path(d, **attrs)

        center = SIZE * 0.08 * p.scale_variance
        if p.symmetry_type == 'radial' or p.center_element == 'dot':
            self.svg.circle(CX, CY, center, fill=INK)
        elif p.center_element == 'ring':
            self.svg.circle(CX, CY, center, stroke=INK, stroke_width=p.stroke_width * 0.5)
        else:
            self.svg.rect(CX - center, CY - center, center * 2, center * 2,
                          rx=p.corner_radius * 0.01 * center, fill=INK)

    def _single_stroke(self):
        """Continuous line inspired by the initial"""
        p = self.p
        tension = p.curve_tension
        margin = 10 + p.margin_ratio * 50
        left, right, top, bottom = margin, SIZE - margin, margin, SIZE - margin

        d = PathData()
        if self.letter in ('A', 'V', 'W'):
            d.move_to(left, bottom)
            d.quad_to(left + (CX - left) * tension, top, CX, top)
            d.quad_to(right - (right - CX) * tension, top, right, bottom)
            ends = [(left, bottom), (right, bottom)]
        elif self.letter in ('S', 'C'):
            d.move_to(right, top + 10)
            d.quad_to(right, top, CX, top)
            d.quad_to(left, top, left, CY - 10)
            d.quad_to(left, CY + 10, CX, CY)
            d.quad_to(right, CY, right, bottom - 10)
            d.quad_to(right, bottom, CX, bottom)
            d.quad_to(left, bottom, left, bottom - 10)
            ends = [(right, top + 10), (left, bottom - 10)]
        elif self.letter in ('O', 'Q'):
            r = (right - left) / 2
            d.move_to(CX, top)
            d.arc_to(r, r * p.aspect_ratio, CX, bottom, large_arc=True)
            d.arc_to(r, r * p.aspect_ratio, CX, top, large_arc=True)
            ends = [(CX, top)]
        else:
            d.move_to(left, CY)
            d.curve_to(left + (right - left) * 0.3, top + tension * 20,
                       right - (right - left) * 0.3, bottom - tension * 20, right, CY)
            ends = [(left, CY), (right, CY)]

        dash = None
        if p.stroke_dash_ratio > 0.8:
            dash = f'{p.stroke_width * 2:.1f} {p.stroke_width * (1 + p.gap_ratio):.1f}'
        self.svg.path(d, stroke=INK, stroke_width=p.stroke_width, stroke_linecap=p.stroke_cap,
                      stroke_linejoin=p.stroke_join, stroke_dasharray=dash)

        if p.stroke_taper > 50:
            for x, y in ends:
                self.svg.circle(x, y, p.stroke_width * 0.8, fill=INK)

    def _letter_extract(self):
        """One anatomical part of the initial, enlarged into a mark"""
        p = self.p
        form = anatomy(self.letter)
        width = p.stroke_width * 1.5
        corner = p.corner_radius * 0.3
        part = p.letter_part

        if part in ('apex', 'terminal'):
            tri = SIZE * 0.25
            inner = tri * 0.4
            outline = [(CX, CY - tri * 0.7), (CX + tri, CY + tri * 0.5), (CX - tri, CY + tri * 0.5)]
            if p.interlock_depth > 30:
                with self.svg.define_mask(f'apex-{self.tag}') as mask:
                    self.svg.rect(0, 0, SIZE, SIZE, fill='#ffffff')
                    self.svg.polygon([(CX, CY + tri * 0.1), (CX + inner, CY + tri * 0.4),
                                      (CX - inner, CY + tri * 0.4)], fill='#000000')
                self.svg.polygon(outline, fill=INK, mask=mask)
            else:
                self.svg.polygon(outline, fill=INK)
            if part == 'terminal':
                self.svg.circle(CX, CY - tri * 0.7 - width * 2, width, fill=INK)
        elif part == 'bowl':
            if form.bowls:
                _, _, rx, ry = form.bowls[0]
                rx, ry = rx * 0.8 * 1.5, ry * 0.8 * 1.5 * min(p.aspect_ratio, 1.5)
                self.svg.ellipse(CX, CY, rx, ry, stroke=INK, stroke_width=width)
                if p.element_count > 2:
                    self.svg.circle(CX + rx * 0.6, CY, width, fill=INK)
            else:
                self.svg.circle(CX, CY, SIZE * 0.25, stroke=INK, stroke_width=width)
                self.svg.circle(CX, CY, SIZE * 0.25 * p.inner_radius_ratio, fill=INK,
                                opacity=p.fill_opacity)
        elif part == 'crossbar':
            bar_w, bar_h = SIZE * 0.5, width * 2
            r = corner * bar_h * 0.1
            self.svg.rect(CX - bar_w / 2, CY - bar_h / 2, bar_w, bar_h, rx=r, fill=INK)
            if p.element_count > 2:
                accent_h = SIZE * 0.3
                self.svg.rect(CX - bar_h / 2, CY - accent_h / 2, bar_h, accent_h, rx=r, fill=INK)
        else:
            stem_w, stem_h = width * 2, SIZE * 0.5
            self.svg.rect(CX - stem_w / 2, CY - stem_h / 2, stem_w, stem_h,
                          rx=p.corner_radius * 0.01 * stem_w, fill=INK)
            if p.element_count > 2:
                length = SIZE * 0.25
                rise = length * math.tan(math.radians(p.rotation * 0.5 % 80))
                y = CY - stem_h * 0.3
                self.svg.line(CX, y, CX + length, y - rise, stroke=INK, stroke_width=width,
                              stroke_linecap='round')

        if p.accent_placement in ('start', 'both'):
            self.svg.circle(CX - SIZE * 0.3, CY + SIZE * 0.3 + p.baseline_shift * 0.5, width * 0.6, fill=INK)
        if p.accent_placement in ('end', 'both'):
            self.svg.circle(CX + SIZE * 0.3, CY + SIZE * 0.3 + p.baseline_shift * 0.5, width * 0.6, fill=INK)

    def _gradient_glow(self):
        """Gradient-filled form with a blurred halo and inner highlight"""
        p = self.p
        stops = []
        for i in range(p.gradient_stops):
            t = i / (p.gradient_stops - 1)
            floor = 0.3 if p.gradient_type == 'radial' else 0.5
            stops.append((t, INK, p.fill_opacity * lerp(1.0, floor, t)))
        fill = self.svg.add_gradient(f'glow-{self.tag}', p.gradient_type, p.gradient_angle, stops,
                                     spread=p.gradient_spread)
        blur = self.svg.add_blur_filter(f'blur-{self.tag}', p.edge_softness * 3)

        size = SIZE * 0.3
        corner = p.corner_radius * 0.01 * size

        # Halo
        if p.edge_softness > 0.3:
            halo = size * 1.1 * p.glow_spread
            self.svg.rect(CX - halo, CY - halo, halo * 2, halo * 2, rx=corner * 1.5, fill=fill,
                          filter=blur, opacity=0.6)

        kind = p.shape_complexity % 3
        if kind == 0:
            self.svg.rect(CX - size, CY - size, size * 2, size * 2, rx=corner, fill=fill)
        elif kind == 1:
            self.svg.circle(CX, CY, size, fill=fill)
        else:
            h = size * math.sqrt(3)
            self.svg.polygon([(CX, CY - size), (CX + size, CY + h / 2), (CX - size, CY + h / 2)],
                             fill=fill, stroke=fill, stroke_width=corner * 0.2, stroke_linejoin='round')

        highlight = size * 0.4
        self.svg.ellipse(CX, CY - size * 0.3, highlight, highlight * 0.6, fill=INK,
                         opacity=p.highlight_opacity)


def generate_from_seed(seed):
    """Render the mark a MasterSeed describes"""
    return SeedMarks(seed).render()
