"""
Fixed Marks
===========
Brand/color driven logo marks. Geometry is drawn from a seeded stream
keyed by the brand name (or an explicit seed), colored with the caller's
primary and accent colors.
"""

import math

from letterforms import FONT_WEIGHTS, initial_of, second_initial_of
from master_seed import brand_hash, create_seeded_random
from models import Algorithm
from settings import CENTER, VIEWBOX_SIZE
from svg_builder import PathData, SvgBuilder, polar, regular_polygon, rotate, star_points

SIZE = VIEWBOX_SIZE
CX = CY = CENTER
FONT_FAMILY = 'Arial, Helvetica, sans-serif'


class FixedMarks:
    def __init__(self, mark_input):
        self.brand_name = mark_input.brand_name or ''
        self.color = mark_input.primary_color or 'currentColor'
        self.accent = mark_input.accent_color or self.color
        seed_hex = mark_input.seed_hex or brand_hash(self.brand_name)
        self.tag = seed_hex[:8]
        self.rng = create_seeded_random(seed_hex)
        self.letter = initial_of(self.brand_name)
        self.svg = SvgBuilder()

    def render(self, algorithm):
        """Draw the mark for `algorithm` and return the SVG document"""
        style_map = {
            Algorithm.LINE_FRAGMENTATION: self._line_fragmentation,
            Algorithm.STAGGERED_BARS: self._staggered_bars,
            Algorithm.BLOCK_ASSEMBLY: self._block_assembly,
            Algorithm.MOTION_CHEVRONS: self._motion_chevrons,
            Algorithm.NEGATIVE_SPACE: self._negative_space,
            Algorithm.INTERLOCKING_LOOPS: self._interlocking_loops,
            Algorithm.MONOGRAM_MERGE: self._monogram_merge,
            Algorithm.CONTINUOUS_STROKE: self._continuous_stroke,
            Algorithm.GEOMETRIC_EXTRACT: self._geometric_extract,
            Algorithm.CLOVER_RADIAL: self._clover_radial,
        }
        style_map[algorithm]()
        return self.svg.build()

    # ------------------------------------------------------------------
    # Draw helpers
    # ------------------------------------------------------------------

    def _pick(self, *options):
        return self.rng.choice(options)

    def _range(self, lo, hi):
        return self.rng.uniform(lo, hi)

    def _letter_text(self, letter, x, y, font_size, weight, **attrs):
        self.svg.text(letter, x, y, font_family=FONT_FAMILY, font_weight=weight,
                      font_size=round(font_size, 1), text_anchor='middle', **attrs)

    def _container(self, shape, cx, cy, r, **attrs):
        """Outline shape shared by the negative-space and extract marks"""
        if shape == 'circle':
            self.svg.circle(cx, cy, r, **attrs)
        elif shape == 'square':
            self.svg.rect(cx - r, cy - r, r * 2, r * 2, **attrs)
        elif shape == 'rounded-rect':
            self.svg.rect(cx - r, cy - r, r * 2, r * 2, rx=r * 0.3, **attrs)
        elif shape == 'hexagon':
            self.svg.polygon(regular_polygon(cx, cy, r, 6, start=-30), **attrs)
        elif shape == 'diamond':
            self.svg.polygon(regular_polygon(cx, cy, r, 4), **attrs)
        elif shape == 'octagon':
            self.svg.polygon(regular_polygon(cx, cy, r, 8, start=-22.5), **attrs)
        else:
            d = (PathData()
                 .move_to(cx, cy - r)
                 .line_to(cx + r, cy - r * 0.5)
                 .line_to(cx + r, cy + r * 0.3)
                 .quad_to(cx + r, cy + r, cx, cy + r)
                 .quad_to(cx - r, cy + r, cx - r, cy + r * 0.3)
                 .line_to(cx - r, cy - r * 0.5)
                 .close())
            self.svg.path(d, **attrs)

    # ------------------------------------------------------------------
    # Marks
    # ------------------------------------------------------------------

    def _line_fragmentation(self):
        """Parallel dashed lines revealed through a shape mask"""
        line_count = self.rng.randint(8, 24)
        thickness = self._range(1, 4)
        cap = {'round': 'round', 'flat': 'butt', 'arrow': 'square'}[self._pick('round', 'flat', 'arrow')]
        gap_pattern = self._pick('even', 'random', 'gradient', 'morse', 'cluster')
        angle_pattern = self._pick('horizontal', 'diagonal', 'radial', 'vertical', 'curved')
        fragment = self._pick('circle', 'square', 'letter', 'star', 'triangle', 'hexagon')
        tilt = self._range(0, 360) % 45

        with self.svg.define_mask(f'frag-{self.tag}') as mask:
            self.svg.rect(0, 0, SIZE, SIZE, fill='#000000')
            if fragment == 'circle':
                self.svg.circle(CX, CY, 40, fill='#ffffff')
            elif fragment == 'square':
                self.svg.rect(10, 10, 80, 80, fill='#ffffff')
            elif fragment == 'star':
                self.svg.polygon(star_points(CX, CY, 40, 18), fill='#ffffff')
            elif fragment == 'triangle':
                self.svg.polygon([(50, 10), (90, 85), (10, 85)], fill='#ffffff')
            elif fragment == 'hexagon':
                self.svg.polygon(regular_polygon(CX, CY, 40, 6, start=-30), fill='#ffffff')
            else:
                self._letter_text(self.letter, CX, 78, 80, '900', fill='#ffffff')

        step = SIZE / line_count
        with self.svg.group(transform=rotate(tilt), mask=mask):
            for i in range(line_count):
                mid = i * step + step / 2
                if angle_pattern == 'horizontal':
                    x1, y1, x2, y2 = 0, mid, SIZE, mid
                elif angle_pattern == 'vertical':
                    x1, y1, x2, y2 = mid, 0, mid, SIZE
                elif angle_pattern == 'diagonal':
                    offset = (i - line_count / 2) * step * 1.5
                    x1, y1, x2, y2 = 0, 50 + offset, SIZE, 50 + offset - SIZE * 0.3
                elif angle_pattern == 'radial':
                    x2, y2 = polar(CX, CY, 50, i * 360 / line_count)
                    x1, y1 = CX, CY
                else:
                    wave = math.sin(i / line_count * math.pi * 2) * 10
                    x1, y1, x2, y2 = 0, mid + wave, SIZE, mid - wave

                if gap_pattern == 'even':
                    dashes = [5 + self.rng.random() * 10, 3 + self.rng.random() * 5]
                elif gap_pattern == 'random':
                    dashes = [3 + self.rng.random() * 15 for _ in range(6)]
                elif gap_pattern == 'gradient':
                    gap = 2 + i / line_count * 8
                    dashes = [15 - gap, gap]
                elif gap_pattern == 'morse':
                    dashes = [2, 2, 8, 2] if self.rng.random() > 0.5 else [8, 2, 2, 2]
                else:
                    dashes = [20, 5] if i % 3 == 0 else [5, 3]

                self.svg.line(x1, y1, x2, y2, stroke=self.color, stroke_width=thickness,
                              stroke_linecap=cap,
                              stroke_dasharray=' '.join(f'{d:.1f}' for d in dashes))

    def _staggered_bars(self):
        """Rhythmic bars whose heights follow a pattern"""
        bar_count = self.rng.randint(6, 16)
        height_pattern = self._pick('ascending', 'descending', 'wave', 'random', 'centered',
                                    'alternating', 'stairs', 'valley')
        width_style = self._pick('thin', 'medium', 'thick', 'tapered', 'mixed')
        spacing = self._pick('tight', 'normal', 'loose', 'varied')
        corner = self._range(0, 50)
        tilt = self._range(-15, 15)
        vertical = self._pick('horizontal', 'vertical') == 'vertical'
        alignment = self._pick('top', 'center', 'bottom', 'staggered')
        organic = self._range(0, 0.3)

        width_factor = {'thin': 0.4, 'medium': 0.65, 'thick': 0.9, 'tapered': 0.6, 'mixed': 0.6}
        base_width = SIZE / bar_count * width_factor[width_style]
        step = SIZE / bar_count * {'tight': 0.8, 'loose': 1.4}.get(spacing, 1.0)

        for i in range(bar_count):
            t = i / (bar_count - 1)
            if height_pattern == 'ascending':
                height = 0.3 + t * 0.6
            elif height_pattern == 'descending':
                height = 0.9 - t * 0.6
            elif height_pattern == 'wave':
                height = 0.5 + math.sin(t * math.pi * 2) * 0.35
            elif height_pattern == 'random':
                height = 0.4 + self.rng.random() * 0.5
            elif height_pattern == 'centered':
                height = 0.3 + (1 - abs(t - 0.5) * 2) * 0.6
            elif height_pattern == 'alternating':
                height = 0.8 if i % 2 == 0 else 0.5
            elif height_pattern == 'stairs':
                height = 0.3 + math.floor(t * 5) / 5 * 0.6
            else:
                height = 0.9 - (1 - abs(t - 0.5) * 2) * 0.5

            height += (self.rng.random() - 0.5) * organic * 0.4
            height = max(0.2, min(0.95, height)) * SIZE

            width = base_width
            if width_style == 'mixed':
                width *= 0.7 + self.rng.random() * 0.6
            elif width_style == 'tapered':
                width *= 0.6 + t * 0.6

            pos = i * step + (SIZE - bar_count * step) / 2
            if spacing == 'varied':
                pos += (self.rng.random() - 0.5) * step * 0.3

            if alignment == 'top':
                start = 5
            elif alignment == 'bottom':
                start = SIZE - height - 5
            elif alignment == 'staggered':
                start = 5 + (i % 2) * 10 + (self.rng.random() - 0.5) * 5
            else:
                start = (SIZE - height) / 2

            fill = self.accent if i == bar_count - 1 else self.color
            transform = rotate(tilt, pos + width / 2, CY)
            if vertical:
                self.svg.rect(start, pos, height, width, rx=width * corner / 100, fill=fill,
                              transform=transform)
            else:
                self.svg.rect(pos, start, width, height, rx=width * corner / 100, fill=fill,
                              transform=transform)

    def _block_assembly(self):
        """Stacked solid blocks with offset drop shadows"""
        block_count = self.rng.randint(2, 5)
        shape = self._pick('square', 'rect', 'triangle', 'parallelogram', 'hexagon', 'diamond')
        overlap = self._range(10, 60)
        depth_dir = self._pick('left', 'right', 'top', 'bottom', 'topleft', 'bottomright')
        shadow = self._range(0.1, 0.5)
        spin = self._range(0, 45)
        scale_pattern = self._pick('equal', 'ascending', 'descending', 'random')
        arrangement = self._pick('diagonal', 'stack', 'scatter', 'grid')

        depth = 8 + shadow * 12
        dx, dy = {
            'left': (-depth, 0),
            'right': (depth, 0),
            'top': (0, -depth),
            'bottom': (0, depth),
            'topleft': (-depth * 0.7, -depth * 0.7),
            'bottomright': (depth * 0.7, depth * 0.7),
        }[depth_dir]

        positions = []
        stride = 70 / block_count * (1 - overlap / 100)
        grid = math.ceil(math.sqrt(block_count))
        for i in range(block_count):
            if arrangement == 'diagonal':
                positions.append([15 + i * stride, 15 + i * stride, 1.0])
            elif arrangement == 'stack':
                positions.append([30 + i * 8, 15 + i * stride, 1.0])
            elif arrangement == 'scatter':
                positions.append([15 + self.rng.random() * 50, 15 + self.rng.random() * 50,
                                  0.7 + self.rng.random() * 0.6])
            else:
                positions.append([15 + (i % grid) * (70 / grid), 15 + (i // grid) * (70 / grid), 1.0])

        for i, pos in enumerate(positions):
            if scale_pattern == 'ascending':
                pos[2] *= 0.6 + i / block_count * 0.6
            elif scale_pattern == 'descending':
                pos[2] *= 1.2 - i / block_count * 0.6
            elif scale_pattern == 'random':
                pos[2] *= 0.7 + self.rng.random() * 0.6

        shadow_opacity = round(shadow * 0.5, 2)
        for i, (x, y, scale) in enumerate(positions):
            size = 30 * scale
            cx, cy = x + size / 2, y + size / 2
            transform = rotate(spin if i % 2 == 0 else -spin, cx, cy)
            opacity = round(0.6 + i / block_count * 0.3, 2)

            if shape in ('square', 'rect'):
                w, h = (size * 1.3, size * 0.7) if shape == 'rect' else (size, size)
                # Shadow
                self.svg.rect(x + dx, y + dy, w, h, fill='#000000', opacity=shadow_opacity,
                              transform=transform)
                self.svg.rect(x, y, w, h, fill=self.color, opacity=opacity, transform=transform)
                continue

            if shape == 'triangle':
                points = [(cx, y), (x + size, y + size), (x, y + size)]
            elif shape == 'parallelogram':
                skew = size * 0.3
                points = [(x + skew, y), (x + size + skew, y), (x + size, y + size), (x, y + size)]
            elif shape == 'hexagon':
                points = regular_polygon(cx, cy, size / 2, 6, start=-30)
            else:
                points = [(cx, y), (x + size, cy), (cx, y + size), (x, cy)]

            self.svg.polygon([(px + dx, py + dy) for px, py in points], fill='#000000',
                             opacity=shadow_opacity, transform=transform)
            self.svg.polygon(points, fill=self.color, opacity=opacity, transform=transform)

    def _motion_chevrons(self):
        """Nested or stacked chevrons suggesting movement"""
        count = self.rng.randint(2, 5)
        thickness = self._range(2, 10)
        angle = self._range(20, 70)
        spacing_style = self._pick('overlapping', 'touching', 'close', 'apart', 'far')
        tips = self._pick('pointed', 'rounded', 'flat')
        style = self._pick('solid', 'outline', 'gradient')
        arrangement = self._pick('nested', 'stacked', 'cascading', 'radial')
        direction = self._pick('up', 'down', 'left', 'right')

        spacing = thickness * {'overlapping': -0.3, 'touching': 0, 'close': 0.5,
                               'apart': 1.5, 'far': 2.5}[spacing_style]
        width = SIZE * 0.5
        height = width * math.tan(math.radians(angle)) / 2
        cap = {'rounded': 'round', 'flat': 'square'}.get(tips, 'butt')
        join = 'round' if tips == 'rounded' else 'miter'
        turn = {'up': 0, 'down': 180, 'left': -90, 'right': 90}[direction]

        for i in range(count):
            cx, cy = CX, CY
            w, h = width, height
            opacity = 1 - i * 0.15
            if arrangement == 'nested':
                factor = 1 - i / count * 0.5
                w, h = w * factor, h * factor
            elif arrangement == 'stacked':
                cy = CY - (count - 1) * (height + spacing) / 2 + i * (height + spacing)
            elif arrangement == 'cascading':
                cx = CX + i * 5
                cy = CY + i * (height * 0.7 + spacing)
                opacity = 1 - i * 0.1
            else:
                cx, cy = polar(CX, CY, 15, i * 360 / count)
                turn = i * 360 / count

            left, right, top = cx - w / 2, cx + w / 2, cy - h
            transform = rotate(turn)
            if style == 'solid':
                d = (PathData()
                     .move_to(left, top)
                     .line_to(cx, cy)
                     .line_to(right, top)
                     .line_to(right, top + thickness)
                     .line_to(cx, cy + thickness * 0.5)
                     .line_to(left, top + thickness)
                     .close())
                self.svg.path(d, fill=self.color, opacity=round(opacity, 2), transform=transform)
            else:
                d = PathData().move_to(left, top).line_to(cx, cy).line_to(right, top)
                stroke = self.accent if style == 'gradient' and i % 2 else self.color
                self.svg.path(d, stroke=stroke, stroke_width=thickness, stroke_linecap=cap,
                              stroke_linejoin=join, opacity=round(opacity, 2), transform=transform)

    def _negative_space(self):
        """Initial set inside or cut out of a container shape"""
        shape = self._pick('circle', 'square', 'rounded-rect', 'hexagon', 'diamond', 'octagon', 'shield')
        position = self._pick('centered', 'offset-left', 'offset-right', 'offset-top', 'offset-bottom')
        letter_scale = self._range(40, 80)
        style = self._pick('stroke', 'fill', 'double', 'dashed')
        weight = FONT_WEIGHTS[self._pick(*FONT_WEIGHTS)]
        thickness = self._range(2, 8)

        r = SIZE * 0.4
        nudge_x, nudge_y = {
            'offset-left': (-5, 0),
            'offset-right': (5, 0),
            'offset-top': (0, -5),
            'offset-bottom': (0, 5),
        }.get(position, (0, 0))
        letter_size = r * 2 * letter_scale / 100
        tx = CX + nudge_x

        if style == 'fill':
            with self.svg.define_mask(f'neg-{self.tag}') as mask:
                self.svg.rect(0, 0, SIZE, SIZE, fill='#ffffff')
                self._letter_text(self.letter, tx, CY + letter_size * 0.35 + nudge_y, letter_size,
                                  weight, fill='#000000')
            with self.svg.group(mask=mask, fill=self.color):
                self._container(shape, CX, CY, r)
            return

        if style == 'double':
            with self.svg.group(stroke=self.color, stroke_width=thickness * 0.6):
                self._container(shape, CX, CY, r)
                self._container(shape, CX, CY, r * 0.85)
            self._letter_text(self.letter, tx, CY + letter_size * 0.3 + nudge_y, letter_size * 0.6,
                              weight, fill=self.accent)
            return

        dash = '8 4' if style == 'dashed' else None
        with self.svg.group(stroke=self.color, stroke_width=thickness, stroke_dasharray=dash):
            self._container(shape, CX, CY, r)
        self._letter_text(self.letter, tx, CY + letter_size * 0.35 + nudge_y, letter_size * 0.7,
                          weight, fill=self.accent)

    def _interlocking_loops(self):
        """Woven outline loops: rings, chains, venn or celtic knots"""
        loop_count = self.rng.randint(2, 4)
        shape = self._pick('circle', 'rounded-rect', 'triangle', 'oval', 'squircle')
        tightness = self._range(0.3, 0.9)
        stroke_width = self._range(2, 8)
        corner = self._range(0, 50)
        scale_relation = self._pick('equal', 'graduated', 'alternating')
        spin = self._range(0, 120)
        style = self._pick('olympic', 'chain', 'venn', 'celtic')

        size = SIZE * 0.25
        loops = []
        for i in range(loop_count):
            if style == 'olympic':
                spacing = size * (2 - tightness)
                row, col = (1, i - 2) if i >= 2 else (0, i)
                start = CX - (spacing if loop_count > 3 else spacing / 2)
                loops.append((start + col * spacing + (spacing / 2 if row else 0),
                              CY - size * 0.3 + row * size * 0.7, 0))
            elif style == 'chain':
                pitch = size * (1 - tightness * 0.3)
                loops.append((CX - (loop_count - 1) * pitch / 2 + i * pitch,
                              CY + (0 if i % 2 == 0 else size * 0.1), 0 if i % 2 == 0 else 15))
            elif style == 'venn':
                x, y = polar(CX, CY, size * (1 - tightness) * 0.8, i * 360 / loop_count + spin)
                loops.append((x, y, 0))
            else:
                x, y = polar(CX, CY, size * (1.2 - tightness * 0.5), i * 360 / loop_count - 90)
                loops.append((x, y, i * 360 / loop_count))

        for i, (x, y, turn) in enumerate(loops):
            if scale_relation == 'graduated':
                scale = 0.8 + i / loop_count * 0.4
            elif scale_relation == 'alternating':
                scale = 1.0 if i % 2 == 0 else 0.8
            else:
                scale = 1.0
            s = size * scale
            stroke = self.accent if i == loop_count - 1 else self.color

            with self.svg.group(stroke=stroke, stroke_width=stroke_width,
                                opacity=round(0.85 + i / loop_count * 0.15, 2)):
                if shape == 'circle':
                    self.svg.circle(x, y, s)
                elif shape == 'rounded-rect':
                    self.svg.rect(x - s, y - s * 0.7, s * 2, s * 1.4, rx=s * corner / 100)
                elif shape == 'oval':
                    self.svg.ellipse(x, y, s, s * 0.7)
                elif shape == 'triangle':
                    self.svg.polygon(regular_polygon(x, y, s, 3, start=-90 + turn))
                else:
                    # Superellipse, n = 4
                    points = []
                    for j in range(32):
                        t = j / 32 * math.pi * 2
                        c, n = math.cos(t), math.sin(t)
                        points.append((x + math.copysign(abs(c) ** 0.5, c) * s,
                                       y + math.copysign(abs(n) ** 0.5, n) * s))
                    self.svg.polygon(points)

        if style in ('venn', 'celtic'):
            self.svg.circle(CX, CY, stroke_width * 1.5, fill=self.accent)

    def _monogram_merge(self):
        """Two initials fused by overlap, a bridge or a shared stroke"""
        first = self.letter
        second = second_initial_of(self.brand_name, default=first)
        merge = self._pick('overlapping', 'connected', 'shared-stroke', 'intertwined', 'stacked')
        arrangement = self._pick('side-by-side', 'stacked', 'nested', 'diagonal', 'rotated')
        weight = FONT_WEIGHTS[self._pick(*FONT_WEIGHTS)]
        finish = self._pick('classic', 'modern', 'decorative', 'minimal')

        size = SIZE * 0.5
        x1 = y1 = x2 = y2 = CX
        turn1 = turn2 = 0
        if arrangement == 'side-by-side':
            x1, x2 = CX - size * 0.25, CX + size * 0.25
        elif arrangement == 'stacked':
            y1, y2 = CY - size * 0.25, CY + size * 0.25
        elif arrangement == 'nested':
            x2, y2 = CX + size * 0.1, CY + size * 0.05
        elif arrangement == 'diagonal':
            x1, y1, x2, y2 = CX - size * 0.2, CY - size * 0.15, CX + size * 0.2, CY + size * 0.15
        else:
            turn1, turn2 = -15, 15
            x1, x2 = CX - size * 0.15, CX + size * 0.15

        overlap = {'overlapping': 0.3, 'connected': 0.15, 'shared-stroke': 0.25,
                   'intertwined': 0.35}.get(merge, 0.1)
        if arrangement == 'side-by-side':
            x1 += size * overlap * 0.3
            x2 -= size * overlap * 0.3

        def letter(char, x, y, turn, font_size=size, fill=self.color, **attrs):
            self._letter_text(char, x, y + size * 0.35, font_size, weight, fill=fill,
                              transform=rotate(turn, x, y), **attrs)

        if merge == 'shared-stroke':
            w = size * 0.15
            for offset in (-0.3, 0.0, 0.3):
                x = CX + size * offset
                self.svg.line(x, CY - size * 0.3, x, CY + size * 0.3, stroke=self.color,
                              stroke_width=w, stroke_linecap='round')
            self.svg.line(CX - size * 0.3, CY - size * 0.1, CX, CY - size * 0.1, stroke=self.accent,
                          stroke_width=w * 0.8, stroke_linecap='round')
            self.svg.line(CX, CY + size * 0.1, CX + size * 0.3, CY + size * 0.1, stroke=self.accent,
                          stroke_width=w * 0.8, stroke_linecap='round')
        elif merge == 'intertwined':
            with self.svg.define_mask(f'weave-{self.tag}') as mask:
                self.svg.rect(0, 0, SIZE, SIZE, fill='#ffffff')
                self.svg.rect(CX - 5, CY - size * 0.15, 10, size * 0.3, fill='#000000')
            letter(first, x1, y1, 0, mask=mask)
            letter(second, x2, y2, 0, fill=self.accent)
        elif merge == 'connected':
            letter(first, x1, y1, turn1)
            self.svg.line(x1 + size * 0.2, CY, x2 - size * 0.2, CY, stroke=self.accent,
                          stroke_width=3, stroke_linecap='round')
            letter(second, x2, y2, turn2)
        elif merge == 'overlapping':
            letter(first, x1, y1, turn1, opacity=0.8)
            letter(second, x2, y2, turn2, fill=self.accent, opacity=0.8)
        else:
            letter(first, x1, y1, turn1)
            letter(second, x2, y2, turn2, font_size=size * 0.8, fill=self.accent, opacity=0.7)

        if finish == 'decorative':
            self.svg.circle(CX, CY + size * 0.5, 3, fill=self.accent)
        elif finish == 'classic':
            self.svg.line(CX - size * 0.4, CY + size * 0.5, CX + size * 0.4, CY + size * 0.5,
                          stroke=self.color, stroke_width=1.5)

    def _continuous_stroke(self):
        """One unbroken line traced through seeded control points"""
        stroke_width = 3 + self._range(0, 0.3) * 8
        organic = self._range(0, 1)
        margin = 15
        count = 4 + self.rng.randint(0, 3)
        strategy = self._pick('spiral', 'zigzag', 'wave', 'converging', 'organic')

        points = []
        for i in range(count):
            t = i / (count - 1)
            if strategy == 'spiral':
                radius = (SIZE - 2 * margin) / 2 * (1 - i / count * 0.5)
                points.append(polar(CX, CY, radius, i / count * 450))
            elif strategy == 'zigzag':
                y = margin + self.rng.random() * 20 if i % 2 == 0 else SIZE - margin - self.rng.random() * 20
                points.append((margin + t * (SIZE - 2 * margin), y))
            elif strategy == 'wave':
                y = CY + math.sin(t * math.pi * 2 + self.rng.random()) * (SIZE / 3 - margin)
                points.append((margin + t * (SIZE - 2 * margin), y))
            elif strategy == 'converging':
                points.append(polar(CX, CY, 20 + self.rng.random() * 25, self.rng.random() * 360))
            else:
                points.append((margin + self.rng.random() * (SIZE - 2 * margin),
                               margin + self.rng.random() * (SIZE - 2 * margin)))

        d = PathData().move_to(*points[0])
        for i in range(1, len(points)):
            (px, py), (x, y) = points[i - 1], points[i]
            if organic > 0.5:
                nx, ny = points[i + 1] if i + 1 < len(points) else points[i]
                d.curve_to(px + (x - px) * 0.5, py + (y - py) * 0.5,
                           x - (nx - px) * 0.2, y - (ny - py) * 0.2, x, y)
            else:
                d.quad_to((px + x) / 2 + (self.rng.random() - 0.5) * 20,
                          (py + y) / 2 + (self.rng.random() - 0.5) * 20, x, y)
        if self.rng.random() > 0.6:
            d.close()

        cap = 'round' if self.rng.random() > 0.5 else 'square'
        self.svg.path(d, stroke=self.color, stroke_width=stroke_width, stroke_linecap=cap,
                      stroke_linejoin='round')
        # Terminals
        self.svg.circle(*points[0], stroke_width * 0.9, fill=self.accent)
        self.svg.circle(*points[-1], stroke_width * 0.9, fill=self.accent)

    def _geometric_extract(self):
        """Oversized initial cropped by a geometric window"""
        shape = self._pick('circle', 'square', 'hexagon', 'diamond')
        weight = FONT_WEIGHTS[self._pick(*FONT_WEIGHTS)]
        turn = (self.rng.random() - 0.5) * 30
        dx = (self.rng.random() - 0.5) * 20
        dy = (self.rng.random() - 0.5) * 20

        r = SIZE * 0.4
        letter_size = SIZE * 1.2
        with self.svg.define_clip_path(f'crop-{self.tag}') as clip:
            self._container(shape, CX, CY, r)

        self._container(shape, CX, CY, r + 3, stroke=self.accent, stroke_width=2)
        with self.svg.group(clip_path=clip):
            self._letter_text(self.letter, CX + dx, CY + letter_size * 0.35 + dy, letter_size,
                              weight, fill=self.color, transform=rotate(turn))

    def _clover_radial(self):
        """Petals repeated around the center"""
        petal_count = self.rng.randint(3, 8)
        shape = self._pick('circle', 'ellipse', 'teardrop', 'diamond', 'leaf', 'heart', 'pointed')
        size_variation = self._range(0, 0.5)
        start = self._range(0, 60)
        center = self._pick('none', 'circle', 'dot', 'hole', 'ring', 'star')
        spacing = self._range(0.8, 1.5)

        base = SIZE * 0.18
        distance = base * spacing
        center_size = SIZE * 0.08

        def petals():
            for i in range(petal_count):
                angle = i * 360 / petal_count + start
                x, y = polar(CX, CY, distance, angle)
                s = base * (1 + (self.rng.random() - 0.5) * size_variation * 2)
                attrs = {'fill': self.color, 'opacity': 0.85, 'transform': rotate(angle + 90, x, y)}

                if shape == 'circle':
                    self.svg.circle(x, y, s, fill=self.color, opacity=0.85)
                elif shape == 'ellipse':
                    self.svg.ellipse(x, y, s, s * 0.6, **attrs)
                elif shape == 'diamond':
                    self.svg.polygon([(x, y - s), (x + s * 0.6, y), (x, y + s), (x - s * 0.6, y)], **attrs)
                elif shape == 'teardrop':
                    d = (PathData()
                         .move_to(x, y - s)
                         .quad_to(x + s * 0.8, y - s * 0.3, x + s * 0.5, y + s * 0.5)
                         .quad_to(x, y + s, x - s * 0.5, y + s * 0.5)
                         .quad_to(x - s * 0.8, y - s * 0.3, x, y - s))
                    self.svg.path(d, **attrs)
                elif shape == 'leaf':
                    d = (PathData()
                         .move_to(x, y - s)
                         .curve_to(x + s, y - s * 0.5, x + s, y + s * 0.5, x, y + s)
                         .curve_to(x - s, y + s * 0.5, x - s, y - s * 0.5, x, y - s))
                    self.svg.path(d, **attrs)
                elif shape == 'heart':
                    h = s * 0.6
                    d = (PathData()
                         .move_to(x, y + h)
                         .curve_to(x - h * 2, y, x - h * 1.5, y - h * 1.5, x, y - h * 0.5)
                         .curve_to(x + h * 1.5, y - h * 1.5, x + h * 2, y, x, y + h))
                    self.svg.path(d, **attrs)
                else:
                    d = (PathData()
                         .move_to(x, y - s * 1.3)
                         .line_to(x + s * 0.4, y + s * 0.5)
                         .quad_to(x, y + s, x - s * 0.4, y + s * 0.5)
                         .close())
                    self.svg.path(d, **attrs)

        if center == 'hole':
            with self.svg.define_mask(f'hole-{self.tag}') as mask:
                self.svg.rect(0, 0, SIZE, SIZE, fill='#ffffff')
                self.svg.circle(CX, CY, center_size, fill='#000000')
            with self.svg.group(mask=mask):
                petals()
            self.svg.circle(CX, CY, center_size, stroke=self.accent, stroke_width=2)
            return

        with self.svg.group():
            petals()
            if center == 'circle':
                self.svg.circle(CX, CY, center_size, fill=self.accent)
            elif center == 'dot':
                self.svg.circle(CX, CY, center_size * 0.5, fill=self.accent)
            elif center == 'ring':
                self.svg.circle(CX, CY, center_size, stroke=self.accent, stroke_width=3)
            elif center == 'star':
                self.svg.polygon(star_points(CX, CY, center_size, center_size * 0.4), fill=self.accent)


def generate_fixed(algorithm, mark_input):
    """Render a brand/color driven mark"""
    return FixedMarks(mark_input).render(Algorithm.parse(algorithm))
