"""
Quality Scorer
==============
Deterministic structural scoring of generated marks.

The score is a weighted blend of five subscores, each 0-100:

    complexity       element count inside the ideal band [3, 25]
    geometry         share of drawable elements that are not degenerate
    conformance      viewBox, namespace, root fill and self-containment
    balance          centroid of emitted coordinates versus the center
    distinctiveness  parameter-driven legibility heuristics

Unparseable documents score 0 rather than raising.
"""

import logging
import math
import re
import xml.etree.ElementTree as ET
from collections import namedtuple

from svgpathtools import Line, parse_path

from color_utils import hex_to_rgb
from models import QualityReport
from settings import CENTER, VIEWBOX

logger = logging.getLogger(__name__)

SVG_NS = 'http://www.w3.org/2000/svg'
IDEAL_ELEMENT_RANGE = (3, 25)

WEIGHTS = {
    'complexity': 0.30,
    'geometry': 0.25,
    'conformance': 0.15,
    'balance': 0.15,
    'distinctiveness': 0.15,
}

DRAWABLE_TAGS = {'path', 'rect', 'circle', 'ellipse', 'line', 'polygon', 'polyline', 'text'}
CURVE_COMMANDS = set('CcSsQqTtAa')

_NUMBER = re.compile(r'-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')
_COMMAND = re.compile(r'[MmLlHhVvCcSsQqTtAaZz]')
_URL = re.compile(r'url\(\s*([^)]*)\)')

SvgFeatures = namedtuple('SvgFeatures', [
    'element_count', 'text_count', 'degenerate_count', 'stroke_widths', 'colors', 'points',
])


def _local(tag):
    return tag.rsplit('}', 1)[-1]


def _float(element, name, default=0.0):
    try:
        return float(element.get(name, default))
    except (TypeError, ValueError):
        return default


def _parse(svg):
    try:
        return ET.fromstring(svg)
    except (ET.ParseError, TypeError) as e:
        logger.debug('Unparseable SVG: %s', e)
        return None


def _pairs(numbers):
    return list(zip(numbers[0::2], numbers[1::2]))


def _path_points(d):
    """Segment endpoints of a path, plus the midpoint of every curve or arc"""
    try:
        segments = list(parse_path(d))
    except (ValueError, IndexError) as e:
        logger.debug('Unparseable path data %r: %s', d, e)
        return []
    points = []
    for segment in segments:
        if isinstance(segment, Line):
            anchors = [segment.start, segment.end]
        else:
            anchors = [segment.start, segment.point(0.5), segment.end]
        for z in anchors:
            point = (round(z.real, 4), round(z.imag, 4))
            if not points or points[-1] != point:
                points.append(point)
    return points


def _polygon_area(points):
    if len(points) < 3:
        return 0.0
    closed = points[1:] + points[:1]
    return abs(sum(x1 * y2 - x2 * y1 for (x1, y1), (x2, y2) in zip(points, closed))) / 2


def _element_points(element, tag):
    """Representative coordinates of one drawable element"""
    if tag in ('circle', 'ellipse'):
        return [(_float(element, 'cx'), _float(element, 'cy'))]
    if tag == 'rect':
        x, y = _float(element, 'x'), _float(element, 'y')
        return [(x + _float(element, 'width') / 2, y + _float(element, 'height') / 2)]
    if tag == 'line':
        return [(_float(element, 'x1'), _float(element, 'y1')), (_float(element, 'x2'), _float(element, 'y2'))]
    if tag in ('polygon', 'polyline'):
        return _pairs([float(n) for n in _NUMBER.findall(element.get('points', ''))])
    if tag == 'path':
        return _path_points(element.get('d', ''))
    if tag == 'text':
        return [(_float(element, 'x'), _float(element, 'y'))]
    return []


def _is_degenerate(element, tag, points):
    if tag == 'rect':
        return _float(element, 'width') <= 0 or _float(element, 'height') <= 0
    if tag == 'circle':
        return _float(element, 'r') <= 0
    if tag == 'ellipse':
        return _float(element, 'rx') <= 0 or _float(element, 'ry') <= 0
    if tag == 'line':
        return (_float(element, 'x1') == _float(element, 'x2')
                and _float(element, 'y1') == _float(element, 'y2'))
    if tag == 'polygon':
        return _polygon_area(points) < 1e-9
    if tag in ('polyline', 'path'):
        return len(set(points)) < 2
    if tag == 'text':
        return not (element.text or '').strip()
    return False


def _walk(element, masked=False):
    """Yield (element, masked) where masked marks mask and clip-path content"""
    yield element, masked
    masked = masked or _local(element.tag) in ('mask', 'clipPath')
    for child in element:
        yield from _walk(child, masked)


def _features(root):
    elements = texts = degenerate = 0
    widths = []
    colors = []
    points = []
    for element, masked in _walk(root):
        # Mask and clip content only shapes visibility
        if masked:
            continue
        tag = _local(element.tag)
        for attr in ('fill', 'stroke', 'stop-color'):
            value = element.get(attr)
            if not value or not value.startswith('#') or value in colors:
                continue
            if hex_to_rgb(value):
                colors.append(value)
        if element.get('stroke-width') is not None:
            widths.append(_float(element, 'stroke-width'))
        if tag not in DRAWABLE_TAGS:
            continue
        elements += 1
        texts += tag == 'text'
        element_points = _element_points(element, tag)
        if _is_degenerate(element, tag, element_points):
            degenerate += 1
        else:
            points.extend(element_points)
    return SvgFeatures(elements, texts, degenerate, widths, colors, points)


def analyze_svg(svg):
    """Structural features of an SVG document, or None if it does not parse"""
    root = _parse(svg)
    if root is None:
        return None
    return _features(root)


# ============================================================================
# Subscores
# ============================================================================

def element_count_score(count, ideal=IDEAL_ELEMENT_RANGE):
    lo, hi = ideal
    if lo <= count <= hi:
        return 100.0
    if count < lo:
        return max(0.0, 100.0 - (lo - count) * 30.0)
    return max(0.0, 100.0 - (count - hi) * 4.0)


def _geometry_score(features):
    if not features.element_count:
        return 0.0
    return 100.0 * (1 - features.degenerate_count / features.element_count)


def _conformance_score(root):
    score = 0.0
    if root.get('viewBox', '').split() == VIEWBOX.split():
        score += 40
    if root.tag == f'{{{SVG_NS}}}svg':
        score += 20
    if root.get('fill') == 'none':
        score += 20

    external = False
    for element in root.iter():
        for key, value in element.attrib.items():
            if _local(key) == 'href' and not value.startswith('#'):
                external = True
            for ref in _URL.findall(value):
                if not ref.strip().strip('\'"').startswith('#'):
                    external = True
    if not external:
        score += 20
    return score


def _balance_score(features, params):
    if not features.points:
        score = 50.0
    else:
        mx = sum(x for x, _ in features.points) / len(features.points)
        my = sum(y for _, y in features.points) / len(features.points)
        score = max(0.0, 100.0 - math.hypot(mx - CENTER, my - CENTER) * 2)
    if params is not None:
        score += {'radial': 10, 'bilateral': 5}.get(params.symmetry_type, 0)
    return min(100.0, score)


def _distinctiveness_score(params):
    if params is None:
        return 80.0
    score = 60.0
    score += 15 if 3 <= params.element_count <= 5 else 5
    score += 15 * (1 - abs(params.curve_tension - 0.5) * 2)
    score += 10 if params.symmetry_type != 'none' else 4
    return min(100.0, score)


# ============================================================================
# Public API
# ============================================================================

def calculate_quality_score(svg, params=None):
    """Score an SVG (and optionally the parameters behind it) from 0 to 100"""
    root = _parse(svg)
    if root is None or _local(root.tag) != 'svg':
        return QualityReport(score=0.0, subscores={name: 0.0 for name in WEIGHTS})

    features = _features(root)
    subscores = {
        'complexity': element_count_score(features.element_count),
        'geometry': _geometry_score(features),
        'conformance': _conformance_score(root),
        'balance': _balance_score(features, params),
        'distinctiveness': _distinctiveness_score(params),
    }
    subscores = {name: round(value, 2) for name, value in subscores.items()}
    score = sum(subscores[name] * weight for name, weight in WEIGHTS.items())
    return QualityReport(score=round(max(0.0, min(100.0, score)), 2), subscores=subscores)


def calculate_complexity(svg):
    """Weighted draw-command count: lines 1, curves and arcs 2, primitives 1"""
    root = _parse(svg)
    if root is None:
        return 0.0
    total = 0.0
    for element, masked in _walk(root):
        if masked:
            continue
        tag = _local(element.tag)
        if tag == 'path':
            for command in _COMMAND.findall(element.get('d', '')):
                total += 2 if command in CURVE_COMMANDS else 1
        elif tag in ('polygon', 'polyline'):
            total += 1 + len(_NUMBER.findall(element.get('points', ''))) / 2 * 0.25
        elif tag in DRAWABLE_TAGS:
            total += 1
    return round(total, 2)


def count_paths(svg):
    """Number of drawable elements in the document"""
    features = analyze_svg(svg)
    return features.element_count if features else 0
