"""
Master Seed
===========
Deterministic hashing of (brand, algorithm, salt) and derivation of the
seed parameter vector that drives every seed-family algorithm.

The parameter material is the 32 hash bytes followed by the SHA-256 of
those bytes, giving 64 bytes. Each parameter reads its own disjoint byte
slice and maps it into a documented domain, so the whole derivation is
the single table `PARAM_SPECS`.
"""

import hashlib
import logging
import random
import secrets
import string
from dataclasses import asdict, dataclass, fields

from models import Algorithm

logger = logging.getLogger(__name__)

HASH_HEX_LENGTH = 64
MATERIAL_BYTES = 64


class SeedDerivationError(ValueError):
    """Raised when a hash cannot be turned into seed material"""


# ============================================================================
# Domains
# ============================================================================

class Span:
    """Closed float interval [lo, hi]"""

    def __init__(self, lo, hi):
        self.lo = lo
        self.hi = hi

    def map(self, value, max_value):
        x = self.lo + value / max_value * (self.hi - self.lo)
        return min(self.hi, max(self.lo, round(x, 4)))

    def contains(self, x):
        return isinstance(x, float) and self.lo <= x <= self.hi

    def __repr__(self):
        return f'[{self.lo}, {self.hi}]'


class Turn(Span):
    """Half-open float interval [lo, hi), used for angles"""

    def map(self, value, max_value):
        x = round(self.lo + value / (max_value + 1) * (self.hi - self.lo), 4)
        return x if x < self.hi else self.lo

    def contains(self, x):
        return isinstance(x, float) and self.lo <= x < self.hi

    def __repr__(self):
        return f'[{self.lo}, {self.hi})'


class Whole:
    """Closed integer interval"""

    def __init__(self, lo, hi):
        self.lo = lo
        self.hi = hi

    def map(self, value, max_value):
        return self.lo + value % (self.hi - self.lo + 1)

    def contains(self, x):
        return isinstance(x, int) and self.lo <= x <= self.hi

    def __repr__(self):
        return f'{{{self.lo}..{self.hi}}}'


class Pick:
    """One of a fixed set of labels"""

    def __init__(self, *options):
        self.options = options

    def map(self, value, max_value):
        return self.options[value % len(self.options)]

    def contains(self, x):
        return x in self.options

    def __repr__(self):
        return '|'.join(self.options)


@dataclass(frozen=True)
class ParamSpec:
    name: str
    byte_range: tuple
    domain: object

    @property
    def map_fn(self):
        return self.domain.map

    def in_domain(self, value):
        return self.domain.contains(value)


def _spec(name, offset, domain, width=1):
    return ParamSpec(name, (offset, offset + width), domain)


# ============================================================================
# Parameter table
# ============================================================================

PARAM_SPECS = (
    # Stroke
    _spec('stroke_width', 0, Span(2.0, 8.0)),
    _spec('stroke_taper', 1, Span(0.0, 100.0)),
    _spec('stroke_cap', 2, Pick('round', 'square', 'butt')),
    _spec('stroke_join', 3, Pick('round', 'bevel', 'miter')),
    _spec('stroke_dash_ratio', 4, Span(0.0, 1.0)),

    # Shape
    _spec('rotation', 5, Turn(0.0, 360.0), width=2),
    _spec('curve_tension', 7, Span(0.0, 1.0)),
    _spec('corner_radius', 8, Span(0.0, 50.0)),
    _spec('element_count', 9, Whole(2, 6)),
    _spec('spacing_ratio', 10, Span(0.5, 2.0)),
    _spec('scale_variance', 11, Span(0.8, 1.2)),
    _spec('symmetry_type', 12, Pick('radial', 'bilateral', 'none')),
    _spec('aspect_ratio', 13, Span(0.5, 2.0)),
    _spec('shape_complexity', 14, Whole(1, 5)),
    _spec('edge_softness', 15, Span(0.0, 1.0)),

    # Fill
    _spec('fill_opacity', 16, Span(0.3, 1.0)),
    _spec('gradient_angle', 17, Turn(0.0, 360.0), width=2),
    _spec('gradient_type', 19, Pick('linear', 'radial')),
    _spec('gradient_stops', 20, Whole(2, 5)),
    _spec('gradient_spread', 21, Span(0.3, 1.0)),

    # Letterform
    _spec('letter_part', 22, Pick('apex', 'bowl', 'crossbar', 'stem', 'terminal')),
    _spec('cutout_position', 23, Whole(0, 11)),
    _spec('interlock_depth', 24, Span(10.0, 90.0)),
    _spec('letter_weight', 25, Pick('light', 'regular', 'bold', 'heavy')),

    # Layout
    _spec('offset_x', 26, Span(-20.0, 20.0)),
    _spec('offset_y', 27, Span(-20.0, 20.0)),
    _spec('layer_count', 28, Whole(1, 4)),
    _spec('layer_spacing', 29, Span(0.5, 2.0)),
    _spec('overlap_amount', 30, Span(0.0, 50.0)),
    _spec('alignment_bias', 31, Span(-1.0, 1.0)),

    # Extended material
    _spec('margin_ratio', 32, Span(0.05, 0.2)),
    _spec('concept_shape', 33, Pick('leaf', 'arrow', 'wave', 'circle', 'diamond', 'drop')),
    _spec('petal_shape', 34, Pick('circle', 'rounded', 'teardrop', 'leaf')),
    _spec('center_element', 35, Pick('none', 'dot', 'ring', 'square')),
    _spec('stroke_contrast', 36, Span(0.0, 1.0)),
    _spec('accent_placement', 37, Pick('none', 'start', 'end', 'both')),
    _spec('counter_ratio', 38, Span(0.2, 0.6)),
    _spec('inner_radius_ratio', 39, Span(0.3, 0.8)),
    _spec('skew_angle', 40, Span(-15.0, 15.0)),
    _spec('wave_amplitude', 41, Span(0.0, 1.0)),
    _spec('wave_frequency', 42, Whole(1, 4)),
    _spec('highlight_opacity', 43, Span(0.15, 0.45)),
    _spec('glow_spread', 44, Span(1.0, 1.3)),
    _spec('mirror_axis', 45, Pick('vertical', 'horizontal', 'diagonal')),
    _spec('secondary_scale', 46, Span(0.4, 0.9)),
    _spec('baseline_shift', 47, Span(-10.0, 10.0)),
    _spec('gap_ratio', 48, Span(0.1, 0.5)),
    _spec('terminal_style', 49, Pick('flat', 'round', 'angled')),
    _spec('ornament_count', 50, Whole(0, 3)),
    _spec('depth_offset', 51, Span(0.0, 6.0)),
)


@dataclass(frozen=True)
class SeedParameters:
    stroke_width: float
    stroke_taper: float
    stroke_cap: str
    stroke_join: str
    stroke_dash_ratio: float
    rotation: float
    curve_tension: float
    corner_radius: float
    element_count: int
    spacing_ratio: float
    scale_variance: float
    symmetry_type: str
    aspect_ratio: float
    shape_complexity: int
    edge_softness: float
    fill_opacity: float
    gradient_angle: float
    gradient_type: str
    gradient_stops: int
    gradient_spread: float
    letter_part: str
    cutout_position: int
    interlock_depth: float
    letter_weight: str
    offset_x: float
    offset_y: float
    layer_count: int
    layer_spacing: float
    overlap_amount: float
    alignment_bias: float
    margin_ratio: float
    concept_shape: str
    petal_shape: str
    center_element: str
    stroke_contrast: float
    accent_placement: str
    counter_ratio: float
    inner_radius_ratio: float
    skew_angle: float
    wave_amplitude: float
    wave_frequency: int
    highlight_opacity: float
    glow_spread: float
    mirror_axis: str
    secondary_scale: float
    baseline_shift: float
    gap_ratio: float
    terminal_style: str
    ornament_count: int
    depth_offset: float

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class MasterSeed:
    brand_name: str
    algorithm: Algorithm
    salt: str
    hash_hex: str
    params: SeedParameters


def _check_table():
    names = [spec.name for spec in PARAM_SPECS]
    if names != [f.name for f in fields(SeedParameters)]:
        raise RuntimeError('PARAM_SPECS and SeedParameters are out of sync')
    taken = set()
    for spec in PARAM_SPECS:
        start, stop = spec.byte_range
        span = set(range(start, stop))
        if span & taken or stop > MATERIAL_BYTES:
            raise RuntimeError(f'Byte range of {spec.name} overlaps or overflows')
        taken |= span


_check_table()


# ============================================================================
# Derivation
# ============================================================================

def _validate_hash(hash_hex):
    if (not isinstance(hash_hex, str)
            or len(hash_hex) != HASH_HEX_LENGTH
            or any(c not in string.hexdigits for c in hash_hex)):
        logger.error('Cannot derive seed material from %r', hash_hex)
        raise SeedDerivationError(f'Expected {HASH_HEX_LENGTH} hex characters, got {hash_hex!r}')


def derive_seed(brand_name, algorithm, salt):
    """SHA-256 hex digest of 'brand|algorithm|salt'"""
    key = f'{brand_name}|{algorithm}|{salt}'
    return hashlib.sha256(key.encode('utf-8')).hexdigest()


def hash_material(hash_hex):
    """The 64 bytes parameter slices are read from"""
    _validate_hash(hash_hex)
    raw = bytes.fromhex(hash_hex)
    return raw + hashlib.sha256(raw).digest()


def derive_params_from_hash(hash_hex):
    """Map every PARAM_SPECS slice of the hash into its domain"""
    material = hash_material(hash_hex)
    values = {}
    for spec in PARAM_SPECS:
        start, stop = spec.byte_range
        chunk = material[start:stop]
        max_value = 256 ** len(chunk) - 1
        values[spec.name] = spec.map_fn(int.from_bytes(chunk, 'big'), max_value)
    return SeedParameters(**values)


def create_seeded_random(hash_hex):
    """Mersenne Twister stream seeded from the hash; `.random()` draws in [0, 1)"""
    _validate_hash(hash_hex)
    return random.Random(int(hash_hex, 16))


def brand_hash(brand_name):
    """Hash of the lower-cased brand name, used when no salt is involved"""
    return hashlib.sha256((brand_name or '').lower().encode('utf-8')).hexdigest()


def generate_salt():
    return secrets.token_hex(16)


def build_master_seed(brand_name, algorithm, salt):
    algorithm = Algorithm.parse(algorithm)
    hash_hex = derive_seed(brand_name, algorithm, salt)
    return MasterSeed(
        brand_name=brand_name,
        algorithm=algorithm,
        salt=salt,
        hash_hex=hash_hex,
        params=derive_params_from_hash(hash_hex),
    )
