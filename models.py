"""
Latent Marks Data Models
========================
Algorithm identities and the records that flow between the engine stages.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Family(str, Enum):
    FIXED = 'fixed'
    SEED = 'seed'

    def __str__(self):
        return self.value


class Algorithm(str, Enum):
    # Brand/color driven
    LINE_FRAGMENTATION = 'line-fragmentation'
    STAGGERED_BARS = 'staggered-bars'
    BLOCK_ASSEMBLY = 'block-assembly'
    MOTION_CHEVRONS = 'motion-chevrons'
    NEGATIVE_SPACE = 'negative-space'
    INTERLOCKING_LOOPS = 'interlocking-loops'
    MONOGRAM_MERGE = 'monogram-merge'
    CONTINUOUS_STROKE = 'continuous-stroke'
    GEOMETRIC_EXTRACT = 'geometric-extract'
    CLOVER_RADIAL = 'clover-radial'

    # Master seed driven
    LETTER_FUSION = 'letter-fusion'
    INTERLOCKING_GEOMETRY = 'interlocking-geometry'
    NEGATIVE_SPACE_LETTER = 'negative-space-letter'
    MONOGRAM_MERGE_V2 = 'monogram-merge-v2'
    CLOVER_RADIAL_V2 = 'clover-radial-v2'
    SINGLE_STROKE = 'single-stroke'
    LETTER_EXTRACT = 'letter-extract'
    GRADIENT_GLOW = 'gradient-glow'

    def __str__(self):
        return self.value

    @property
    def family(self):
        return Family.SEED if self in SEED_ALGORITHMS else Family.FIXED

    @classmethod
    def parse(cls, value):
        """Accept an Algorithm or its id string; raise ValueError otherwise"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown algorithm: {value!r}') from None


FIXED_ALGORITHMS = (
    Algorithm.LINE_FRAGMENTATION,
    Algorithm.STAGGERED_BARS,
    Algorithm.BLOCK_ASSEMBLY,
    Algorithm.MOTION_CHEVRONS,
    Algorithm.NEGATIVE_SPACE,
    Algorithm.INTERLOCKING_LOOPS,
    Algorithm.MONOGRAM_MERGE,
    Algorithm.CONTINUOUS_STROKE,
    Algorithm.GEOMETRIC_EXTRACT,
    Algorithm.CLOVER_RADIAL,
)

SEED_ALGORITHMS = (
    Algorithm.LETTER_FUSION,
    Algorithm.INTERLOCKING_GEOMETRY,
    Algorithm.NEGATIVE_SPACE_LETTER,
    Algorithm.MONOGRAM_MERGE_V2,
    Algorithm.CLOVER_RADIAL_V2,
    Algorithm.SINGLE_STROKE,
    Algorithm.LETTER_EXTRACT,
    Algorithm.GRADIENT_GLOW,
)


@dataclass(frozen=True)
class FixedInput:
    """Input record for the brand/color driven family.

    `seed_hex` overrides the brand-name hash that geometry is drawn from,
    which lets the orchestrator produce distinct variations.
    """
    brand_name: str
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    seed_hex: Optional[str] = None


@dataclass(frozen=True)
class QualityReport:
    score: float
    subscores: Dict[str, float] = field(default_factory=dict)


@dataclass
class LogoGeometry:
    path_count: int
    complexity: float


@dataclass
class LogoColors:
    primary: str
    accent: Optional[str]
    palette: Dict[str, str] = field(default_factory=dict)


@dataclass
class LogoMeta:
    brand_name: str
    generated_at: str
    seed_hex: str
    geometry: LogoGeometry
    colors: LogoColors


@dataclass
class GeneratedLogo:
    id: str
    hash: str
    algorithm: Algorithm
    variant: int
    svg: str
    view_box: str
    params: Dict[str, Any]
    quality: QualityReport
    meta: LogoMeta
    concept: str = ''

    def to_dict(self):
        """Serialize in the camelCase shape consumed by export collaborators"""
        return {
            'id': self.id,
            'hash': self.hash,
            'algorithm': self.algorithm.value,
            'variant': self.variant,
            'svg': self.svg,
            'viewBox': self.view_box,
            'params': dict(self.params),
            'quality': {
                'score': self.quality.score,
                'subscores': dict(self.quality.subscores),
            },
            'meta': {
                'brandName': self.meta.brand_name,
                'generatedAt': self.meta.generated_at,
                'seedHex': self.meta.seed_hex,
                'geometry': {
                    'pathCount': self.meta.geometry.path_count,
                    'complexity': self.meta.geometry.complexity,
                },
                'colors': asdict(self.meta.colors),
            },
            'concept': self.concept,
        }


@dataclass(frozen=True)
class LedgerEntry:
    hash: str
    brand_name: str
    algorithm: str
    variant: int
    created_at: str
    quality_score: float
