"""
Algorithm Library
=================
Registry of every logo algorithm, keyed by the Algorithm enum.

Fixed-family renderers take a FixedInput; seed-family renderers take a
MasterSeed whose `algorithm` matches. The registry is checked against the
enum at import time so a new member cannot ship without a renderer.
"""

from fixed_marks import generate_fixed
from master_seed import MasterSeed
from models import Algorithm, Family, FixedInput
from seed_marks import generate_from_seed

ALGORITHM_INFO = {
    Algorithm.LINE_FRAGMENTATION: ('Line Fragmentation', 'Dashed parallel lines revealed through a shape mask'),
    Algorithm.STAGGERED_BARS: ('Staggered Bars', 'Rhythmic bars forming an ascending, wave or stepped profile'),
    Algorithm.BLOCK_ASSEMBLY: ('Block Assembly', 'Solid blocks with offset shadows suggesting depth'),
    Algorithm.MOTION_CHEVRONS: ('Motion Chevrons', 'Nested chevrons implying direction and speed'),
    Algorithm.NEGATIVE_SPACE: ('Negative Space', 'Initial set inside or cut out of a container shape'),
    Algorithm.INTERLOCKING_LOOPS: ('Interlocking Loops', 'Outline loops woven as rings, chains or knots'),
    Algorithm.MONOGRAM_MERGE: ('Monogram Merge', 'Two initials joined by overlap or a bridge'),
    Algorithm.CONTINUOUS_STROKE: ('Continuous Stroke', 'A single unbroken line through seeded points'),
    Algorithm.GEOMETRIC_EXTRACT: ('Geometric Extract', 'Oversized initial cropped by a geometric window'),
    Algorithm.CLOVER_RADIAL: ('Clover Radial', 'Petals repeated in rotational symmetry'),
    Algorithm.LETTER_FUSION: ('Letter Fusion', 'Initial skeleton fused with a concept shape'),
    Algorithm.INTERLOCKING_GEOMETRY: ('Interlocking Geometry', 'Three or more shapes weaving around the center'),
    Algorithm.NEGATIVE_SPACE_LETTER: ('Negative Space Letter', 'Solid tile whose cutouts suggest the initial'),
    Algorithm.MONOGRAM_MERGE_V2: ('Monogram Merge', 'Two initials sharing a central stroke'),
    Algorithm.CLOVER_RADIAL_V2: ('Clover Radial', 'Petals in three to six fold symmetry'),
    Algorithm.SINGLE_STROKE: ('Single Stroke', 'Continuous line mark inspired by the initial'),
    Algorithm.LETTER_EXTRACT: ('Letter Extract', 'One anatomical part of the initial, enlarged'),
    Algorithm.GRADIENT_GLOW: ('Gradient Glow', 'Gradient form with a blurred halo and highlight'),
}


def _fixed_renderer(algorithm):
    def render(mark_input):
        if not isinstance(mark_input, FixedInput):
            raise TypeError(f'{algorithm} expects a FixedInput, got {type(mark_input).__name__}')
        return generate_fixed(algorithm, mark_input)
    return render


def _seed_renderer(algorithm):
    def render(seed):
        if not isinstance(seed, MasterSeed):
            raise TypeError(f'{algorithm} expects a MasterSeed, got {type(seed).__name__}')
        if seed.algorithm is not algorithm:
            raise ValueError(f'Seed was derived for {seed.algorithm}, not {algorithm}')
        return generate_from_seed(seed)
    return render


RENDERERS = {
    algorithm: (_fixed_renderer(algorithm) if algorithm.family is Family.FIXED
                else _seed_renderer(algorithm))
    for algorithm in ALGORITHM_INFO
}

_missing = set(Algorithm) - set(RENDERERS)
if _missing:
    raise RuntimeError(f'No renderer registered for: {sorted(a.value for a in _missing)}')


def generate(algorithm, mark_input):
    """Render `algorithm` for its family's input record and return the SVG"""
    return RENDERERS[Algorithm.parse(algorithm)](mark_input)


def algorithm_info(algorithm):
    algorithm = Algorithm.parse(algorithm)
    name, description = ALGORITHM_INFO[algorithm]
    return {
        'id': algorithm.value,
        'name': name,
        'description': description,
        'family': algorithm.family.value,
    }


def concept_description(algorithm, params=None):
    """One-line human description of a generated mark"""
    algorithm = Algorithm.parse(algorithm)
    if params is None:
        return ALGORITHM_INFO[algorithm][1]

    descriptions = {
        Algorithm.LETTER_FUSION:
            f'Initial letterform fused with a {params.concept_shape}, {params.letter_weight} strokes',
        Algorithm.INTERLOCKING_GEOMETRY:
            f'{max(3, params.element_count)} geometric shapes interlocking at '
            f'{round(params.interlock_depth)}% depth',
        Algorithm.NEGATIVE_SPACE_LETTER:
            f'Letter revealed through strategic cutouts, {params.symmetry_type} symmetry',
        Algorithm.MONOGRAM_MERGE_V2:
            f'Two letters sharing strokes, {params.letter_weight} weight',
        Algorithm.CLOVER_RADIAL_V2:
            f'{params.petal_shape.capitalize()} petals with {params.symmetry_type} symmetry',
        Algorithm.SINGLE_STROKE:
            f'Continuous line mark, {round(params.curve_tension * 100)}% curve tension',
        Algorithm.LETTER_EXTRACT:
            f'Stylized {params.letter_part} extraction, {round(params.corner_radius)}% corner radius',
        Algorithm.GRADIENT_GLOW:
            f'Shape with inner luminosity, {params.gradient_type} gradient at '
            f'{round(params.gradient_angle)} degrees',
    }
    return descriptions.get(algorithm, ALGORITHM_INFO[algorithm][1])
