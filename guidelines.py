"""
Brand Guidelines
================
Derives usage guidelines from a generated logo: clear space, minimum sizes,
color variations, usage rules, typography pairings and application
examples, plus Markdown and JSON exports.
"""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from color_utils import DARK_BASE, LIGHT_BASE, hex_to_rgb, shade, tint
from models import Algorithm
from quality import analyze_svg

GUIDELINES_VERSION = '1.0'
FALLBACK_PRIMARY = '#333333'


@dataclass
class ClearSpaceRule:
    description: str
    multiplier: float
    reference: str


@dataclass
class MinimumSizeRule:
    print_mm: int
    digital_px: int
    favicon_px: int
    description: str


@dataclass
class ColorVariation:
    name: str
    description: str
    usage: str
    primary: str
    background: str
    secondary: Optional[str] = None


@dataclass
class UsageRule:
    type: str
    title: str
    description: str
    severity: str


@dataclass
class TypographySuggestion:
    font_family: str
    category: str
    weight: str
    pairing: str
    description: str
    url: Optional[str] = None


@dataclass
class ApplicationExample:
    name: str
    description: str
    width: int
    height: int
    x: int
    y: int
    scale: float
    mockup_type: str


@dataclass
class BrandGuidelines:
    version: str
    generated_at: str
    brand_name: str
    logo_description: str
    algorithm_used: str
    clear_space: ClearSpaceRule
    minimum_size: MinimumSizeRule
    color_variations: List[ColorVariation]
    usage_rules: List[UsageRule]
    typography: List[TypographySuggestion]
    applications: List[ApplicationExample]
    primary_colors: List[str] = field(default_factory=list)
    supporting_colors: List[str] = field(default_factory=list)


# ============================================================================
# Lookup tables
# ============================================================================

DIRECTIONAL_ALGORITHMS = {
    Algorithm.MOTION_CHEVRONS, Algorithm.STAGGERED_BARS,
    Algorithm.LINE_FRAGMENTATION, Algorithm.SINGLE_STROKE,
}

CONTRAST_ALGORITHMS = {
    Algorithm.NEGATIVE_SPACE, Algorithm.NEGATIVE_SPACE_LETTER,
    Algorithm.MONOGRAM_MERGE, Algorithm.MONOGRAM_MERGE_V2,
}

UNIVERSAL_RULES = [
    ('do', 'Maintain proportions',
     'Always scale the logo proportionally. Never stretch or compress.', 'critical'),
    ('do', 'Use approved color variations',
     'Only use the color variations specified in these guidelines.', 'critical'),
    ('do', 'Respect clear space',
     'Always maintain the minimum clear space around the logo.', 'important'),
    ('dont', 'Do not rotate',
     'Never rotate or tilt the logo at an angle.', 'critical'),
    ('dont', 'Do not add effects',
     'Never add drop shadows, gradients, or other effects not specified in the guidelines.', 'important'),
    ('dont', 'Do not alter colors',
     'Never change the logo colors outside of approved variations.', 'critical'),
    ('dont', 'Do not place on busy backgrounds',
     'Avoid placing the logo on complex patterns or photographs without sufficient contrast.', 'important'),
    ('dont', 'Do not crop or mask',
     'Always show the complete logo. Never crop or partially mask any element.', 'critical'),
]


def _font(family, category, weight, pairing, description):
    url = 'https://fonts.google.com/specimen/' + family.replace(' ', '+')
    return TypographySuggestion(family, category, weight, pairing, description, url)


TYPOGRAPHY = {
    'modern-tech': [
        _font('Inter', 'sans-serif', '400, 500, 600', 'primary',
              'Clean, modern sans-serif for digital interfaces'),
        _font('Space Grotesk', 'sans-serif', '400, 500, 700', 'secondary',
              'Geometric sans-serif with distinctive character'),
    ],
    'elegant': [
        _font('Playfair Display', 'serif', '400, 500, 600', 'primary',
              'Elegant serif with high contrast for headlines'),
        _font('Lato', 'sans-serif', '300, 400, 700', 'secondary', 'Humanist sans-serif for body text'),
    ],
    'bold': [
        _font('Montserrat', 'sans-serif', '500, 600, 800', 'primary',
              'Bold geometric sans-serif with strong presence'),
        _font('Open Sans', 'sans-serif', '400, 600', 'secondary', 'Neutral sans-serif for supporting text'),
    ],
    'minimal': [
        _font('DM Sans', 'sans-serif', '400, 500', 'primary', 'Clean geometric sans with subtle quirks'),
        _font('IBM Plex Sans', 'sans-serif', '300, 400, 500', 'secondary', 'Corporate yet friendly sans-serif'),
    ],
    'playful': [
        _font('Nunito', 'sans-serif', '400, 600, 700', 'primary', 'Rounded sans-serif with friendly appearance'),
        _font('Quicksand', 'sans-serif', '400, 500, 600', 'secondary',
              'Geometric rounded sans with playful energy'),
    ],
    'default': [
        _font('Poppins', 'sans-serif', '400, 500, 600', 'primary', 'Versatile geometric sans-serif'),
        _font('Source Sans Pro', 'sans-serif', '400, 600', 'secondary',
              'Professional and readable for all contexts'),
    ],
}

ALGORITHM_STYLES = {
    Algorithm.LINE_FRAGMENTATION: 'modern-tech',
    Algorithm.STAGGERED_BARS: 'modern-tech',
    Algorithm.BLOCK_ASSEMBLY: 'bold',
    Algorithm.MOTION_CHEVRONS: 'bold',
    Algorithm.NEGATIVE_SPACE: 'minimal',
    Algorithm.INTERLOCKING_LOOPS: 'elegant',
    Algorithm.MONOGRAM_MERGE: 'elegant',
    Algorithm.CONTINUOUS_STROKE: 'minimal',
    Algorithm.GEOMETRIC_EXTRACT: 'minimal',
    Algorithm.CLOVER_RADIAL: 'playful',
    Algorithm.LETTER_FUSION: 'bold',
    Algorithm.INTERLOCKING_GEOMETRY: 'modern-tech',
    Algorithm.NEGATIVE_SPACE_LETTER: 'minimal',
    Algorithm.MONOGRAM_MERGE_V2: 'elegant',
    Algorithm.CLOVER_RADIAL_V2: 'playful',
    Algorithm.SINGLE_STROKE: 'minimal',
    Algorithm.LETTER_EXTRACT: 'bold',
    Algorithm.GRADIENT_GLOW: 'modern-tech',
}

PERSONALITY_STYLES = {
    'professional': 'minimal',
    'playful': 'playful',
    'bold': 'bold',
    'elegant': 'elegant',
    'minimal': 'minimal',
    'innovative': 'modern-tech',
}

LOGO_DESCRIPTIONS = {
    Algorithm.LINE_FRAGMENTATION: 'A modern mark composed of fragmented parallel lines, creating a dynamic '
                                  'sense of movement and digital innovation.',
    Algorithm.STAGGERED_BARS: 'A bold design of rhythmically arranged bars, suggesting data, growth '
                              'and technological precision.',
    Algorithm.BLOCK_ASSEMBLY: 'An architectural composition of overlapping blocks with depth, conveying '
                              'structure and dimensionality.',
    Algorithm.MOTION_CHEVRONS: 'Stacked chevrons creating a sense of forward momentum, suited to '
                               'growth-oriented brands.',
    Algorithm.NEGATIVE_SPACE: 'Negative space within a solid form reveals the lettermark.',
    Algorithm.INTERLOCKING_LOOPS: 'Interweaving shapes that symbolize connection and collaboration.',
    Algorithm.MONOGRAM_MERGE: 'A refined fusion of letterforms into a single cohesive mark.',
    Algorithm.CONTINUOUS_STROKE: 'A fluid, unbroken line forming an abstract symbol of continuity.',
    Algorithm.GEOMETRIC_EXTRACT: 'A geometric abstraction derived from the brand initial.',
    Algorithm.CLOVER_RADIAL: 'A symmetrical radial design with organic curves, suggesting balance '
                             'and natural growth.',
}

DEFAULT_DESCRIPTION = 'A unique visual identity designed to represent the brand with clarity and distinction.'

APPLICATIONS = [
    ('Business Card', 'Standard business card placement', 85, 55, 10, 10, 0.3, 'business-card'),
    ('Letterhead', 'Corporate letterhead header', 210, 297, 20, 20, 0.15, 'letterhead'),
    ('Website Header', 'Desktop website header', 1440, 80, 40, 20, 0.5, 'website'),
    ('Social Media Profile', 'Profile picture for social platforms', 400, 400, 100, 100, 0.5, 'social'),
    ('Signage', 'Large format exterior signage', 2000, 600, 800, 150, 0.25, 'signage'),
    ('Merchandise', 'T-shirt or merchandise placement', 300, 400, 100, 80, 0.4, 'merchandise'),
]


# ============================================================================
# Sections
# ============================================================================

def clear_space_rule(path_count, has_text):
    multiplier = 0.25 if path_count > 10 else 0.2 if path_count > 5 else 0.15
    reference = 'x-height' if has_text else 'height'
    return ClearSpaceRule(
        description=f'Maintain a minimum clear space of {round(multiplier * 100)}% of the logo '
                    f'{reference} on all sides.',
        multiplier=multiplier,
        reference=reference,
    )


def minimum_size_rule(path_count, fine_strokes):
    print_mm = 25 if fine_strokes else 20 if path_count > 8 else 15
    digital_px = 80 if fine_strokes else 60 if path_count > 8 else 40
    return MinimumSizeRule(
        print_mm=print_mm,
        digital_px=digital_px,
        favicon_px=16,
        description=f'Never reproduce the logo smaller than {print_mm}mm in print or {digital_px}px '
                    f'on screen. Use the simplified icon for favicons.',
    )


def color_variations(primary, accent=None):
    return [
        ColorVariation('Full Color (Primary)', 'The preferred version for most applications',
                       'Use on white or light neutral backgrounds', primary, '#ffffff', accent),
        ColorVariation('Full Color (Dark Background)', 'For use on dark backgrounds',
                       'Use when placing the logo on dark colored surfaces', primary, DARK_BASE, accent),
        ColorVariation('Monochrome Black', 'Single-color version for limited color applications',
                       'Use for one-color printing or when color reproduction is limited', '#000000', '#ffffff'),
        ColorVariation('Reversed (White)', 'White version for dark backgrounds',
                       'Use on dark solid backgrounds or photography', '#ffffff', DARK_BASE),
        ColorVariation('Grayscale', 'For black and white publications',
                       'Use in newspapers, grayscale documents or photocopies', '#666666', '#ffffff', '#999999'),
    ]


def usage_rules(algorithm):
    rules = [UsageRule(*row) for row in UNIVERSAL_RULES]
    if algorithm in DIRECTIONAL_ALGORITHMS:
        rules.append(UsageRule('do', 'Preserve directional orientation',
                               'This logo has directional elements. Keep its intended orientation.',
                               'important'))
    if algorithm in CONTRAST_ALGORITHMS:
        rules.append(UsageRule('do', 'Ensure sufficient contrast',
                               'This logo relies on contrast for legibility. Keep an adequate contrast '
                               'ratio between logo and background.', 'critical'))
    return rules


def typography_for(algorithm, personality=None):
    """Personality wins over the algorithm's default pairing"""
    if isinstance(personality, (list, tuple)):
        personality = personality[0] if personality else None
    style = PERSONALITY_STYLES.get(personality) or ALGORITHM_STYLES.get(algorithm, 'default')
    return list(TYPOGRAPHY.get(style, TYPOGRAPHY['default']))


def application_examples():
    return [ApplicationExample(*row) for row in APPLICATIONS]


def supporting_colors(primary_colors):
    colors = []
    for color in primary_colors[:2]:
        if hex_to_rgb(color) is None:
            continue
        colors.append(tint(color, 0.7))
        colors.append(shade(color, 0.6))
    return colors + [DARK_BASE, LIGHT_BASE]


# ============================================================================
# Public API
# ============================================================================

def generate_brand_guidelines(logo, options=None):
    """
    Build BrandGuidelines for a GeneratedLogo.

    Options:
        personality: Brand personality (string or list, first wins)
        primary_color / accent_color: Override colors found in the SVG
    """
    options = options or {}
    algorithm = Algorithm.parse(logo.algorithm)
    features = analyze_svg(logo.svg)

    path_count = features.element_count if features else 0
    has_text = bool(features and features.text_count)
    fine_strokes = bool(features and any(w < 2 for w in features.stroke_widths))
    primary_colors = list(features.colors) if features else []

    primary = options.get('primary_color') or (primary_colors[0] if primary_colors else FALLBACK_PRIMARY)
    accent = options.get('accent_color') or (primary_colors[1] if len(primary_colors) > 1 else None)

    return BrandGuidelines(
        version=GUIDELINES_VERSION,
        generated_at=datetime.now(timezone.utc).isoformat(),
        brand_name=logo.meta.brand_name or 'Brand',
        logo_description=LOGO_DESCRIPTIONS.get(algorithm) or logo.concept or DEFAULT_DESCRIPTION,
        algorithm_used=algorithm.value,
        clear_space=clear_space_rule(path_count, has_text),
        minimum_size=minimum_size_rule(path_count, fine_strokes),
        color_variations=color_variations(primary, accent),
        usage_rules=usage_rules(algorithm),
        typography=typography_for(algorithm, options.get('personality')),
        applications=application_examples(),
        primary_colors=primary_colors,
        supporting_colors=supporting_colors(primary_colors),
    )


def export_guidelines_markdown(g):
    lines = [f'# {g.brand_name} Brand Guidelines', '', f'*Generated: {g.generated_at[:10]}*', '']

    lines += ['## Logo Overview', '', g.logo_description, '', f'**Algorithm:** {g.algorithm_used}', '']
    lines += ['## Clear Space', '', g.clear_space.description, '']
    lines += [
        '## Minimum Size', '', g.minimum_size.description, '',
        f'- **Print:** {g.minimum_size.print_mm}mm',
        f'- **Digital:** {g.minimum_size.digital_px}px',
        f'- **Favicon:** {g.minimum_size.favicon_px}px',
        '',
    ]

    lines += ['## Color Variations', '']
    for variation in g.color_variations:
        lines += [f'### {variation.name}', variation.description, '', f'**Usage:** {variation.usage}', '']
        lines.append(f'- Primary: `{variation.primary}`')
        if variation.secondary:
            lines.append(f'- Secondary: `{variation.secondary}`')
        lines += [f'- Background: `{variation.background}`', '']

    lines += ['## Usage Rules', '', '### Do', '']
    lines += [f'- **{r.title}:** {r.description}' for r in g.usage_rules if r.type == 'do']
    lines += ['', "### Don't", '']
    lines += [f'- **{r.title}:** {r.description}' for r in g.usage_rules if r.type == 'dont']

    lines += ['', '## Typography', '']
    for font in g.typography:
        lines += [f'### {font.font_family} ({font.pairing})', font.description, '',
                  f'- **Category:** {font.category}', f'- **Weights:** {font.weight}']
        if font.url:
            lines.append(f'- **Font:** [Google Fonts]({font.url})')
        lines.append('')

    lines += ['## Brand Colors', '', '### Primary Colors', '']
    lines += [f'- `{c}`' for c in g.primary_colors]
    lines += ['', '### Supporting Colors', '']
    lines += [f'- `{c}`' for c in g.supporting_colors]
    return '\n'.join(lines) + '\n'


def export_guidelines_json(g):
    return json.dumps(asdict(g), indent=2)
