"""
Color Utilities
===============
Hex/RGB/HSL conversion, tonal adjustments and WCAG contrast helpers.

Colors are handled as '#rrggbb' strings. Anything Pillow cannot parse
(including 'currentColor') passes through the adjusters unchanged.
"""

import colorsys

from PIL import ImageColor

DARK_BASE = '#1a1a2e'
LIGHT_BASE = '#f8f9fa'


def hex_to_rgb(color):
    """Parse a color string into an (r, g, b) tuple, or None if invalid"""
    if not isinstance(color, str) or not color:
        return None
    try:
        rgb = ImageColor.getrgb(color.strip())
    except ValueError:
        return None
    return tuple(rgb[:3])


def rgb_to_hex(r, g, b):
    """Format channels (clamped to 0-255) as '#rrggbb'"""
    channels = [max(0, min(255, int(round(c)))) for c in (r, g, b)]
    return '#{:02x}{:02x}{:02x}'.format(*channels)


def rgb_to_hsl(r, g, b):
    """RGB channels to (hue 0-360, saturation 0-100, lightness 0-100)"""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h * 360, s * 100, l * 100


def hsl_to_rgb(h, s, l):
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return r * 255, g * 255, b * 255


def _adjust_hsl(color, dh=0, ds=0, dl=0):
    rgb = hex_to_rgb(color)
    if rgb is None:
        return color
    h, s, l = rgb_to_hsl(*rgb)
    s = max(0, min(100, s + ds))
    l = max(0, min(100, l + dl))
    return rgb_to_hex(*hsl_to_rgb(h + dh, s, l))


def lighten(color, amount):
    """Raise lightness by `amount` percentage points"""
    return _adjust_hsl(color, dl=amount)


def darken(color, amount):
    """Lower lightness by `amount` percentage points"""
    return _adjust_hsl(color, dl=-amount)


def saturate(color, amount):
    """Shift saturation by `amount` percentage points (negative desaturates)"""
    return _adjust_hsl(color, ds=amount)


def rotate_hue(color, degrees):
    return _adjust_hsl(color, dh=degrees)


def mix_colors(first, second, weight=0.5):
    """Linear RGB blend; weight 0 gives `first`, weight 1 gives `second`"""
    a = hex_to_rgb(first)
    b = hex_to_rgb(second)
    if a is None or b is None:
        return first
    return rgb_to_hex(*[x + (y - x) * weight for x, y in zip(a, b)])


def tint(color, amount):
    """Mix toward white"""
    return mix_colors(color, '#ffffff', amount)


def shade(color, amount):
    """Mix toward black"""
    return mix_colors(color, '#000000', amount)


def to_grayscale(color):
    rgb = hex_to_rgb(color)
    if rgb is None:
        return color
    # Rec. 601 luma
    y = 0.299 * rgb[0] + 0.587 * rgb[1] + 0.114 * rgb[2]
    return rgb_to_hex(y, y, y)


# ============================================================================
# Contrast
# ============================================================================

def luminance(color):
    """WCAG relative luminance in [0, 1]; unparseable colors count as black"""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return 0.0

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    r, g, b = (channel(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first, second):
    """WCAG contrast ratio between 1 and 21"""
    l1 = luminance(first)
    l2 = luminance(second)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def is_light(color):
    return luminance(color) > 0.179


def get_contrast_color(background):
    """Black or white, whichever reads better on `background`"""
    return '#000000' if is_light(background) else '#ffffff'


def generate_color_palette(primary):
    """Derive a six-swatch palette from one brand color"""
    return {
        'primary': primary,
        'secondary': rotate_hue(primary, 30),
        'accent': rotate_hue(primary, 180),
        'light': lighten(primary, 35),
        'dark': darken(primary, 35),
        'muted': saturate(primary, -30),
    }
