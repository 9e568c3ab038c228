"""
Letterforms
===========
Skeleton anatomy for the letters the fusion and extract marks know how to
draw, plus the rules for pulling initials out of arbitrary brand names.

Coordinates are on the 100x100 canvas. Unknown letters resolve to the
DEFAULT_LETTER row rather than raising.
"""

from collections import namedtuple

DEFAULT_LETTER = 'A'
SECOND_DEFAULT_LETTER = 'B'

Letterform = namedtuple('Letterform', ['stems', 'bowls', 'crossbars', 'apex', 'baseline'])

# stems / crossbars: (x1, y1, x2, y2); bowls: (cx, cy, rx, ry); apex: (x, y)
LETTER_ANATOMY = {
    'A': Letterform(
        stems=[(50, 85, 30, 15), (50, 85, 70, 15)],
        bowls=[],
        crossbars=[(35, 55, 65, 55)],
        apex=(50, 15),
        baseline=85,
    ),
    'B': Letterform(
        stems=[(30, 15, 30, 85)],
        bowls=[(45, 35, 20, 18), (48, 65, 23, 20)],
        crossbars=[(30, 50, 55, 50)],
        apex=(30, 15),
        baseline=85,
    ),
    'H': Letterform(
        stems=[(28, 15, 28, 85), (72, 15, 72, 85)],
        bowls=[],
        crossbars=[(28, 50, 72, 50)],
        apex=(28, 15),
        baseline=85,
    ),
    'K': Letterform(
        stems=[(30, 15, 30, 85), (30, 55, 70, 15), (42, 45, 72, 85)],
        bowls=[],
        crossbars=[],
        apex=(70, 15),
        baseline=85,
    ),
    'L': Letterform(
        stems=[(32, 15, 32, 85)],
        bowls=[],
        crossbars=[(32, 85, 72, 85)],
        apex=(32, 15),
        baseline=85,
    ),
    'M': Letterform(
        stems=[(20, 85, 20, 15), (20, 15, 50, 50), (50, 50, 80, 15), (80, 15, 80, 85)],
        bowls=[],
        crossbars=[],
        apex=(50, 50),
        baseline=85,
    ),
    'N': Letterform(
        stems=[(25, 85, 25, 15), (25, 15, 75, 85), (75, 85, 75, 15)],
        bowls=[],
        crossbars=[],
        apex=(25, 15),
        baseline=85,
    ),
    'O': Letterform(
        stems=[],
        bowls=[(50, 50, 28, 35)],
        crossbars=[],
        apex=(50, 15),
        baseline=85,
    ),
    'T': Letterform(
        stems=[(50, 15, 50, 85)],
        bowls=[],
        crossbars=[(22, 15, 78, 15)],
        apex=(50, 15),
        baseline=85,
    ),
    'V': Letterform(
        stems=[(20, 15, 50, 85), (80, 15, 50, 85)],
        bowls=[],
        crossbars=[],
        apex=(50, 85),
        baseline=85,
    ),
    'W': Letterform(
        stems=[(10, 15, 25, 85), (25, 85, 40, 40), (40, 40, 55, 85), (55, 85, 70, 40), (70, 40, 90, 15)],
        bowls=[],
        crossbars=[],
        apex=(25, 85),
        baseline=85,
    ),
}

FONT_WEIGHTS = {
    'light': '300',
    'regular': '400',
    'bold': '700',
    'heavy': '900',
}

STROKE_WEIGHTS = {
    'light': 0.7,
    'regular': 1.0,
    'bold': 1.2,
    'heavy': 1.5,
}


def _usable(char):
    return char.isascii() and char.isalnum()


def initial_of(name, default=DEFAULT_LETTER):
    """First usable character of `name`, upper-cased"""
    for char in (name or '').strip():
        return char.upper() if _usable(char) else default
    return default


def second_initial_of(name, default=SECOND_DEFAULT_LETTER):
    """Initial of the second word, else the second character"""
    words = (name or '').split()
    if len(words) > 1:
        return initial_of(words[1], default)
    stripped = (name or '').strip()
    if len(stripped) > 1:
        return initial_of(stripped[1:], default)
    return default


def anatomy(letter):
    """Anatomy row for `letter`, falling back to the default row"""
    return LETTER_ANATOMY.get((letter or '').upper(), LETTER_ANATOMY[DEFAULT_LETTER])
