"""
Latent Marks Settings
=====================
Environment-driven defaults for the logo engine.
"""

import os

# ============================================================================
# Generation
# ============================================================================

DEFAULT_VARIATIONS = int(os.environ.get('LOGO_VARIATIONS', '5'))
DEFAULT_MIN_QUALITY_SCORE = int(os.environ.get('LOGO_MIN_QUALITY_SCORE', '85'))
DEFAULT_CANDIDATES_PER_VARIATION = int(os.environ.get('LOGO_CANDIDATES_PER_VARIATION', '5'))
MAX_WORKERS = int(os.environ.get('LOGO_MAX_WORKERS', '1'))

# ============================================================================
# Canvas
# ============================================================================

VIEWBOX_SIZE = 100
VIEWBOX = f'0 0 {VIEWBOX_SIZE} {VIEWBOX_SIZE}'
CENTER = VIEWBOX_SIZE / 2

# Coordinates may overflow the canvas slightly for strokes
COORD_MIN = -10
COORD_MAX = 110

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
