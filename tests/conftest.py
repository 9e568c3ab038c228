"""Shared fixtures for the logo engine tests."""

import re
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ledger import UniquenessLedger  # noqa: E402
from logo_engine import LogoEngine  # noqa: E402
from master_seed import build_master_seed  # noqa: E402

SVG_NS = '{http://www.w3.org/2000/svg}'
NUMBER = re.compile(r'-?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')


def local(tag):
    return tag.rsplit('}', 1)[-1]


def parse_svg(svg):
    """Parse an SVG document into an ElementTree root."""
    return ET.fromstring(svg)


def drawn_coordinates(root):
    """Every positional number on drawable elements of a document."""
    values = []
    for element in root.iter():
        tag = local(element.tag)
        if tag in ('path',):
            values.extend(float(n) for n in NUMBER.findall(element.get('d', '')))
        elif tag in ('polygon', 'polyline'):
            values.extend(float(n) for n in NUMBER.findall(element.get('points', '')))
        elif tag in ('rect', 'text'):
            values.extend(float(element.get(k)) for k in ('x', 'y') if element.get(k) is not None)
        elif tag in ('circle', 'ellipse'):
            values.extend(float(element.get(k)) for k in ('cx', 'cy') if element.get(k) is not None)
        elif tag == 'line':
            values.extend(float(element.get(k)) for k in ('x1', 'y1', 'x2', 'y2'))
    return values


@pytest.fixture
def ledger():
    """A fresh, empty ledger."""
    return UniquenessLedger()


@pytest.fixture
def engine(ledger):
    """Sequential engine over the fresh ledger."""
    return LogoEngine(ledger=ledger, max_workers=1)


@pytest.fixture
def seed():
    """A fixed MasterSeed for the letter fusion mark."""
    return build_master_seed('Acme', 'letter-fusion', 'salt-1')
