"""Shared test fixtures."""

from __future__ import annotations

import pytest


VALID_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" data-categoryid="1" data-targetviewbox="0 0 100 100" data-zoneid="z1"/>
  <circle cx="50" cy="50" r="20" data-categoryid="2" data-targetviewbox="0 0 50 50" data-zoneid="z2"/>
</svg>'''

# No tracked graphic elements at all
TEXT_ONLY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g id="labels">
    <text x="10" y="20">Zone A</text>
  </g>
</svg>'''

MISSING_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect/>
</svg>'''

WHITESPACE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect data-categoryid=" 1 " data-targetviewbox="a" data-zoneid="b"/>
</svg>'''

# &amp;quote parses to the literal text &quote
ENTITY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <path d="M0 0L10 10" data-categoryid="1" data-targetviewbox="a" data-zoneid="&amp;quote"/>
</svg>'''

# The &quote typo in text content is repaired to a plain quote before parsing
REPAIRED_TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <text>Say &quote;hello&quote;</text>
  <line x1="0" y1="0" x2="5" y2="5" data-categoryid="1" data-targetviewbox="a" data-zoneid="b"/>
</svg>'''

UNCLOSED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect data-categoryid="1">
</svg>'''

MULTILINE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <rect
    x="1"
    data-categoryid="1"/>
</svg>'''

# One offending element per line, mixed tag kinds out of report order
FLOOR_PLAN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 200 200">
  <circle cx="5" cy="5" r="2" data-categoryid="7" data-targetviewbox="0 0 10 10" data-zoneid="c"/>
  <polygon points="0,0 10,0 10,10" data-categoryid="3" data-targetviewbox="0 0 10 10"/>
  <g>
    <path d="M0 0h10v10z" data-targetviewbox="0 0 10 10" data-zoneid="p1"/>
  </g>
  <ellipse cx="1" cy="1" rx="2" ry="1" data-categoryid="4 " data-targetviewbox="0 0 10 10" data-zoneid="e"/>
  <polyline points="0,0 5,5" data-categoryid="5" data-targetviewbox="" data-zoneid="pl"/>
</svg>'''


# Editor export declaring its namespaces as internal entities
ILLUSTRATOR_SVG = '''<?xml version="1.0" encoding="utf-8"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd" [
  <!ENTITY ns_svg "http://www.w3.org/2000/svg">
  <!ENTITY ns_xlink "http://www.w3.org/1999/xlink">
]>
<svg version="1.1" xmlns="&ns_svg;" xmlns:xlink="&ns_xlink;">
  <rect/>
</svg>'''

EXTERNAL_ENTITY_SVG = '''<?xml version="1.0"?>
<!DOCTYPE svg [
  <!ENTITY secret SYSTEM "file:///etc/passwd">
]>
<svg xmlns="http://www.w3.org/2000/svg">
  <text>&secret;</text>
</svg>'''

@pytest.fixture
def valid_svg() -> str:
    return VALID_SVG


@pytest.fixture
def missing_svg() -> str:
    return MISSING_SVG


@pytest.fixture
def floor_plan_svg() -> str:
    return FLOOR_PLAN_SVG
