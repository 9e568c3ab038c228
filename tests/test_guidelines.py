"""Tests for brand guideline derivation and export."""

import json

import pytest

from color_utils import DARK_BASE, LIGHT_BASE
from guidelines import (clear_space_rule, export_guidelines_json, export_guidelines_markdown,
                        generate_brand_guidelines, minimum_size_rule, supporting_colors, typography_for,
                        usage_rules)
from models import Algorithm


@pytest.fixture
def chevrons(engine):
    return engine.render('Acme', 'motion-chevrons', 'fixed', primary_color='#3366ff', accent_color='#ff6633')


@pytest.fixture
def fusion(engine):
    return engine.render('Acme', 'letter-fusion', 'fixed')


class TestSections:
    """Individual guideline sections."""

    @pytest.mark.parametrize('paths, multiplier', [(11, 0.25), (10, 0.2), (6, 0.2), (5, 0.15), (0, 0.15)])
    def test_clear_space_multiplier(self, paths, multiplier):
        assert clear_space_rule(paths, False).multiplier == multiplier

    def test_clear_space_reference(self):
        assert clear_space_rule(3, True).reference == 'x-height'
        assert clear_space_rule(3, False).reference == 'height'

    @pytest.mark.parametrize('paths, fine, sizes', [
        (3, True, (25, 80)),
        (9, False, (20, 60)),
        (8, False, (15, 40)),
    ])
    def test_minimum_sizes(self, paths, fine, sizes):
        rule = minimum_size_rule(paths, fine)
        assert (rule.print_mm, rule.digital_px) == sizes
        assert rule.favicon_px == 16

    def test_universal_rules(self):
        rules = usage_rules(Algorithm.BLOCK_ASSEMBLY)
        assert len(rules) == 8
        assert {r.type for r in rules} == {'do', 'dont'}

    @pytest.mark.parametrize('algorithm', ['motion-chevrons', 'staggered-bars', 'line-fragmentation',
                                           'single-stroke'])
    def test_directional_rule(self, algorithm):
        titles = [r.title for r in usage_rules(Algorithm(algorithm))]
        assert len(titles) == 9
        assert 'Preserve directional orientation' in titles

    @pytest.mark.parametrize('algorithm', ['negative-space', 'negative-space-letter', 'monogram-merge',
                                           'monogram-merge-v2'])
    def test_contrast_rule(self, algorithm):
        titles = [r.title for r in usage_rules(Algorithm(algorithm))]
        assert 'Ensure sufficient contrast' in titles

    def test_typography_prefers_personality(self):
        assert typography_for(Algorithm.MOTION_CHEVRONS)[0].font_family == 'Montserrat'
        assert typography_for(Algorithm.MOTION_CHEVRONS, 'playful')[0].font_family == 'Nunito'
        assert typography_for(Algorithm.MOTION_CHEVRONS, ['elegant', 'bold'])[0].font_family == 'Playfair Display'
        assert typography_for(Algorithm.MOTION_CHEVRONS, 'unheard-of')[0].font_family == 'Montserrat'

    def test_supporting_colors(self):
        assert supporting_colors(['#ffffff']) == ['#ffffff', '#666666', DARK_BASE, LIGHT_BASE]
        assert supporting_colors([]) == [DARK_BASE, LIGHT_BASE]


class TestGenerateBrandGuidelines:
    def test_fixed_mark(self, chevrons):
        g = generate_brand_guidelines(chevrons)
        assert g.brand_name == 'Acme'
        assert g.algorithm_used == 'motion-chevrons'
        assert '#3366ff' in g.primary_colors
        assert len(g.color_variations) == 5
        assert g.color_variations[0].primary == g.primary_colors[0]
        assert [v.background for v in g.color_variations] == ['#ffffff', DARK_BASE, '#ffffff', DARK_BASE,
                                                              '#ffffff']
        assert g.color_variations[4].primary == '#666666'
        assert g.color_variations[4].secondary == '#999999'
        assert 'Preserve directional orientation' in [r.title for r in g.usage_rules]
        assert len(g.applications) == 6
        assert g.supporting_colors[-2:] == [DARK_BASE, LIGHT_BASE]

    def test_current_color_mark_falls_back(self, fusion):
        g = generate_brand_guidelines(fusion)
        assert g.primary_colors == []
        assert g.color_variations[0].primary == '#333333'
        assert g.supporting_colors == [DARK_BASE, LIGHT_BASE]
        assert g.logo_description == fusion.concept

    def test_options_override(self, fusion):
        g = generate_brand_guidelines(fusion, {'primary_color': '#123456', 'accent_color': '#654321',
                                               'personality': 'innovative'})
        assert g.color_variations[0].primary == '#123456'
        assert g.color_variations[0].secondary == '#654321'
        assert g.typography[0].font_family == 'Inter'


class TestExport:
    def test_markdown(self, chevrons):
        md = export_guidelines_markdown(generate_brand_guidelines(chevrons))
        assert md.startswith('# Acme Brand Guidelines')
        for heading in ('## Clear Space', '## Minimum Size', '## Color Variations', '## Usage Rules',
                        "### Don't", '## Typography', '## Brand Colors'):
            assert heading in md
        assert '`#3366ff`' in md

    def test_json(self, chevrons):
        data = json.loads(export_guidelines_json(generate_brand_guidelines(chevrons)))
        assert data['brand_name'] == 'Acme'
        assert len(data['color_variations']) == 5
        assert data['minimum_size']['favicon_px'] == 16
