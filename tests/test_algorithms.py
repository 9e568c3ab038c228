"""Tests for the algorithm registry and the fixed and seed mark families."""

import pytest

from algorithms import ALGORITHM_INFO, RENDERERS, algorithm_info, concept_description, generate
from conftest import SVG_NS, drawn_coordinates, local, parse_svg
from letterforms import DEFAULT_LETTER, LETTER_ANATOMY, anatomy, initial_of, second_initial_of
from master_seed import build_master_seed
from models import FIXED_ALGORITHMS, SEED_ALGORITHMS, Algorithm, Family, FixedInput

BRANDS = ['Acme', 'Northwind Traders', 'K', '', 'æøå', '  42 labs ', 'Zeta-Omega']


def render(algorithm, brand='Acme', salt='salt-1'):
    if algorithm.family is Family.FIXED:
        return generate(algorithm, FixedInput(brand, '#3366ff', '#ff6633'))
    return generate(algorithm, build_master_seed(brand, algorithm, salt))


class TestRegistry:
    """Exhaustive dispatch over the Algorithm enum."""

    def test_every_algorithm_registered(self):
        assert set(RENDERERS) == set(Algorithm)
        assert set(ALGORITHM_INFO) == set(Algorithm)

    def test_families_partition_the_enum(self):
        assert len(FIXED_ALGORITHMS) == 10
        assert len(SEED_ALGORITHMS) == 8
        assert set(FIXED_ALGORITHMS) | set(SEED_ALGORITHMS) == set(Algorithm)
        assert all(a.family is Family.SEED for a in SEED_ALGORITHMS)
        assert all(a.family is Family.FIXED for a in FIXED_ALGORITHMS)

    def test_wrong_input_type(self):
        with pytest.raises(TypeError):
            generate('letter-fusion', FixedInput('Acme'))
        with pytest.raises(TypeError):
            generate('staggered-bars', build_master_seed('Acme', 'letter-fusion', 's'))

    def test_seed_for_another_algorithm(self):
        with pytest.raises(ValueError):
            generate('gradient-glow', build_master_seed('Acme', 'letter-fusion', 's'))

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match='Unknown algorithm'):
            generate('sparkle', FixedInput('Acme'))

    def test_algorithm_info(self):
        info = algorithm_info('clover-radial-v2')
        assert info['id'] == 'clover-radial-v2'
        assert info['family'] == 'seed'
        assert info['name']

    def test_concept_description(self, seed):
        text = concept_description(Algorithm.LETTER_FUSION, seed.params)
        assert seed.params.concept_shape in text
        assert concept_description('staggered-bars') == ALGORITHM_INFO[Algorithm.STAGGERED_BARS][1]


@pytest.mark.parametrize('algorithm', list(Algorithm), ids=str)
class TestEveryAlgorithm:
    """Properties every mark must hold."""

    def test_well_formed_document(self, algorithm):
        root = parse_svg(render(algorithm))
        assert root.tag == f'{SVG_NS}svg'
        assert root.get('viewBox') == '0 0 100 100'
        assert root.get('fill') == 'none'
        drawable = [e for e in root.iter() if local(e.tag) in
                    ('path', 'rect', 'circle', 'ellipse', 'line', 'polygon', 'text')]
        assert drawable

    def test_deterministic(self, algorithm):
        assert render(algorithm) == render(algorithm)

    def test_coordinates_stay_near_canvas(self, algorithm):
        for brand in BRANDS:
            for salt in ('a', 'b', 'c'):
                values = drawn_coordinates(parse_svg(render(algorithm, brand, salt)))
                assert all(-10 <= v <= 110 for v in values), (brand, salt)

    def test_degenerate_names_fall_back(self, algorithm):
        for brand in ('', 'æøå', 'x', None):
            parse_svg(render(algorithm, brand))


class TestFamilies:
    def test_seed_marks_use_current_color(self):
        for algorithm in SEED_ALGORITHMS:
            svg = render(algorithm)
            assert 'currentColor' in svg
            assert '#3366ff' not in svg

    def test_fixed_marks_use_caller_colors(self):
        for algorithm in FIXED_ALGORITHMS:
            svg = generate(algorithm, FixedInput('Acme', '#3366ff'))
            assert '#3366ff' in svg

    def test_fixed_marks_default_to_current_color(self):
        svg = generate('staggered-bars', FixedInput('Acme'))
        assert 'currentColor' in svg

    def test_fixed_seed_override_changes_geometry(self):
        plain = generate('continuous-stroke', FixedInput('Acme', '#3366ff'))
        seeded = generate('continuous-stroke', FixedInput('Acme', '#3366ff', seed_hex='ab' * 32))
        assert plain != seeded

    def test_fixed_marks_depend_on_lowercased_name(self):
        assert (generate('block-assembly', FixedInput('ACME', '#3366ff'))
                == generate('block-assembly', FixedInput('acme', '#3366ff')))

    def test_different_salts_differ(self):
        for algorithm in SEED_ALGORITHMS:
            assert render(algorithm, salt='one') != render(algorithm, salt='two')


class TestLetterforms:
    def test_initials(self):
        assert initial_of('acme') == 'A'
        assert initial_of('  northwind') == 'N'
        assert initial_of('42 labs') == '4'
        assert initial_of('') == DEFAULT_LETTER
        assert initial_of(None) == DEFAULT_LETTER
        assert initial_of('æøå') == DEFAULT_LETTER

    def test_second_initial(self):
        assert second_initial_of('Northwind Traders') == 'T'
        assert second_initial_of('Acme') == 'C'
        assert second_initial_of('K') == 'B'
        assert second_initial_of('', default='Z') == 'Z'

    def test_anatomy_falls_back(self):
        assert anatomy('k') is LETTER_ANATOMY['K']
        assert anatomy('?') is LETTER_ANATOMY[DEFAULT_LETTER]
        assert anatomy('') is LETTER_ANATOMY[DEFAULT_LETTER]
