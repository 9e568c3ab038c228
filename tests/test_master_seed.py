"""Tests for seed hashing and parameter derivation."""

import hashlib
import logging
import random
import string

import pytest

from master_seed import (MATERIAL_BYTES, PARAM_SPECS, SeedDerivationError, SeedParameters, brand_hash,
                         build_master_seed, create_seeded_random, derive_params_from_hash, derive_seed,
                         generate_salt, hash_material)
from models import Algorithm


class TestDeriveSeed:
    """Hashing of brand, algorithm and salt."""

    def test_matches_sha256_of_joined_key(self):
        expected = hashlib.sha256(b'Acme|letter-fusion|s1').hexdigest()
        assert derive_seed('Acme', Algorithm.LETTER_FUSION, 's1') == expected
        assert derive_seed('Acme', 'letter-fusion', 's1') == expected

    def test_every_component_changes_the_hash(self):
        base = derive_seed('Acme', 'letter-fusion', 's1')
        assert derive_seed('Acme', 'letter-fusion', 's2') != base
        assert derive_seed('Acmf', 'letter-fusion', 's1') != base
        assert derive_seed('Acme', 'gradient-glow', 's1') != base

    def test_brand_hash_ignores_case(self):
        assert brand_hash('ACME') == brand_hash('acme')
        assert len(brand_hash('')) == 64

    def test_salts_are_fresh_hex(self):
        first, second = generate_salt(), generate_salt()
        assert len(first) == 32
        int(first, 16)
        assert first != second


class TestParameterTable:
    """The declarative PARAM_SPECS table."""

    def test_one_spec_per_field(self):
        assert len(PARAM_SPECS) == 50
        assert [s.name for s in PARAM_SPECS] == list(SeedParameters.__dataclass_fields__)

    def test_byte_ranges_are_disjoint(self):
        taken = set()
        for spec in PARAM_SPECS:
            start, stop = spec.byte_range
            span = set(range(start, stop))
            assert not span & taken, spec.name
            assert stop <= MATERIAL_BYTES
            taken |= span

    def test_material_is_64_bytes(self):
        hash_hex = derive_seed('Acme', 'letter-fusion', 's1')
        material = hash_material(hash_hex)
        assert len(material) == 64
        assert material[:32] == bytes.fromhex(hash_hex)

    @pytest.mark.parametrize('spec', PARAM_SPECS, ids=lambda s: s.name)
    def test_map_fn_stays_in_domain_at_extremes(self, spec):
        width = spec.byte_range[1] - spec.byte_range[0]
        max_value = 256 ** width - 1
        for value in (0, 1, max_value // 2, max_value):
            assert spec.in_domain(spec.map_fn(value, max_value))


class TestDeriveParams:
    """Mapping hashes to SeedParameters."""

    def test_deterministic(self):
        hash_hex = derive_seed('Acme', 'letter-fusion', 's1')
        assert derive_params_from_hash(hash_hex) == derive_params_from_hash(hash_hex)

    def test_all_values_in_domain_over_many_seeds(self):
        rng = random.Random(20261017)
        algorithms = list(Algorithm)
        for _ in range(10000):
            brand = ''.join(rng.choice(string.ascii_letters + ' ') for _ in range(rng.randint(0, 16)))
            hash_hex = derive_seed(brand, rng.choice(algorithms), f'{rng.getrandbits(64):016x}')
            params = derive_params_from_hash(hash_hex)
            for spec in PARAM_SPECS:
                value = getattr(params, spec.name)
                assert spec.in_domain(value), f'{spec.name}={value!r} outside {spec.domain!r}'

    def test_documented_ranges(self):
        params = derive_params_from_hash('0' * 64)
        assert 2 <= params.stroke_width <= 8
        assert 0 <= params.rotation < 360
        assert 0 <= params.curve_tension <= 1

    @pytest.mark.parametrize('bad', ['', 'abc', 'g' * 64, 'a' * 63, 'a' * 65, None])
    def test_malformed_hash_is_fatal(self, bad, caplog):
        caplog.set_level(logging.ERROR, logger='master_seed')
        with pytest.raises(SeedDerivationError):
            derive_params_from_hash(bad)
        assert 'Cannot derive seed material' in caplog.text

    def test_derivation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            create_seeded_random('xyz')


class TestSeededRandom:
    def test_same_seed_same_stream(self):
        hash_hex = derive_seed('Acme', 'letter-fusion', 's1')
        a = create_seeded_random(hash_hex)
        b = create_seeded_random(hash_hex)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]

    def test_draws_are_unit_interval(self):
        rng = create_seeded_random('f' * 64)
        assert all(0 <= rng.random() < 1 for _ in range(1000))


class TestMasterSeed:
    def test_build(self, seed):
        assert seed.algorithm is Algorithm.LETTER_FUSION
        assert seed.hash_hex == derive_seed('Acme', 'letter-fusion', 'salt-1')
        assert seed.params == derive_params_from_hash(seed.hash_hex)

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match='Unknown algorithm'):
            build_master_seed('Acme', 'not-an-algorithm', 's')

    def test_params_serialize(self, seed):
        data = seed.params.to_dict()
        assert len(data) == 50
        assert data['stroke_width'] == seed.params.stroke_width
