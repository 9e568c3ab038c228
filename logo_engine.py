"""
Latent Marks Logo Engine
========================
Drives candidate sampling for each requested variation, scores candidates,
enforces the uniqueness ledger and returns finished GeneratedLogo records.

Each variation walks Pending -> Sampling -> Accepted: candidates are drawn
with fresh salts until one meets the quality threshold or the attempts
run out, and the best candidate seen is then inserted into the ledger.
Ledger collisions resample from the same attempt count, so a variation
renders at most `candidates_per_variation` candidates. Results come back
in generation order.
"""

import hashlib
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from algorithms import concept_description, generate
from color_utils import generate_color_palette, hex_to_rgb
from ledger import UniquenessLedger
from master_seed import build_master_seed, generate_salt
from models import (SEED_ALGORITHMS, Algorithm, Family, FixedInput, GeneratedLogo, LedgerEntry,
                    LogoColors, LogoGeometry, LogoMeta)
from quality import calculate_complexity, calculate_quality_score, count_paths
from settings import (DEFAULT_CANDIDATES_PER_VARIATION, DEFAULT_MIN_QUALITY_SCORE, DEFAULT_VARIATIONS,
                      MAX_WORKERS, VIEWBOX)

logger = logging.getLogger(__name__)

PREVIEW_SALT = 'preview'


def select_algorithm_for_brand(brand_name):
    """Stable seed-family pick: SHA-256(brand) mod number of algorithms"""
    digest = hashlib.sha256((brand_name or '').encode('utf-8')).digest()
    return SEED_ALGORITHMS[int.from_bytes(digest[:4], 'big') % len(SEED_ALGORITHMS)]


def _utcnow():
    return datetime.now(timezone.utc).isoformat()


class LogoEngine:
    def __init__(self, ledger=None, max_workers=None, salt_factory=None):
        self.ledger = ledger if ledger is not None else UniquenessLedger()
        self.max_workers = MAX_WORKERS if max_workers is None else max_workers
        self.salt_factory = salt_factory or generate_salt

    # ========================================================================
    # Single renders
    # ========================================================================

    def render(self, brand_name, algorithm, salt, variant=1, primary_color=None, accent_color=None):
        """
        Deterministically render one candidate.

        Args:
            brand_name: Brand the mark is for
            algorithm: Algorithm or its id string
            salt: Per-attempt salt; same salt, same logo
            variant: 1-based variation index recorded on the result
            primary_color / accent_color: Optional hex colors

        Returns:
            A scored GeneratedLogo (not yet in the ledger)
        """
        brand_name = brand_name or ''
        algorithm = Algorithm.parse(algorithm)
        seed = build_master_seed(brand_name, algorithm, salt)

        if algorithm.family is Family.FIXED:
            mark_input = FixedInput(brand_name, primary_color, accent_color, seed_hex=seed.hash_hex)
            svg = generate(algorithm, mark_input)
            concept = concept_description(algorithm)
            # Fixed marks never read SeedParameters
            quality = calculate_quality_score(svg)
        else:
            svg = generate(algorithm, seed)
            concept = concept_description(algorithm, seed.params)
            quality = calculate_quality_score(svg, seed.params)

        palette = generate_color_palette(primary_color) if hex_to_rgb(primary_color) else {}
        meta = LogoMeta(
            brand_name=brand_name,
            generated_at=_utcnow(),
            seed_hex=seed.hash_hex,
            geometry=LogoGeometry(path_count=count_paths(svg), complexity=calculate_complexity(svg)),
            colors=LogoColors(primary=primary_color or 'currentColor', accent=accent_color, palette=palette),
        )
        return GeneratedLogo(
            id=f'{algorithm.value}-{variant}-{seed.hash_hex[:12]}',
            hash=seed.hash_hex,
            algorithm=algorithm,
            variant=variant,
            svg=svg,
            view_box=VIEWBOX,
            params=seed.params.to_dict(),
            quality=quality,
            meta=meta,
            concept=concept,
        )

    def regenerate_logo(self, brand_name, algorithm, primary_color=None, accent_color=None):
        """Fresh candidate with a new salt; the caller must re-check uniqueness"""
        return self.render(brand_name, algorithm, self.salt_factory(),
                           primary_color=primary_color, accent_color=accent_color)

    def generate_all_algorithm_samples(self, brand_name, primary_color=None, accent_color=None):
        """One deterministic preview per algorithm, in enum order"""
        return [
            self.render(brand_name, algorithm, PREVIEW_SALT, variant=i + 1,
                        primary_color=primary_color, accent_color=accent_color)
            for i, algorithm in enumerate(Algorithm)
        ]

    # ========================================================================
    # Uniqueness
    # ========================================================================

    def select_algorithm_for_brand(self, brand_name):
        return select_algorithm_for_brand(brand_name)

    def verify_uniqueness(self, hash):
        """True if no accepted logo carries `hash`"""
        return not self.ledger.contains(hash)

    # ========================================================================
    # Multi-variation generation
    # ========================================================================

    def _sample(self, pool, brand_name, algorithm, variant, min_quality_score, attempts, colors):
        """
        Sampling state: best candidate of up to `attempts`, stopping at the threshold.

        Returns (best, rendered) where rendered is the number of candidates drawn.
        """
        if pool is None:
            # Salts are drawn lazily so an early hit stops the loop
            candidates = (self.render(brand_name, algorithm, self.salt_factory(), variant, *colors)
                          for _ in range(attempts))
        else:
            jobs = [self.salt_factory() for _ in range(attempts)]
            candidates = pool.map(
                lambda salt: self.render(brand_name, algorithm, salt, variant, *colors), jobs)

        best = None
        rendered = 0
        for candidate in candidates:
            rendered += 1
            if best is None or candidate.quality.score > best.quality.score:
                best = candidate
            if candidate.quality.score >= min_quality_score:
                return best, (rendered if pool is None else attempts)

        logger.info('Variation %d of %r accepted below threshold (%.1f < %d)',
                    variant, brand_name, best.quality.score, min_quality_score)
        return best, rendered

    def _accept(self, pool, brand_name, algorithm, variant, min_quality_score, attempts, colors):
        """Accepted state: insert the winner, resampling from what is left of `attempts` if its hash is taken"""
        best = None
        remaining = attempts
        while remaining > 0:
            best, rendered = self._sample(pool, brand_name, algorithm, variant, min_quality_score,
                                          remaining, colors)
            remaining -= rendered
            entry = LedgerEntry(
                hash=best.hash,
                brand_name=brand_name,
                algorithm=best.algorithm.value,
                variant=variant,
                created_at=best.meta.generated_at,
                quality_score=best.quality.score,
            )
            if self.ledger.insert(entry):
                logger.debug('Accepted %s for %r (score %.1f)', best.id, brand_name, best.quality.score)
                return best
            logger.warning('Hash %s already in ledger; resampling variation %d', best.hash[:12], variant)

        logger.warning('Attempt limit reached for %r variation %d; returning %s unrecorded',
                       brand_name, variant, best.hash[:12])
        return best

    def generate_infinite_logos(self, brand_name, variations=None, min_quality_score=None,
                                candidates_per_variation=None, algorithm=None,
                                primary_color=None, accent_color=None):
        """
        Generate `variations` unique logos for a brand.

        Args:
            brand_name: Brand the marks are for
            variations: Number of logos to return
            min_quality_score: Acceptance threshold in [0, 100]
            candidates_per_variation: Most candidates rendered per variation
            algorithm: Override for select_algorithm_for_brand
            primary_color / accent_color: Optional hex colors

        Returns:
            List of GeneratedLogo in generation order
        """
        variations = DEFAULT_VARIATIONS if variations is None else variations
        min_quality_score = DEFAULT_MIN_QUALITY_SCORE if min_quality_score is None else min_quality_score
        attempts = DEFAULT_CANDIDATES_PER_VARIATION if candidates_per_variation is None else candidates_per_variation

        if variations < 1:
            raise ValueError('variations must be at least 1')
        if not 0 <= min_quality_score <= 100:
            raise ValueError('min_quality_score must be between 0 and 100')
        if attempts < 1:
            raise ValueError('candidates_per_variation must be at least 1')

        brand_name = brand_name or ''
        algorithm = Algorithm.parse(algorithm) if algorithm else select_algorithm_for_brand(brand_name)
        colors = (primary_color, accent_color)
        logger.info('Generating %d %s logo(s) for %r', variations, algorithm.value, brand_name)

        results = []
        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                for variant in range(1, variations + 1):
                    results.append(self._accept(pool, brand_name, algorithm, variant,
                                                min_quality_score, attempts, colors))
        else:
            for variant in range(1, variations + 1):
                results.append(self._accept(None, brand_name, algorithm, variant,
                                            min_quality_score, attempts, colors))
        return results


# ============================================================================
# Module-level conveniences
# ============================================================================

def generate_infinite_logos(brand_name, variations=None, min_quality_score=None,
                            candidates_per_variation=None, ledger=None, **kwargs):
    """Run one request against `ledger` (a fresh one if omitted)"""
    engine = LogoEngine(ledger=ledger)
    return engine.generate_infinite_logos(brand_name, variations, min_quality_score,
                                          candidates_per_variation, **kwargs)


def regenerate_logo(brand_name, algorithm, primary_color=None, accent_color=None):
    return LogoEngine().regenerate_logo(brand_name, algorithm, primary_color, accent_color)


def verify_uniqueness(hash, ledger):
    return not ledger.contains(hash)


# Try the engine
if __name__ == '__main__':
    from logging_setup import setup_logging

    setup_logging()
    brand = sys.argv[1] if len(sys.argv) > 1 else 'Acme'
    engine = LogoEngine()

    for logo in engine.generate_infinite_logos(brand, variations=3):
        print(f'{logo.id}: score {logo.quality.score}, {logo.meta.geometry.path_count} elements, '
              f'{len(logo.svg)} bytes')
        print(f'    {logo.concept}')
