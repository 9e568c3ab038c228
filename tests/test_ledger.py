"""Tests for the uniqueness ledger."""

from concurrent.futures import ThreadPoolExecutor

from ledger import UniquenessLedger
from models import LedgerEntry


def entry(hash, brand='Acme', algorithm='letter-fusion', score=90.0):
    return LedgerEntry(hash=hash, brand_name=brand, algorithm=algorithm, variant=1,
                       created_at='2026-01-01T00:00:00+00:00', quality_score=score)


class MemoryStore:
    """Minimal LedgerStore collaborator."""

    def __init__(self, known=()):
        self.hashes = set(known)
        self.stored = []

    def hash_exists(self, hash):
        return hash in self.hashes

    def store_hash(self, entry):
        self.hashes.add(entry.hash)
        self.stored.append(entry)


class TestInsert:
    """Insert-if-absent semantics."""

    def test_first_insert_wins(self, ledger):
        assert ledger.insert(entry('a' * 64))
        assert not ledger.insert(entry('a' * 64, brand='Other'))
        assert len(ledger) == 1
        assert ledger.get('a' * 64).brand_name == 'Acme'

    def test_contains(self, ledger):
        assert not ledger.contains('b' * 64)
        ledger.insert(entry('b' * 64))
        assert ledger.contains('b' * 64)
        assert 'b' * 64 in ledger

    def test_concurrent_inserts_of_one_hash(self, ledger):
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda i: ledger.insert(entry('c' * 64, brand=str(i))), range(64)))
        assert results.count(True) == 1
        assert len(ledger) == 1

    def test_concurrent_inserts_of_distinct_hashes(self, ledger):
        hashes = [f'{i:064x}' for i in range(200)]
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda h: ledger.insert(entry(h)), hashes))
        assert all(results)
        assert len(ledger) == 200


class TestStore:
    """Backing store collaborators."""

    def test_store_receives_new_entries(self):
        store = MemoryStore()
        ledger = UniquenessLedger(store=store)
        assert ledger.insert(entry('d' * 64))
        assert [e.hash for e in store.stored] == ['d' * 64]

    def test_store_hashes_block_inserts(self):
        store = MemoryStore(known=['e' * 64])
        ledger = UniquenessLedger(store=store)
        assert ledger.contains('e' * 64)
        assert not ledger.insert(entry('e' * 64))
        assert store.stored == []

    def test_clear_keeps_store(self):
        store = MemoryStore()
        ledger = UniquenessLedger(store=store)
        ledger.insert(entry('f' * 64))
        ledger.clear()
        assert len(ledger) == 0
        assert ledger.contains('f' * 64)


class TestReporting:
    def test_entries_for_brand(self, ledger):
        ledger.insert(entry('1' * 64, brand='Acme'))
        ledger.insert(entry('2' * 64, brand='Globex'))
        ledger.insert(entry('3' * 64, brand='Acme'))
        assert [e.hash for e in ledger.entries_for_brand('Acme')] == ['1' * 64, '3' * 64]

    def test_stats(self, ledger):
        assert ledger.stats()['total'] == 0
        ledger.insert(entry('1' * 64, score=80))
        ledger.insert(entry('2' * 64, brand='Globex', algorithm='gradient-glow', score=90))
        stats = ledger.stats()
        assert stats['total'] == 2
        assert stats['brands'] == 2
        assert stats['by_algorithm'] == {'letter-fusion': 1, 'gradient-glow': 1}
        assert stats['average_quality'] == 85
