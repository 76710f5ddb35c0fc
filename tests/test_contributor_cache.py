"""Tests for the per-repository contributor cache."""

from new_contributors.cache.contributor_cache import ContributorCache
from new_contributors.models.contributors import ContributionBucket


class TestContributorCache:

    def test_miss(self):
        cache = ContributorCache()
        assert cache.get('facebook/react') is None
        assert not cache.contains('facebook/react')

    def test_replace_does_not_merge(self):
        cache = ContributorCache()
        cache.replace('facebook/react', {'2013': {'06': ContributionBucket()}})
        cache.replace('facebook/react', {'2015': {}})

        assert list(cache.get('facebook/react')) == ['2015']
        assert len(cache) == 1

    def test_same_lock_per_key(self):
        cache = ContributorCache()
        assert cache.lock_for('facebook/react') is cache.lock_for('facebook/react')
        assert cache.lock_for('facebook/react') is not cache.lock_for('facebook/jest')

    def test_clear(self):
        cache = ContributorCache()
        cache.replace('facebook/react', {})
        cache.clear()
        assert len(cache) == 0
