"""Trial-division factorization with a per-instance memo."""

import logging

logger = logging.getLogger(__name__)


class IntegerFactorizer:
    """Factor integers by trial division, remembering every answer.

    The cache is keyed by (n, with_duplicates) and lives as long as the
    instance. It is not safe to share one instance between threads.
    """

    def __init__(self):
        self._cache = {}

    def factorize(self, n, with_duplicates=False):
        """Prime factors of n in ascending order.

        With with_duplicates=False each prime appears once (12 -> [2, 3]);
        otherwise once per division (360 -> [2, 2, 2, 3, 3, 5]).
        """
        key = (n, with_duplicates)
        if key in self._cache:
            return list(self._cache[key])

        factors = []
        remaining = n
        last = None
        d = 2
        while d * d <= remaining:
            while remaining % d == 0:
                if with_duplicates or d != last:
                    factors.append(d)
                    last = d
                remaining //= d
            d += 1
        if remaining > 1 and (with_duplicates or remaining != last):
            factors.append(remaining)

        logger.debug(f"factorize({n}, duplicates={with_duplicates}) = {factors}")
        self._cache[key] = factors
        return list(factors)

    def cache_size(self):
        return len(self._cache)

    def clear(self):
        self._cache.clear()
