"""Fuzzy matching over multi-field records using rapidfuzz.

Scores follow the Fuse convention: a *distance* where 0.0 is a perfect match
and 1.0 is no match. Each record is scored by its best field.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from rapidfuzz import fuzz, process, utils

logger = logging.getLogger(__name__)

T = TypeVar("T")

Scorer = Callable[..., float]


@dataclass
class FuzzyMatch(Generic[T]):
    """A record that passed the threshold.

    Attributes:
        item: The matched record
        score: Distance in [0, 1], 0.0 is a perfect match
        ref_index: Position of the record in the indexed collection
        key: Name of the best-matching field
    """

    item: T
    score: float
    ref_index: int
    key: str

    @property
    def relevance(self) -> float:
        """Inverted distance: 1.0 is a perfect match."""
        return 1.0 - self.score


class FuzzyIndex(Generic[T]):
    """Multi-field fuzzy index built over a fixed collection of records.

    Args:
        items: Records to index
        keys: Field name -> accessor returning the text for that field
        threshold: Maximum accepted distance (0.0 exact, 1.0 anything)
        scorer: rapidfuzz scorer returning a 0-100 similarity
        scorers: Per-field scorer overrides, keyed like ``keys``
    """

    def __init__(
        self,
        items: Sequence[T],
        keys: dict[str, Callable[[T], str]],
        threshold: float,
        scorer: Scorer = fuzz.partial_ratio,
        scorers: dict[str, Scorer] | None = None,
    ):
        self.items = list(items)
        self.threshold = threshold
        self.scorers = {key: (scorers or {}).get(key, scorer) for key in keys}
        # Field name -> record index -> text, preprocessed once
        self._choices: dict[str, dict[int, str]] = {
            key: {i: utils.default_process(accessor(item) or "") for i, item in enumerate(self.items)}
            for key, accessor in keys.items()
        }

    def search(self, query: str) -> list[FuzzyMatch[T]]:
        """Return every record within the threshold, best match first.

        Ties keep collection order.
        """
        processed = utils.default_process(query)
        if not processed or not self.items:
            return []

        cutoff = (1.0 - self.threshold) * 100
        best: dict[int, tuple[float, str]] = {}
        for key, choices in self._choices.items():
            hits = process.extract(
                processed,
                choices,
                scorer=self.scorers[key],
                processor=None,
                score_cutoff=cutoff,
                limit=None,
            )
            for _, similarity, ref_index in hits:
                current = best.get(ref_index)
                if current is None or similarity > current[0]:
                    best[ref_index] = (similarity, key)

        matches = [
            FuzzyMatch(
                item=self.items[ref_index],
                score=round(1.0 - similarity / 100, 6),
                ref_index=ref_index,
                key=key,
            )
            for ref_index, (similarity, key) in best.items()
        ]
        matches.sort(key=lambda m: (m.score, m.ref_index))
        logger.debug(f"Fuzzy search '{query}': {len(matches)}/{len(self.items)} records matched")
        return matches
