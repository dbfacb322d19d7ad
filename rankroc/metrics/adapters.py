"""Ranking cursors feeding (rank key, identifier) pairs to the ROC builder.

Each adapter wraps some ranked result representation and yields the
canonical ``(rank_key, identifier)`` pairs consumed by
:func:`rankroc.metrics.roc.materialize_roc`. Items with equal rank keys are
treated as tied by the curve builder.

Cursors are single-pass: they wrap an iterator and can be consumed exactly
once. Both the Python iterator protocol and an explicit pull API
(``has_next`` / ``next``) are supported.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Iterable, Iterator, Mapping, Optional, Tuple

RankedItem = Tuple[Any, Hashable]

_EXHAUSTED = object()


class UnsupportedOperationError(NotImplementedError):
    """Raised when a ranking cursor is asked to remove an item."""


class RankingCursor(ABC):
    """
    Base class for single-pass ranking cursors.

    Subclasses implement :meth:`_convert`, mapping one element of the wrapped
    iterator to a ``(rank_key, identifier)`` pair.

    Parameters
    ----------
    source : iterable
        The ranked elements, already sorted in a single direction.
    """

    def __init__(self, source: Iterable[Any]):
        self._iter = iter(source)
        self._lookahead = _EXHAUSTED

    @abstractmethod
    def _convert(self, element: Any) -> RankedItem:
        pass

    def _fill(self) -> None:
        if self._lookahead is _EXHAUSTED:
            self._lookahead = next(self._iter, _EXHAUSTED)

    def has_next(self) -> bool:
        """Return True if another item is available."""
        self._fill()
        return self._lookahead is not _EXHAUSTED

    def next(self) -> RankedItem:
        """Return the next ``(rank_key, identifier)`` pair."""
        self._fill()
        element = self._lookahead
        if element is _EXHAUSTED:
            raise StopIteration
        self._lookahead = _EXHAUSTED
        return self._convert(element)

    def remove(self) -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__} is a read-only view and does not support removal"
        )

    def __iter__(self) -> Iterator[RankedItem]:
        return self

    def __next__(self) -> RankedItem:
        return self.next()


class SimpleAdapter(RankingCursor):
    """
    Identity ranking over plain identifiers.

    Each identifier is used as its own rank key, so no two items are ever
    tied. An identifier must occur at most once; a repeat raises ValueError
    since the resulting ROC values would be meaningless.

    Parameters
    ----------
    ids : iterable of hashable
        Identifiers in rank order.
    """

    def __init__(self, ids: Iterable[Hashable]):
        super().__init__(ids)
        self._seen = set()

    def _convert(self, element: Hashable) -> RankedItem:
        if element in self._seen:
            raise ValueError(f"Identifier {element!r} occurs more than once")
        self._seen.add(element)
        return element, element


class DistanceResultAdapter(RankingCursor):
    """
    Ranking over a distance-annotated neighbor list.

    Accepts ``(distance, identifier)`` pairs, or objects exposing
    ``distance`` and ``id`` attributes (e.g. query result records).
    """

    def _convert(self, element: Any) -> RankedItem:
        if hasattr(element, "distance") and hasattr(element, "id"):
            return element.distance, element.id
        try:
            distance, identifier = element
        except (TypeError, ValueError) as e:
            raise TypeError(
                f"Expected a (distance, id) pair or a record with "
                f"'distance' and 'id' attributes, got {element!r}"
            ) from e
        return distance, identifier


class OutlierScoreAdapter(RankingCursor):
    """
    Ranking over an outlier scoring result.

    Parameters
    ----------
    scores : mapping
        Identifier to outlier score.
    ordering : iterable of hashable, optional
        Identifiers in the order dictated by the external ordering policy.
        If None, identifiers are ordered by score.
    ascending : bool, default=False
        Only used when ``ordering`` is None. By default higher scores rank
        first (more outlying); set True for scores where lower is more
        outlying.
    """

    def __init__(
        self,
        scores: Mapping[Hashable, float],
        ordering: Optional[Iterable[Hashable]] = None,
        ascending: bool = False,
    ):
        if ordering is None:
            # sorted() is stable, ties keep the mapping's order
            ordering = sorted(scores, key=scores.__getitem__, reverse=not ascending)
        super().__init__(ordering)
        self._scores = scores

    def _convert(self, element: Hashable) -> RankedItem:
        return self._scores[element], element
