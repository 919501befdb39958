"""Application service for the rarest-items use-case."""

from __future__ import annotations

import logging
from typing import Any

from rarest.core import (
    CategorizedResults,
    Category,
    ProfileSnapshot,
    match_rarest_items,
    summarize,
)
from rarest.data import ReferenceCorpus

logger = logging.getLogger(__name__)


def category_labels() -> list[dict[str, str]]:
    return [{"id": str(category), "label": category.label} for category in Category]


class RarestItemsApplicationService:
    """Turns a raw profile payload into the categorized response."""

    def __init__(self, *, corpus: ReferenceCorpus) -> None:
        self._corpus = corpus

    def get_rarest_items(self, profile_payload: Any) -> dict[str, Any]:
        """Match a GetProfile payload against the reference corpus.

        Raises ProfileFormatError for malformed payloads and
        CorpusUnavailableError when reference data is missing.
        """
        profile = ProfileSnapshot.from_response(profile_payload)
        snapshot = self._corpus.require()

        results = match_rarest_items(profile, snapshot.manifest, snapshot.index)
        logger.info(
            "[Rarest] Checked %s collectibles and %s records, %s categories matched",
            len(profile.collectibles),
            len(profile.records),
            len(results),
        )
        return self._build_response(results)

    def reload_corpus(self) -> dict[str, Any]:
        snapshot = self._corpus.reload()
        return {"status": "reloaded", **snapshot.stats()}

    def get_corpus_status(self) -> dict[str, Any]:
        snapshot = self._corpus.snapshot()
        return {
            "data_dir": str(self._corpus.data_dir),
            "available": not snapshot.is_empty,
            **snapshot.stats(),
        }

    @staticmethod
    def _build_response(results: CategorizedResults) -> dict[str, Any]:
        # Keep Category declaration order; drop empty buckets.
        categories = {
            str(category): [item.to_dict() for item in results[category]]
            for category in Category
            if results.get(category)
        }
        return {
            "categories": categories,
            "labels": {category: Category(category).label for category in categories},
            "summary": summarize(results).to_dict(),
        }
