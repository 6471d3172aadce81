"""Fuzzy component search over the registry.

``ComponentMatcher`` holds no mutable state: the record sequence it is given
at construction is treated as read-only, and category sets are recomputed on
every call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from blockfinder.categories import extract_categories
from blockfinder.links import component_link
from blockfinder.models.registry import MatchResult
from blockfinder.models.tools import ComponentSummary
from blockfinder.similarity import similarity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from blockfinder.models.registry import ComponentRecord, ComponentType

log = structlog.get_logger()

NAME_WEIGHT = 10.0
PATH_WEIGHT = 5.0
CATEGORY_BONUS = 3.0


class ComponentMatcher:
    def __init__(self, records: Sequence[ComponentRecord], link_host: str) -> None:
        self._records = tuple(records)
        self._link_host = link_host

    @property
    def records(self) -> tuple[ComponentRecord, ...]:
        return self._records

    def all_categories(self) -> set[str]:
        """Union of every record's category set."""
        categories: set[str] = set()
        for record in self._records:
            categories |= extract_categories(record)
        return categories

    def _score(self, query: str, record: ComponentRecord, matching: list[str]) -> float:
        name = record.name.lower()
        path = (record.primary_path or "").lower()

        name_similarity = similarity(query, name)
        path_similarity = similarity(query, path) if path else 0.0
        category_match = any(
            category in name or (path and category in path) for category in matching
        )
        return (
            name_similarity * NAME_WEIGHT
            + path_similarity * PATH_WEIGHT
            + (CATEGORY_BONUS if category_match else 0.0)
        )

    def rank(self, query: str, max_results: int = 5) -> list[MatchResult] | None:
        """Score every record against ``query`` and return the best ones.

        Returns at most ``max_results`` results ordered by descending score
        (ties keep registry order), or ``None`` when nothing scores above zero.
        """
        query = query.lower()
        matching = sorted(
            category
            for category in self.all_categories()
            if category in query or query in category
        )

        scored = [
            MatchResult(item=record, score=self._score(query, record, matching))
            for record in self._records
        ]
        hits = [result for result in scored if result.has_match]
        hits.sort(key=lambda result: result.score, reverse=True)

        log.debug(
            "components_ranked",
            query=query,
            matching_categories=matching,
            hits=len(hits),
        )
        return hits[:max_results] or None

    def summarize(self, record: ComponentRecord) -> ComponentSummary:
        return ComponentSummary(
            name=record.name,
            type=record.type_label,
            path=record.primary_path,
            dependencies=list(record.dependencies),
            registry_dependencies=list(record.registry_dependencies),
            link=component_link(self._link_host, record.name),
        )

    def find_similar(self, query: str, max_results: int = 5) -> list[ComponentSummary] | None:
        """Public view of :meth:`rank`: summaries without scores or code."""
        ranked = self.rank(query, max_results)
        if ranked is None:
            return None
        return [self.summarize(result.item) for result in ranked]

    def filter_components(
        self,
        type_tag: ComponentType | None = None,
        category: str | None = None,
    ) -> list[ComponentRecord]:
        """Records of ``type_tag`` (all types when None) that fit ``category``.

        A record fits a category when one of its tags contains the category
        or is contained in it, or failing that when its name contains / is
        contained in the category, or its path contains it.
        """
        records = [r for r in self._records if type_tag is None or r.type == type_tag]
        if not category:
            return records

        wanted = category.lower()
        return [r for r in records if _fits_category(r, wanted)]


def _fits_category(record: ComponentRecord, wanted: str) -> bool:
    if any(tag in wanted or wanted in tag for tag in extract_categories(record)):
        return True
    name = record.name.lower()
    path = (record.primary_path or "").lower()
    return wanted in name or name in wanted or wanted in path
