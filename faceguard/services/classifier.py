"""
Issue classification — maps the classifier's free-text categories onto the
closed IssueKind set once, at ingestion.

Matching is a case-insensitive substring test against English keyword
fragments ("Acne Scars" and "Acne & Blemishes" are both ACNE). A category in
another language or with unexpected phrasing matches nothing and is ignored.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from faceguard.schemas import Issue, IssueKind

logger = logging.getLogger(__name__)

KIND_KEYWORDS: dict[IssueKind, tuple[str, ...]] = {
    IssueKind.ACNE: ("acne",),
    IssueKind.PIGMENTATION: ("pigmentation", "dark spot"),
    IssueKind.TEXTURE: ("texture", "pore"),
    IssueKind.HYDRATION: ("hydration", "dry"),
    IssueKind.AGING: ("aging", "wrinkle", "fine line"),
    IssueKind.UNDER_EYE: ("under-eye",),
}


@dataclass(frozen=True)
class ClassifiedIssue:
    issue: Issue
    kinds: frozenset[IssueKind]

    def has(self, kind: IssueKind) -> bool:
        return kind in self.kinds

    def ordered_kinds(self) -> list[IssueKind]:
        """Matched kinds in handler order."""
        return [kind for kind in IssueKind if kind in self.kinds]


def classify_category(category: str) -> frozenset[IssueKind]:
    lower = (category or "").lower()
    return frozenset(
        kind
        for kind, keywords in KIND_KEYWORDS.items()
        if any(keyword in lower for keyword in keywords)
    )


def classify_issues(issues: Iterable[Issue]) -> list[ClassifiedIssue]:
    classified = []
    for issue in issues:
        kinds = classify_category(issue.category)
        if not kinds:
            logger.debug(f"No handler for issue category {issue.category!r}")
        classified.append(ClassifiedIssue(issue=issue, kinds=kinds))
    return classified
