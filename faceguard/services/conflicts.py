"""
Conflict & scheduling resolution.

Runs in two phases around the treatment handlers:

  1. plan_scan() — before any handler runs. Decides from the classified
     issues whether acne and aging treatments co-occur; if so the night
     routine becomes a fixed weekly skin-cycling schedule and the handlers
     are told so explicitly. Also fixes the order issues are processed in.
  2. build_safety_warnings() — after every product is assembled. Scans the
     final active ingredients for antagonistic pairs.

Both phases are recomputed from a single scan's input; nothing is carried
over between scans.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from faceguard.schemas import (
    CyclingDay,
    CyclingNight,
    CyclingSchedule,
    IssueKind,
    Product,
)
from faceguard.services.catalog import SAFETY_REMINDERS
from faceguard.services.classifier import ClassifiedIssue

logger = logging.getLogger(__name__)

CYCLING_WEEK: tuple[tuple[str, CyclingNight], ...] = (
    ("monday", CyclingNight.RETINOL),
    ("tuesday", CyclingNight.ACNE),
    ("wednesday", CyclingNight.RETINOL),
    ("thursday", CyclingNight.ACNE),
    ("friday", CyclingNight.RETINOL),
    ("saturday", CyclingNight.REST),
    ("sunday", CyclingNight.REST),
)

NIGHT_DESCRIPTIONS: dict[CyclingNight, str] = {
    CyclingNight.RETINOL: (
        "Retinol night: cleanse, apply a pea-sized amount of 0.5% retinol on dry skin, "
        "wait 20 minutes, then moisturize"
    ),
    CyclingNight.ACNE: (
        "Acne night: cleanse, apply benzoyl peroxide 2.5% spot gel on active breakouts, "
        "then moisturize"
    ),
    CyclingNight.REST: (
        "Recovery night: cleanse and moisturize only, no actives, let the barrier recover"
    ),
}

RETINOL_ACID_WARNING = (
    "⚠️ CRITICAL: Do NOT use Retinol and AHA/BHA on the same night. Alternate nights."
)
CYCLING_WARNING = (
    "🔄 SKIN CYCLING: Retinol and acne treatments are scheduled on separate nights "
    "(retinol Mon/Wed/Fri, acne Tue/Thu, rest on weekends). Follow the weekly "
    "schedule and never layer them on the same night."
)
VITAMIN_C_ACID_WARNING = (
    "⚠️ Use Vitamin C in morning, acids at night to avoid irritation"
)

AHA_MARKERS = ("glycolic", "aha")
BHA_MARKERS = ("salicylic", "bha")


# ── Phase 1: plan ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScanPlan:
    """Decisions made before any treatment handler runs."""

    has_acne: bool
    has_aging: bool
    ordered: tuple[ClassifiedIssue, ...]
    cycling: CyclingSchedule

    @property
    def cycling_enabled(self) -> bool:
        return self.cycling.enabled


def build_cycling_schedule() -> CyclingSchedule:
    return CyclingSchedule(
        enabled=True,
        days={
            day: CyclingDay(type=night, description=NIGHT_DESCRIPTIONS[night])
            for day, night in CYCLING_WEEK
        },
    )


def _processing_order(
    classified: Sequence[ClassifiedIssue], cycling: bool
) -> tuple[ClassifiedIssue, ...]:
    """Acne issues first, then aging issues, then the rest when cycling.

    Otherwise the classifier's order is kept as is.
    """
    if not cycling:
        return tuple(classified)

    acne = [c for c in classified if c.has(IssueKind.ACNE)]
    aging = [
        c for c in classified if c.has(IssueKind.AGING) and not c.has(IssueKind.ACNE)
    ]
    rest = [
        c
        for c in classified
        if not c.has(IssueKind.ACNE) and not c.has(IssueKind.AGING)
    ]
    return tuple(acne + aging + rest)


def plan_scan(classified: Sequence[ClassifiedIssue]) -> ScanPlan:
    has_acne = any(c.has(IssueKind.ACNE) for c in classified)
    has_aging = any(c.has(IssueKind.AGING) for c in classified)
    cycling = has_acne and has_aging

    if cycling:
        logger.debug("Acne and aging concerns co-occur, enabling skin cycling")

    return ScanPlan(
        has_acne=has_acne,
        has_aging=has_aging,
        ordered=_processing_order(classified, cycling),
        cycling=build_cycling_schedule() if cycling else CyclingSchedule(),
    )


# ── Phase 2: ingredient conflicts ────────────────────────────────────────────


def _ingredients(products: Iterable[Product]) -> list[str]:
    found: list[str] = []
    for product in products:
        found.extend(i.lower() for i in (product.active_ingredients or []))
    return found


def _mentions(ingredients: list[str], markers: Iterable[str]) -> bool:
    return any(marker in ingredient for ingredient in ingredients for marker in markers)


def build_safety_warnings(
    products: Sequence[Product], cycling_enabled: bool
) -> list[str]:
    """Conflict warnings first, then the three static reminders.

    The vitamin C / acid warning is independent of cycling: it is about
    morning vs. night, not about which night.
    """
    ingredients = _ingredients(products)
    has_retinol = _mentions(ingredients, ("retinol",)) or any(
        "retinol" in product.type.lower() for product in products
    )
    has_acid = _mentions(ingredients, AHA_MARKERS) or _mentions(ingredients, BHA_MARKERS)
    has_vitamin_c = _mentions(ingredients, ("vitamin c",))

    warnings: list[str] = []

    if has_retinol and has_acid:
        warnings.append(CYCLING_WARNING if cycling_enabled else RETINOL_ACID_WARNING)

    if has_vitamin_c and has_acid:
        warnings.append(VITAMIN_C_ACID_WARNING)

    if warnings:
        logger.debug(f"Ingredient conflicts detected: {len(warnings)}")

    warnings.extend(SAFETY_REMINDERS)
    return warnings
