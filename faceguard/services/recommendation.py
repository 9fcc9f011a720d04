"""
Recommendation engine entry point.

generate_recommendations() is pure and synchronous: same profile in, equal
RecommendationSet out, with no I/O and no state shared between calls. It is
total over well-typed input. Unknown skin types fall back to default copy,
unknown issue categories contribute nothing, and an empty issue list yields
just the cleanser, sunscreen and moisturizer.
"""

import logging
from typing import Any, Mapping, Union

from faceguard.schemas import RecommendationSet, SkinProfile
from faceguard.services.classifier import classify_issues
from faceguard.services.conflicts import build_safety_warnings, plan_scan
from faceguard.services.treatments import (
    add_mandatory_products,
    apply_treatments,
    seed_builder,
)

logger = logging.getLogger(__name__)


def generate_recommendations(
    profile: Union[SkinProfile, Mapping[str, Any]],
) -> RecommendationSet:
    if not isinstance(profile, SkinProfile):
        profile = SkinProfile.model_validate(profile)

    # Phase 1: classify and decide on cycling before any handler runs
    plan = plan_scan(classify_issues(profile.issues))

    # Phase 2: handlers, each told the cycling decision explicitly
    builder = seed_builder(profile.skin_type)
    for item in plan.ordered:
        builder = apply_treatments(builder, item, plan.cycling_enabled)
    builder = add_mandatory_products(builder, profile.skin_type)

    warnings = build_safety_warnings(builder.products, plan.cycling_enabled)
    recommendations = builder.build(cycling=plan.cycling, safety_warnings=warnings)

    logger.info(
        f"Generated recommendations: skin_type={profile.skin_type!r} "
        f"issues={len(profile.issues)} products={len(recommendations.products)} "
        f"cycling={plan.cycling_enabled}"
    )
    return recommendations
