"""
Per-concern treatment handlers plus the mandatory base products.

Every handler has the same shape: it takes the current builder, the issue
being treated and the cycling decision from the planning phase, and returns
a new builder with its product, routine step and diet lines added.
"""

import logging
from typing import Callable

from faceguard.schemas import Issue, IssueKind, Product, RoutineStep
from faceguard.services.builder import RecommendationBuilder
from faceguard.services.catalog import cleanser_for, moisturizer_for
from faceguard.services.classifier import ClassifiedIssue

logger = logging.getLogger(__name__)

Handler = Callable[[RecommendationBuilder, Issue, bool], RecommendationBuilder]

SEVERE_REFERRAL = (
    "Severe or persistent cases: consult a licensed dermatologist before self-treating."
)


def _precautions(text: str, issue: Issue) -> str:
    if issue.is_severe:
        return f"{text} {SEVERE_REFERRAL}"
    return text


# ── Base products ────────────────────────────────────────────────────────────


def seed_builder(skin_type: str) -> RecommendationBuilder:
    """Cleanser product and morning step 1 — present in every routine."""
    cleanser = cleanser_for(skin_type)
    return (
        RecommendationBuilder()
        .add_product(
            Product(
                type="Cleanser",
                name=cleanser,
                purpose="Removes oil, dirt and overnight buildup without stripping the barrier",
                when_to_use="Morning",
                frequency="Daily",
                precautions="Use lukewarm water, never hot. Do not scrub.",
                expected_results_window="Immediate",
            )
        )
        .add_morning_step(
            RoutineStep(
                step_order=1,
                type="Cleanser",
                product=cleanser,
                when_to_use="Morning",
                how_to=(
                    "Wet face, apply cleanser, massage gently for 30-60 seconds, "
                    "rinse with lukewarm water"
                ),
            )
        )
    )


def add_mandatory_products(
    builder: RecommendationBuilder, skin_type: str
) -> RecommendationBuilder:
    """Sunscreen (always the last morning step) and moisturizer."""
    moisturizer = moisturizer_for(skin_type)
    return (
        builder.add_product(
            Product(
                type="Sunscreen",
                name="Broad-spectrum SPF 30-50 sunscreen",
                active_ingredients=["Zinc oxide or chemical filters"],
                purpose="CRITICAL - Prevents sun damage, aging, and pigmentation",
                when_to_use="Morning (last step)",
                frequency="Daily, reapply every 2 hours outdoors",
                precautions="Apply generously 15 minutes before sun exposure.",
                expected_results_window="Ongoing protection",
            )
        )
        .add_morning_step(
            RoutineStep(
                step_order=99,
                type="Sunscreen",
                product="Broad-spectrum SPF 30-50 sunscreen",
                when_to_use="Morning (last step)",
                how_to=(
                    "Apply generously 15 minutes before sun exposure. "
                    "Reapply every 2 hours."
                ),
            )
        )
        .add_product(
            Product(
                type="Moisturizer",
                name=moisturizer,
                purpose="Hydration and skin barrier support",
                when_to_use="Morning & Night",
                frequency="Daily",
                precautions="Apply after serums so actives absorb first.",
                expected_results_window="1-2 weeks",
            )
        )
        .add_morning_step(
            RoutineStep(
                step_order=4,
                type="Moisturizer",
                product=moisturizer,
                when_to_use="Morning & Night",
                how_to="Apply to damp skin after serums, massage gently until absorbed",
            )
        )
    )


# ── Concern handlers ─────────────────────────────────────────────────────────


def add_acne_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    if cycling_enabled:
        when_to_use = "Night (acne nights: Tuesday & Thursday)"
        frequency = "Twice a week on the skin-cycling acne nights"
    else:
        when_to_use = "Night"
        frequency = "Start 2-3x per week, increase gradually"

    builder = builder.add_product(
        Product(
            type="Acne Treatment Serum",
            name="2% Salicylic acid serum or 2.5% Benzoyl peroxide",
            active_ingredients=["Salicylic acid", "Niacinamide"],
            purpose="Unclogs pores, reduces acne, controls oil",
            when_to_use=when_to_use,
            frequency=frequency,
            precautions=_precautions(
                "May cause dryness initially. Use sunscreen daily.", issue
            ),
            expected_results_window="4-8 weeks",
        )
    )

    # The cycling schedule carries the spot treatment on acne nights
    if not cycling_enabled:
        builder = builder.add_night_step(
            RoutineStep(
                step_order=2,
                type="Spot Treatment",
                product="Benzoyl peroxide 2.5% spot gel",
                when_to_use="Night (on active breakouts)",
                how_to="Apply small amount directly on pimples after cleansing",
            )
        )

    return builder.add_diet(
        "Limit dairy products",
        "Reduce high-glycemic foods",
        "Increase omega-3 foods (fish, walnuts)",
    )


def add_pigmentation_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    return (
        builder.add_product(
            Product(
                type="Brightening Serum",
                name="Vitamin C serum (10-20%) or Alpha arbutin serum",
                active_ingredients=["Vitamin C", "Alpha arbutin", "Niacinamide"],
                purpose="Fades dark spots, evens skin tone, brightens",
                when_to_use="Morning",
                frequency="Daily",
                precautions=_precautions(
                    "Store in cool, dark place. Sunscreen mandatory with Vitamin C.",
                    issue,
                ),
                expected_results_window="8-12 weeks",
            )
        )
        .add_morning_step(
            RoutineStep(
                step_order=2,
                type="Vitamin C Serum",
                product="10-15% L-ascorbic acid serum",
                when_to_use="Morning (after cleansing)",
                how_to="Apply 3-4 drops to face and neck, let absorb before moisturizer",
            )
        )
        .add_diet(
            "Vitamin C rich foods (citrus, berries)",
            "Antioxidant foods (green tea, dark chocolate)",
        )
    )


def add_texture_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    return (
        builder.add_product(
            Product(
                type="Chemical Exfoliant",
                name="BHA (2% Salicylic acid) or AHA (8-10% Glycolic acid)",
                active_ingredients=["Salicylic acid or Glycolic acid"],
                purpose="Smooths texture, minimizes pores, removes dead skin",
                when_to_use="Night",
                frequency="1-2x per week (beginners), 3x per week (advanced)",
                precautions=_precautions(
                    "Do NOT use with retinol on same night. Sunscreen mandatory.", issue
                ),
                expected_results_window="4-6 weeks",
            )
        )
        .add_night_step(
            RoutineStep(
                step_order=2,
                type="Exfoliant",
                product="2% BHA liquid exfoliant",
                when_to_use="Night (2-3x per week)",
                how_to="Apply with cotton pad after cleansing, wait 20 min before next step",
            )
        )
        .add_diet("Zinc-rich foods (pumpkin seeds, chickpeas)")
    )


def add_hydration_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    return (
        builder.add_product(
            Product(
                type="Hydrating Serum",
                name="Hyaluronic acid serum",
                active_ingredients=["Hyaluronic acid", "Glycerin", "Ceramides"],
                purpose="Deep hydration, plumps skin, repairs barrier",
                when_to_use="Morning & Night",
                frequency="Daily",
                precautions=_precautions("Apply on damp skin for best results.", issue),
                expected_results_window="2-4 weeks",
            )
        )
        .add_morning_step(
            RoutineStep(
                step_order=3,
                type="Hydrating Serum",
                product="Hyaluronic acid + B5 serum",
                when_to_use="Morning & Night",
                how_to="Apply to damp skin, pat gently",
            )
        )
        .add_diet(
            "Water-rich fruits (watermelon, cucumber)",
            "Increase water intake to 10+ glasses",
        )
    )


def add_anti_aging_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    if cycling_enabled:
        when_to_use = "Night ONLY (retinol nights: Monday, Wednesday & Friday)"
        frequency = "Three nights a week on the skin-cycling retinol nights"
    else:
        when_to_use = "Night ONLY"
        frequency = "Start 1x per week, increase to 3-4x per week"

    builder = builder.add_product(
        Product(
            type="Retinol Serum",
            name="Retinol 0.25-0.5% (beginners) or 1% (advanced)",
            active_ingredients=["Retinol", "Peptides"],
            purpose="Reduces fine lines, boosts collagen, improves firmness",
            when_to_use=when_to_use,
            frequency=frequency,
            precautions=_precautions(
                "NEVER use in morning. Causes sun sensitivity. Avoid with AHA/BHA.",
                issue,
            ),
            expected_results_window="12-16 weeks",
        )
    )

    # The cycling schedule carries retinol on retinol nights
    if not cycling_enabled:
        builder = builder.add_night_step(
            RoutineStep(
                step_order=3,
                type="Retinol",
                product="0.5% Retinol serum",
                when_to_use="Night (start slow)",
                how_to="Pea-sized amount on dry skin. Wait 20 min before moisturizer.",
            )
        )

    return builder.add_diet(
        "Collagen-rich foods (bone broth)",
        "Vitamin E foods (almonds, avocado)",
    )


def add_under_eye_treatment(
    builder: RecommendationBuilder, issue: Issue, cycling_enabled: bool
) -> RecommendationBuilder:
    return builder.add_product(
        Product(
            type="Under-eye Cream",
            name="Caffeine + peptides eye cream",
            active_ingredients=["Caffeine", "Peptides", "Hyaluronic acid"],
            purpose="Reduces puffiness, dark circles, fine lines",
            when_to_use="Morning & Night",
            frequency="Daily",
            precautions=_precautions(
                "Use gentle tapping motion, avoid pulling skin.", issue
            ),
            expected_results_window="6-8 weeks",
        )
    ).add_diet(
        "Reduce salty foods to limit morning puffiness",
        "Iron-rich foods (spinach, lentils)",
    )


HANDLERS: dict[IssueKind, Handler] = {
    IssueKind.ACNE: add_acne_treatment,
    IssueKind.PIGMENTATION: add_pigmentation_treatment,
    IssueKind.TEXTURE: add_texture_treatment,
    IssueKind.HYDRATION: add_hydration_treatment,
    IssueKind.AGING: add_anti_aging_treatment,
    IssueKind.UNDER_EYE: add_under_eye_treatment,
}


def apply_treatments(
    builder: RecommendationBuilder, item: ClassifiedIssue, cycling_enabled: bool
) -> RecommendationBuilder:
    """Run every handler the issue's kinds select, in handler order."""
    for kind in item.ordered_kinds():
        logger.debug(f"Treating {item.issue.category!r} as {kind.value}")
        builder = HANDLERS[kind](builder, item.issue, cycling_enabled)
    return builder
