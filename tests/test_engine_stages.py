"""
Unit tests for the individual engine stages — catalog lookups, issue
classification, planning, ingredient conflicts and the builder.
"""

import pytest

from faceguard.schemas import (
    CyclingNight,
    Issue,
    IssueKind,
    Product,
    RoutineStep,
    SkinType,
)
from faceguard.services.builder import RecommendationBuilder
from faceguard.services.catalog import (
    CLEANSERS,
    DEFAULT_CLEANSER,
    DEFAULT_DIET,
    DEFAULT_MOISTURIZER,
    MOISTURIZERS,
    SAFETY_REMINDERS,
    cleanser_for,
    moisturizer_for,
    normalize_skin_type,
)
from faceguard.services.classifier import classify_category, classify_issues
from faceguard.services.conflicts import (
    CYCLING_WARNING,
    RETINOL_ACID_WARNING,
    VITAMIN_C_ACID_WARNING,
    build_safety_warnings,
    plan_scan,
)
from faceguard.services.treatments import (
    HANDLERS,
    add_acne_treatment,
    add_anti_aging_treatment,
)


# ── Fixtures ────────────────────────────────────────────────────────────────


def _product(type_: str = "Serum", ingredients=None) -> Product:
    return Product(type=type_, name=f"{type_} product", active_ingredients=ingredients or [])


def _classified(*categories: str):
    return classify_issues([Issue(category=c) for c in categories])


# ── Catalog ─────────────────────────────────────────────────────────────────


class TestCatalog:
    @pytest.mark.parametrize("skin_type", list(SkinType))
    def test_every_skin_type_has_products(self, skin_type):
        assert cleanser_for(skin_type.value) == CLEANSERS[skin_type]
        assert moisturizer_for(skin_type.value) == MOISTURIZERS[skin_type]

    @pytest.mark.parametrize("value", ["", None, "Alien", "Oily-ish"])
    def test_unknown_skin_type_falls_back(self, value):
        assert cleanser_for(value) == DEFAULT_CLEANSER
        assert moisturizer_for(value) == DEFAULT_MOISTURIZER

    def test_lookup_ignores_case_and_whitespace(self):
        assert normalize_skin_type("  oily ") is SkinType.OILY
        assert cleanser_for("DEHYDRATED") == CLEANSERS[SkinType.DEHYDRATED]


# ── Classification ──────────────────────────────────────────────────────────


class TestClassifier:
    @pytest.mark.parametrize(
        "category, expected",
        [
            ("Acne & Blemishes", {IssueKind.ACNE}),
            ("Acne Scars", {IssueKind.ACNE}),
            ("ACNE", {IssueKind.ACNE}),
            ("Pigmentation", {IssueKind.PIGMENTATION}),
            ("Dark spots", {IssueKind.PIGMENTATION}),
            ("Texture", {IssueKind.TEXTURE}),
            ("Enlarged pores", {IssueKind.TEXTURE}),
            ("Hydration/Barrier", {IssueKind.HYDRATION}),
            ("Dryness", {IssueKind.HYDRATION}),
            ("Aging / Fine Lines", {IssueKind.AGING}),
            ("Wrinkles", {IssueKind.AGING}),
            ("Under-eye", {IssueKind.UNDER_EYE}),
            ("Texture & Pigmentation", {IssueKind.TEXTURE, IssueKind.PIGMENTATION}),
            ("Oil & Sebum", set()),
            ("", set()),
        ],
    )
    def test_classify_category(self, category, expected):
        assert classify_category(category) == frozenset(expected)

    def test_ordered_kinds_follow_handler_order(self):
        [item] = _classified("Pigmentation with acne")
        assert item.ordered_kinds() == [IssueKind.ACNE, IssueKind.PIGMENTATION]

    def test_every_kind_has_a_handler(self):
        assert set(HANDLERS) == set(IssueKind)


# ── Planning ────────────────────────────────────────────────────────────────


class TestPlanScan:
    def test_direct_plan_keeps_order(self):
        classified = _classified("Pigmentation", "Acne", "Texture")
        plan = plan_scan(classified)

        assert plan.has_acne is True
        assert plan.has_aging is False
        assert plan.cycling_enabled is False
        assert plan.cycling.days == {}
        assert list(plan.ordered) == classified

    def test_cycling_plan_moves_acne_then_aging_first(self):
        classified = _classified("Under-eye", "Wrinkles", "Pigmentation", "Acne Scars", "Acne")
        plan = plan_scan(classified)

        assert plan.cycling_enabled is True
        assert [c.issue.category for c in plan.ordered] == [
            "Acne Scars",
            "Acne",
            "Wrinkles",
            "Under-eye",
            "Pigmentation",
        ]

    def test_cycling_template_is_fixed(self):
        plan = plan_scan(_classified("Acne", "Aging"))
        days = {day: entry.type for day, entry in plan.cycling.days.items()}

        assert days == {
            "monday": CyclingNight.RETINOL,
            "tuesday": CyclingNight.ACNE,
            "wednesday": CyclingNight.RETINOL,
            "thursday": CyclingNight.ACNE,
            "friday": CyclingNight.RETINOL,
            "saturday": CyclingNight.REST,
            "sunday": CyclingNight.REST,
        }
        assert all(entry.description for entry in plan.cycling.days.values())

    def test_acne_and_aging_issue_planned_once(self):
        classified = _classified("Pigmentation", "Acne & aging skin")
        plan = plan_scan(classified)

        assert plan.cycling_enabled is True
        assert [c.issue.category for c in plan.ordered] == [
            "Acne & aging skin",
            "Pigmentation",
        ]
        assert plan.ordered[0].ordered_kinds() == [IssueKind.ACNE, IssueKind.AGING]

    def test_plan_is_recomputed_per_scan(self):
        assert plan_scan(_classified("Acne", "Aging")).cycling_enabled is True
        assert plan_scan(_classified("Acne")).cycling_enabled is False


# ── Ingredient conflicts ────────────────────────────────────────────────────


class TestBuildSafetyWarnings:
    def test_reminders_only_for_empty_products(self):
        assert build_safety_warnings([], cycling_enabled=False) == list(SAFETY_REMINDERS)

    def test_products_without_ingredients_do_not_participate(self):
        products = [_product("Cleanser"), _product("Moisturizer")]
        assert build_safety_warnings(products, cycling_enabled=False) == list(SAFETY_REMINDERS)

    def test_retinol_and_glycolic(self):
        products = [_product(ingredients=["Retinol"]), _product(ingredients=["Glycolic acid"])]
        warnings = build_safety_warnings(products, cycling_enabled=False)
        assert warnings == [RETINOL_ACID_WARNING, *SAFETY_REMINDERS]

    def test_retinol_detected_from_product_type(self):
        products = [_product("Retinol Serum"), _product(ingredients=["BHA"])]
        warnings = build_safety_warnings(products, cycling_enabled=False)
        assert warnings[0] == RETINOL_ACID_WARNING

    def test_cycling_replaces_alternate_nights_message(self):
        products = [_product(ingredients=["Retinol"]), _product(ingredients=["Salicylic acid"])]
        warnings = build_safety_warnings(products, cycling_enabled=True)
        assert warnings == [CYCLING_WARNING, *SAFETY_REMINDERS]

    @pytest.mark.parametrize("cycling_enabled", [True, False])
    def test_vitamin_c_warning_ignores_cycling(self, cycling_enabled):
        products = [_product(ingredients=["Vitamin C"]), _product(ingredients=["Salicylic acid"])]
        warnings = build_safety_warnings(products, cycling_enabled=cycling_enabled)
        assert warnings == [VITAMIN_C_ACID_WARNING, *SAFETY_REMINDERS]

    def test_one_warning_per_pair(self):
        products = [
            _product(ingredients=["Retinol", "Vitamin C"]),
            _product(ingredients=["Glycolic acid"]),
            _product(ingredients=["Salicylic acid"]),
        ]
        warnings = build_safety_warnings(products, cycling_enabled=False)
        assert warnings == [RETINOL_ACID_WARNING, VITAMIN_C_ACID_WARNING, *SAFETY_REMINDERS]


# ── Builder and handlers ────────────────────────────────────────────────────


class TestBuilder:
    def test_add_returns_new_builder(self):
        empty = RecommendationBuilder()
        grown = empty.add_product(_product()).add_diet("Eat greens")

        assert empty.products == ()
        assert empty.diet == DEFAULT_DIET
        assert len(grown.products) == 1
        assert grown.diet[-1] == "Eat greens"

    def test_build_sorts_steps_stably(self):
        builder = (
            RecommendationBuilder()
            .add_night_step(RoutineStep(step_order=3, type="C", product="c"))
            .add_night_step(RoutineStep(step_order=2, type="A", product="a"))
            .add_night_step(RoutineStep(step_order=2, type="B", product="b"))
        )
        rec = builder.build(cycling=plan_scan([]).cycling, safety_warnings=[])
        assert [s.type for s in rec.routine.night] == ["A", "B", "C"]

    def test_acne_handler_respects_cycling_flag(self):
        issue = Issue(category="Acne")
        direct = add_acne_treatment(RecommendationBuilder(), issue, False)
        cycling = add_acne_treatment(RecommendationBuilder(), issue, True)

        assert [s.type for s in direct.night] == ["Spot Treatment"]
        assert cycling.night == ()
        assert len(cycling.products) == 1

    def test_anti_aging_handler_respects_cycling_flag(self):
        issue = Issue(category="Aging")
        direct = add_anti_aging_treatment(RecommendationBuilder(), issue, False)
        cycling = add_anti_aging_treatment(RecommendationBuilder(), issue, True)

        assert [s.type for s in direct.night] == ["Retinol"]
        assert cycling.night == ()
        assert cycling.products[0].type == "Retinol Serum"
