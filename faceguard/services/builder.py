"""
RecommendationBuilder — the value threaded through every engine stage.

Each add_* call returns a new builder; nothing is mutated in place, so a stage
can be tested on its own by handing it a builder and inspecting what comes
back.
"""

from dataclasses import dataclass, replace

from faceguard.schemas import (
    CyclingSchedule,
    Product,
    RecommendationSet,
    Routine,
    RoutineStep,
)
from faceguard.services.catalog import DEFAULT_DIET, LIFESTYLE_TIPS, MEDICAL_DISCLAIMER


@dataclass(frozen=True)
class RecommendationBuilder:
    products: tuple[Product, ...] = ()
    morning: tuple[RoutineStep, ...] = ()
    night: tuple[RoutineStep, ...] = ()
    diet: tuple[str, ...] = DEFAULT_DIET

    def add_product(self, product: Product) -> "RecommendationBuilder":
        return replace(self, products=self.products + (product,))

    def add_morning_step(self, step: RoutineStep) -> "RecommendationBuilder":
        return replace(self, morning=self.morning + (step,))

    def add_night_step(self, step: RoutineStep) -> "RecommendationBuilder":
        return replace(self, night=self.night + (step,))

    def add_diet(self, *lines: str) -> "RecommendationBuilder":
        return replace(self, diet=self.diet + lines)

    def build(
        self, cycling: CyclingSchedule, safety_warnings: list[str]
    ) -> RecommendationSet:
        # sorted() is stable: equal step orders keep insertion order
        return RecommendationSet(
            products=list(self.products),
            routine=Routine(
                morning=sorted(self.morning, key=lambda s: s.step_order),
                night=sorted(self.night, key=lambda s: s.step_order),
                cycling=cycling,
            ),
            diet=list(dict.fromkeys(self.diet)),
            lifestyle=list(LIFESTYLE_TIPS),
            safety_warnings=list(safety_warnings),
            medical_disclaimer=MEDICAL_DISCLAIMER,
        )
