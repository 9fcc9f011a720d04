"""
Pydantic schemas — the single source of truth for all data contracts.

SkinProfile is the handoff contract from the skin classifier to the
recommendation engine. RecommendationSet is what the engine hands back; its
camelCase JSON shape is stored column-by-column by the scan storage layer and
rendered by the results page, so field names must stay stable.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


# ── Enums ────────────────────────────────────────────────────────────────────


class SkinType(str, enum.Enum):
    OILY = "Oily"
    DRY = "Dry"
    COMBINATION = "Combination"
    NORMAL = "Normal"
    SENSITIVE = "Sensitive"
    DEHYDRATED = "Dehydrated"


class Severity(str, enum.Enum):
    MILD = "Mild"
    MODERATE = "Moderate"
    SEVERE = "Severe"


class IssueKind(str, enum.Enum):
    """Closed set of concerns the engine knows how to treat.

    Declaration order is the order handlers run for an issue that matches
    more than one kind.
    """

    ACNE = "acne"
    PIGMENTATION = "pigmentation"
    TEXTURE = "texture"
    HYDRATION = "hydration"
    AGING = "aging"
    UNDER_EYE = "under_eye"


class CyclingNight(str, enum.Enum):
    RETINOL = "retinol"
    ACNE = "acne"
    REST = "rest"


# ── Base models ──────────────────────────────────────────────────────────────


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(frozen=True)


# ── Classifier input ─────────────────────────────────────────────────────────


class Issue(FrozenCamelModel):
    """A single detected concern. Category is free text from the classifier."""

    category: str = ""
    severity: str = Severity.MODERATE.value
    details: str = ""

    @field_validator("category", "details", mode="before")
    @classmethod
    def _blank_text(cls, value):
        return "" if value is None else value

    @field_validator("severity", mode="before")
    @classmethod
    def _default_severity(cls, value):
        # The classifier sometimes returns null for fields it could not judge
        return Severity.MODERATE.value if value is None else value

    @property
    def is_severe(self) -> bool:
        return self.severity.strip().lower() == Severity.SEVERE.value.lower()


class SkinProfile(FrozenCamelModel):
    """Classifier output: skin type plus the ordered list of detected issues."""

    skin_type: str = ""
    issues: list[Issue] = Field(default_factory=list)
    confidence: Optional[float] = Field(
        default=None, description="Classifier confidence 0-100; not used by the engine"
    )

    @field_validator("skin_type", mode="before")
    @classmethod
    def _blank_skin_type(cls, value):
        return "" if value is None else value

    @field_validator("issues", mode="before")
    @classmethod
    def _no_issues(cls, value):
        return [] if value is None else value


# ── Engine output ────────────────────────────────────────────────────────────


class Product(FrozenCamelModel):
    type: str
    name: str
    active_ingredients: list[str] = Field(default_factory=list)
    purpose: str = ""
    when_to_use: str = ""
    frequency: str = ""
    precautions: str = ""
    expected_results_window: str = ""


class RoutineStep(FrozenCamelModel):
    """One step of a morning or night routine.

    step_order is a priority key, not a dense sequence: cleanser is 1 and the
    mandatory sunscreen is 99 so it always lands last.
    """

    step_order: int
    type: str
    product: str
    when_to_use: str = ""
    how_to: str = ""


class CyclingDay(FrozenCamelModel):
    type: CyclingNight
    description: str


class CyclingSchedule(FrozenCamelModel):
    enabled: bool = False
    days: dict[str, CyclingDay] = Field(default_factory=dict)


class Routine(FrozenCamelModel):
    morning: list[RoutineStep] = Field(default_factory=list)
    night: list[RoutineStep] = Field(default_factory=list)
    cycling: CyclingSchedule = Field(default_factory=CyclingSchedule)


class RecommendationSet(FrozenCamelModel):
    """Full recommendation returned for one scan."""

    products: list[Product] = Field(default_factory=list)
    routine: Routine = Field(default_factory=Routine)
    diet: list[str] = Field(default_factory=list)
    lifestyle: list[str] = Field(default_factory=list)
    safety_warnings: list[str] = Field(default_factory=list)
    medical_disclaimer: str = ""

    def to_payload(self) -> dict:
        """JSON-ready dict with the camelCase keys downstream storage expects."""
        return self.model_dump(mode="json", by_alias=True)
