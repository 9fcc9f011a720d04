"""
Static catalog: base products per skin type and the fixed copy attached to
every recommendation set (default diet, lifestyle tips, safety reminders,
medical disclaimer).
"""

import logging
from typing import Optional

from faceguard.schemas import SkinType

logger = logging.getLogger(__name__)

DEFAULT_CLEANSER = "Gentle cleanser"
DEFAULT_MOISTURIZER = "Balanced moisturizer"

CLEANSERS: dict[SkinType, str] = {
    SkinType.OILY: "Salicylic acid or foaming gel cleanser (oil-control)",
    SkinType.DRY: "Gentle cream or milk cleanser (hydrating)",
    SkinType.COMBINATION: "Balanced gel cleanser",
    SkinType.NORMAL: "Gentle foaming or gel cleanser",
    SkinType.SENSITIVE: "Fragrance-free gentle cleanser with ceramides",
    SkinType.DEHYDRATED: "Hydrating cream cleanser with hyaluronic acid",
}

MOISTURIZERS: dict[SkinType, str] = {
    SkinType.OILY: "Oil-free gel moisturizer with niacinamide",
    SkinType.DRY: "Rich cream moisturizer with ceramides and hyaluronic acid",
    SkinType.COMBINATION: "Lightweight lotion moisturizer",
    SkinType.NORMAL: "Balanced cream or lotion moisturizer",
    SkinType.SENSITIVE: "Fragrance-free barrier repair cream with centella",
    SkinType.DEHYDRATED: "Hydrating cream with hyaluronic acid and glycerin",
}

DEFAULT_DIET = (
    "Drink 8-10 glasses of water daily",
    "Include omega-3 foods (salmon, walnuts, flaxseeds)",
    "Eat antioxidant-rich foods (berries, green tea, dark chocolate)",
    "Vitamin C foods (citrus, bell peppers, broccoli)",
    "Reduce sugar and processed foods",
)

LIFESTYLE_TIPS = (
    "💤 Sleep 7-8 hours nightly for skin repair",
    "☀️ Wear sunscreen daily, even indoors",
    "💧 Stay hydrated throughout the day",
    "🧘 Manage stress (meditation, exercise)",
    "📱 Limit screen time before bed",
    "🧼 Change pillowcases weekly",
    "🚿 Avoid hot water on face",
    "✋ Don't touch your face frequently",
    "🏃 Exercise regularly for circulation",
    "🚭 Avoid smoking and excessive alcohol",
)

SAFETY_REMINDERS = (
    "✅ Always patch test new products on inner arm for 24 hours",
    "✅ Introduce one new active ingredient at a time (wait 2 weeks)",
    "✅ Sunscreen is MANDATORY when using any active ingredients",
)

MEDICAL_DISCLAIMER = (
    "⚠️ IMPORTANT: This analysis is for educational and informational purposes "
    "only and is NOT a substitute for professional medical advice, diagnosis, or "
    "treatment. AI skin analysis may not be accurate and cannot detect all skin "
    "conditions. Consult a licensed dermatologist for severe, persistent, or "
    "worsening skin concerns, and before starting prescription-strength actives."
)


def normalize_skin_type(value: Optional[str]) -> Optional[SkinType]:
    """Parse a classifier skin type, ignoring case and surrounding whitespace."""
    if not value:
        return None
    wanted = value.strip().lower()
    for skin_type in SkinType:
        if skin_type.value.lower() == wanted:
            return skin_type
    return None


def cleanser_for(skin_type: Optional[str]) -> str:
    parsed = normalize_skin_type(skin_type)
    if parsed is None:
        logger.debug(f"Unrecognized skin type {skin_type!r}, using default cleanser")
        return DEFAULT_CLEANSER
    return CLEANSERS[parsed]


def moisturizer_for(skin_type: Optional[str]) -> str:
    parsed = normalize_skin_type(skin_type)
    if parsed is None:
        logger.debug(f"Unrecognized skin type {skin_type!r}, using default moisturizer")
        return DEFAULT_MOISTURIZER
    return MOISTURIZERS[parsed]
