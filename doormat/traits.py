"""
Trait classifier: descriptive metadata derived from a stripe layout, palette and text rows.
Pure functions, no randomness. Output feeds NFT-style metadata.
"""
from dataclasses import dataclass
from typing import Any, Sequence

from .palettes import Palette
from .stripes import Stripe, WeaveType

# Rarity tiers, checked highest first; anything else is Common
RARITY_TIERS: tuple[tuple[str, frozenset[str]], ...] = (
    ("Legendary", frozenset({
        "Indian Flag", "Buddhist", "Maurya Empire", "Chola Dynasty",
        "Indigo Famine", "Bengal Famine", "Jamakalam",
    })),
    ("Epic", frozenset({
        "Peacock", "Flamingo", "Toucan", "Madras Checks",
        "Kanchipuram Silk", "Natural Dyes", "Bleeding Vintage",
    })),
    ("Rare", frozenset({
        "Tamil Classical", "Sangam Era", "Pandya Dynasty", "Maratha Empire", "Rajasthani",
    })),
    ("Uncommon", frozenset({
        "Tamil Nadu Temple", "Kerala Onam", "Chettinad Spice", "Chennai Monsoon", "Bengal Indigo",
    })),
)
DEFAULT_RARITY = "Common"

# Complexity score per stripe
_WEAVE_SCORE = {WeaveType.MIXED: 2.0, WeaveType.TEXTURED: 1.5, WeaveType.SOLID: 0.0}
_SECONDARY_SCORE = 1.0
_MAX_SCORE_PER_STRIPE = 3.0


@dataclass
class TraitRecord:
    text_line_count: int
    total_characters: int
    palette_name: str
    palette_rarity: str
    stripe_count: int
    stripe_complexity: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and export."""
        return {
            "textLines": self.text_line_count,
            "totalCharacters": self.total_characters,
            "paletteName": self.palette_name,
            "paletteRarity": self.palette_rarity,
            "stripeCount": self.stripe_count,
            "stripeComplexity": self.stripe_complexity,
        }

    def to_metadata(self) -> list[dict[str, Any]]:
        """Marketplace-style attribute list."""
        return [
            {"trait_type": "Text Lines", "value": self.text_line_count},
            {"trait_type": "Total Characters", "value": self.total_characters},
            {"trait_type": "Palette Name", "value": self.palette_name},
            {"trait_type": "Palette Rarity", "value": self.palette_rarity},
            {"trait_type": "Stripe Count", "value": self.stripe_count},
            {"trait_type": "Stripe Complexity", "value": self.stripe_complexity},
        ]


def palette_rarity(palette_name: str) -> str:
    for tier, names in RARITY_TIERS:
        if palette_name in names:
            return tier
    return DEFAULT_RARITY


def complexity_score(stripes: Sequence[Stripe]) -> float:
    """Weave and secondary-color score normalized to 0-1."""
    if not stripes:
        return 0.0
    score = 0.0
    for s in stripes:
        score += _WEAVE_SCORE[s.weave_type]
        if s.secondary_color:
            score += _SECONDARY_SCORE
    return score / (len(stripes) * _MAX_SCORE_PER_STRIPE)


def stripe_complexity(stripes: Sequence[Stripe]) -> str:
    """Bucket the layout into Basic, Simple, Moderate, Complex or Very Complex."""
    if not stripes:
        return "Basic"
    solid_ratio = sum(1 for s in stripes if s.weave_type == WeaveType.SOLID) / len(stripes)
    score = complexity_score(stripes)
    if solid_ratio >= 0.9:
        return "Basic"
    if solid_ratio > 0.75 and score < 0.15:
        return "Simple"
    if solid_ratio > 0.6 and score < 0.3:
        return "Moderate"
    if score < 0.5:
        return "Complex"
    return "Very Complex"


def classify(stripes: Sequence[Stripe], palette: Palette | None, text_rows: Sequence[str]) -> TraitRecord:
    name = palette.name if palette else "Unknown"
    return TraitRecord(
        text_line_count=len(text_rows),
        total_characters=sum(len(r) for r in text_rows),
        palette_name=name,
        palette_rarity=palette_rarity(name),
        stripe_count=len(stripes),
        stripe_complexity=stripe_complexity(stripes),
    )
