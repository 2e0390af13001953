"""Prompt templates and builders for the K-pop styling consultation flows."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List


# --- REPORT PROMPT ---

# The report prompt body lives server-side as a stored prompt; only the
# user's measurements are sent as free text.
REPORT_INPUT_TEMPLATE = "키: {HEIGHT}cm, 몸무게: {WEIGHT}kg"


def build_report_input_text(height: str, weight: str) -> str:
    """Render the text part sent alongside the photo to the report endpoint."""
    return REPORT_INPUT_TEMPLATE.format(HEIGHT=height, WEIGHT=weight)


# --- OUTFIT PROMPTS ---

OUTFIT_PROMPT_TEMPLATE = """CRITICAL: Create a WIDE HORIZONTAL image with LEFT and RIGHT sections side-by-side (like a book spread). DO NOT stack vertically.
LEFT HALF: Person styled as K-pop idol, same face, bold outfit ({OUTFIT_MATERIALS}), full body, solid {PHOTO_BACKGROUND} background.
RIGHT HALF: {TEXT_BACKGROUND} background, bold title "{TITLE}", 3-4 English sentences describing the style.
Layout: [PHOTO | TEXT] horizontally. Height: {HEIGHT}cm, Weight: {WEIGHT}kg."""


@dataclass(frozen=True)
class OutfitLayoutDefaults:
    """Default layout values for the styled outfit images."""

    outfit_materials: str = "faux fur/sequins/leather"
    photo_background: str = "RED"
    text_background: str = "WHITE"
    title: str = "K-POP SINGER STYLING"


DEFAULTS = OutfitLayoutDefaults()

STYLE_VARIATIONS = (
    "Vibrant colorful faux fur jacket with leather pants.",
    "Sequined blazer with fitted black trousers.",
    "Edgy crop top with high-waisted statement pants.",
)


def build_outfit_base_prompt(height: str, weight: str) -> str:
    """Render the layout instructions shared by every style variation."""
    return OUTFIT_PROMPT_TEMPLATE.format(
        OUTFIT_MATERIALS=DEFAULTS.outfit_materials,
        PHOTO_BACKGROUND=DEFAULTS.photo_background,
        TEXT_BACKGROUND=DEFAULTS.text_background,
        TITLE=DEFAULTS.title,
        HEIGHT=height,
        WEIGHT=weight,
    )


def build_outfit_prompts(height: str, weight: str) -> List[str]:
    """Return one image-edit prompt per style variation, in variation order."""
    base_prompt = build_outfit_base_prompt(height, weight)
    return [
        f"{base_prompt} Style variation {index}: {variation}"
        for index, variation in enumerate(STYLE_VARIATIONS, start=1)
    ]


__all__ = [
    "REPORT_INPUT_TEMPLATE",
    "OUTFIT_PROMPT_TEMPLATE",
    "STYLE_VARIATIONS",
    "DEFAULTS",
    "OutfitLayoutDefaults",
    "build_report_input_text",
    "build_outfit_base_prompt",
    "build_outfit_prompts",
]
