"""Unit tests for kpop_stylist.core.prompt_templates."""

from kpop_stylist.core.prompt_templates import (
    STYLE_VARIATIONS,
    build_outfit_base_prompt,
    build_outfit_prompts,
    build_report_input_text,
)


def test_report_input_text_interpolates_measurements():
    assert build_report_input_text("165", "50") == "키: 165cm, 몸무게: 50kg"


class TestOutfitPrompts:
    def test_exactly_three_distinct_prompts(self):
        prompts = build_outfit_prompts("180", "72")
        assert len(prompts) == 3
        assert len(set(prompts)) == 3

    def test_prompts_share_base_and_follow_variation_order(self):
        base = build_outfit_base_prompt("180", "72")
        prompts = build_outfit_prompts("180", "72")
        for index, (prompt, variation) in enumerate(zip(prompts, STYLE_VARIATIONS), start=1):
            assert prompt.startswith(base)
            assert prompt.endswith(f"Style variation {index}: {variation}")

    def test_base_prompt_describes_layout_and_measurements(self):
        base = build_outfit_base_prompt("180", "72")
        assert "Height: 180cm, Weight: 72kg." in base
        assert "[PHOTO | TEXT]" in base
        assert "solid RED background" in base
        assert '"K-POP SINGER STYLING"' in base
