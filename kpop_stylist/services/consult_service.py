"""Services for the styling consultation: report first, then outfit images."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, List

import httpx

from kpop_stylist.config import Settings, logger
from kpop_stylist.core.images import decode_data_uri
from kpop_stylist.core.openai_api import request_outfit_image, request_style_report
from kpop_stylist.core.prompt_templates import build_outfit_prompts


def _log(level: int, message: str, **context: Any) -> None:
    """Helper to emit structured logs with contextual metadata."""
    logger.log(level, "%s | context=%s", message, context)


@dataclass(slots=True)
class ConsultationResult:
    """Aggregated output of one consultation."""

    report: str
    outfit_images: List[str] = field(default_factory=list)


async def run_consultation(
    client: httpx.AsyncClient,
    settings: Settings,
    photo: str,
    height: str,
    weight: str,
) -> ConsultationResult:
    """
    Produce a style report and up to three styled outfit images.

    The report call must succeed before any image is requested. The three
    image edits then run concurrently and every one of them is awaited;
    failed variations are dropped from the result without a placeholder.

    Raises:
        ReportGenerationError: If the report endpoint rejects the request
    """
    start_time = time.time()
    _log(logging.INFO, "consultation_started", height=height, weight=weight)

    report = await request_style_report(client, settings, photo, height, weight)
    _log(logging.INFO, "report_complete", report_length=len(report))

    image_bytes = decode_data_uri(photo)
    prompts = build_outfit_prompts(height, weight)

    outcomes = await asyncio.gather(
        *(
            request_outfit_image(client, settings, image_bytes, prompt, variation)
            for variation, prompt in enumerate(prompts, start=1)
        )
    )
    outfit_images = [image for image in outcomes if image]

    _log(
        logging.INFO,
        "consultation_completed",
        requested_images=len(prompts),
        generated_images=len(outfit_images),
        processing_time_ms=int((time.time() - start_time) * 1000),
    )
    return ConsultationResult(report=report, outfit_images=outfit_images)


__all__ = ["ConsultationResult", "run_consultation"]
