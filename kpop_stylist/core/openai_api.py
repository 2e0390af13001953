"""OpenAI wrapper: style report text and styled outfit image edits."""

from typing import Any, Dict, List, Optional

import httpx
import pydantic

from kpop_stylist.config import Settings, logger
from kpop_stylist.core.images import to_png_data_uri
from kpop_stylist.core.messages import REPORT_PLACEHOLDER
from kpop_stylist.core.prompt_templates import build_report_input_text


class ReportGenerationError(Exception):
    """Raised when the report endpoint answers with a non-success status."""

    def __init__(self, status_code: int, details: str):
        super().__init__(f"Report generation failed with HTTP {status_code}")
        self.status_code = status_code
        self.details = details


# -------------------------
# Response shapes
# -------------------------
class ReportContentItem(pydantic.BaseModel):
    type: Optional[str] = None
    text: Optional[str] = None


class ReportOutputItem(pydantic.BaseModel):
    type: Optional[str] = None
    content: Optional[List[Any]] = None


class ReportPayload(pydantic.BaseModel):
    # Items are validated one at a time so unrelated item kinds never
    # invalidate the message.
    output: Optional[List[Any]] = None


class ImageEditDatum(pydantic.BaseModel):
    b64_json: Optional[str] = None
    url: Optional[str] = None


class ImageEditPayload(pydantic.BaseModel):
    data: Optional[List[ImageEditDatum]] = None


def _auth_headers(settings: Settings) -> Dict[str, str]:
    return {"Authorization": f"Bearer {settings.openai_api_key}"}


# -------------------------
# Stage 1: style report
# -------------------------
def build_report_payload(
    settings: Settings, photo: str, height: str, weight: str
) -> Dict[str, Any]:
    """Build the Responses API body for the stored report prompt."""
    return {
        "prompt": {
            "id": settings.report_prompt_id,
            "version": settings.report_prompt_version,
        },
        "input": [
            {
                "type": "message",
                "role": "user",
                "content": [
                    {"type": "input_image", "image_url": photo},
                    {
                        "type": "input_text",
                        "text": build_report_input_text(height, weight),
                    },
                ],
            }
        ],
    }


def extract_report_text(api_result: Any) -> str:
    """
    Pull the report text out of a Responses API result.

    Takes the first ``message`` item of ``output`` and, within its content, the
    first ``output_text`` part. Any deviation from that shape yields the
    placeholder report instead of an error.
    """
    try:
        payload = ReportPayload.model_validate(api_result)
    except pydantic.ValidationError as exc:
        logger.warning(f"Unexpected report response shape: {exc.error_count()} errors")
        return REPORT_PLACEHOLDER

    raw_message = _first_of_type(payload.output, "message")
    if raw_message is None:
        logger.warning("Report response contained no message output")
        return REPORT_PLACEHOLDER

    try:
        message = ReportOutputItem.model_validate(raw_message)
        raw_text_part = _first_of_type(message.content, "output_text")
        text_part = (
            ReportContentItem.model_validate(raw_text_part)
            if raw_text_part is not None
            else None
        )
    except pydantic.ValidationError as exc:
        logger.warning(f"Unexpected report message shape: {exc.error_count()} errors")
        return REPORT_PLACEHOLDER

    if text_part is None or not text_part.text:
        logger.warning("Report message contained no output text")
        return REPORT_PLACEHOLDER

    return text_part.text


def _first_of_type(items: Optional[List[Any]], item_type: str) -> Optional[dict]:
    """Return the first mapping in ``items`` whose ``type`` equals ``item_type``."""
    return next(
        (
            item
            for item in items or []
            if isinstance(item, dict) and item.get("type") == item_type
        ),
        None,
    )


async def request_style_report(
    client: httpx.AsyncClient,
    settings: Settings,
    photo: str,
    height: str,
    weight: str,
) -> str:
    """
    Generate the written style report for the user's photo and measurements.

    Args:
        client: HTTP client used for the upstream call
        settings: Runtime configuration holding the credential and prompt ids
        photo: Image data URI forwarded as-is
        height: Height in centimetres, as entered
        weight: Weight in kilograms, as entered

    Returns:
        The report text, or the placeholder when the response has no text

    Raises:
        ReportGenerationError: If the endpoint answers with a non-2xx status
        httpx.HTTPError: On transport failures
    """
    headers = {"Content-Type": "application/json", **_auth_headers(settings)}
    response = await client.post(
        settings.responses_url,
        json=build_report_payload(settings, photo, height, weight),
        headers=headers,
    )

    if not response.is_success:
        error_text = response.text
        logger.error(
            f"OpenAI Report API Error: {response.status_code} - {error_text[:500]}"
        )
        raise ReportGenerationError(response.status_code, error_text)

    return extract_report_text(response.json())


# -------------------------
# Stage 2: outfit images
# -------------------------
def extract_outfit_image(api_result: Any) -> Optional[str]:
    """Return a data URI (preferred) or hosted URL from an image edit result."""
    try:
        payload = ImageEditPayload.model_validate(api_result)
    except pydantic.ValidationError as exc:
        logger.warning(f"Unexpected image response shape: {exc.error_count()} errors")
        return None

    if not payload.data:
        return None

    first = payload.data[0]
    if first.b64_json:
        return to_png_data_uri(first.b64_json)
    if first.url:
        return first.url
    return None


async def request_outfit_image(
    client: httpx.AsyncClient,
    settings: Settings,
    image_bytes: bytes,
    prompt: str,
    variation: int,
) -> Optional[str]:
    """Run one image edit; any failure is logged and reported as ``None``."""

    form = {
        "prompt": prompt,
        "model": settings.image_model,
        "n": "1",
        "size": settings.image_size,
    }
    files = {"image": ("photo.png", image_bytes, "image/png")}

    try:
        response = await client.post(
            settings.image_edits_url,
            data=form,
            files=files,
            headers=_auth_headers(settings),
        )

        if not response.is_success:
            logger.error(
                f"OpenAI Outfit API Error (variation {variation}): "
                f"{response.status_code} - {response.text[:500]}"
            )
            return None

        image = extract_outfit_image(response.json())
        if image is None:
            logger.warning(f"Outfit variation {variation} returned no image")
        return image

    except Exception as exc:
        logger.error(f"Outfit generation error (variation {variation}): {exc}")
        return None


__all__ = [
    "ReportGenerationError",
    "build_report_payload",
    "extract_report_text",
    "extract_outfit_image",
    "request_style_report",
    "request_outfit_image",
]
