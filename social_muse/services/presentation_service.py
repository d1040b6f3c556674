# /social_muse/services/presentation_service.py

import io
import base64
import binascii
from enum import Enum
from typing import Optional, Tuple
from PIL import Image

from ..models.campaign_model import GeneratedResult
from ..models.history_model import ResultCard

UNTITLED_CAMPAIGN = "Untitled Campaign"
DOWNLOAD_PREFIX = "realprize"


class ClipboardPart(str, Enum):
    CONTENT = "content"
    DESCRIPTION = "description"
    LOOK_AND_FEEL = "look_and_feel"
    MESSAGING_HIERARCHY = "messaging_hierarchy"


def download_filename(result: GeneratedResult) -> str:
    return f"{DOWNLOAD_PREFIX}-{result.id}.png"


def build_result_card(result: GeneratedResult) -> ResultCard:
    return ResultCard(
        result=result,
        display_title=result.request.campaign_title or UNTITLED_CAMPAIGN,
        tone_display=", ".join(tone.value for tone in result.request.tone),
        has_image=bool(result.image_url),
        download_filename=download_filename(result),
    )


def clipboard_text(result: GeneratedResult, part: ClipboardPart) -> Optional[str]:
    """
    Returns the text fragment a copy button puts on the clipboard, or None
    when the result has no design brief to copy from.
    """
    if part == ClipboardPart.CONTENT:
        return result.content
    if result.design_brief is None:
        return None
    return getattr(result.design_brief, part.value)


def decode_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    Splits a `data:<mime>;base64,<payload>` URL into its media type and raw
    bytes. Raises ValueError for anything else.
    """
    if not data_url.startswith("data:") or "," not in data_url:
        raise ValueError("Not a data URL.")
    header, payload = data_url[len("data:"):].split(",", 1)
    if not header.endswith(";base64"):
        raise ValueError("Only base64 data URLs are supported.")
    mime_type = header[:-len(";base64")] or "image/png"
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Data URL payload is not valid base64. Error: {e}")


def artwork_png(result: GeneratedResult) -> Optional[bytes]:
    """
    The result's image as PNG bytes for download, or None if it has no image.
    Non-PNG provider output is re-encoded so the bytes match the .png name.
    """
    if not result.image_url:
        return None
    mime_type, raw = decode_data_url(result.image_url)
    if mime_type == "image/png":
        return raw
    with Image.open(io.BytesIO(raw)) as image:
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
    return buffer.getvalue()
