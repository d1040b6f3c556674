# /social_muse/services/creative_service.py

"""
The two operations delegated to the AI provider: campaign copy (with its
design brief) and the campaign artwork.
"""

import io
import base64
import logging
from typing import List, Optional

from PIL import Image, UnidentifiedImageError
from pydantic import ValidationError

from . import gemini_service, prompt_library
from ..core.exceptions import CopyGenerationError, ImageGenerationError
from ..models.campaign_model import CopywritingResponse, DesignBrief, Length, Platform, Tone
from ..models.draft_model import ReferenceImage

logger = logging.getLogger(__name__)


def _tone_string(tones: List[Tone]) -> str:
    return ", ".join(tone.value for tone in tones)


def build_copywriting_prompts(
    copy_topic: str,
    visual_concept: str,
    platform: Platform,
    length: Length,
    tones: List[Tone],
    refinement: Optional[str] = None,
    previous_content: Optional[str] = None,
) -> tuple:
    """Returns (system_instruction, user_contents) for the copywriting call."""
    refinement_block = ""
    if refinement and previous_content:
        refinement_block = prompt_library.REFINEMENT_BLOCK.format(
            previous_content=previous_content,
            refinement=refinement,
            brand_name=prompt_library.BRAND_NAME,
        )

    system_instruction = prompt_library.COPYWRITING_SYSTEM_PROMPT.format(
        brand_name=prompt_library.BRAND_NAME,
        copy_topic=copy_topic,
        length=length.value,
        tones=_tone_string(tones),
        refinement_block=refinement_block,
    )

    contents = prompt_library.COPYWRITING_USER_PROMPT.format(
        platform=platform.value,
        copy_topic=copy_topic,
        visual_concept=visual_concept,
    )
    if refinement:
        contents += prompt_library.REFINEMENT_INSTRUCTION_LINE.format(refinement=refinement)

    return system_instruction, contents


async def generate_copywriting(
    copy_topic: str,
    visual_concept: str,
    platform: Platform,
    length: Length,
    tones: List[Tone],
    refinement: Optional[str] = None,
    previous_content: Optional[str] = None,
) -> CopywritingResponse:
    """
    Generates the social copy and the three-part design brief. Any provider
    failure, or an answer without usable copy, raises CopyGenerationError.
    A missing or malformed brief degrades to an empty one.
    """
    system_instruction, contents = build_copywriting_prompts(
        copy_topic, visual_concept, platform, length, tones, refinement, previous_content
    )

    try:
        data = await gemini_service.generate_json(contents, system_instruction, temperature=0.7)
    except Exception as e:
        raise CopyGenerationError("Failed to generate copywriting.") from e

    if not isinstance(data, dict):
        raise CopyGenerationError("Copywriting response was not a JSON object.")

    social_copy = data.get("social_copy")
    if not isinstance(social_copy, str) or not social_copy.strip():
        raise CopyGenerationError("Copywriting response did not contain any social copy.")

    try:
        design_brief = DesignBrief.model_validate(data.get("design_brief") or {})
    except ValidationError as e:
        logger.warning("Discarding malformed design brief: %s", e)
        design_brief = DesignBrief()

    return CopywritingResponse(social_copy=social_copy.strip(), design_brief=design_brief)


def build_image_contents(
    visual_concept: str,
    platform: Platform,
    tones: List[Tone],
    reference_image: Optional[ReferenceImage] = None,
) -> list:
    """The reference image, when present, goes before the text prompt."""
    prompt = prompt_library.SOCIAL_IMAGE_PROMPT.format(
        brand_name=prompt_library.BRAND_NAME,
        platform=platform.value,
        visual_concept=visual_concept,
        tones=_tone_string(tones),
        reference_instruction=(
            prompt_library.REFERENCE_PROVIDED_INSTRUCTION if reference_image
            else prompt_library.NO_REFERENCE_INSTRUCTION
        ),
    )
    if not reference_image:
        return [prompt]

    try:
        image = Image.open(io.BytesIO(base64.b64decode(reference_image.data)))
    except (UnidentifiedImageError, ValueError) as e:
        raise ImageGenerationError(f"Reference image could not be decoded. Error: {e}") from e
    return [image, prompt]


async def generate_social_image(
    visual_concept: str,
    platform: Platform,
    tones: List[Tone],
    reference_image: Optional[ReferenceImage] = None,
) -> Optional[str]:
    """
    Renders the campaign artwork and returns it as a data URL, or None when
    the provider yields no image. Provider failures raise ImageGenerationError;
    the caller decides what that means for the campaign.
    """
    contents = build_image_contents(visual_concept, platform, tones, reference_image)

    try:
        image = await gemini_service.generate_image(contents)
    except Exception as e:
        raise ImageGenerationError(f"Failed to generate image. Error: {e}") from e

    if image is None:
        return None
    data, mime_type = image
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
