# /social_muse/services/gemini_service.py

import os
import json
import logging
from dotenv import load_dotenv
from typing import Any, Dict, List, Optional, Tuple
import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from ..core.exceptions import ProviderConfigurationError

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
load_dotenv()
API_KEY = os.getenv("GOOGLE_API_KEY")

COPY_MODEL = os.getenv("COPY_MODEL", "gemini-2.5-flash")
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image")

if API_KEY:
    genai.configure(api_key=API_KEY)


def _require_api_key() -> None:
    if not API_KEY:
        raise ProviderConfigurationError("GOOGLE_API_KEY environment variable is not set.")


# --- CORE GENERATIVE FUNCTIONS ---

async def generate_json(contents: Any, system_instruction: str, temperature: float = 0.1) -> Dict:
    """
    Generates a response and GUARANTEES the output is a parsable JSON object
    by using the Gemini API's JSON Mode.
    """
    _require_api_key()
    try:
        model = genai.GenerativeModel(COPY_MODEL, system_instruction=system_instruction)
        config = GenerationConfig(
            temperature=temperature,
            response_mime_type="application/json"
        )
        response = await model.generate_content_async(contents, generation_config=config)
        if not response.text:
            raise ValueError("AI model returned an empty response.")
        return json.loads(response.text)
    except Exception as e:
        logger.error("generate_json failed with Gemini API: %s", e)
        raise ValueError(f"Failed to get a valid JSON response from the AI. Error: {e}")


async def generate_image(contents: List[Any]) -> Optional[Tuple[bytes, str]]:
    """
    Asks the image model for a render. `contents` may mix Pillow images and
    text. Returns the first inline image as (bytes, mime type), or None when
    the model answered without one.
    """
    _require_api_key()
    try:
        model = genai.GenerativeModel(IMAGE_MODEL)
        response = await model.generate_content_async(contents)
    except Exception as e:
        logger.exception("generate_image failed with Gemini API: %s", e)
        raise

    if not response.candidates:
        return None
    for part in response.candidates[0].content.parts:
        inline_data = getattr(part, "inline_data", None)
        if inline_data and inline_data.data:
            return inline_data.data, inline_data.mime_type or "image/png"
    return None
