# /tests/test_draft_service.py

import base64
import pytest

from social_muse.core.exceptions import InvalidReferenceImageError
from social_muse.models.campaign_model import Length, Platform, Tone
from social_muse.models.draft_model import DraftUpdate
from social_muse.services import draft_service


def test_new_draft_defaults(draft):
    assert draft.platform == Platform.FACEBOOK
    assert draft.length == Length.THREE
    assert draft.tones == [Tone.FUN]
    assert draft.include_image is True
    assert draft.refining_result_id is None

def test_update_draft_only_touches_given_fields(draft):
    draft_service.update_draft(draft, DraftUpdate(copy_topic="Weekend bonus", platform=Platform.TIKTOK))
    assert draft.copy_topic == "Weekend bonus"
    assert draft.platform == Platform.TIKTOK
    assert draft.length == Length.THREE
    assert draft.tones == [Tone.FUN]

def test_toggle_tone_adds_and_removes(draft):
    draft_service.toggle_tone(draft, Tone.WITTY)
    assert draft.tones == [Tone.FUN, Tone.WITTY]
    draft_service.toggle_tone(draft, Tone.FUN)
    assert draft.tones == [Tone.WITTY]
    draft_service.toggle_tone(draft, Tone.WITTY)
    assert draft.tones == []

def test_attach_reference_image(draft, png_bytes):
    draft.include_image = False
    draft_service.attach_reference_image(draft, png_bytes, "image/png")

    assert draft.include_image is True
    assert draft.reference_image.mime_type == "image/png"
    assert base64.b64decode(draft.reference_image.data) == png_bytes
    assert draft.reference_image.preview.startswith("data:image/png;base64,")

def test_attach_reference_image_detects_mime_type(draft, png_bytes):
    draft_service.attach_reference_image(draft, png_bytes, "application/octet-stream")
    assert draft.reference_image.mime_type == "image/png"

@pytest.mark.parametrize("payload", [b"", b"definitely not an image"])
def test_attach_reference_image_rejects_non_images(draft, payload):
    with pytest.raises(InvalidReferenceImageError):
        draft_service.attach_reference_image(draft, payload, "image/png")
    assert draft.reference_image is None

def test_view_hides_raw_reference_bytes(draft, png_bytes):
    draft_service.attach_reference_image(draft, png_bytes, "image/png")
    view = draft_service.to_view(draft)
    assert view.reference_image.mime_type == "image/png"
    assert not hasattr(view.reference_image, "data")

def test_remove_reference_image(draft, png_bytes):
    draft_service.attach_reference_image(draft, png_bytes, "image/png")
    draft_service.remove_reference_image(draft)
    assert draft.reference_image is None

def test_start_tweak_seeds_form_from_result(draft, make_result):
    draft.refinement_text = "left over"
    result = make_result("tweak_me", tones=(Tone.WARM, Tone.CASUAL))

    draft_service.start_tweak(draft, result)

    assert draft.campaign_title == "Winter Sale"
    assert draft.platform == Platform.INSTAGRAM
    assert draft.length == Length.TWO
    assert draft.tones == [Tone.WARM, Tone.CASUAL]
    assert draft.visual_concept == "Gift box on a stage"
    assert draft.copy_topic == "Holiday rewards"
    assert draft.include_image is False  # the result had no image
    assert draft.refining_result_id == "tweak_me"
    assert draft.refinement_text == ""

def test_start_tweak_keeps_image_on_when_result_has_one(draft, make_result):
    draft.include_image = False
    draft_service.start_tweak(draft, make_result(image_url="data:image/png;base64,AAAA"))
    assert draft.include_image is True

def test_cancel_tweak_keeps_form_values(draft, make_result):
    draft_service.start_tweak(draft, make_result())
    draft_service.cancel_tweak(draft)
    assert draft.refining_result_id is None
    assert draft.copy_topic == "Holiday rewards"
