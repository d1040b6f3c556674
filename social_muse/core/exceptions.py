# /social_muse/core/exceptions.py

"""
Domain exceptions raised by the service layer. Routers translate these into
HTTP responses; nothing below the router layer knows about status codes.
"""


class SocialMuseError(Exception):
    """Base class for every error raised by the Social Muse services."""


class MissingInputError(SocialMuseError):
    """The draft does not carry enough input to attempt a generation."""


class RefinementTargetNotFoundError(SocialMuseError):
    """A tweak points at a history record that no longer exists."""


class GenerationInProgressError(SocialMuseError):
    """A generation was submitted while another one is still running."""


class ProviderConfigurationError(SocialMuseError):
    """The AI provider cannot be called (e.g. the API key is missing)."""


class CopyGenerationError(SocialMuseError):
    """The copywriting call failed. Fatal for the whole generation."""


class ImageGenerationError(SocialMuseError):
    """The image call failed. The orchestrator downgrades this to 'no image'."""


class InvalidReferenceImageError(SocialMuseError):
    """An uploaded reference file could not be decoded as an image."""
