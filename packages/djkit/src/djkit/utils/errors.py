"""Shared error definitions for the DJ Success Kit."""


class DJKitError(Exception):
    """Base exception for the DJ Success Kit."""
    pass


class ConfigurationError(DJKitError):
    """Required configuration (e.g. the provider credential) is missing."""
    pass


class TransportError(DJKitError):
    """The proxy could not be reached or answered without a structured body."""
    pass


class ProviderError(DJKitError):
    """The proxy or provider reported a structured `{error}` message."""
    pass


class SafetyRejectionError(ProviderError):
    """The provider refused to produce media for the prompt."""
    pass


class StreamParseError(DJKitError):
    """Too many consecutive malformed frames in a text stream."""
    pass


class VideoFetchError(DJKitError):
    """Generated video could not be downloaded for playback."""
    pass


class VideoTimeoutError(DJKitError):
    """Video generation did not finish within the polling budget."""
    pass


class ProfileStoreError(DJKitError):
    """Client profiles could not be written to local storage."""
    pass
