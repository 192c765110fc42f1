"""Custom exceptions for stereo PCM channel processing."""


class StereoCodecError(Exception):
    """Base exception for channel codec errors."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class AudioResourceNotFoundError(StereoCodecError):
    """Raised when an audio resource does not exist or cannot be accessed."""

    def __init__(self, resource: str, cause: Exception = None):
        super().__init__(f"Audio resource not found or inaccessible: {resource}", cause)
        self.resource = resource


class UnsupportedAudioFormatError(StereoCodecError):
    """Raised when audio data is not 16-bit little-endian signed stereo PCM."""

    def __init__(self, message: str, audio_format=None, cause: Exception = None):
        super().__init__(message, cause)
        self.audio_format = audio_format


class ChannelLengthMismatchError(StereoCodecError, ValueError):
    """Raised when left and right channel buffers differ in length."""

    def __init__(self, left_length: int, right_length: int):
        super().__init__(
            f"Channel length mismatch: left has {left_length} samples, "
            f"right has {right_length}"
        )
        self.left_length = left_length
        self.right_length = right_length


class ConfigurationError(StereoCodecError):
    """Raised when there's an issue with codec configuration."""
