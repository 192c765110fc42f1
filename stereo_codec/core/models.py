"""Data models for channel extraction results and channel analysis."""

from dataclasses import dataclass, field
from enum import Enum

from ..utils.exceptions import (
    AudioResourceNotFoundError,
    StereoCodecError,
    UnsupportedAudioFormatError,
)
from .interfaces import AudioFormat, Channel


class ExtractionStatus(Enum):
    """Outcome of a channel extraction."""

    SUCCESS = "success"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNSUPPORTED_FORMAT = "unsupported_format"


@dataclass
class ExtractionResult:
    """
    Result of extracting one channel from a stereo PCM source.

    Failures never carry sample data; callers check `ok` or `status`
    (or call `unwrap()`) instead of inspecting the samples.
    """

    status: ExtractionStatus
    channel: Channel
    samples: list[int] = field(default_factory=list)
    source: str = ""
    error_message: str | None = None
    audio_format: AudioFormat | None = None

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.SUCCESS

    @property
    def sample_count(self) -> int:
        return len(self.samples)

    @classmethod
    def success(
        cls,
        channel: Channel,
        samples: list[int],
        source: str = "",
        audio_format: AudioFormat | None = None,
    ) -> "ExtractionResult":
        return cls(
            status=ExtractionStatus.SUCCESS,
            channel=channel,
            samples=samples,
            source=source,
            audio_format=audio_format,
        )

    @classmethod
    def resource_not_found(
        cls, channel: Channel, source: str, error_message: str
    ) -> "ExtractionResult":
        return cls(
            status=ExtractionStatus.RESOURCE_NOT_FOUND,
            channel=channel,
            source=source,
            error_message=error_message,
        )

    @classmethod
    def unsupported_format(
        cls,
        channel: Channel,
        source: str,
        error_message: str,
        audio_format: AudioFormat | None = None,
    ) -> "ExtractionResult":
        return cls(
            status=ExtractionStatus.UNSUPPORTED_FORMAT,
            channel=channel,
            source=source,
            error_message=error_message,
            audio_format=audio_format,
        )

    def unwrap(self) -> list[int]:
        """
        Return the samples of a successful extraction.

        Raises:
            AudioResourceNotFoundError: If the resource was not found
            UnsupportedAudioFormatError: If the resource had an unsupported format
        """
        if self.status is ExtractionStatus.SUCCESS:
            return self.samples
        if self.status is ExtractionStatus.RESOURCE_NOT_FOUND:
            raise AudioResourceNotFoundError(self.source)
        if self.status is ExtractionStatus.UNSUPPORTED_FORMAT:
            raise UnsupportedAudioFormatError(
                self.error_message or f"Unsupported audio format: {self.source}",
                audio_format=self.audio_format,
            )
        raise StereoCodecError(f"Unknown extraction status: {self.status}")


@dataclass
class ChannelMetrics:
    """Metrics for a single audio channel."""

    sample_count: int = 0
    max_amplitude: int = 0
    avg_amplitude: float = 0.0
    rms_amplitude: float = 0.0
    is_silent: bool = True
    activity_level: str = "silent"
