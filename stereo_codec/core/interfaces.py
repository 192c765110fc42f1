"""
Abstract interfaces for stereo PCM channel processing.

This module defines the format descriptor and the byte-source contract shared by
the channel extractor and its collaborators. The codec itself never discovers
formats; a source opens the underlying resource and reports what it contains.

Key Interfaces:
- AudioSource: A readable, closable byte stream with a known AudioFormat

Data Models:
- AudioFormat: Sample layout reported by a source
- Channel: Which half of an interleaved frame to extract

Example Implementation:
    class MySource(AudioSource):
        def open(self) -> None:
            self._stream = acquire_stream()
            self._format = AudioFormat(sample_rate=48000)

        def read(self, size: int) -> bytes:
            return self._stream.read(size)

        def close(self) -> None:
            self._stream.close()

        @property
        def audio_format(self) -> AudioFormat:
            return self._format
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class Channel(Enum):
    """Stereo channel selector."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def byte_offset(self) -> int:
        """Offset of this channel's first byte inside a 4-byte frame."""
        return 0 if self is Channel.LEFT else 2


@dataclass(frozen=True)
class AudioFormat:
    """
    Sample layout of a PCM byte stream.

    Attributes:
        sample_rate: Frames per second in Hz
        channels: Number of interleaved channels
        sample_width: Bytes per sample for one channel
        byte_order: 'little' or 'big'
        signed: Whether samples are two's complement signed integers

    Only 16-bit little-endian signed stereo is supported by the codec; any other
    descriptor is reported so callers can reject it.
    """

    sample_rate: int = 44100
    channels: int = 2
    sample_width: int = 2
    byte_order: str = "little"
    signed: bool = True

    @property
    def frame_size(self) -> int:
        """Bytes per interleaved frame."""
        return self.channels * self.sample_width

    def is_stereo_pcm16(self) -> bool:
        """Check the 16-bit little-endian signed stereo assumption."""
        return (
            self.channels == 2
            and self.sample_width == 2
            and self.byte_order == "little"
            and self.signed
        )

    def describe(self) -> str:
        """Short human readable description used in log and error messages."""
        sign = "signed" if self.signed else "unsigned"
        return (
            f"{self.sample_rate}Hz, {self.channels}ch, {self.sample_width * 8}-bit "
            f"{self.byte_order}-endian {sign}"
        )


STEREO_PCM16 = AudioFormat()


class AudioSource(ABC):
    """
    Abstract base class for PCM byte sources.

    A source owns exactly one external stream handle between open() and close().
    It is used as a context manager by the extractor so the handle is released
    on every exit path.
    """

    @abstractmethod
    def open(self) -> None:
        """
        Acquire the underlying stream and read its format metadata.

        Raises:
            AudioResourceNotFoundError: If the resource does not exist or is inaccessible
            UnsupportedAudioFormatError: If the resource cannot be parsed as PCM audio
        """

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to size bytes. Returns b"" once the stream is exhausted."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying stream. Safe to call more than once."""

    @property
    @abstractmethod
    def audio_format(self) -> AudioFormat:
        """Format reported by the resource. Valid after open()."""

    def describe(self) -> str:
        """Human readable identification of the resource."""
        return self.__class__.__name__

    def __enter__(self) -> "AudioSource":
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
