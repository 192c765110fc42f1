"""PCM byte source for headerless interleaved data held in memory or a binary stream."""

import io
import logging
from typing import BinaryIO

from ...core.interfaces import STEREO_PCM16, AudioFormat, AudioSource
from ...utils.exceptions import UnsupportedAudioFormatError

logger = logging.getLogger(__name__)


class RawPcmSource(AudioSource):
    """
    Audio source over raw PCM bytes whose format is declared by the caller.

    Bytes-like data is wrapped in a fresh BytesIO on every open(). A binary
    stream passed in by the caller is read from its current position and is
    left open on close(); its lifetime belongs to the caller.
    """

    def __init__(
        self,
        data: bytes | bytearray | memoryview | BinaryIO,
        audio_format: AudioFormat = STEREO_PCM16,
    ):
        self.data = data
        self._format = audio_format
        self._stream: BinaryIO | None = None
        self._owns_stream = isinstance(data, (bytes, bytearray, memoryview))

    def open(self) -> None:
        if not self._format.is_stereo_pcm16():
            raise UnsupportedAudioFormatError(
                f"Declared format {self._format.describe()} is not "
                "16-bit little-endian signed stereo",
                audio_format=self._format,
            )

        if self._owns_stream:
            self._stream = io.BytesIO(bytes(self.data))
        else:
            self._stream = self.data

    def read(self, size: int) -> bytes:
        if self._stream is None:
            raise RuntimeError("Raw PCM source not opened")
        return self._stream.read(size) or b""

    def close(self) -> None:
        if self._stream is not None and self._owns_stream:
            self._stream.close()
        self._stream = None

    @property
    def audio_format(self) -> AudioFormat:
        return self._format

    def describe(self) -> str:
        if self._owns_stream:
            return f"<{len(self.data)} bytes of raw PCM>"
        return f"<raw PCM stream {getattr(self.data, 'name', type(self.data).__name__)}>"
