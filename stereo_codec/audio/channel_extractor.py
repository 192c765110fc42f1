"""Channel extraction: split interleaved 16-bit stereo PCM into mono sample buffers."""

import logging
import os
from collections.abc import Iterator

from ..core.interfaces import AudioSource, Channel
from ..core.models import ExtractionResult
from ..utils.exceptions import (
    AudioResourceNotFoundError,
    ConfigurationError,
    UnsupportedAudioFormatError,
)
from .pcm import DEFAULT_CHUNK_SIZE, FRAME_SIZE, decode_channel
from .providers.raw_pcm_source import RawPcmSource
from .providers.wav_file_source import WavFileSource

logger = logging.getLogger(__name__)

SourceLike = str | os.PathLike | bytes | bytearray | memoryview | AudioSource


def resolve_source(source: SourceLike) -> AudioSource:
    """
    Turn a path, raw PCM bytes or an existing AudioSource into an AudioSource.

    Paths are read as WAV files; bytes-like objects are treated as headerless
    16-bit little-endian stereo PCM.
    """
    if isinstance(source, AudioSource):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return RawPcmSource(source)
    if isinstance(source, (str, os.PathLike)):
        return WavFileSource(source)
    raise TypeError(f"Unsupported audio source type: {type(source).__name__}")


def validate_chunk_size(chunk_size: int) -> None:
    """Chunks must hold whole frames so every chunk starts on a left sample."""
    if chunk_size <= 0 or chunk_size % FRAME_SIZE != 0:
        raise ConfigurationError(
            f"Invalid chunk size {chunk_size} (expected a positive multiple of {FRAME_SIZE})"
        )


def iter_frame_chunks(
    source: AudioSource, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[bytes]:
    """
    Yield chunks of whole interleaved frames until the source is exhausted.

    Short reads are buffered so that no frame is split across two chunks.
    A trailing partial frame is dropped, which keeps both channels the same
    length. The source must already be open; it is consumed once.
    """
    validate_chunk_size(chunk_size)
    pending = bytearray()

    while True:
        data = source.read(chunk_size)
        if not data:
            break
        pending.extend(data)

        whole = len(pending) - len(pending) % FRAME_SIZE
        if whole >= chunk_size:
            chunk = bytes(pending[:whole])
            del pending[:whole]
            yield chunk

    whole = len(pending) - len(pending) % FRAME_SIZE
    if whole:
        yield bytes(pending[:whole])
    if len(pending) > whole:
        logger.warning(
            f"⚠️ Dropping {len(pending) - whole} trailing bytes "
            f"(incomplete {FRAME_SIZE}-byte frame) from {source.describe()}"
        )


def _extract(
    source: SourceLike, channels: tuple[Channel, ...], chunk_size: int
) -> list[ExtractionResult]:
    """Read a source once and decode each requested channel."""
    validate_chunk_size(chunk_size)
    audio_source = resolve_source(source)
    description = audio_source.describe()

    try:
        with audio_source:
            audio_format = audio_source.audio_format
            if not audio_format.is_stereo_pcm16():
                raise UnsupportedAudioFormatError(
                    f"{description} is {audio_format.describe()}, "
                    "expected 16-bit little-endian signed stereo",
                    audio_format=audio_format,
                )

            buffers: dict[Channel, list[int]] = {channel: [] for channel in channels}
            chunk_count = 0
            for chunk in iter_frame_chunks(audio_source, chunk_size):
                for channel, samples in buffers.items():
                    samples.extend(decode_channel(chunk, channel))
                chunk_count += 1

    except AudioResourceNotFoundError as e:
        logger.warning(f"❌ Channel extraction failed: {e}")
        return [
            ExtractionResult.resource_not_found(channel, description, str(e))
            for channel in channels
        ]
    except UnsupportedAudioFormatError as e:
        logger.warning(f"❌ Channel extraction failed: {e}")
        return [
            ExtractionResult.unsupported_format(
                channel, description, str(e), audio_format=e.audio_format
            )
            for channel in channels
        ]

    logger.debug(
        f"🔀 Extracted {', '.join(c.value for c in channels)} channel(s) from "
        f"{description}: {chunk_count} chunks, "
        f"{len(next(iter(buffers.values()), []))} samples per channel"
    )
    return [
        ExtractionResult.success(
            channel, buffers[channel], source=description, audio_format=audio_format
        )
        for channel in channels
    ]


def extract_channel(
    source: SourceLike, channel: Channel, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> ExtractionResult:
    """
    Extract the samples of one channel from an interleaved stereo PCM source.

    Args:
        source: WAV file path, raw PCM bytes, or an AudioSource
        channel: Channel.LEFT or Channel.RIGHT
        chunk_size: Bytes requested per read (positive multiple of 4)

    Returns:
        ExtractionResult with the samples on success, or a RESOURCE_NOT_FOUND /
        UNSUPPORTED_FORMAT status with an error message and no samples.

    Raises:
        ConfigurationError: If chunk_size is not a positive multiple of 4
        TypeError: If source is of an unsupported type
    """
    return _extract(source, (channel,), chunk_size)[0]


def extract_left_channel(
    source: SourceLike, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> ExtractionResult:
    """Extract the left channel samples."""
    return extract_channel(source, Channel.LEFT, chunk_size)


def extract_right_channel(
    source: SourceLike, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> ExtractionResult:
    """Extract the right channel samples."""
    return extract_channel(source, Channel.RIGHT, chunk_size)


def split_channels(
    source: SourceLike, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> tuple[ExtractionResult, ExtractionResult]:
    """Extract both channels in a single pass over the source."""
    left, right = _extract(source, (Channel.LEFT, Channel.RIGHT), chunk_size)
    return left, right
