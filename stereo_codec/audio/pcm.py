"""16-bit little-endian PCM sample arithmetic shared by the extractor and mixer."""

import struct

from ..core.interfaces import Channel

SAMPLE_WIDTH = 2  # bytes per sample
CHANNEL_COUNT = 2
FRAME_SIZE = SAMPLE_WIDTH * CHANNEL_COUNT  # left sample followed by right sample

# 1024 frames per read. Any positive multiple of FRAME_SIZE produces identical output.
DEFAULT_CHUNK_SIZE = 4096


def decode_sample(low: int, high: int) -> int:
    """
    Rebuild a signed 16-bit sample from its two bytes.

    Args:
        low: First (least significant) byte
        high: Second (most significant) byte

    Returns:
        Sample value in the range -32768..32767
    """
    value = ((high << 8) | (low & 0xFF)) & 0xFFFF
    if value & 0x8000:
        value -= 0x10000
    return value


def encode_sample(sample: int) -> tuple[int, int]:
    """Split a sample into its (low, high) bytes, truncating each to 8 bits."""
    return sample & 0xFF, (sample >> 8) & 0xFF


def decode_channel(chunk: bytes, channel: Channel) -> list[int]:
    """
    Decode every sample of one channel from whole interleaved frames.

    Args:
        chunk: Interleaved stereo bytes, length a multiple of FRAME_SIZE
        channel: Channel to keep; the other channel's bytes are skipped

    Returns:
        Samples in time order
    """
    if len(chunk) % FRAME_SIZE != 0:
        raise ValueError(
            f"Chunk of {len(chunk)} bytes is not a whole number of {FRAME_SIZE}-byte frames"
        )

    sample_count = len(chunk) // SAMPLE_WIDTH
    samples = struct.unpack(f"<{sample_count}h", chunk)
    start = 0 if channel is Channel.LEFT else 1
    return list(samples[start::CHANNEL_COUNT])


def encode_mono(samples: list[int]) -> bytes:
    """Pack one channel buffer into little-endian 16-bit mono bytes."""
    out = bytearray(len(samples) * SAMPLE_WIDTH)
    out[0::2] = bytes(s & 0xFF for s in samples)
    out[1::2] = bytes((s >> 8) & 0xFF for s in samples)
    return bytes(out)
