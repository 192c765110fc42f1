"""Channel mixing: interleave two mono sample buffers into 16-bit stereo PCM bytes."""

import logging
from collections.abc import Sequence

from ..core.models import ExtractionResult
from ..utils.exceptions import ChannelLengthMismatchError
from .pcm import FRAME_SIZE

logger = logging.getLogger(__name__)


def mix_channels(left: Sequence[int], right: Sequence[int]) -> bytes:
    """
    Interleave left and right samples into little-endian 16-bit stereo bytes.

    Frame k occupies bytes 4k..4k+3 as (left low, left high, right low, right high).
    Each byte is truncated to 8 bits on store, the exact inverse of the
    extractor's decode.

    Args:
        left: Left channel samples
        right: Right channel samples, same length as left

    Returns:
        Raw PCM bytes of length 4 * len(left), with no container header

    Raises:
        ChannelLengthMismatchError: If the buffers differ in length. Raised
            before any output is allocated.
    """
    if len(left) != len(right):
        raise ChannelLengthMismatchError(len(left), len(right))

    out = bytearray(len(left) * FRAME_SIZE)
    out[0::4] = bytes(s & 0xFF for s in left)
    out[1::4] = bytes((s >> 8) & 0xFF for s in left)
    out[2::4] = bytes(s & 0xFF for s in right)
    out[3::4] = bytes((s >> 8) & 0xFF for s in right)

    logger.debug(f"🔀 Mixed {len(left)} sample pairs into {len(out)} bytes")
    return bytes(out)


def mix_results(left: ExtractionResult, right: ExtractionResult) -> bytes:
    """
    Mix two extraction results back into stereo bytes.

    Raises:
        AudioResourceNotFoundError: If either extraction could not find its resource
        UnsupportedAudioFormatError: If either extraction hit an unsupported format
        ChannelLengthMismatchError: If the sample buffers differ in length
    """
    return mix_channels(left.unwrap(), right.unwrap())
