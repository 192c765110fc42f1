"""Configured entry point combining channel extraction, mixing and storage."""

import logging
import os
from collections.abc import Sequence
from typing import Any

from ..config.codec_config import CodecConfig, get_config
from ..core.interfaces import Channel
from ..core.models import ChannelMetrics, ExtractionResult
from .audio_file_writer import DualChannelAudioSaver, write_stereo_wav
from .channel_analysis import analyze_channel
from .channel_extractor import SourceLike, extract_channel, split_channels
from .channel_mixer import mix_channels

logger = logging.getLogger(__name__)


class ChannelCodec:
    """
    Splits 16-bit stereo PCM into channel buffers and mixes them back.

    Holds only configuration; every call works on its own buffers, so one
    instance can be shared by concurrent callers.
    """

    def __init__(self, config: CodecConfig | None = None):
        self.config = config or get_config()
        logger.debug(
            f"🔀 ChannelCodec initialized: chunk_size={self.config.chunk_size}, "
            f"sample_rate={self.config.sample_rate}"
        )

    def extract(self, source: SourceLike, channel: Channel) -> ExtractionResult:
        return extract_channel(source, channel, self.config.chunk_size)

    def extract_left(self, source: SourceLike) -> ExtractionResult:
        return self.extract(source, Channel.LEFT)

    def extract_right(self, source: SourceLike) -> ExtractionResult:
        return self.extract(source, Channel.RIGHT)

    def split(self, source: SourceLike) -> tuple[ExtractionResult, ExtractionResult]:
        return split_channels(source, self.config.chunk_size)

    def mix(self, left: Sequence[int], right: Sequence[int]) -> bytes:
        return mix_channels(left, right)

    def analyze(self, samples: Sequence[int]) -> ChannelMetrics:
        return analyze_channel(samples, self.config.silence_threshold)

    def write_stereo(
        self, file_path: str | os.PathLike, left: Sequence[int], right: Sequence[int]
    ) -> dict[str, Any]:
        """Mix two channel buffers and store them as a stereo WAV file."""
        return write_stereo_wav(file_path, left, right, self.config.sample_rate)

    def save_channels(
        self, left: Sequence[int], right: Sequence[int], prefix: str = ""
    ) -> dict[str, Any]:
        """Store each channel buffer as its own mono WAV file."""
        saver = DualChannelAudioSaver(
            save_path=self.config.audio_save_path,
            sample_rate=self.config.sample_rate,
            prefix=prefix,
        )
        return saver.save(left, right)
