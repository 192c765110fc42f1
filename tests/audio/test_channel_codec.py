"""Tests for the configured ChannelCodec entry point."""

import os
import wave

import pytest

from stereo_codec.audio.channel_codec import ChannelCodec
from stereo_codec.config.codec_config import CodecConfig
from stereo_codec.core.models import ExtractionStatus
from stereo_codec.utils.exceptions import ChannelLengthMismatchError
from tests.base.base_test import BaseTest
from tests.utils.audio_test_utils import random_stereo_pcm


class TestChannelCodec(BaseTest):

    def test_uses_environment_config_by_default(self):
        with self.patch_environment({"STEREO_CODEC_CHUNK_SIZE": "16"}):
            codec = ChannelCodec()

        assert codec.config.chunk_size == 16

    def test_split_and_mix(self, codec_config):
        codec = ChannelCodec(codec_config)
        data = random_stereo_pcm(100, seed=5)

        left, right = codec.split(data)

        assert codec.extract_left(data).samples == left.samples
        assert codec.extract_right(data).samples == right.samples
        assert codec.mix(left.samples, right.samples) == data

    def test_mix_enforces_equal_lengths(self, codec_config):
        with pytest.raises(ChannelLengthMismatchError):
            ChannelCodec(codec_config).mix([1, 2, 3], [4, 5])

    def test_missing_resource(self, codec_config, tmp_path):
        result = ChannelCodec(codec_config).extract_left(tmp_path / "missing.wav")
        assert result.status is ExtractionStatus.RESOURCE_NOT_FOUND

    def test_analyze_uses_configured_threshold(self, tmp_path):
        codec = ChannelCodec(
            CodecConfig(silence_threshold=500, audio_save_path=str(tmp_path))
        )
        assert codec.analyze([100, -400]).is_silent is True

    def test_write_stereo_uses_configured_sample_rate(self, codec_config, tmp_path):
        codec = ChannelCodec(codec_config)
        path = tmp_path / "mixed.wav"

        codec.write_stereo(path, [1, 2], [3, 4])

        with wave.open(str(path), "rb") as wav_file:
            assert wav_file.getframerate() == codec_config.sample_rate

    def test_save_channels_into_configured_path(self, codec_config):
        codec = ChannelCodec(codec_config)

        stats = codec.save_channels([1, 2], [3, 4], prefix="unit_")

        for key in ("left_channel", "right_channel"):
            file_path = stats[key]["file_path"]
            assert os.path.dirname(file_path) == codec_config.audio_save_path.rstrip("/")
            assert os.path.exists(file_path)
