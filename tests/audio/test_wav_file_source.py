"""Tests for the WAV file audio source."""

import pytest

from stereo_codec.audio.providers.wav_file_source import WavFileSource
from stereo_codec.core.interfaces import STEREO_PCM16
from stereo_codec.utils.exceptions import (
    AudioResourceNotFoundError,
    UnsupportedAudioFormatError,
)
from tests.base.base_test import BaseTest
from tests.utils.audio_test_utils import interleave


class TestWavFileSource(BaseTest):
    """Opening, validating, reading and closing WAV files."""

    def test_reports_format(self, audio_files):
        path = audio_files.create_stereo_file([1, 2], [3, 4], sample_rate=48000)

        with WavFileSource(path) as source:
            audio_format = source.audio_format

        assert audio_format.sample_rate == 48000
        assert audio_format.channels == 2
        assert audio_format.sample_width == 2
        assert audio_format.is_stereo_pcm16()

    def test_reads_whole_frames(self, audio_files):
        path = audio_files.create_stereo_file([1, 2, 3], [4, 5, 6])
        source = WavFileSource(path)

        with source:
            first = source.read(8)
            rest = source.read(4096)
            end = source.read(4096)

        assert first == interleave([1, 2], [4, 5])
        assert rest == interleave([3], [6])
        assert end == b""

    def test_close_releases_file_and_is_idempotent(self, audio_files):
        source = WavFileSource(audio_files.create_stereo_file([1], [2]))
        source.open()
        assert source.wav_file is not None

        source.close()
        source.close()
        assert source.wav_file is None

    def test_read_before_open(self, audio_files):
        source = WavFileSource(audio_files.create_stereo_file([1], [2]))
        with pytest.raises(RuntimeError):
            source.read(4)
        with pytest.raises(RuntimeError):
            _ = source.audio_format

    def test_missing_file(self, tmp_path):
        source = WavFileSource(tmp_path / "missing.wav")

        with pytest.raises(AudioResourceNotFoundError) as exc_info:
            source.open()

        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert exc_info.value.resource.endswith("missing.wav")

    def test_mono_rejected_and_closed(self, audio_files):
        source = WavFileSource(audio_files.create_mono_file())

        with pytest.raises(UnsupportedAudioFormatError) as exc_info:
            source.open()

        assert exc_info.value.audio_format.channels == 1
        assert source.wav_file is None

    def test_8bit_rejected(self, audio_files):
        source = WavFileSource(audio_files.create_8bit_stereo_file())

        with pytest.raises(UnsupportedAudioFormatError) as exc_info:
            source.open()

        assert exc_info.value.audio_format.sample_width == 1
        assert exc_info.value.audio_format.signed is False

    @pytest.mark.parametrize(
        "content",
        [b"not a wav file", b"RIFF", b"RIFF\x24\x00\x00\x00WAVEjunk"],
    )
    def test_unparsable_content_rejected(self, audio_files, content):
        source = WavFileSource(audio_files.create_file(content))

        with pytest.raises(UnsupportedAudioFormatError) as exc_info:
            source.open()

        assert exc_info.value.cause is not None

    def test_zero_length_file_is_empty(self, audio_files):
        source = WavFileSource(audio_files.create_file(b""))

        with source:
            assert source.audio_format == STEREO_PCM16
            assert source.read(4096) == b""
