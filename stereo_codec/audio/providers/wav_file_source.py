"""PCM byte source that reads interleaved frames from a WAV file."""

import logging
import os
import wave
from pathlib import Path

from ...core.interfaces import STEREO_PCM16, AudioFormat, AudioSource
from ...utils.exceptions import AudioResourceNotFoundError, UnsupportedAudioFormatError

logger = logging.getLogger(__name__)


class WavFileSource(AudioSource):
    """Audio source backed by a WAV file on disk."""

    def __init__(self, file_path: str | os.PathLike):
        self.file_path = Path(file_path)
        self.wav_file: wave.Wave_read | None = None
        self._format: AudioFormat | None = None
        self._is_empty = False

    def open(self) -> None:
        """Open the WAV file and validate the 16-bit stereo assumption."""
        if self.wav_file is not None:
            return

        try:
            if not self.file_path.is_file():
                raise FileNotFoundError(str(self.file_path))
            if self.file_path.stat().st_size == 0:
                # Zero-length resource: nothing to decode
                logger.info(f"📁 Empty audio file: {self.file_path}")
                self._format = STEREO_PCM16
                self._is_empty = True
                return
            wav_file = wave.open(str(self.file_path), "rb")
        except OSError as e:
            logger.warning(f"⚠️ Cannot open audio file {self.file_path}: {e}")
            raise AudioResourceNotFoundError(str(self.file_path), cause=e) from e
        except (wave.Error, EOFError) as e:
            logger.warning(f"⚠️ Not a readable PCM WAV file {self.file_path}: {e}")
            raise UnsupportedAudioFormatError(
                f"Cannot parse {self.file_path} as PCM WAV: {e}", cause=e
            ) from e

        audio_format = AudioFormat(
            sample_rate=wav_file.getframerate(),
            channels=wav_file.getnchannels(),
            sample_width=wav_file.getsampwidth(),
            byte_order="little",
            # WAV stores 8-bit PCM unsigned, wider widths signed
            signed=wav_file.getsampwidth() > 1,
        )

        logger.info(f"📁 WAV file properties: {audio_format.describe()}")

        if not audio_format.is_stereo_pcm16():
            wav_file.close()
            raise UnsupportedAudioFormatError(
                f"{self.file_path} is {audio_format.describe()}, "
                "expected 16-bit little-endian signed stereo",
                audio_format=audio_format,
            )

        self.wav_file = wav_file
        self._format = audio_format

    def read(self, size: int) -> bytes:
        if self._is_empty:
            return b""
        if self.wav_file is None:
            raise RuntimeError(f"WAV source not opened: {self.file_path}")
        return self.wav_file.readframes(max(size // self._format.frame_size, 1))

    def close(self) -> None:
        if self.wav_file:
            try:
                self.wav_file.close()
                logger.debug(f"📁 WAV file closed: {self.file_path}")
            finally:
                self.wav_file = None

    @property
    def audio_format(self) -> AudioFormat:
        if self._format is None:
            raise RuntimeError(f"WAV source not opened: {self.file_path}")
        return self._format

    def describe(self) -> str:
        return str(self.file_path)
