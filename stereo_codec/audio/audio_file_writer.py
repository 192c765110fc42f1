"""WAV file writers for mixed stereo output and independently stored channels."""

import contextlib
import logging
import os
import threading
import wave
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

from .channel_mixer import mix_channels
from .pcm import SAMPLE_WIDTH, encode_mono

logger = logging.getLogger(__name__)


class AudioFileWriter:
    """
    Writes raw PCM bytes to a WAV file with a correct header.

    The codec produces headerless PCM; this class supplies the container.
    Writes are serialized with a lock so a writer may be shared between threads.
    """

    def __init__(
        self,
        file_path: str | os.PathLike,
        sample_rate: int = 44100,
        channels: int = 2,
        sample_width: int = SAMPLE_WIDTH,
    ):
        """
        Initialize audio file writer.

        Args:
            file_path: Path where the WAV file will be saved
            sample_rate: Audio sample rate in Hz
            channels: Number of interleaved channels in the written data
            sample_width: Number of bytes per sample (2 for 16-bit)
        """
        self.file_path = Path(file_path)
        self.sample_rate = sample_rate
        self.channels = channels
        self.sample_width = sample_width

        self.file_path.parent.mkdir(parents=True, exist_ok=True)

        self.is_recording = False
        self.bytes_written = 0
        self.total_frames = 0
        self._wave_file = None
        self._lock = threading.Lock()

        logger.debug(
            f"🎵 AudioFileWriter: {file_path} "
            f"({sample_rate}Hz, {channels}ch, {sample_width * 8}-bit)"
        )

    @property
    def frame_size(self) -> int:
        return self.channels * self.sample_width

    def start_recording(self) -> bool:
        """
        Open the WAV file for writing.

        Returns:
            bool: True if the file was opened, False if already open or on failure
        """
        with self._lock:
            if self.is_recording:
                logger.warning(
                    f"⚠️ AudioFileWriter: Already recording to {self.file_path}"
                )
                return False

            try:
                self._wave_file = wave.open(str(self.file_path), "wb")
                self._wave_file.setnchannels(self.channels)
                self._wave_file.setsampwidth(self.sample_width)
                self._wave_file.setframerate(self.sample_rate)

                self.is_recording = True
                self.bytes_written = 0
                self.total_frames = 0
                return True

            except OSError as e:
                logger.error(f"❌ AudioFileWriter: Failed to start recording: {e}")
                if self._wave_file:
                    with contextlib.suppress(Exception):
                        self._wave_file.close()
                    self._wave_file = None
                return False

    def write_audio_data(self, audio_data: bytes) -> bool:
        """
        Append PCM bytes to the file.

        Args:
            audio_data: Raw PCM bytes, a whole number of frames

        Returns:
            bool: True if the data was written, False if not recording
        """
        if len(audio_data) % self.frame_size != 0:
            raise ValueError(
                f"{len(audio_data)} bytes is not a whole number of "
                f"{self.frame_size}-byte frames"
            )

        with self._lock:
            if not self.is_recording or not self._wave_file:
                return False

            self._wave_file.writeframes(audio_data)
            self.bytes_written += len(audio_data)
            self.total_frames += len(audio_data) // self.frame_size
            return True

    def stop_recording(self) -> dict[str, Any]:
        """
        Close the file.

        Returns:
            dict: File path, duration (from frames written), sizes and format
        """
        with self._lock:
            if not self.is_recording:
                return {"error": "Not recording"}

            try:
                self._wave_file.close()
            finally:
                self._wave_file = None
                self.is_recording = False

            stats = self._statistics()

            logger.info(
                f"🎵 AudioFileWriter: Wrote {self.file_path} "
                f"({stats['duration_seconds']:.2f}s, {self.bytes_written:,} bytes)"
            )
            return stats

    def get_statistics(self) -> dict[str, Any]:
        """Get current writer statistics."""
        with self._lock:
            return self._statistics()

    def _statistics(self) -> dict[str, Any]:
        """Build statistics (assumes lock is held)."""
        return {
            "file_path": str(self.file_path),
            "duration_seconds": self.total_frames / self.sample_rate,
            "bytes_written": self.bytes_written,
            "total_frames": self.total_frames,
            "sample_rate": self.sample_rate,
            "channels": self.channels,
            "sample_width": self.sample_width,
            "file_size_bytes": (
                self.file_path.stat().st_size if self.file_path.exists() else 0
            ),
        }

    def is_active(self) -> bool:
        """Check if currently recording."""
        return self.is_recording

    def __enter__(self) -> "AudioFileWriter":
        if not self.start_recording():
            raise OSError(f"Cannot open {self.file_path} for writing")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop_recording()


def write_stereo_wav(
    file_path: str | os.PathLike,
    left: Sequence[int],
    right: Sequence[int],
    sample_rate: int = 44100,
) -> dict[str, Any]:
    """
    Interleave two channel buffers and store them as a 16-bit stereo WAV file.

    Raises:
        ChannelLengthMismatchError: If the buffers differ in length; no file is created
    """
    audio_data = mix_channels(left, right)
    with AudioFileWriter(file_path, sample_rate, channels=2) as writer:
        writer.write_audio_data(audio_data)
    return writer.get_statistics()


class DualChannelAudioSaver:
    """
    Stores left and right channel buffers as separate mono WAV files.

    File names are timestamped so repeated saves into the same directory do
    not overwrite each other.
    """

    def __init__(
        self,
        save_path: str | os.PathLike = "./split_audio/",
        sample_rate: int = 44100,
        prefix: str = "",
    ):
        self.save_path = Path(save_path)
        self.sample_rate = sample_rate
        self.prefix = prefix

        self.save_path.mkdir(parents=True, exist_ok=True)

    def _channel_path(self, channel_name: str, timestamp: str) -> Path:
        name = f"{self.prefix}{channel_name}_channel_{timestamp}.wav"
        return self.save_path / name

    def save(self, left: Sequence[int], right: Sequence[int]) -> dict[str, Any]:
        """
        Write both channels to mono files.

        Returns:
            dict: Per-channel writer statistics
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        stats = {}

        for channel_name, samples in (("left", left), ("right", right)):
            writer = AudioFileWriter(
                self._channel_path(channel_name, timestamp),
                self.sample_rate,
                channels=1,
            )
            with writer:
                writer.write_audio_data(encode_mono(samples))
            stats[f"{channel_name}_channel"] = writer.get_statistics()

        if len(left) != len(right):
            logger.warning(
                f"⚠️ DualChannelAudioSaver: channel lengths differ "
                f"(left {len(left)}, right {len(right)})"
            )

        logger.info(
            f"🎵 DualChannelAudioSaver: Saved {stats['left_channel']['file_path']} "
            f"and {stats['right_channel']['file_path']}"
        )
        return stats
