"""Configuration for the stereo channel codec and its file collaborators."""

import logging
import os
from dataclasses import asdict, dataclass
from typing import Any

from dotenv import load_dotenv

from ..audio.pcm import DEFAULT_CHUNK_SIZE, FRAME_SIZE
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class CodecConfig:
    """Runtime settings shared by extraction, mixing and file output."""

    # Bytes requested per read; affects throughput only, never decoded output
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Used when writing WAV containers around mixed or split output
    sample_rate: int = 44100

    # Channel analysis
    silence_threshold: int = 50

    # Independent channel storage
    audio_save_path: str = "./split_audio/"

    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError if any setting is out of range."""
        if self.chunk_size <= 0 or self.chunk_size % FRAME_SIZE != 0:
            raise ConfigurationError(
                f"chunk_size must be a positive multiple of {FRAME_SIZE}, "
                f"got {self.chunk_size}"
            )
        if self.sample_rate <= 0:
            raise ConfigurationError(
                f"sample_rate must be positive, got {self.sample_rate}"
            )
        if self.silence_threshold < 0:
            raise ConfigurationError(
                f"silence_threshold must not be negative, got {self.silence_threshold}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @classmethod
    def _safe_int(cls, value: str, default: int) -> int:
        """Safely parse integer value with fallback to default."""
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value '{value}', using default {default}")
            return default

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Create configuration from environment variables (and a .env file)."""
        load_dotenv()
        return cls(
            chunk_size=cls._safe_int(
                os.getenv("STEREO_CODEC_CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE)),
                DEFAULT_CHUNK_SIZE,
            ),
            sample_rate=cls._safe_int(
                os.getenv("STEREO_CODEC_SAMPLE_RATE", "44100"), 44100
            ),
            silence_threshold=cls._safe_int(
                os.getenv("STEREO_CODEC_SILENCE_THRESHOLD", "50"), 50
            ),
            audio_save_path=os.getenv("STEREO_CODEC_AUDIO_SAVE_PATH", "./split_audio/"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


_config: CodecConfig | None = None


def get_config() -> CodecConfig:
    """Return the process-wide configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = CodecConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for applications embedding the codec.

    Args:
        level: Log level name; defaults to LOG_LEVEL from the environment, then INFO
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
        ],
    )
    logging.getLogger("stereo_codec").setLevel(getattr(logging, log_level, logging.INFO))
