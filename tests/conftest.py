"""Central pytest configuration and fixtures for the test suite."""

import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from stereo_codec.config.codec_config import CodecConfig, reset_config
from tests.utils.audio_test_utils import AudioFileGenerator


# ============================================================================
# Configuration
# ============================================================================

@pytest.fixture(autouse=True)
def clean_codec_config():
    """Make sure no test sees configuration cached by another."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def codec_config(tmp_path):
    """CodecConfig writing into a per-test directory."""
    return CodecConfig(
        chunk_size=64,
        sample_rate=8000,
        silence_threshold=50,
        audio_save_path=str(tmp_path / "split_audio"),
    )


# ============================================================================
# Audio data
# ============================================================================

@pytest.fixture
def audio_files(tmp_path):
    """AudioFileGenerator writing into a per-test directory."""
    return AudioFileGenerator(str(tmp_path))


@pytest.fixture
def known_stereo_pcm():
    """Two frames with hand-checked sample values.

    Frame 0: left 0x1234 (4660), right -1
    Frame 1: left 1, right -32768
    """
    data = bytes([0x34, 0x12, 0xFF, 0xFF, 0x01, 0x00, 0x00, 0x80])
    return data, [4660, 1], [-1, -32768]
