"""Base test class providing common functionality for all tests.

Handles logging setup, configuration reset and temporary file cleanup so
individual test modules only deal with codec behaviour.
"""

import logging
import os
import sys
import tempfile
import time
from pathlib import Path
from unittest.mock import patch

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from stereo_codec.config.codec_config import reset_config


class BaseTest:
    """Base test class with common functionality for all tests."""

    def setup_method(self):
        """Standard setup method called before each test."""
        self.setup_test_logging()

        # Forget any configuration cached by a previous test
        reset_config()

        self.temp_files = []
        self.test_start_time = time.time()

    def teardown_method(self):
        """Standard teardown method called after each test."""
        self.cleanup_temp_files()
        reset_config()

        test_duration = time.time() - self.test_start_time
        logging.debug(f"Test completed in {test_duration:.3f}s")

    def setup_test_logging(self):
        """Configure logging for test environment."""
        log_level = os.getenv("TEST_LOG_LEVEL", "WARNING")
        logging.basicConfig(
            level=getattr(logging, log_level),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[logging.StreamHandler()],
        )

    def create_temp_file(self, suffix: str = ".tmp", content: bytes = None) -> str:
        """Create temporary file that will be cleaned up automatically."""
        fd, temp_path = tempfile.mkstemp(suffix=suffix)
        os.close(fd)

        if content:
            with open(temp_path, "wb") as f:
                f.write(content)

        self.temp_files.append(temp_path)
        return temp_path

    def cleanup_temp_files(self):
        """Clean up all temporary files created during test."""
        for temp_file in self.temp_files:
            try:
                if os.path.exists(temp_file):
                    os.unlink(temp_file)
            except OSError as e:
                logging.warning(f"Failed to cleanup temp file {temp_file}: {e}")
        self.temp_files.clear()

    def patch_environment(self, env_vars: dict[str, str], clear: bool = False):
        """Context manager for patching environment variables."""
        return patch.dict(os.environ, env_vars, clear=clear)
