"""
Pytest configuration and shared fixtures for Canopy tests.
"""

import tempfile
from pathlib import Path
from typing import Generator, List, Optional

import pytest


def create_test_config_content(
    digest_algorithm: str = "sha3_256",
    dedup_leaves: bool = False,
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    log_format: str = "console",
) -> str:
    """
    Generate test configuration YAML content.

    Args:
        digest_algorithm: Tree digest algorithm.
        dedup_leaves: Whether the CLI deduplicates leaves by default.
        log_level: Logging level.
        log_file: Optional log file path.
        log_format: "json" or "console".

    Returns:
        YAML configuration content as string.
    """
    return f"""
tree:
  digest_algorithm: {digest_algorithm}
  dedup_leaves: {str(dedup_leaves).lower()}

logging:
  level: {log_level}
  file: "{log_file or ''}"
  format: {log_format}
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_leaves() -> List[bytes]:
    """Five single-byte leaves, an odd count that exercises padding."""
    return [bytes([i]) for i in range(1, 6)]


@pytest.fixture
def make_leaves_file(temp_dir: Path):
    """
    Factory fixture that writes leaves to a hex-per-line file.

    Usage:
        def test_something(make_leaves_file):
            path = make_leaves_file([b"\\x01", b"\\x02"])
    """
    def _make_leaves_file(leaves: List[bytes], prefix: str = "0x", name: str = "leaves.txt") -> Path:
        path = temp_dir / name
        path.write_text("".join(f"{prefix}{leaf.hex()}\n" for leaf in leaves))
        return path

    return _make_leaves_file


@pytest.fixture
def make_config_file(temp_dir: Path):
    """
    Factory fixture that writes a config file and returns its path.

    Usage:
        def test_something(make_config_file):
            path = make_config_file(digest_algorithm="sha256")
    """
    def _make_config_file(**kwargs) -> Path:
        path = temp_dir / "config.yaml"
        path.write_text(create_test_config_content(**kwargs))
        return path

    return _make_config_file
