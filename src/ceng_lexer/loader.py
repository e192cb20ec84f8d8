"""
Source loading for the CENG lexer.

The scanner works on raw bytes; this module is the only place that touches
the filesystem on the input side.
"""

from pathlib import Path
import logging

from ceng_lexer.errors import SourceLoadError

logger = logging.getLogger(__name__)


def load_source(path: str | Path) -> bytes:
    """
    Read a CENG source file.

    Args:
        path: File to read

    Returns:
        The file contents as bytes, undecoded

    Raises:
        SourceLoadError: If the file is missing or unreadable
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceLoadError(str(path), e.strerror or str(e)) from e

    logger.debug(f"Loaded {len(data)} bytes from {path}")
    return data
