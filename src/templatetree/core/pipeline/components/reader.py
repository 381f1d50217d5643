from __future__ import annotations

"""
File Content Reading Component.

Blocking primitives used by the scanner through ``asyncio.to_thread``. Text
is decoded as UTF-8 with the 'replace' strategy so binary artifacts or
corrupt sequences never interrupt a scan.
"""

import os


def get_file_size(file_path: str) -> int:
    """
    Return the size in bytes of a file.

    Raises:
        OSError: If the file metadata cannot be fetched.
    """
    return os.stat(file_path).st_size


def read_text_content(file_path: str) -> str:
    """
    Read a whole file as text, verbatim apart from undecodable bytes.

    Newlines are preserved as stored on disk.

    Args:
        file_path: Absolute path to the target file.

    Returns:
        str: Decoded file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()
