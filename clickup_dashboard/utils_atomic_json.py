#!/usr/bin/env python3
"""
Utility functions for atomic JSON file operations.

Prevents corruption by ensuring the dashboard data file is never left in a
half-written state.
"""

import json
import os
import shutil
import stat
import tempfile
from typing import Any


def _copy_target_mode(temp_path: str, output_file: str) -> None:
    """Give the temp file the target's permissions, or the umask default for a new file."""
    if os.path.exists(output_file):
        mode = stat.S_IMODE(os.stat(output_file).st_mode)
    else:
        umask = os.umask(0)
        os.umask(umask)
        mode = 0o666 & ~umask
    os.chmod(temp_path, mode)


def atomic_json_save(data: dict[str, Any], output_file: str) -> bool:
    """
    Save JSON data to file using atomic write operations.

    1. Write to a temporary file in the target directory
    2. Validate the JSON is correct
    3. Atomically move the temp file to the final location

    If any step fails the previous file is left untouched.

    Args:
        data: Dictionary to save as JSON (2-space indent)
        output_file: Target file path

    Returns:
        True if save succeeded

    Raises:
        OSError: If the file cannot be written
        TypeError: If data is not JSON serializable
    """
    output_dir = os.path.dirname(os.path.abspath(output_file))
    os.makedirs(output_dir, exist_ok=True)

    # Create temp file in same directory (for atomic move)
    temp_fd, temp_path = tempfile.mkstemp(suffix=".json", dir=output_dir, text=True)

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        # Verify the temp file is valid JSON before moving
        with open(temp_path, encoding="utf-8") as f:
            json.load(f)

        _copy_target_mode(temp_path, output_file)
        shutil.move(temp_path, output_file)
        return True

    except Exception:
        if os.path.exists(temp_path):
            os.remove(temp_path)
        raise
