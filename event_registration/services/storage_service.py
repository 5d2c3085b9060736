"""Low-level JSON file I/O operations with locking."""
import json
import logging
import os
import shutil
import sys
import tempfile
import time
from contextlib import contextmanager
from typing import Any, Dict

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Dict[str, Any]:
    """
    Load and parse JSON file with UTF-8 encoding.

    Args:
        file_path: Path to JSON file
        retry_count: Number of retry attempts for permission errors (default: 3)
        retry_delay: Delay in seconds between retries (default: 0.1)

    Returns:
        dict: Parsed JSON content

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        PermissionError: If file not readable after retries
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    for attempt in range(retry_count):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except PermissionError:
            if attempt < retry_count - 1:
                time.sleep(retry_delay)
                continue
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Malformed JSON in {file_path}: {e.msg}",
                e.doc,
                e.pos
            )

    raise PermissionError(f"Cannot read file after {retry_count} attempts: {file_path}")


def save_json(file_path: str, data: Dict[str, Any], backup: bool = True) -> None:
    """
    Save data to JSON file atomically with UTF-8 encoding.

    The content is written to a temporary file in the same directory and
    moved over the target with os.replace, so readers never see a partial
    document.

    Args:
        file_path: Path to JSON file
        data: Dictionary to save
        backup: If True, copy the previous file to <file>.backup first

    Raises:
        IOError: If backup or write fails
    """
    dir_path = os.path.dirname(file_path)
    if dir_path and not os.path.exists(dir_path):
        os.makedirs(dir_path, exist_ok=True)

    if backup and os.path.exists(file_path):
        backup_path = f"{file_path}.backup"
        try:
            shutil.copy2(file_path, backup_path)
        except (IOError, PermissionError) as e:
            raise IOError(f"Failed to create backup: {e}")

    temp_fd, temp_path = tempfile.mkstemp(
        dir=dir_path if dir_path else ".",
        prefix=".tmp_",
        suffix=".json"
    )

    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())

        os.replace(temp_path, file_path)

    except Exception as e:
        if os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError:
                logger.warning(f"Could not remove temp file {temp_path}")
        raise IOError(f"Failed to write file {file_path}: {e}")


def ensure_json_file(file_path: str, default: Dict[str, Any]) -> bool:
    """
    Create a JSON file holding ``default`` if it does not exist yet.

    The document is written to a temporary file and hard-linked into place,
    so concurrent callers never see a partial file or overwrite one that
    another caller has just created.

    Returns:
        True if the file was created by this call, False if it already existed
    """
    if os.path.exists(file_path):
        return False

    dir_path = os.path.dirname(file_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(
        dir=dir_path if dir_path else ".",
        prefix=".tmp_",
        suffix=".json"
    )
    try:
        with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
            json.dump(default, f, ensure_ascii=False, indent=2)
        os.link(temp_path, file_path)
    except FileExistsError:
        return False
    finally:
        os.remove(temp_path)

    logger.info(f"Created data file {file_path}")
    return True


@contextmanager
def lock_file(file_path: str, timeout: float = 5.0):
    """
    Context manager for an exclusive lock guarding ``file_path``.

    The lock is held on a sidecar ``<file>.lock`` rather than the data file
    itself, because save_json replaces the data file on every write.

    Args:
        file_path: Path to the data file to guard
        timeout: Maximum seconds to wait for lock acquisition (default: 5.0)

    Usage:
        with lock_file('data/registrations.json'):
            data = load_json('data/registrations.json')
            data['registrations'].append(record)
            save_json('data/registrations.json', data)

    Raises:
        TimeoutError: If unable to acquire lock within timeout
    """
    lock_path = f"{file_path}.lock"
    dir_path = os.path.dirname(lock_path)
    if dir_path:
        os.makedirs(dir_path, exist_ok=True)

    lock_fd = open(lock_path, "a+")
    start_time = time.time()
    try:
        while True:
            try:
                if sys.platform == "win32":
                    lock_fd.seek(0)
                    msvcrt.locking(lock_fd.fileno(), msvcrt.LK_NBLCK, 1)
                else:
                    fcntl.flock(lock_fd.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
                break
            except OSError:
                if time.time() - start_time > timeout:
                    raise TimeoutError(f"Could not acquire lock on {file_path} within {timeout}s")
                time.sleep(0.05)

        try:
            yield
        finally:
            if sys.platform == "win32":
                lock_fd.seek(0)
                msvcrt.locking(lock_fd.fileno(), msvcrt.LK_UNLCK, 1)
            else:
                fcntl.flock(lock_fd.fileno(), fcntl.LOCK_UN)
    finally:
        lock_fd.close()
