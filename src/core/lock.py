"""
Instance lock - serializes overlapping invocations

Rapid key repeats launch several processes at once. Only one of them may
mutate and notify at a time, the others give up after a short timeout.
"""

from contextlib import contextmanager

from filelock import FileLock, Timeout

from .errors import LockTimeoutError


@contextmanager
def instance_lock(path, timeout):
    """
    Hold an exclusive lock on ``path`` for the duration of the block.

    The lock file is created if absent and is never deleted. Raises
    ``LockTimeoutError`` when the lock cannot be taken within ``timeout``
    seconds.
    """
    lock = FileLock(str(path), timeout=timeout)
    try:
        lock.acquire()
    except Timeout as e:
        raise LockTimeoutError(f"Could not lock {path}") from e

    try:
        yield lock
    finally:
        lock.release()
