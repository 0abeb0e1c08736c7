"""
Exclusive OS-level locks on open files

POSIX uses ``fcntl.flock``; Windows locks the first byte with ``msvcrt``.
Locks are non-blocking: a file held elsewhere fails immediately.
"""

import os
from typing import IO

if os.name == "nt":
    import msvcrt

    def lock_file(handle: IO) -> None:
        """Take an exclusive lock on ``handle``, raises OSError if held."""
        position = handle.tell()
        handle.seek(0)
        try:
            msvcrt.locking(handle.fileno(), msvcrt.LK_NBLCK, 1)
        finally:
            handle.seek(position)

    def unlock_file(handle: IO) -> None:
        """Release a lock taken with ``lock_file``."""
        position = handle.tell()
        handle.seek(0)
        try:
            msvcrt.locking(handle.fileno(), msvcrt.LK_UNLCK, 1)
        finally:
            handle.seek(position)

else:
    import fcntl

    def lock_file(handle: IO) -> None:
        """Take an exclusive lock on ``handle``, raises OSError if held."""
        fcntl.flock(handle.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)

    def unlock_file(handle: IO) -> None:
        """Release a lock taken with ``lock_file``."""
        fcntl.flock(handle.fileno(), fcntl.LOCK_UN)
