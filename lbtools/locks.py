"""Scoped exclusive and shared lock holders."""

from typing import Any, Optional

__all__ = [
    "UniqueLock",
    "UniqueSharedLock",
    "ScopedFastRead",
    "ScopedFastWrite",
    "ScopedRead",
    "ScopedWrite",
]


def _resolve(lock: Any, method: str) -> Any:
    """Return the lock itself, or the ``lock`` attribute of a lockable."""
    if lock is None or hasattr(lock, method):
        return lock
    inner = getattr(lock, "lock", None)
    if inner is not None and hasattr(inner, method):
        return inner
    raise TypeError(f"{type(lock).__name__!r} object has no {method}()")


class UniqueLock:
    """Hold an exclusive lock from construction until released.

    The lock is acquired at once. Passing None gives a holder that does
    nothing. An object with a ``lock`` attribute may be passed instead of
    the lock itself.
    """

    def __init__(self, lock: Optional[Any]) -> None:
        self._lock = _resolve(lock, "acquire")
        self._owned = False
        if self._lock is not None:
            self._lock.acquire()
            self._owned = True

    def __enter__(self) -> "UniqueLock":
        return self

    def __exit__(self, *args: Any) -> None:
        if self._owned:
            self.release()

    def release(self) -> None:
        """Release the held lock."""
        if not self._owned:
            raise RuntimeError("lock is not owned")
        self._owned = False
        self._lock.release()

    def owns_lock(self) -> bool:
        """Return whether the lock is currently held by this holder."""
        return self._owned


class UniqueSharedLock:
    """Hold a shared (read) lock from construction until released.

    The lock must provide ``acquire_shared()`` and ``release_shared()``.
    Passing None gives a holder that does nothing.
    """

    def __init__(self, lock: Optional[Any]) -> None:
        self._lock = _resolve(lock, "acquire_shared")
        self._held = False
        if self._lock is not None:
            self._lock.acquire_shared()
            self._held = True

    def __enter__(self) -> "UniqueSharedLock":
        return self

    def __exit__(self, *args: Any) -> None:
        if self._held:
            self.release()

    def release(self) -> None:
        """Release the shared lock; does nothing for a None lock."""
        if self._lock is None:
            return
        if not self._held:
            raise RuntimeError("shared lock already released")
        self._held = False
        self._lock.release_shared()


ScopedFastRead = UniqueSharedLock
ScopedFastWrite = UniqueLock
ScopedRead = UniqueLock
ScopedWrite = UniqueLock