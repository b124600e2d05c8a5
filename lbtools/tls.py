"""Thread-local storage with a per-thread destructor."""

import threading
import weakref
from typing import Any, Callable, Optional

__all__ = ["ThreadLocalStorage"]

Destructor = Callable[[Any], None]


class _Cell:
    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value


class _Guard:
    """Lives only in one thread's local storage; dies with the thread."""

    __slots__ = ("__weakref__",)


class _State:
    __slots__ = ("destructor", "closed")

    def __init__(self, destructor: Optional[Destructor]) -> None:
        self.destructor = destructor
        self.closed = False


def _on_thread_exit(state: _State, cell: _Cell) -> None:
    if state.closed or state.destructor is None or cell.value is None:
        return
    value, cell.value = cell.value, None
    state.destructor(value)


class ThreadLocalStorage:
    """A storage slot holding one value per thread.

    When a thread ends, *destructor* is called with that thread's value,
    unless the value is None or *destructor* is None.
    """

    def __init__(self, destructor: Optional[Destructor]) -> None:
        self._state = _State(destructor)
        self._local = threading.local()

    def _check_open(self) -> None:
        if self._state.closed:
            raise RuntimeError("thread-local storage is closed")

    def set(self, data: Any) -> None:
        """Set the value for the calling thread."""
        self._check_open()
        cell = getattr(self._local, "cell", None)
        if cell is not None:
            cell.value = data
            return
        cell = _Cell(data)
        guard = _Guard()
        weakref.finalize(guard, _on_thread_exit, self._state, cell)
        self._local.cell = cell
        self._local.guard = guard

    def get(self) -> Any:
        """Return the calling thread's value, or None if it has none."""
        self._check_open()
        cell = getattr(self._local, "cell", None)
        return None if cell is None else cell.value

    def close(self) -> None:
        """Destroy the calling thread's value and release the storage.

        Values of other threads are not destroyed.
        """
        if self._state.closed:
            return
        data = self.get()
        self._state.closed = True
        if data is not None and self._state.destructor is not None:
            self._state.destructor(data)
        self._local = threading.local()

    def __enter__(self) -> "ThreadLocalStorage":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()