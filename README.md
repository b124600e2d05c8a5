# lbtools

A small toolbox for multi-threaded Python programs. It has no dependencies
outside the standard library.

## Installation

```
pip install lbtools
```

## What is inside

### `lbtools.locks`

- `UniqueLock(lock)` acquires `lock` (anything with `acquire()` and
  `release()`, such as `threading.Lock`) as soon as it is created. It gives the
  lock back when its `with` block ends, or earlier through `release()`.
  `owns_lock()` tells whether the holder still has the lock. Calling
  `release()` when the lock is not held raises `RuntimeError`. Passing `None`
  gives a holder that does nothing.
- `UniqueSharedLock(lock)` does the same for a shared (read) lock. The lock
  has to provide `acquire_shared()` and `release_shared()`. With `None`,
  `release()` does nothing. Releasing twice raises `RuntimeError`.
- Both holders also accept an object with a `lock` attribute that holds a
  suitable lock. Any other object raises `TypeError`.
- `ScopedWrite`, `ScopedRead` and `ScopedFastWrite` are aliases of
  `UniqueLock`. `ScopedFastRead` is an alias of `UniqueSharedLock`.

### `lbtools.tls`

`ThreadLocalStorage(destructor)` holds one value per thread. Use `set(data)`
to store a value and `get()` to read it. `get()` returns `None` if the
calling thread has set nothing.

When a thread ends, `destructor` is called with that thread's value. This does
not happen when the value is `None`, when `destructor` is `None`, or when the
storage has been closed. `close()`, which also runs at the end of a `with`
block, destroys the calling thread's value and shuts the storage. The values
of other threads are not destroyed. After `close()`, `set()` and `get()` raise
`RuntimeError`.

### `lbtools.visitor`

`VisitorResult` is an enum for traversal callbacks. Its members are
`CONTINUE`, `TERMINATE` and `PRUNE`. `str()` of a member gives `"continue"`,
`"terminate"` or `"prune"`.

### `lbtools.text`

`prepend(input, text)` puts `text` in front of every line of `input`. A
trailing newline starts an empty last line, and that line gets `text` as
well.

### `lbtools.types`

- Constants: `UNDEFINED_UINT16`, `UNDEFINED_UINT32`, `UNDEFINED_UINT64`,
  `MAX_UINT32`, `TIMEOUT_INDEFINITE`, `TIMEOUT_DEFAULT`, `BIT_ALL_32`,
  `BIT_ALL_64` and `BIT_NONE`.
- Size constants from `SIZE_1KB` up to `SIZE_4GB`.
- The `Strings` alias (`list[str]`).
- `bit(index)` returns the mask for bit 1 to 64. Any other index raises
  `ValueError`.
- `lb_max(a, b)` and `lb_min(a, b)`.
- `convert_to_timespec(milliseconds)` returns a `Timespec(tv_sec, tv_nsec)`
  for an unsigned 32-bit millisecond count. A value outside that range raises
  `ValueError`.

## Example

```python
import threading

from lbtools.locks import UniqueLock
from lbtools.text import prepend
from lbtools.tls import ThreadLocalStorage
from lbtools.types import convert_to_timespec
from lbtools.visitor import VisitorResult

mutex = threading.Lock()
with UniqueLock(mutex) as guard:
    assert guard.owns_lock()
assert not mutex.locked()

print(prepend("foo\nbar", "> "))      # "> foo\n> bar"

with ThreadLocalStorage(destructor=None) as storage:
    storage.set(42)
    assert storage.get() == 42

print(VisitorResult.PRUNE)            # prune
print(convert_to_timespec(1500))      # Timespec(tv_sec=1, tv_nsec=500000000)
```

## What it does not do

This is a library only and has no command-line program. It does not supply a
shared (reader/writer) lock of its own. `UniqueSharedLock` wraps a lock that
you provide.

## Running the tests

```
pip install -e ".[test]"
pytest
```