import gc
import threading
import time

import pytest

from lbtools.tls import ThreadLocalStorage


def _run_in_thread(func):
    thread = threading.Thread(target=func)
    thread.start()
    thread.join()


def _wait_until_filled(items, timeout=2.0):
    deadline = time.monotonic() + timeout
    while not items and time.monotonic() < deadline:
        gc.collect()
        time.sleep(0.005)


def test_set_and_get_in_same_thread():
    storage = ThreadLocalStorage(None)
    payload = object()
    storage.set(payload)
    assert storage.get() is payload
    storage.close()


def test_values_are_per_thread():
    storage = ThreadLocalStorage(None)
    storage.set("main")
    seen = []

    def worker():
        seen.append(storage.get())
        storage.set("worker")
        seen.append(storage.get())

    _run_in_thread(worker)
    assert seen == [None, "worker"]
    assert storage.get() == "main"
    storage.close()


def test_destructor_runs_at_thread_exit():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)

    _run_in_thread(lambda: storage.set("value"))

    _wait_until_filled(destroyed)
    assert destroyed == ["value"]
    storage.close()


def test_destructor_gets_last_value_only():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)

    def worker():
        storage.set("first")
        storage.set("second")

    _run_in_thread(worker)
    _wait_until_filled(destroyed)
    assert destroyed == ["second"]
    storage.close()


def test_destructor_skipped_for_none():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)
    finished = []

    def worker():
        storage.set("value")
        storage.set(None)
        finished.append(True)

    _run_in_thread(worker)
    gc.collect()
    assert finished == [True]
    assert destroyed == []
    storage.close()


def test_close_destroys_current_thread_value():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)
    storage.set("value")
    storage.close()
    assert destroyed == ["value"]


def test_close_is_idempotent():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)
    storage.set("value")
    storage.close()
    storage.close()
    assert destroyed == ["value"]


def test_no_destructor_after_close():
    destroyed = []
    storage = ThreadLocalStorage(destroyed.append)
    ready = threading.Event()
    release = threading.Event()

    def worker():
        storage.set("worker")
        ready.set()
        release.wait(2.0)

    thread = threading.Thread(target=worker)
    thread.start()
    ready.wait(2.0)
    storage.close()
    release.set()
    thread.join()
    gc.collect()
    assert destroyed == []


def test_use_after_close_raises():
    storage = ThreadLocalStorage(None)
    storage.close()
    with pytest.raises(RuntimeError):
        storage.set(1)
    with pytest.raises(RuntimeError):
        storage.get()


def test_context_manager_closes():
    destroyed = []
    with ThreadLocalStorage(destroyed.append) as storage:
        storage.set("value")
        assert storage.get() == "value"
    assert destroyed == ["value"]
    with pytest.raises(RuntimeError):
        storage.get()