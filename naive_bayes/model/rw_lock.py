# ==============================================
# ReadWriteLock
# ==============================================
#
# PURPOSE:
#   Let many classify() calls read the counts at once while any
#   train() call gets the counts to itself.
#
# CLASS: ReadWriteLock
# --------------------
#   - read()  → context manager, shared
#   - write() → context manager, exclusive
#
#   Once a writer is waiting, new readers wait behind it so a steady
#   stream of classify() calls cannot block training forever.
#
# ==============================================

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """Shared-reader, exclusive-writer lock built on a Condition."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()
