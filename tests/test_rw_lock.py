# ==============================================
# Tests for ReadWriteLock
# ==============================================

import threading
import time

from naive_bayes.model.rw_lock import ReadWriteLock


class TestReadWriteLock:
    """Shared readers, exclusive writer."""

    def test_readers_share(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(2, timeout=5)

        def reader():
            with lock.read():
                # Both readers must be inside at the same time to pass
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert not inside.broken

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events = []
        writer_in = threading.Event()

        def writer():
            with lock.write():
                writer_in.set()
                events.append("write-start")
                time.sleep(0.05)
                events.append("write-end")

        def reader():
            writer_in.wait(timeout=5)
            with lock.read():
                events.append("read")

        w = threading.Thread(target=writer)
        r = threading.Thread(target=reader)
        w.start()
        r.start()
        w.join(timeout=5)
        r.join(timeout=5)

        assert events == ["write-start", "write-end", "read"]

    def test_released_after_exception(self):
        lock = ReadWriteLock()
        try:
            with lock.write():
                raise RuntimeError("boom")
        except RuntimeError:
            pass

        acquired = []

        def reader():
            with lock.read():
                acquired.append(True)

        t = threading.Thread(target=reader)
        t.start()
        t.join(timeout=5)
        assert acquired == [True]
