import os
import time
import threading
from collections import deque


class EventLogger:
    """Thread-safe sink for timestamped diagnostic messages.

    The most recent messages are kept in memory so tests and tools can
    inspect them. When ``log_path`` is given every entry is also appended
    to that file, which lets several processes share one trace.
    """

    def __init__(self, log_path: str | None = None, *, max_events: int = 1000) -> None:
        self.log_path = log_path
        self._lock = threading.Lock()
        self._events = deque(maxlen=max_events)
        self._fp = None
        self._read_pos = 0
        self._unsynced = deque()
        if log_path:
            directory = os.path.dirname(log_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            # allow reading appended lines from other writers
            self._fp = open(log_path, "a+", encoding="utf-8")
            self._fp.seek(0, os.SEEK_END)
            self._read_pos = self._fp.tell()

    def close(self) -> None:
        """Close the underlying log file, if any."""
        with self._lock:
            if self._fp is not None:
                self._fp.close()
                self._fp = None

    def log(self, message: str) -> None:
        """Record ``message`` with a timestamp."""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        entry = f"[{timestamp}] {message}"
        with self._lock:
            if self._fp is not None:
                self._fp.seek(0, os.SEEK_END)
                caught_up = self._fp.tell() == self._read_pos
                self._fp.write(entry + "\n")
                self._fp.flush()
                if caught_up:
                    self._read_pos = self._fp.tell()
                else:
                    # sync() will meet this line again after other writers' lines
                    self._unsynced.append(entry)
            self._events.append(entry)

    def sync(self) -> None:
        """Pick up lines appended to ``log_path`` by other writers."""
        with self._lock:
            if self._fp is None:
                return
            self._fp.flush()
            self._fp.seek(self._read_pos)
            for line in self._fp:
                entry = line.rstrip("\n")
                if self._unsynced and entry == self._unsynced[0]:
                    self._unsynced.popleft()
                    continue
                self._events.append(entry)
            self._read_pos = self._fp.tell()
            self._fp.seek(0, os.SEEK_END)

    def get_events(self, offset: int = 0, limit: int | None = None) -> list[str]:
        """Return recent entries stored in memory."""
        with self._lock:
            entries = list(self._events)
        if offset < 0:
            offset = 0
        end = offset + limit if limit is not None else None
        return entries[offset:end]
