import threading


class IdGenerator:
    """Thread-safe source of strictly increasing integer ids."""

    def __init__(self, start: int = 1):
        self._next_id = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next_id
            self._next_id += 1
        return value

    def reserve(self, value: int) -> int:
        """Claim an id assigned by hand so later ``next()`` calls skip past it."""
        with self._lock:
            if value >= self._next_id:
                self._next_id = value + 1
        return value

    def peek(self) -> int:
        with self._lock:
            return self._next_id
