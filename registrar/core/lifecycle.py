"""
Live-instance bookkeeping.
"""

import threading

from .exceptions import LifecycleError


class LiveInstanceCounter:
    """Counts instances that finished construction and were not yet released.

    Entities bind to a counter when they are constructed and hand it back
    exactly once when they are released. A counter is an ordinary object so
    a registry, a test, or a scope can own its own instead of sharing the
    class-wide default.
    """
    
    def __init__(self, name: str = "students"):
        self._name = name
        self._value = 0
        self._lock = threading.Lock()
    
    @property
    def name(self) -> str:
        return self._name
    
    @property
    def value(self) -> int:
        """Current number of live instances."""
        return self._value
    
    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value
    
    def decrement(self) -> int:
        with self._lock:
            if self._value == 0:
                raise LifecycleError(f"Live count for {self._name} would drop below zero")
            self._value -= 1
            return self._value
    
    def __int__(self) -> int:
        return self._value
    
    def __repr__(self) -> str:
        return f"LiveInstanceCounter(name={self._name!r}, value={self._value})"
