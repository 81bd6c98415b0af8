"""
Lazy, thread-safe singleton holder with a pinnable object handle.

A ``Singleton`` wraps a zero-argument factory (a class works as its own
factory) and builds the shared instance on first access. The holder can
also hand out a ``PinnedHandle``: an opaque token naming the instance's
location that stays the same until ``free()`` releases it.
"""
import itertools
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, Type, TypeVar

from pattern_demos.core.logging import get_logger

T = TypeVar("T")

logger = get_logger()

# Process-wide; tokens are never reused after free()
_handle_tokens = itertools.count(1)

# Marks an empty slot; a factory may legitimately return None
_UNSET: Any = object()


@dataclass(frozen=True)
class PinnedHandle:
    """
    token   — unique per allocation
    address — id() of the pinned instance; on CPython this is its memory
              address, other interpreters only guarantee a stable identity
    """
    token: int
    address: int


class Singleton(Generic[T]):
    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._instance: T = _UNSET
        self._handle: Optional[PinnedHandle] = None

    @property
    def instance(self) -> T:
        # check-lock-check: the common path never takes the lock
        if self._instance is _UNSET:
            with self._lock:
                if self._instance is _UNSET:
                    self._instance = self._factory()
                    logger.debug(
                        "singleton_created",
                        type=type(self._instance).__name__,
                    )
        return self._instance

    @property
    def object_id(self) -> PinnedHandle:
        target = self.instance
        with self._lock:
            if self._handle is None:
                self._handle = PinnedHandle(
                    token=next(_handle_tokens),
                    address=id(target),
                )
                logger.debug("handle_pinned", token=self._handle.token)
            return self._handle

    @property
    def is_pinned(self) -> bool:
        with self._lock:
            return self._handle is not None

    def free(self) -> None:
        """Release the pinned handle. Safe to call when nothing is pinned."""
        with self._lock:
            if self._handle is None:
                return
            logger.debug("handle_freed", token=self._handle.token)
            self._handle = None


_registry: Dict[type, Singleton] = {}
_registry_lock = threading.Lock()


def singleton_for(cls: Type[T], factory: Optional[Callable[[], T]] = None) -> Singleton[T]:
    """
    Return the process-wide holder for ``cls``, creating it on first use.

    ``factory`` builds the instance when ``cls`` needs constructor
    arguments; it only matters for the call that creates the holder.
    """
    holder = _registry.get(cls)
    if holder is None:
        with _registry_lock:
            holder = _registry.get(cls)
            if holder is None:
                holder = Singleton(factory or cls)
                _registry[cls] = holder
    return holder


def reset_singletons():
    """Forget every registered holder (tests only)."""
    with _registry_lock:
        _registry.clear()


class SingletonObject:
    """Demo type: every lookup through its holder yields one shared object."""

    @classmethod
    def holder(cls) -> "Singleton[SingletonObject]":
        return singleton_for(cls)

    @classmethod
    def get(cls) -> "SingletonObject":
        return cls.holder().instance
