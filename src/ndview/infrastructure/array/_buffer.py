"""
Copy-on-write buffer handles.

Every `NDArray` owns exactly one `CowBuffer` handle. Views created from an
array receive a *new* handle that points at the same underlying storage, so
no element is copied by structural transforms. The storage remembers its
live handles; when one of them asks for mutable access while others are
still alive, that handle first receives a private copy of the data.

Design notes
------------
- Live handles are tracked with a `weakref.WeakSet`, so a view that goes out
  of scope stops counting as a sharer without any explicit release call.
- The split is performed under a per-storage lock. Copy-on-write is a
  single-writer optimization, not a concurrency primitive: concurrent
  mutation of the same array from several threads still needs external
  synchronization.
- The flat data is either a one-dimensional ``numpy.ndarray`` or a Python
  ``list``; both provide ``len``, item access and ``.copy()``.
"""

from __future__ import annotations

import threading
import weakref
from typing import Any


class _Storage:
    """Shared flat data plus the set of handles currently reading it."""

    __slots__ = ("data", "holders", "lock", "__weakref__")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.holders: "weakref.WeakSet[CowBuffer]" = weakref.WeakSet()
        self.lock = threading.Lock()


class CowBuffer:
    """
    A copy-on-write handle over a flat element buffer.

    Parameters
    ----------
    data : Any
        Flat buffer (1-D ndarray or list). Ownership passes to the handle.
    """

    __slots__ = ("_storage", "__weakref__")

    def __init__(self, data: Any) -> None:
        self._attach(_Storage(data))

    def _attach(self, storage: _Storage) -> None:
        self._storage = storage
        storage.holders.add(self)

    # ----------------------------
    # Read access
    # ----------------------------
    @property
    def data(self) -> Any:
        """Read-only view of the flat data (callers must not mutate it)."""
        return self._storage.data

    def __len__(self) -> int:
        return len(self._storage.data)

    def __getitem__(self, offset: int) -> Any:
        return self._storage.data[offset]

    # ----------------------------
    # Sharing
    # ----------------------------
    def share(self) -> "CowBuffer":
        """Return a new handle reading the same storage."""
        other = CowBuffer.__new__(CowBuffer)
        other._attach(self._storage)
        return other

    def is_shared(self) -> bool:
        """True when at least one other live handle reads the same storage."""
        return len(self._storage.holders) > 1

    def same_storage(self, other: "CowBuffer") -> bool:
        return self._storage is other._storage

    # ----------------------------
    # Write access
    # ----------------------------
    def make_mut(self) -> Any:
        """
        Return flat data that this handle may mutate.

        If other handles share the storage, the data is copied into a new
        storage owned by this handle alone; the other handles keep the
        original.
        """
        storage = self._storage
        with storage.lock:
            if len(storage.holders) > 1:
                private = _Storage(storage.data.copy())
                storage.holders.discard(self)
                self._attach(private)
        return self._storage.data
