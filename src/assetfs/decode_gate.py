"""One-shot computation gate.

Each asset record owns a gate that turns its payload into bytes at most
once per process. The first caller computes; concurrent callers block
until the result is published, then share it. A failure is terminal and
the stored error is re-raised on every later call.

Only ``Exception`` subclasses are stored. A ``BaseException`` such as
``KeyboardInterrupt`` raised during compute propagates to the computing
caller and leaves the gate in ``COMPUTING`` for the rest of the process;
waiters and later callers receive an ``AssetDecodeError`` reporting the
interrupted decode.
"""

from __future__ import annotations

import enum
import threading
from typing import Callable

from core.errors import AssetDecodeError


class GateState(enum.Enum):
    """Lifecycle states of a decode gate."""

    UNCOMPUTED = "uncomputed"
    COMPUTING = "computing"
    READY = "ready"
    FAILED = "failed"


class DecodeGate:
    """Exactly-once gate publishing a bytes value or a terminal error."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._published = threading.Event()
        self._state = GateState.UNCOMPUTED
        self._value: bytes | None = None
        self._error: Exception | None = None

    @property
    def state(self) -> GateState:
        """Return the current gate state."""
        return self._state

    def run(self, compute: Callable[[], bytes]) -> bytes:
        """Return the gated value, computing it on first use.

        Args:
            compute: Callable producing the value; invoked at most once.

        Returns:
            The published value, shared by reference across callers.

        Raises:
            Exception: The error raised by the single compute attempt.
        """
        if self._state is GateState.READY:
            return self._published_value()
        with self._lock:
            is_owner = self._state is GateState.UNCOMPUTED
            if is_owner:
                self._state = GateState.COMPUTING
        if is_owner:
            self._compute(compute)
        else:
            self._published.wait()
        return self._published_value()

    def _compute(self, compute: Callable[[], bytes]) -> None:
        try:
            self._value = compute()
            self._state = GateState.READY
        except Exception as error:
            self._error = error
            self._state = GateState.FAILED
        finally:
            self._published.set()

    def _published_value(self) -> bytes:
        if self._state is GateState.READY and self._value is not None:
            return self._value
        if self._state is GateState.FAILED and self._error is not None:
            raise self._error
        raise AssetDecodeError(
            "Asset decode was interrupted before publishing a result. "
            "Restart the process to retry decoding."
        )
