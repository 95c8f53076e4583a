"""Shared control state for a search running on worker threads."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum
from typing import TextIO


class HaltStatus(IntEnum):
    """Reason a search was asked to halt."""

    NONE = 0
    PROBABILISTIC = 1
    MAX_ITERATIONS = 2
    USER_INTERRUPT = 3


class Mode(IntEnum):
    """Whether a search is currently running."""

    STOPPED = 0
    SEARCHING = 1


class ThreadControl:
    """Thread-safe halt flag, search mode and serialized output."""

    def __init__(self, outfile: TextIO | None = None) -> None:
        self._halt_lock = threading.Lock()
        self._halt_status = HaltStatus.NONE
        self._mode_lock = threading.Lock()
        self._mode = Mode.STOPPED
        self._stopped = threading.Event()
        self._stopped.set()
        self._print_lock = threading.Lock()
        self._check_stop_lock = threading.Lock()
        self._check_stop_active = False
        self.print_info_interval = 0
        self.check_stopping_condition_interval = 0
        self.outfile = sys.stdout if outfile is None else outfile
        self.start_time = time.monotonic()

    @property
    def halt_status(self) -> HaltStatus:
        with self._halt_lock:
            return self._halt_status

    def is_halted(self) -> bool:
        return self.halt_status != HaltStatus.NONE

    def halt(self, status: HaltStatus) -> bool:
        """Record a halt reason; only the first reason is kept."""
        with self._halt_lock:
            if self._halt_status == HaltStatus.NONE and status != HaltStatus.NONE:
                self._halt_status = HaltStatus(status)
                return True
            return False

    def unhalt(self) -> bool:
        with self._halt_lock:
            if self._halt_status != HaltStatus.NONE:
                self._halt_status = HaltStatus.NONE
                return True
            return False

    @property
    def mode(self) -> Mode:
        with self._mode_lock:
            return self._mode

    def set_mode_searching(self) -> bool:
        with self._mode_lock:
            if self._mode == Mode.STOPPED:
                self._mode = Mode.SEARCHING
                self._stopped.clear()
                self.start_time = time.monotonic()
                return True
            return False

    def set_mode_stopped(self) -> bool:
        with self._mode_lock:
            changed = self._mode == Mode.SEARCHING
            if changed:
                self._mode = Mode.STOPPED
            self._stopped.set()
            return changed

    @property
    def check_stop_active(self) -> bool:
        with self._check_stop_lock:
            return self._check_stop_active

    def set_check_stop_active(self) -> bool:
        with self._check_stop_lock:
            if not self._check_stop_active:
                self._check_stop_active = True
                return True
            return False

    def set_check_stop_inactive(self) -> bool:
        with self._check_stop_lock:
            if self._check_stop_active:
                self._check_stop_active = False
                return True
            return False

    def write(self, content: str) -> None:
        """Write and flush content to the output stream under a lock."""
        with self._print_lock:
            self.outfile.write(content)
            self.outfile.flush()

    def wait_for_mode_stopped(self) -> None:
        """Block until no search is running."""
        self._stopped.wait()