"""Terminal spinners shown while long network operations run."""

from __future__ import annotations

import sys
import threading
from typing import Sequence, TextIO

TICKS: tuple[str, ...] = ("▹▹▹▹▹", "▸▹▹▹▹", "▹▸▹▹▹", "▹▹▸▹▹", "▹▹▹▸▹", "▹▹▹▹▸", "")
ALT_TICKS: tuple[str, ...] = (
    "[    ]", "[=   ]", "[==  ]", "[=== ]", "[ ===]", "[  ==]", "[   =]", "[    ]",
    "[   =]", "[  ==]", "[ ===]", "[====]", "[=== ]", "[==  ]", "[=   ]",
)

_CLEAR_LINE = "\r\x1b[2K"
_BLUE = "\x1b[34m"
_RESET = "\x1b[0m"


class Spinner:
    """A one-line spinner redrawn on a background thread.

    All tick strings but the last are cycled while running; the last one is
    the frame shown once the spinner is finished.
    """

    def __init__(
        self,
        tick_strings: Sequence[str],
        interval: float = 0.1,
        message: str = "",
        separator: str = "",
        stream: TextIO | None = None,
        enabled: bool | None = None,
    ) -> None:
        if not tick_strings:
            raise ValueError("a spinner needs at least one tick string")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.tick_strings = tuple(tick_strings)
        self.interval = interval
        self.separator = separator
        self.stream = stream if stream is not None else sys.stderr
        if enabled is None:
            isatty = getattr(self.stream, "isatty", None)
            enabled = bool(isatty and isatty())
        self.enabled = enabled
        self._message = message
        self._index = 0
        self._finished = False
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def frame(self) -> str:
        """The tick string currently shown."""
        if self._finished:
            return self.tick_strings[-1]
        spinning = self.tick_strings[:-1] or self.tick_strings
        return spinning[self._index % len(spinning)]

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def is_finished(self) -> bool:
        return self._finished

    def _line(self) -> str:
        tick = self.frame
        shown = f"{_BLUE}{tick}{_RESET}" if tick else ""
        return f"{_CLEAR_LINE}{shown}{self.separator}{self._message}"

    def _write(self, text: str) -> None:
        if self.enabled:
            self.stream.write(text)
            self.stream.flush()

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            with self._lock:
                if self._finished:
                    return
                self._index += 1
                self._write(self._line())

    def start(self) -> "Spinner":
        """Begin drawing and ticking; returns the spinner itself."""
        if self._finished:
            raise RuntimeError("spinner has already finished")
        if self._thread is not None:
            raise RuntimeError("spinner is already running")
        with self._lock:
            self._write(self._line())
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        return self

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message
            if not self._finished:
                self._write(self._line())

    def _halt(self) -> None:
        self._stop.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def finish(self) -> None:
        """Stop ticking and leave the final frame and message on screen."""
        self._halt()
        with self._lock:
            if self._finished:
                return
            self._finished = True
            self._write(self._line() + "\n")

    def finish_with_message(self, message: str) -> None:
        """Stop ticking and leave the final frame with a new message."""
        self._halt()
        with self._lock:
            if self._finished:
                return
            self._message = message
            self._finished = True
            self._write(self._line() + "\n")

    def finish_and_clear(self) -> None:
        """Stop ticking and erase the spinner line."""
        self._halt()
        with self._lock:
            if self._finished:
                return
            self._finished = True
            self._write(_CLEAR_LINE)

    def __enter__(self) -> "Spinner":
        if self._thread is None and not self._finished:
            self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._finished:
            self.finish_and_clear()


def create_spinner(msg: str) -> Spinner:
    """Start a fast arrow spinner showing ``msg``."""
    return Spinner(TICKS, interval=0.01, message=msg).start()


def create_alt_spinner(msg: str) -> Spinner:
    """Start a bouncing-bar spinner showing ``msg``."""
    create_spinner(msg).finish_and_clear()
    return Spinner(ALT_TICKS, interval=0.08, message=msg, separator=" ").start()