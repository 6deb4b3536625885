"""Terminal output helpers: styled text, status lines and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading
from typing import TextIO

_STYLE_CODES = {"bold": "1", "red": "31", "green": "32", "blue": "34"}
_RESET = "\x1b[0m"
_CLEAR_LINE = "\r\x1b[2K"
_TICK_CHARS = "⠁⠂⠄⡀⢀⠠⠐⠈"


def _isatty(stream: object) -> bool:
    try:
        return bool(stream.isatty())  # type: ignore[attr-defined]
    except (AttributeError, ValueError):
        return False


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return _isatty(sys.stdout)


def emoji_enabled() -> bool:
    """Emoji are shown unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def styled(text: object, *args: str) -> str:
    """Wrap ``text`` in ANSI codes for the named styles when colours are on."""
    codes = []
    for name in args:
        try:
            codes.append(_STYLE_CODES[name])
        except KeyError:
            raise ValueError(f"unknown style: {name!r}") from None
    text = str(text)
    if not codes or not _colors_enabled():
        return text
    prefix = "".join(f"\x1b[{code}m" for code in codes)
    return f"{prefix}{text}{_RESET}"


def warn(message: str) -> None:
    """Print a red warning line."""
    mark = "!" if not emoji_enabled() else "⚠️ "
    print(f"{styled(mark, 'red')} {styled(message, 'red')}")


def success(message: str) -> None:
    """Print a green success line."""
    mark = "✓" if not emoji_enabled() else "✅"
    print(f"{styled(mark, 'green')} {styled(message, 'green')}")


class Spinner:
    """A steadily ticking spinner with a message, drawn only on a terminal."""

    def __init__(
        self,
        message: str = "",
        *,
        stream: TextIO | None = None,
        interval: float = 0.1,
    ) -> None:
        self._message = message
        self._stream = stream if stream is not None else sys.stderr
        self._interval = interval
        self._visible = _isatty(self._stream)
        self._frames = itertools.cycle(_TICK_CHARS)
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self._finished = False

    @property
    def message(self) -> str:
        return self._message

    def _draw(self) -> None:
        if not self._visible or self._finished:
            return
        self._stream.write(f"{_CLEAR_LINE}{next(self._frames)} {self._message}")
        self._stream.flush()

    def _tick(self) -> None:
        while not self._stop.wait(self._interval):
            with self._lock:
                self._draw()

    def set_message(self, message: str) -> None:
        with self._lock:
            self._message = message
            self._draw()

    def finish_and_clear(self) -> None:
        """Stop ticking and erase the spinner line."""
        with self._lock:
            if self._finished:
                return
            self._finished = True
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._visible:
            self._stream.write(_CLEAR_LINE)
            self._stream.flush()

    def __enter__(self) -> Spinner:
        with self._lock:
            self._draw()
        if self._visible and self._thread is None and not self._finished:
            self._thread = threading.Thread(target=self._tick, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()