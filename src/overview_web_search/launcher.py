from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_COMMAND = ("xdg-open",)


class UrlLauncher(Protocol):
    def open_url(self, url: str) -> None: ...


class CommandLauncher:
    """Opens URLs by spawning the desktop's default handler.

    Children are detached and never waited on. Their handles are kept and
    polled on the next launch so exited children get reaped. A failed spawn
    is logged and dropped because activation has no way to report it.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_LAUNCH_COMMAND) -> None:
        if not command:
            raise ValueError("Launch command must not be empty.")
        self._command = tuple(command)
        self._children: list[subprocess.Popen[bytes]] = []

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def open_url(self, url: str) -> None:
        self._reap()
        argv = [*self._command, url]
        logger.debug("Launching %s", argv)
        try:
            child = subprocess.Popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, subprocess.SubprocessError):
            logger.warning("Failed to launch %s", self._command[0], exc_info=True)
            return
        self._children.append(child)

    @property
    def pending(self) -> int:
        return len(self._children)

    def _reap(self) -> None:
        self._children = [child for child in self._children if child.poll() is None]
