"""
RECOVERY POLICY

What the watchdog does when the chat session is lost. The default restarts
the whole service through the OS supervisor.
"""

import asyncio
import logging
import shlex
from typing import Protocol

_logger = logging.getLogger(__name__)


class RecoveryPolicy(Protocol):
    async def restart_service(self) -> None:
        ...


class CommandRestartPolicy:
    """Runs a supervisor command such as ``sudo service wa-auto restart``."""

    def __init__(self, command: str):
        self.argv = shlex.split(command)
        if not self.argv:
            raise ValueError("RESTART_COMMAND must not be empty")

    async def restart_service(self) -> None:
        _logger.warning(f"🔁 Restarting service: {shlex.join(self.argv)}")
        try:
            process = await asyncio.create_subprocess_exec(
                *self.argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate()
        except OSError as exc:
            _logger.error(f"Error restarting service: {exc}")
            return

        if process.returncode != 0:
            _logger.error(
                f"Error restarting service: exit {process.returncode} {stderr.decode(errors='replace').strip()}"
            )


class NoopRestartPolicy:
    async def restart_service(self) -> None:
        _logger.warning("Restart requested but RESTART_ENABLED is off; ignoring")
