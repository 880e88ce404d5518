"""Lint runner: run the site's lint commands and pass their exit status through."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

log = logging.getLogger(__name__)

TIMEOUT_EXIT_CODE = 124


class LintRunner:
    """Run shell lint commands one after another from a working directory."""

    def __init__(
        self,
        commands: list[str],
        cwd: Path | None = None,
        timeout: int = 600,
    ) -> None:
        self._commands = list(commands)
        self._cwd = Path(cwd) if cwd else None
        self._timeout = timeout

    @property
    def commands(self) -> list[str]:
        return list(self._commands)

    def run_command(self, command: str) -> int:
        """Run a single command through the shell and return its exit code."""
        log.info("Running: %s", command)
        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=str(self._cwd) if self._cwd else None,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            log.warning("Command timed out after %ss: %s", self._timeout, command)
            return TIMEOUT_EXIT_CODE
        if result.returncode != 0:
            log.warning("Command exited with %d: %s", result.returncode, command)
        return result.returncode

    def run(self) -> int:
        """Run every command; return 0 if all pass, else the first non-zero exit code."""
        code = 0
        for command in self._commands:
            rc = self.run_command(command)
            if rc != 0 and code == 0:
                code = rc
        return code
