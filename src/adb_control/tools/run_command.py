import asyncio
import logging
from typing import Optional, Sequence

from adb_control.log_utils import log_event

logger = logging.getLogger(__name__)


async def exec_command(
    executable: str,
    argv: Sequence[str] = (),
    cwd: Optional[str] = None,
    timeout: Optional[float] = None,
) -> dict:
    """Run an executable directly (no shell) and capture its output.

    There is no timeout unless the caller passes one; a hung process keeps the
    call waiting.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            executable,
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.communicate()
            return {
                "content": "",
                "stderr": "",
                "error": f"Command timed out after {timeout}s",
                "returncode": -1,
            }
    except (OSError, ValueError) as exc:
        log_event(logger, "command.spawn_failed", level=logging.ERROR, executable=executable, error=str(exc))
        return {"content": "", "stderr": "", "error": str(exc), "returncode": -1}

    stdout_text = stdout.decode(errors="replace") if stdout else ""
    stderr_text = stderr.decode(errors="replace") if stderr else ""
    error_text = None
    if proc.returncode != 0:
        command_line = " ".join((executable, *argv))
        error_text = stderr_text or f"Command failed: {command_line} (exit {proc.returncode})"
        log_event(
            logger,
            "command.failed",
            level=logging.WARNING,
            command=command_line,
            returncode=proc.returncode,
            stderr=stderr_text,
        )
    return {
        "content": stdout_text,
        "stderr": stderr_text,
        "error": error_text,
        "returncode": proc.returncode,
    }
