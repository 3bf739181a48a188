"""Cross-platform command invocation: needs_shell_wrapper, build_spawn_command, invoke_command."""

from __future__ import annotations

import asyncio
import codecs
import contextlib
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import IO

logger = logging.getLogger(__name__)

POSIX_SHELL = "/bin/sh"
WINDOWS_SHELL = "cmd.exe"

_READ_CHUNK = 4096


def is_windows(platform: str | None = None) -> bool:
    return (platform or sys.platform).startswith("win")


def needs_shell_wrapper(command: str, platform: str | None = None) -> bool:
    """Windows always goes through cmd.exe; elsewhere only compound commands need a shell."""
    return is_windows(platform) or "&&" in command or "||" in command


def build_spawn_command(
    command: str, args: Sequence[str] = (), platform: str | None = None
) -> list[str]:
    """Return the argv used to spawn *command* with *args* on *platform*.

    Shell-wrapped commands get the raw command string followed by *args*,
    which the shell receives as positional parameters.
    """
    if not needs_shell_wrapper(command, platform):
        return [command, *args]
    if is_windows(platform):
        return [WINDOWS_SHELL, "/c", command, *args]
    return [POSIX_SHELL, "-c", command, *args]


async def _forward(stream: asyncio.StreamReader, target: IO[str]) -> None:
    """Copy child output to *target* as it arrives.

    Bytes go to ``target.buffer`` unchanged when the stream has one.
    Text-only streams (``StringIO``) get an incremental UTF-8 decode.
    """
    raw = getattr(target, "buffer", None)
    if raw is not None:
        target.flush()
        while chunk := await stream.read(_READ_CHUNK):
            raw.write(chunk)
            raw.flush()
        return

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while chunk := await stream.read(_READ_CHUNK):
        text = decoder.decode(chunk)
        if text:
            target.write(text)
            target.flush()
    tail = decoder.decode(b"", final=True)
    if tail:
        target.write(tail)
        target.flush()


async def _stream_until_exit(
    proc: asyncio.subprocess.Process, stdout: IO[str], stderr: IO[str]
) -> int:
    forwards = [
        asyncio.ensure_future(_forward(proc.stdout, stdout)),
        asyncio.ensure_future(_forward(proc.stderr, stderr)),
    ]
    try:
        await asyncio.gather(*forwards)
    finally:
        for task in forwards:
            task.cancel()
    return await proc.wait()


async def invoke_command(
    command: str,
    args: Sequence[str] | None = None,
    *,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> bool:
    """Run *command* and report whether it exited with status 0.

    Child output is forwarded live to *stdout*/*stderr* (default: this
    process's streams). Spawn errors, timeouts and output errors count
    as failure; the child is always reaped.
    """
    argv = build_spawn_command(command, list(args or []))
    child_env = {**os.environ, **(env or {})}
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    workdir = str(cwd) if cwd is not None else os.getcwd()

    logger.debug(f"Spawning {argv!r} in {workdir}")
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            cwd=workdir,
            env=child_env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        logger.debug(f"Failed to spawn {command!r}: {e}")
        return False

    try:
        code = await asyncio.wait_for(_stream_until_exit(proc, out, err), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Command timed out after {timeout}s: {command}")
        return False
    except (OSError, ValueError) as e:
        logger.warning(f"Could not forward output of {command!r}: {e}")
        return False
    finally:
        if proc.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()

    logger.debug(f"{command!r} exited with code {code}")
    return code == 0
