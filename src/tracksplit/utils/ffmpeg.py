"""FFmpeg command runner."""

from __future__ import annotations

import subprocess

from tracksplit.errors import ExecutionError

FFMPEG_PREFIX = ["ffmpeg", "-y", "-hide_banner", "-loglevel", "error"]


class FFmpegError(ExecutionError):
    """Raised when an FFmpeg command fails."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"FFmpeg failed (rc={returncode}): {stderr[:500]}")


def ffmpeg_command(args: list[str]) -> list[str]:
    """Return the full command line for an FFmpeg invocation."""
    return FFMPEG_PREFIX + args


def run_ffmpeg(args: list[str], *, check: bool = True) -> subprocess.CompletedProcess:
    """Run an FFmpeg command with standard options."""
    cmd = ffmpeg_command(args)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError as e:
        raise ExecutionError(f"ffmpeg not found on PATH: {e}") from e
    if check and result.returncode != 0:
        raise FFmpegError(cmd, result.returncode, result.stderr)
    return result
