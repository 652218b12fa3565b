"""
Reads ``<mode>.pid`` marker files and decides whether the process recorded in
them is still running.

A missing, unreadable or corrupt marker is an expected state, not an error: it
is reported as "not running" with no identifier.
"""
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional
import logging
import math
import os

from common import safe_read, safe_stat
from liveness import probe

MARKER_EXTENSION = '.pid'
MAX_IDENTIFIER = 2 ** 31 - 1  # largest pid_t

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkerRecord:
    timestamp: float  # st_mtime, NaN when the marker could not be statted
    identifier: Optional[int]
    is_running: bool
    path: str


def normalize_mode(mode: str) -> str:
    """Accepts a bare mode or a script path such as ``deploy/process.mjs``."""
    if '/' in mode or '.' in mode:
        mode = os.path.splitext(os.path.basename(mode))[0]
    if mode in ('', '.', '..'):
        raise ValueError(f'Invalid marker mode: {mode!r}')
    return mode


def marker_path(mode: str, marker_dir: str) -> str:
    return os.path.join(marker_dir, normalize_mode(mode) + MARKER_EXTENSION)


def parse_identifier(text: Optional[str]) -> Optional[int]:
    if not isinstance(text, str):
        return None
    text = text.strip()
    # str.isdigit() also accepts non-ASCII digits
    if not text or not text.isascii() or not text.isdigit():
        return None
    pid = int(text)
    if pid < 1 or pid > MAX_IDENTIFIER:
        return None
    return pid


async def read_marker(
    mode: str,
    marker_dir: str,
    prober: Callable[[int], Awaitable[bool]] = probe
) -> MarkerRecord:
    path = marker_path(mode, marker_dir)

    stat = await safe_stat(path)
    if stat is None:
        return MarkerRecord(math.nan, None, False, path)

    content = await safe_read(path)
    pid = parse_identifier(content)
    if pid is None:
        if content is not None:
            logger.debug(f'Ignoring invalid marker contents in {path}: {content[:32]!r}')
        return MarkerRecord(stat.st_mtime, None, False, path)

    return MarkerRecord(stat.st_mtime, pid, await prober(pid), path)
