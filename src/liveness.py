from typing import Awaitable, Callable
import asyncio
import logging

import psutil

PROBE_COUNT = 8
PROBE_DELAY_MS = 50

logger = logging.getLogger(__name__)


def signal_process(pid: int) -> bool:
    """Send signal 0 to ``pid``. Permission errors count as absence."""
    try:
        psutil.Process(pid).send_signal(0)
        return True
    except (psutil.Error, OSError, ValueError, OverflowError):
        return False


def is_running_verdict(alive: int, dead: int) -> bool:
    return alive - 1 > dead


async def probe(
    pid: int,
    count: int = PROBE_COUNT,
    delay_ms: float = PROBE_DELAY_MS,
    check: Callable[[int], bool] = signal_process,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
) -> bool:
    """
    Probe ``pid`` ``count`` times, waiting ``delay_ms`` after each probe, and
    decide liveness from the whole tally. A single probe can race with the
    process exiting, so every probe is always taken before deciding.
    """
    alive = 0
    dead = 0
    for _ in range(count):
        if check(pid):
            alive += 1
        else:
            dead += 1
        await sleep(max(0, delay_ms) / 1000)

    running = is_running_verdict(alive, dead)
    logger.debug(f'Probed pid {pid}: {alive} alive, {dead} dead, running={running}')
    return running
