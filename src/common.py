from typing import Optional
import asyncio
import logging
import os

logger = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    with open(path, 'r', encoding='utf-8') as input:
        return input.read()


async def safe_stat(path: str) -> Optional[os.stat_result]:
    try:
        return await asyncio.to_thread(os.stat, path)
    except (OSError, ValueError) as err:
        logger.debug(f'Could not stat {path}: {err}')
        return None


async def safe_read(path: str) -> Optional[str]:
    try:
        return await asyncio.to_thread(_read_text, path)
    except (OSError, ValueError) as err:
        # UnicodeDecodeError is a ValueError
        logger.debug(f'Could not read {path}: {err}')
        return None
