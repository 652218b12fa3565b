from typing import List, Optional
from functools import partial
from logging.handlers import TimedRotatingFileHandler
import argparse
import asyncio
import logging
import os
import sys
import time

from interval import interval_string
from liveness import probe
from marker import MarkerRecord, normalize_mode, read_marker
from marker_config import Config, load_config


def setup_logging(log_dir: Optional[str], log_filename: str = 'check_alive.log') -> None:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handler = TimedRotatingFileHandler(
            os.path.join(log_dir, log_filename), when="midnight", interval=1, backupCount=7
        )
        handler.setFormatter(formatter)
        handler.setLevel(logging.DEBUG)
        handlers.append(handler)

    logging.basicConfig(handlers=handlers, level=logging.INFO)


def describe(mode: str, record: MarkerRecord, now: Optional[float] = None) -> str:
    if not record.is_running:
        return f'{mode}: Not alive'
    now = time.time() if now is None else now
    age = interval_string(now - record.timestamp)
    return f'{mode}: Alive (pid {record.identifier}, marker updated {age} ago)'


async def check_modes(modes: List[str], config: Config) -> List[MarkerRecord]:
    prober = partial(probe, count=config['probe_count'], delay_ms=config['probe_delay_ms'])
    return await asyncio.gather(*[
        read_marker(mode, config['marker_dir'], prober=prober) for mode in modes
    ])


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='check-alive',
        description='Report whether the processes recorded in <mode>.pid markers are running'
    )
    parser.add_argument('modes', nargs='+', metavar='MODE')
    parser.add_argument('--config', help='path to config.json')
    parser.add_argument('--dir', help='directory holding the marker files')
    args = parser.parse_args(argv)
    for mode in args.modes:
        try:
            normalize_mode(mode)
        except ValueError as err:
            parser.error(str(err))
    return args


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    if args.dir:
        config['marker_dir'] = args.dir

    setup_logging(config['log_dir'])
    logger = logging.getLogger(__name__)
    logger.debug(f'Checking markers in {os.path.abspath(config["marker_dir"])}')

    records = asyncio.run(check_modes(args.modes, config))
    for mode, record in zip(args.modes, records):
        print(describe(mode, record))
    return 0 if all(r.is_running for r in records) else 1


if __name__ == '__main__':
    sys.exit(main())
