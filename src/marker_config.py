from typing import TypedDict, Optional
import os
import json
import logging


class Config(TypedDict):
    marker_dir: str
    probe_count: int
    probe_delay_ms: int
    log_dir: Optional[str]


DEFAULT_CONFIG: Config = {
    'marker_dir': '.',
    'probe_count': 8,
    'probe_delay_ms': 50,
    'log_dir': None
}


def merge_configs(existing: Config) -> None:
    for key, value in DEFAULT_CONFIG.items():
        if key not in existing:
            existing[key] = value


def config_dir() -> str:
    return os.path.join(os.getcwd(), 'config')


def config_file() -> str:
    return os.path.join(config_dir(), 'config.json')


def write_config(config: Config, config_path: Optional[str] = None) -> None:
    config_path = config_path or config_file()
    parent = os.path.dirname(config_path)
    if parent and not os.path.isdir(parent):
        os.makedirs(parent)
    with open(config_path, 'w') as cfg:
        cfg.write(json.dumps(config, indent=4))


def load_config(config_path: Optional[str] = None, logger: Optional[logging.Logger] = None) -> Config:
    if not logger:
        logger = logging.getLogger(__name__)
    # Defaults are only written out when the caller names the file
    if config_path is None:
        config_path = config_file()
        if not os.path.isfile(config_path):
            return dict(DEFAULT_CONFIG)

    if not os.path.isfile(config_path):
        config: Config = dict(DEFAULT_CONFIG)
        write_config(config, config_path)
        return config

    with open(config_path, 'r') as cfg:
        try:
            config = json.loads(cfg.read())
        except ValueError:
            logger.exception(f'Bad config at {config_path}')
            raise

    if not isinstance(config, dict):
        raise ValueError(f'Config at {config_path} must be a JSON object')
    merge_configs(config)
    return config
