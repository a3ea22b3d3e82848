import os
import json
import logging

logger = logging.getLogger('config')

CONFIG_FILENAME = 'picker_config.json'

DEFAULT_CONFIG = {
    'testing_mode': False,
    'default_period': 'PM',
    'hour_step': 1,
    'minute_step': 1,
    'second_step': 1,
}


def _data_dir_path():
    data_dir = os.getenv('alfred_workflow_data')
    if not data_dir:
        data_dir = os.path.expanduser('~/Library/Application Support/Alfred/Workflow Data/com.timepicker.text')
    return data_dir


def get_workflow_data_dir():
    """Get Alfred workflow data directory, create if it doesn't exist"""
    data_dir = _data_dir_path()
    os.makedirs(data_dir, exist_ok=True)
    return data_dir


def _valid_step(value):
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def load_config(config_file=None):
    """Load picker configuration, falling back to defaults for anything missing or bad"""
    if config_file is None:
        config_file = os.path.join(_data_dir_path(), CONFIG_FILENAME)

    config = dict(DEFAULT_CONFIG)
    try:
        with open(config_file, 'r') as f:
            stored = json.load(f)
    except FileNotFoundError:
        return config
    except (OSError, ValueError) as e:
        logger.warning(f"Error loading config {config_file}: {e}")
        return config

    if not isinstance(stored, dict):
        logger.warning(f"Ignoring config {config_file}: expected a JSON object")
        return config
    config.update(stored)

    period = str(config['default_period']).upper()
    if period not in ('AM', 'PM'):
        logger.warning(f"Unknown default_period {config['default_period']!r}, using PM")
        period = DEFAULT_CONFIG['default_period']
    config['default_period'] = period

    for key in ('hour_step', 'minute_step', 'second_step'):
        if not _valid_step(config[key]):
            logger.warning(f"Invalid {key} {config[key]!r}, using 1")
            config[key] = DEFAULT_CONFIG[key]

    config['testing_mode'] = bool(config['testing_mode'])
    return config


def get_testing_mode():
    """Check if testing mode is enabled"""
    return load_config()['testing_mode']
