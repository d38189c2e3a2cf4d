# What it does: Manages all read/write operations for the `.sprig/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from utils import errors
from utils.log import check_level

DEFAULTS = {
    'log': {'timezone': 'America/Los_Angeles'},
    'core': {'loglevel': 'WARNING'},
}


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, '.sprig', 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object, defaults included
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    if repo_root:
        config_path = get_config_path(repo_root)
        if os.path.exists(config_path):
            config.read(config_path)
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise errors.InvalidConfigKey()
    if not section or not option:
        raise errors.InvalidConfigKey()
    if key == 'core.loglevel':
        check_level(value.upper())

    config_path = get_config_path(repo_root)
    config = configparser.ConfigParser()
    if os.path.exists(config_path):
        config.read(config_path)

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_timezone(repo_root):
    return read_config(repo_root).get('log', 'timezone')


def get_log_level(repo_root): # SPRIG_LOG_LEVEL overrides the configured level
    env_level = os.environ.get('SPRIG_LOG_LEVEL')
    if env_level:
        return env_level.upper()
    return read_config(repo_root).get('core', 'loglevel').upper()
