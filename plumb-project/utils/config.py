# What it does: Manages all read/write operations for the `.git/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import logging
import os

from .compression import DEFAULT_LEVEL
from .errors import FileSystemError, InvalidArgument
from .repository import git_path

logger = logging.getLogger(__name__)


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return git_path(repo_root, 'config')


def new_config(): # Values are stored verbatim, so '%' needs no escaping
    return configparser.ConfigParser(interpolation=None)


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object (empty if there is no config file)
    config_path = get_config_path(repo_root)
    config = new_config()
    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, 'r') as f:
            config.read_file(f)
    except configparser.Error as e:
        raise InvalidArgument(f"bad config file {config_path}: {e}") from e
    except OSError as e:
        raise FileSystemError(f"unable to read config file {config_path}: {e}") from e

    logger.debug("read config from %s", config_path)
    return config


def split_key(key):
    section, _, option = key.partition('.')
    if not section or not option:
        raise InvalidArgument(f"key does not contain a section: {key}")
    return section, option


def get_config_value(repo_root, key, fallback=None):
    section, option = split_key(key)
    return read_config(repo_root).get(section, option, fallback=fallback)


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    section, option = split_key(key)
    if (section, option.lower()) == ('core', 'compression'):
        parse_compression_level(value)

    config = read_config(repo_root)
    try:
        if not config.has_section(section):
            config.add_section(section)
        config.set(section, option, value)
    except (configparser.Error, ValueError) as e:
        raise InvalidArgument(f"invalid key {key}: {e}") from e

    config_path = get_config_path(repo_root)
    try:
        with open(config_path, 'w') as configfile:
            config.write(configfile)
    except OSError as e:
        raise FileSystemError(f"unable to write config file {config_path}: {e}") from e


def parse_compression_level(value): # core.compression, a zlib level between -1 and 9
    try:
        level = int(value)
    except ValueError:
        raise InvalidArgument(f"bad numeric config value '{value}' for 'core.compression'")
    if not -1 <= level <= 9:
        raise InvalidArgument(f"bad zlib compression level {level}")
    return level


def get_compression_level(repo_root):
    value = get_config_value(repo_root, 'core.compression')
    if value is None:
        return DEFAULT_LEVEL
    return parse_compression_level(value)
