import json
import os
import shutil
from dataclasses import dataclass, field
from os.path import expanduser
from pathlib import Path
from sys import platform
from typing import Optional

import toml
from dataclasses_json import dataclass_json

from CharacterInformation.util.logging_config import logger

APP_NAME = 'CharacterInformation'
CONFIG_FILE = 'config.json'
LEGACY_CONFIG_FILE = 'config.toml'

DICTIONARY_ENV = 'CHARINFO_DICTIONARY'

INFO = 'INFO'
DEBUG = 'DEBUG'


def is_windows():
    return platform == 'win32'


def get_app_directory():
    if is_windows():
        appdata_dir = os.getenv('APPDATA')
    else:
        appdata_dir = expanduser('~/.config')
    config_dir = os.path.join(appdata_dir, APP_NAME)
    os.makedirs(config_dir, exist_ok=True)
    return config_dir


def get_config_path():
    return os.path.join(get_app_directory(), CONFIG_FILE)


@dataclass_json
@dataclass
class Paths:
    dictionary: str = ""  # empty -> bundled sample dictionary

    def __post_init__(self):
        if self.dictionary:
            self.dictionary = Path(self.dictionary).expanduser().as_posix()


@dataclass_json
@dataclass
class Logging:
    console_level: str = INFO
    file_level: str = DEBUG
    retention_days: int = 7


@dataclass_json
@dataclass
class Display:
    show_statistics: bool = False
    output_json: bool = False
    prompt: str = "Text[enter]"


@dataclass_json
@dataclass
class Config:
    paths: Paths = field(default_factory=Paths)
    logging: Logging = field(default_factory=Logging)
    display: Display = field(default_factory=Display)

    def get_dictionary_path(self) -> Optional[str]:
        """Dictionary to load: the environment override, then the configured path, else None."""
        override = os.environ.get(DICTIONARY_ENV, "").strip()
        if override:
            return override
        return self.paths.dictionary or None

    @classmethod
    def load_from_toml(cls, file_path: str) -> "Config":
        with open(file_path, 'r', encoding='utf-8') as f:
            config_data = toml.load(f)
        return cls.from_dict(config_data)

    def save(self, path: Optional[str] = None):
        with open(path or get_config_path(), 'w', encoding='utf-8') as file:
            json.dump(self.to_dict(), file, indent=4)
        return self


def load_config(path: Optional[str] = None) -> Config:
    """
    Read the configuration.

    ``config.json`` in the app directory is preferred. A ``config.toml`` in
    the working directory is converted to JSON the first time it is seen.
    When neither exists, defaults are written out.
    """
    config_path = path or get_config_path()

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as file:
                return Config.from_dict(json.load(file))
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing {config_path}, saving backup and using defaults: {e}")
            shutil.copy(config_path, config_path + '.bak')
            return Config().save(config_path)

    if path is None and os.path.exists(LEGACY_CONFIG_FILE):
        logger.info(f"Converting {LEGACY_CONFIG_FILE} to {config_path}")
        return Config.load_from_toml(LEGACY_CONFIG_FILE).save(config_path)

    return Config().save(config_path)


config_instance: Optional[Config] = None


def get_config() -> Config:
    global config_instance
    if config_instance is None:
        config_instance = load_config()
    return config_instance


def reload_config(path: Optional[str] = None) -> Config:
    global config_instance
    config_instance = load_config(path)
    return config_instance


def save_config(config: Config):
    global config_instance
    config_instance = config
    config.save()
