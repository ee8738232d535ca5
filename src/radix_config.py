#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Radix Codec: Arbitrary-Base Byte Encoding
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/radix_config.py

"""
Configuration Loader (radix_config.py)

Loads the settings used by the command-line front end. The codec itself takes
no configuration; every call passes its base explicitly.

Key Features:
-   **Loads `config.ini`**: Parses the project's INI file into a global
    `APP_CONFIG` object, found relative to the project root. The
    `RADIX_CONFIG_OVERRIDE` environment variable can point at another file.
-   **Loads `.env`**: Loads environment variables from a `.env` file at the
    project root, so `RADIX_DEFAULT_BASE` can be set there.
-   **Safe Value Retrieval**: `get_config_value()` returns typed values with
    fallbacks and strips inline comments.
-   **Default Base**: `get_default_base()` resolves the base the CLI uses when
    none is given, validated against the codec's supported range.

Recognized settings:
    [Codec]
    default_base = 62

    [Logging]
    level = INFO

Global Objects Provided:
-   `PROJECT_ROOT`: The directory holding `pyproject.toml`, or the current
    working directory when the package is installed elsewhere.
-   `APP_CONFIG`: A `configparser.ConfigParser` with the contents of
    `config.ini` (empty if the file does not exist).
-   `ENV_LOADED`: True if a `.env` file was found and loaded.
"""

import configparser
import os
import logging
import pathlib
from dotenv import load_dotenv

from radix_codec import MAX_BASE, MIN_BASE

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"
CONFIG_OVERRIDE_ENV = "RADIX_CONFIG_OVERRIDE"
DEFAULT_BASE_ENV = "RADIX_DEFAULT_BASE"
FALLBACK_BASE = 62

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    # Own handler already prints; skip the root handler the CLI installs.
    logger.propagate = False

def get_project_root() -> str:
    """Determines the project root by searching upwards for pyproject.toml."""
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    # Installed outside a source checkout: settings live next to the caller.
    return os.getcwd()

PROJECT_ROOT = get_project_root()

def load_app_config():
    config = configparser.ConfigParser()

    override_path = os.getenv(CONFIG_OVERRIDE_ENV)
    if override_path and os.path.exists(override_path):
        config_path = override_path
        logger.debug(f"Using override config from env var: {config_path}")
    else:
        config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' tolerates a BOM written by some editors.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using fallbacks.")

    return config

def load_env_vars():
    """Loads environment variables from .env file located at the project root."""
    dotenv_path = os.path.join(PROJECT_ROOT, DOTENV_FILENAME)
    if os.path.exists(dotenv_path):
        if load_dotenv(dotenv_path):
            logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
            return True
        logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
        return False
    logger.debug(f".env file not found at {dotenv_path}.")
    return False

def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str):
    """
    Helper to get a typed value from a configparser.ConfigParser object,
    with a fallback, type conversion, and stripping of inline comments.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: The value to return if the key is missing or conversion fails.
        value_type (type): The expected type (str, int, float, bool).

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_section(section) or not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)

    # Strip inline comments like "62 ; case-sensitive" or "62 # default"
    cleaned_value = raw_value
    for comment_char in [';', '#']:
        if comment_char in cleaned_value:
            cleaned_value = cleaned_value.split(comment_char, 1)[0].strip()

    if value_type == str:
        if cleaned_value.lower() == 'none':
            return None
        return cleaned_value
    elif value_type in (int, float):
        try:
            return value_type(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to {value_type.__name__}. Using fallback: {fallback}")
            return fallback
    elif value_type == bool:
        try:
            return config.getboolean(section, key)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to bool. Using fallback: {fallback}")
            return fallback
    else:
        logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
        return fallback

def get_default_base(config: configparser.ConfigParser) -> int:
    """
    Returns the base to use when the caller does not name one.

    `RADIX_DEFAULT_BASE` in the environment wins over `[Codec] default_base`.
    Values that are not integers in the supported range are ignored with a
    warning, leaving the fallback of 62.
    """
    env_value = os.getenv(DEFAULT_BASE_ENV)
    if env_value:
        try:
            base = int(env_value.strip())
        except ValueError:
            logger.warning(f"Ignoring non-integer {DEFAULT_BASE_ENV}='{env_value}'.")
        else:
            if MIN_BASE <= base <= MAX_BASE:
                return base
            logger.warning(f"Ignoring out-of-range {DEFAULT_BASE_ENV}={base}.")

    base = get_config_value(config, 'Codec', 'default_base', fallback=FALLBACK_BASE, value_type=int)
    if not MIN_BASE <= base <= MAX_BASE:
        logger.warning(f"Config: [Codec]/default_base {base} is outside "
                       f"{MIN_BASE}-{MAX_BASE}. Using fallback: {FALLBACK_BASE}")
        return FALLBACK_BASE
    return base

def get_log_level(config: configparser.ConfigParser) -> int:
    """Maps `[Logging] level` to a logging constant, defaulting to WARNING."""
    name = get_config_value(config, 'Logging', 'level', fallback='WARNING')
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        logger.warning(f"Config: Unknown [Logging]/level '{name}'. Using WARNING.")
        return logging.WARNING
    return level

# Global config object, loaded once
APP_CONFIG = load_app_config()
ENV_LOADED = load_env_vars()

# === End of src/radix_config.py ===
