"""Configuration loading from CLI args and an optional YAML file."""

import codecs
import logging
from dataclasses import dataclass

import yaml

from access_stats.reader import MAX_RECORDS

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    max_records: int = MAX_RECORDS
    encoding: str = "utf-8"
    output: str = "text"
    log_level: str = "WARNING"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    except yaml.YAMLError as exc:
        logger.warning("Invalid YAML in %s (%s), using defaults", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, using defaults", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _known_encoding(value, default: str) -> str:
    try:
        if not isinstance(value, str):
            raise LookupError(value)
        codecs.lookup(value)
    except LookupError:
        logger.warning("Unknown encoding %r, using %s", value, default)
        return default
    return value


def load_config(cli_args, yaml_data: dict) -> Config:
    """Build Config from parsed YAML data, with CLI args taking precedence."""
    output = getattr(cli_args, "output", None) or yaml_data.get("output", Config.output)
    if output not in OUTPUT_FORMATS:
        logger.warning("Unknown output format %r, using %s", output, Config.output)
        output = Config.output

    log_level = str(yaml_data.get("log_level", Config.log_level)).upper()
    if getattr(cli_args, "verbose", False):
        log_level = "DEBUG"
    if log_level not in LOG_LEVELS:
        log_level = Config.log_level

    return Config(
        max_records=min(_positive_int(yaml_data.get("max_records"), Config.max_records), MAX_RECORDS),
        encoding=_known_encoding(yaml_data.get("encoding", Config.encoding), Config.encoding),
        output=output,
        log_level=log_level,
    )
