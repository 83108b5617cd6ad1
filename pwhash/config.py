import logging
import os
from dataclasses import replace

from dotenv import dotenv_values, find_dotenv

from .params import DEFAULT_PARAMS, ParameterSet

logger = logging.getLogger(__name__)

ENV_PREFIX = "PWHASH_"
_ENV_FIELDS = ("memory_cost", "time_cost", "parallelism", "salt_length", "key_length")


def _dotenv() -> dict:
    # .env of the working directory (or a parent); os.environ is left untouched
    path = find_dotenv(usecwd=True)
    return dotenv_values(path) if path else {}


def _env_int(name: str, default: int, file_values: dict) -> int:
    raw = os.getenv(name, file_values.get(name))
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


def params_from_env(base: ParameterSet = DEFAULT_PARAMS) -> ParameterSet:
    """Override fields of `base` from PWHASH_MEMORY_COST, PWHASH_TIME_COST,
    PWHASH_PARALLELISM, PWHASH_SALT_LENGTH and PWHASH_KEY_LENGTH.

    Real environment variables win over values from a .env file.
    """
    file_values = _dotenv()
    return replace(base, **{f: _env_int(ENV_PREFIX + f.upper(), getattr(base, f), file_values)
                            for f in _ENV_FIELDS})
