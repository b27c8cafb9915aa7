import os
import sys

from loguru import logger

from .defaults import DEFAULT_LOGLEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR, VERBOSE_LOGLEVEL


def _env_log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()


def is_known_level(name: str) -> bool:
    try:
        logger.level(name)
    except ValueError:
        return False
    return True


def resolve_log_level(verbose=False) -> str:
    """
    Pick the log level for a run.

    A known level in the environment variable wins over --verbose, which wins
    over the default. Unknown names are ignored.
    """
    env_level = _env_log_level()
    if env_level and is_known_level(env_level):
        return env_level
    return VERBOSE_LOGLEVEL if verbose else DEFAULT_LOGLEVEL


def start_cli_log(log_level=DEFAULT_LOGLEVEL):
    # first remove (default) stderr output
    logger.remove()

    # stdout carries generated code, so everything goes to stderr
    logger.add(sys.stderr, level=log_level, format=LOG_FORMAT, colorize=False)
    logger.debug("Log started at level {}", log_level)

    env_level = _env_log_level()
    if env_level and not is_known_level(env_level):
        logger.warning(
            "Ignoring unknown log level {!r} in {}, using {}",
            env_level, LOG_LEVEL_ENV_VAR, log_level
        )
