import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from browsernode.config import CONFIG  # noqa: E402

RESULT_LEVEL = 35

CDP_LOGGER_NAMES = [
    'websockets.client',
    'cdp_use',
    'cdp_use.client',
    'cdp_use.cdp',
    'cdp_use.cdp.registry',
]


def addLoggingLevel(name: str, level_value: int, method_name: str | None = None):
    """
    Add a new logging level to the `logging` module and the configured logger class.

    `name` becomes an attribute of `logging` with value `level_value`, and
    `method_name` (default `name.lower()`) becomes a convenience method on both
    `logging` and `logging.getLoggerClass()`.

    Raises `AttributeError` if the level name or method name is already taken.

    Example
    -------
    >>> addLoggingLevel('TRACE', logging.DEBUG - 5)
    >>> logging.getLogger(__name__).setLevel('TRACE')
    >>> logging.getLogger(__name__).trace('that worked')
    >>> logging.TRACE
    5

    """
    if not method_name:
        method_name = name.lower()

    if hasattr(logging, name):
        raise AttributeError(f'{name} already defined in logging module')
    if hasattr(logging, method_name):
        raise AttributeError(f'{method_name} already defined in logging module')
    if hasattr(logging.getLoggerClass(), method_name):
        raise AttributeError(f'{method_name} already defined in logger class')

    def log_at_level(self, message, *args, **kwargs):
        if self.isEnabledFor(level_value):
            self._log(level_value, message, args, **kwargs)

    def log_to_root(message, *args, **kwargs):
        logging.log(level_value, message, *args, **kwargs)

    logging.addLevelName(level_value, name)
    setattr(logging, name, level_value)
    setattr(logging.getLoggerClass(), method_name, log_at_level)
    setattr(logging, method_name, log_to_root)


class BrowserNodeFormatter(logging.Formatter):
    def __init__(self, format_string, level_value):
        super().__init__(format_string)
        self.level_value = level_value

    def format(self, record):
        # Shorten logger names outside debug mode: browsernode.actor.element -> element
        if self.level_value > logging.DEBUG and isinstance(record.name, str) and record.name.startswith('browsernode.'):
            record.name = record.name.split('.')[-1]
        return super().format(record)


def setup_logging(stream=None, log_level=None, force_setup=False, debug_log_file=None, info_log_file=None):
    """Set up logging for browsernode.

    Args:
        stream: Output stream for logs (default: sys.stdout).
        log_level: 'result', 'info' or 'debug' (default: BROWSERNODE_LOGGING_LEVEL)
        force_setup: Force reconfiguration even if handlers already exist
        debug_log_file: Path to log file for debug level logs only
        info_log_file: Path to log file for info level logs only
    """
    try:
        addLoggingLevel('RESULT', RESULT_LEVEL)
    except AttributeError:
        pass

    env_config = CONFIG.load_env_config()
    level_type = (log_level or env_config.BROWSERNODE_LOGGING_LEVEL).lower()
    debug_log_file = debug_log_file or env_config.BROWSERNODE_DEBUG_LOG_FILE
    info_log_file = info_log_file or env_config.BROWSERNODE_INFO_LOG_FILE
    cdp_level_name = env_config.CDP_LOGGING_LEVEL

    if logging.getLogger().hasHandlers() and not force_setup:
        return logging.getLogger('browsernode')

    root_logger = logging.getLogger()
    root_logger.handlers = []

    if level_type == 'result':
        effective_level = RESULT_LEVEL
    elif level_type == 'debug':
        effective_level = logging.DEBUG
    else:
        effective_level = logging.INFO

    console_handler = logging.StreamHandler(stream or sys.stdout)
    if level_type == 'result':
        console_handler.setLevel('RESULT')
        console_handler.setFormatter(BrowserNodeFormatter('%(message)s', effective_level))
    else:
        console_handler.setLevel(effective_level)
        console_handler.setFormatter(BrowserNodeFormatter('%(levelname)-8s [%(name)s] %(message)s', effective_level))
    root_logger.addHandler(console_handler)

    file_handlers = []
    if debug_log_file:
        debug_file_handler = logging.FileHandler(debug_log_file, encoding='utf-8')
        debug_file_handler.setLevel(logging.DEBUG)
        debug_file_handler.setFormatter(
            BrowserNodeFormatter('%(asctime)s - %(levelname)-8s [%(name)s] %(message)s', logging.DEBUG)
        )
        file_handlers.append(debug_file_handler)
        root_logger.addHandler(debug_file_handler)

    if info_log_file:
        info_file_handler = logging.FileHandler(info_log_file, encoding='utf-8')
        info_file_handler.setLevel(logging.INFO)
        info_file_handler.setFormatter(
            BrowserNodeFormatter('%(asctime)s - %(levelname)-8s [%(name)s] %(message)s', logging.INFO)
        )
        file_handlers.append(info_file_handler)
        root_logger.addHandler(info_file_handler)

    # Root goes to DEBUG when a debug file is attached so the file sees everything
    final_log_level = logging.DEBUG if debug_log_file else effective_level
    root_logger.setLevel(final_log_level)

    package_logger = logging.getLogger('browsernode')
    package_logger.propagate = False
    package_logger.handlers = []
    package_logger.addHandler(console_handler)
    for file_handler in file_handlers:
        package_logger.addHandler(file_handler)
    package_logger.setLevel(final_log_level)

    cdp_logging_level = getattr(logging, cdp_level_name.upper(), logging.WARNING)
    for cdp_logger_name in CDP_LOGGER_NAMES:
        cdp_logger = logging.getLogger(cdp_logger_name)
        cdp_logger.setLevel(cdp_logging_level)
        cdp_logger.handlers = []
        cdp_logger.addHandler(console_handler)
        cdp_logger.propagate = False

    package_logger.debug(f'Logging configured: level={level_type}, cdp_level={cdp_level_name}')
    return package_logger
