import os
import sys

from loguru import logger

from inflector.Environment import env

# Remove default handler
logger.remove()

log_level = str(env("LOG_LEVEL") or "INFO").upper()


# Detect if running under pytest
def is_running_under_pytest():
    return any(arg.endswith("pytest") for arg in sys.argv) or "pytest" in sys.modules


# - Use LOG_COLOR if set
# - Otherwise, auto-disable color when running under pytest
if env("LOG_COLOR"):
    use_color = str(env("LOG_COLOR")).lower() == "true"
else:
    use_color = not is_running_under_pytest()

if use_color:
    format_string = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
else:
    format_string = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"

logger.configure(extra={"name": "inflector"})

logger.add(
    sys.stderr,
    colorize=use_color,
    format=format_string,
    level=log_level,
)

# File handler only when a log directory is configured (never use color in files)
log_dir = env("LOG_DIR")
if log_dir:
    os.makedirs(log_dir, exist_ok=True)
    logger.add(
        os.path.join(log_dir, "inflector.log"),
        rotation="10 MB",
        retention="1 week",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        level=log_level,
    )


class LoggerAdapter:
    """Adapter giving loguru the logging.Logger call style used in this package"""

    def __init__(self, name):
        self.name = name
        self._logger = logger.bind(name=name)

    def _format_message(self, msg, args):
        if args and "%" in msg:
            return msg % args
        return msg

    def debug(self, msg, *args, **kwargs):
        self._logger.opt(depth=1).debug(self._format_message(msg, args))

    def warning(self, msg, *args, **kwargs):
        self._logger.opt(depth=1).warning(self._format_message(msg, args))


def get_logger(name=None):
    """Compatible replacement for logging.getLogger"""
    return LoggerAdapter(name or "inflector")
