import logging
import sys
from colorama import init, Fore, Style

# Initialize colorama
init()

SUCCESS = 25  # Between INFO and WARNING


def _register_success_level():
    if logging.getLevelName(SUCCESS) == 'SUCCESS':
        return

    logging.addLevelName(SUCCESS, 'SUCCESS')
    logging.SUCCESS = SUCCESS

    def success(self, message, *args, **kwargs):
        if self.isEnabledFor(SUCCESS):
            self._log(SUCCESS, message, args, **kwargs)

    logging.Logger.success = success


_register_success_level()


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to log messages based on log level."""

    COLORS = {
        'DEBUG': Style.RESET_ALL,
        'INFO': Fore.BLUE,
        'SUCCESS': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Style.BRIGHT
    }

    def format(self, record):
        log_message = super().format(record)
        color = self.COLORS.get(record.levelname, Style.RESET_ALL)
        return f"{color}{log_message}{Style.RESET_ALL}"


def configure_logging(log_level=logging.INFO):
    """Configure logging with colored output."""
    formatter = ColoredFormatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return root_logger
