import logging

from colorama import Fore, Style, just_fix_windows_console


class ColorPalette:
    """Colors of the level names, by level."""

    def __init__(
        self,
        debug: str = Fore.CYAN,
        info: str = Fore.GREEN,
        warning: str = Fore.YELLOW,
        error: str = Fore.RED,
        critical: str = Fore.MAGENTA,
    ):
        self.colors = {
            logging.DEBUG: debug,
            logging.INFO: info,
            logging.WARNING: warning,
            logging.ERROR: error,
            logging.CRITICAL: critical,
        }

    def get(self, levelno: int) -> str:
        return self.colors.get(levelno, "")


class LoggerSettings:
    def __init__(
        self,
        level: int | str = logging.INFO,
        colored: bool = True,
        less: bool = False,
        color_palette: ColorPalette = ColorPalette(),
    ):
        self.level = level
        self.colored = colored
        self.less = less
        """Shorter lines: no module and function names."""
        self.color_palette = color_palette


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str, datefmt: str, color_palette: ColorPalette):
        super().__init__(fmt, datefmt=datefmt)
        self.color_palette = color_palette

    def format(self, record):
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{self.color_palette.get(record.levelno)}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def configure_loggers(settings: LoggerSettings = LoggerSettings()) -> logging.Logger:
    """
    Attaches a stream handler to the package logger. Calling it again replaces the handler.
    :return: The package logger.
    """
    fmt = (
        "%(asctime)s - %(levelname)s - %(message)s"
        if settings.less
        else "%(asctime)s - %(levelname)s - %(module)s - [%(funcName)s]: %(message)s"
    )
    datefmt = "%d/%m/%y %H:%M:%S"
    if settings.colored:
        just_fix_windows_console()
        formatter = ColoredFormatter(fmt, datefmt, settings.color_palette)
    else:
        formatter = logging.Formatter(fmt, datefmt=datefmt)

    logger = logging.getLogger("GitHubIssuesBrowser")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    return logger
