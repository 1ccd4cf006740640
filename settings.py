import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv
from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT_PREFIX = "out-"

# Same layout as the console sink used across our tools
CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    output_prefix: str = DEFAULT_OUTPUT_PREFIX

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, after loading a .env file if there is one."""
        load_dotenv()
        return cls(
            log_level=os.getenv("CITYLINK_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_file=os.getenv("CITYLINK_LOG_FILE") or None,
            output_prefix=os.getenv("CITYLINK_OUTPUT_PREFIX", DEFAULT_OUTPUT_PREFIX),
        )


@dataclass
class RunOptions:
    """What one citylink run was asked to do."""
    input_file: Path
    route: Optional[Tuple[int, int]] = None
    print_closure: bool = False
    write_output: bool = False
    write_matrix: bool = False


def setup_logging(settings: Settings, verbose: bool = False):
    # Remove all existing handlers
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if verbose else settings.log_level,
        colorize=True,
    )

    if settings.log_file:
        logger.add(settings.log_file, rotation="500 MB", level="DEBUG")

    return logger
