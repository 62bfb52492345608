import logging
import sys
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ISO8601Formatter(logging.Formatter):
    def formatTime(self, record, datefmt=None):
        dt: datetime = datetime.fromtimestamp(record.created)
        return dt.isoformat(timespec="seconds")


def resolve_log_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return LOG_LEVEL_MAP.get(str(level).upper(), logging.INFO)


def setup_logging(
    log_level: int | str = logging.INFO,
    log_to_file: bool = False,
    log_dir: str = "logs",
    log_base_filename: str = "regcodec",
    when: str = "midnight",
    backup_count: int = 7,
    codec_debug: bool = False,
):
    """
    Configure the root logger once: stdout plus an optional daily-rotating file.

    Per-stage pipeline traces (hex dumps) are logged at DEBUG under
    'regcodec.codec'; codec_debug=True enables them without lowering the root level.
    """
    formatter = ISO8601Formatter(fmt="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_log_level(log_level))

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_to_file:
            Path(log_dir).mkdir(parents=True, exist_ok=True)
            file_path = f"{log_dir}/{log_base_filename}.log"

            rotating_handler = TimedRotatingFileHandler(
                filename=file_path,
                when=when,  # 'midnight' → rotate at 00:00
                interval=1,
                backupCount=backup_count,
                encoding="utf-8",
                utc=False,
            )
            rotating_handler.setFormatter(formatter)
            root_logger.addHandler(rotating_handler)

    if codec_debug:
        logging.getLogger("regcodec.codec").setLevel(logging.DEBUG)
