import logging
import os
from typing import Optional

NOISY_LIBS = {"botocore": logging.WARNING, "boto3": logging.WARNING, "urllib3": logging.WARNING}


def setup_logging(noisy_libs: Optional[dict[str, int]] = None):
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    )
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        handlers=[handler],
        force=True,
    )

    for lib, level in (NOISY_LIBS if noisy_libs is None else noisy_libs).items():
        logging.getLogger(lib).setLevel(level)
