# burndown_projector/utils/logging_utils.py
import logging, os, sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"

def _env_level(default=logging.INFO):
    raw = os.getenv("BURNDOWN_LOG_LEVEL", "").strip().upper()
    if not raw:
        return default
    lvl = logging.getLevelName(raw)
    return lvl if isinstance(lvl, int) else default

def get_logger(name="BDP", level=None):
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level if level is not None else _env_level())
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(h)
    return logger

def ensure_dirs(*paths):
    for p in paths:
        os.makedirs(p, exist_ok=True)
    return paths
