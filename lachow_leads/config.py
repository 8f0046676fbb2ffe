import logging
import os

# ============================== settings ==============================
SERPAPI_KEY = os.getenv("SERPAPI_KEY", "")
APPS_SCRIPT_URL = os.getenv("LACHOW_APPS_SCRIPT_URL", "")

RESULTS_PER_QUERY = int(os.getenv("LACHOW_RESULTS_PER_QUERY", "10"))
MAX_RESULTS_PER_QUERY = 100  # SerpAPI limit
REQUEST_DELAY_S = float(os.getenv("LACHOW_REQUEST_DELAY_S", "0.5"))
REQUEST_TIMEOUT_S = 20

CACHE_DIR = os.getenv("LACHOW_CACHE_DIR", os.path.join("cache", "serpapi"))

# ============================== logging ===============================
LOG_LEVEL = os.getenv("LACHOW_LOG", "INFO").upper()
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
