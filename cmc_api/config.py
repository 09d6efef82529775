# cmc_api/config.py
import os
import logging
import configparser

logger = logging.getLogger(__name__)

config = configparser.ConfigParser()

SECTION = "coinmarketcap"
DEFAULT_BASE_URL = "https://pro-api.coinmarketcap.com/v1"
DEFAULT_TIMEOUT = 20.0

def load_config(path: str = "config.ini") -> None:
    """Loads configuration from a .ini file."""
    if os.path.isfile(path):
        config.read(path)

def load_env_from_dotenv(path: str = ".env") -> None:
    """Load simple KEY=VALUE pairs from a .env file into os.environ if not already set."""
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    continue
                key, val = line.split("=", 1)
                key = key.strip()
                val = val.strip().strip('"').strip("'")
                if key and key not in os.environ:
                    os.environ[key] = val
    except OSError as e:
        logger.warning(f"Failed to read .env file: {e}")

def get_config(section: str, key: str, env_var: str, default: str = "") -> str:
    """Gets a configuration value from environment variables or config.ini."""
    value = os.getenv(env_var)
    if value is not None:
        return value
    return config.get(section, key, fallback=default)

def get_float_config(section: str, key: str, env_var: str, default: float = 0.0) -> float:
    """Gets a float configuration value; unparseable values fall back to the default."""
    value = os.getenv(env_var)
    if value is None:
        value = config.get(section, key, fallback=None)
    if value is None:
        return default
    try:
        return float(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid number for {env_var} ({value!r}); using {default}")
        return default

def get_api_key() -> str:
    return get_config(SECTION, "api_key", "CMC_API_KEY").strip()

def get_base_url() -> str:
    return get_config(SECTION, "base_url", "CMC_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

def get_timeout() -> float:
    """Request timeout in seconds; zero or negative values use the default."""
    timeout = get_float_config(SECTION, "timeout", "CMC_TIMEOUT", DEFAULT_TIMEOUT)
    if not timeout > 0:
        logger.warning(f"CMC_TIMEOUT must be positive, got {timeout}; using {DEFAULT_TIMEOUT}")
        return DEFAULT_TIMEOUT
    return timeout
