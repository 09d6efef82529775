# cmc_api/client.py
"""Shared HTTP session for the CoinMarketCap Pro API."""
import logging
import threading
from typing import Optional
import requests

from .config import get_api_key, get_base_url, get_timeout

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-CMC_PRO_API_KEY"

class CoinMarketCapSession(requests.Session):
    """A requests.Session bound to a base URL, an API key header and a default timeout.

    Paths starting with "/" are joined onto the base URL, so callers only
    pass endpoint paths such as "/cryptocurrency/map".
    """

    def __init__(self, base_url: str, api_key: str = "", timeout: Optional[float] = None) -> None:
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers["Accept"] = "application/json"
        if api_key:
            self.headers[API_KEY_HEADER] = api_key

    def request(self, method, url, *args, **kwargs):
        if url.startswith("/"):
            url = self.base_url + url
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, *args, **kwargs)

def build_session(
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> CoinMarketCapSession:
    """Builds a session, filling anything not given from the environment or config.ini."""
    if api_key is None:
        api_key = get_api_key()
    if base_url is None:
        base_url = get_base_url()
    if timeout is None:
        timeout = get_timeout()
    if not api_key:
        logger.warning("CMC_API_KEY is not set; requests will be rejected by CoinMarketCap.")
    return CoinMarketCapSession(base_url, api_key=api_key, timeout=timeout)

_session: Optional[CoinMarketCapSession] = None
_session_lock = threading.Lock()

def get_session() -> CoinMarketCapSession:
    """Returns the shared session, creating it on first use."""
    global _session
    with _session_lock:
        if _session is None:
            _session = build_session()
            logger.debug(f"Created CoinMarketCap session for {_session.base_url}")
        return _session

def close_session() -> None:
    """Closes the shared session; the next get_session() builds a fresh one."""
    global _session
    with _session_lock:
        if _session is not None:
            _session.close()
            _session = None
