# cmc_api/api.py
import logging
from typing import Dict, Any, Mapping, Optional
import requests

from .client import get_session
from .endpoints import endpoint_path
from .results import success_result, failure_result

logger = logging.getLogger(__name__)

Params = Mapping[str, Any]

def merge_params(defaults: Optional[Params], overrides: Optional[Params]) -> Dict[str, Any]:
    """Shallow-merges caller overrides onto defaults; None values are left out of the query."""
    merged = dict(defaults or {})
    merged.update(overrides or {})
    return {k: v for k, v in merged.items() if v is not None}

def call_endpoint(name: str, params: Optional[Params] = None, defaults: Optional[Params] = None) -> Dict[str, Any]:
    """Sends one GET to a named endpoint and wraps the outcome in a result envelope.

    Request failures (connection errors, timeouts, non-2xx statuses) are
    returned as a failure envelope instead of being raised.
    """
    path = endpoint_path(name)
    query = merge_params(defaults, params)
    logger.debug(f"GET {path} {query}")
    try:
        resp = get_session().get(path, params=query)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning(f"CoinMarketCap {name} request failed: {e}")
        return failure_result(e)
    return success_result(resp)

# Cryptocurrency

def get_latest_listings(params: Optional[Params] = None) -> Dict[str, Any]:
    """Latest market listings, ranked by market cap."""
    defaults = {"start": 1, "limit": 10, "convert": "USD"}
    return call_endpoint("listings", params, defaults)

def get_crypto_quotes(symbol: str, convert: str = "USD", params: Optional[Params] = None) -> Dict[str, Any]:
    """Latest quote for one or more comma-separated symbols."""
    return call_endpoint("quotes", params, {"symbol": symbol, "convert": convert})

def get_crypto_info(symbol: str, params: Optional[Params] = None) -> Dict[str, Any]:
    """Static metadata (logo, description, urls) for a symbol."""
    return call_endpoint("info", params, {"symbol": symbol})

def get_crypto_map(params: Optional[Params] = None) -> Dict[str, Any]:
    """Mapping of cryptocurrencies to CoinMarketCap ids."""
    defaults = {"listing_status": "active", "start": 1, "limit": 100}
    return call_endpoint("map", params, defaults)

def get_market_pairs(symbol: str, params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("market_pairs", params, {"symbol": symbol})

def get_ohlcv_latest(symbol: str, convert: str = "USD", params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("ohlcv", params, {"symbol": symbol, "convert": convert})

def get_price_performance(
    symbol: str,
    time_period: str = "all_time",
    convert: str = "USD",
    params: Optional[Params] = None,
) -> Dict[str, Any]:
    defaults = {"symbol": symbol, "time_period": time_period, "convert": convert}
    return call_endpoint("price_performance", params, defaults)

def get_airdrops(params: Optional[Params] = None) -> Dict[str, Any]:
    """Airdrops filtered by status (UPCOMING, ONGOING, ENDED)."""
    defaults = {
        "id": None,
        "status": "UPCOMING",
        "start": 1,
        "limit": 100,
        "time_start": None,
        "time_end": None,
    }
    return call_endpoint("airdrops", params, defaults)

def get_categories(params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("categories", params, {"start": 1, "limit": 100})

# Fiat

def get_fiat_map(params: Optional[Params] = None) -> Dict[str, Any]:
    defaults = {"start": 1, "limit": 100, "sort": "name"}
    return call_endpoint("fiat_map", params, defaults)

# Exchanges

def get_exchange_listings(params: Optional[Params] = None) -> Dict[str, Any]:
    """Exchanges ranked by 24h volume."""
    defaults = {
        "start": 1,
        "limit": 100,
        "sort": "volume_24h",
        "sort_dir": "desc",
        "convert": "USD",
    }
    return call_endpoint("exchange_listings", params, defaults)

def get_exchange_quotes(exchange_id: str, convert: str = "USD", params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("exchange_quotes", params, {"id": exchange_id, "convert": convert})

def get_exchange_info(exchange_id: str, params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("exchange_info", params, {"id": exchange_id})

def get_exchange_map(params: Optional[Params] = None) -> Dict[str, Any]:
    defaults = {"listing_status": "active", "start": 1, "limit": 100, "sort": "id"}
    return call_endpoint("exchange_map", params, defaults)

# Global metrics, tools, blockchain, key

def get_global_metrics(convert: str = "USD", params: Optional[Params] = None) -> Dict[str, Any]:
    """Total market cap, volume and dominance figures."""
    return call_endpoint("global_metrics", params, {"convert": convert})

def get_price_conversion(
    amount: float,
    symbol: str,
    convert: str = "USD",
    params: Optional[Params] = None,
) -> Dict[str, Any]:
    """Converts an amount of one currency into another at the latest rate."""
    defaults = {"amount": amount, "symbol": symbol, "convert": convert}
    return call_endpoint("price_conversion", params, defaults)

def get_blockchain_statistics(symbol: str, params: Optional[Params] = None) -> Dict[str, Any]:
    return call_endpoint("blockchain_statistics", params, {"symbol": symbol})

def get_key_info() -> Dict[str, Any]:
    """Usage and plan details for the configured API key."""
    return call_endpoint("key_info")
