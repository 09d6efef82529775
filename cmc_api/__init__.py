"""Thin client for the CoinMarketCap Pro API.

Every endpoint function returns a result envelope instead of raising:
``{"success": True, "data": ..., "status": ...}`` or
``{"success": False, "error": {"message": ..., "response": ..., "status": ...}}``.
"""
from .api import (
    call_endpoint,
    merge_params,
    get_latest_listings,
    get_crypto_quotes,
    get_crypto_info,
    get_crypto_map,
    get_market_pairs,
    get_ohlcv_latest,
    get_price_performance,
    get_airdrops,
    get_categories,
    get_fiat_map,
    get_exchange_listings,
    get_exchange_quotes,
    get_exchange_info,
    get_exchange_map,
    get_global_metrics,
    get_price_conversion,
    get_blockchain_statistics,
    get_key_info,
)
from .client import build_session, get_session, close_session
from .endpoints import ENDPOINTS, endpoint_path
from .results import is_success

__version__ = "0.1.0"
