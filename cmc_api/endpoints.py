# cmc_api/endpoints.py
"""Endpoint name to path table for the CoinMarketCap Pro API (v1)."""
from types import MappingProxyType
from typing import Mapping

ENDPOINTS: Mapping[str, str] = MappingProxyType({
    # cryptocurrency
    "listings": "/cryptocurrency/listings/latest",
    "quotes": "/cryptocurrency/quotes/latest",
    "info": "/cryptocurrency/info",
    "map": "/cryptocurrency/map",
    "market_pairs": "/cryptocurrency/market-pairs/latest",
    "ohlcv": "/cryptocurrency/ohlcv/latest",
    "price_performance": "/cryptocurrency/price-performance-stats/latest",
    "airdrops": "/cryptocurrency/airdrops",
    "categories": "/cryptocurrency/categories",
    # fiat
    "fiat_map": "/fiat/map",
    # exchange
    "exchange_listings": "/exchange/listings/latest",
    "exchange_quotes": "/exchange/quotes/latest",
    "exchange_info": "/exchange/info",
    "exchange_map": "/exchange/map",
    # global metrics, tools, blockchain, key
    "global_metrics": "/global-metrics/quotes/latest",
    "price_conversion": "/tools/price-conversion",
    "blockchain_statistics": "/blockchain/statistics/latest",
    "key_info": "/key/info",
})

def endpoint_path(name: str) -> str:
    """Returns the path for a named endpoint. Unknown names raise KeyError."""
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise KeyError(f"Unknown CoinMarketCap endpoint: {name!r}") from None
