#!/usr/bin/env python3
"""
CoinMarketCap API smoke test
"""
import sys
import logging
from typing import Any, Callable, Dict, List

from . import api
from .client import close_session
from .config import load_env_from_dotenv, load_config
from .endpoints import ENDPOINTS
from .formatting import format_price, format_large, fmt_pct
from .logger import setup_logging
from .results import is_success

logger = logging.getLogger(__name__)

def _summarize_listings(payload: Dict[str, Any]) -> List[str]:
    coins = payload["data"]
    return [
        f"Retrieved {len(coins)} cryptocurrencies",
        f"First cryptocurrency: {coins[0]['name']}",
    ]

def _summarize_quotes(payload: Dict[str, Any]) -> List[str]:
    usd = payload["data"]["BTC"]["quote"]["USD"]
    return [
        f"Bitcoin price: ${format_price(usd['price'])} (24h: {fmt_pct(usd.get('percent_change_24h'))})",
        f"Bitcoin market cap: ${format_large(usd['market_cap'])}",
    ]

def _summarize_airdrops(payload: Dict[str, Any]) -> List[str]:
    airdrops = payload["data"]
    if not airdrops:
        return ["No airdrops listed"]
    return [f"First airdrop: {airdrops[0]['name']}"]

def _summarize_info(payload: Dict[str, Any]) -> List[str]:
    btc = payload["data"]["BTC"]
    description = (btc.get("description") or "")[:100]
    return [
        f"Name: {btc['name']}",
        f"Category: {btc.get('category')}",
        f"Description: {description}...",
    ]

def _summarize_map(payload: Dict[str, Any]) -> List[str]:
    return [f"{c['name']} ({c['symbol']}): ID {c['id']}" for c in payload["data"]]

def _summarize_market_pairs(payload: Dict[str, Any]) -> List[str]:
    data = payload["data"]
    pairs = data.get("market_pairs") or []
    lines = [f"Number of market pairs: {data['num_market_pairs']}"]
    if pairs:
        first = pairs[0]
        lines.append(f"First market pair: {first['market_pair']} on {first['exchange']['name']}")
    return lines

def _summarize_exchanges(payload: Dict[str, Any]) -> List[str]:
    return [
        f"{ex['name']}: Volume 24h ${format_large(ex['quote']['USD']['volume_24h'])}"
        for ex in payload["data"]
    ]

def _summarize_exchange_info(payload: Dict[str, Any]) -> List[str]:
    exchange = list(payload["data"].values())[0]
    return [f"Exchange: {exchange['name']} ({exchange.get('urls', {}).get('website', ['?'])[0]})"]

def _summarize_global_metrics(payload: Dict[str, Any]) -> List[str]:
    usd = payload["data"]["quote"]["USD"]
    return [
        f"Global Market Cap: ${format_large(usd['total_market_cap'])}",
        f"Total Volume 24h: ${format_large(usd['total_volume_24h'])}",
    ]

def _summarize_conversion(payload: Dict[str, Any]) -> List[str]:
    data = payload["data"]
    return [f"{data['amount']} {data['symbol']} = {format_price(data['quote']['USD']['price'])} USD"]

def _summarize_key_info(payload: Dict[str, Any]) -> List[str]:
    usage = payload["data"]["usage"]["current_day"]
    return [f"Credits used today: {usage['credits_used']} (left: {usage['credits_left']})"]

SMOKE_TESTS: List[tuple] = [
    ("Fetching cryptocurrency listings", lambda: api.get_latest_listings(), _summarize_listings),
    ("Fetching cryptocurrency quotes", lambda: api.get_crypto_quotes("BTC"), _summarize_quotes),
    ("Fetching cryptocurrency airdrops", lambda: api.get_airdrops(), _summarize_airdrops),
    ("Fetching cryptocurrency info", lambda: api.get_crypto_info("BTC"), _summarize_info),
    ("Fetching cryptocurrency map", lambda: api.get_crypto_map({"limit": 5}), _summarize_map),
    ("Fetching market pairs", lambda: api.get_market_pairs("BTC"), _summarize_market_pairs),
    ("Fetching FIAT map", lambda: api.get_fiat_map({"limit": 5}), _summarize_map),
    ("Fetching exchange listings", lambda: api.get_exchange_listings({"limit": 5}), _summarize_exchanges),
    ("Fetching exchange info", lambda: api.get_exchange_info("270"), _summarize_exchange_info),
    ("Fetching global metrics", lambda: api.get_global_metrics(), _summarize_global_metrics),
    ("Testing price conversion", lambda: api.get_price_conversion(1, "BTC", "USD"), _summarize_conversion),
    ("Fetching API key usage", lambda: api.get_key_info(), _summarize_key_info),
]

def report(title: str, result: Dict[str, Any], summarize: Callable[[Dict[str, Any]], List[str]]) -> bool:
    """Prints the outcome of one call; returns whether it succeeded."""
    print(f"\nTest: {title}")
    ok = is_success(result)
    print("Status:", "SUCCESS" if ok else "FAILED")
    if not ok:
        print("Error:", result["error"]["message"])
        return False
    try:
        for line in summarize(result["data"]):
            print(line)
    except (KeyError, IndexError, TypeError, AttributeError) as e:
        logger.warning(f"Unexpected payload shape for '{title}': {e!r}")
        print("Unexpected payload:", str(result["data"])[:200])
    return True

def run_smoke_test() -> int:
    """Calls each endpoint once in order and prints a summary; returns the number of failures."""
    print("Testing CoinMarketCap API...")
    failures = 0
    for title, call, summarize in SMOKE_TESTS:
        if not report(title, call(), summarize):
            failures += 1
    print(f"\nAPI testing completed ({len(SMOKE_TESTS) - failures}/{len(SMOKE_TESTS)} succeeded)")
    return failures

def list_endpoints() -> None:
    width = max(len(name) for name in ENDPOINTS)
    for name, path in ENDPOINTS.items():
        print(f"{name.ljust(width)}  {path}")

def main(argv: List[str]) -> int:
    """Main entry point for the smoke test."""
    load_env_from_dotenv()
    load_config()
    setup_logging()

    args = set(a.lower() for a in argv[1:])
    if "--list" in args:
        list_endpoints()
        return 0
    try:
        return 1 if run_smoke_test() else 0
    finally:
        close_session()

def cli() -> None:
    try:
        sys.exit(main(sys.argv))
    except KeyboardInterrupt:
        logging.info("Smoke test stopped by user.")

if __name__ == "__main__":
    cli()
