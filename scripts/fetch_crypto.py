"""Fetch a digital currency series or rating from the live API and print it."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from alphavantage_fetch import AlphaVantage, AlphaVantageError, Config, CryptoResponse, RatingResponse


def _print_series(response: CryptoResponse, rows: int) -> None:
    print(f"=== {response.meta_data.get('digital_currency_code')} / {response.market} ===")
    for unit in response.crypto_units[:rows]:
        print(f"{unit.date} open={unit.open} high={unit.high} low={unit.low} close={unit.close} volume={unit.volume}")


def _print_rating(response: RatingResponse) -> None:
    print(f"{response.symbol} ({response.name}): rating={response.rating} score={response.fcas_score}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("kind", choices=["daily", "weekly", "monthly", "rating"])
    parser.add_argument("symbol")
    parser.add_argument("--market", default="USD")
    parser.add_argument("--rows", type=int, default=5)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with AlphaVantage(Config.from_env()) as client:
        crypto = client.crypto()
        if args.kind == "rating":
            proxy = crypto.rating().for_symbol(args.symbol)
        else:
            proxy = getattr(crypto, args.kind)().for_symbol(args.symbol).market(args.market)
        try:
            response = proxy.fetch().result()
        except AlphaVantageError as exc:  # pragma: no cover - manual script
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if isinstance(response, RatingResponse):
        _print_rating(response)
    else:
        _print_series(response, args.rows)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual script
    sys.exit(main(sys.argv[1:]))
