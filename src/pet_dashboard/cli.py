"""
Command-line entrypoint for the Pet Finder dashboard.

- Parses CLI args and config (flags fall back to environment variables)
- `summary`: exchanges credentials for a token, fetches up to 50 listings,
  prints the summary statistics and the first matching names
- `serve`: runs the FastAPI dashboard under uvicorn

Handles fetch failures and KeyboardInterrupt cleanly for user experience.
"""
from __future__ import annotations
import asyncio, sys

import uvicorn

from .api import FetchError, PetfinderAPI, open_http
from .config import PetfinderConfig, config_from_args, parse_args
from .presentation import filter_animals, visible_animals
from .stats import compute_stats, summary_lines
from .web import create_app

def banner(config: PetfinderConfig, mode: str) -> str:
    return f"""
        ====== Pet Finder Dashboard ({mode}) ======
        Base URL       : {config.base_url}
        Client id      : {config.masked()}
        Timeouts (s)   : connect={config.connect_timeout} read={config.read_timeout}
        ==========================================
    """

async def run_summary(config: PetfinderConfig, query: str = "", type_filter: str = "") -> None:
    async with open_http(config) as http:
        api = PetfinderAPI(http, config)
        pets = await api.fetch_animals()

    for line in summary_lines(compute_stats(pets)):
        print(line)

    shown = visible_animals(pets, query, type_filter)
    print(f"\nShowing {len(shown)} of {len(filter_animals(pets, query, type_filter))} matching pets:")
    for pet in shown:
        print(f"  [{pet.get('id')}] {pet.get('name')} ({pet.get('type')})")

def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    print(banner(config, args.command), file=sys.stderr)
    if args.command == "serve":
        uvicorn.run(create_app(config), host=args.host, port=args.port)
        return

    try:
        asyncio.run(run_summary(config, args.query, args.type_filter))
    except FetchError as e:
        print(f"Error fetching data: {e.message}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Aborted.", file=sys.stderr)

if __name__ == "__main__":
    main()
