from __future__ import annotations
import argparse, os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.petfinder.com/v2"

@dataclass(frozen=True)
class PetfinderConfig:
    """Everything the API client needs; passed in explicitly, never read from the environment by the client."""
    client_id: str
    client_secret: str
    base_url: str = DEFAULT_BASE_URL
    connect_timeout: float = 5.0
    read_timeout: float = 30.0

    def masked(self) -> str:
        return f"{self.client_id[:4]}…" if self.client_id else "<unset>"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pet-dashboard", description="Pet Finder dashboard")
    p.add_argument("--client-id", default=os.getenv("PETFINDER_API_KEY"))
    p.add_argument("--client-secret", default=os.getenv("PETFINDER_API_SECRET"))
    p.add_argument("--base-url", default=os.getenv("PETFINDER_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--connect-timeout", type=float, default=float(os.getenv("CONNECT_TIMEOUT", "5")))
    p.add_argument("--read-timeout", type=float, default=float(os.getenv("READ_TIMEOUT", "30")))

    sub = p.add_subparsers(dest="command", required=True)

    summary = sub.add_parser("summary", help="fetch listings once and print summary statistics")
    summary.add_argument("--query", default="", help="case-insensitive name substring")
    summary.add_argument("--type", dest="type_filter", default="", help="exact animal type, e.g. Dog")

    serve = sub.add_parser("serve", help="run the web dashboard")
    serve.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    return p

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)

def config_from_args(args: argparse.Namespace) -> PetfinderConfig:
    if not args.client_id or not args.client_secret:
        raise ValueError("Petfinder credentials missing: set PETFINDER_API_KEY and PETFINDER_API_SECRET or pass --client-id/--client-secret")
    return PetfinderConfig(
        client_id=args.client_id,
        client_secret=args.client_secret,
        base_url=args.base_url,
        connect_timeout=args.connect_timeout,
        read_timeout=args.read_timeout,
    )
