"""
Async API wrapper around the Petfinder v2 endpoints.

Provides a typed interface for:
- Exchanging client credentials for a bearer token (`fetch_token`)
- Listing up to 50 animals (`list_animals`)
- Fetching a single animal by id (`get_animal`)

and the two fetch sequences the views run (`fetch_animals`, `fetch_animal`),
each of which re-authenticates from scratch.

Any non-2xx status, network failure or malformed JSON body is turned into a
`TokenFetchError` or `DataFetchError` carrying a short message; callers never
see raw httpx detail.
"""
from __future__ import annotations
import sys
from typing import Any, List

import httpx

from .config import PetfinderConfig
from .http_client import HttpClient
from .models import AnimalRecord

LISTING_LIMIT = 50

class FetchError(Exception):
    """A failed fetch, reduced to one user-visible message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class TokenFetchError(FetchError):
    pass

class DataFetchError(FetchError):
    pass

def _json_body(resp: httpx.Response, error: type[FetchError], message: str) -> Any:
    try:
        return resp.json()
    except ValueError:
        print(f"[warn] non-JSON response from {resp.request.url}: {resp.text[:200]}", file=sys.stderr)
        raise error(message)

class PetfinderAPI:

    def __init__(self, http: HttpClient, config: PetfinderConfig):
        self.http = http
        self.config = config

    async def fetch_token(self) -> str:
        form = {
            "grant_type": "client_credentials",
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
        }
        try:
            resp = await self.http.request("POST", "/oauth2/token", data=form)
        except httpx.HTTPError as e:
            raise TokenFetchError("Failed to fetch token") from e

        body = _json_body(resp, TokenFetchError, "Failed to fetch token")
        token = body.get("access_token") if isinstance(body, dict) else None
        if not token:
            raise TokenFetchError("Failed to fetch token")
        return token

    async def list_animals(self, token: str, limit: int = LISTING_LIMIT) -> List[AnimalRecord]:
        try:
            resp = await self.http.request(
                "GET", "/animals",
                params={"limit": limit},
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise DataFetchError("Failed to fetch pets") from e

        body = _json_body(resp, DataFetchError, "Failed to fetch pets")
        if not isinstance(body, dict):
            raise DataFetchError("Failed to fetch pets")
        animals = body.get("animals") or []
        if not isinstance(animals, list):
            print(f"[warn] 'animals' is {type(animals).__name__}, expected a list", file=sys.stderr)
            raise DataFetchError("Failed to fetch pets")

        records = [a for a in animals if isinstance(a, dict)]
        if len(records) != len(animals):
            print(f"[warn] dropped {len(animals) - len(records)} non-object listing entries", file=sys.stderr)
        return records

    async def get_animal(self, token: str, animal_id: int | str) -> AnimalRecord:
        try:
            resp = await self.http.request(
                "GET", f"/animals/{animal_id}",
                headers={"Authorization": f"Bearer {token}"},
            )
        except httpx.HTTPError as e:
            raise DataFetchError("Failed to load pet details") from e

        body = _json_body(resp, DataFetchError, "Failed to load pet details")
        animal = body.get("animal") if isinstance(body, dict) else None
        if not isinstance(animal, dict):
            raise DataFetchError("Failed to load pet details")
        return animal

    async def fetch_animals(self) -> List[AnimalRecord]:
        token = await self.fetch_token()
        return await self.list_animals(token)

    async def fetch_animal(self, animal_id: int | str) -> AnimalRecord:
        token = await self.fetch_token()
        return await self.get_animal(token, animal_id)

def open_http(config: PetfinderConfig, transport: httpx.AsyncBaseTransport | None = None) -> HttpClient:
    """HttpClient for the configured Petfinder base URL; use with `async with`."""
    return HttpClient(
        base_url=config.base_url,
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
        transport=transport,
    )
