"""
FastAPI app serving the dashboard and the per-pet detail page.

Each page load runs its own fetch sequence (token exchange, then listing or
detail) as a task tied to the request: if the browser goes away before the
fetch finishes, the task is cancelled instead of running to completion.
"""
from __future__ import annotations
import asyncio, sys
from pathlib import Path
from typing import Awaitable, Optional, TypeVar

import httpx
from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates

from .api import FetchError, PetfinderAPI, open_http
from .charts import ChartBuilder
from .config import PetfinderConfig
from .models import AnimalRecord
from .presentation import TYPE_OPTIONS, filter_animals, first_photo, primary_breed, visible_animals
from .stats import compute_stats, empty_stats

T = TypeVar("T")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
templates.env.globals.update(primary_breed=primary_breed, first_photo=first_photo)

DISCONNECT_POLL_SECONDS = 0.25
CLIENT_CLOSED_REQUEST = 499

class ClientDisconnected(Exception):
    """The browser closed the connection while its fetch was still running."""

async def run_bound_to_request(request: Request, work: Awaitable[T], poll_interval: float = DISCONNECT_POLL_SECONDS) -> T:
    """Await `work` as a task, cancelling it if the client disconnects first."""
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                print(f"[warn] client left {request.url.path}, cancelling fetch", file=sys.stderr)
                raise ClientDisconnected(request.url.path)
    finally:
        if not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

def create_app(config: PetfinderConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    app = FastAPI(title="Pet Finder Dashboard")
    app.state.config = config
    app.state.transport = transport
    app.state.charts = ChartBuilder()

    async def fetch_listing(request: Request) -> list[AnimalRecord]:
        async with open_http(request.app.state.config, request.app.state.transport) as http:
            api = PetfinderAPI(http, request.app.state.config)
            return await api.fetch_animals()

    async def fetch_detail(request: Request, pet_id: int) -> AnimalRecord:
        async with open_http(request.app.state.config, request.app.state.transport) as http:
            api = PetfinderAPI(http, request.app.state.config)
            return await api.fetch_animal(pet_id)

    @app.exception_handler(ClientDisconnected)
    async def client_disconnected(request: Request, exc: ClientDisconnected) -> Response:
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard(request: Request, q: str = "", type_filter: str = Query("", alias="type")) -> HTMLResponse:
        """Render the summary block, the filtered list and both charts."""
        pets: list[AnimalRecord] = []
        stats = empty_stats()
        error = None
        try:
            pets = await run_bound_to_request(request, fetch_listing(request))
            stats = compute_stats(pets)
        except FetchError as e:
            print(f"[error] Error fetching data: {e.message}", file=sys.stderr)
            error = e.message

        charts: ChartBuilder = request.app.state.charts
        return templates.TemplateResponse(
            request,
            "dashboard.html",
            {
                "error": error,
                "stats": stats,
                "pets": visible_animals(pets, q, type_filter),
                "match_count": len(filter_animals(pets, q, type_filter)),
                "query": q,
                "type_filter": type_filter,
                "type_options": TYPE_OPTIONS,
                "type_chart": charts.type_distribution_chart(stats["type_counts"]),
                "age_chart": charts.age_group_chart(pets),
            },
        )

    @app.get("/pet/{pet_id}", response_class=HTMLResponse)
    async def pet_detail(request: Request, pet_id: str) -> HTMLResponse:
        """Render one pet, fetched on its own rather than taken from the dashboard list."""
        pet = None
        error = None
        status_code = 200
        if not (pet_id.isascii() and pet_id.isdigit()):
            print(f"[error] pet {pet_id!r}: not a numeric id", file=sys.stderr)
            error = "Failed to load pet details"
            status_code = 404
        else:
            try:
                pet = await run_bound_to_request(request, fetch_detail(request, int(pet_id)))
            except FetchError as e:
                print(f"[error] pet {pet_id}: {e.message}", file=sys.stderr)
                error = "Failed to load pet details"
                status_code = 502

        return templates.TemplateResponse(
            request,
            "pet_detail.html",
            {"pet": pet, "error": error},
            status_code=status_code,
        )

    @app.get("/api/stats")
    async def stats_json(request: Request) -> JSONResponse:
        try:
            pets = await run_bound_to_request(request, fetch_listing(request))
        except FetchError as e:
            print(f"[error] Error fetching data: {e.message}", file=sys.stderr)
            return JSONResponse({"detail": e.message}, status_code=502)
        stats = compute_stats(pets)
        # JSON object keys must be strings
        stats["type_counts"] = {str(k) if k is not None else "null": v for k, v in stats["type_counts"].items()}
        return JSONResponse(stats)

    return app
