"""
WebSocket endpoint for the job-listing page.

Each connection gets its own ListingController. The browser forwards UI
events as JSON messages; the server pushes rendered views back:

  client → {"type": "auth", "token": ...}      session becomes ready
           {"type": "search", "query": ...}    debounced
           {"type": "submit_search", "query": ...}
           {"type": "location" | "company", "value": ...}
           {"type": "clear"} | {"type": "retry"}
           {"type": "page", "page": n}
  server → {"type": "view", "view": {...}}
           {"type": "scroll", "behavior": "smooth", "block": "start"}
           {"type": "error", "detail": ...}
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect
from pydantic import TypeAdapter, ValidationError

from hirrd.config import settings
from hirrd.dependencies import get_db, get_job_service
from hirrd.domain.locations import get_locations
from hirrd.domain.models import (
    AuthEvent,
    ClearEvent,
    CompanyEvent,
    ErrorMessage,
    ListingEvent,
    ListingView,
    LocationEvent,
    PageEvent,
    RetryEvent,
    ScrollMessage,
    SearchEvent,
    SubmitSearchEvent,
    ViewMessage,
)
from hirrd.listing.controller import ListingController
from hirrd.listing.errors import NotReadyError
from hirrd.listing.readiness import ReadinessGate
from hirrd.ports.database_port import DatabasePort
from hirrd.services.auth_service import resolve_user
from hirrd.services.job_service import JobService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Listing"])

_EVENT_ADAPTER = TypeAdapter(ListingEvent)


class ListingSession:
    """
    One listing page session: controller, readiness gate and an outbox
    drained by a single sender task (so sends never interleave).
    """

    def __init__(
        self, websocket: WebSocket, job_svc: JobService, db: DatabasePort
    ) -> None:
        self._ws = websocket
        self._db = db
        self._outbox: asyncio.Queue[str] = asyncio.Queue()
        self._sender: asyncio.Task | None = None
        self.readiness = ReadinessGate()
        self.controller = ListingController(
            job_svc.list_jobs,
            job_svc.list_companies,
            self.readiness,
            items_per_page=settings.listing_items_per_page,
            debounce_seconds=settings.listing_debounce_seconds,
            locations=get_locations(settings.location_country),
            on_change=self._push_view,
            on_scroll=self._push_scroll,
        )

    def start(self) -> None:
        self._sender = asyncio.create_task(self._pump())
        self.controller.start()

    async def close(self) -> None:
        await self.controller.close()
        if self._sender is not None:
            self._sender.cancel()
            await asyncio.gather(self._sender, return_exceptions=True)

    def send(self, text: str) -> None:
        self._outbox.put_nowait(text)

    def send_error(self, detail: str) -> None:
        self.send(ErrorMessage(detail=detail).model_dump_json())

    async def handle(self, raw: str) -> None:
        try:
            event = _EVENT_ADAPTER.validate_json(raw)
        except ValidationError as e:
            self.send_error(f"Invalid message: {e.error_count()} validation error(s)")
            return

        controller = self.controller
        if isinstance(event, AuthEvent):
            await self._authenticate(event.token)
        elif isinstance(event, SearchEvent):
            controller.search(event.query)
        elif isinstance(event, SubmitSearchEvent):
            controller.submit_search(event.query)
        elif isinstance(event, LocationEvent):
            controller.set_location(event.value)
        elif isinstance(event, CompanyEvent):
            controller.set_company(event.value)
        elif isinstance(event, ClearEvent):
            controller.clear_all()
        elif isinstance(event, PageEvent):
            controller.go_to_page(event.page)
        elif isinstance(event, RetryEvent):
            try:
                controller.retry()
            except NotReadyError:
                # Retrying before auth is a no-op, not a user-facing error
                logger.debug("Ignoring retry before the session is ready")

    async def _authenticate(self, token: str) -> None:
        try:
            user = await resolve_user(token, self._db)
        except HTTPException as e:
            self.send_error(str(e.detail))
            return
        logger.info("Listing session ready for user %s", user.id)
        self.readiness.set_ready(True)

    def _push_view(self, view: ListingView) -> None:
        self.send(ViewMessage(view=view).model_dump_json())

    def _push_scroll(self) -> None:
        self.send(ScrollMessage().model_dump_json())

    async def _pump(self) -> None:
        while True:
            text = await self._outbox.get()
            await self._ws.send_text(text)


@router.websocket("/ws/listing")
async def websocket_listing(
    websocket: WebSocket,
    job_svc: JobService = Depends(get_job_service),
    db: DatabasePort = Depends(get_db),
):
    """
    Job-listing session. Nothing is fetched until a valid `auth` message
    arrives; views are pushed after every state change.
    """
    await websocket.accept()
    session = ListingSession(websocket, job_svc, db)
    session.start()

    try:
        while True:
            data = await websocket.receive_text()

            # Heartbeat pings
            if data == "__ping__":
                session.send("__pong__")
                continue

            if not data.strip():
                continue

            await session.handle(data)

    except WebSocketDisconnect:
        logger.info("Listing WebSocket disconnected")
    finally:
        await session.close()
