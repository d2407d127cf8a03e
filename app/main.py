import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, field_validator

from app.assistant import Assistant
from app.config import get_settings
from app.page import HOMEPAGE_HTML
from app.store import TicketStore, TicketStoreError

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("assistiq")

DEFAULT_NAME = "Guest"
DEFAULT_MESSAGE = "No message"


# ---- Dependencies ----
@lru_cache(maxsize=1)
def get_store() -> TicketStore:
    return TicketStore(get_settings().database_url)


@lru_cache(maxsize=1)
def get_assistant() -> Assistant:
    s = get_settings()
    return Assistant(
        api_key=s.openai_api_key,
        model=s.openai_model,
        base_url=s.openai_base_url,
        timeout=s.openai_timeout,
    )


@asynccontextmanager
async def lifespan(app_: FastAPI):
    store = app_.dependency_overrides.get(get_store, get_store)()
    try:
        store.init_schema()
        logger.info("Ticket database ready at %s", store.path)
    except TicketStoreError as e:
        logger.error("Ticket database unavailable: %s", e)
    if not get_settings().openai_api_key:
        logger.warning("OPENAI_API_KEY not set; every reply will be the fallback message")
    yield


app = FastAPI(title="AssistIQ Support API", lifespan=lifespan)


# ---- Models ----
class ChatIn(BaseModel):
    name: Optional[str] = None
    message: Optional[str] = None

    @field_validator("name", "message", mode="before")
    @classmethod
    def coerce_scalar(cls, v: Any) -> Optional[str]:
        # scalars are stored as text, anything else falls back to the default
        if isinstance(v, bool):
            return "true" if v else None
        if isinstance(v, (int, float)):
            return str(v) if v else None
        if isinstance(v, str):
            return v
        return None


class ChatOut(BaseModel):
    ticketId: int
    reply: str


async def chat_fields(request: Request) -> ChatIn:
    """Lenient body parsing: a missing, non-JSON or non-object body means no fields."""
    try:
        data = await request.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        data = {}
    return ChatIn.model_validate(data)


# ---- Endpoints ----
@app.get("/", response_class=HTMLResponse)
def homepage():
    return HOMEPAGE_HTML


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/chat", response_model=ChatOut)
def chat(
    t: ChatIn = Depends(chat_fields),
    store: TicketStore = Depends(get_store),
    assistant: Assistant = Depends(get_assistant),
):
    name = t.name or DEFAULT_NAME
    message = t.message or DEFAULT_MESSAGE

    try:
        ticket = store.create(name, message)
    except TicketStoreError as e:
        logger.exception("Chat endpoint error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to save ticket"})

    reply = assistant.reply(message)
    logger.info("Ticket %s saved for %s (%s chars reply)", ticket.id, name, len(reply))
    return ChatOut(ticketId=ticket.id, reply=reply)


@app.get("/tickets")
def list_tickets(store: TicketStore = Depends(get_store)):
    try:
        tickets = store.list_recent()
    except TicketStoreError as e:
        logger.exception("Ticket list error: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch tickets"})
    return {"tickets": [x.as_dict() for x in tickets]}
