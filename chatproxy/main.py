import logging
from contextlib import asynccontextmanager

import uvicorn
from agents import set_tracing_disabled
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from chatproxy.exchange import ExchangeService
from chatproxy.models import ExchangeRequest, ExchangeResponse
from chatproxy.settings import load_settings

logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("chatproxy")

settings = load_settings()

service: ExchangeService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global service
    set_tracing_disabled(not settings.tracing_enabled)
    service = ExchangeService.from_settings(settings)
    logger.info("Config: model=%s tracing=%s", settings.model, settings.tracing_enabled)
    yield
    service = None


app = FastAPI(title="Chat Proxy", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/", response_class=PlainTextResponse)
def index():
    return "hello world"


@app.get("/health")
def health():
    return {"status": "ok"}


# Upstream failures are reported inside a 200 body, never as an HTTP error.
@app.post("/api/content", response_model=ExchangeResponse)
def content(request: ExchangeRequest):
    return ExchangeResponse(response=service.exchange(request.questions))


def run() -> None:
    logger.info("app is listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
