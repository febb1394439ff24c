import json
import logging
import os
import time
import uuid

from starlette.requests import Request
from starlette.responses import Response


logger = logging.getLogger("mdwiki")


def setup_logging():
    level = os.getenv("WIKI_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO))


def log_event(msg: str, level: int = logging.INFO, **fields) -> None:
    logger.log(level, json.dumps({"msg": msg, **fields}, default=str))


async def inject_request_id(request: Request, call_next):
    req_id = request.headers.get("X-Request-Id", str(uuid.uuid4()))
    request.state.req_id = req_id
    started = time.perf_counter()
    response: Response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    log_event(
        "request",
        req_id=req_id,
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response
