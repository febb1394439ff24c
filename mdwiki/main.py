from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mdwiki import __version__, config
from mdwiki.core.errors import WikiError
from mdwiki.core.wiki import Wiki
from mdwiki.log_utils import inject_request_id, log_event, setup_logging
from mdwiki.models import ErrorResponse
from mdwiki.routers.api import api_router
from mdwiki.routers.pages import router as pages_router


setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if config.init_on_startup():
        wiki = Wiki.from_env()
        wiki.initialize()
        log_event("initialized wiki", root=wiki.root)
    yield


# every other top-level path belongs to the wiki
app = FastAPI(
    title="mdwiki",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/v1/docs",
    redoc_url=None,
    openapi_url="/api/v1/openapi.json",
)


@app.middleware("http")
async def add_req_id(request, call_next):
    return await inject_request_id(request, call_next)


@app.exception_handler(WikiError)
async def wiki_error_handler(request: Request, exc: WikiError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(code=exc.code, message=exc.message, details=exc.details).model_dump(),
    )


app.include_router(api_router)
app.include_router(pages_router)
