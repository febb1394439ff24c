import os

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from mdwiki import config
from mdwiki.core.vcs import VersionControl
from mdwiki.models import HealthResponse, ReadyResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(ok=True)


@router.get(
    "/ready",
    response_model=ReadyResponse,
    responses={503: {"model": ReadyResponse, "description": "Wiki root missing or not a git work tree"}},
)
def ready():
    root = config.wiki_root()
    reason = None
    if not root:
        reason = "WIKI_ROOT missing"
    elif not os.path.isdir(root):
        reason = f"WIKI_ROOT {root} is not a directory"
    elif not VersionControl(os.path.realpath(root)).is_repository():
        reason = f"WIKI_ROOT {root} is not a git work tree"

    if reason:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ReadyResponse(ready=False, reason=reason).model_dump(),
        )
    return ReadyResponse(ready=True)
