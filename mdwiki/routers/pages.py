from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from mdwiki.core.paths import breadcrumbs, clean_uri, parent_uri
from mdwiki.core.wiki import Wiki
from mdwiki.deps import get_templates, get_wiki
from mdwiki.models import ErrorResponse

router = APIRouter(tags=["pages"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


def _redirect(uri: str) -> RedirectResponse:
    return RedirectResponse(uri, status_code=status.HTTP_302_FOUND)


@router.get("/edit/{path:path}", response_class=HTMLResponse, responses=ERROR_RESPONSES)
def show_edit(request: Request, path: str, wiki: Wiki = Depends(get_wiki)):
    page = wiki.get_page(path)
    return get_templates().TemplateResponse(request, "edit.html", {"page": page, "crumbs": page.crumbs()})


@router.post("/api/create/{path:path}", responses=ERROR_RESPONSES)
def create_page(path: str, wiki: Wiki = Depends(get_wiki)) -> RedirectResponse:
    wiki.create(path)
    return _redirect(clean_uri(path))


@router.post("/api/edit/{path:path}", responses=ERROR_RESPONSES)
def edit_page(
    path: str,
    new_contents: str = Form(default="", description="Replacement markdown for the page"),
    wiki: Wiki = Depends(get_wiki),
) -> RedirectResponse:
    wiki.edit(path, new_contents)
    return _redirect(clean_uri(path))


@router.post("/api/remove/{path:path}", responses=ERROR_RESPONSES)
def remove_page(path: str, wiki: Wiki = Depends(get_wiki)) -> RedirectResponse:
    wiki.remove(path)
    return _redirect(parent_uri(path))


# catch-all, must stay last
@router.get("/{path:path}", response_class=HTMLResponse, responses=ERROR_RESPONSES)
def show_page(request: Request, path: str, wiki: Wiki = Depends(get_wiki)):
    uri = clean_uri(path)
    kind = wiki.stat(path)
    if kind == "dir":
        context = {"uri": uri, "entries": wiki.get_dir(path), "crumbs": breadcrumbs(uri.rstrip("/") + "/")}
        return get_templates().TemplateResponse(request, "list.html", context)
    if kind == "file":
        page = wiki.get_page(path).process_markdown()
        return get_templates().TemplateResponse(request, "show.html", {"page": page, "crumbs": page.crumbs()})
    return get_templates().TemplateResponse(request, "create.html", {"uri": uri, "path": path, "crumbs": breadcrumbs(uri)})
