from fastapi import APIRouter, Depends

from mdwiki.content_tree import tree_summary
from mdwiki.core.wiki import Wiki
from mdwiki.deps import get_wiki
from mdwiki.models import ErrorResponse, TreeResponse

router = APIRouter(tags=["content"])


@router.get("/tree", response_model=TreeResponse, responses={503: {"model": ErrorResponse}})
def content_tree(wiki: Wiki = Depends(get_wiki)) -> TreeResponse:
    return TreeResponse(**tree_summary(wiki))
