from functools import lru_cache

from fastapi.templating import Jinja2Templates

from mdwiki import config
from mdwiki.core.wiki import Wiki


@lru_cache(maxsize=None)
def _templates_for(directory: str) -> Jinja2Templates:
    return Jinja2Templates(directory=directory)


def get_templates() -> Jinja2Templates:
    return _templates_for(config.templates_dir())


def get_wiki() -> Wiki:
    return Wiki.from_env()


__all__ = ["get_templates", "get_wiki"]
