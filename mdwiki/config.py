import os
from pathlib import Path

from dotenv import load_dotenv

from mdwiki.core.vcs import DEFAULT_AUTHOR_EMAIL, DEFAULT_AUTHOR_NAME


load_dotenv()

TRUTHY_VALUES = {"1", "true", "yes", "on"}
BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def parse_boolish(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_VALUES


def wiki_root() -> str:
    return os.getenv("WIKI_ROOT", "").strip()


def init_on_startup() -> bool:
    return parse_boolish(os.getenv("WIKI_INIT"))


def git_identity() -> tuple[str, str]:
    name = os.getenv("WIKI_GIT_AUTHOR_NAME", "").strip() or DEFAULT_AUTHOR_NAME
    email = os.getenv("WIKI_GIT_AUTHOR_EMAIL", "").strip() or DEFAULT_AUTHOR_EMAIL
    return name, email


def templates_dir() -> str:
    return os.getenv("WIKI_TEMPLATES_DIR", "").strip() or str(BUNDLED_TEMPLATES_DIR)
