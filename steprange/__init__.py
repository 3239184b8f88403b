from importlib.resources import files

from .range import Range, span
from .util import DEFAULT_STOP

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Range",
    "span",
    "DEFAULT_STOP",
    "docs",
]
