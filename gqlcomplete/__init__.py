"""gqlcomplete - Schema-aware GraphQL autocompletion."""

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "Cursor",
    "Suggestion",
    "get_autocomplete_suggestions",
]

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .cli import main
    from .domains.query.completion import Cursor, Suggestion, get_autocomplete_suggestions


def __getattr__(name: str) -> Any:
    """Lazy imports to keep package import side-effect free."""
    if name == "main":
        from .cli import main

        return main
    if name in ("Cursor", "Suggestion", "get_autocomplete_suggestions"):
        from .domains.query import completion

        return getattr(completion, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
