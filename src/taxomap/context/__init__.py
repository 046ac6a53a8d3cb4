"""Context graphs of related taxonomy entries."""

from .context import ARTICLES, CATEGORIES, CHILDREN, PARENTS, Context
from .provider import ContextProvider

__all__ = ["Context", "ContextProvider", "PARENTS", "CHILDREN", "ARTICLES", "CATEGORIES"]
