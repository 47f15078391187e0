# pulse/api/__init__.py
# This file makes the api directory a Python package.

from . import auth
from . import review
from . import search
from . import summary

__all__ = [
    "auth",
    "review",
    "search",
    "summary",
]
