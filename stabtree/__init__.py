from importlib.resources import files

from .build import Node
from .domain import Domain, ExactDomain, FloatDomain
from .errors import InvalidInterval
from .interval import Interval
from .tree import IntervalTree

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "IntervalTree",
    "Interval",
    "InvalidInterval",
    "Node",
    "Domain",
    "ExactDomain",
    "FloatDomain",
    "docs",
]
