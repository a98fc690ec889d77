"""Let callables take awaitables wherever they take plain arguments."""

from .accept_awaitables import accept_awaitables
from .mutate_methods import mutate_methods
from .version import __version__

accept_awaitables.mutate_methods = mutate_methods  # type: ignore[attr-defined]

__all__ = [
    "__version__",
    "accept_awaitables",
    "mutate_methods",
]
