"""Apply :func:`accept_awaitables` to every method an object owns."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, TypeVar, cast

from .accept_awaitables import accept_awaitables

if TYPE_CHECKING:
    from collections.abc import Iterable

_ObjT = TypeVar("_ObjT")

_CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__"})

_LOGGER = logging.getLogger(__name__)

__all__ = ["mutate_methods"]


def _is_dunder(name: object) -> bool:
    # Protocol slots on objects and classes keep their sync contract.
    return (
        isinstance(name, str)
        and len(name) > 4
        and name.startswith("__")
        and name.endswith("__")
    )


def _wrap_member(value: object) -> object | None:
    """Return the wrapped replacement for ``value`` or ``None`` to leave it."""
    if isinstance(value, (staticmethod, classmethod)):
        return type(value)(accept_awaitables(value.__func__))
    if callable(value):
        return accept_awaitables(value)
    return None


def mutate_methods(obj: _ObjT, *, names: Iterable[str] | None = None) -> _ObjT:
    """Replace each callable own attribute of ``obj`` with a wrapped version.

    Mappings are updated through item assignment. Any other object has its
    ``vars()`` scanned and is updated with ``setattr``, so inherited
    attributes are never touched. Constructor keys are always skipped;
    other dunder names are skipped only on the ``vars()`` path, so a mapping
    key such as ``"__handler__"`` is still wrapped. When ``names`` is given
    only those attributes are considered.

    Calling this twice wraps the already wrapped methods again; each call
    adds one layer.
    """
    is_mapping = isinstance(obj, MutableMapping)
    namespace = obj if is_mapping else vars(obj)

    keys = list(namespace)
    if names is not None:
        wanted = set(names)
        keys = [key for key in keys if key in wanted]

    for key in keys:
        if key in _CONSTRUCTOR_NAMES or (not is_mapping and _is_dunder(key)):
            continue
        replacement = _wrap_member(namespace[key])
        if replacement is None:
            continue
        if is_mapping:
            cast("MutableMapping[object, object]", obj)[key] = replacement
        else:
            setattr(obj, key, replacement)
        _LOGGER.debug("Wrapped %r on %s", key, type(obj).__name__)

    return obj
