"""Decorator that lets a callable take awaitables in place of plain arguments."""
# ruff: noqa: ANN401

from __future__ import annotations

import asyncio
import inspect
from functools import wraps
from typing import TYPE_CHECKING, Any, TypeVar, cast, overload

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Mapping, Sequence
else:  # pragma: no cover - provide runtime aliases for introspection tools
    import collections.abc as _abc

    Awaitable = _abc.Awaitable
    Callable = _abc.Callable
    Mapping = _abc.Mapping
    Sequence = _abc.Sequence

_T = TypeVar("_T")

__all__ = ["accept_awaitables"]


async def _resolve_arguments(
    args: Sequence[object], kwargs: Mapping[str, object]
) -> tuple[list[object], dict[str, object]]:
    """Await every awaitable in ``args`` and ``kwargs`` in one combined wait.

    Parameters
    ----------
    args : Sequence[object]
        Positional arguments, each either a plain value or an awaitable.
    kwargs : Mapping[str, object]
        Keyword arguments, resolved the same way as positional ones.

    Returns:
    -------
    tuple[list[object], dict[str, object]]
        The arguments with every awaitable replaced by its result. Positions
        and keyword names are preserved.
    """
    resolved_args = list(args)
    resolved_kwargs = dict(kwargs)
    slots: list[tuple[int | str, Awaitable[object]]] = [
        (index, value)
        for index, value in enumerate(resolved_args)
        if inspect.isawaitable(value)
    ]
    slots.extend(
        (key, value)
        for key, value in resolved_kwargs.items()
        if inspect.isawaitable(value)
    )
    if not slots:
        return resolved_args, resolved_kwargs

    results = await asyncio.gather(*(awaitable for _, awaitable in slots))
    for (slot, _), result in zip(slots, results, strict=True):
        if isinstance(slot, int):
            resolved_args[slot] = result
        else:
            resolved_kwargs[slot] = result
    return resolved_args, resolved_kwargs


def _wrap(fn: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
    @wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        resolved_args, resolved_kwargs = await _resolve_arguments(args, kwargs)
        result = fn(*resolved_args, **resolved_kwargs)
        while inspect.isawaitable(result):
            result = await result
        return result

    return wrapper


@overload
def accept_awaitables(fn: Callable[..., _T]) -> Callable[..., Awaitable[Any]]: ...


@overload
def accept_awaitables(
    *, enabled: bool = True
) -> Callable[[Callable[..., _T]], Callable[..., Any]]: ...


def accept_awaitables(
    fn: Callable[..., _T] | None = None, *, enabled: bool = True
) -> Callable[[Callable[..., _T]], Callable[..., Any]] | Callable[..., Any]:
    """Resolve awaitable arguments before calling ``fn``.

    The returned coroutine function waits for every awaitable argument with
    :func:`asyncio.gather`, then calls ``fn`` with the results in their
    original positions. Plain arguments are passed through as they are. The
    first failing argument aborts the call before ``fn`` runs. When ``fn``
    itself returns an awaitable, the wrapper awaits it and returns its
    result instead.

    Parameters
    ----------
    fn : Callable | None, optional
        The function to wrap. When omitted, the decorator is returned for
        deferred application.
    enabled : bool, optional
        If ``False`` skip decorating and return ``fn`` unchanged.

    Returns:
    -------
    Callable
        Either the wrapped coroutine function or a decorator awaiting a
        function, depending on whether ``fn`` was provided.

    Raises:
    ------
    TypeError
        If the decorated object is not callable.
    """

    def decorator(func: Callable[..., _T]) -> Callable[..., Any]:
        if not callable(func):
            raise TypeError(
                f"accept_awaitables expects a callable, got {type(func).__name__}"
            )
        if not enabled:
            return func
        return _wrap(cast("Callable[..., Any]", func))

    if fn is not None:
        return decorator(fn)
    return decorator
