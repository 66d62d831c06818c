"""Helpers for raising Typer parameter errors."""

from __future__ import annotations

from typing import Any, NoReturn, Optional

import typer


def bad_parameter(
    message: str,
    *,
    ctx: Optional[typer.Context] = None,
    param: Any = None,
    param_hint: Optional[str] = None,
    cause: Optional[BaseException] = None,
) -> NoReturn:
    """Raise :class:`typer.BadParameter` for ``param_hint``.

    Only the keyword arguments that were actually provided are forwarded so
    the message renders the same with and without a click context.  When
    ``cause`` is given it is chained onto the raised exception.
    """

    kwargs: dict[str, Any] = {}
    if ctx is not None:
        kwargs["ctx"] = ctx
    if param is not None:
        kwargs["param"] = param
    if param_hint is not None:
        kwargs["param_hint"] = param_hint
    raise typer.BadParameter(message, **kwargs) from cause
