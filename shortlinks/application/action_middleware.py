"""Action middleware: wraps business actions with start/success/error audit events."""

import functools
import inspect
from typing import Any, Awaitable, Callable

from shortlinks.application.audit_log import AuditLog

ACTION_START = "action.start"
ACTION_SUCCESS = "action.success"
ACTION_ERROR = "action.error"


class ActionMiddleware:
    """
    Instrumentation around Registry/AccessTracker operations.
    Failures are recorded then re-raised unchanged; the wrapper never swallows them.
    """

    def __init__(self, audit_log: AuditLog) -> None:
        self._audit_log = audit_log

    def wrap(self, action_name: str, action: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
        """Return an async callable that logs around action. action may be sync or async."""

        @functools.wraps(action)
        async def wrapped(*args: Any, **kwargs: Any) -> Any:
            await self._audit_log.append(
                ACTION_START,
                {"action_name": action_name, "arg_count": len(args) + len(kwargs)},
            )
            try:
                result = action(*args, **kwargs)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:
                await self._audit_log.append(
                    ACTION_ERROR,
                    {"action_name": action_name, "message": str(exc)},
                )
                raise
            await self._audit_log.append(ACTION_SUCCESS, {"action_name": action_name})
            return result

        return wrapped
