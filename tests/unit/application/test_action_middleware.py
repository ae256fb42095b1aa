"""ActionMiddleware: start/success/error events, unchanged re-raise, sync and async actions."""

import pytest

from shortlinks.application.action_middleware import ActionMiddleware


@pytest.fixture
def middleware(audit_log):
    return ActionMiddleware(audit_log)


async def test_success_logs_start_then_success(middleware, audit_log, audit_events):
    async def add(a, b, *, scale=1):
        return (a + b) * scale

    wrapped = middleware.wrap("add", add)
    assert await wrapped(1, 2, scale=10) == 30

    assert await audit_events() == ["action.start", "action.success"]
    start, success = reversed(await audit_log.get_all())
    assert start.payload == {"action_name": "add", "arg_count": 3}
    assert success.payload == {"action_name": "add"}


async def test_error_is_logged_and_reraised_unchanged(middleware, audit_log, audit_events):
    failure = RuntimeError("boom")

    async def explode():
        raise failure

    wrapped = middleware.wrap("explode", explode)
    with pytest.raises(RuntimeError) as exc_info:
        await wrapped()

    assert exc_info.value is failure
    assert await audit_events() == ["action.start", "action.error"]
    error = (await audit_log.get_all())[0]
    assert error.payload == {"action_name": "explode", "message": "boom"}


async def test_sync_action_is_supported(middleware, audit_events):
    wrapped = middleware.wrap("upper", lambda s: s.upper())
    assert await wrapped("abc") == "ABC"
    assert await audit_events() == ["action.start", "action.success"]


async def test_wrapped_keeps_action_name(middleware):
    async def create_short_link():
        return None

    wrapped = middleware.wrap("create_short_link", create_short_link)
    assert wrapped.__name__ == "create_short_link"
