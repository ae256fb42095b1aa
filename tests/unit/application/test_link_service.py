"""ShortLinkService: middleware-wrapped operations and their audit trail."""

import pytest

from shortlinks.domain.exceptions import ConflictError, ValidationError


async def test_create_audit_trail(link_service, audit_events):
    record = await link_service.create_short_link("https://a.com", validity_mins=1)
    assert record.validity_mins == 1
    assert await audit_events() == ["action.start", "shortlink.created", "action.success"]


async def test_create_conflict_is_audited_and_reraised(link_service, audit_log, audit_events):
    first = await link_service.create_short_link("https://a.com", custom_code="abc")

    with pytest.raises(ConflictError):
        await link_service.create_short_link("https://a.com", custom_code="abc")

    assert (await audit_events())[-2:] == ["action.start", "action.error"]
    error = (await audit_log.get_all())[0]
    assert error.payload["action_name"] == "create_short_link"
    assert "abc" in error.payload["message"]
    assert await link_service.list_short_links() == [first]


async def test_create_validation_error_is_audited(link_service, audit_events):
    with pytest.raises(ValidationError):
        await link_service.create_short_link("")
    assert await audit_events() == ["action.start", "action.error"]


@pytest.mark.parametrize(
    ("kwargs", "arg_count"),
    [
        ({}, 1),
        ({"custom_code": "abc"}, 2),
        ({"custom_code": "abc", "validity_mins": 5}, 3),
    ],
)
async def test_create_start_counts_supplied_arguments(link_service, audit_log, kwargs, arg_count):
    await link_service.create_short_link("https://a.com", **kwargs)
    start = (await audit_log.get_all())[-1]
    assert start.event_type == "action.start"
    assert start.payload == {"action_name": "create_short_link", "arg_count": arg_count}


async def test_resolve_start_counts_referrer_only_when_given(link_service, audit_log):
    record = await link_service.create_short_link("https://a.com")
    await link_service.resolve_short_link(record.code)
    await link_service.resolve_short_link(record.code, referrer="r")

    starts = [
        e.payload["arg_count"]
        for e in reversed(await audit_log.get_all())
        if e.event_type == "action.start" and e.payload["action_name"] == "access_short_link"
    ]
    assert starts == [1, 2]


async def test_resolve_unknown_logs_single_miss(link_service, audit_log):
    result = await link_service.resolve_short_link("nope")
    assert result.found is False
    misses = [e for e in await audit_log.get_all() if e.event_type == "shortlink.miss"]
    assert len(misses) == 1


async def test_resolve_hit_through_service(link_service, audit_events):
    record = await link_service.create_short_link("https://a.com")
    result = await link_service.resolve_short_link(record.code, referrer="r")
    assert result.found is True
    assert result.record.clicks == 1
    assert (await audit_events())[-3:] == ["action.start", "shortlink.access", "action.success"]


async def test_get_short_link_does_not_count_click(link_service):
    record = await link_service.create_short_link("https://a.com")
    fetched = await link_service.get_short_link(record.code)
    assert fetched.clicks == 0
    assert (await link_service.get_short_link(record.code)).clicks == 0


async def test_list_is_newest_first(link_service, clock):
    await link_service.create_short_link("https://a.com", custom_code="old")
    clock.advance(minutes=1)
    await link_service.create_short_link("https://b.com", custom_code="mid")
    clock.advance(minutes=1)
    await link_service.create_short_link("https://c.com", custom_code="new")

    assert [r.code for r in await link_service.list_short_links()] == ["new", "mid", "old"]


async def test_delete_through_service(link_service, audit_events):
    record = await link_service.create_short_link("https://a.com")
    await link_service.delete_short_link(record.code)
    assert await link_service.get_short_link(record.code) is None
    assert (await audit_events())[-3:] == ["action.start", "shortlink.delete", "action.success"]


async def test_clear_audit_log(link_service):
    await link_service.create_short_link("https://a.com")
    await link_service.clear_audit_log()
    assert await link_service.get_audit_log() == []
