"""Views issue the documented path, verb and body for every operation."""

import pytest

from zendesk_client.resources.core import Views

ROOTS = ("views", "view")


@pytest.fixture
def views(transport):
    return Views(transport)


@pytest.mark.asyncio
async def test_list_variants_are_paginated(views, transport):
    await views.list()
    await views.list_active()
    await views.list_compact()

    paths = [call.args[0] for call in transport.get_all.await_args_list]
    assert paths == [["views"], ["views", "active"], ["views", "compact"]]
    assert all(call.kwargs["roots"] == ROOTS for call in transport.get_all.await_args_list)


@pytest.mark.asyncio
async def test_show(views, transport):
    transport.get.return_value = {"id": 12345, "title": "Open tickets"}

    result = await views.show(12345)

    transport.get.assert_awaited_once_with(["views", 12345], roots=ROOTS)
    assert result == {"id": 12345, "title": "Open tickets"}


@pytest.mark.asyncio
async def test_create_and_update(views, transport):
    body = {"view": {"title": "My New View", "all": [{"field": "status", "operator": "is", "value": "open"}]}}

    await views.create(body)
    await views.update(12345, {"view": {"title": "Updated View Title"}})

    transport.post.assert_awaited_once_with(["views"], body, roots=ROOTS)
    transport.put.assert_awaited_once_with(["views", 12345], {"view": {"title": "Updated View Title"}}, roots=ROOTS)


@pytest.mark.asyncio
async def test_execute_passes_parameters_as_query(views, transport):
    await views.execute(12345, {"sort_by": "status"})

    transport.get_all.assert_awaited_once_with(["views", 12345, "execute", {"sort_by": "status"}], roots=("rows",))


@pytest.mark.asyncio
async def test_tickets(views, transport):
    await views.tickets(12345)

    transport.get_all.assert_awaited_once_with(["views", 12345, "tickets"], roots=("tickets",))


@pytest.mark.asyncio
async def test_preview_posts_body_through_paginated_request(views, transport):
    body = {"view": {"all": [{"field": "status", "operator": "less_than", "value": "solved"}]}}

    await views.preview(body)

    transport.request_all.assert_awaited_once_with("POST", ["views", "preview"], body, roots=("rows",))
    transport.post.assert_not_awaited()


@pytest.mark.asyncio
async def test_show_count(views, transport):
    await views.show_count(12345)

    assert transport.get.await_args.args[0] == ["views", 12345, "count"]


@pytest.mark.asyncio
async def test_show_counts_sends_ids_as_parameter_object(views, transport):
    await views.show_counts([12345, 67890])

    transport.get.assert_awaited_once()
    assert transport.get.await_args.args[0] == ["views", "count_many", {"ids": [12345, 67890]}]


@pytest.mark.asyncio
async def test_single_item_actions(views, transport):
    await views.export(12345)
    await views.list_active_shared()
    await views.show_execution_status(12345)
    await views.show_recent_ticket_ids(12345)

    paths = [call.args[0] for call in transport.get.await_args_list]
    assert paths == [
        ["views", 12345, "export"],
        ["views", "shared"],
        ["views", 12345, "execution_status"],
        ["views", 12345, "recent_ticket_ids"],
    ]


@pytest.mark.asyncio
async def test_reorder(views, transport):
    await views.reorder([3, 1, 2])

    transport.put.assert_awaited_once_with(["views", "reorder"], {"view_order": [3, 1, 2]}, roots=ROOTS)


@pytest.mark.asyncio
async def test_delete_dispatches_to_transport_delete_once(views, transport):
    result = await views.delete(12345)

    assert result is None
    transport.delete.assert_awaited_once_with(["views", 12345], None, roots=ROOTS)
    transport.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_does_not_recurse(monkeypatch, views, transport):
    calls = []
    original = Views.delete

    async def counting_delete(self, view_id):
        calls.append(view_id)
        return await original(self, view_id)

    monkeypatch.setattr(Views, "delete", counting_delete)

    await views.delete(7)

    assert calls == [7]
    assert transport.delete.await_count == 1


@pytest.mark.asyncio
async def test_transport_errors_propagate_unchanged(views, transport):
    error = RuntimeError("connection reset")
    transport.get.side_effect = error

    with pytest.raises(RuntimeError) as exc:
        await views.show("not-an-id")

    assert exc.value is error


@pytest.mark.asyncio
async def test_execute_joins_rows_across_pages(http_transport, make_response):
    base = "https://acme.zendesk.com/api/v2"
    http_transport.session.request.side_effect = [
        make_response(200, {"rows": [{"ticket_id": 1}], "columns": [], "next_page": f"{base}/views/1/execute.json?page=2"}),
        make_response(200, {"rows": [{"ticket_id": 2}], "columns": [], "next_page": None}),
    ]

    rows = await Views(http_transport).execute(1)

    assert rows == [{"ticket_id": 1}, {"ticket_id": 2}]


@pytest.mark.asyncio
async def test_preview_joins_rows_across_pages(http_transport, make_response):
    base = "https://acme.zendesk.com/api/v2"
    body = {"view": {"all": [{"field": "status", "operator": "is", "value": "open"}]}}
    http_transport.session.request.side_effect = [
        make_response(200, {"rows": [{"ticket_id": 1}], "next_page": f"{base}/views/preview.json?page=2"}),
        make_response(200, {"rows": [{"ticket_id": 2}, {"ticket_id": 3}], "next_page": None}),
    ]

    rows = await Views(http_transport).preview(body)

    assert [row["ticket_id"] for row in rows] == [1, 2, 3]
    assert all(call.kwargs["json"] == body for call in http_transport.session.request.call_args_list)
