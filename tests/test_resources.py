"""Resource clients across endpoint groups build the documented requests."""

import pytest

from zendesk_client.resources import core, helpcenter, nps, services, voice


@pytest.mark.asyncio
async def test_ticket_show_many_passes_ids_as_parameter(transport):
    await core.Tickets(transport).show_many([1, 2, 3])

    transport.get.assert_awaited_once_with(
        ["tickets", "show_many", {"ids": [1, 2, 3]}], roots=("tickets", "ticket")
    )


@pytest.mark.asyncio
async def test_ticket_comments_use_their_own_root(transport):
    await core.Tickets(transport).list_comments(42)

    transport.get_all.assert_awaited_once_with(["tickets", 42, "comments"], roots=("comments",))


@pytest.mark.asyncio
async def test_ticket_remove_tags_sends_a_body_with_delete(transport):
    await core.Tickets(transport).remove_tags(42, ["vip"])

    transport.delete.assert_awaited_once_with(["tickets", 42, "tags"], {"tags": ["vip"]}, roots=("tags",))


@pytest.mark.asyncio
async def test_ticket_create_many_returns_job_status(transport):
    transport.post.return_value = {"id": "abc", "status": "queued"}

    result = await core.Tickets(transport).create_many({"tickets": []})

    assert result["status"] == "queued"
    assert transport.post.await_args.kwargs["roots"] == ("job_status",)


@pytest.mark.asyncio
async def test_core_search_merges_query_and_params(transport):
    await core.Search(transport).query("type:ticket status:open", {"sort_by": "created_at"})

    transport.get_all.assert_awaited_once_with(
        ["search", {"query": "type:ticket status:open", "sort_by": "created_at"}], roots=("results",)
    )


@pytest.mark.asyncio
async def test_user_suspend_is_an_update(transport):
    await core.Users(transport).suspend(7)

    transport.put.assert_awaited_once_with(["users", 7], {"user": {"suspended": True}}, roots=("users", "user"))


@pytest.mark.asyncio
async def test_suspended_ticket_recover_unwraps_ticket(transport):
    await core.SuspendedTickets(transport).recover(9)

    transport.put.assert_awaited_once_with(["suspended_tickets", 9, "recover"], None, roots=("ticket",))


@pytest.mark.asyncio
async def test_group_membership_make_default(transport):
    await core.GroupMemberships(transport).make_default(7, 3)

    transport.put.assert_awaited_once_with(
        ["users", 7, "group_memberships", 3, "make_default"], {}, roots=("group_memberships", "group_membership")
    )


@pytest.mark.asyncio
async def test_account_settings(transport):
    await core.AccountSettings(transport).show()

    transport.get.assert_awaited_once_with(["account", "settings"], roots=("settings",))


@pytest.mark.asyncio
async def test_article_in_locale(transport):
    await helpcenter.Articles(transport).show_with_locale("en-us", 5)

    transport.get.assert_awaited_once_with(["en-us", "articles", 5], roots=("articles", "article"))


@pytest.mark.asyncio
async def test_section_create_under_category(transport):
    await helpcenter.Sections(transport).create(3, {"section": {"name": "FAQ"}})

    transport.post.assert_awaited_once_with(
        ["categories", 3, "sections"], {"section": {"name": "FAQ"}}, roots=("sections", "section")
    )


@pytest.mark.asyncio
async def test_helpcenter_search_in_locale(transport):
    await helpcenter.Search(transport).search_articles_in_locale("reset", "fr")

    transport.get_all.assert_awaited_once_with(
        ["articles", "search", {"query": "reset", "locale": "fr"}], roots=("results",)
    )


@pytest.mark.asyncio
async def test_nps_invitations_are_nested_under_surveys(transport):
    await nps.Invitations(transport).list(1)
    await nps.Invitations(transport).show(1, 2)

    transport.get_all.assert_awaited_once_with(["surveys", 1, "invitations"], roots=("invitations", "invitation"))
    transport.get.assert_awaited_once_with(["surveys", 1, "invitations", 2], roots=("invitations", "invitation"))


@pytest.mark.asyncio
async def test_nps_survey_responses(transport):
    await nps.Surveys(transport).list_responses(1)

    transport.get_all.assert_awaited_once_with(["surveys", 1, "responses"], roots=("responses",))


@pytest.mark.asyncio
async def test_services_links(transport):
    links = services.Links(transport)

    await links.list({"ticket_id": 42})
    await links.delete(8)

    transport.get_all.assert_awaited_once_with(["links", {"ticket_id": 42}], roots=("links", "link"))
    transport.delete.assert_awaited_once_with(["links", 8], None, roots=("links", "link"))


@pytest.mark.asyncio
async def test_voice_phone_number_search(transport):
    await voice.PhoneNumbers(transport).search({"country": "US"})

    transport.get_all.assert_awaited_once_with(
        ["phone_numbers", "search", {"country": "US"}], roots=("phone_numbers", "phone_number")
    )


@pytest.mark.asyncio
async def test_voice_agent_activity_defaults_to_no_filter(transport):
    await voice.AgentActivity(transport).show()

    transport.get.assert_awaited_once_with(["stats", "agents_activity", {}], roots=("agents_activity",))


@pytest.mark.asyncio
async def test_voice_availability_root(transport):
    await voice.Availabilities(transport).update(4, {"availability": {"via": "client"}})

    transport.put.assert_awaited_once_with(
        ["availabilities", 4], {"availability": {"via": "client"}}, roots=("availability",)
    )


@pytest.mark.asyncio
async def test_voice_queue_statistics(transport):
    await voice.CurrentQueueActivity(transport).show()
    await voice.HistoricalQueueActivity(transport).show()

    paths = [call.args[0] for call in transport.get.await_args_list]
    assert paths == [["stats", "current_queue_activity"], ["stats", "historical_queue_activity"]]


def test_repr_names_the_base_url(transport):
    assert repr(core.Views(transport)) == "Views(base_url='https://acme.zendesk.com/api/v2')"


@pytest.mark.asyncio
async def test_request_statuses_are_comma_joined(transport):
    await core.Requests(transport).list_by_status(["open", "pending"])

    transport.get_all.assert_awaited_once_with(
        ["requests", {"status": ["open", "pending"]}], roots=("requests", "request")
    )


@pytest.mark.asyncio
async def test_request_comments_use_their_own_root(transport):
    await core.Requests(transport).show_comment(3, 8)

    transport.get.assert_awaited_once_with(["requests", 3, "comments", 8], roots=("comments", "comment"))


@pytest.mark.asyncio
async def test_ticket_audit_make_private(transport):
    await core.TicketAudits(transport).make_private(42, 5)

    transport.put.assert_awaited_once_with(
        ["tickets", 42, "audits", 5, "make_private"], None, roots=("audits", "audit")
    )


@pytest.mark.asyncio
async def test_ticket_form_reorder_sends_ids(transport):
    await core.TicketForms(transport).reorder([3, 1])

    transport.put.assert_awaited_once_with(
        ["ticket_forms", "reorder"], {"ticket_form_ids": [3, 1]}, roots=("ticket_forms", "ticket_form")
    )


@pytest.mark.asyncio
async def test_ticket_metrics_by_ticket(transport):
    await core.TicketMetrics(transport).show_by_ticket(42)

    transport.get.assert_awaited_once_with(["tickets", 42, "metrics"], roots=("ticket_metric",))


@pytest.mark.asyncio
async def test_user_field_and_organization_field_reorder(transport):
    await core.UserFields(transport).reorder([2, 1])
    await core.OrganizationFields(transport).reorder([5])

    bodies = [call.args[1] for call in transport.put.await_args_list]
    assert bodies == [{"user_field_ids": [2, 1]}, {"organization_field_ids": [5]}]


@pytest.mark.asyncio
async def test_user_identity_make_primary(transport):
    await core.UserIdentities(transport).make_primary(7, 11)

    transport.put.assert_awaited_once_with(
        ["users", 7, "identities", 11, "make_primary"], None, roots=("identities", "identity")
    )


@pytest.mark.asyncio
async def test_organization_membership_delete_many_returns_job_status(transport):
    await core.OrganizationMemberships(transport).delete_many([1, 2])

    transport.delete.assert_awaited_once_with(
        ["organization_memberships", "destroy_many", {"ids": [1, 2]}], None, roots=("job_status",)
    )


@pytest.mark.asyncio
async def test_satisfaction_rating_is_created_on_the_ticket(transport):
    await core.SatisfactionRatings(transport).create(42, {"satisfaction_rating": {"score": "good"}})

    transport.post.assert_awaited_once_with(
        ["tickets", 42, "satisfaction_rating"],
        {"satisfaction_rating": {"score": "good"}},
        roots=("satisfaction_ratings", "satisfaction_rating"),
    )


@pytest.mark.asyncio
async def test_brand_host_mapping_check_is_not_unwrapped(transport):
    await core.Brand(transport).check_host_mapping("help.acme.com", "acme")

    transport.get.assert_awaited_once_with(
        ["brands", "check_host_mapping", {"host_mapping": "help.acme.com", "subdomain": "acme"}], roots=()
    )


@pytest.mark.asyncio
async def test_locales_detect_best(transport):
    await core.Locales(transport).detect_best(["de", "fr"])

    transport.get.assert_awaited_once_with(
        ["locales", "detect_best_locale", {"available_locales": ["de", "fr"]}], roots=("locales", "locale")
    )


@pytest.mark.asyncio
async def test_targets_delete(transport):
    await core.Targets(transport).delete(4)

    transport.delete.assert_awaited_once_with(["targets", 4], None, roots=("targets", "target"))


@pytest.mark.asyncio
async def test_sla_policies_reorder(transport):
    await core.Policies(transport).reorder([9, 8])

    transport.put.assert_awaited_once_with(
        ["slas", "policies", "reorder"], {"sla_policy_ids": [9, 8]}, roots=("sla_policies", "sla_policy")
    )


@pytest.mark.asyncio
async def test_dynamic_content_variants_are_nested_under_items(transport):
    await core.DynamicContentVariants(transport).show(3, 30)

    transport.get.assert_awaited_once_with(
        ["dynamic_content", "items", 3, "variants", 30], roots=("variants", "variant")
    )


@pytest.mark.asyncio
async def test_ticket_export_cursor_resumes_from_cursor(transport):
    await core.TicketExport(transport).export_cursor(0, cursor="abc")

    transport.get_all.assert_awaited_once_with(
        ["incremental", "tickets", "cursor", {"cursor": "abc"}], roots=("tickets", "ticket")
    )


@pytest.mark.asyncio
async def test_ticket_import_create_many_returns_job_status(transport):
    await core.TicketImport(transport).create_many({"tickets": []})

    transport.post.assert_awaited_once_with(
        ["imports", "tickets", "create_many"], {"tickets": []}, roots=("job_status",)
    )


@pytest.mark.asyncio
async def test_sessions_logout(transport):
    await core.Sessions(transport).logout()

    transport.delete.assert_awaited_once_with(["users", "me", "logout"], None, roots=("sessions", "session"))


@pytest.mark.asyncio
async def test_article_comments_are_nested_under_articles(transport):
    await helpcenter.ArticleComments(transport).update(5, 6, {"comment": {"body": "Thanks"}})

    transport.put.assert_awaited_once_with(
        ["articles", 5, "comments", 6], {"comment": {"body": "Thanks"}}, roots=("comments", "comment")
    )


@pytest.mark.asyncio
async def test_translation_missing_locales(transport):
    await helpcenter.Translations(transport).list_missing("sections", 12)

    transport.get.assert_awaited_once_with(["sections", 12, "translations", "missing"], roots=("locales",))


@pytest.mark.asyncio
async def test_translation_show_by_locale(transport):
    await helpcenter.Translations(transport).show("articles", 5, "fr")

    transport.get.assert_awaited_once_with(
        ["articles", 5, "translations", "fr"], roots=("translations", "translation")
    )


@pytest.mark.asyncio
async def test_votes_up_and_down(transport):
    votes = helpcenter.Votes(transport)

    await votes.vote_up(5)
    await votes.vote_down(5)

    paths = [call.args[0] for call in transport.post.await_args_list]
    assert paths == [["articles", 5, "up"], ["articles", 5, "down"]]


@pytest.mark.asyncio
async def test_subscriptions_by_section(transport):
    await helpcenter.Subscriptions(transport).create_by_section(3, {"subscription": {"source_locale": "en-us"}})

    assert transport.post.await_args.args[0] == ["sections", 3, "subscriptions"]


@pytest.mark.asyncio
async def test_user_segment_sections_use_their_own_root(transport):
    await helpcenter.UserSegments(transport).list_sections(2)

    transport.get_all.assert_awaited_once_with(["user_segments", 2, "sections"], roots=("sections",))


@pytest.mark.asyncio
async def test_access_policy_for_section(transport):
    await helpcenter.AccessPolicies(transport).show(3)

    transport.get.assert_awaited_once_with(["sections", 3, "access_policy"], roots=("access_policy",))
