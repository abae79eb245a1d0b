"""Registry lookups and endpoint-group base URLs."""

import pytest

from zendesk_client.error_handler import ConfigurationError
from zendesk_client.registry import MODULES, EndpointGroup, attribute_name, base_url, get_group, get_resource
from zendesk_client.resources.core import Views
from zendesk_client.resources.voice import PhoneNumbers


def test_every_group_is_registered():
    assert set(MODULES) == set(EndpointGroup)


def test_group_resource_counts():
    counts = {group: len(spec.resources) for group, spec in MODULES.items()}

    assert counts == {
        EndpointGroup.CORE: 41,
        EndpointGroup.HELPCENTER: 11,
        EndpointGroup.NPS: 2,
        EndpointGroup.SERVICES: 1,
        EndpointGroup.VOICE: 7,
    }


@pytest.mark.parametrize("group, expected", [
    ("core", "https://acme.zendesk.com/api/v2"),
    ("helpcenter", "https://acme.zendesk.com/api/v2/help_center"),
    ("nps", "https://acme.zendesk.com/api/v2/nps"),
    ("services", "https://acme.zendesk.com/api/services/jira"),
    ("voice", "https://acme.zendesk.com/api/v2/channels/voice"),
])
def test_base_urls(group, expected):
    assert get_group(group).base_url("acme") == expected


def test_module_level_base_url():
    assert base_url(EndpointGroup.NPS, "acme") == "https://acme.zendesk.com/api/v2/nps"

    with pytest.raises(ConfigurationError):
        base_url("chat", "acme")


def test_get_group_accepts_enum_and_any_case():
    assert get_group(EndpointGroup.VOICE) is MODULES[EndpointGroup.VOICE]
    assert get_group("HelpCenter") is MODULES[EndpointGroup.HELPCENTER]


def test_unknown_group_lists_available_groups():
    with pytest.raises(ConfigurationError) as exc:
        get_group("chat")

    assert exc.value.error_code == "CONFIGURATION_ERROR"
    assert exc.value.details["available"] == ["core", "helpcenter", "nps", "services", "voice"]


def test_get_resource():
    assert get_resource("core", "Views") is Views
    assert get_resource(EndpointGroup.VOICE, "PhoneNumbers") is PhoneNumbers


def test_unknown_resource_is_a_configuration_error():
    with pytest.raises(ConfigurationError) as exc:
        get_resource("core", "Attachments")

    assert "Views" in exc.value.details["available"]


def test_resources_are_scoped_to_their_group():
    with pytest.raises(ConfigurationError):
        get_resource("nps", "Views")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        MODULES[EndpointGroup.CORE] = None
    with pytest.raises(TypeError):
        MODULES[EndpointGroup.CORE].resources["Views"] = None


def test_search_is_registered_in_two_groups_without_clashing():
    assert get_resource("core", "Search") is not get_resource("helpcenter", "Search")


@pytest.mark.parametrize("name, expected", [
    ("Views", "views"),
    ("TicketFields", "ticket_fields"),
    ("GroupMemberships", "group_memberships"),
    ("HistoricalQueueActivity", "historical_queue_activity"),
])
def test_attribute_name(name, expected):
    assert attribute_name(name) == expected
