"""
Module registry: which resource clients each Zendesk endpoint group offers
and under which base URL.

The registry is built once at import time and is read-only afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Type, Union

from . import endpoints
from .error_handler import ConfigurationError
from .resources import core, helpcenter, nps, services, voice
from .resources.base import ResourceClient


class EndpointGroup(Enum):
    """Named partitions of the Zendesk API, each with its own base URL."""
    CORE = "core"
    HELPCENTER = "helpcenter"
    NPS = "nps"
    SERVICES = "services"
    VOICE = "voice"


@dataclass(frozen=True)
class EndpointGroupSpec:
    """Base-URL suffix and resource clients of one endpoint group."""
    group: EndpointGroup
    url_suffix: str
    resources: Mapping[str, Type[ResourceClient]]

    def base_url(self, subdomain: str) -> str:
        return f"https://{subdomain}{self.url_suffix}"


def _spec(group: EndpointGroup, url_suffix: str, *classes: Type[ResourceClient]) -> EndpointGroupSpec:
    resources = {}
    for cls in classes:
        if cls.__name__ in resources:
            raise ConfigurationError(f"Resource client '{cls.__name__}' registered twice in {group.value}")
        resources[cls.__name__] = cls
    return EndpointGroupSpec(group, url_suffix, MappingProxyType(resources))


MODULES: Mapping[EndpointGroup, EndpointGroupSpec] = MappingProxyType({
    EndpointGroup.CORE: _spec(
        EndpointGroup.CORE,
        endpoints.CORE,
        core.AccountSettings,
        core.ActivityStream,
        core.Automations,
        core.Brand,
        core.CustomAgentRoles,
        core.DynamicContent,
        core.DynamicContentVariants,
        core.GroupMemberships,
        core.Groups,
        core.Installations,
        core.JobStatuses,
        core.Locales,
        core.Macros,
        core.OauthTokens,
        core.OrganizationFields,
        core.OrganizationMemberships,
        core.Organizations,
        core.PermissionGroups,
        core.Policies,
        core.Requests,
        core.SatisfactionRatings,
        core.Search,
        core.Sessions,
        core.SharingAgreement,
        core.SuspendedTickets,
        core.Tags,
        core.Targets,
        core.TicketAudits,
        core.TicketEvents,
        core.TicketExport,
        core.TicketFields,
        core.TicketForms,
        core.TicketImport,
        core.TicketMetrics,
        core.Tickets,
        core.Triggers,
        core.UserFields,
        core.UserIdentities,
        core.Users,
        core.Views,
        core.Webhooks,
    ),
    EndpointGroup.HELPCENTER: _spec(
        EndpointGroup.HELPCENTER,
        endpoints.HELPCENTER,
        helpcenter.AccessPolicies,
        helpcenter.ArticleComments,
        helpcenter.ArticleLabels,
        helpcenter.Articles,
        helpcenter.Categories,
        helpcenter.Search,
        helpcenter.Sections,
        helpcenter.Subscriptions,
        helpcenter.Translations,
        helpcenter.UserSegments,
        helpcenter.Votes,
    ),
    EndpointGroup.NPS: _spec(
        EndpointGroup.NPS,
        endpoints.NPS,
        nps.Invitations,
        nps.Surveys,
    ),
    EndpointGroup.SERVICES: _spec(
        EndpointGroup.SERVICES,
        endpoints.SERVICES,
        services.Links,
    ),
    EndpointGroup.VOICE: _spec(
        EndpointGroup.VOICE,
        endpoints.VOICE,
        voice.AgentActivity,
        voice.Availabilities,
        voice.CurrentQueueActivity,
        voice.GreetingCategories,
        voice.Greetings,
        voice.HistoricalQueueActivity,
        voice.PhoneNumbers,
    ),
})


def get_group(group: Union[str, EndpointGroup]) -> EndpointGroupSpec:
    """
    Look up an endpoint group by name or enum member.

    Raises:
        ConfigurationError: If the group is unknown
    """
    if not isinstance(group, EndpointGroup):
        try:
            group = EndpointGroup(str(group).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown endpoint group '{group}'",
                {"available": [g.value for g in EndpointGroup]}
            )
    return MODULES[group]


def get_resource(group: Union[str, EndpointGroup], name: str) -> Type[ResourceClient]:
    """
    Look up a resource client class by registry name within a group.

    Raises:
        ConfigurationError: If the group or the name is unknown
    """
    spec = get_group(group)
    try:
        return spec.resources[name]
    except KeyError:
        raise ConfigurationError(
            f"Resource client '{name}' not found in {spec.group.value}",
            {"available": list(spec.resources)}
        )


def base_url(group: Union[str, EndpointGroup], subdomain: str) -> str:
    """``base_url("voice", "acme")`` -> ``https://acme.zendesk.com/api/v2/channels/voice``."""
    return get_group(group).base_url(subdomain)


def attribute_name(name: str) -> str:
    """``TicketFields`` -> ``ticket_fields``."""
    out = []
    for i, char in enumerate(name):
        if char.isupper() and i and not name[i - 1].isupper():
            out.append("_")
        out.append(char.lower())
    return "".join(out)
