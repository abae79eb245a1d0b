"""Resource clients of the Zendesk Support API."""

from .accountsettings import AccountSettings
from .activitystream import ActivityStream
from .automations import Automations
from .brand import Brand
from .customagentroles import CustomAgentRoles
from .dynamiccontent import DynamicContent
from .dynamiccontentvariants import DynamicContentVariants
from .groupmemberships import GroupMemberships
from .groups import Groups
from .installations import Installations
from .jobstatuses import JobStatuses
from .locales import Locales
from .macros import Macros
from .oauthtokens import OauthTokens
from .organizationfields import OrganizationFields
from .organizationmemberships import OrganizationMemberships
from .organizations import Organizations
from .permissiongroups import PermissionGroups
from .policies import Policies
from .requests import Requests
from .satisfactionratings import SatisfactionRatings
from .search import Search
from .sessions import Sessions
from .sharingagreement import SharingAgreement
from .suspendedtickets import SuspendedTickets
from .tags import Tags
from .targets import Targets
from .ticketaudits import TicketAudits
from .ticketevents import TicketEvents
from .ticketexport import TicketExport
from .ticketfields import TicketFields
from .ticketforms import TicketForms
from .ticketimport import TicketImport
from .ticketmetrics import TicketMetrics
from .tickets import Tickets
from .triggers import Triggers
from .userfields import UserFields
from .useridentities import UserIdentities
from .users import Users
from .views import Views
from .webhooks import Webhooks

__all__ = [
    "AccountSettings",
    "ActivityStream",
    "Automations",
    "Brand",
    "CustomAgentRoles",
    "DynamicContent",
    "DynamicContentVariants",
    "GroupMemberships",
    "Groups",
    "Installations",
    "JobStatuses",
    "Locales",
    "Macros",
    "OauthTokens",
    "OrganizationFields",
    "OrganizationMemberships",
    "Organizations",
    "PermissionGroups",
    "Policies",
    "Requests",
    "SatisfactionRatings",
    "Search",
    "Sessions",
    "SharingAgreement",
    "SuspendedTickets",
    "Tags",
    "Targets",
    "TicketAudits",
    "TicketEvents",
    "TicketExport",
    "TicketFields",
    "TicketForms",
    "TicketImport",
    "TicketMetrics",
    "Tickets",
    "Triggers",
    "UserFields",
    "UserIdentities",
    "Users",
    "Views",
    "Webhooks",
]
