"""
Zendesk API Endpoint Constants

This module defines the base-URL suffix of every Zendesk endpoint group.
A full base URL is ``https://<subdomain><suffix>``.
"""


class ZendeskEndpoints:
    """Base-URL suffixes for the Zendesk endpoint groups."""

    # Support (tickets, users, views, business rules, ...)
    CORE = ".zendesk.com/api/v2"

    # Guide / Help Center
    HELPCENTER = ".zendesk.com/api/v2/help_center"

    # Net Promoter Score surveys
    NPS = ".zendesk.com/api/v2/nps"

    # Jira integration services
    SERVICES = ".zendesk.com/api/services/jira"

    # Talk
    VOICE = ".zendesk.com/api/v2/channels/voice"


# Convenience exports for simpler imports
CORE = ZendeskEndpoints.CORE
HELPCENTER = ZendeskEndpoints.HELPCENTER
NPS = ZendeskEndpoints.NPS
SERVICES = ZendeskEndpoints.SERVICES
VOICE = ZendeskEndpoints.VOICE
