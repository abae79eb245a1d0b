"""Resource clients of the NPS API."""

from .invitations import Invitations
from .surveys import Surveys

__all__ = ["Invitations", "Surveys"]
