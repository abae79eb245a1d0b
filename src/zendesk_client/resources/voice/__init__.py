"""Resource clients of the Talk (voice) API."""

from .agentactivity import AgentActivity
from .availabilities import Availabilities
from .currentqueueactivity import CurrentQueueActivity
from .greetingcategories import GreetingCategories
from .greetings import Greetings
from .historicalqueueactivity import HistoricalQueueActivity
from .phonenumbers import PhoneNumbers

__all__ = [
    "AgentActivity",
    "Availabilities",
    "CurrentQueueActivity",
    "GreetingCategories",
    "Greetings",
    "HistoricalQueueActivity",
    "PhoneNumbers",
]
