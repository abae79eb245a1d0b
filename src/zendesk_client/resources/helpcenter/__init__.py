"""Resource clients of the Help Center API."""

from .accesspolicies import AccessPolicies
from .articlecomments import ArticleComments
from .articlelabels import ArticleLabels
from .articles import Articles
from .categories import Categories
from .search import Search
from .sections import Sections
from .subscriptions import Subscriptions
from .translations import Translations
from .usersegments import UserSegments
from .votes import Votes

__all__ = [
    "AccessPolicies",
    "ArticleComments",
    "ArticleLabels",
    "Articles",
    "Categories",
    "Search",
    "Sections",
    "Subscriptions",
    "Translations",
    "UserSegments",
    "Votes",
]
