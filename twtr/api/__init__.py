"""
Twitter API Client Package.

Structure:
    - client.py: Main TwitterClient facade
    - _http.py: Base HTTP client with request building, decoding and error mapping
    - lists.py: List lookup
    - list_members.py: List membership lookup and management

Usage:
    from twtr.api import TwitterClient, get_client

    client = get_client("api-key")

    # Domain style
    page = client.list_members_api.list_members("84839422")

    # Flat style
    page = client.list_members("84839422")
"""

from .client import TwitterClient, get_client
from ._http import HTTPClient
from .lists import ListsAPI
from .list_members import ListMembersAPI

__all__ = [
    # Main client
    "TwitterClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Domain APIs
    "ListsAPI",
    "ListMembersAPI",
]
