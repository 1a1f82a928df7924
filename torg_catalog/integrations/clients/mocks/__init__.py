"""
Mock catalog transport.

Returns canned (but realistically shaped) payloads without calling the API.
Used when:
- no access token is available (local development)
- tests need to drive listings page by page and count requests

Important:
- Must follow the SAME interface as the real HTTP transport.
"""
