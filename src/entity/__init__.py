"""Generic entity plumbing shared by resource clients.

Hydrators turn raw response payloads into domain objects, collections page
lazily through list endpoints, filters describe query parameters.
"""
