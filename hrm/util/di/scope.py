"""Dishka scopes used by HRM."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Two-level scope hierarchy: APP -> UOW.

    APP holds the engine, session factory, config and the RoleResolver.
    UOW is entered once per HTTP request and owns the database session,
    repositories, services and handlers; the session commits when it closes.
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
