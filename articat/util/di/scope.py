"""Custom Dishka scopes for articat."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """articat dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime; the one article store, audit log and allocator
    - UOW: One caller interaction; stateless services and the Catalog
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
