"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services wrap repository access with tracing and hold the rules
    that don't belong to a single entity.
    """

    pass
