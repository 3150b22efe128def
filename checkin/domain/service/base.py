"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span several entities, e.g. a tag
    whose visibility depends on who owns its status.
    """

    pass
