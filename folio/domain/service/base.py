"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans entities or talks to
    collaborators (repositories, the blob store).
    """

    pass
