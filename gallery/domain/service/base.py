"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Domain services hold logic that spans the identity store, the OAuth
    clients and the session codec.
    """

    pass
