"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    A service owns the rules of one aggregate (doubts with their answers,
    notes, events) or one cross-cutting ledger (votes, the search index).
    """
