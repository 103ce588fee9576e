"""
Exceptions raised by the pricing core.

Zero prices are not errors: an unknown price is returned as Decimal(0). The
exceptions here cover inputs the caller was responsible for providing.
"""


class PricingError(Exception):
    """Base exception for pricing operations."""
    pass


class MissingSnapshotError(PricingError):
    """
    Raised when a referenced pool or token snapshot was not provided.

    Whitelist lists are expected to reference existing records, so this is a
    precondition violation. The enclosing unit of work should be aborted.
    """

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} snapshot not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id
