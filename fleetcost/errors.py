# Exception hierarchy of the engine. Lookup misses are NOT errors (they become Estimate.unavailable()).


class FleetcostError(Exception):
    """Base class for errors raised by fleetcost."""


class PersistenceError(FleetcostError):
    """The trip log could not store (or read back) a record."""


class CatalogLookupError(FleetcostError, KeyError):
    """No vehicle in the catalog matches the requested "brand model" key."""

    def __str__(self) -> str:                   # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class OptionNotFound(FleetcostError, LookupError):
    """No synthesized option exists for the requested travel mode."""
