"""Errors raised while defining routines."""


class InvalidDefinitionError(ValueError):
    """A Block, GateOption or Timing was defined without anything to run."""
