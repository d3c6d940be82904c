class PolyWireError(Exception):
    """Base for all polywire exceptions."""

    pass


class ConfigurationError(PolyWireError, ValueError):
    """Degenerate or inconsistent search configuration."""

    pass


class WiringError(PolyWireError, ValueError):
    """Malformed wiring passed to a public operation."""

    pass
