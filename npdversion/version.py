"""Version string of the node problem detector."""

_VERSION = "UNKNOWN"


def version() -> str:
    """Return the version string."""
    return _VERSION


def print_version() -> None:
    """Write the version string to standard output."""
    print(_VERSION)