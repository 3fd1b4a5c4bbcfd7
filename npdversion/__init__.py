"""Version string reporting for the node problem detector."""

__version__ = "0.1.0"
__all__ = ["version"]