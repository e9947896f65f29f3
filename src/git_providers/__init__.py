"""Provider-agnostic model of git hosting resources."""

__version__ = "0.1.0"
