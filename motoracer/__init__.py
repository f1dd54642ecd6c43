"""A two-player top-down motorbike racing game built on pygame."""

__version__ = "0.1.0"