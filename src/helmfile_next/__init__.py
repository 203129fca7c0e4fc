"""Report newer chart versions for the releases pinned in a helmfile."""

__version__ = "0.1.0"
