"""Single source of truth for the gpm version string."""

__version__: str = "0.4.0"
