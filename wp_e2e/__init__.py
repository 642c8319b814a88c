"""Page objects, components and flows for the publishing platform's end-to-end suite."""

__version__ = "0.1.0"
