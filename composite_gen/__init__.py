"""Generator of composite, multi-revision wrappers for the compute API."""

__version__ = "0.1.0"
