"""Post-processing passes for rendered documentation HTML."""

__version__ = "0.1.0"
