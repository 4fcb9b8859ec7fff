"""Database-backed translation resolver with a native catalogue front.

The package only emits structlog events; the embedding application calls
:func:`lexicon.logging.configure_logging` once at startup to choose the
renderer and level.
"""

__version__ = "0.1.0"
