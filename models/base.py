"""
Defines the declarative base shared by all gateway tables.

Timestamps are stored as ISO-8601 UTC strings so that lexical order in the
store equals chronological order, and identifiers are opaque prefixed strings
generated by the application.
"""

from sqlalchemy import String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Width of the stored ISO-8601 timestamps ("2026-01-01T00:00:00.000000+00:00")
TIMESTAMP_LENGTH = 32

ISOTimestamp = String(TIMESTAMP_LENGTH)
