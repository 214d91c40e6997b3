"""
UUID7 identifiers.

uuid_utils generates time-ordered UUID7 values; the `compat` flavour returns
standard library `uuid.UUID` objects so they hash, compare and validate like
any other UUID in pydantic and FastAPI path parameters.
"""

from uuid import UUID

from uuid_utils.compat import uuid7


def new_uuid7() -> UUID:
    return uuid7()
