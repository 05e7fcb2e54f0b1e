"""Shared types, enums, and base models used across HR admin domain models."""

from datetime import datetime, timezone
from enum import StrEnum
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def new_uuid7() -> UUID:
    """Generate a new time-sortable UUID v7."""
    return uuid7()


# --- Reusable annotated types ---

UUIDv7 = Annotated[UUID, Field(description="Time-sortable UUID v7.")]
UTCTimestamp = Annotated[
    datetime, Field(description="UTC timezone-aware timestamp.")
]
SAR = Annotated[float, Field(description="Amount in Saudi riyals.")]


# --- Shared enums ---


class RuleType(StrEnum):
    """Statutory rule families held in the rule table."""

    EOSB = "EOSB"
    LEAVE = "LEAVE"
    OVERTIME = "OVERTIME"
    GOSI = "GOSI"
    NITAQAT = "NITAQAT"


class TerminationReason(StrEnum):
    """Why an employment relationship ended (drives the EOSB adjustment)."""

    RESIGNATION = "resignation"
    NON_RENEWAL = "non-renewal"
    TERMINATION = "termination"


class Language(StrEnum):
    """Display language for band labels."""

    EN = "en"
    AR = "ar"


# --- Base model ---


class HRBase(BaseModel):
    """Base model with common configuration for all HR admin Pydantic models.

    Fields are snake_case in Python and camelCase on the wire, matching the
    names the dashboard's export and report components read.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        ser_json_timedelta="iso8601",
        protected_namespaces=(),
    )
