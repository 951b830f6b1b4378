"""Reusable field constraints shared by the request schemas.

Each alias bundles the rules for one kind of field (length cap, pattern,
range) so the schemas declare *what* a field is rather than repeating *how*
it is checked.
"""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, Field, StringConstraints
from pydantic.networks import validate_email

MAC_ADDRESS_PATTERN = r"^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$"
IP_ADDRESS_PATTERN = (
    r"^((25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
    r"|^([0-9a-fA-F]{1,4}:){7}[0-9a-fA-F]{1,4}$"
)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _valid_email(value: str) -> str:
    validate_email(value)
    return value


def _in_future(value: date) -> date:
    if value <= date.today():
        raise ValueError("must be a date in the future")
    return value


def bounded_str(max_length: int):
    """Free text capped at ``max_length`` characters."""
    return Annotated[str, StringConstraints(max_length=max_length)]


def required_str(max_length: int):
    """Non-blank text capped at ``max_length`` characters."""
    return Annotated[str, StringConstraints(max_length=max_length), AfterValidator(_not_blank)]


MacAddress = Annotated[str, StringConstraints(max_length=50, pattern=MAC_ADDRESS_PATTERN)]
IpAddressText = Annotated[str, StringConstraints(max_length=45, pattern=IP_ADDRESS_PATTERN)]
Email = Annotated[str, StringConstraints(max_length=100), AfterValidator(_valid_email)]
PortNumber = Annotated[int, Field(ge=1, le=256)]
PortCount = Annotated[int, Field(ge=0, le=256)]
Money = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]
FutureDate = Annotated[date, AfterValidator(_in_future)]
