"""Shared Field Types — validated fields that keep the caller's exact value.

Invariants:
    - Email is checked with pydantic's email validation but returned unchanged
      (no case or unicode normalization); ownership checks compare exact strings
"""

from typing import Annotated

from pydantic import AfterValidator
from pydantic.networks import validate_email


def _check_email(value: str) -> str:
    validate_email(value)
    return value


Email = Annotated[str, AfterValidator(_check_email)]
