"""Student record: the fixed-shape value the line codec reads and writes.

A student line on disk looks like ``Lera,10,G,``. The model itself does not
police the delimiter rule; a name containing ``,`` can be built here and is
refused when it reaches the encoder.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

# Range of the 32-bit int the form number was stored in.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Gender(StrEnum):
    """Two-valued gender tag. Values are the single-character wire tags."""

    BOY = "B"
    GIRL = "G"


class Student(BaseModel):
    """One roster entry."""

    name: str
    form: int = Field(ge=INT_MIN, le=INT_MAX)  # grade number
    gender: Gender
