"""
Domain models for the format benchmark.

Defines the fixed ten-field record every format adapter serializes. Field
order here is the column order of the Parquet schema and the CSV header.
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    One row of the synthetic dataset.

    `email` is the only field that may be semantically absent; absence is
    represented by an empty string.
    """

    name: str = Field(..., description="Display name, e.g. Person_42.")
    age: int = Field(..., ge=0, le=99, description="Age in years.")
    email: str = Field("", description="Contact address; empty when absent.")
    score1: int = Field(..., ge=0, le=999)
    score2: int = Field(..., ge=0, le=999)
    score3: int = Field(..., ge=0, le=999)
    score4: int = Field(..., ge=0, le=999)
    score5: int = Field(..., ge=0, le=999)
    balance: float = Field(..., description="Account balance.")
    expenditure: float = Field(..., description="Total expenditure.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


RECORD_FIELDS = tuple(Record.model_fields)


__all__ = ["RECORD_FIELDS", "Record"]
