from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class StudentRecord(BaseModel):
    id: str = ""
    name: str = ""
    nationality: str = ""
    dob: str = ""
    phone: str = ""
    age: str = ""
    qualification: str = ""
    job: str = ""
    address: str = ""
    reg_date: str = ""
    level: str = ""
    part: str = ""
    national_id: str = ""
    category: str = ""
    period: str = ""
    expiry_id: str = ""
    teacher: str = ""
    fees: str = ""
    circle: str = ""
    completion: str = ""


class DecodeSummary(BaseModel):
    rows: int = 0
    max_columns: int = 0
    ragged: bool = False


class DecodeResponse(BaseModel):
    rows: List[List[str]] = Field(default_factory=list)
    summary: DecodeSummary


class RecordsSummary(BaseModel):
    records: int = 0
    header: bool = False
    header_sniffed: bool = True
    blank_rows_skipped: int = 0


class RecordsResponse(BaseModel):
    records: List[StudentRecord] = Field(default_factory=list)
    summary: RecordsSummary


class SearchRequest(BaseModel):
    records: List[StudentRecord] = Field(default_factory=list)
    query: str = Field(default="", examples=["احمد"])
    level: Optional[str] = Field(default=None, examples=[None])


class SearchResponse(BaseModel):
    records: List[StudentRecord] = Field(default_factory=list)
    total: int = 0
    matched: int = 0


class HealthResponse(BaseModel):
    ok: bool = True
