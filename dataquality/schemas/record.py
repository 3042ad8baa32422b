from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConcessionRecord(BaseModel):
    """
    Concession data record checked by the validation rules.

    Immutable once built. The type itself enforces nothing beyond field
    types: whether a value is acceptable is decided by the rules.
    """
    model_config = ConfigDict(frozen=True)

    concession_name: str = Field(..., description="Concession name")
    company_name: str = Field(..., description="Owning company name")
    cve_number: Optional[str] = Field(None, description="CVE identifier code, may be absent")
    region: str = Field(..., description="Region")
    sentiment_score: float = Field(..., description="Sentiment score")
