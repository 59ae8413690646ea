"""ToS Schemas — Pydantic models for the Terms-of-Service API contract.

Invariants:
    - JSON field names are camelCase (effectiveDate, lastUpdated)
    - ErrorBody mirrors TosApiError.to_response() for OpenAPI docs

Design Decisions:
    - alias_generator=to_camel over per-field aliases: one rule for the whole model
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tos_api.core.tos_version import VersionInfo


class TosVersionResponse(BaseModel):
    """Current ToS version descriptor."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )

    version: str
    effective_date: str
    last_updated: str

    @classmethod
    def from_version_info(cls, info: VersionInfo) -> "TosVersionResponse":
        return cls(
            version=info.version,
            effective_date=info.effective_date,
            last_updated=info.last_updated,
        )


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorBody(BaseModel):
    """Structured error envelope returned on failure."""
    error: ErrorDetail
