"""
Pydantic models for API responses.

Wire names are camelCase; Python attributes are snake_case.
All models are frozen: a response is built once and handed to the transport.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, JSON-compatible values."""
        return self.model_dump(mode="json", by_alias=True)


# ============================================================================
# Proof Result
# ============================================================================

class ProofMetadata(_WireModel):
    """Cryptographic metadata attached to every proof."""

    merkle_root: str = Field(
        ...,
        pattern=r"^[0-9a-f]{64}$",
        description="Merkle root (64 hex characters)",
    )
    signature_verified: bool = Field(..., description="Whether the oracle signature verified")
    blockchain_submitted: bool = Field(..., description="Whether the proof was submitted on-chain")
    network_used: Any = Field(..., description="Network the proof targets, echoed from typeOfNet")


class ProofOutcome(_WireModel):
    """
    The `result` object of a proof envelope.

    Type-specific verdict fields (leiStatus, integrityScore, ...) are carried
    as extra fields under their wire names.
    """

    model_config = ConfigDict(extra="allow")

    output: str = Field(..., description="Human-readable summary")
    status: str = Field("VERIFIED", description="Verification status")
    verdict: str = Field("VALID", description="Verification verdict")
    zk_proof_generated: bool = Field(True, description="Whether a ZK proof was produced")
    proof_id: str = Field(..., description="Unique proof identifier")
    parameters: dict[str, Any] = Field(..., description="Echoed request parameters")
    proof_metadata: ProofMetadata


class ProofResult(_WireModel):
    """Success envelope returned by every proof handler."""

    success: bool = Field(True, description="Always true for a generated proof")
    tool_name: str = Field(..., description="Name of the proof tool that ran")
    execution_time: str = Field(..., description="Elapsed generation time, e.g. '2431ms'")
    timestamp: str = Field(..., description="ISO-8601 completion time")
    result: ProofOutcome


# ============================================================================
# Errors
# ============================================================================

class ErrorResponse(_WireModel):
    """Validation (400) and not-found (404) body."""

    error: str


class FailureResponse(_WireModel):
    """Unexpected failure (500) body."""

    success: bool = False
    error: str
    message: str


# ============================================================================
# Health / Catalog
# ============================================================================

class HealthResponse(_WireModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    timestamp: str = Field(..., description="ISO-8601 time of the check")
    version: str = Field(..., description="API version")
    features: list[str] = Field(..., description="Supported proof features")


class CatalogResponse(_WireModel):
    """Default response listing the available endpoints."""

    message: str
    version: str
    service: str
    timestamp: str
    endpoints: list[str]
    note: Optional[str] = None
