"""
Proof type descriptors.

Each supported proof type is described once, at import time, by an immutable
ProofTypeDescriptor: its route, required fields, simulated latency envelope,
the parameters it echoes back, and how its verdict fields and summary are
built. The single proof handler is driven entirely by this table.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

Params = Mapping[str, Any]


@dataclass(frozen=True)
class RequiredField:
    """A body field that must be present and non-empty."""

    name: str
    label: str


@dataclass(frozen=True)
class ProofTypeDescriptor:
    """Static configuration for one proof type."""

    key: str
    name: str
    route: str
    id_prefix: str
    tool_name: str
    feature: str
    description: str
    failure_label: str
    min_latency_ms: int
    max_latency_ms: int
    parameters: tuple[str, ...]
    verdict: Callable[[Params], dict[str, Any]]
    summary: Callable[[Params, str], str]
    required: tuple[RequiredField, ...] = ()
    # Fallbacks for placeholders in tool_name, e.g. {riskType}
    placeholders: Mapping[str, str] = field(default_factory=dict)
    subject_field: Optional[str] = None

    def __post_init__(self) -> None:
        if not 0 <= self.min_latency_ms <= self.max_latency_ms:
            raise ValueError(
                f"{self.name}: invalid latency bounds "
                f"[{self.min_latency_ms}, {self.max_latency_ms}]"
            )

    def tool_name_for(self, params: Params) -> str:
        """Render the tool name, filling placeholders from the request."""
        values = {
            key: params.get(key) or fallback
            for key, fallback in self.placeholders.items()
        }
        return self.tool_name.format_map(values)

    def subject(self, params: Params) -> Any:
        """The value identifying what is being proven, for logging."""
        if self.subject_field is None:
            return None
        return params.get(self.subject_field)


COMPANY_NAME = RequiredField("companyName", "Company name")


# ============================================================================
# Verdicts and summaries
# ============================================================================

def _gleif_verdict(params: Params) -> dict[str, Any]:
    return {"entityVerified": True, "leiStatus": "ACTIVE", "jurisdictionMatch": True}


def _gleif_summary(params: Params, proof_id: str) -> str:
    return (
        f"GLEIF verification completed successfully for {params.get('companyName')}\n"
        f"Entity Status: ACTIVE\n"
        f"Jurisdiction: {params.get('jurisdiction') or 'Global'}\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _corporate_verdict(params: Params) -> dict[str, Any]:
    return {"registrationValid": True, "cinVerified": bool(params.get("cin"))}


def _corporate_summary(params: Params, proof_id: str) -> str:
    return (
        f"Corporate registration verified successfully for {params.get('companyName')}\n"
        f"CIN Status: {'VERIFIED' if params.get('cin') else 'N/A'}\n"
        f"Registration: VALID\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _exim_verdict(params: Params) -> dict[str, Any]:
    return {"licenseValid": True, "tradeAuthority": params.get("tradeType") or "EXPORT"}


def _exim_summary(params: Params, proof_id: str) -> str:
    return (
        f"EXIM license verified successfully for {params.get('companyName')}\n"
        f"Trade Type: {params.get('tradeType') or 'EXPORT'}\n"
        f"Country: {params.get('country') or 'Global'}\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _risk_verdict(params: Params) -> dict[str, Any]:
    return {"riskScore": "ACCEPTABLE", "complianceStatus": "VERIFIED"}


def _risk_summary(params: Params, proof_id: str) -> str:
    return (
        f"Risk assessment completed for {params.get('riskType') or 'Basel3'}\n"
        f"Risk Score: ACCEPTABLE\n"
        f"Compliance: VERIFIED\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _process_verdict(params: Params) -> dict[str, Any]:
    return {"processMatch": True, "integrityScore": 96.8, "expectedVsActual": "MATCHED"}


def _process_summary(params: Params, proof_id: str) -> str:
    return (
        f"Business Process Integrity verified\n"
        f"Process Type: {params.get('processType')}\n"
        f"Match Score: 96.8%\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _data_verdict(params: Params) -> dict[str, Any]:
    return {"dataIntegrityScore": 98.5, "merkleRootVerified": True}


def _data_summary(params: Params, proof_id: str) -> str:
    return (
        f"Business Data Integrity verification completed\n"
        f"File: {params.get('filePath')}\n"
        f"Integrity Score: 98.5%\n"
        f"ZK Proof Generated: {proof_id}"
    )


def _scf_verdict(params: Params) -> dict[str, Any]:
    return {
        "financingApproved": True,
        "riskScore": "LOW",
        "invoiceAmount": params.get("invoiceAmount") or "N/A",
    }


def _scf_summary(params: Params, proof_id: str) -> str:
    return (
        f"SCF verification completed for {params.get('companyName')}\n"
        f"Invoice Amount: ${params.get('invoiceAmount') or 'N/A'}\n"
        f"Risk Score: LOW\n"
        f"ZK Proof Generated: {proof_id}"
    )


# Components checked by a composed proof, in report order.
COMPOSED_COMPONENTS = ("gleif", "corporate", "exim")


def _composed_verdict(params: Params) -> dict[str, Any]:
    components = {f"{name}Verified": True for name in COMPOSED_COMPONENTS}
    return {
        "overallScore": 94.2,
        "componentsVerified": sum(components.values()),
        "totalComponents": len(COMPOSED_COMPONENTS),
        **components,
    }


def _composed_summary(params: Params, proof_id: str) -> str:
    return (
        f"Composed compliance verification completed\n"
        f"Company: {params.get('companyName')}\n"
        f"Overall Score: 94.2%\n"
        f"ZK Proof Generated: {proof_id}"
    )


# ============================================================================
# Descriptor table
# ============================================================================

PROOF_TYPES: tuple[ProofTypeDescriptor, ...] = (
    ProofTypeDescriptor(
        key="gleif",
        name="GLEIF",
        route="/api/gleif",
        id_prefix="gleif",
        tool_name="get-GLEIF-verification-with-sign",
        feature="GLEIF Verification",
        description="GLEIF verification with ZK proof",
        failure_label="GLEIF verification failed",
        min_latency_ms=2000,
        max_latency_ms=4000,
        parameters=("companyName", "entityId", "jurisdiction", "typeOfNet"),
        required=(COMPANY_NAME,),
        verdict=_gleif_verdict,
        summary=_gleif_summary,
        subject_field="companyName",
    ),
    ProofTypeDescriptor(
        key="corporate",
        name="Corporate",
        route="/api/corporate",
        id_prefix="corporate",
        tool_name="get-Corporate-Registration-verification-with-sign",
        feature="Corporate Registration",
        description="Corporate registration verification",
        failure_label="Corporate verification failed",
        min_latency_ms=2000,
        max_latency_ms=4000,
        parameters=("companyName", "cin", "registrationNumber", "jurisdiction", "typeOfNet"),
        required=(COMPANY_NAME,),
        verdict=_corporate_verdict,
        summary=_corporate_summary,
        subject_field="companyName",
    ),
    ProofTypeDescriptor(
        key="exim",
        name="EXIM",
        route="/api/exim",
        id_prefix="exim",
        tool_name="get-EXIM-verification-with-sign",
        feature="EXIM License Verification",
        description="EXIM license verification",
        failure_label="EXIM verification failed",
        min_latency_ms=2000,
        max_latency_ms=4000,
        parameters=("companyName", "licenseNumber", "tradeType", "country", "typeOfNet"),
        required=(COMPANY_NAME,),
        verdict=_exim_verdict,
        summary=_exim_summary,
        subject_field="companyName",
    ),
    ProofTypeDescriptor(
        key="risk",
        name="Risk",
        route="/api/risk",
        id_prefix="risk",
        tool_name="get-Risk-{riskType}-verification-with-sign",
        placeholders={"riskType": "Basel3"},
        feature="Risk & Liquidity Assessment",
        description="Risk & liquidity assessment",
        failure_label="Risk assessment failed",
        min_latency_ms=3000,
        max_latency_ms=6000,
        parameters=("riskType", "configFile", "thresholds", "typeOfNet"),
        verdict=_risk_verdict,
        summary=_risk_summary,
        subject_field="riskType",
    ),
    ProofTypeDescriptor(
        key="process-integrity",
        name="Process Integrity",
        route="/api/process-integrity",
        id_prefix="process",
        tool_name="get-BPI-compliance-verification",
        feature="Business Process Integrity",
        description="Business process integrity",
        failure_label="Process integrity verification failed",
        min_latency_ms=3000,
        max_latency_ms=5000,
        parameters=("processType", "expectedProcessFile", "actualProcessFile", "typeOfNet"),
        required=(RequiredField("processType", "Process type"),),
        verdict=_process_verdict,
        summary=_process_summary,
        subject_field="processType",
    ),
    ProofTypeDescriptor(
        key="data-integrity",
        name="Data Integrity",
        route="/api/data-integrity",
        id_prefix="data",
        tool_name="get-BSDI-compliance-verification",
        feature="Business Data Integrity",
        description="Business data integrity",
        failure_label="Data integrity verification failed",
        min_latency_ms=2500,
        max_latency_ms=4500,
        parameters=("filePath", "dataType", "typeOfNet"),
        required=(RequiredField("filePath", "File path"),),
        verdict=_data_verdict,
        summary=_data_summary,
        subject_field="filePath",
    ),
    ProofTypeDescriptor(
        key="scf",
        name="SCF",
        route="/api/scf",
        id_prefix="scf",
        tool_name="get-SCF-verification-with-sign",
        feature="Supply Chain Finance",
        description="Supply chain finance verification",
        failure_label="SCF verification failed",
        min_latency_ms=2500,
        max_latency_ms=4000,
        parameters=("companyName", "supplierName", "invoiceAmount", "financingType", "typeOfNet"),
        required=(COMPANY_NAME,),
        verdict=_scf_verdict,
        summary=_scf_summary,
        subject_field="companyName",
    ),
    ProofTypeDescriptor(
        key="composed",
        name="Composed",
        route="/api/composed",
        id_prefix="composed",
        tool_name="get-Composed-Compliance-verification-with-sign",
        feature="Composed Proofs",
        description="Composed compliance proofs",
        failure_label="Composed proof verification failed",
        min_latency_ms=5000,
        max_latency_ms=8000,
        parameters=("companyName", "cin", "typeOfNet"),
        required=(COMPANY_NAME,),
        verdict=_composed_verdict,
        summary=_composed_summary,
        subject_field="companyName",
    ),
)

PROOF_TYPES_BY_KEY: dict[str, ProofTypeDescriptor] = {d.key: d for d in PROOF_TYPES}


def get_proof_type(key: str) -> ProofTypeDescriptor:
    """Look up a descriptor by key (e.g. "gleif", "process-integrity")."""
    try:
        return PROOF_TYPES_BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown proof type: {key}") from None
