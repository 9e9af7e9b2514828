"""
Generic proof handler.

One handler serves all proof types: validate -> simulate -> assemble -> respond.
Each invocation is stateless and terminal; nothing is retried.
"""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

import structlog

from .engine import ProofEngine, generate_proof_id
from .errors import ProofGenerationError, ProofValidationError
from .models import ProofMetadata, ProofOutcome, ProofResult
from .proof_types import ProofTypeDescriptor

logger = structlog.get_logger()


@dataclass(frozen=True)
class HandlerResponse:
    """Status code and JSON body produced by a handler."""

    status_code: int
    body: dict[str, Any]


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_body(raw: bytes) -> dict[str, Any]:
    """Decode a JSON object body. An empty body is an empty object."""
    if not raw.strip():
        return {}
    body = json.loads(raw)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def _is_missing(value: Any) -> bool:
    # null, false, 0 and "" are missing; arrays and objects are present
    if isinstance(value, (list, dict)):
        return False
    return not value


def validate_body(descriptor: ProofTypeDescriptor, body: Mapping[str, Any]) -> None:
    """Raise ProofValidationError for the first missing required field."""
    for required in descriptor.required:
        if _is_missing(body.get(required.name)):
            raise ProofValidationError(required.name, required.label)


def echo_parameters(
    descriptor: ProofTypeDescriptor, body: Mapping[str, Any], network: str
) -> dict[str, Any]:
    """The parameters a proof type echoes back, with typeOfNet resolved."""
    params = {name: body.get(name) for name in descriptor.parameters}
    params["typeOfNet"] = network
    return params


async def handle_proof(
    descriptor: ProofTypeDescriptor,
    raw_body: bytes,
    engine: ProofEngine,
    default_network: str = "TESTNET",
) -> HandlerResponse:
    """
    Produce a proof envelope for one request.

    Returns:
        200 with a ProofResult, 400 when a required field is missing,
        500 for anything unexpected (malformed body, engine failure).
    """
    try:
        body = parse_body(raw_body)
        validate_body(descriptor, body)

        network = body.get("typeOfNet") or default_network
        params = echo_parameters(descriptor, body, network)

        logger.info(
            "Executing proof",
            proof_type=descriptor.key,
            subject=descriptor.subject(params),
        )

        generated = await engine.generate(descriptor, params)
        proof_id = generate_proof_id(descriptor.id_prefix)

        result = ProofResult(
            tool_name=descriptor.tool_name_for(params),
            execution_time=f"{generated.elapsed_ms}ms",
            timestamp=utc_timestamp(),
            result=ProofOutcome(
                output=descriptor.summary(params, proof_id),
                proof_id=proof_id,
                parameters=params,
                proof_metadata=ProofMetadata(
                    merkle_root=generated.merkle_root,
                    signature_verified=generated.signature_verified,
                    blockchain_submitted=generated.blockchain_submitted,
                    network_used=network,
                ),
                **descriptor.verdict(params),
            ),
        )

        logger.info(
            "Proof generated",
            proof_type=descriptor.key,
            proof_id=proof_id,
            execution_ms=generated.elapsed_ms,
        )
        return HandlerResponse(status_code=200, body=result.to_wire())

    except ProofValidationError as e:
        logger.warning("Proof request rejected", proof_type=descriptor.key, field=e.field)
        return HandlerResponse(status_code=e.http_status, body=e.to_response())

    except Exception as e:
        failure = ProofGenerationError(descriptor.failure_label, e)
        logger.error(
            "Proof generation failed",
            proof_type=descriptor.key,
            error=str(e),
            exc_info=True,
        )
        return HandlerResponse(status_code=failure.http_status, body=failure.to_response())
