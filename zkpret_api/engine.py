"""
Proof generation capability.

The handler only depends on the ProofEngine protocol: given a descriptor and
validated parameters, return within the descriptor's latency envelope with a
Merkle root and the signature/submission flags. SimulatedProofEngine stands
in for a real prover by waiting a random time inside that envelope.
"""

import asyncio
import random
import secrets
import string
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol

import structlog

from .proof_types import ProofTypeDescriptor

logger = structlog.get_logger()

PROOF_ID_ALPHABET = string.ascii_lowercase + string.digits
PROOF_ID_SUFFIX_LENGTH = 9
MERKLE_ROOT_BYTES = 32


def generate_proof_id(prefix: str, now_ms: Optional[int] = None) -> str:
    """
    Build `<prefix>_proof_<epoch ms>_<9 base36 chars>`.

    The random suffix keeps ids distinct for requests completing in the same
    millisecond.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(PROOF_ID_ALPHABET) for _ in range(PROOF_ID_SUFFIX_LENGTH))
    return f"{prefix}_proof_{now_ms}_{suffix}"


def generate_mock_hash() -> str:
    """Random 64-hex-character stand-in for a Merkle root."""
    return secrets.token_hex(MERKLE_ROOT_BYTES)


@dataclass(frozen=True)
class EngineOutput:
    """What a proof engine hands back to the handler."""

    elapsed_ms: int
    merkle_root: str
    signature_verified: bool
    blockchain_submitted: bool


class ProofEngine(Protocol):
    """Anything that can turn validated parameters into proof material."""

    async def generate(
        self, descriptor: ProofTypeDescriptor, params: Mapping[str, Any]
    ) -> EngineOutput:
        ...


class SimulatedProofEngine:
    """
    Models proof cost with a uniform random wait.

    `sleep` and `clock` are injectable so the latency envelope can be
    exercised without waiting in real time.
    """

    def __init__(
        self,
        latency_scale: float = 1.0,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
        rng: Optional[random.Random] = None,
    ):
        if latency_scale < 0:
            raise ValueError("latency_scale must be >= 0")
        self.latency_scale = latency_scale
        self._sleep = sleep
        self._clock = clock
        self._rng = rng or random.Random()

    def latency_bounds(self, descriptor: ProofTypeDescriptor) -> tuple[float, float]:
        """Scaled [min, max] wait in milliseconds."""
        return (
            descriptor.min_latency_ms * self.latency_scale,
            descriptor.max_latency_ms * self.latency_scale,
        )

    async def generate(
        self, descriptor: ProofTypeDescriptor, params: Mapping[str, Any]
    ) -> EngineOutput:
        low, high = self.latency_bounds(descriptor)
        delay_ms = self._rng.uniform(low, high)

        logger.debug(
            "Simulating proof generation",
            proof_type=descriptor.key,
            delay_ms=round(delay_ms),
        )

        started = self._clock()
        await self._sleep(delay_ms / 1000)
        elapsed_ms = round((self._clock() - started) * 1000)

        return EngineOutput(
            elapsed_ms=elapsed_ms,
            merkle_root=generate_mock_hash(),
            signature_verified=True,
            blockchain_submitted=True,
        )
