"""
Request routing.

resolve_route is a pure function of (method, path): it reads no state and
resolves every request to exactly one of preflight, health, a proof type,
the endpoint catalog, or RouteNotFoundError.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .errors import RouteNotFoundError
from .proof_types import PROOF_TYPES, ProofTypeDescriptor

HEALTH_PATHS = frozenset({"/api/health", "/health"})


class RouteKind(str, Enum):
    PREFLIGHT = "preflight"
    HEALTH = "health"
    PROOF = "proof"
    CATALOG = "catalog"


@dataclass(frozen=True)
class RouteMatch:
    kind: RouteKind
    proof_type: Optional[ProofTypeDescriptor] = None


def resolve_route(
    method: str,
    path: str,
    proof_types: Iterable[ProofTypeDescriptor] = PROOF_TYPES,
) -> RouteMatch:
    """
    Resolve a request to its route.

    Proof routes match by path prefix and only for POST; any other method
    on a proof route is not found. Every remaining GET is the catalog.

    Raises:
        RouteNotFoundError: nothing matches
    """
    method = method.upper()

    if method == "OPTIONS":
        return RouteMatch(RouteKind.PREFLIGHT)

    if path in HEALTH_PATHS:
        return RouteMatch(RouteKind.HEALTH)

    for descriptor in proof_types:
        if path.startswith(descriptor.route):
            if method == "POST":
                return RouteMatch(RouteKind.PROOF, descriptor)
            # Proof routes only accept POST
            raise RouteNotFoundError(method, path)

    if method == "GET":
        return RouteMatch(RouteKind.CATALOG)

    raise RouteNotFoundError(method, path)
