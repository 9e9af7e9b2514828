"""
Tests for route resolution.
"""

import pytest

from zkpret_api.dispatcher import RouteKind, resolve_route
from zkpret_api.errors import RouteNotFoundError
from zkpret_api.proof_types import PROOF_TYPES


class TestResolveRoute:
    """resolve_route is a pure function of method and path."""

    @pytest.mark.parametrize("path", ["/", "/api/gleif", "/whatever"])
    def test_options_is_preflight(self, path):
        assert resolve_route("OPTIONS", path).kind is RouteKind.PREFLIGHT

    @pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
    def test_health_any_method(self, method):
        assert resolve_route(method, "/api/health").kind is RouteKind.HEALTH
        assert resolve_route(method, "/health").kind is RouteKind.HEALTH

    @pytest.mark.parametrize("descriptor", PROOF_TYPES, ids=lambda d: d.key)
    def test_post_resolves_proof_type(self, descriptor):
        route = resolve_route("POST", descriptor.route)
        assert route.kind is RouteKind.PROOF
        assert route.proof_type is descriptor

    def test_prefix_match(self):
        route = resolve_route("POST", "/api/process-integrity/run")
        assert route.proof_type.key == "process-integrity"

    def test_method_is_case_insensitive(self):
        assert resolve_route("post", "/api/scf").kind is RouteKind.PROOF

    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    def test_non_post_on_proof_route(self, method):
        with pytest.raises(RouteNotFoundError) as exc_info:
            resolve_route(method, "/api/gleif")
        assert exc_info.value.to_response() == {"error": "Endpoint not found"}

    def test_get_elsewhere_is_catalog(self):
        assert resolve_route("GET", "/").kind is RouteKind.CATALOG
        assert resolve_route("GET", "/api/other").kind is RouteKind.CATALOG

    def test_post_elsewhere_not_found(self):
        with pytest.raises(RouteNotFoundError):
            resolve_route("POST", "/api/other")

    def test_resolution_is_stable(self):
        """Same input, same answer."""
        assert resolve_route("POST", "/api/risk") == resolve_route("POST", "/api/risk")
