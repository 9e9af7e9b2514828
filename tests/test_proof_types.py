"""
Tests for the proof type descriptor table.
"""

import dataclasses

import pytest

from zkpret_api.proof_types import (
    PROOF_TYPES,
    get_proof_type,
)


class TestDescriptorTable:
    """The table describes exactly eight distinct proof types."""

    def test_eight_types(self):
        assert len(PROOF_TYPES) == 8
        assert len({d.key for d in PROOF_TYPES}) == 8
        assert len({d.route for d in PROOF_TYPES}) == 8
        assert len({d.id_prefix for d in PROOF_TYPES}) == 8

    def test_every_type_echoes_network(self):
        for d in PROOF_TYPES:
            assert "typeOfNet" in d.parameters
            for required in d.required:
                assert required.name in d.parameters

    @pytest.mark.parametrize(
        "key,low,high",
        [
            ("gleif", 2000, 4000),
            ("corporate", 2000, 4000),
            ("exim", 2000, 4000),
            ("risk", 3000, 6000),
            ("process-integrity", 3000, 5000),
            ("data-integrity", 2500, 4500),
            ("scf", 2500, 4000),
            ("composed", 5000, 8000),
        ],
    )
    def test_latency_bounds(self, key, low, high):
        d = get_proof_type(key)
        assert (d.min_latency_ms, d.max_latency_ms) == (low, high)

    def test_descriptors_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_proof_type("gleif").min_latency_ms = 0

    def test_invalid_bounds_rejected(self):
        base = get_proof_type("gleif")
        with pytest.raises(ValueError, match="invalid latency bounds"):
            dataclasses.replace(base, min_latency_ms=5000, max_latency_ms=1000)

    def test_unknown_type(self):
        with pytest.raises(KeyError, match="Unknown proof type"):
            get_proof_type("kyc")


class TestToolNames:
    """Tests for tool name rendering."""

    def test_static_tool_name(self):
        assert get_proof_type("gleif").tool_name_for({}) == "get-GLEIF-verification-with-sign"

    def test_risk_placeholder(self):
        risk = get_proof_type("risk")
        assert risk.tool_name_for({}) == "get-Risk-Basel3-verification-with-sign"
        assert risk.tool_name_for({"riskType": None}) == "get-Risk-Basel3-verification-with-sign"
        assert risk.tool_name_for({"riskType": "Liquidity"}) == (
            "get-Risk-Liquidity-verification-with-sign"
        )


class TestVerdicts:
    """Type-specific verdict fields."""

    def test_composed_counts_components(self):
        verdict = get_proof_type("composed").verdict({})
        assert verdict["componentsVerified"] == 3
        assert verdict["totalComponents"] == 3

    def test_scf_echoes_invoice_amount(self):
        verdict = get_proof_type("scf").verdict({"invoiceAmount": 5000})
        assert verdict["invoiceAmount"] == 5000

    def test_summary_mentions_proof_id(self):
        for d in PROOF_TYPES:
            summary = d.summary({"companyName": "Acme"}, "x_proof_1_abcdefghi")
            assert summary.endswith("ZK Proof Generated: x_proof_1_abcdefghi")

    def test_subject(self):
        assert get_proof_type("data-integrity").subject({"filePath": "/a"}) == "/a"
