"""Unit tests for party name normalization and tenant name matching."""

import pytest

from docfacts.models.tenant import Tenant
from docfacts.pipeline.name_normalizer import (
    matches_tenant_name,
    names_match,
    normalize_name,
    tenant_name_candidates,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Invoid.vision", "invoid vision"),
        ("Invoid Vision", "invoid vision"),
        ("  ACME   Consulting  BV ", "acme consulting bv"),
        ("Smith & Sons, Ltd.", "smith sons ltd"),
        ("Café Noord", "caf noord"),
        ("Tab\tand\nnewline", "tab and newline"),
        ("R2-D2 Services", "r2 d2 services"),
        ("", ""),
        ("...", ""),
        (None, ""),
    ],
)
def test_normalize_name(text, expected):
    assert normalize_name(text) == expected


class TestTenantNameCandidates:
    """Test construction of the tenant name set."""

    def test_includes_legal_display_and_person_names(self):
        tenant = Tenant(legal_name="Invoid Vision BV", display_name="Invoid")
        assert tenant_name_candidates(tenant, ["Jan Peeters"]) == [
            "Invoid Vision BV",
            "Invoid",
            "Jan Peeters",
        ]

    def test_trims_drops_blanks_and_deduplicates(self):
        tenant = Tenant(legal_name=" Invoid ", display_name="Invoid")
        assert tenant_name_candidates(tenant, ["", "   ", "Invoid", " Jan "]) == ["Invoid", "Jan"]

    def test_no_person_names(self):
        tenant = Tenant(legal_name="Invoid", display_name="")
        assert tenant_name_candidates(tenant) == ["Invoid"]


class TestNamesMatch:
    """Test the three match rules on normalized names."""

    def test_equal(self):
        assert names_match("invoid vision", "invoid vision", 0.90)

    def test_containment_either_way(self):
        assert names_match("acme", "acme consulting bv", 0.90)
        assert names_match("acme consulting bv", "acme", 0.90)

    def test_similarity_above_threshold(self):
        assert names_match("invoid vision", "invoid vizion", 0.90)

    def test_similarity_below_threshold(self):
        assert not names_match("invoid vision", "globex corporation", 0.90)

    def test_threshold_is_respected(self):
        assert not names_match("invoid vision", "invoid vizion", 0.99)

    def test_blank_never_matches(self):
        assert not names_match("", "invoid", 0.0)
        assert not names_match("invoid", "", 0.0)


class TestMatchesTenantName:
    """Test matching extracted names against the candidate set."""

    def test_punctuation_variant_matches(self):
        assert matches_tenant_name("Invoid.vision", ["Invoid Vision"], 0.90)

    def test_any_candidate_matches(self):
        assert matches_tenant_name("JAN PEETERS", ["Invoid Vision", "Jan Peeters"], 0.90)

    def test_unrelated_name(self):
        assert not matches_tenant_name("Globex Corporation", ["Invoid Vision"], 0.90)

    @pytest.mark.parametrize("value", [None, "", "   ", "!!!"])
    def test_absent_or_blank_value(self, value):
        assert not matches_tenant_name(value, ["Invoid Vision"], 0.90)

    def test_candidate_blank_after_normalization_is_ignored(self):
        assert not matches_tenant_name("Invoid", ["---"], 0.90)

    def test_empty_candidates(self):
        assert not matches_tenant_name("Invoid", [], 0.90)
