"""
Test suite for result decoding and text formatting

Usage:
    pytest test_formatting.py
"""

import pytest

from agent_domain_service_mcp.errors import ResponseDecodeError
from agent_domain_service_mcp.formatting import (
    format_analyze_result,
    format_brainstorm_result,
    format_categories_result,
    format_explore_result,
    format_lookup_result,
    format_number,
    format_search_result,
)
from agent_domain_service_mcp.models import (
    AnalyzeResult,
    BrainstormResult,
    CategoriesResult,
    DomainStatus,
    ExploreResult,
    LookupResult,
    SearchResult,
)


# =============================================================================
# Decoding
# =============================================================================

def test_prices_are_positive_or_absent():
    result = LookupResult.from_dict({
        "domain": "x.com",
        "available": True,
        "status": "available",
        "purchase_price": 0,
        "renewal_price": "15",
    })
    assert result.purchase_price is None
    assert result.renewal_price is None


def test_non_finite_numbers_are_absent():
    result = LookupResult.from_dict({
        "domain": "x.com",
        "purchase_price": float("inf"),
        "renewal_price": float("nan"),
    })
    assert result.purchase_price is None
    assert result.renewal_price is None

    explore = ExploreResult.from_dict({"name": "myapp", "available_count": float("inf"), "taken_count": 2})
    assert explore.available_count == 0
    assert explore.taken_count == 2


def test_unexpected_status_decodes_as_unknown():
    assert DomainStatus.parse("REGISTERED") is DomainStatus.REGISTERED
    assert DomainStatus.parse("rate_limited") is DomainStatus.UNKNOWN
    assert DomainStatus.parse(None) is DomainStatus.UNKNOWN


def test_missing_identifying_key_is_a_decode_error():
    with pytest.raises(ResponseDecodeError):
        LookupResult.from_dict({"available": True})
    with pytest.raises(ResponseDecodeError):
        ExploreResult.from_dict("nope")


def test_search_total_falls_back_to_hit_count():
    result = SearchResult.from_dict({"domains": [{"domain": "a.com"}, {"domain": "b.io"}]})
    assert result.total == 2


# =============================================================================
# Lookup
# =============================================================================

def test_lookup_available(lookup_payload):
    text = format_lookup_result(LookupResult.from_dict(lookup_payload))
    lines = text.split("\n")

    assert "Domain: x.com" in lines
    assert "Status: AVAILABLE" in lines
    assert "Available: Yes" in lines
    assert "Purchase Price: $12" in lines
    assert "Renewal Price: $15/year" in lines
    assert "PREMIUM" not in text
    assert "Alternatives" not in text


def test_lookup_premium_note(lookup_payload):
    lookup_payload["premium"] = True
    lookup_payload["purchase_price"] = 2500.0
    text = format_lookup_result(LookupResult.from_dict(lookup_payload))

    assert "Purchase Price: $2500" in text
    assert "Note: This is a PREMIUM domain" in text


def test_lookup_taken_with_alternatives():
    result = LookupResult.from_dict({
        "domain": "taken.com",
        "available": False,
        "status": "registered",
        "purchase_price": 12,
        "suggestions": [
            {"domain": f"taken{i}.com", "available": True, "purchase_price": 9.99, "premium": i == 0}
            for i in range(7)
        ],
    })
    text = format_lookup_result(result)

    assert "Status: REGISTERED" in text
    assert "Available: No" in text
    assert "Purchase Price" not in text
    assert "Available Alternatives:" in text
    assert "  • taken0.com - $9.99 (premium)" in text
    assert "  • taken1.com - $9.99" in text
    assert "taken5.com" not in text


def test_lookup_unknown_status_passes_through():
    text = format_lookup_result(LookupResult.from_dict({"domain": "x.com", "status": "unknown"}))
    assert "Status: UNKNOWN" in text
    assert "Available: No" in text


# =============================================================================
# Explore / brainstorm / analyze
# =============================================================================

def test_explore():
    result = ExploreResult.from_dict({
        "name": "myapp",
        "summary": "2 of 3 available",
        "available_count": 2,
        "taken_count": 1,
        "results": [
            {"tld": "com", "domain": "myapp.com", "available": False, "status": "registered", "purchase_price": 12},
            {"tld": "io", "domain": "myapp.io", "available": True, "status": "available", "purchase_price": 39},
            {"tld": "ai", "domain": "myapp.ai", "available": True, "status": "available", "premium": True},
        ],
    })
    text = format_explore_result(result)

    assert text.startswith("Name: myapp\nSummary: 2 of 3 available\nAvailable: 2 | Taken: 1\n\nResults by TLD:")
    assert "  myapp.com: ✗ Taken" in text.split("\n")
    assert "  myapp.io: ✓ Available - $39" in text
    assert "  myapp.ai: ✓ Available (premium)" in text


def test_brainstorm_groups_available_and_taken():
    result = BrainstormResult.from_dict({
        "prompt": "recipe app",
        "suggestions": [
            {"domain": "cookly.com", "available": True, "purchase_price": 11},
            {"domain": "recipe.com", "available": False},
        ],
    })
    text = format_brainstorm_result(result)

    assert text.startswith('Brainstorm Results for: "recipe app"')
    assert "✓ Available Domains (1):\n  • cookly.com - $11" in text
    assert "✗ Already Taken (1):\n  • recipe.com" in text
    assert "No available domains found" not in text


def test_brainstorm_with_nothing_available():
    text = format_brainstorm_result(BrainstormResult.from_dict({"prompt": "x", "suggestions": []}))
    assert "No available domains found. Try a different description or be more specific." in text


def test_analyze():
    result = AnalyzeResult.from_dict({
        "domain": "coolstartup.com",
        "available": True,
        "status": "available",
        "purchase_price": 12.5,
        "analysis": {
            "scores": {"memorability": 8, "brandability": 7, "pronunciation": 9, "seo_potential": 6, "overall": 7.5},
            "pros": ["Short"],
            "cons": ["Generic"],
            "verdict": "Solid choice",
        },
    })
    text = format_analyze_result(result)

    assert "Domain Analysis: coolstartup.com" in text
    assert "Status: ✓ Available" in text
    assert "Price: $12.5" in text
    assert "  Memorability:   8/10" in text
    assert "  Overall:        7.5/10" in text
    assert "  ✓ Short" in text
    assert "  ✗ Generic" in text
    assert text.endswith("Verdict: Solid choice")


def test_analyze_without_analysis():
    text = format_analyze_result(AnalyzeResult.from_dict({"domain": "x.com", "available": False}))
    assert "Status: ✗ Taken" in text
    assert "Scores" not in text


# =============================================================================
# Search / categories
# =============================================================================

def test_search_lists_hits_and_filters():
    result = SearchResult(
        domains=SearchResult.from_dict({
            "domains": [
                {"domain": "fast.io", "price": 120, "category": "tech"},
                {"domain": "plain.com"},
            ],
        }).domains,
        total=2,
        filters={"category": "tech", "max_price": "150"},
    )
    text = format_search_result(result)

    assert text.startswith("Domain Search Results (2 found)")
    assert "Filters: category=tech, max_price=$150" in text
    assert "  • fast.io - $120 [tech]" in text
    assert "  • plain.com" in text.split("\n")


def test_search_with_no_hits():
    text = format_search_result(SearchResult.from_dict({"domains": [], "total": 0}))
    assert "No domains matched these filters." in text
    assert "Filters" not in text


def test_categories():
    result = CategoriesResult.from_dict({
        "categories": [
            {"name": "tech", "count": 42, "description": "Software and startups"},
            {"name": "short"},
        ],
    })
    text = format_categories_result(result)

    assert text.split("\n") == [
        "Domain Categories (2):",
        "  • tech (42 domains) - Software and startups",
        "  • short",
    ]
    assert format_categories_result(CategoriesResult()) == "No categories available."


def test_format_number():
    assert format_number(15.0) == "15"
    assert format_number(15) == "15"
    assert format_number(9.99) == "9.99"
