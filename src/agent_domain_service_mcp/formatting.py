"""
Render domain service results as plain text for the assistant.

The formatters are pure and never fail: optional fields that are missing
are simply left out of the output.
"""

from .models import (
    AnalyzeResult,
    BrainstormResult,
    CategoriesResult,
    ExploreResult,
    LookupResult,
    SearchResult,
)

# Alternatives shown under a taken domain
MAX_ALTERNATIVES = 5


def format_number(value: int | float) -> str:
    """Render a number without a trailing .0 for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _price_suffix(price: int | float | None) -> str:
    return f" - ${format_number(price)}" if price else ""


def _premium_suffix(premium: bool) -> str:
    return " (premium)" if premium else ""


def format_lookup_result(result: LookupResult) -> str:
    """Format a single-domain lookup."""
    lines = [
        f"Domain: {result.domain}",
        f"Status: {result.status.value.upper()}",
        f"Available: {'Yes' if result.available else 'No'}",
    ]

    if result.available and result.purchase_price:
        lines.append(f"Purchase Price: ${format_number(result.purchase_price)}")
        if result.renewal_price:
            lines.append(f"Renewal Price: ${format_number(result.renewal_price)}/year")
        if result.premium:
            lines.append("Note: This is a PREMIUM domain")

    if result.suggestions:
        lines.append("")
        lines.append("Available Alternatives:")
        for s in result.suggestions[:MAX_ALTERNATIVES]:
            lines.append(f"  • {s.domain}{_price_suffix(s.purchase_price)}{_premium_suffix(s.premium)}")

    return "\n".join(lines)


def format_explore_result(result: ExploreResult) -> str:
    """Format a multi-TLD exploration."""
    lines = [
        f"Name: {result.name}",
        f"Summary: {result.summary}",
        f"Available: {result.available_count} | Taken: {result.taken_count}",
        "",
        "Results by TLD:",
    ]

    for r in result.results:
        status = "✓ Available" if r.available else "✗ Taken"
        price = _price_suffix(r.purchase_price) if r.available else ""
        lines.append(f"  {r.domain}: {status}{price}{_premium_suffix(r.premium)}")

    return "\n".join(lines)


def format_brainstorm_result(result: BrainstormResult) -> str:
    """Format generated domain ideas, available ones first."""
    lines = [f'Brainstorm Results for: "{result.prompt}"', ""]

    available = result.available
    taken = result.taken

    if available:
        lines.append(f"✓ Available Domains ({len(available)}):")
        for s in available:
            lines.append(f"  • {s.domain}{_price_suffix(s.purchase_price)}{_premium_suffix(s.premium)}")

    if taken:
        lines.append("")
        lines.append(f"✗ Already Taken ({len(taken)}):")
        for s in taken:
            lines.append(f"  • {s.domain}")

    if not available:
        lines.append("")
        lines.append("No available domains found. Try a different description or be more specific.")

    return "\n".join(lines)


def format_analyze_result(result: AnalyzeResult) -> str:
    """Format an AI domain analysis with scores, pros and cons."""
    lines = [
        f"Domain Analysis: {result.domain}",
        f"Status: {'✓ Available' if result.available else '✗ Taken'}",
    ]
    if result.available and result.purchase_price:
        lines.append(f"Price: ${format_number(result.purchase_price)}")
    lines.append("")

    analysis = result.analysis
    if analysis:
        scores = analysis.scores
        lines.append("Scores (out of 10):")
        lines.append(f"  Memorability:   {format_number(scores.memorability)}/10")
        lines.append(f"  Brandability:   {format_number(scores.brandability)}/10")
        lines.append(f"  Pronunciation:  {format_number(scores.pronunciation)}/10")
        lines.append(f"  SEO Potential:  {format_number(scores.seo_potential)}/10")
        lines.append(f"  Overall:        {format_number(scores.overall)}/10")
        lines.append("")

        if analysis.pros:
            lines.append("Pros:")
            for pro in analysis.pros:
                lines.append(f"  ✓ {pro}")

        if analysis.cons:
            lines.append("")
            lines.append("Cons:")
            for con in analysis.cons:
                lines.append(f"  ✗ {con}")

        if analysis.verdict:
            lines.append("")
            lines.append(f"Verdict: {analysis.verdict}")

    return "\n".join(lines)


def format_search_result(result: SearchResult) -> str:
    """Format marketplace search hits, echoing the filters that were applied."""
    lines = [f"Domain Search Results ({result.total} found)"]

    if result.filters:
        described = []
        for key, value in result.filters.items():
            if key in ("max_price", "min_price"):
                value = f"${value}"
            described.append(f"{key}={value}")
        lines.append(f"Filters: {', '.join(described)}")

    lines.append("")

    if not result.domains:
        lines.append("No domains matched these filters.")
        return "\n".join(lines)

    for d in result.domains:
        category = f" [{d.category}]" if d.category else ""
        lines.append(f"  • {d.domain}{_price_suffix(d.price)}{category}")

    return "\n".join(lines)


def format_categories_result(result: CategoriesResult) -> str:
    """Format the list of catalogue categories."""
    if not result.categories:
        return "No categories available."

    lines = [f"Domain Categories ({len(result.categories)}):"]
    for c in result.categories:
        count = f" ({c.count} domains)" if c.count is not None else ""
        description = f" - {c.description}" if c.description else ""
        lines.append(f"  • {c.name}{count}{description}")

    return "\n".join(lines)
