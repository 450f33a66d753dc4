"""
Result records for Agent Domain Service responses.

Each record decodes optimistically from the service's JSON: missing optional
fields get defaults, while a body that isn't an object or lacks the record's
identifying key raises ResponseDecodeError.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ResponseDecodeError


class DomainStatus(Enum):
    """Availability status reported by the service."""

    AVAILABLE = "available"
    REGISTERED = "registered"
    UNKNOWN = "unknown"  # lookup degraded (e.g. rate limited upstream)

    @classmethod
    def parse(cls, value: Any) -> "DomainStatus":
        """Map a status string to a member, treating anything unexpected as UNKNOWN."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.UNKNOWN


# =============================================================================
# Field helpers
# =============================================================================

def _require_object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ResponseDecodeError(f"expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _require_str(data: dict, key: str, what: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ResponseDecodeError(f"{what} is missing '{key}'")
    return value


def _is_number(value: Any) -> bool:
    # json accepts Infinity and NaN tokens; neither counts as a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _price(value: Any) -> int | float | None:
    """A price is a positive number or None; zero never means free."""
    if not _is_number(value):
        return None
    return value if value > 0 else None


def _number(value: Any, default: int | float = 0) -> int | float:
    return value if _is_number(value) else default


def _str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _objects(value: Any) -> list[dict]:
    return [item for item in _list(value) if isinstance(item, dict)]


# =============================================================================
# Lookup
# =============================================================================

@dataclass(frozen=True)
class CacheInfo:
    """Remote cache metadata, passed through for reporting only."""
    hit: bool = False
    ttl_seconds: int | float = 0
    stale: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "CacheInfo":
        if not isinstance(data, dict):
            return cls()
        return cls(
            hit=data.get("hit") is True,
            ttl_seconds=_number(data.get("ttl_seconds")),
            stale=data.get("stale") is True,
        )


@dataclass(frozen=True)
class DomainSuggestion:
    """An alternative domain offered when a lookup target is taken."""
    domain: str
    available: bool
    purchase_price: int | float | None = None
    renewal_price: int | float | None = None
    premium: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "DomainSuggestion":
        return cls(
            domain=_require_str(data, "domain", "suggestion"),
            available=data.get("available") is True,
            purchase_price=_price(data.get("purchase_price")),
            renewal_price=_price(data.get("renewal_price")),
            premium=data.get("premium") is True,
        )


@dataclass(frozen=True)
class LookupResult:
    """Result of a single-domain lookup."""
    domain: str
    available: bool
    status: DomainStatus
    checked_at: str | None = None
    expires_at: str | None = None
    source: str | None = None
    purchase_price: int | float | None = None
    renewal_price: int | float | None = None
    premium: bool = False
    cache: CacheInfo = field(default_factory=CacheInfo)
    suggestions: list[DomainSuggestion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "LookupResult":
        data = _require_object(data, "domain lookup")
        return cls(
            domain=_require_str(data, "domain", "domain lookup"),
            available=data.get("available") is True,
            status=DomainStatus.parse(data.get("status")),
            checked_at=_str(data.get("checked_at")),
            expires_at=_str(data.get("expires_at")),
            source=_str(data.get("source")),
            purchase_price=_price(data.get("purchase_price")),
            renewal_price=_price(data.get("renewal_price")),
            premium=data.get("premium") is True,
            cache=CacheInfo.from_dict(data.get("cache")),
            suggestions=[DomainSuggestion.from_dict(s) for s in _objects(data.get("suggestions"))],
        )


# =============================================================================
# Explore
# =============================================================================

@dataclass(frozen=True)
class TldResult:
    """Availability of the explored name under one TLD."""
    tld: str
    domain: str
    available: bool
    status: DomainStatus
    purchase_price: int | float | None = None
    renewal_price: int | float | None = None
    premium: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "TldResult":
        domain = _require_str(data, "domain", "TLD result")
        return cls(
            tld=_str(data.get("tld")) or domain.rsplit(".", 1)[-1],
            domain=domain,
            available=data.get("available") is True,
            status=DomainStatus.parse(data.get("status")),
            purchase_price=_price(data.get("purchase_price")),
            renewal_price=_price(data.get("renewal_price")),
            premium=data.get("premium") is True,
        )


@dataclass(frozen=True)
class ExploreResult:
    """A base name checked across several TLDs."""
    name: str
    summary: str = ""
    checked_at: str | None = None
    available_count: int = 0
    taken_count: int = 0
    tlds_checked: list[str] = field(default_factory=list)
    results: list[TldResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "ExploreResult":
        data = _require_object(data, "name exploration")
        return cls(
            name=_require_str(data, "name", "name exploration"),
            summary=_str(data.get("summary")) or "",
            checked_at=_str(data.get("checked_at")),
            available_count=int(_number(data.get("available_count"))),
            taken_count=int(_number(data.get("taken_count"))),
            tlds_checked=[t for t in _list(data.get("tlds_checked")) if isinstance(t, str)],
            results=[TldResult.from_dict(r) for r in _objects(data.get("results"))],
        )


# =============================================================================
# Brainstorm
# =============================================================================

@dataclass(frozen=True)
class BrainstormSuggestion:
    """A generated domain idea with its availability."""
    domain: str
    available: bool
    name: str | None = None
    tld: str | None = None
    purchase_price: int | float | None = None
    renewal_price: int | float | None = None
    premium: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "BrainstormSuggestion":
        return cls(
            domain=_require_str(data, "domain", "brainstorm suggestion"),
            available=data.get("available") is True,
            name=_str(data.get("name")),
            tld=_str(data.get("tld")),
            purchase_price=_price(data.get("purchase_price")),
            renewal_price=_price(data.get("renewal_price")),
            premium=data.get("premium") is True,
        )


@dataclass(frozen=True)
class BrainstormResult:
    """Domain ideas generated from a project description."""
    prompt: str
    generated_at: str | None = None
    suggestions: list[BrainstormSuggestion] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BrainstormResult":
        data = _require_object(data, "brainstorm")
        return cls(
            prompt=_require_str(data, "prompt", "brainstorm"),
            generated_at=_str(data.get("generated_at")),
            suggestions=[BrainstormSuggestion.from_dict(s) for s in _objects(data.get("suggestions"))],
        )

    @property
    def available(self) -> list[BrainstormSuggestion]:
        return [s for s in self.suggestions if s.available]

    @property
    def taken(self) -> list[BrainstormSuggestion]:
        return [s for s in self.suggestions if not s.available]


# =============================================================================
# Analyze
# =============================================================================

@dataclass(frozen=True)
class AnalysisScores:
    """Scores out of 10."""
    memorability: int | float = 0
    brandability: int | float = 0
    pronunciation: int | float = 0
    seo_potential: int | float = 0
    overall: int | float = 0

    @classmethod
    def from_dict(cls, data: Any) -> "AnalysisScores":
        if not isinstance(data, dict):
            return cls()
        return cls(
            memorability=_number(data.get("memorability")),
            brandability=_number(data.get("brandability")),
            pronunciation=_number(data.get("pronunciation")),
            seo_potential=_number(data.get("seo_potential")),
            overall=_number(data.get("overall")),
        )


@dataclass(frozen=True)
class DomainAnalysis:
    scores: AnalysisScores = field(default_factory=AnalysisScores)
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    verdict: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "DomainAnalysis":
        return cls(
            scores=AnalysisScores.from_dict(data.get("scores")),
            pros=[p for p in _list(data.get("pros")) if isinstance(p, str)],
            cons=[c for c in _list(data.get("cons")) if isinstance(c, str)],
            verdict=_str(data.get("verdict")) or "",
        )


@dataclass(frozen=True)
class AnalyzeResult:
    """AI-scored analysis of a domain name."""
    domain: str
    available: bool
    status: DomainStatus
    purchase_price: int | float | None = None
    analysis: DomainAnalysis | None = None
    analyzed_at: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "AnalyzeResult":
        data = _require_object(data, "domain analysis")
        analysis = data.get("analysis")
        return cls(
            domain=_require_str(data, "domain", "domain analysis"),
            available=data.get("available") is True,
            status=DomainStatus.parse(data.get("status")),
            purchase_price=_price(data.get("purchase_price")),
            analysis=DomainAnalysis.from_dict(analysis) if isinstance(analysis, dict) else None,
            analyzed_at=_str(data.get("analyzed_at")),
        )


# =============================================================================
# Marketplace search and categories
# =============================================================================

@dataclass(frozen=True)
class ListedDomain:
    """A domain listed in the service's catalogue."""
    domain: str
    price: int | float | None = None
    category: str | None = None
    tld: str | None = None
    listed_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "ListedDomain":
        return cls(
            domain=_require_str(data, "domain", "search hit"),
            price=_price(data.get("price")),
            category=_str(data.get("category")),
            tld=_str(data.get("tld")),
            listed_at=_str(data.get("listed_at")),
        )


@dataclass(frozen=True)
class SearchResult:
    domains: list[ListedDomain] = field(default_factory=list)
    total: int = 0
    # Query filters that produced this result, as sent to the service
    filters: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "SearchResult":
        data = _require_object(data, "domain search")
        domains = [ListedDomain.from_dict(d) for d in _objects(data.get("domains"))]
        total = data.get("total")
        return cls(
            domains=domains,
            total=total if isinstance(total, int) and not isinstance(total, bool) else len(domains),
        )


@dataclass(frozen=True)
class Category:
    name: str
    count: int | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        count = data.get("count")
        return cls(
            name=_require_str(data, "name", "category"),
            count=count if isinstance(count, int) and not isinstance(count, bool) else None,
            description=_str(data.get("description")),
        )


@dataclass(frozen=True)
class CategoriesResult:
    categories: list[Category] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "CategoriesResult":
        data = _require_object(data, "category listing")
        return cls(categories=[Category.from_dict(c) for c in _objects(data.get("categories"))])
