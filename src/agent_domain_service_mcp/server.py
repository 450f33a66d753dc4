"""
Agent Domain Service MCP Server

An MCP server exposing AgentDomainService.com lookups as tools:
- Single domain availability and pricing
- Name exploration across popular TLDs
- AI brainstorming and analysis of domain names
- Marketplace search and categories
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Literal, TypeVar

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from . import __version__
from .client import (
    DEFAULT_BRAINSTORM_COUNT,
    MAX_BRAINSTORM_COUNT,
    MAX_SEARCH_LIMIT,
    DomainServiceClient,
)
from .config import is_debug
from .errors import DomainServiceError
from .formatting import (
    format_analyze_result,
    format_brainstorm_result,
    format_categories_result,
    format_explore_result,
    format_lookup_result,
    format_search_result,
)

logger = logging.getLogger(__name__)

# Suppress httpx request logging by default
# Set AGENT_DOMAIN_SERVICE_DEBUG=1 to enable verbose HTTP logging
if not is_debug():
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

# Server version
VERSION = __version__

# Initialize the MCP server
mcp = FastMCP("agent-domain-service")
mcp._mcp_server.version = VERSION

T = TypeVar("T")


def _text_result(text: str, is_error: bool = False) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


async def _respond(
    operation: Callable[[DomainServiceClient], Awaitable[T]],
    render: Callable[[T], str],
) -> CallToolResult:
    """
    Run one tool call against the domain service and render its outcome.

    DomainServiceError is the only failure a tool call can produce; it is
    returned as an error-flagged text block instead of being raised.
    """
    try:
        async with DomainServiceClient() as client:
            result = await operation(client)
    except DomainServiceError as e:
        logger.info("Tool call failed: %s", e)
        return _text_result(f"Error: {e}", is_error=True)
    return _text_result(render(result))


# =============================================================================
# MCP Tools
# =============================================================================

@mcp.tool()
async def check_domain(
    domain: Annotated[str, Field(
        description="The full domain to check (e.g., 'example.com', 'myapp.io')",
    )],
) -> CallToolResult:
    """
    Check if a specific domain is available for registration.

    Returns availability status, pricing, and alternative suggestions if the
    domain is taken. Powered by AgentDomainService.com - no CAPTCHAs or API keys required.
    """
    return await _respond(lambda client: client.check_domain(domain), format_lookup_result)


@mcp.tool()
async def explore_name(
    name: Annotated[str, Field(
        description="The base name to explore (without TLD, e.g., 'myawesomeapp')",
    )],
) -> CallToolResult:
    """
    Explore a name across multiple TLDs (.com, .io, .ai, .co, .dev, .app, .net, .xyz, .org)
    to see which variations are available.

    Great for brainstorming domain names for a new project. Powered by AgentDomainService.com.
    """
    return await _respond(lambda client: client.explore_name(name), format_explore_result)


@mcp.tool()
async def brainstorm_domains(
    description: Annotated[str, Field(
        description=(
            "A description of your project, business, or idea (e.g., 'AI-powered recipe app "
            "for busy parents', 'sustainable fashion marketplace', 'developer tools for API testing')"
        ),
    )],
    count: Annotated[float | None, Field(
        description=(
            f"Number of suggestions to generate (default: {DEFAULT_BRAINSTORM_COUNT}, "
            f"max: {MAX_BRAINSTORM_COUNT})"
        ),
        json_schema_extra={"maximum": MAX_BRAINSTORM_COUNT},
    )] = DEFAULT_BRAINSTORM_COUNT,
) -> CallToolResult:
    """
    Generate creative domain name ideas based on a description of your project, business, or idea.

    Uses AI to suggest domain names that match your concept, with real availability
    and pricing. Perfect for finding the right domain for a new startup, app, or project.
    """
    return await _respond(
        lambda client: client.brainstorm_domains(description, count),
        format_brainstorm_result,
    )


@mcp.tool()
async def analyze_domain(
    domain: Annotated[str, Field(
        description="The domain to analyze (e.g., 'coolstartup.com', 'myapp.io')",
    )],
) -> CallToolResult:
    """
    Get an AI-powered analysis of a domain name.

    Scores the domain on memorability, brandability, pronunciation ease, and SEO
    potential. Lists pros, cons, and provides an overall verdict. Useful for
    evaluating domain name options before purchasing.
    """
    return await _respond(lambda client: client.analyze_domain(domain), format_analyze_result)


@mcp.tool()
async def search_domains(
    category: Annotated[str | None, Field(
        description="Only return domains in this category (see list_categories)",
    )] = None,
    max_price: Annotated[float | None, Field(
        description="Maximum purchase price in USD",
    )] = None,
    min_price: Annotated[float | None, Field(
        description="Minimum purchase price in USD",
    )] = None,
    tlds: Annotated[list[str] | None, Field(
        description="TLDs to include (e.g., ['com', 'io'])",
    )] = None,
    sort: Annotated[Literal["price_asc", "price_desc", "newest"] | None, Field(
        description="Sort order: price_asc, price_desc, or newest",
    )] = None,
    limit: Annotated[int | None, Field(
        description=f"Maximum number of results (max: {MAX_SEARCH_LIMIT})",
        json_schema_extra={"maximum": MAX_SEARCH_LIMIT},
    )] = None,
) -> CallToolResult:
    """
    Search domains listed on AgentDomainService.com by category, price range, and TLD.

    Only the filters you supply are applied.
    """
    return await _respond(
        lambda client: client.search_domains(
            category=category,
            max_price=max_price,
            min_price=min_price,
            tlds=tlds,
            sort=sort,
            limit=limit,
        ),
        format_search_result,
    )


@mcp.tool()
async def list_categories() -> CallToolResult:
    """
    List the domain categories available for search_domains.
    """
    return await _respond(lambda client: client.list_categories(), format_categories_result)
