"""
Agent Domain Service MCP Server

An MCP server for checking domain availability, pricing and ideas via AgentDomainService.com.
"""

__version__ = "1.0.0"


def main():
    """Main entry point for the CLI."""
    import sys

    # Handle CLI arguments before importing heavy dependencies
    if "--help" in sys.argv or "-h" in sys.argv:
        print_help()
        sys.exit(0)

    if "--version" in sys.argv or "-V" in sys.argv:
        print(f"agent-domain-service-mcp {__version__}")
        sys.exit(0)

    if "--show-config" in sys.argv:
        show_config()
        sys.exit(0)

    configure_logging()

    if "--check" in sys.argv:
        sys.exit(0 if check_service() else 1)

    # Default: run the MCP server
    import logging
    from .server import mcp
    logging.getLogger(__name__).info("Agent Domain Service MCP server running on stdio")
    mcp.run()


def configure_logging():
    """Send log output to stderr; stdout carries the MCP stream."""
    import logging
    import sys
    from .config import is_debug

    logging.basicConfig(
        level=logging.DEBUG if is_debug() else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_help():
    """Print help message."""
    print(f"""agent-domain-service-mcp {__version__}

An MCP server for checking domain availability, pricing and ideas via AgentDomainService.com.

Usage:
    agent-domain-service-mcp                Run the MCP server
    agent-domain-service-mcp --check        Check that the domain service is reachable
    agent-domain-service-mcp --show-config  Show current configuration
    agent-domain-service-mcp --version      Show version
    agent-domain-service-mcp --help         Show this help

Configuration:
    No API key is required. Optional settings:
      AGENT_DOMAIN_SERVICE_URL      Base URL of the service (default: https://agentdomainservice.com)
      AGENT_DOMAIN_SERVICE_TIMEOUT  Request timeout in seconds (default: 30)
      AGENT_DOMAIN_SERVICE_DEBUG=1  Verbose HTTP logging on stderr

    The same "base_url" and "timeout" keys may be set in
    ~/.config/agent-domain-service-mcp/config.json

Claude Code Setup:
    Add to ~/.claude/settings.json:
    {{
      "mcpServers": {{
        "agent-domain-service": {{
          "command": "uvx",
          "args": ["agent-domain-service-mcp"]
        }}
      }}
    }}
""")


def show_config():
    """Show current configuration."""
    from .config import (
        ENV_BASE_URL,
        ENV_TIMEOUT,
        get_config_file,
        get_setting_source,
        load_settings,
    )

    settings = load_settings()

    print("Configuration")
    print("=" * 50)
    print()

    config_file = get_config_file()
    print(f"Config file: {config_file}")
    print(f"  Exists: {config_file.exists()}")
    print()

    print(f"Base URL: {settings.base_url}")
    print(f"  Source: {get_setting_source(ENV_BASE_URL, 'base_url')}")
    print(f"Timeout: {settings.timeout:g}s")
    print(f"  Source: {get_setting_source(ENV_TIMEOUT, 'timeout')}")
    print(f"Debug logging: {'on' if settings.debug else 'off'}")


def check_service() -> bool:
    """Make a simple request to confirm the service is reachable."""
    import asyncio
    from .client import DomainServiceClient
    from .errors import DomainServiceError

    async def _probe():
        async with DomainServiceClient() as client:
            return await client.list_categories()

    print("Testing Agent Domain Service...")
    try:
        result = asyncio.run(_probe())
    except DomainServiceError as e:
        print(f"✗ Service check failed: {e}")
        return False

    print(f"✓ Service reachable ({len(result.categories)} categories)")
    return True
