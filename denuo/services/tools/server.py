"""Denuo MCP Server - search tools over the scraped denuo.be content."""

from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP

from .container import build_tools_container
from .toolkit import ContentToolkit

SERVER_NAME = "Denuo.be MCP Server"


def create_server(toolkit: ContentToolkit) -> FastMCP:
    """Register one tool per toolkit method on a new FastMCP server."""

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Search news, position papers, dossiers, joint committees, events, "
            "downloads and press mentions published on denuo.be"
        ),
    )

    @mcp.tool()
    def search_denuo_news(
        query: str,
        language: Optional[Literal["nl", "fr"]] = None,
        category: Optional[str] = None,
        limit: int = 10,
    ) -> str:
        """
        Search denuo.be news articles.

        Args:
            query: Search term for news articles
            language: Language filter (nl or fr)
            category: Category filter
            limit: Maximum number of results (default: 10)
        """
        return toolkit.search_news(query, language, category, limit)

    @mcp.tool()
    def get_denuo_recent_news(
        language: Optional[Literal["nl", "fr"]] = None, limit: int = 10
    ) -> str:
        """Get the most recent denuo.be news, optionally for one language."""
        return toolkit.get_recent_news(language, limit)

    @mcp.tool()
    def get_denuo_news_details(id: int) -> str:
        """Get the full stored record of one news article by its ID."""
        return toolkit.get_news_details(id)

    @mcp.tool()
    def search_denuo_standpunten(
        query: str, year: Optional[str] = None, limit: int = 10
    ) -> str:
        """
        Search denuo.be position papers (standpunten).

        Args:
            query: Search term for position papers
            year: Publication year filter
            limit: Maximum number of results (default: 10)
        """
        return toolkit.search_position_papers(query, year, limit)

    @mcp.tool()
    def get_all_denuo_standpunten(limit: int = 20) -> str:
        """List position papers, newest first."""
        return toolkit.get_all_position_papers(limit)

    @mcp.tool()
    def search_denuo_dossiers(
        query: str,
        category: Optional[str] = None,
        language: Optional[Literal["nl", "fr"]] = None,
        limit: int = 10,
    ) -> str:
        """Search denuo.be dossiers by text, category and language."""
        return toolkit.search_dossiers(query, category, language, limit)

    @mcp.tool()
    def get_all_denuo_dossiers(limit: int = 20) -> str:
        """List all dossiers."""
        return toolkit.get_all_dossiers(limit)

    @mcp.tool()
    def get_denuo_committees(limit: int = 20, sector: Optional[str] = None) -> str:
        """List the paritaire comités (joint committees), optionally by sector."""
        return toolkit.get_committees(limit, sector)

    @mcp.tool()
    def get_denuo_events(upcoming_only: bool = True, limit: int = 5) -> str:
        """
        List agenda events.

        Args:
            upcoming_only: Show only events from today on (default: true)
            limit: Maximum number of results (default: 5)
        """
        return toolkit.get_events(upcoming_only, limit)

    @mcp.tool()
    def search_denuo_downloads(
        query: str, file_type: Optional[str] = None, limit: int = 10
    ) -> str:
        """Search downloadable documents, optionally by file type (PDF, Word...)."""
        return toolkit.search_downloads(query, file_type, limit)

    @mcp.tool()
    def get_all_denuo_downloads(limit: int = 20) -> str:
        """List all downloadable documents."""
        return toolkit.get_all_downloads(limit)

    @mcp.tool()
    def get_denuo_about_info(
        section_type: Optional[
            Literal["mission", "team", "contact", "governance", "general"]
        ] = None,
    ) -> str:
        """Get the sections of the "over Denuo" page."""
        return toolkit.get_about_info(section_type)

    @mcp.tool()
    def search_denuo_press_articles(
        query: str,
        source: Optional[str] = None,
        language: Optional[Literal["nl", "fr"]] = None,
        limit: int = 10,
    ) -> str:
        """Search press mentions of Denuo, optionally by outlet and language."""
        return toolkit.search_press_articles(query, source, language, limit)

    @mcp.tool()
    def get_denuo_recent_press_articles(limit: int = 10) -> str:
        """List the most recent press mentions."""
        return toolkit.get_recent_press_articles(limit)

    @mcp.tool()
    def get_denuo_scrape_status() -> str:
        """Show when each section was last scraped and whether it succeeded."""
        return toolkit.get_scrape_status()

    return mcp


def main(transport: Literal["stdio", "sse"] = "stdio") -> None:
    """Run the MCP server."""
    container = build_tools_container()
    try:
        create_server(container.toolkit).run(transport=transport)
    finally:
        container.close()


if __name__ == "__main__":
    main()
