"""Interface de linha de comando para operar o coletor do denuo.be."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from denuo.application import ScrapeRunResult
from denuo.domain.errors import StoreError
from denuo.extraction.pages import SECTIONS
from denuo.services.scraping import ScrapingContainer, build_scraping_container
from denuo.services.tools import build_tools_container
from denuo.settings import get_log_level

#: Seções pesquisáveis por texto e o método do toolkit correspondente.
SEARCHABLE_SECTIONS = {
    "news": "search_news",
    "standpunten": "search_position_papers",
    "dossiers": "search_dossiers",
    "downloads": "search_downloads",
    "press": "search_press_articles",
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Denuo - coletor do portal denuo.be")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scrape = subparsers.add_parser(
        "scrape", help="Coleta todas as seções ou apenas uma delas"
    )
    scrape.add_argument(
        "--section",
        choices=SECTIONS,
        default=None,
        help="Seção a coletar; quando omitida coleta todas",
    )

    status = subparsers.add_parser(
        "status", help="Mostra o resultado da última coleta de cada seção"
    )

    search = subparsers.add_parser("search", help="Pesquisa o conteúdo armazenado")
    search.add_argument("section", choices=sorted(SEARCHABLE_SECTIONS))
    search.add_argument("query", help="Termo de busca")
    search.add_argument(
        "--limit", type=int, default=10, help="Quantidade máxima de resultados"
    )

    serve_api = subparsers.add_parser(
        "serve-api", help="Sobe a API REST com o agendador de coletas"
    )

    serve_mcp = subparsers.add_parser(
        "serve-mcp", help="Sobe o servidor MCP com as ferramentas de consulta"
    )
    serve_mcp.add_argument(
        "--transport", choices=("stdio", "sse"), default="stdio"
    )

    # Nível de log por subcomando (também lê DENUO_LOG_LEVEL)
    for sp in (scrape, status, search, serve_api, serve_mcp):
        sp.add_argument(
            "--log-level",
            default=None,
            help="Nível de log: DEBUG, INFO, WARNING, ERROR (padrão INFO)",
        )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    # stdout pertence ao protocolo MCP no transporte stdio
    log_console = Console(stderr=True) if args.command == "serve-mcp" else console
    handler = RichHandler(console=log_console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("denuo.cli")

    if args.command == "scrape":
        container = _require_scraping_container(console)
        result = asyncio.run(_scrape(container, args.section))
        _print_run(console, result)
        if not result.succeeded:
            logger.warning(
                "Seções com falha: %s", ", ".join(result.failed_sections)
            )
            sys.exit(1)
    elif args.command == "status":
        container = _require_scraping_container(console)
        try:
            rows = container.read_repository.get_scrape_metadata()
        except StoreError as exc:
            console.print(f"[red]{exc}[/red]")
            sys.exit(1)
        finally:
            container.client_factory.close()
        if not rows:
            console.print("[yellow]Nenhuma coleta registrada até o momento.[/yellow]")
            return
        table = Table(title="scrape_metadata")
        for column in ("Seção", "Status", "Itens", "Última coleta", "Erro"):
            table.add_column(column)
        for row in rows:
            table.add_row(
                row.section,
                _status_markup(row.status),
                str(row.items_scraped),
                row.last_scraped.isoformat(),
                row.error_message or "",
            )
        console.print(table)
    elif args.command == "search":
        tools = build_tools_container()
        try:
            search = getattr(tools.toolkit, SEARCHABLE_SECTIONS[args.section])
            console.print(search(args.query, limit=args.limit), markup=False, highlight=False)
        finally:
            tools.close()
    elif args.command == "serve-api":
        from denuo.api import run

        run()
    elif args.command == "serve-mcp":
        from denuo.services.tools.server import main as serve_mcp

        serve_mcp(transport=args.transport)
    else:
        raise ValueError(f"Comando desconhecido: {args.command}")


def _require_scraping_container(console: Console) -> ScrapingContainer:
    try:
        return build_scraping_container()
    except StoreError as exc:
        console.print(f"[red]Database not available: {exc}[/red]")
        sys.exit(1)


async def _scrape(container: ScrapingContainer, section: str | None) -> ScrapeRunResult:
    try:
        if section:
            return await container.scrape_service.scrape_section(section)
        return await container.scrape_service.run()
    finally:
        await container.aclose()


def _status_markup(status: str) -> str:
    color = "green" if status == "success" else "red"
    return f"[{color}]{status}[/{color}]"


def _print_run(console: Console, result: ScrapeRunResult) -> None:
    table = Table(title="Coleta denuo.be")
    for column in ("Seção", "Status", "Itens", "Erro"):
        table.add_column(column)
    for outcome in result.outcomes:
        table.add_row(
            outcome.section,
            _status_markup(outcome.status),
            str(outcome.items),
            outcome.error_message or "",
        )
    console.print(table)
    console.print(f"[bold]{result.total_items}[/bold] itens gravados no total.")


if __name__ == "__main__":
    main()
