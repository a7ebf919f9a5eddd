from __future__ import annotations

import json
from typing import Any, Optional

import typer
import uvicorn

from annoquery.api.main import create_app
from annoquery.common.config import settings
from annoquery.common.logging import setup_logging
from annoquery.query.facets import FocusFilter, facets_to_dict, generate_faceted_filter
from annoquery.query.flat import to_object
from annoquery.query.tokenizer import tokenize

app = typer.Typer(add_completion=False, help="Annotation search query parser CLI")


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


@app.command()
def tokens(query: str = typer.Argument(..., help="Search query to tokenize")) -> None:
    """Print the tokens of a search query."""
    setup_logging()
    _echo_json(tokenize(query))


@app.command()
def flat(query: str = typer.Argument(..., help="Search query to parse")) -> None:
    """Print the backend field -> values mapping for a search query."""
    setup_logging()
    _echo_json(to_object(query))


@app.command()
def facets(
    query: str = typer.Argument(..., help="Search query to parse"),
    user: Optional[str] = typer.Option(None, help="Focused user, merged ahead of user: terms"),
) -> None:
    """Print the faceted filter for a search query."""
    setup_logging()
    _echo_json(facets_to_dict(generate_faceted_filter(query, FocusFilter(user=user))))


@app.command()
def serve(
    host: str = typer.Option(settings.host, help="Host to bind"),
    port: int = typer.Option(settings.port, help="Port to bind"),
    log_level: str = typer.Option("info", help="Uvicorn log level"),
) -> None:
    """Run the FastAPI service."""
    setup_logging()
    uvicorn.run(create_app(), host=host, port=port, log_level=log_level)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
