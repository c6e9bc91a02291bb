"""
Point d'entrée CLI de graphql-moviedb.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="graphql-moviedb",
    help="Façade GraphQL de l'API The Movie Database (TMDB)",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _enabled(flag: bool) -> str:
    return "[green]activée[/green]" if flag else "[red]désactivée[/red]"


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration graphql-moviedb")

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Parametre", style="cyan")
    table.add_column("Valeur")

    table.add_row("Environnement", config.environment)
    table.add_row("API TMDB v3", _enabled(config.v3_enabled))
    table.add_row("API TMDB v4", _enabled(config.v4_enabled))
    table.add_row("Cache des reponses", f"{config.cache_dir} (TTL {config.response_cache_ttl}s)")
    table.add_row("Cache des sessions", f"{config.session_cache_dir} (TTL {config.session_cache_ttl}s)")
    table.add_row("Timeout HTTP", f"{config.request_timeout}s")
    table.add_row("Niveau de log", config.log_level)
    console.print(table)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"graphql-moviedb v{__version__}")


@app.command()
def schema() -> None:
    """Affiche le schéma GraphQL (SDL)."""
    from .adapters.graphql.schema import schema as graphql_schema

    typer.echo(graphql_schema.as_str())


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur GraphQL."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port
    typer.echo(f"Démarrage du serveur sur http://{host}:{port}/graphql")
    uvicorn.run("graphql_moviedb.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Démarrage de graphql-moviedb", version=__version__)

    app()


if __name__ == "__main__":
    main()
