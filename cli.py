import asyncio
import json
from typing import Optional

import typer

from postboard.core.config import Settings, load_settings
from postboard.core.database import Database
from postboard.core.exceptions import ConfigurationError

app = typer.Typer(help="Postboard server commands.")


# ---------------------------
# Helpers
# ---------------------------
def get_settings(**overrides) -> Settings:
    """Load settings or abort the process with exit code 1."""
    overrides = {k: v for k, v in overrides.items() if v is not None}
    try:
        return load_settings(**overrides)
    except ConfigurationError as e:
        typer.echo(f"❌ {e.message}: {e.__cause__}", err=True)
        raise typer.Exit(1)


async def _create_tables(settings: Settings) -> None:
    # Register the table models on SQLModel.metadata
    import postboard.apps.blog.models.post  # noqa: F401

    database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
    try:
        await database.create_all()
    finally:
        await database.disconnect()


# ---------------------------
# Commands
# ---------------------------
@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind (overrides HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on (overrides PORT)"),
):
    """Run the API server."""
    from postboard.main import serve as run_server

    settings = get_settings(HOST=host, PORT=port)
    run_server(settings)


@app.command()
def init_db():
    """Create the database tables and exit."""
    settings = get_settings()
    asyncio.run(_create_tables(settings))
    typer.echo(f"✅ Tables created in {settings.DATABASE_URL}")


@app.command()
def show_config():
    """Print the effective configuration as JSON."""
    settings = get_settings()
    typer.echo(json.dumps(settings.model_dump(), indent=2))


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()
