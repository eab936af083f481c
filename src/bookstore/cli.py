"""Management CLI for the book store API."""

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from src.bookstore.core.exceptions import BookStoreError
from src.bookstore.core.models.user import UserCreate
from src.bookstore.core.services.database import (
    DbManageService,
    DbSessionService,
    UnitOfWork,
)
from src.bookstore.core.services.user import UserService
from src.bookstore.entities import UserRole
from src.bookstore.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="📚 Book Store CLI - database and account management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.command("init-db")
def init_db(
    drop: bool = typer.Option(False, "--drop", help="Drop all tables first"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Create the database tables."""
    manager = DbManageService(DbSessionService().engine)

    if drop:
        if not force and not Confirm.ask("[red]Drop every table and its data?[/red]"):
            console.print("[yellow]Aborted[/yellow]")
            raise typer.Exit(code=1)
        manager.drop_all()
        console.print("[yellow]Dropped all tables[/yellow]")

    manager.create_all()
    console.print(
        f"[green]✅ Tables created in {get_config().database.url}[/green]"
    )


@app.command("create-admin")
def create_admin(
    username: str = typer.Argument(..., help="Login name of the new administrator"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(
        None, "--password", "-p", help="Password (prompted when omitted)"
    ),
    first_name: str = typer.Option("Store", "--first-name", "-f", help="First name"),
    last_name: str = typer.Option("Admin", "--last-name", "-l", help="Last name"),
) -> None:
    """Create an administrator account."""
    if password is None:
        password = Prompt.ask("Password", password=True)

    db = DbSessionService()
    with db.session_scope() as session:
        service = UserService(UnitOfWork(session))
        try:
            user = service.create_user(
                UserCreate(
                    username=username,
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name,
                    role=UserRole.ADMIN,
                )
            )
        except (BookStoreError, ValueError) as e:
            console.print(f"[red]❌ Failed to create admin: {e}[/red]")
            raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created admin '{user.username}' ({user.id})[/green]")


@app.command("list-users")
def list_users() -> None:
    """List every account."""
    db = DbSessionService()
    with db.session_scope() as session:
        users = UserService(UnitOfWork(session)).get_all()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Name", style="magenta")
    table.add_column("Role", style="yellow")
    for user in users:
        table.add_row(user.id, user.username, user.email, user.full_name, user.role.value)

    console.print(table)


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int = typer.Option(None, "--port", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    cfg = get_config().app
    uvicorn.run(
        "src.bookstore.api.http.app:app",
        host=host or cfg.host,
        port=port or cfg.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
