"""Hiring API CLI tool (hiring-api)."""

import json

import httpx
import typer

app = typer.Typer(name="hiring-api", help="Hiring API CLI")

DEFAULT_URL = "http://localhost:8000"


def _api(url: str) -> str:
    from hiring_api.core.config import settings

    return f"{url.rstrip('/')}{settings.API_PREFIX}"


def _echo_response(resp: httpx.Response) -> None:
    try:
        typer.echo(json.dumps(resp.json(), indent=2))
    except ValueError:
        typer.echo(resp.text)
    if resp.is_error:
        raise typer.Exit(code=1)


@app.command("serve")
def serve(
    host: str = typer.Option("0.0.0.0", help="Host"),
    port: int = typer.Option(8000, help="Port"),
    reload: bool = typer.Option(False, help="Auto-reload"),
):
    """Start the FastAPI server."""
    import uvicorn
    uvicorn.run("hiring_api.main:app", host=host, port=port, reload=reload)


@app.command("config")
def show_config():
    """Print the effective role settings and feature flags."""
    from hiring_api.core.config import settings
    from hiring_api.core.features import get_feature_flags

    typer.echo(f"API prefix: {settings.API_PREFIX}")
    typer.echo(f"Role expiration: {settings.ROLE_EXPIRATION_MONTHS} months")
    for name, enabled in get_feature_flags().as_dict().items():
        typer.echo(f"  {name}: {'on' if enabled else 'off'}")


@app.command("create")
def create_role(
    title: str = typer.Argument(..., help="Job title"),
    description: str = typer.Argument(..., help="Job description"),
    department: str = typer.Option("", help="Department"),
    location: str = typer.Option("", help="Location"),
    url: str = typer.Option(DEFAULT_URL, help="API base URL"),
):
    """Post a new role via the API."""
    resp = httpx.post(
        f"{_api(url)}/roles",
        json={
            "title": title,
            "description": description,
            "department": department,
            "location": location,
        },
        timeout=10,
    )
    _echo_response(resp)


@app.command("list")
def list_roles(
    include_expired: bool = typer.Option(False, help="Include expired roles"),
    url: str = typer.Option(DEFAULT_URL, help="API base URL"),
):
    """List open roles."""
    resp = httpx.get(
        f"{_api(url)}/roles",
        params={"includeExpired": str(include_expired).lower()},
        timeout=10,
    )
    if resp.is_error:
        _echo_response(resp)
    for role in resp.json():
        flag = "" if role["isApproved"] else " (pending)"
        typer.echo(f"  [{role['id']}] {role['title']} - expires {role['expiresAt']}{flag}")


@app.command("get")
def get_role(
    role_id: str = typer.Argument(..., help="Role ID"),
    url: str = typer.Option(DEFAULT_URL, help="API base URL"),
):
    """Show a single role."""
    _echo_response(httpx.get(f"{_api(url)}/roles/{role_id}", timeout=10))


@app.command("approve")
def approve_role(
    role_id: str = typer.Argument(..., help="Role ID"),
    url: str = typer.Option(DEFAULT_URL, help="API base URL"),
):
    """Approve a pending role."""
    _echo_response(httpx.put(f"{_api(url)}/roles/{role_id}/approve", timeout=10))


@app.command("status")
def hiring_status(url: str = typer.Option(DEFAULT_URL, help="API base URL")):
    """Show the hiring status message."""
    _echo_response(httpx.get(f"{_api(url)}/hiring-status", timeout=10))


if __name__ == "__main__":
    app()
