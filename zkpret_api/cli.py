"""
CLI entry point for the ZK-PRET API.
"""

import json
from typing import Optional

import httpx
import typer
import uvicorn

from .config import get_settings
from .proof_types import PROOF_TYPES, PROOF_TYPES_BY_KEY

app = typer.Typer(
    name="zkpret-api",
    help="ZK-PRET Core Engine API",
    add_completion=False,
)

DEFAULT_URL = "http://127.0.0.1:8000"


def parse_fields(fields: list[str]) -> dict[str, str]:
    """Turn `key=value` pairs into a request body."""
    body: dict[str, str] = {}
    for item in fields:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got: {item}")
        body[key] = value
    return body


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default: HOST)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """
    Run the API server.
    """
    settings = get_settings()
    uvicorn.run(
        "zkpret_api.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload or settings.debug,
    )


@app.command()
def check(
    url: str = typer.Option(DEFAULT_URL, "--url", help="Base URL of a running service"),
) -> None:
    """
    Check the health endpoint of a running service.
    """
    try:
        response = httpx.get(f"{url.rstrip('/')}/api/health", timeout=10.0)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as e:
        typer.echo(f"✗ Service unreachable: {e}")
        raise typer.Exit(code=1)
    except ValueError:
        typer.echo(f"✗ Health endpoint did not return JSON: {response.text}")
        raise typer.Exit(code=1)

    status = data.get("status")
    typer.echo(f"Service: {data.get('service')} v{data.get('version')}")
    typer.echo(f"Status: {status}")
    typer.echo("Features:")
    for feature in data.get("features", []):
        typer.echo(f"  - {feature}")

    if status != "healthy":
        raise typer.Exit(code=1)


@app.command()
def prove(
    proof_type: str = typer.Argument(..., help="Proof type key, e.g. gleif or process-integrity"),
    fields: list[str] = typer.Option(
        [],
        "--field",
        "-f",
        help="Request body field as key=value (repeatable)",
    ),
    url: str = typer.Option(DEFAULT_URL, "--url", help="Base URL of a running service"),
) -> None:
    """
    Request a proof from a running service and print the response.
    """
    descriptor = PROOF_TYPES_BY_KEY.get(proof_type)
    if descriptor is None:
        typer.echo(f"Unknown proof type: {proof_type}")
        typer.echo(f"Available: {', '.join(PROOF_TYPES_BY_KEY)}")
        raise typer.Exit(code=2)

    body = parse_fields(fields)
    # Leave headroom over the slowest simulated proof
    timeout = descriptor.max_latency_ms / 1000 + 30.0

    try:
        response = httpx.post(f"{url.rstrip('/')}{descriptor.route}", json=body, timeout=timeout)
    except httpx.HTTPError as e:
        typer.echo(f"✗ Request failed: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"HTTP {response.status_code}")
    try:
        typer.echo(json.dumps(response.json(), indent=2))
    except ValueError:
        # Non-JSON body, e.g. a proxy error page
        typer.echo(response.text)

    if response.status_code != 200:
        raise typer.Exit(code=1)


@app.command("types")
def list_types() -> None:
    """List the supported proof types."""
    for d in PROOF_TYPES:
        required = ", ".join(f.name for f in d.required) or "-"
        typer.echo(
            f"{d.key:<18} POST {d.route:<24} required: {required:<12} "
            f"latency: {d.min_latency_ms}-{d.max_latency_ms}ms"
        )


@app.command()
def version() -> None:
    """Show the API version."""
    from zkpret_api import __version__
    typer.echo(f"zkpret-api v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
