"""
Command-line interface for VC Verification.

Usage:
    vc-verify credential.json --verifier-name dhiway --api-endpoint https://...
    vc-verify --method offline https://example.com/credentials/123
    cat credential.json | vc-verify -
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import httpx
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from vc_verification import __version__
from vc_verification.config import DEFAULT_EXPIRY_FIELD, DEFAULT_TIMEOUT, VerificationConfig
from vc_verification.response import VerificationResult
from vc_verification.service import VerificationService
from vc_verification.verifiers.http import client_for


console = Console()

CREDENTIAL_MEDIA_TYPES = "application/vc+ld+json, application/json"


def format_result(result: VerificationResult) -> None:
    """Format and print verification result."""
    if result.success:
        status_icon = "[bold green]VERIFIED[/]"
        panel_style = "green"
    elif result.errors:
        status_icon = "[bold red]FAILED[/]"
        panel_style = "red"
    else:
        status_icon = "[bold yellow]ERROR[/]"
        panel_style = "yellow"

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("Status", status_icon)
    table.add_row("Message", result.message)

    for check in result.checks or []:
        check_status = "[green]Passed[/]" if check.status else "[red]Failed[/]"
        table.add_row(check.title or "Check", check_status)

    console.print(Panel(table, title="Verification Result", border_style=panel_style))

    if result.errors:
        console.print("\n[bold red]Errors:[/]")
        for error in result.errors:
            console.print(f"  [red]x[/] {error.error}")
            console.print(f"    [dim]{error.raw}[/]")


def load_credential(
    source: str, timeout: float = DEFAULT_TIMEOUT, verify_ssl: bool = True
) -> Any:
    """Read a credential document.

    Args:
        source: "-" for stdin, an http(s) URL, or a file path.
        timeout: Timeout in seconds when fetching a URL.
        verify_ssl: Whether to verify SSL certificates when fetching a URL.

    Returns:
        The decoded credential.

    Raises:
        click.ClickException: If the file does not exist.
        json.JSONDecodeError: If the document is not JSON.
        httpx.HTTPError: If the URL cannot be fetched.
    """
    if source == "-":
        text = sys.stdin.read()
    elif source.startswith(("http://", "https://")):
        with client_for(timeout, verify_ssl) as client:
            response = client.get(source, headers={"Accept": CREDENTIAL_MEDIA_TYPES})
            response.raise_for_status()
            text = response.text
    else:
        path = Path(source)
        if not path.is_file():
            raise click.ClickException(f"File not found: {source}")
        text = path.read_text()

    return json.loads(text)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def report_error(message: str, json_output: bool) -> None:
    if json_output:
        console.print_json(data={"error": message})
    else:
        console.print(f"[red]Error:[/] {message}")


@click.command()
@click.argument("source", required=True)
@click.option(
    "--method",
    type=click.Choice(["online", "offline"]),
    envvar="VC_VERIFY_METHOD",
    default="online",
    show_default=True,
    help="Verification method",
)
@click.option(
    "--verifier-name",
    envvar="VC_VERIFY_VERIFIER_NAME",
    help="Online verification backend (e.g. api, dhiway)",
)
@click.option(
    "--api-endpoint",
    envvar="VC_VERIFY_API_ENDPOINT",
    help="Verification API endpoint URL",
)
@click.option(
    "--api-token",
    envvar="VC_VERIFY_API_TOKEN",
    help="Bearer token for the verification API",
)
@click.option(
    "--expiry-field",
    default=DEFAULT_EXPIRY_FIELD,
    show_default=True,
    help="Credential attribute holding the expiry date",
)
@click.option(
    "--no-ssl-verify",
    is_flag=True,
    help="Disable SSL certificate verification",
)
@click.option(
    "--json-output",
    is_flag=True,
    help="Output result as JSON",
)
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="HTTP request timeout in seconds",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__)
def main(
    source: str,
    method: str,
    verifier_name: str | None,
    api_endpoint: str | None,
    api_token: str | None,
    expiry_field: str,
    no_ssl_verify: bool,
    json_output: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """Verify a Verifiable Credential.

    SOURCE can be:
    - A file path (e.g., credential.json)
    - A URL (e.g., https://example.com/credentials/123)
    - "-" to read from stdin

    Examples:

        vc-verify credential.json --verifier-name dhiway --api-endpoint https://verify.example.com/api/v1/verify

        VC_VERIFY_VERIFIER_NAME=api VC_VERIFY_API_ENDPOINT=https://example.com/verify vc-verify credential.json

        cat credential.json | vc-verify --method offline -
    """
    configure_logging(verbose)

    try:
        credential = load_credential(source, timeout=timeout, verify_ssl=not no_ssl_verify)
    except json.JSONDecodeError as e:
        report_error(f"Invalid JSON: {e}", json_output)
        sys.exit(2)
    except httpx.HTTPError as e:
        report_error(f"HTTP error: {e}", json_output)
        sys.exit(2)
    except click.ClickException as e:
        report_error(e.format_message(), json_output)
        sys.exit(2)

    config = VerificationConfig(
        method=method,
        verifier_name=verifier_name,
        api_endpoint=api_endpoint,
        api_token=api_token,
        expiry_field=expiry_field,
        timeout=timeout,
        verify_ssl=not no_ssl_verify,
    )

    service = VerificationService()
    result = asyncio.run(service.verify({"credential": credential, "config": config}))

    if json_output:
        console.print_json(data=result.to_dict())
    else:
        format_result(result)

    sys.exit(0 if result.success else 1)


if __name__ == "__main__":
    main()
