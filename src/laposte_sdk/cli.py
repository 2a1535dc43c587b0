"""Command-line interface for La Poste Open APIs."""
from __future__ import annotations

import json
import logging
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install laposte-sdk[cli]' to enable this command."
    ) from exc

from .client import ApiClient
from .config import DEFAULT_BASE_URLS, LAPOSTE, SdkSettings
from .exceptions import ApiError, InvalidURLError, RequestError
from .paths import normalize_path
from .version import get_version

app = typer.Typer(help="La Poste Open API command-line helper.", no_args_is_help=True)

_METHODS = ("GET", "POST", "PUT", "DELETE")

console = Console(force_terminal=False, color_system=None)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests at DEBUG level."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    return {
        "base_url": typer.Option(
            None,
            "--base-url",
            help="API base URL. Defaults to the family's environment override or published URL.",
        ),
        "family": typer.Option(
            LAPOSTE,
            "--family",
            "-f",
            case_sensitive=False,
            help="API family to target (laposte or digiposte).",
        ),
        "strict_ssl": typer.Option(
            None,
            "--strict-ssl/--insecure",
            help="Enable or disable TLS certificate verification. "
            "Defaults to LAPOSTE_API_STRICT_SSL (strict unless 'false').",
            show_default=False,
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
    }


_SHARED_OPTIONS = _shared_options()


def _build_client(
    base_url: str | None,
    family: str,
    strict_ssl: bool | None,
    timeout: float,
) -> ApiClient:
    family = family.lower()
    if family not in DEFAULT_BASE_URLS:
        raise typer.BadParameter("--family must be either 'laposte' or 'digiposte'.")
    try:
        return ApiClient(base_url, family=family, strict_ssl=strict_ssl, timeout=timeout)
    except InvalidURLError as exc:
        raise typer.BadParameter(str(exc), param_hint="--base-url") from exc


def _parse_pairs(entries: list[str], separator: str, option: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for entry in entries:
        if separator not in entry:
            raise typer.BadParameter(f"{option} values must be given as key{separator}value.")
        key, value = entry.split(separator, 1)
        pairs[key.strip()] = value.strip()
    return pairs


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _handle_api_error(exc: ApiError) -> None:
    if exc.status_code is None:
        message = f"Request failed: {exc}"
    else:
        message = f"Request failed (status {exc.status_code}): {exc}"
    if exc.details and exc.details != str(exc):
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.command("normalize")
def normalize_command(path: str = typer.Argument(..., help="Request path to normalize.")) -> None:
    """Print the normalized form of a request path."""

    typer.echo(normalize_path(path))


@app.command("url")
def url_command(
    path: str = typer.Argument("", help="Request path relative to the base URL."),
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    family: str = _SHARED_OPTIONS["family"],
) -> None:
    """Print the full URL a request path resolves to."""

    with _build_client(base_url, family, True, 30.0) as client:
        try:
            url = client.build_url(path)
        except InvalidURLError as exc:
            _handle_api_error(exc)
            return
    typer.echo(url)


@app.command("request")
def request_command(
    method: str = typer.Argument(..., help="HTTP method (GET, POST, PUT or DELETE)."),
    path: str = typer.Argument("", help="Request path relative to the base URL."),
    base_url: str | None = _SHARED_OPTIONS["base_url"],
    family: str = _SHARED_OPTIONS["family"],
    strict_ssl: bool | None = _SHARED_OPTIONS["strict_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    header: list[str] = typer.Option([], "--header", "-H", help="Extra header as Name:Value."),
    param: list[str] = typer.Option([], "--param", "-p", help="Query parameter as key=value."),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON request body."),
) -> None:
    """Send a request and print the response body."""

    verb = method.upper()
    if verb not in _METHODS:
        raise typer.BadParameter(f"METHOD must be one of {', '.join(_METHODS)}.")
    headers = _parse_pairs(header, ":", "--header")
    params = _parse_pairs(param, "=", "--param")
    payload: Any | None = None
    if data is not None:
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise typer.BadParameter(f"--data is not valid JSON: {exc}") from exc

    with _build_client(base_url, family, strict_ssl, timeout) as client:
        try:
            request = getattr(client, verb.lower())(path).with_headers(headers)
            for key, value in params.items():
                request.param(key, value)
            if payload is not None:
                request.json_body(payload)
            response = request.send()
        except (RequestError, InvalidURLError) as exc:
            _handle_api_error(exc)
            return

    try:
        _echo_json(response.json())
    except ValueError:
        typer.echo(response.text)


@app.command("env")
def env_command() -> None:
    """Show the La Poste environment variables the SDK picks up."""

    settings = SdkSettings.from_env()
    table = Table(title="La Poste SDK environment", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Variable")
    table.add_column("Value")
    for name, value in settings.masked().items():
        table.add_row(name, "" if value is None else value)
    console.print(table)


@app.command("version")
def version_command() -> None:
    """Print the SDK version."""

    typer.echo(get_version())
