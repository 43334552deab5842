"""CLI runner for talking to a remote WebDriver server."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from remote_webdriver import __version__
from remote_webdriver.core.config import Config
from remote_webdriver.core.exceptions import WebDriverError
from remote_webdriver.core.logging import setup_logging
from remote_webdriver.driver.api import HttpxAPIService
from remote_webdriver.driver.remote import RemoteWebDriver

console = Console()


def setup_cli_logging(config: Config, verbose: bool = False) -> None:
    """Set up logging for CLI."""
    level = "DEBUG" if verbose else config.log_level

    if config.json_logs or config.log_file:
        setup_logging(level=level, log_file=config.log_file, json_logs=config.json_logs)
        return

    # Use rich handler for pretty output
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=False,
        )],
        force=True,
    )

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@contextmanager
def open_driver(config: Config) -> Iterator[RemoteWebDriver]:
    """Yield a driver over a fresh httpx transport, closing the transport afterwards."""
    with HttpxAPIService(
        timeout=config.driver.request_timeout,
        verify=config.driver.verify_tls,
    ) as api:
        yield RemoteWebDriver.from_config(config.driver, api_service=api)


def report_error(error: WebDriverError, verbose: bool = False) -> None:
    """Print a classified error and exit."""
    console.print(f"[red]Error ({error.kind.value}): {error.message}[/red]")
    if error.details and verbose:
        console.print(f"[dim]{error.details}[/dim]")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--url", "-u", help="Remote end URL (default: $WEBDRIVER_URL)")
@click.option("--browser", "-b", help="Browser name (default: $WEBDRIVER_BROWSER)")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, url: Optional[str], browser: Optional[str], verbose: bool):
    """Remote WebDriver client - drive a W3C WebDriver server"""
    config = Config.from_env()
    if url:
        config.driver.url = url
    if browser:
        config.driver.browser_name = browser

    setup_cli_logging(config, verbose)
    ctx.obj = {"config": config, "verbose": verbose}


@cli.command()
@click.pass_context
def status(ctx: click.Context):
    """Show whether the remote end can create sessions."""
    config: Config = ctx.obj["config"]

    try:
        with open_driver(config) as driver:
            resp = driver.session_status()
    except WebDriverError as e:
        report_error(e, ctx.obj["verbose"])

    table = Table(title="Remote End Status", border_style="blue")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("URL", config.driver.url)
    table.add_row("State", resp.state)
    table.add_row("Ready", "Yes" if resp.ready else "No")
    table.add_row("Message", resp.message)
    console.print(table)


@cli.command()
@click.argument("target")
@click.pass_context
def visit(ctx: click.Context, target: str):
    """Open a session, navigate to TARGET and print where the browser ended up.

    Examples:

        remote-webdriver visit https://example.com

        remote-webdriver -u http://grid:4444 -b chrome visit https://example.com
    """
    config: Config = ctx.obj["config"]

    try:
        with open_driver(config) as driver:
            with driver:
                driver.go(target)
                current = driver.current_url()
                title = driver.title()
    except WebDriverError as e:
        report_error(e, ctx.obj["verbose"])

    table = Table(title="Navigation", border_style="blue")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Requested", target)
    table.add_row("Current URL", current.url)
    table.add_row("Title", title.title)
    console.print(table)


@cli.command()
@click.pass_context
def windows(ctx: click.Context):
    """Open a session and list its window handles and size."""
    config: Config = ctx.obj["config"]

    try:
        with open_driver(config) as driver:
            with driver:
                current = driver.window_handle()
                handles = driver.window_handles()
                size = driver.window_size()
    except WebDriverError as e:
        report_error(e, ctx.obj["verbose"])

    table = Table(title="Windows", border_style="blue")
    table.add_column("Handle", style="cyan")
    table.add_column("Current", style="green")
    for handle in handles.handles:
        table.add_row(handle, "*" if handle == current.handle else "")
    console.print(table)
    console.print(f"Window size: {size.width}x{size.height}")


@cli.command()
@click.pass_context
def info(ctx: click.Context):
    """Show client configuration."""
    config: Config = ctx.obj["config"]

    table = Table(title="Configuration", border_style="blue")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Remote End", config.driver.url)
    table.add_row("Browser", config.driver.browser_name)
    table.add_row("Request Timeout", f"{config.driver.request_timeout}s")
    table.add_row("Verify TLS", "Yes" if config.driver.verify_tls else "No")
    table.add_row("Log Level", config.log_level)
    console.print(table)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
