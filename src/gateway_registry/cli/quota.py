"""CLI command: gateway-registry quota -- fetch and print account usage."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from gateway_registry.config import GatewayConfig
from gateway_registry.errors import GatewayError
from gateway_registry.quota.resolver import QuotaResolver
from gateway_registry.quota.store import (
    AuthDirCredentialStore,
    CredentialRecord,
    CredentialStore,
    InMemoryCredentialStore,
)
from gateway_registry.quota.types import QuotaCategory, UsageSnapshot

DEFAULT_AUTH_DIR = "~/.cli-proxy-api"
PROVIDERS = ("github-copilot", "kiro", "amazonq")

_CATEGORY_TITLES = {
    "premium_interactions": "Premium Interactions (Models)",
    "chat": "Standard Chat",
    "completions": "Code Completions",
}


def build_resolver(store: CredentialStore, config: GatewayConfig) -> QuotaResolver:
    """Create the resolver used by the command."""
    return QuotaResolver.with_default_adapters(store, config)


def _print_category(cat: QuotaCategory) -> None:
    title = _CATEGORY_TITLES.get(cat.name, cat.name.replace("_", " ").title())
    click.echo(f"{title}{' (Unlimited)' if cat.unlimited else ''}:")
    if cat.limit > 0:
        click.echo(f"  Used:  {cat.used:.0f} / {cat.limit:.0f}")
        pct_used = cat.used / cat.limit * 100
        if cat.percent_remaining is not None:
            click.echo(f"  Stats: {pct_used:.1f}% used, {cat.percent_remaining:.1f}% remaining")
        else:
            click.echo(f"  Stats: {pct_used:.1f}% used")
    elif cat.remaining is not None:
        click.echo(f"  Remaining: {cat.remaining:.0f}")
    click.echo("-" * 50)


def _print_report(account: str, snapshot: UsageSnapshot) -> None:
    click.echo("=" * 50)
    click.echo(f" USAGE REPORT: {account} ({snapshot.provider})")
    click.echo("=" * 50)
    click.echo(f"Plan:        {snapshot.plan_label or '-'}")
    click.echo(f"Usage:       {snapshot.current_usage:g} / {snapshot.usage_limit:g}")
    reset = snapshot.reset_at.isoformat() if snapshot.reset_at else "-"
    click.echo(f"Reset Date:  {reset}")
    click.echo("-" * 50)
    for cat in snapshot.categories:
        _print_category(cat)


def _fail(message: str, as_json: bool, error: GatewayError | None = None) -> None:
    if as_json:
        payload: dict[str, Any] = error.to_dict() if error is not None else {}
        payload["error"] = message
        click.echo(json.dumps(payload))
    else:
        click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.command()
@click.argument("auth_id", required=False)
@click.option(
    "--auth-dir",
    envvar="GATEWAY_AUTH_DIR",
    default=DEFAULT_AUTH_DIR,
    show_default=True,
    help="Directory of JSON auth files.",
)
@click.option(
    "--file",
    "auth_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Auth file to read instead of looking one up in --auth-dir.",
)
@click.option("--token", default=None, help="Access token to use instead of an auth file.")
@click.option(
    "--provider",
    type=click.Choice(PROVIDERS),
    default="github-copilot",
    show_default=True,
    help="Provider type for --token or for auto-detecting an auth file.",
)
@click.option("--profile-arn", default=None, help="Kiro profile ARN to send with --token.")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds.")
@click.option("--json", "as_json", is_flag=True, help="Output in JSON format.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def quota(
    auth_id: str | None,
    auth_dir: str,
    auth_file: Path | None,
    token: str | None,
    provider: str,
    profile_arn: str | None,
    timeout: float | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Fetch the usage snapshot for AUTH_ID (an auth file name).

    Without AUTH_ID, --file or --token, the first auth file of --provider's
    type in --auth-dir is used.
    """
    if auth_file is not None and auth_id:
        raise click.UsageError("pass either AUTH_ID or --file, not both")
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = GatewayConfig.from_env()
    if timeout is not None:
        config = dataclasses.replace(config, request_timeout=timeout)

    store: CredentialStore
    if token:
        metadata = {"access_token": token}
        if profile_arn:
            metadata["profile_arn"] = profile_arn
        account = auth_id or "cli"
        store = InMemoryCredentialStore(
            [CredentialRecord(id=account, provider=provider, metadata=metadata)]
        )
    elif auth_file is not None:
        store = AuthDirCredentialStore(auth_file.parent)
        account = auth_file.name
    else:
        dir_store = AuthDirCredentialStore(auth_dir)
        store = dir_store
        if auth_id:
            account = auth_id
        else:
            found = dir_store.find_first(provider)
            if found is None:
                _fail(
                    f"No token found. No {provider} auth file in {dir_store.directory}; "
                    "pass AUTH_ID, --auth-dir or --token.",
                    as_json,
                )
                return
            account = found.id
            if not as_json:
                click.echo(f"Auto-detected auth file: {account}")

    resolver = build_resolver(store, config)
    try:
        snapshot = resolver.resolve_usage(account)
    except GatewayError as exc:
        _fail(f"failed to fetch usage: {exc}", as_json, exc)
        return
    finally:
        resolver.close()

    if as_json:
        click.echo(json.dumps(snapshot.to_dict(), indent=2))
    else:
        _print_report(account, snapshot)
