"""CLI commands: channels, models, lookup -- read the capability tables."""

from __future__ import annotations

import json
import sys

import click

from gateway_registry.catalog import list_channels, lookup_by_id, models_for_channel
from gateway_registry.catalog.types import ModelDescriptor, ThinkingBudget, ThinkingLevels


def _reasoning_label(model: ModelDescriptor) -> str:
    r = model.reasoning
    if isinstance(r, ThinkingBudget):
        return f"budget {r.min}-{r.max}"
    if isinstance(r, ThinkingLevels):
        return "levels " + "/".join(r.levels)
    return "-"


def _limit(value: int | None) -> str:
    return str(value) if value is not None else "-"


@click.command()
def channels() -> None:
    """List the known channel keys."""
    for name in list_channels():
        click.echo(name)


@click.command()
@click.argument("channel")
@click.option("--json", "as_json", is_flag=True, help="Output in JSON format.")
def models(channel: str, as_json: bool) -> None:
    """List the models served by CHANNEL."""
    found = models_for_channel(channel)
    if as_json:
        click.echo(json.dumps([m.to_dict() for m in found], indent=2))
        return

    if not found:
        click.echo(f"No models for channel {channel!r}", err=True)
        sys.exit(1)

    for m in found:
        click.echo(
            f"{m.id:<40} ctx={_limit(m.context_length):<8} "
            f"out={_limit(m.max_completion_tokens):<7} {_reasoning_label(m)}"
        )


@click.command()
@click.argument("model_id")
@click.option("--json", "as_json", is_flag=True, help="Output in JSON format.")
def lookup(model_id: str, as_json: bool) -> None:
    """Find MODEL_ID across all channels (first match in priority order)."""
    model = lookup_by_id(model_id)
    if model is None:
        if as_json:
            click.echo(json.dumps({"error": f"model not found: {model_id}"}))
        else:
            click.echo(f"Model not found: {model_id}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(model.to_dict(), indent=2))
        return

    click.echo(f"ID:          {model.id}")
    click.echo(f"Channel:     {model.channel}")
    click.echo(f"Owned by:    {model.owned_by}")
    if model.display_name:
        click.echo(f"Name:        {model.display_name}")
    click.echo(f"Context:     {_limit(model.context_length)}")
    click.echo(f"Max output:  {_limit(model.max_completion_tokens)}")
    if model.supported_endpoints:
        click.echo(f"Endpoints:   {', '.join(sorted(model.supported_endpoints))}")
    click.echo(f"Reasoning:   {_reasoning_label(model)}")
