"""Main CLI entry point for flowsafe."""

import json
import logging
from typing import IO, Any

import click
from rich.console import Console
from rich.logging import RichHandler

from flowsafe.config.manager import ConfigManager
from flowsafe.errors import FlowsafeError
from flowsafe.normalize.diagnostics import describe_input, describe_properties
from flowsafe.normalize.inputs import StaticSource
from flowsafe.normalize.lookup import safe_get
from flowsafe.normalize.values import ensure_array
from flowsafe.output.formatter import get_formatter
from flowsafe.processing.items import ItemProcessor
from flowsafe.routing.complexity import ComplexityClassifier


def _configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = ConfigManager.get_config().global_.log_level
        except FlowsafeError:
            level = "WARNING"

    root = logging.getLogger("flowsafe")
    root.handlers.clear()
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(level)


def _get_config():
    """Load configuration, exiting with an error message when it is unreadable."""
    try:
        return ConfigManager.get_config()
    except FlowsafeError as e:
        get_formatter().print_error(str(e))
        raise SystemExit(1) from e


def _load_json(source: IO[str]) -> Any:
    """Read a JSON document from an open file, exiting on invalid input."""
    try:
        return json.load(source)
    except ValueError as e:
        get_formatter().print_error(f"Invalid JSON input: {e}")
        raise SystemExit(1) from e


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, default=str))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--no-color", is_flag=True, help="Disable colors")
@click.version_option(package_name="flowsafe")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, no_color: bool) -> None:
    """Flowsafe - defensive helpers for workflow code steps.

    \b
    Examples:
        flowsafe normalize '[1, 2, 3]'             # -> [1, 2, 3]
        flowsafe get record.json data.items --array
        flowsafe classify task.json                # premium or standard
        flowsafe process items.json                # fault-isolated loop
        flowsafe inspect items.json                # input diagnostics
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    get_formatter(color=not no_color, verbose=verbose)
    _configure_logging(verbose)


@cli.command()
@click.argument("value")
def normalize(value: str) -> None:
    """Print VALUE coerced into a JSON array."""
    _echo_json(list(ensure_array(value)))


@cli.command("get")
@click.argument("source", type=click.File("r"))
@click.argument("path")
@click.option("-d", "--default", "default_json", default="null", help="Default value as JSON")
@click.option("-a", "--array", "as_array", is_flag=True, help="Coerce the result into an array")
def get_path(source: IO[str], path: str, default_json: str, as_array: bool) -> None:
    """Look up a dotted PATH in the JSON record read from SOURCE."""
    record = _load_json(source)
    try:
        default = json.loads(default_json)
    except ValueError:
        default = default_json

    value = safe_get(record, path, default)
    _echo_json(list(ensure_array(value)) if as_array else value)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("-t", "--threshold", type=click.IntRange(min=0), help="Premium tier threshold")
@click.option("--json", "output_json", is_flag=True, help="JSON output")
def classify(source: IO[str], threshold: int | None, output_json: bool) -> None:
    """Classify task descriptor(s) read from SOURCE (default: stdin).

    SOURCE holds one descriptor object or an array of them.
    """
    config = _get_config().classifier
    if threshold is not None:
        config = config.model_copy(update={"threshold": threshold})

    classifier = ComplexityClassifier(config)
    payload = _load_json(source)
    classifications = classifier.classify_many(payload)

    if output_json:
        _echo_json(
            [
                {**c.to_dict(), "model": classifier.model_for(c)}
                for c in classifications
            ]
        )
        return

    formatter = get_formatter()
    if not classifications:
        formatter.print_warning("No task descriptors found")
        return

    for index, classification in enumerate(classifications, start=1):
        title = "Task Classification" if len(classifications) == 1 else f"Task {index}"
        formatter.print_classification(
            classification, model=classifier.model_for(classification), title=title
        )


@cli.command()
@click.argument("source", type=click.File("r"))
def process(source: IO[str]) -> None:
    """Run the fault-isolating item loop over the JSON items in SOURCE."""
    config = _get_config()
    items = _load_json(source)

    processor = ItemProcessor(config=config.processing)
    _echo_json(processor.run(StaticSource(items)))


@cli.command("inspect")
@click.argument("source", type=click.File("r"))
@click.option("--json", "output_json", is_flag=True, help="JSON output")
def inspect_items(source: IO[str], output_json: bool) -> None:
    """Describe the shape of the JSON items in SOURCE."""
    report = describe_input(StaticSource(_load_json(source)))
    first_payload = safe_get(report.first_item, "json", report.first_item)
    properties = describe_properties(first_payload)

    if output_json:
        _echo_json(
            {
                **report.to_dict(),
                "properties": [p.to_dict() for p in properties],
            }
        )
        return

    get_formatter().print_input_report(report, properties)


# --- Subcommands ---


@cli.group()
def config() -> None:
    """Manage configuration."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    config = _get_config()
    get_formatter().print_json(config.model_dump(by_alias=True))


@config.command("get")
@click.argument("key")
def config_get(key: str) -> None:
    """Show a single configuration value by dotted KEY."""
    _get_config()
    value = ConfigManager.get_value(key)
    if value is None:
        get_formatter().print_error(f"Unknown config key: {key}")
        raise SystemExit(1)
    _echo_json(value)


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set a configuration value (VALUE is parsed as JSON when possible)."""
    from pydantic import ValidationError

    _get_config()
    try:
        parsed = json.loads(value)
    except ValueError:
        parsed = value

    try:
        ConfigManager.set_value(key, parsed)
    except ValidationError as e:
        get_formatter().print_error(f"Invalid value for {key}: {e.errors()[0]['msg']}")
        raise SystemExit(1) from e
    except FlowsafeError as e:
        get_formatter().print_error(str(e))
        raise SystemExit(1) from e

    get_formatter().print_success(f"Set {key} = {json.dumps(parsed)}")


if __name__ == "__main__":
    cli()
