"""
Main CLI entry point for fson.

Provides the command-line interface using Click. Every command reads a
JSON or YAML file (chosen by suffix), applies one document operation and
prints or writes the result.
"""

import json as _json
import logging as _logging
import os as _os
import pathlib as _pathlib
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic

import fson
import fson.codecs as codecs
import fson.config as config
import fson.config.sources as config_sources
import fson.document as document

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_logger = _logging.getLogger(__name__)


def _configure_logging(verbose: bool, level: str) -> None:
    """Send library logs to stderr through rich."""
    import rich.console as _rich_console
    import rich.logging as _rich_logging

    handler = _rich_logging.RichHandler(
        console=_rich_console.Console(stderr=True),
        show_path=False,
    )
    _logging.basicConfig(
        level=_logging.DEBUG if verbose else getattr(_logging, level),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _settings(ctx: _click.Context) -> config.Settings:
    settings: config.Settings = ctx.obj["settings"]
    return settings


def _load(ctx: _click.Context, path: str) -> document.Document:
    """Load a document file, turning library errors into click errors."""
    delimiters = _settings(ctx).paths.delimiters
    try:
        return document.Document.load_file(path, delimiters=delimiters)
    except document.DecodeError as e:
        raise _click.ClickException(f"{path}: {e}") from None
    except OSError as e:
        raise _click.ClickException(f"cannot read {path}: {e.strerror or e}") from None


def _write(ctx: _click.Context, doc: document.Document, source: str, output: str | None) -> None:
    """Write doc back to source, to output, or to stdout when output is '-'."""
    out = _settings(ctx).output
    if output == "-":
        try:
            data = codecs.dumps(
                doc.to_dict(),
                codecs.format_for_path(source),
                indent=out.indent,
                sort_keys=out.sort_keys,
                ensure_ascii=out.ensure_ascii,
            )
        except document.EncodeError as e:
            raise _click.ClickException(str(e)) from None
        _click.echo(data.decode("utf-8").rstrip("\n"))
        return

    target = output or source
    try:
        doc.save_file(
            target,
            indent=out.indent,
            sort_keys=out.sort_keys,
            ensure_ascii=out.ensure_ascii,
        )
    except document.EncodeError as e:
        raise _click.ClickException(str(e)) from None
    except OSError as e:
        raise _click.ClickException(f"cannot write {target}: {e.strerror or e}") from None
    _logger.debug("wrote %s", target)


def _parse_value(text: str, as_string: bool) -> _typing.Any:
    """Parse a command line value as JSON, falling back to a plain string."""
    if as_string:
        return text
    try:
        return _json.loads(text)
    except _json.JSONDecodeError:
        return text


def _should_use_color(cli_flag: bool | None) -> bool:
    """Decide on color: CLI flag, then NO_COLOR, then TTY detection."""
    if cli_flag is not None:
        return cli_flag
    if _os.environ.get("NO_COLOR") is not None:
        return False
    return _sys.stdout.isatty()


def _print_highlighted(text: str, lexer: str, *, color: bool) -> None:
    """Print text, with rich syntax highlighting when color is on."""
    if not color:
        _click.echo(text)
        return

    import rich.console as _rich_console
    import rich.syntax as _rich_syntax

    console = _rich_console.Console()
    console.print(
        _rich_syntax.Syntax(text, lexer, theme="monokai", background_color="default")
    )


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(fson.__version__, "-v", "--version", prog_name="fson")
@_click.option("--verbose", is_flag=True, help="Enable debug logging on stderr")
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """fson - read and rewrite JSON/YAML documents by key path.

    Paths are written as a/b/c or a.b.c.

    Examples:
        fson get config.json server/port
        fson set config.json server.port 8080
        fson set config.json tags new --append
        fson delete config.json server/debug
        fson merge base.json override.json -o merged.json
    """
    try:
        settings = config.Settings()
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from None
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"invalid configuration:\n{e}") from None

    _configure_logging(verbose, settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command()
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.argument("path")
@_click.option("--raw", is_flag=True, help="Print string values without JSON quoting")
@_click.pass_context
def get(ctx: _click.Context, file: str, path: str, raw: bool) -> None:
    """Print the value at PATH in FILE."""
    doc = _load(ctx, file)
    try:
        value, found = doc.get(path)
    except document.InvalidPathError as e:
        raise _click.ClickException(str(e)) from None
    if not found:
        raise _click.ClickException(f"Path not found: {path}")

    if raw and isinstance(value, str):
        _click.echo(value)
        return
    out = _settings(ctx).output
    _click.echo(
        _json.dumps(
            value,
            indent=out.indent if isinstance(value, (dict, list)) else None,
            sort_keys=out.sort_keys,
            ensure_ascii=out.ensure_ascii,
        )
    )


@cli.command()
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.argument("path")
@_click.pass_context
def exists(ctx: _click.Context, file: str, path: str) -> None:
    """Exit with status 0 if PATH exists in FILE, 1 otherwise."""
    doc = _load(ctx, file)
    try:
        found = doc.exists(path)
    except document.InvalidPathError as e:
        raise _click.ClickException(str(e)) from None
    _click.echo("true" if found else "false")
    ctx.exit(0 if found else 1)


@cli.command(name="set")
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.argument("path")
@_click.argument("value")
@_click.option("--append", "-a", is_flag=True, help="Append to an existing value instead of replacing it")
@_click.option("--string", "-s", "as_string", is_flag=True, help="Store VALUE as a string, never parse it as JSON")
@_click.option("--output", "-o", type=str, default=None, help="Write here instead of FILE ('-' for stdout)")
@_click.option("--create", is_flag=True, help="Start from an empty document if FILE does not exist")
@_click.pass_context
def set_cmd(
    ctx: _click.Context,
    file: str,
    path: str,
    value: str,
    append: bool,
    as_string: bool,
    output: str | None,
    create: bool,
) -> None:
    """Set PATH in FILE to VALUE (parsed as JSON when possible)."""
    if create and not _pathlib.Path(file).exists():
        doc = document.Document(delimiters=_settings(ctx).paths.delimiters)
    else:
        doc = _load(ctx, file)

    try:
        doc.set(path, _parse_value(value, as_string), append=append)
    except document.FsonError as e:
        raise _click.ClickException(str(e)) from None
    _write(ctx, doc, file, output)


@cli.command()
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.argument("path")
@_click.option("--output", "-o", type=str, default=None, help="Write here instead of FILE ('-' for stdout)")
@_click.pass_context
def delete(ctx: _click.Context, file: str, path: str, output: str | None) -> None:
    """Remove PATH from FILE. Missing paths are ignored."""
    doc = _load(ctx, file)
    try:
        doc.delete(path)
    except document.InvalidPathError as e:
        raise _click.ClickException(str(e)) from None
    _write(ctx, doc, file, output)


@cli.command()
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.argument("others", nargs=-1, required=True, type=_click.Path(dir_okay=False))
@_click.option("--output", "-o", type=str, default=None, help="Write here instead of FILE ('-' for stdout)")
@_click.pass_context
def merge(ctx: _click.Context, file: str, others: tuple[str, ...], output: str | None) -> None:
    """Deep merge OTHERS into FILE, in order (later files win)."""
    doc = _load(ctx, file)
    for other in others:
        doc.merge(_load(ctx, other))
    _write(ctx, doc, file, output)


@cli.command()
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.option(
    "--format",
    "output_format",
    type=_click.Choice(["json", "yaml"]),
    default=None,
    help="Output format (default: output.format setting)",
)
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.pass_context
def show(ctx: _click.Context, file: str, output_format: str | None, use_color: bool | None) -> None:
    """Pretty-print FILE."""
    doc = _load(ctx, file)
    out = _settings(ctx).output
    fmt = output_format or out.format

    if fmt == "yaml":
        text = doc.to_bytes("yaml", indent=out.indent or None, sort_keys=out.sort_keys).decode("utf-8")
    else:
        text = doc.pretty(indent=out.indent)
    _print_highlighted(text.rstrip("\n"), fmt, color=_should_use_color(use_color))


@cli.group(name="config", invoke_without_command=True)
@_click.pass_context
def config_cmd(ctx: _click.Context) -> None:
    """Configuration commands.

    Without a subcommand, shows where configuration is read from.
    """
    if ctx.invoked_subcommand is None:
        _click.echo("fson Configuration:")
        _click.echo(f"  User config: {_settings(ctx).user_config_path}")
        _click.echo(f"  Project config: {config_sources.get_project_config_path(_pathlib.Path.cwd())}")
        _click.echo("\nRun 'fson config show' for effective settings.")


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool) -> None:
    """Show effective settings from all sources."""
    settings = _settings(ctx)
    data = settings.model_dump(mode="json")
    _click.echo(config_sources.dump_settings(data, "json" if as_json else "yaml").rstrip("\n"))
    for key in sorted(settings.collect_unknown_keys()):
        _click.echo(f"Warning: unknown config key '{key}'", err=True)


def main() -> None:
    """Entry point for the fson console script."""
    cli()
