from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace as dc_replace
from pathlib import Path

import typer
import yaml

from .annotation import annotate_segments
from .config import FluffAnalyzerConfig, load_config
from .pipeline import analyze as analyze_text
from .rewriting import rewrite as rewrite_text

app = typer.Typer(help="Fluff Analyzer CLI.", no_args_is_help=True)

# Output renderings the analyze command can print.
OUTPUT_FORMATS = ("json", "html", "markers", "segments")


@app.command()
def analyze(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Text file to analyze (reads stdin when omitted).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output rendering: json, html, markers or segments.",
    ),
    merge_touching: bool | None = typer.Option(
        None,
        "--merge-touching/--no-merge-touching",
        help="Override whether touching highlight spans are merged.",
    ),
    normalize_whitespace: bool | None = typer.Option(
        None,
        "--normalize-whitespace/--keep-whitespace",
        help="Override whitespace normalization before analysis.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Analyze text for fluff and print the report."""
    _configure_logging(verbose)
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            f"Unknown format '{output_format}'. Choose from: {', '.join(OUTPUT_FORMATS)}.",
            param_hint="--format",
        )
    cfg = _load_cli_config(config)
    cfg = _apply_overrides(cfg, merge_touching, normalize_whitespace)
    text = _read_input(input_path)
    report = analyze_text(text, cfg)

    if output_format == "html":
        typer.echo(report.annotated_html)
    elif output_format == "markers":
        typer.echo(report.annotated_text)
    elif output_format == "segments":
        segments = [
            {
                "text": segment.text,
                "start": segment.start,
                "end": segment.end,
                "highlighted": segment.highlighted,
            }
            for segment in annotate_segments(report.text, report.merged_spans)
        ]
        typer.echo(json.dumps({"segments": segments}, indent=2, ensure_ascii=False))
    else:
        typer.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))


@app.command()
def rewrite(
    input_path: Path | None = typer.Option(
        None,
        "--input-path",
        "-i",
        exists=True,
        readable=True,
        dir_okay=False,
        file_okay=True,
        help="Text file to rewrite (reads stdin when omitted).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    """Print a "safe cuts" preview with common filler removed."""
    _configure_logging(verbose)
    cfg = _load_cli_config(config)
    text = _read_input(input_path)
    typer.echo(rewrite_text(text, cfg.lexicon))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = FluffAnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_cli_config(path: Path | None) -> FluffAnalyzerConfig:
    """Load the YAML config, surfacing shape errors as CLI parameter errors."""
    try:
        return load_config(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_overrides(
    config: FluffAnalyzerConfig,
    merge_touching: bool | None,
    normalize_whitespace: bool | None,
) -> FluffAnalyzerConfig:
    """Apply CLI overrides to config fields when provided."""
    if merge_touching is not None:
        config = dc_replace(config, merge_touching=merge_touching)
    if normalize_whitespace is not None:
        config = dc_replace(config, normalize_whitespace=normalize_whitespace)
    return config


def _read_input(input_path: Path | None) -> str:
    """Read the input file (or stdin) and reject blank text."""
    if input_path is None:
        text = sys.stdin.read()
    else:
        try:
            text = input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise typer.BadParameter(
                f"{input_path} is not UTF-8 text.", param_hint="--input-path"
            ) from exc
    if not text.strip():
        typer.echo("Input text is empty; nothing to analyze.", err=True)
        raise typer.Exit(code=1)
    return text


if __name__ == "__main__":
    main()
