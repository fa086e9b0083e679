#!/usr/bin/env python3
"""
Validate résumé segmentation for a document.

Usage:
    python scripts/validate_resume.py resume.pdf
    python scripts/validate_resume.py resume.txt --config parser.yaml
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from apptrack.contexts.intake import DocumentExtractionError, extract_text, parse_resume_text
from apptrack.utils.config import load_parser_config
from apptrack.utils.logger import setup_logger
from apptrack.utils.report_formatter import format_sections_report
from apptrack.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Validate résumé segmentation.")


@app.command()
def main(
    document: Path = typer.Argument(..., help="Résumé file (PDF or plain text)"),
    file_type: Optional[str] = typer.Option(
        None, "--file-type", help="MIME type or extension hint (e.g., application/pdf)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML parser config override"),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Directory for this session's log file"
    ),
):
    """Segment a résumé and display the detected sections."""
    # Debug detail goes to the log file; the console only shows warnings
    setup_logger(
        "validate",
        log_dir or LOGS_PATH / f"validate_{now()}",
        extra_provenance={"Document": document},
        console_level="WARNING",
    )

    try:
        parser_config = load_parser_config(config)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    try:
        text = extract_text(document, file_type=file_type)
    except DocumentExtractionError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    parsed = parse_resume_text(text, parser_config)

    typer.echo(f"Loading {document.name}")
    typer.echo(f"Normalized text: {len(parsed.normalized_text)} chars")
    typer.echo()
    typer.echo(format_sections_report(parsed))

    if not parsed.sections:
        typer.secho("\nNo sections detected", fg=typer.colors.YELLOW)
        return

    typer.secho("\n✓ Segmentation successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
