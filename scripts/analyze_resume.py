#!/usr/bin/env python3
"""
Analyze a résumé: segment it and report skills, experience, education and
improvement suggestions.

Usage:
    # Text report
    python scripts/analyze_resume.py resume.pdf

    # JSON for another program
    python scripts/analyze_resume.py resume.txt --json

    # Pin the year used for "2019 - Present" ranges
    python scripts/analyze_resume.py resume.txt --current-year 2025
"""

import json
import os
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv
from loguru import logger

from apptrack.contexts.analysis import analyze
from apptrack.contexts.intake import DocumentExtractionError, extract_text, parse_resume_text
from apptrack.utils.config import load_parser_config
from apptrack.utils.logger import setup_logger
from apptrack.utils.report_formatter import format_analysis_report, format_sections_report
from apptrack.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
)


@app.command()
def main(
    document: Annotated[Path, typer.Argument(help="Résumé file (PDF or plain text)")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a text report")] = False,
    file_type: Annotated[
        Optional[str], typer.Option("--file-type", help="MIME type or extension hint")
    ] = None,
    config: Annotated[
        Optional[Path], typer.Option("--config", help="YAML parser config override", dir_okay=False)
    ] = None,
    current_year: Annotated[
        Optional[int], typer.Option("--current-year", help="Year used for open-ended date ranges")
    ] = None,
    log_dir: Annotated[
        Optional[Path], typer.Option("--log-dir", help="Directory for this session's log file")
    ] = None,
):
    """
    Analyze a résumé document.
    """
    log_dir = log_dir or LOGS_PATH / f"analyze_{now()}"
    log_file = setup_logger(
        "analyze",
        log_dir,
        extra_provenance={"Document": document},
        console_level="WARNING" if as_json else "INFO",
    )

    try:
        parser_config = load_parser_config(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid parser config: {e}")
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    try:
        text = extract_text(document, file_type=file_type)
    except DocumentExtractionError as e:
        logger.error(f"Extraction failed: {e.message}")
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    parsed = parse_resume_text(text, parser_config)
    result = analyze(parsed, parser_config, current_year=current_year)
    logger.info(f"Analyzed {document.name}: {len(parsed.sections)} sections, {len(result.skills)} skills")

    if as_json:
        payload = {"document": parsed.to_dict(), "analysis": result.to_dict()}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(format_sections_report(parsed))
    typer.echo()
    typer.echo(format_analysis_report(result))
    typer.echo(f"\nLog file: {log_file}")


if __name__ == "__main__":
    app()
