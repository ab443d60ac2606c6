#!/usr/bin/env python3
"""
Resume Compilation CLI

Compiles a structured resume (YAML or JSON) into LaTeX source, an HTML preview
and a single-page PDF, and validates generated PDFs.

Commands:
    compile  - Compile a resume file to .tex, .html and .pdf
    sample   - Compile the bundled sample resume
    validate - Structurally validate a generated PDF

Examples:\n

    compile_resume.py compile data/ada.yaml                   # Writes to outs/results/<date>/

    compile_resume.py compile data/ada.json -o build/         # Custom output directory

    compile_resume.py sample --verbose                        # Sample resume, debug logging

    compile_resume.py validate build/ada.pdf                  # Validate a PDF
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from quire.contexts.rendering import DocumentCompiler, LatestDocumentStore, RenderedDocument
from quire.contexts.rendering.logger import (
    _log_info,
    _log_success,
    log_validation_result,
    setup_rendering_logger,
)
from quire.contexts.rendering.pdf_encoder import decode_data_uri
from quire.contexts.rendering.validator import validate_pdf_bytes
from quire.contexts.templating.exceptions import ResumeValidationError
from quire.contexts.templating.html_generator import render_widget_page
from quire.contexts.templating.resume_data_structure import ResumeData
from quire.utils.timestamp import format_timestamp, now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
RESULTS_PATH = Path(os.getenv("RESULTS_PATH", "outs/results"))


app = typer.Typer(
    help="Compile structured resumes to LaTeX, HTML and PDF",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _write_outputs(document: RenderedDocument, stem: str, output_dir: Path) -> None:
    """Write .tex, .html (full page) and .pdf files for a compiled document."""
    output_dir.mkdir(parents=True, exist_ok=True)

    tex_path = output_dir / f"{stem}.tex"
    html_path = output_dir / f"{stem}.html"
    pdf_path = output_dir / f"{stem}.pdf"

    tex_path.write_text(document.latex_source, encoding="utf-8")
    html_path.write_text(render_widget_page(document), encoding="utf-8")
    pdf_path.write_bytes(decode_data_uri(document.pdf_data_uri))

    _log_info(f"LaTeX saved to: {tex_path}")
    _log_info(f"HTML saved to: {html_path}")
    _log_info(f"PDF saved to: {pdf_path}")


def _report(document: RenderedDocument) -> None:
    typer.echo(f"Generated at: {format_timestamp(document.generated_at)}")
    typer.echo(f"LaTeX length: {document.latex_length} characters")


@app.command("compile")
def compile_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume file (YAML or JSON)", exists=True, dir_okay=False),
    ],
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Output directory (default: RESULTS_PATH/<date>)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """
    Compile a resume file to .tex, .html and .pdf.

    Examples:\n

        $ compile_resume.py compile data/ada.yaml

        $ compile_resume.py compile data/ada.yaml --output-dir build/
    """
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", verbose=verbose)

    try:
        data = ResumeData.from_file(input_file)
    except ResumeValidationError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    compiler = DocumentCompiler(LatestDocumentStore())
    document = compiler.compile(data)

    _write_outputs(document, input_file.stem, output_dir or RESULTS_PATH / now()[:8])
    _log_success(f"Compiled {input_file.name}")
    _report(document)


@app.command("sample")
def sample_command(
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Output directory (default: RESULTS_PATH/<date>)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging on the console"),
    ] = False,
):
    """Compile the bundled sample resume."""
    setup_rendering_logger(LOGS_PATH / f"render_{now()}", verbose=verbose)

    store = LatestDocumentStore()
    DocumentCompiler(store).seed()
    document = store.require_latest()

    _write_outputs(document, "sample_resume", output_dir or RESULTS_PATH / now()[:8])
    _report(document)


@app.command("validate")
def validate_command(
    pdf_file: Annotated[
        Path,
        typer.Argument(help="PDF file to validate", exists=True, dir_okay=False),
    ],
):
    """Validate the structure of a generated PDF (offsets, lengths, readability)."""
    setup_rendering_logger(LOGS_PATH / f"validate_{now()}")

    result = validate_pdf_bytes(pdf_file.read_bytes())
    log_validation_result(pdf_file.name, result)

    if not result.is_valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
