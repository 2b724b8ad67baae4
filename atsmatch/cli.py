"""
Resume Scoring CLI

Scores a resume file against a job description file and prints a report.

Commands:
    analyze    - Score a resume against a job description
    vocabulary - List the fixed skill and keyword vocabularies

Examples:\n

    atsmatch analyze resume.txt job.txt                     # Text report

    atsmatch analyze resume.pdf job.md --json               # JSON output

    atsmatch analyze resume.txt job.txt --config score.yaml # Custom weights

    atsmatch vocabulary --category soft                     # One vocabulary
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from atsmatch.contexts.intake import IntakeError, read_text_file, text_statistics
from atsmatch.contexts.reporting import format_analysis_report
from atsmatch.contexts.scoring import ScoringConfigError, analyze_resume, load_scoring_config
from atsmatch.contexts.scoring.logger import log_empty_input, log_inputs, setup_scoring_logger
from atsmatch.contexts.scoring.vocabulary import VOCABULARIES
from atsmatch.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("ATSMATCH_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score resumes against job descriptions with keyword and heuristic matching",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("analyze")
def analyze_command(
    resume_path: Annotated[Path, typer.Argument(help="Resume file (.txt, .md or .pdf)")],
    job_path: Annotated[Path, typer.Argument(help="Job description file (.txt, .md or .pdf)")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Scoring config YAML (default: SCORING_CONFIG_PATH)"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Session log directory (default: timestamped under ATSMATCH_LOGS_PATH)"),
    ] = None,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log to file, not the console")
    ] = False,
):
    """Score a resume against a job description."""
    if log_dir is None:
        log_dir = LOGS_PATH / f"score_{now()}"
    setup_scoring_logger(log_dir, console=not quiet)
    log_inputs(resume_path, job_path, config_path)

    try:
        config = load_scoring_config(config_path)
        resume_text = read_text_file(resume_path)
        job_description = read_text_file(job_path)
    except (IntakeError, ScoringConfigError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    for label, path, text in (
        ("Resume", resume_path, resume_text),
        ("Job description", job_path, job_description),
    ):
        if not text:
            log_empty_input(label, path)
            typer.secho(f"ERROR: {label} is empty: {path}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    result = analyze_resume(resume_text, job_description, config)

    if as_json:
        typer.echo(result.to_json())
    else:
        typer.echo(
            format_analysis_report(
                result,
                resume_stats=text_statistics(resume_text),
                job_stats=text_statistics(job_description),
            )
        )


@app.command("vocabulary")
def vocabulary_command(
    category: Annotated[
        Optional[str],
        typer.Option("--category", help=f"One of: {', '.join(VOCABULARIES)}"),
    ] = None,
):
    """List the fixed vocabularies used for matching."""
    if category is not None and category not in VOCABULARIES:
        typer.secho(
            f"ERROR: Unknown category '{category}'. Available: {', '.join(VOCABULARIES)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    selected = {category: VOCABULARIES[category]} if category else VOCABULARIES
    for name, terms in selected.items():
        typer.echo(f"=== {name} ({len(terms)}) ===")
        for term in terms:
            typer.echo(f"  {term}")


if __name__ == "__main__":
    app()
