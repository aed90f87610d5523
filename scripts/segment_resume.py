#!/usr/bin/env python3
"""
Resume Segmentation CLI

Command-line interface for segmenting an extracted resume text file into
summary, experience, education, skills and other, optionally saving the
resulting record as YAML.

Usage:
    # Print a section summary
    python segment_resume.py resume.txt

    # Save the record as YAML
    python segment_resume.py resume.txt --output outs/records/resume.yaml

    # Also print the full record
    python segment_resume.py resume.txt --verbose
"""

from pathlib import Path
from typing import Optional

import typer
from omegaconf import OmegaConf
from typing_extensions import Annotated

from vitae.contexts.segmenting import segment_file

app = typer.Typer(
    help="Segment extracted resume text into structured sections",
    add_completion=False,
)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Plain-text resume file (UTF-8)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the segmented record to this .yaml file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Directory for this run's log (defaults to LOGS_PATH/segment_<timestamp>)",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print the full record as YAML"),
    ] = False,
):
    """
    Segment a resume text file and report what was found.

    Examples:

        $ python scripts/segment_resume.py resume.txt

        $ python scripts/segment_resume.py resume.txt -o outs/records/resume.yaml -v
    """
    result = segment_file(input_file, output_path=output, log_dir=log_dir)

    if not result.success:
        typer.secho(f"✗ {result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    record = result.record
    typer.echo(f"✓ Segmented {input_file.name} ({result.time_s:.2f}s)")
    typer.echo(f"  Summary:    {len(record.summary.split())} words")
    typer.echo(f"  Experience: {len(record.experience)} entries")
    typer.echo(f"  Education:  {len(record.education)} entries")
    typer.echo(f"  Skills:     {len(record.skills)}")
    typer.echo(f"  Other:      {len(record.other.split())} words")

    if result.output_path:
        typer.echo(f"  Output:     {result.output_path}")

    if verbose:
        typer.echo()
        typer.echo(OmegaConf.to_yaml(OmegaConf.create(record.to_dict())))


if __name__ == "__main__":
    app()
