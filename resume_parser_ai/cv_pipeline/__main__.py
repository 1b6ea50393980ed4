"""Command-line runner: parse a resume file and print the profile as JSON.

Use (from resume_parser_ai/): python -m cv_pipeline path/to/cv.pdf
"""

import mimetypes
from pathlib import Path
from typing import Annotated, Optional

import typer

from cv_pipeline.cv_parser import parse_resume
from cv_pipeline.errors import ResumeParseError

app = typer.Typer(
    name="resume-parser",
    help="Parse a resume (PDF, DOCX, ODT, TXT, MD, RTF) into a structured candidate profile.",
    no_args_is_help=True,
    add_completion=False,
)


@app.command()
def parse(
    path: Annotated[
        Path,
        typer.Argument(help="Resume file to parse", exists=True, dir_okay=False, readable=True),
    ],
    mime: Annotated[
        Optional[str],
        typer.Option("--mime", "-m", help="Declared MIME type (guessed from the file name if omitted)"),
    ] = None,
) -> None:
    """Parse PATH and print the result as JSON."""
    mime_type = mime or mimetypes.guess_type(path.name)[0] or ""
    try:
        result = parse_resume(path.read_bytes(), mime_type, path.name)
    except ResumeParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(result.model_dump_json(by_alias=True, indent=2))


if __name__ == "__main__":
    app()
