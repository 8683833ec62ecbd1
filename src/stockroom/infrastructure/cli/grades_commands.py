"""CLI commands for student result processing."""

from __future__ import annotations

from pathlib import Path

import click

from stockroom.application.grade_report import GradeReportHandler
from stockroom.domain.exceptions import DomainException
from stockroom.infrastructure.bootstrap import student_reader


@click.command("report")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", type=click.Path(dir_okay=False, path_type=Path))
def grades_report(input_path: Path, output_path: Path) -> None:
    """Read INPUT_PATH (id,name,score per line) and write a grade report."""
    handler = GradeReportHandler(read_students=student_reader())

    try:
        lines = handler.handle(input_path, output_path)
    except DomainException as exc:
        raise click.ClickException(f"[{exc.kind.value}] {exc}")

    click.echo(f"Report generated for {len(lines)} students: {output_path.resolve()}")
