"""Command-line interface: batch scan of a document folder and single-pair comparison."""
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from docsim.core.config import get_settings
from docsim.core.errors import BaseApplicationError
from docsim.core.logging import configure_logging
from docsim.services.detection_pipeline import DetectionPipeline
from docsim.services.report import write_report
from docsim.tools.readers import TextParser, load_corpus

app = typer.Typer(
    name="docsim",
    help="Pairwise substring similarity over a folder of text documents",
    add_completion=False,
)
console = Console()


def _fail(error: BaseApplicationError) -> NoReturn:
    console.print(f"[red]Error:[/red] {escape(error.message)}")
    if error.details:
        console.print(f"[dim]{escape(str(error.details))}[/dim]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override DOCSIM_LOG_LEVEL"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit JSON log lines"),
) -> None:
    settings = get_settings()
    configure_logging(
        log_level or settings.log_level,
        json_logs=json_logs or settings.json_logs,
        log_file=settings.log_file,
    )


@app.command()
def scan(
    folder: Optional[Path] = typer.Argument(None, help="Folder of documents (default: DOCSIM_DATASET_DIR)"),
    min_length: Optional[int] = typer.Option(None, "--min-length", "-m", help="Minimum common substring length"),
    top_k: Optional[int] = typer.Option(None, "--top-k", "-k", help="Number of pairs to report"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="HTML report path"),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Worker threads for the matrix"),
) -> None:
    """Compare every pair of documents in FOLDER and write an HTML report of the most similar ones."""
    settings = get_settings()
    folder = folder or Path(settings.dataset_dir)
    output = output or Path(settings.report_path)

    try:
        corpus = load_corpus(folder)
        result = DetectionPipeline(settings).run(
            corpus.documents,
            min_length=min_length,
            top_k=top_k,
            max_workers=workers,
        )
        path = write_report(result, output, corpus.names)
    except BaseApplicationError as e:
        _fail(e)

    table = Table(title=f"Top {len(result.entries)} of {len(result.ranked_pairs)} pairs")
    table.add_column("#", justify="right")
    table.add_column("Left")
    table.add_column("Right")
    table.add_column("Similarity", justify="right")
    table.add_column("Edit distance", justify="right")
    table.add_column("Containment", justify="right")
    for entry in result.entries:
        table.add_row(
            str(entry.rank),
            corpus.name_of(entry.pair.left),
            corpus.name_of(entry.pair.right),
            f"{entry.similarity:.2f}",
            str(entry.edit_distance),
            f"{entry.containment:.2f}",
        )
    console.print(table)
    console.print(f"HTML report written: {path}")


@app.command()
def compare(
    file_a: Path = typer.Argument(..., help="First document"),
    file_b: Path = typer.Argument(..., help="Second document"),
    min_length: Optional[int] = typer.Option(None, "--min-length", "-m", help="Minimum common substring length"),
) -> None:
    """Print the similarity, edit distance and containment of two files."""
    parser = TextParser()
    try:
        entry = DetectionPipeline().compare(parser.parse(file_a), parser.parse(file_b), min_length)
    except BaseApplicationError as e:
        _fail(e)

    console.print(f"Similarity:         {entry.similarity:.2f}")
    console.print(f"Edit distance:      {entry.edit_distance}")
    console.print(f"Broder containment: {entry.containment:.2f}")


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", envvar="HOST"),
    port: int = typer.Option(8000, "--port", envvar="PORT"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    console.print(f"Server: http://{host}:{port}  (docs at /docs)")
    uvicorn.run("docsim.main:app", host=host, port=port, reload=reload, log_level="info")


if __name__ == "__main__":
    app()
