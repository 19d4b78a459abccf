import typer
from pathlib import Path
import logging

from .errors import NormError
from .pipeline import generate_file

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

app = typer.Typer()


@app.command()
def main(
    norm_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the annotated .norm.sql input file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging.",
    ),
):
    """Generates a Python data-access module from an annotated SQL file."""
    # Force=True is needed because basicConfig was already called at module level
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s", force=True)

    logging.info(f"Reading norm file: {norm_file}")

    try:
        output_path = generate_file(norm_file)
    except NormError as e:
        logging.error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        logging.error(f"I/O error: {e}")
        raise typer.Exit(code=1)

    logging.info(f"Successfully generated Python code to {output_path}")


if __name__ == "__main__":
    app()
