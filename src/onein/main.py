"""Main CLI entry point for the onein converter."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from onein.config import CONFIG_FILENAME
from onein.transformers.manager import convert

app = typer.Typer(
    name="onein",
    help="Convert OpenAPI specifications to the single-POST onein dialect",
)
console = Console()


@app.command()
def main(
    input_path: str = typer.Argument(
        ".",
        help="OpenAPI file (.yaml/.yml/.json) or a directory containing openapi.yaml",
    ),
    config_path: str = typer.Option(
        CONFIG_FILENAME,
        "--config",
        "-c",
        help="onein config file (relative to INPUT_PATH when it is a directory)",
    ),
    output_dir: str = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the .onein.json output (defaults to the current directory)",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result"),
) -> None:
    """Convert an OpenAPI specification to the onein dialect.

    This command will:
    1. Read the OpenAPI document and the onein config
    2. Prefix paths and flatten every operation to a POST
    3. Merge parameters into request bodies and wrap response bodies
    4. Write <name>.onein.json
    """
    target_path = Path(input_path)

    # Display header
    if not quiet:
        console.print()
        console.print("[bold blue]onein converter[/bold blue]")
        console.print(f"[dim]Input: {escape(str(target_path.resolve()))}[/dim]")
        console.print()

    try:
        output_file = convert(
            target_path,
            Path(config_path),
            output_dir=Path(output_dir) if output_dir else None,
            console=None if quiet else console,
        )
    except Exception as e:
        console.print(f"[bold red]✗[/bold red] Failed to convert spec: {escape(str(e))}")
        raise typer.Exit(1)

    console.print(
        f"[bold green]✓[/bold green] Converted specification written to: {escape(str(output_file))}"
    )


if __name__ == "__main__":
    app()
