import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import IO, Optional

import click
import yaml  # type: ignore
from attrs import asdict
from dotenv import load_dotenv

from licparse import registry
from licparse.json_utils import json_dumps
from licparse.loaders import (
    LicenseLoadError,
    file_collector,
    manifest_collector,
)
from licparse.render import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_WIDTH,
    render_entries,
)
from licparse.segmenter import iter_paragraphs
from licparse.xlsx import write_workbook

try:
    __version__ = version("licparse")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="LICPARSE_LOG_FILE",
)
@click.version_option(__version__, prog_name="licparse")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument(
    "files",
    nargs=-1,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--manifest",
    "manifests",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON or YAML manifest listing license entries.",
)
@click.option(
    "--package",
    "packages",
    multiple=True,
    help="Package covered by the license FILES (repeatable).",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx", "text"]),
    default="json",
    help="Output format.",
)
@click.option(
    "--width",
    type=click.IntRange(min=20),
    default=DEFAULT_WIDTH,
    envvar="LICPARSE_WIDTH",
    show_default=True,
    help="Line width of the text output.",
)
@click.option(
    "--indent-width",
    type=click.IntRange(min=0),
    default=DEFAULT_INDENT_WIDTH,
    envvar="LICPARSE_INDENT_WIDTH",
    show_default=True,
    help="Spaces per indentation level in the text output.",
)
def split(
    files: tuple[Path, ...],
    manifests: tuple[Path, ...] = (),
    packages: tuple[str, ...] = (),
    output_path: Optional[str] = None,
    output_format: str = "json",
    width: int = DEFAULT_WIDTH,
    indent_width: int = DEFAULT_INDENT_WIDTH,
) -> None:
    """Split license texts into paragraphs.

    Args:
        files: License text files sharing the ``--package`` names.
        manifests: Manifests describing further license entries.
        packages: Package names attached to the entries of ``files``.
        output_path: Optional file or directory path for the result. If a
            directory is provided, the file is named ``licenses`` with the
            extension of the chosen format.
        output_format: Format of the result.
        width: Line width used by the ``text`` format.
        indent_width: Spaces per indentation level in the ``text`` format.
    """

    if not files and not manifests:
        raise click.UsageError("Provide license FILES or --manifest.")

    # Register one collector per source and gather every entry in order.
    registry.reset()
    if files:
        registry.add_license(file_collector(files, packages))
    for manifest in manifests:
        registry.add_license(manifest_collector(manifest))

    try:
        entries = list(registry.licenses())
    except LicenseLoadError as exc:
        raise click.ClickException(str(exc)) from exc
    logging.debug(f"Collected {len(entries)} license entries")

    # Mapping from format names to file extensions.
    extensions = {
        "json": ".json",
        "yaml": ".yaml",
        "xlsx": ".xlsx",
        "text": ".txt",
    }

    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            final_path = final_path / f"licenses{extensions[output_format]}"

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")

        write_workbook([e.to_dict() for e in entries], final_path)
        return

    if output_format == "json":
        content = json_dumps([e.to_dict() for e in entries], pretty=True)
    elif output_format == "yaml":
        content = yaml.safe_dump(
            [e.to_dict() for e in entries],
            allow_unicode=True,
            sort_keys=False,
        )
    else:
        content = render_entries(entries, width, indent_width)

    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        click.echo(content)


@cli.command()
@click.argument(
    "source", type=click.File("r", encoding="utf-8"), default="-"
)
def paragraphs(source: IO[str]) -> None:
    """Print the paragraphs of a single license as JSON lines.

    Args:
        source: License file to read; ``-`` reads standard input.
    """

    for paragraph in iter_paragraphs(source.read()):
        click.echo(json_dumps(asdict(paragraph)))
