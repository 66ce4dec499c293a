from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from .config import ComparatorConfig, load_config
from .models import ComparisonResult
from .pipeline import (
    ComparisonError,
    compare_files,
    compare_updated,
    replace_targets,
    resolve_targets,
)
from .reporting import (
    REPORT_FILENAME,
    UPDATED_REPORT_FILENAME,
    render_advanced_analysis,
    render_common_words_table,
    render_comparison_table,
    render_detailed_report,
    render_replacement_summary,
    render_updated_report,
    replacement_verification,
    separator,
    write_report,
    write_visualizations,
)

app = typer.Typer(help="Text Comparator CLI.", no_args_is_help=True)

REPLACEMENT_MENU = (
    "\nREPLACEMENT OPTIONS:\n"
    "1. Replace word in both documents\n"
    "2. Replace word in first document only ({first})\n"
    "3. Replace word in second document only ({second})"
)


@app.command()
def compare(
    file_a: Path = typer.Argument(..., help="First document."),
    file_b: Path = typer.Argument(..., help="Second document."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    readability: bool | None = typer.Option(
        None,
        "--readability/--no-readability",
        help="Override config include_readability flag.",
    ),
    visualize: bool | None = typer.Option(
        None,
        "--visualize/--no-visualize",
        help="Override config include_visualization flag.",
    ),
    top_words: int | None = typer.Option(
        None, "--top-words", min=0, help="Number of top frequent words to list."
    ),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", file_okay=False, help="Where reports are written."
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Offer word replacement rounds after the analysis.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Compare two documents, print the results and write the reports."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(cfg, readability, visualize, top_words, output_dir)

    typer.echo("Processing documents...")
    comparison = _compare_or_exit(file_a, file_b, cfg)

    typer.echo(render_comparison_table(comparison, cfg))
    typer.echo(render_common_words_table(comparison, cfg))
    if cfg.include_readability:
        typer.echo(render_advanced_analysis(comparison))

    report_root = _report_root(cfg)
    if cfg.include_visualization:
        written = write_visualizations(comparison, report_root, cfg)
        if written:
            typer.echo("Visualization files generated:")
            for path in written:
                typer.echo(f"- {path}")

    report_path = report_root / REPORT_FILENAME
    if write_report(report_path, render_detailed_report(comparison, cfg)):
        typer.echo(f"Analysis complete! Detailed report saved to '{report_path}'")
    else:
        typer.echo(f"Error: Cannot create {report_path}", err=True)

    if interactive:
        _replacement_loop(file_a, file_b, cfg)


@app.command()
def replace(
    file_a: Path = typer.Argument(..., help="First document."),
    file_b: Path = typer.Argument(..., help="Second document."),
    word: str = typer.Option(..., "--word", "-w", help="Word to replace."),
    replacement: str = typer.Option(
        ..., "--replacement", "-r", help="Replacement word, inserted verbatim."
    ),
    target: str = typer.Option(
        "both", "--target", "-t", help="Documents to update: both, first or second."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", file_okay=False, help="Where outputs are written."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Replace a whole word in one or both documents and re-run the comparison."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(cfg, None, None, None, output_dir)
    try:
        resolve_targets(target, file_a, file_b)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--target") from exc
    if not _run_replacement(file_a, file_b, target, word, replacement, cfg):
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ComparatorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
        )


def _apply_overrides(
    config: ComparatorConfig,
    readability: bool | None,
    visualize: bool | None,
    top_words: int | None,
    output_dir: Path | None,
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if readability is not None:
        config.include_readability = readability
    if visualize is not None:
        config.include_visualization = visualize
    if top_words is not None:
        config.top_word_count = top_words
    if output_dir is not None:
        config.output_dir = str(output_dir)


def _report_root(config: ComparatorConfig) -> Path:
    return Path(config.output_dir) if config.output_dir else Path(".")


def _compare_or_exit(
    file_a: Path, file_b: Path, config: ComparatorConfig
) -> ComparisonResult:
    try:
        return compare_files(file_a, file_b, config)
    except ComparisonError as exc:
        typer.echo(f"Error: Could not process one or both documents. {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _replacement_loop(file_a: Path, file_b: Path, config: ComparatorConfig) -> None:
    """Prompt for replacement rounds until the user declines another one."""
    typer.echo("\nWORD REPLACEMENT FEATURE")
    typer.echo(separator("-", 40))
    if not typer.confirm(
        "Would you like to replace any word in the documents?", default=False
    ):
        typer.echo("No word replacement requested.")
        return

    while True:
        typer.echo(REPLACEMENT_MENU.format(first=file_a, second=file_b))
        option = typer.prompt("Select option (1/2/3)")
        try:
            resolve_targets(option, file_a, file_b)
        except ValueError:
            typer.echo("Invalid option selected.", err=True)
            return
        old_word = typer.prompt("Enter the word you want to replace")
        new_word = typer.prompt("Enter the replacement word")
        _run_replacement(file_a, file_b, option, old_word, new_word, config)
        if not typer.confirm("Would you like to replace another word?", default=False):
            return


def _run_replacement(
    file_a: Path,
    file_b: Path,
    target: str,
    old_word: str,
    new_word: str,
    config: ComparatorConfig,
) -> bool:
    """Run one replacement round and report it.

    Returns True only when a file changed and the updated pair was compared.
    """
    try:
        outcomes = replace_targets(
            file_a, file_b, target, old_word, new_word, config.output_dir
        )
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        return False

    typer.echo(render_replacement_summary(outcomes, old_word, new_word))
    try:
        comparison = compare_updated(file_a, file_b, outcomes, config)
    except ComparisonError as exc:
        typer.echo(
            f"Error: Could not process one or both updated documents. {exc}", err=True
        )
        return False
    if comparison is None:
        typer.echo("No documents were updated.")
        return False

    report_path = _report_root(config) / UPDATED_REPORT_FILENAME
    report = render_updated_report(comparison, old_word, new_word, config)
    if write_report(report_path, report):
        typer.echo(f"Updated analysis report generated: {report_path}")
    else:
        typer.echo(f"Error: Cannot create {report_path}", err=True)

    typer.echo("\nUPDATED COMPARISON SUMMARY:")
    typer.echo(separator("-", 40))
    typer.echo(f"Document A Word Count: {comparison.doc_a.word_count}")
    typer.echo(f"Document B Word Count: {comparison.doc_b.word_count}")
    typer.echo(f"Updated Similarity: {comparison.similarity:.2f}%")
    typer.echo(f"Common Words: {len(comparison.common_words)}")
    for line in replacement_verification(comparison, new_word):
        typer.echo(line)
    return True


if __name__ == "__main__":
    main()
