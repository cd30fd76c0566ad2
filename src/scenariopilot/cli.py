"""Command-line interface for ScenarioPilot."""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scenariopilot import (
    AnalysisReport,
    AnalysisRules,
    ConfigError,
    DetailLevel,
    DocumentLoadError,
    GenerationOptions,
    RequirementsAnalyzer,
    load_rules,
    to_json,
    to_markdown,
    to_markdown_files,
)
from scenariopilot.parsing import read_document

EXIT_OK = 0
EXIT_UNEXPECTED = 1
EXIT_INPUT_ERROR = 3
EXIT_VALIDATION_FAILED = 4


def _package_version() -> str:
    try:
        return version("scenariopilot")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scenariopilot",
        description="Turn requirement documents into features and BDD scenarios.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser("analyze", help="Analyze requirement documents")
    _add_common_arguments(analyze_parser)
    analyze_parser.add_argument(
        "--format",
        choices=["summary", "markdown", "json"],
        default="summary",
        help="Output format (default: summary)",
    )
    analyze_parser.add_argument("--output", "-o", help="Write the report to this file instead of stdout")
    analyze_parser.add_argument("--export-dir", help="Write the report, .feature files and scenario files here")
    analyze_parser.add_argument(
        "--detail-level",
        choices=[level.value for level in DetailLevel],
        default=DetailLevel.STANDARD.value,
    )
    analyze_parser.add_argument("--max-scenarios-per-flow", type=int, default=5)
    analyze_parser.add_argument("--no-edge-cases", action="store_true", help="Skip edge-case scenarios")
    analyze_parser.add_argument("--no-error-cases", action="store_true", help="Skip error-case scenarios")
    analyze_parser.add_argument("--no-integration", action="store_true", help="Skip integration scenarios")

    validate_parser = subparsers.add_parser("validate", help="Validate requirement documents")
    _add_common_arguments(validate_parser)
    validate_parser.add_argument("--strict", action="store_true", help="Fail on warnings as well as errors")

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("files", nargs="+", metavar="FILE", help="Requirement document(s)")
    parser.add_argument("--config", help="Path to an analysis rules JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


def _read_documents(paths: list[str]) -> str:
    """Concatenate the given files, blank-line separated."""
    return "\n\n".join(read_document(path) for path in paths)


def _load_rules(args: argparse.Namespace) -> AnalysisRules | None:
    return load_rules(args.config) if args.config else None


def _run_analyze(args: argparse.Namespace, console: Console) -> int:
    options = {
        "include_edge_cases": not args.no_edge_cases,
        "include_error_cases": not args.no_error_cases,
        "include_integration_scenarios": not args.no_integration,
        "max_scenarios_per_flow": args.max_scenarios_per_flow,
        "detail_level": args.detail_level,
    }
    analyzer = RequirementsAnalyzer(_load_rules(args))
    report = analyzer.analyze(_read_documents(args.files), options)

    if args.export_dir:
        written = _export(report, Path(args.export_dir))
        console.print(f"Wrote {written} file(s) to {args.export_dir}")

    if args.format == "json":
        output = to_json(report)
    elif args.format == "markdown":
        output = to_markdown(report)
    else:
        _print_summary(report, console)
        return EXIT_OK

    if args.output:
        Path(args.output).write_text(output if output.endswith("\n") else output + "\n", encoding="utf-8")
    else:
        print(output)
    return EXIT_OK


def _run_validate(args: argparse.Namespace, console: Console) -> int:
    analyzer = RequirementsAnalyzer(_load_rules(args))
    report = analyzer.analyze(_read_documents(args.files), GenerationOptions())
    validation = report.validation

    for error in validation.errors:
        console.print(f"[red]error:[/] {escape(error)}", highlight=False)
    for warning in validation.warnings:
        console.print(f"[yellow]warning:[/] {escape(warning)}", highlight=False)
    console.print(f"Validation score: {validation.score}/100", highlight=False)

    failed = not validation.is_valid or (args.strict and bool(validation.warnings))
    return EXIT_VALIDATION_FAILED if failed else EXIT_OK


def _export(report: AnalysisReport, directory: Path) -> int:
    files = to_markdown_files(report)
    for relative, content in files.items():
        target = directory / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return len(files)


def _print_summary(report: AnalysisReport, console: Console) -> None:
    summary = report.summary
    console.print(f"[bold]{escape(report.document.title)}[/] (version {report.document.version})", highlight=False)
    console.print(
        f"{summary.total_requirements} requirement(s), {summary.total_features} feature(s), "
        f"{summary.total_scenarios} scenario(s); validation score {report.validation.score}/100",
        highlight=False,
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID")
    table.add_column("Feature")
    table.add_column("Priority")
    table.add_column("Complexity")
    table.add_column("Scenarios", justify="right")
    for feature in report.features:
        table.add_row(
            feature.id,
            feature.name,
            feature.priority.value,
            feature.complexity.value,
            str(len(report.scenarios_for(feature))),
        )
    console.print(table)

    for recommendation in report.recommendations:
        console.print(f"- {escape(recommendation)}", highlight=False)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    console = Console()
    try:
        if args.command == "validate":
            return _run_validate(args, console)
        return _run_analyze(args, console)
    except (ConfigError, DocumentLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNEXPECTED
