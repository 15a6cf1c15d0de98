"""Command line interface for docdiff.

Commands:
    diff       Show the line diff of two documents.
    merge      Write a conflict-marked merge document for two revisions.
    check      Verify that a merge document has no conflict markers left.
    diff-tree  Diff every matching document of two directory trees.

Diff and merge output goes to stdout; logs go to stderr.

Exit codes: 0 success, 1 conflict markers present, 2 invalid input or
configuration, 3 unexpected error.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .config import Config, load_config
from .config_loader import load_hierarchical_config
from .config_schema import build_config
from .converters import convert_for_diff
from .diff import (
    check_conflicts,
    compute_line_diff,
    count_conflict_blocks,
    format_diff_text,
    format_summary,
    merge_operations,
    report_to_json,
    summarize_operations,
)
from .diff.batch import collect_document_pairs, diff_documents
from .errors import DocDiffError
from .file_handler import load_document, resolve_output_path, save_document
from .logger import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFLICT = 1
EXIT_ERROR = 2
EXIT_INTERNAL = 3


def _read_document(path_str: str, render: bool = False) -> str:
    """Read a document and prepare it for diffing."""
    doc = load_document(path_str)
    result = convert_for_diff(doc.text, doc.format, render=render)
    for warning in result.warnings:
        logger.warning("%s: %s", doc.path.name, warning)
    return result.text


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_diff(args: argparse.Namespace, config: Config) -> int:
    old_text = _read_document(args.old, config.render_markdown)
    new_text = _read_document(args.new, config.render_markdown)

    operations = compute_line_diff(
        old_text, new_text, max_lines=config.max_lines
    )
    stats = summarize_operations(operations)

    if args.json:
        print(json.dumps(report_to_json(operations, stats), indent=2))
    else:
        text = format_diff_text(
            operations, show_line_numbers=not args.no_line_numbers
        )
        if text:
            print(text)
        print(format_summary(stats, label=Path(args.new).name), file=sys.stderr)
    return EXIT_OK


def cmd_merge(args: argparse.Namespace, config: Config) -> int:
    base_text = _read_document(args.base)
    head_text = _read_document(args.head)

    operations = compute_line_diff(
        base_text, head_text, max_lines=config.max_lines
    )
    merged = merge_operations(
        operations, config.head_label, config.base_label
    )
    block_count = count_conflict_blocks(operations)

    if args.output:
        out_path = resolve_output_path(args.output)
        written = save_document(out_path, merged)
        logger.info("Wrote %d bytes to %s", written, out_path)
    else:
        print(merged)

    if block_count:
        print(f"{block_count} conflict block(s) to resolve", file=sys.stderr)
        return EXIT_CONFLICT
    return EXIT_OK


def cmd_check(args: argparse.Namespace, config: Config) -> int:
    doc = load_document(args.file)
    result = check_conflicts(doc.text, name=doc.path.name)

    if args.json:
        print(json.dumps(result.model_dump(), indent=2))
    elif result.is_conflict:
        print(
            f"{result.name}: unresolved conflict markers "
            f"({result.block_count} block(s))"
        )
    else:
        print(f"{result.name}: no conflict markers")

    return EXIT_CONFLICT if result.is_conflict else EXIT_OK


def cmd_diff_tree(args: argparse.Namespace, config: Config) -> int:
    pairs = collect_document_pairs(
        Path(args.old_dir), Path(args.new_dir), pattern=args.pattern
    )
    results = asyncio.run(
        diff_documents(
            pairs,
            max_lines=config.max_lines,
            max_parallel=config.max_parallel,
        )
    )
    changed = [r for r in results if r.status != "unchanged"]

    if args.json:
        payload = [
            {
                "name": r.name,
                "status": r.status,
                **report_to_json(r.operations, r.stats),
            }
            for r in changed
        ]
        print(json.dumps(payload, indent=2))
    else:
        for r in changed:
            print(f"[{r.status}] {format_summary(r.stats, label=r.name)}")
        print(
            f"{len(changed)} of {len(results)} documents changed",
            file=sys.stderr,
        )
    return EXIT_OK


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docdiff",
        description="Line diff and conflict-merge tool for documentation revisions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Side-by-side line diff of two revisions
  docdiff diff old.md new.md

  # Diff the rendered HTML instead of the Markdown source
  docdiff diff old.md new.md --render-markdown

  # Conflict-marked merge document for a change suggestion
  docdiff merge main.md branch.md --head-label proposal --base-label main -o merged.md

  # Refuse to save while markers remain (exit code 1)
  docdiff check merged.md

  # Every Markdown file of two checkouts
  docdiff diff-tree main/docs branch/docs --json
        """,
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        help="Refuse inputs longer than this many lines (overrides DOCDIFF_MAX_LINES and config files)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"docdiff version {__version__}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_diff = sub.add_parser("diff", help="Show the line diff of two documents")
    p_diff.add_argument("old", help="Old revision")
    p_diff.add_argument("new", help="New revision")
    p_diff.add_argument("--json", action="store_true", help="Emit JSON")
    p_diff.add_argument(
        "--no-line-numbers",
        action="store_true",
        help="Omit line number columns",
    )
    p_diff.add_argument(
        "--render-markdown",
        action="store_true",
        help="Render Markdown documents to HTML before diffing",
    )
    p_diff.set_defaults(handler=cmd_diff)

    p_merge = sub.add_parser(
        "merge", help="Write a conflict-marked merge document"
    )
    p_merge.add_argument("base", help="Base (mainline) revision")
    p_merge.add_argument("head", help="Head (proposed) revision")
    p_merge.add_argument("--head-label", help="Label after <<<<<<<")
    p_merge.add_argument("--base-label", help="Label after >>>>>>>")
    p_merge.add_argument(
        "-o", "--output", help="Write to this file instead of stdout"
    )
    p_merge.set_defaults(handler=cmd_merge)

    p_check = sub.add_parser(
        "check", help="Check a merge document for leftover conflict markers"
    )
    p_check.add_argument("file", help="Merge document to check")
    p_check.add_argument("--json", action="store_true", help="Emit JSON")
    p_check.set_defaults(handler=cmd_check)

    p_tree = sub.add_parser(
        "diff-tree", help="Diff all matching documents of two directories"
    )
    p_tree.add_argument("old_dir", help="Old tree root")
    p_tree.add_argument("new_dir", help="New tree root")
    p_tree.add_argument(
        "--pattern", default="*.md", help="Glob for documents (default: *.md)"
    )
    p_tree.add_argument("--json", action="store_true", help="Emit JSON")
    p_tree.set_defaults(handler=cmd_diff_tree)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load configuration and dispatch a command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv()

    try:
        unified = build_config(load_hierarchical_config())
        config = load_config(
            head_label=getattr(args, "head_label", None),
            base_label=getattr(args, "base_label", None),
            max_lines=args.max_lines,
            render_markdown=getattr(args, "render_markdown", False),
            debug=args.debug,
            yaml_fallbacks=unified.diff.model_dump(),
        )
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_ERROR

    setup_logging(
        debug=config.debug,
        log_file=args.log_file or unified.logging.file,
        level=unified.logging.level,
    )

    try:
        return args.handler(args, config)
    except (DocDiffError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except Exception:
        logger.exception("Unexpected error in command %s", args.command)
        return EXIT_INTERNAL


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
