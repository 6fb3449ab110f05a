"""exstatus CLI: record, inspect and select persisted example statuses."""

import argparse
import json
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional


def main():
    """Main CLI entry point for exstatus commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        exstatus_version = get_version("exstatus")
    except PackageNotFoundError:
        exstatus_version = "dev"

    parser = argparse.ArgumentParser(
        prog="exstatus",
        description="exstatus: persist example statuses across test runs and select failures to re-run"
    )
    parser.add_argument("--version", action="version", version=f"exstatus {exstatus_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Path to the example status file (defaults to $EXSTATUS_PERSISTENCE_FILE_PATH)"
    )
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parent_parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr (defaults to $EXSTATUS_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # record command
    record_parser = subparsers.add_parser(
        "record",
        help="Merge this run's results into the status file",
        parents=[parent_parser]
    )
    record_parser.add_argument(
        "--results",
        type=Path,
        required=True,
        help="Path to a JSON list of results ({example_id|id, status, run_time})"
    )

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the persisted status table",
        parents=[parent_parser]
    )
    show_parser.add_argument(
        "--status",
        default=None,
        help="Only show examples with this status"
    )

    # failures command
    failures_parser = subparsers.add_parser(
        "failures",
        help="List examples that failed in their last run",
        parents=[parent_parser]
    )
    failures_parser.add_argument(
        "--files",
        action="store_true",
        help="List spec files containing failures instead of example ids"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from ._internal.config import load_settings
    from ._internal.log import configure_logging

    try:
        settings = load_settings()
        configure_logging(args.log_level or settings.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    status_path: Optional[Path] = args.file or settings.persistence_file_path
    if status_path is None:
        print(
            "Error: No status file configured. Pass --file or set EXSTATUS_PERSISTENCE_FILE_PATH.",
            file=sys.stderr,
        )
        sys.exit(1)

    if args.command == "record":
        try:
            from .api import persist_statuses, records_from_results
            from .kernel.selection import status_counts

            with open(args.results, 'r', encoding='utf-8') as f:
                results = json.load(f)
            if not isinstance(results, list):
                raise ValueError(f"{args.results} must contain a JSON list of results")

            records = records_from_results(results)
            merged = persist_statuses(records, status_path)

            if not args.quiet:
                print("[OK] Statuses persisted")
                print(f"  File: {status_path}")
                print(f"  This run: {len(records)}")
                print(f"  Total: {len(merged)}")
                for status, count in status_counts(merged).items():
                    print(f"  {status}: {count}")
            sys.exit(0)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "show":
        try:
            from .api import dump_statuses, load_statuses

            records = load_statuses(status_path)
            if args.status is not None:
                records = [r for r in records if r.get("status") == args.status]

            table = dump_statuses(records)
            if not args.quiet:
                if table is None:
                    print("[OK] No example statuses recorded")
                else:
                    print(table, end="")
            sys.exit(0)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "failures":
        try:
            from .api import load_statuses
            from .kernel.selection import failed_example_ids, spec_files_with_failures

            records = load_statuses(status_path)
            selected = spec_files_with_failures(records) if args.files else failed_example_ids(records)
            for item in selected:
                print(item)
            sys.exit(0)
        except (ValueError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
