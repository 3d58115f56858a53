"""Command-line interface for jiraport."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings
from .jira import ConfigurationError, ImportFileError, JiraCsvImporter, dedupe_headers


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="jiraport - Convert Jira CSV exports into an issue import model"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Import command
    import_parser = subparsers.add_parser("import", help="Import issues from a Jira CSV export")
    import_parser.add_argument("file", type=Path, help="Path to the Jira CSV export")
    import_parser.add_argument(
        "--org", default=None, help="Jira Cloud organization slug (<slug>.atlassian.net)"
    )
    import_parser.add_argument(
        "--url", default=None, help="Base URL of a self-hosted Jira, used when --org is not set"
    )
    import_parser.add_argument(
        "--output", "-o", type=Path, default=None, help="Write the import result as JSON"
    )

    # Dedupe command
    dedupe_parser = subparsers.add_parser(
        "dedupe", help="Write a copy of an export with unique column headers"
    )
    dedupe_parser.add_argument("file", type=Path, help="Path to the CSV export")

    args = parser.parse_args(argv)

    level = logging.getLevelName(settings.effective_log_level)
    if not isinstance(level, int):
        print(f"Error: invalid LOG_LEVEL: {settings.effective_log_level}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "import":
            return run_import(args.file, args.org, args.url, args.output)
        elif args.command == "dedupe":
            return run_dedupe(args.file)
    except (ImportFileError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


def resolve_jira_location(
    org: Optional[str], url: Optional[str]
) -> tuple[Optional[str], Optional[str]]:
    """Use the CLI location if either argument is given, otherwise settings."""
    if org or url:
        org_slug, custom_url = org, url
    else:
        org_slug, custom_url = settings.jira_org_slug, settings.jira_custom_url
    if not org_slug and not custom_url:
        raise ConfigurationError(
            "Either a Jira organization slug (--org / JIRA_ORG_SLUG) or a "
            "custom Jira URL (--url / JIRA_CUSTOM_URL) is required"
        )
    return org_slug, custom_url


def run_import(file: Path, org: Optional[str], url: Optional[str], output: Optional[Path]) -> int:
    """Run the Jira CSV importer and report the result."""
    org_slug, custom_url = resolve_jira_location(org, url)
    importer = JiraCsvImporter(file, org_slug=org_slug, custom_url=custom_url)

    print(f"{importer.name} import")
    print("=" * 40)
    result = importer.import_issues()

    stats = result.get_statistics()
    print(f"Issues:     {stats['issue_count']}")
    print(f"Labels:     {stats['label_count']}")
    print(f"Users:      {stats['user_count']}")
    print(f"Statuses:   {stats['status_count']}")
    print(f"Unassigned: {stats['unassigned_count']}")
    print(f"Team:       {importer.default_team_name}")

    if output:
        try:
            output.write_text(result.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        except OSError as e:
            raise ImportFileError(f"Could not write {output}: {e}") from e
        print(f"Result written to {output}")
    return 0


def run_dedupe(file: Path) -> int:
    """Deduplicate the headers of an export and print the header map."""
    deduped = dedupe_headers(file)
    print(f"Deduplicated export written to {deduped.file_path}")
    for entry in deduped.header_map:
        marker = "" if entry.deduped == entry.original else f"  (was {entry.original})"
        print(f"  {entry.deduped}{marker}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
