# src/sic2lp/cli.py

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pyfiglet
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from sic2lp.common.errors import Sic2LpError
from sic2lp.common.exporter import LastPassExporter
from sic2lp.common.log import console, setup_logging
from sic2lp.common.models import ConversionOptions, parse_priority_folders
from sic2lp.lastpass.attachments import AttachmentExtractor
from sic2lp.lastpass.classifier import ImportResult, convert
from sic2lp.safeincloud.parser import load_database

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  sic2lp -db SafeInCloud_2017-03-19.xml -p "Credit Cards,Banking,Insurance" -v
  sic2lp -db SafeInCloud_2017-03-19.xml -f "Untagged" -p "Credit Cards,Banking,Insurance"
  sic2lp -db SafeInCloud_2017-03-19.xml -f "Imported (SafeInCloud)" -v
  sic2lp -db SafeInCloud.db -o ~/lastpass-import
"""


def _display_banner() -> str:
    plain_banner = pyfiglet.figlet_format("sic2lp", font="slant")
    console.print(
        Panel(
            plain_banner,
            title="[bold white] SafeInCloud -> LastPass [/bold white]",
            border_style="cyan",
            expand=False,
        )
    )
    return plain_banner


def _setup_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sic2lp",
        description="Convert a SafeInCloud export into LastPass sites and secure notes CSV files.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-db", "--db", dest="db", type=Path,
        help="An exported SafeInCloud .xml (or encrypted .db) path and filename.",
    )
    parser.add_argument(
        "-f", "--folder", default="Imported",
        help="Default folder of unlabelled cards. (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--priority", default="",
        help="Priority folder of labels to assign in order (comma delimited).",
    )
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=Path("."),
        help="Directory for the CSV files and the attachments folder. (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log every decision per card.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def _ask_password() -> str:
    return Prompt.ask("[yellow]Enter SafeInCloud Password[/]", password=True, console=console)


def _print_summary(result: ImportResult, outputs: List[Path]):
    summary = Text()
    summary.append(f"✓ SITES: {len(result.sites)} entries\n")
    summary.append(f"✓ SECURE NOTES: {len(result.notes)} entries\n")
    summary.append(f"  imported {result.imported}, deleted {result.deleted}, skipped {result.skipped}\n")
    for path in outputs:
        summary.append(f"→ {path}\n")
    console.print(Panel(summary, title="Conversion Successful", border_style="green"))


def run(options: ConversionOptions, db_path: Path) -> ImportResult:
    """Parses, classifies and exports. Raises a :class:`Sic2LpError` on failure."""
    database = load_database(db_path, _ask_password)

    output_dir = Path(options.output_dir)
    attachments = AttachmentExtractor(output_dir / options.attachments_dir)
    result = convert(database, options, attachments)

    exporter = LastPassExporter(output_dir)
    outputs = [exporter.write_sites(result.sites), exporter.write_notes(result.notes)]
    _print_summary(result, outputs)
    return result


def main(argv: Optional[List[str]] = None):
    parser = _setup_arg_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if args.db is None:
        parser.print_help(sys.stderr)
        return

    setup_logging(args.verbose, args.quiet)
    _display_banner()

    options = ConversionOptions(
        default_folder=args.folder,
        priority_folders=parse_priority_folders(args.priority),
        output_dir=str(args.output_dir),
    )

    try:
        run(options, args.db)
    except Sic2LpError as e:
        logger.error("%s", e)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
