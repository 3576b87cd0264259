"""Main CLI entry point for lextables"""

import sys
import argparse
from pathlib import Path
from typing import Optional, Tuple

try:
    from luaparser import ast
except ImportError:
    print("Error: luaparser is required. Install with: pip install luaparser", file=sys.stderr)
    sys.exit(1)

from lextables.analyzers.identifier_collector import IdentifierCollector, collect_identifiers
from lextables.core.const_table import ConstTable
from lextables.core.errors import LoadError
from lextables.core.indexed_table import IndexedTable
from lextables.core.table_logger import TableLogger

DEFAULT_KEYWORDS = Path(__file__).resolve().parent.parent / "data" / "keywords.txt"


def build_tables(input_file: Path, keywords_file: Optional[Path] = None,
                 logger: Optional[TableLogger] = None) -> Tuple[ConstTable, IdentifierCollector]:
    """Load the reserved table and collect identifiers from a Lua file

    Args:
        input_file: Path to Lua source file
        keywords_file: Reserved-word table (default: bundled keywords.txt)
        logger: Optional event logger

    Returns:
        (reserved table, collector holding identifier and literal tables)

    Raises:
        OSError: If input_file cannot be opened
        UnicodeDecodeError: If input_file is not UTF-8 text
        LoadError: If the reserved-word table cannot be loaded
    """
    reserved = ConstTable.from_source(keywords_file or DEFAULT_KEYWORDS, logger=logger)
    with open(input_file, 'r', encoding='utf-8') as f:
        source = f.read()
    return reserved, collect_identifiers(source, reserved, logger)


def format_table(title: str, table: IndexedTable) -> str:
    """Render an indexed table as aligned text

    Args:
        title: Heading line
        table: Table to render

    Returns:
        One line per entry in index order
    """
    lines = [f"=== {title} ({table.size()}) ==="]
    width = max((len(key) for key in table.all_keys()), default=0)
    for key, index, metadata in table.entries():
        lines.append(f"{index:>4}  {key:<{width}}  {metadata}")
    return "\n".join(lines)


def format_tables(collector: IdentifierCollector) -> str:
    """Render the identifier and literal tables of a collector"""
    return "\n\n".join([
        format_table("Identifiers", collector.identifiers),
        format_table("Literals", collector.literals),
    ])


def main() -> None:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description='lextables - build identifier and literal tables for a Lua file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lextables input.lua
  lextables input.lua --keywords reserved.txt --verbose
        """
    )
    parser.add_argument('input', type=Path, help='Input Lua file')
    parser.add_argument(
        '-k', '--keywords', type=Path, default=None,
        help='Reserved-word table of "<index> <word>" records (default: bundled list)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Print table events and warnings after the tables'
    )

    args = parser.parse_args()

    input_file = Path(args.input)
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        sys.exit(1)

    logger = TableLogger(verbose=args.verbose)
    try:
        _, collector = build_tables(input_file, args.keywords, logger)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except ast.SyntaxException as e:
        print(f"Error parsing {input_file}: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read {input_file}: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_tables(collector))
    if args.verbose:
        print()
        print(logger.print_summary())


if __name__ == "__main__":
    main()
