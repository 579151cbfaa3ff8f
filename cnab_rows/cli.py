#!/usr/bin/env python3
"""
CLI for cnab-rows - inspect CNAB 240 files by column position

Usage:
  cnab-rows -f 21 -t 34 -s p                      # Isolate [21, 34) in the first P record
  cnab-rows -f 21 -t 34 -s p -c ./arquivo.rem     # Same, on a specific file
  cnab-rows -n empresa                            # Find companies by name, export JSON
  cnab-rows -n empresa -c ./arquivo.rem           # Same, on a specific file
  cnab-rows -n empresa -c ./arquivo.rem -e latin-1  # Same, on a latin-1 encoded file
  cnab-rows --list-tools                          # Show MCP tool definitions

Uses the hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import codecs
import json
import sys
from pathlib import Path

from .adapters.mcp import TOOL_SCHEMAS, CnabHandlers, check_company_query, check_segment_query
from .config import get_default_cnab_file, get_encoding, get_export_dir, get_log_level
from .container import Container
from .core.errors import ConfigurationError
from .formatters import format_default_file_notice, format_find_company, format_find_segment
from .logs import setup_logging

EXAMPLES = """exemplos:
  %(prog)s -f 21 -t 34 -s p
      Lista a linha e campo que from e to do cnab
  %(prog)s -f 21 -t 34 -s p -c ./caminho/do/seu/arquivo.cnab
      Lista a linha e campo que from e to do cnab a partir de um arquivo específico fornecido
  %(prog)s -n empresa
      Lista as empresas encontradas pelo nome fornecido.
  %(prog)s -n empresa -c ./caminho/do/seu/arquivo.cnab
      Lista as empresas encontradas pelo nome a partir de um arquivo específico fornecido
"""


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_schema in TOOL_SCHEMAS.values():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def segment_command(
    container: Container,
    cnab_file: Path,
    segment: str,
    start: int,
    end: int,
    highlight: bool,
) -> int:
    """Isolate a column range in the first record of a segment type"""
    handlers = CnabHandlers(container)

    result = await handlers.find_segment(
        cnab_file=cnab_file,
        segment=segment,
        start=start,
        end=end
    )

    if not result["success"]:
        print(format_find_segment(result), file=sys.stderr)
        return 1

    print(format_find_segment(result, highlight=highlight))
    return 0


async def company_command(
    container: Container,
    cnab_file: Path,
    company_name: str,
    highlight: bool,
) -> int:
    """Find companies by name and export the matches"""
    handlers = CnabHandlers(container)

    result = await handlers.find_company(cnab_file=cnab_file, company_name=company_name)

    if not result["success"]:
        print(format_find_company(result), file=sys.stderr)
        return 1

    print(format_find_company(result, highlight=highlight))
    return 0


def validate_args(args: argparse.Namespace) -> None:
    """Check mode exclusivity before any file is touched"""
    segment_options = (args.start, args.end, args.segment)

    if args.company_name is not None:
        if any(option is not None for option in segment_options):
            raise ConfigurationError(
                "A opção -n (companyName) não pode ser utilizada com as opções -f, -t e -s."
            )
        check_company_query(args.company_name)
    else:
        check_segment_query(args.segment, args.start, args.end)


def resolve_cnab_file(cnab_file: str | None) -> Path:
    """Resolve the input path, announcing the fallback to the default file"""
    if cnab_file:
        return Path(cnab_file).resolve()

    default = get_default_cnab_file()
    print(format_default_file_notice(default.name))
    return default


def encoding_name(value: str) -> str:
    """argparse type: reject codec names Python does not know"""
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise argparse.ArgumentTypeError(f"encoding desconhecido: {value}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnab-rows",
        usage="%(prog)s [options]",
        description="Inspeciona arquivos CNAB por posição de coluna.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--from", dest="start", type=int,
                        help="Posição inicial de pesquisa da linha do Cnab")
    parser.add_argument("-t", "--to", dest="end", type=int,
                        help="Posição final de pesquisa da linha do Cnab")
    parser.add_argument("-s", "--segment", help="Tipo de segmento")
    parser.add_argument("-n", "--companyName", dest="company_name",
                        help="Nome da empresa de pesquisa da linha do Cnab")
    parser.add_argument("-c", "--cnabFile", dest="cnab_file",
                        help="Caminho do arquivo Cnab")
    parser.add_argument(
        "-e", "--encoding",
        default=get_encoding(),
        type=encoding_name,
        help="Encoding do arquivo Cnab (default: $CNAB_ENCODING ou utf-8)"
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Diretório de exportação (default: $CNAB_EXPORT_DIR ou ./extractedDatas)"
    )
    parser.add_argument(
        "--log-level",
        default=get_log_level(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Log level (default: $LOG_LEVEL or WARNING)"
    )
    parser.add_argument("--list-tools", action="store_true",
                        help="Show MCP tool definitions")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_tools:
        return asyncio.run(list_tools_command())

    try:
        validate_args(args)
    except ConfigurationError as e:
        parser.error(str(e))

    setup_logging(args.log_level)

    cnab_file = resolve_cnab_file(args.cnab_file)
    container = Container(
        export_dir=args.output_dir or get_export_dir(),
        encoding=args.encoding
    )
    highlight = sys.stdout.isatty()

    if args.company_name is not None:
        return asyncio.run(company_command(
            container=container,
            cnab_file=cnab_file,
            company_name=args.company_name,
            highlight=highlight
        ))

    return asyncio.run(segment_command(
        container=container,
        cnab_file=cnab_file,
        segment=args.segment,
        start=args.start,
        end=args.end,
        highlight=highlight
    ))


if __name__ == "__main__":
    sys.exit(main())
