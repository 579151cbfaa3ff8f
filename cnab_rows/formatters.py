"""
Text formatters for handler results

Format handler results as the plain-text "Cnab linha" blocks.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any

# ANSI inverse video, only used for terminal output
INVERSE = "\x1b[7m"
RESET = "\x1b[0m"


def highlight_text(text: Any, enabled: bool) -> str:
    if not enabled:
        return str(text)
    return f"{INVERSE}{text}{RESET}"


def format_segment_block(
    line: str,
    segment_type: str,
    start: int,
    end: int,
    highlight: bool = False
) -> str:
    """Format one record with the [start, end) slice isolated and highlighted.

    Example output:
        ----- Cnab linha Q -----

        posição from: 21

        posição to: 34

        item isolado: 0001234567890

        item dentro da linha Q:
          0010001300002Q 012000001234567890NTT BRASIL ...

        ----- FIM ------
    """
    lo = max(start, 0)
    hi = max(end, lo)
    item = line[lo:hi]

    return "\n".join([
        f"----- Cnab linha {segment_type} -----",
        "",
        f"posição from: {highlight_text(start, highlight)}",
        "",
        f"posição to: {highlight_text(end, highlight)}",
        "",
        f"item isolado: {highlight_text(item, highlight)}",
        "",
        f"item dentro da linha {segment_type.upper()}:",
        f"  {line[:lo]}{highlight_text(item, highlight)}{line[hi:]}",
        "",
        "----- FIM ------",
    ])


def format_find_segment(result: dict[str, Any], highlight: bool = False) -> str:
    """Format find_segment result."""
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    if not result["found"]:
        return f"Segmento {result['segment']} não encontrado."

    match = result["match"]
    return format_segment_block(
        match["line"],
        match["segment_type"],
        result["from"],
        result["to"],
        highlight=highlight
    )


def format_find_company(result: dict[str, Any], highlight: bool = False) -> str:
    """Format find_company result: one block per match, then the export path.

    A failed export still lists the matches, followed by the error.
    """
    if not result.get("success") and "matches" not in result:
        return f"ERROR: {result.get('error', 'Unknown error')}"

    if not result["found"]:
        return f"Não foram encontradas empresas que correspondem ao filtro: {result['query']}"

    # Each block isolates the company-name field only
    name_start, name_end = result["name_range"]

    blocks = []
    for match, line in zip(result["matches"], result["lines"]):
        blocks.append(format_segment_block(
            line,
            match["Posições"]["Segmento"],
            name_start,
            name_end,
            highlight=highlight
        ))

    if result.get("export_path"):
        blocks.append(f"Os dados do arquivo foram extraídos para: {result['export_path']}")
    elif result.get("error"):
        blocks.append(f"ERROR: {result['error']}")

    return "\n\n".join(blocks)


def format_default_file_notice(path: Any) -> str:
    return (
        f"Nenhum arquivo foi especificado, o arquivo '{path}' "
        "será utilizado para a realização da rotina"
    )
