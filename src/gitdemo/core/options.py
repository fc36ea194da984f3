"""Option parsing for the text that follows a git method."""

from __future__ import annotations

import re

from loguru import logger

from gitdemo.core.tables import DEFAULT_TABLES, CommandTables
from gitdemo.core.types import ParsedOptions, UnsupportedOption

TOKEN_RE = re.compile(r"""('.*?'|".*?"|\S+)""")
QUOTE_RE = re.compile(r"""['"]""")
OPTION_PREFIX = "-"


def tokenize(text: str) -> list[str]:
    """Split on whitespace, keeping quoted spans together, then drop quote characters."""

    return [QUOTE_RE.sub("", part) for part in TOKEN_RE.findall(text)]


def parse_options(
    method: str,
    remainder: str,
    *,
    tables: CommandTables = DEFAULT_TABLES,
) -> ParsedOptions | UnsupportedOption:
    """Partition ``remainder`` into supported flags and general args.

    Each flag greedily takes the non-flag tokens after it as its args. A
    repeated flag keeps its last occurrence. The first unsupported flag
    stops parsing.

    Raises:
        OptionTableMissingError: ``method`` has no supported-option entry.
    """

    supported = tables.options_for(method)
    tokens = tokenize(remainder)
    options: dict[str, list[str]] = {}
    general_args: list[str] = []

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        if not token.startswith(OPTION_PREFIX):
            general_args.append(token)
            idx += 1
            continue

        if token not in supported:
            logger.debug("options.unsupported method={} option={}", method, token)
            return UnsupportedOption(method=method, option=token)

        idx += 1
        option_args: list[str] = []
        while idx < len(tokens) and not tokens[idx].startswith(OPTION_PREFIX):
            option_args.append(tokens[idx])
            idx += 1
        options[token] = option_args

    return ParsedOptions(options=options, general_args=general_args)
