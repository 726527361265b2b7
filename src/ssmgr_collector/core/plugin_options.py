r"""Decoder for the SIP003 plugin options string.

The shadowsocks host passes plugin specific settings in ``SS_PLUGIN_OPTIONS``
as a single string of ``key=value`` entries separated by semicolons, e.g.::

    SS_PLUGIN_OPTIONS="interval=30;tag=edge-1"

Grammar accepted here:
- Entries are split on unescaped ``;``; empty entries are ignored
- Each entry is split on its first unescaped ``=``
- A backslash escapes the next character, so ``\;``, ``\=`` and ``\\``
  stand for a literal ``;``, ``=`` and ``\``; a trailing lone backslash is
  kept as is
- Leading and trailing whitespace of keys and values is stripped unless
  it is escaped, so ``a=\ x\ `` gives ``" x "``
- Entries without ``=`` or with an empty key are skipped with a warning
- When a key repeats, the last value wins

No option names are validated; the result is a plain string to string map.

Example:
    >>> parse_plugin_options("a=1;;b=2;")
    {'a': '1', 'b': '2'}
"""

from collections.abc import Iterator

from loguru import logger

ENTRY_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
ESCAPE = "\\"

# (key, value); value is None when the entry had no unescaped "="
RawEntry = tuple[str, str | None]

# (character, escaped)
Token = tuple[str, bool]


def _strip(tokens: list[Token]) -> str:
    """Join *tokens*, trimming unescaped whitespace at both ends."""
    start, end = 0, len(tokens)
    while start < end and not tokens[start][1] and tokens[start][0].isspace():
        start += 1
    while end > start and not tokens[end - 1][1] and tokens[end - 1][0].isspace():
        end -= 1
    return "".join(char for char, _ in tokens[start:end])


def _iter_entries(raw: str) -> Iterator[RawEntry]:
    key: list[Token] = []
    value: list[Token] | None = None

    def finish() -> RawEntry | None:
        key_text = _strip(key)
        if value is None:
            return (key_text, None) if key_text else None
        return key_text, _strip(value)

    i = 0
    while i < len(raw):
        char = raw[i]
        buffer = key if value is None else value
        if char == ESCAPE and i + 1 < len(raw):
            buffer.append((raw[i + 1], True))
            i += 2
            continue
        if char == ENTRY_SEPARATOR:
            entry = finish()
            if entry is not None:
                yield entry
            key, value = [], None
        elif char == KEY_VALUE_SEPARATOR and value is None:
            value = []
        else:
            buffer.append((char, False))
        i += 1

    entry = finish()
    if entry is not None:
        yield entry


def parse_plugin_options(raw: str) -> dict[str, str]:
    """Parse a SIP003 plugin options string into a dictionary.

    Args:
        raw: Value of ``SS_PLUGIN_OPTIONS``

    Returns:
        dict[str, str]: Option values keyed by option name
    """
    options: dict[str, str] = {}
    for key, value in _iter_entries(raw):
        if value is None:
            logger.warning(f"Skipping plugin option {key!r}: expected key=value")
            continue
        if not key:
            logger.warning(f"Skipping plugin option with empty key (value {value!r})")
            continue
        if key in options:
            logger.debug(f"Plugin option {key!r} given more than once, using {value!r}")
        options[key] = value
    return options
