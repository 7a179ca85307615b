"""Character-level scanning of a command line.

Every function takes the line and a position in it. Positions past the end
of the line behave as the end of the line. Extraction functions return the
text they read together with the position just after it.
"""

from __future__ import annotations

_DOLLAR_STOPPERS = "~'!@#%^&*+-()[]{}|;:',<>/\\"
_OPERATORS = "<>|"


def _char(line: str, index: int) -> str:
    return line[index] if 0 <= index < len(line) else ""


def _quote_state(line: str, index: int) -> tuple[bool, bool]:
    """Return (in single quotes, in double quotes) after reading up to ``index``."""
    single = double = False
    for ch in line[: max(index + 1, 0)]:
        if ch == "'" and not double:
            single = not single
        elif ch == '"' and not single:
            double = not double
    return single, double


def in_single_quotes(line: str, index: int) -> bool:
    """Tell whether ``index`` lies within single quotes (opening quote included)."""
    return _quote_state(line, index)[0]


def in_double_quotes(line: str, index: int) -> bool:
    """Tell whether ``index`` lies within double quotes (opening quote included)."""
    return _quote_state(line, index)[1]


def in_quotes(line: str, index: int) -> bool:
    """Tell whether ``index`` lies within any kind of quotes."""
    single, double = _quote_state(line, index)
    return single or double


def has_unclosed_quote(line: str) -> bool:
    """Tell whether the line ends with a quote still open."""
    single, double = _quote_state(line, len(line))
    return single or double


def is_operator(line: str, index: int) -> bool:
    """Tell whether the character at ``index`` is ``<``, ``>`` or ``|``."""
    ch = _char(line, index)
    return ch != "" and ch in _OPERATORS


def is_dollar(line: str, index: int) -> bool:
    """Tell whether a variable reference starts at ``index``."""
    if in_single_quotes(line, index):
        return False
    if _char(line, index) != "$":
        return False
    following = _char(line, index + 1)
    return following != "" and following not in _DOLLAR_STOPPERS


def _dollar_end(line: str, index: int) -> int:
    end = index
    while end < len(line) and line[end] not in ' "' and (line[end] != "$" or end == index):
        end += 1
    return end


def _content_end(line: str, index: int) -> int:
    end = index
    while (
        end < len(line)
        and not is_operator(line, end)
        and not is_dollar(line, end)
        and not in_quotes(line, end)
    ):
        end += 1
    return end


def _dquoted_end(line: str, index: int) -> int:
    end = index
    while end < len(line) and line[end] != '"' and not is_dollar(line, end):
        end += 1
    return end


def dollar_len(line: str, index: int) -> int:
    """Length of the variable reference starting at ``index``."""
    return _dollar_end(line, index) - index


def dquoted_len(line: str, index: int) -> int:
    """Length of double-quoted text from ``index`` up to the closing quote.

    A variable reference at ``index`` itself gives a length of zero.
    """
    if is_dollar(line, index):
        return 0
    end = line.find('"', index)
    return (len(line) if end == -1 else end) - index


def squoted_len(line: str, index: int) -> int:
    """Length of text from ``index`` up to the next single quote."""
    end = line.find("'", index)
    return (len(line) if end == -1 else end) - index


def content_len(line: str, index: int) -> int:
    """Length of plain, unquoted text starting at ``index``."""
    return _content_end(line, index) - index


def extract_content(line: str, index: int) -> tuple[str, int]:
    """Read plain text up to an operator, a variable or a quote."""
    end = _content_end(line, index)
    return line[index:end], end


def extract_squoted(line: str, index: int) -> tuple[str, int]:
    """Read single-quoted text whose opening quote is at ``index``."""
    start = index + 1
    end = line.find("'", start)
    if end == -1:
        raise ValueError("unclosed single quote")
    return line[start:end], end + 1


def extract_dquoted(line: str, index: int) -> tuple[str, int]:
    """Read double-quoted text up to the closing quote or a variable."""
    end = _dquoted_end(line, index)
    return line[index:end], end


def extract_dollar(line: str, index: int) -> tuple[str, int]:
    """Read a variable reference, ``$`` included."""
    end = _dollar_end(line, index)
    return line[index:end], end


def extract_dollar_name(line: str, index: int) -> tuple[str, int]:
    """Read a variable reference and step over the character ending it.

    A closing double quote is left in place.
    """
    end = _dollar_end(line, index)
    name = line[index:end]
    if _char(line, end) != '"':
        end = min(end + 1, len(line))
    return name, end