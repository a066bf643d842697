import re
from typing import Optional, Union


def find_line(content: Union[bytes, str], pattern: str) -> Optional[int]:
    """
    Return the 1-based number of the first line matching ``pattern``.

    Returns None when no line matches or when ``pattern`` is not a valid
    regular expression.
    """
    try:
        compiled = re.compile(pattern)
    except re.error:
        return None

    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    for line_number, line in enumerate(content.split("\n"), start=1):
        if compiled.search(line):
            return line_number
    return None


def line_of_offset(content: Union[bytes, str], offset: int) -> int:
    """Return the 1-based line containing ``offset``."""
    newline = b"\n" if isinstance(content, bytes) else "\n"
    return content.count(newline, 0, max(offset, 0)) + 1
