"""Turn a one-value-per-line text block into single-column CSV text."""
import re

_LINE_SPLIT = re.compile(r"\r?\n")
_TRAILING_COMMA = re.compile(r",$")


def quote_value(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def text_to_csv(text: str, header: str = "Value") -> str:
    """Return ``header`` followed by every non-empty line quoted with a trailing comma.

    The comma after the last value is dropped, so ``text_to_csv("a\\nb", "Name")``
    yields ``'Name\\n"a",\\n"b"'``.
    """
    values = [line.strip() for line in _LINE_SPLIT.split(text or "")]
    body = "\n".join(f"{quote_value(value)}," for value in values if value)
    body = _TRAILING_COMMA.sub("", body)
    if not body:
        return header
    return f"{header}\n{body}"
