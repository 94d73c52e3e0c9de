"""Line parser.

Converts one raw line into a LineOutcome. No I/O and no state, so it is
safe to call from anywhere.

Line format:
    option = primary <d> attr1 <d> attr2 ...

where <d> is the caller's attribute delimiter. '#' after leading
whitespace starts a full-line comment. There is no quoting or escaping.
"""

from configster.model.outcome import Invalid, LineOutcome, Record, Skip

COMMENT_CHAR = "#"
ASSIGN_CHAR = "="

# Unicode White_Space property. str.strip() and str.isspace() also treat
# the U+001C..U+001F separators as whitespace; these do not.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def check_delimiter(attr_delimiter: str) -> None:
    """Raise ValueError unless the delimiter is a single character."""
    if not isinstance(attr_delimiter, str) or len(attr_delimiter) != 1:
        raise ValueError(f"Attribute delimiter must be a single character, got {attr_delimiter!r}")


def parse_line(line: str, attr_delimiter: str, line_number: int) -> LineOutcome:
    """Parse a single configuration line.

    Args:
        line: Raw line text; surrounding whitespace and line endings are ignored.
        attr_delimiter: Character separating the primary value from the
            attributes, and the attributes from each other.
        line_number: 1-based line number, used to name invalid options.

    Returns:
        Skip for blank lines, comment lines and lines with nothing before
        the "=". Invalid when the option name contains whitespace.
        Otherwise a Record.
    """
    check_delimiter(attr_delimiter)

    stripped = line.strip(WHITESPACE)
    if not stripped or stripped[0] == COMMENT_CHAR:
        return Skip()

    option, sep, value = stripped.partition(ASSIGN_CHAR)
    if sep:
        option = option.strip(WHITESPACE)
        value = value.strip(WHITESPACE)
    else:
        option, value = stripped, ""

    # "= value" has no option to attach the value to.
    if not option:
        return Skip()

    # Only the text before the first '=' is checked; a stray '=' later in
    # the value is kept as part of the value.
    if any(c in WHITESPACE for c in option):
        return Invalid(line_number)

    primary, sep, tail = value.partition(attr_delimiter)
    if not sep:
        return Record(option, value)

    attributes = tuple(token.strip(WHITESPACE) for token in tail.split(attr_delimiter))
    return Record(option, primary.strip(WHITESPACE), attributes)
