def extract_single_quoted(line: str) -> str:
    """
    Returns the text between the first and the last single quote of ``line``, trimmed.

    ``prtconf -pv`` prints properties as ``chassis-sn:  '1234ABCD'``.
    An empty string is returned if the line holds fewer than two quotes.
    """
    first = line.find("'")
    last = line.rfind("'")
    if first == -1 or first == last:
        return ""
    return line[first + 1:last].strip()
