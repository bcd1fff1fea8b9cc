"""Cookie header parsing."""


def parse_cookies(headers: list[str] | tuple[str, ...] | str) -> dict[str, str]:
    """Parse one or more ``Cookie`` header values into a name-value dict.

    Accepts a single header value or every value the client sent. When a
    name appears more than once, the first occurrence wins, matching how
    browsers order cookies (most specific path first). A value wrapped in
    double quotes is unquoted.

    Returns an empty dict for empty or missing headers.
    """
    if isinstance(headers, str):
        headers = [headers]
    cookies: dict[str, str] = {}
    for header in headers:
        for pair in header.split(";"):
            pair = pair.strip()
            if "=" not in pair:
                continue
            key, _, value = pair.partition("=")
            key = key.strip()
            value = value.strip()
            if not key:
                continue
            if len(value) > 1 and value[0] == value[-1] == '"':
                value = value[1:-1]
            cookies.setdefault(key, value)
    return cookies
