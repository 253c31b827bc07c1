"""Line-based frontmatter parsing: `key: value` header between `---` markers"""

DELIMITER = "---"
QUOTES = ("'", '"')


def _unquote(value: str) -> str:
    """Strip one matching pair of surrounding single or double quotes."""
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_frontmatter(text: str) -> tuple[dict[str, str], str]:
    """Return (metadata, body).

    A document that does not open with a `---` line, or whose block is never
    closed, has no metadata and is returned untouched as the body.
    """
    lines = text.split("\n")
    if lines[0] != DELIMITER:
        return {}, text

    end_idx = None
    for i in range(1, len(lines)):
        if lines[i] == DELIMITER:
            end_idx = i
            break
    if end_idx is None:
        return {}, text

    metadata: dict[str, str] = {}
    for line in lines[1:end_idx]:
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        metadata[key] = _unquote(value.strip())

    body = "\n".join(lines[end_idx + 1:]).strip()
    return metadata, body
