"""Frontmatter block parsing and serialization"""

from mdsite.core.models import Frontmatter, FrontmatterValue, ListValue, Scalar


DELIMITER = "---"
LIST_KEYS = {"tags"}
_QUOTES = ('"', "'")


def _is_delimiter(line: str) -> bool:
    return line.rstrip("\r\n") == DELIMITER


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def parse_list(value: str) -> tuple[str, ...]:
    """Parse `[a, "b c"]` or `a, b c` into trimmed, non-empty items."""
    value = value.strip()
    if value.startswith("[") and value.endswith("]"):
        items = [strip_quotes(item.strip()).strip() for item in value[1:-1].split(",")]
    else:
        items = [item.strip() for item in strip_quotes(value).split(",")]
    return tuple(item for item in items if item)


def _parse_block(lines: list[str]) -> Frontmatter:
    fields: dict[str, FrontmatterValue] = {}
    for line in lines:
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if not key:
            continue
        if key in LIST_KEYS:
            fields[key] = ListValue(parse_list(value))
        else:
            fields[key] = Scalar(strip_quotes(value.strip()))
    return Frontmatter(fields)


def parse_frontmatter(text: str) -> tuple[Frontmatter, str]:
    """Return (frontmatter, body). Never raises; a malformed block means no frontmatter."""
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return Frontmatter(), text

    for end in range(1, len(lines)):
        if _is_delimiter(lines[end]):
            block = [line.rstrip("\r\n") for line in lines[1:end]]
            return _parse_block(block), "".join(lines[end + 1:])
    return Frontmatter(), text


def _dump_scalar(value: str) -> str:
    if not value or value != value.strip() or value[0] in _QUOTES or value[-1] in _QUOTES:
        return f'"{value}"'
    return value


def _dump_item(item: str) -> str:
    if not item or any(c in item for c in " []") or item[0] in _QUOTES:
        return f'"{item}"'
    return item


def dump_frontmatter(frontmatter: Frontmatter) -> str:
    """Serialize frontmatter as a delimited block that parse_frontmatter reads back unchanged."""
    lines = [DELIMITER]
    for key, value in frontmatter.fields.items():
        match value:
            case ListValue(items=items):
                lines.append(f"{key}: [{', '.join(_dump_item(i) for i in items)}]")
            case Scalar(value=text):
                lines.append(f"{key}: {_dump_scalar(text)}")
    lines.append(DELIMITER)
    return "\n".join(lines) + "\n"
