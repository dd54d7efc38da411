import re

__all__ = ["TITLE_OVERRIDES", "format_title"]

# Exact, case-sensitive names that skip the general formatting rule
TITLE_OVERRIDES = {
    "index": "Overview",
    "src": "Source",
    "types": "Types",
    "core": "Core",
    "interfaces": "Interfaces",
    "classes": "Classes",
    "type-aliases": "Type Aliases",
}

_UPPERCASE_RE = re.compile(r"([A-Z])")
_SEPARATOR_RE = re.compile(r"[-_]")
_WHITESPACE_RE = re.compile(r"\s+")


def format_title(name: str) -> str:
    """Turn a file or directory name into a display title

    e.g. ``myCoolModule`` -> ``My Cool Module``, ``type-aliases`` -> ``Type Aliases``

    :param name: directory name or file stem
    :returns: display title, an empty name gives an empty title
    """
    if name in TITLE_OVERRIDES:
        return TITLE_OVERRIDES[name]
    title = _UPPERCASE_RE.sub(r" \1", name)
    title = _SEPARATOR_RE.sub(" ", title)
    title = _WHITESPACE_RE.sub(" ", title).strip()
    return " ".join(word[:1].upper() + word[1:] for word in title.split(" "))
