"""Path predicates: file extensions, devfile names, and fence language hints."""

from __future__ import annotations

# Leaf names recognised as a devfile (case-sensitive)
DEVFILE_NAMES: frozenset[str] = frozenset({
    "devfile.yaml",
    "devfile.yml",
    ".devfile.yaml",
    ".devfile.yml",
})

YAML_EXTENSIONS: frozenset[str] = frozenset({".yaml", ".yml"})

# Mapping of extension → Markdown code-fence language hint
LANGUAGE_MAP: dict[str, str] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
    ".md": "markdown",
    ".sh": "bash",
    ".py": "python",
    ".go": "go",
    ".js": "javascript",
    ".ts": "typescript",
    ".java": "java",
    ".xml": "xml",
    ".toml": "toml",
}

FILENAME_LANGUAGE_MAP: dict[str, str] = {
    "Dockerfile": "dockerfile",
    "Containerfile": "dockerfile",
    "Makefile": "makefile",
}


def _leaf(path: str) -> str:
    return path.rsplit("/", maxsplit=1)[-1]


def file_extension(path: str) -> str:
    """Return the extension of the final path segment, including the dot.

    Anything from the last ``.`` of the leaf counts, so ``.devfile`` and
    ``archive.`` both have an extension. Returns ``""`` when there is none.
    """
    leaf = _leaf(path)
    dot_pos = leaf.rfind(".")
    if dot_pos == -1:
        return ""
    return leaf[dot_pos:]


def has_file_extension(path: str) -> bool:
    """Guess whether a repository path names a file rather than a directory."""
    return file_extension(path) != ""


def looks_like_devfile_path(path: str) -> bool:
    """Return True if the last segment of *path* is a devfile name."""
    return _leaf(path) in DEVFILE_NAMES


def is_yaml_path(path: str) -> bool:
    return file_extension(path).lower() in YAML_EXTENSIONS


def get_language_hint(path: str) -> str:
    """Return the Markdown code-fence language hint for a file path."""
    filename = _leaf(path)
    if filename in FILENAME_LANGUAGE_MAP:
        return FILENAME_LANGUAGE_MAP[filename]

    ext = file_extension(path)
    return LANGUAGE_MAP.get(ext, LANGUAGE_MAP.get(ext.lower(), ""))
