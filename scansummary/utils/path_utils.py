"""Path normalization utilities for scanner-reported file paths."""


def to_slash_path(path: str) -> str:
    """
    Convert Windows separators to slashes.

    Examples:
        >>> to_slash_path("C:\\\\scan\\\\root\\\\a.c")
        'C:/scan/root/a.c'
    """
    return path.replace("\\", "/")


def input_prefix(input_root: str) -> str:
    """
    Build the prefix to strip from file paths reported below an input root.

    The result always ends with exactly one slash so that stripping it leaves
    a relative path.

    Examples:
        >>> input_prefix("/scan/root")
        '/scan/root/'
        >>> input_prefix("/scan/root/")
        '/scan/root/'
    """
    return to_slash_path(input_root).rstrip("/") + "/"


def strip_input_prefix(path: str, prefix: str) -> str:
    """
    Make a scanner-reported path relative to the scanned input root.

    The path gets the same separator normalization as the prefix. Paths that
    do not start with the prefix (e.g. results produced with ``--strip-root``)
    are returned otherwise unchanged.

    Examples:
        >>> strip_input_prefix("/scan/root/src/main.c", "/scan/root/")
        'src/main.c'
        >>> strip_input_prefix("src/main.c", "/scan/root/")
        'src/main.c'
    """
    return to_slash_path(path).removeprefix(prefix)
