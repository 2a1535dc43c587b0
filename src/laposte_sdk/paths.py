"""Path normalization for API request paths."""

from __future__ import annotations


def normalize_path(path: str) -> str:
    """Collapse dot-segments and redundant slashes in ``path``.

    The number of leading slashes is kept as-is. A trailing slash is kept
    when the input ends with one, or when a final ``..`` cancels the segment
    before it. ``..`` segments that cannot cancel anything stay in the output.
    """

    if path == "":
        return path

    leading_slashes = len(path) - len(path.lstrip("/"))
    is_dir = path.endswith("/")
    tokens = [token for token in path.split("/") if token]

    clean: list[str] = []
    for index, token in enumerate(tokens):
        if token == "..":
            if clean and clean[-1] != "..":
                clean.pop()
                if index == len(tokens) - 1:
                    is_dir = True
            else:
                clean.append("..")
        elif token != ".":
            clean.append(token)

    result = "/" * leading_slashes + "/".join(clean)
    if is_dir and result and not result.endswith("/"):
        result += "/"
    return result


__all__ = ["normalize_path"]
