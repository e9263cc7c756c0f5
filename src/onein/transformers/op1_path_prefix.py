"""Operation 1: Prepend the configured prefix to every path.

Before (prefix "/onein"):
    paths:
      /users/{id}: ...

After:
    paths:
      /onein/users/{id}: ...
"""


def add_path_prefix(spec: dict, prefix: str) -> dict:
    """
    Rewrite every key of ``spec["paths"]`` by prepending ``prefix``.

    Path order is preserved. An empty prefix leaves the paths as they are.

    Args:
        spec: The OpenAPI document as a dictionary
        prefix: String prepended to each path key

    Returns:
        The transformed document
    """
    paths = spec.get("paths") or {}
    spec["paths"] = {prefix + path: path_item for path, path_item in paths.items()}
    return spec
