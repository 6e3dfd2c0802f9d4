import re

SEP = "/"

_SEP_RUN = re.compile(r"/{2,}")


def collapse_separators(pattern: str) -> str:
    """Collapse every run of separators into a single ``/``."""
    return _SEP_RUN.sub(SEP, pattern)


def join_path(prefix: str, name: str) -> str:
    # An empty prefix is the current directory: results stay relative.
    if not prefix:
        return name
    if prefix.endswith(SEP):
        return prefix + name
    return prefix + SEP + name


def mark_dir(path: str, is_dir: bool) -> str:
    if is_dir and not path.endswith(SEP):
        return path + SEP
    return path
