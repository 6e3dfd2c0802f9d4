from __future__ import annotations

try:
    import pwd
except ImportError:  # Windows
    pwd = None  # type: ignore[assignment]


def _user_home(user: str) -> str | None:
    if pwd is None:
        return None
    try:
        return pwd.getpwnam(user).pw_dir
    except KeyError:
        return None


def expand_tilde(pattern: str, home: str) -> str:
    """Replace a leading ``~`` or ``~user`` with the matching home directory.

    Patterns not starting with ``~`` are returned unchanged, as are
    ``~user`` references to unknown users.
    """
    if not pattern.startswith("~"):
        return pattern
    slash = pattern.find("/")
    user, rest = (pattern[1:], "") if slash < 0 else (pattern[1:slash], pattern[slash:])
    if user:
        resolved = _user_home(user)
        if resolved is None:
            return pattern
        home = resolved
    if rest:
        return home.rstrip("/") + rest
    return home
