"""Request target composition."""

from collections.abc import Mapping


def compose_url(path: str, query: Mapping[str, str] | None = None) -> str:
    """Append ``query`` to ``path`` as ``key=value`` pairs joined by ``&``.

    Pairs keep the mapping's iteration order. Keys and values are written as
    given; callers must pre-encode anything that is not URL safe.
    """
    if not query:
        return path

    query_part = "&".join(f"{key}={value}" for key, value in query.items())
    return f"{path}?{query_part}"
