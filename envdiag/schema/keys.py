# envdiag/schema/keys.py

KEY_SEPARATOR = "_"


def join_key(prefix: str, fragment: str) -> str:
    """
    Join a namespace prefix and a key fragment.

    The separator is dropped when either side is empty, so a field without
    a fragment inherits its parent's prefix unchanged.

    Examples:
        >>> join_key("", "NESTED")
        'NESTED'
        >>> join_key("NESTED", "REQUIRED")
        'NESTED_REQUIRED'
        >>> join_key("APP", "")
        'APP'
    """
    if not prefix:
        return fragment
    if not fragment:
        return prefix
    return f"{prefix}{KEY_SEPARATOR}{fragment}"


def effective_key(prefix: str, fragment: str) -> str:
    """Fully-qualified, uppercased lookup name of a scalar field."""
    return join_key(prefix, fragment).upper()


__all__ = ["KEY_SEPARATOR", "join_key", "effective_key"]
