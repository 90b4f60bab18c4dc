"""Parameter name mapping for cache keys.

Translates a logical cache key into the fully-qualified parameter name
under the configured base path. The sanitization rule is part of the
storage compatibility contract: changing it orphans every parameter
written under the old rule.
"""

import re

# Anything SSM does not accept in a parameter name path segment
UNSAFE_PARAMETER_CHARS = re.compile(r"[^a-zA-Z0-9_./-]")

REPLACEMENT_CHAR = "_"


def sanitize_key(key: str) -> str:
    """Replace every character outside ``[a-zA-Z0-9_./-]`` with ``_``.
    
    Keys that differ only in disallowed characters map to the same name,
    e.g. ``"a b"`` and ``"a:b"`` both become ``"a_b"``.
    """
    return UNSAFE_PARAMETER_CHARS.sub(REPLACEMENT_CHAR, key)


def map_key(base_path: str, key: str) -> str:
    """Build the parameter name for ``key`` under ``base_path``.
    
    The base path is operator-controlled and used verbatim; only the key
    is sanitized.
    
    Args:
        base_path: Storage namespace prefix without trailing slash
        key: Logical cache key
        
    Returns:
        Fully-qualified parameter name
    """
    return f"{base_path}/{sanitize_key(key)}"
