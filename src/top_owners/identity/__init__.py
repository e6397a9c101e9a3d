"""Identity resolution: normalize author emails and merge aliases."""

from .aliases import (
    EMPTY_ALIAS_TABLE,
    AliasTable,
    build_alias_table,
    load_alias_table,
    normalize_identifier,
    resolve,
)

__all__ = [
    "AliasTable",
    "EMPTY_ALIAS_TABLE",
    "build_alias_table",
    "load_alias_table",
    "normalize_identifier",
    "resolve",
]
