"""Alias table: merge several author emails into one canonical identity.

The alias file is a TOML document with a single ``[aliases]`` table mapping
each canonical email to the addresses that should be folded into it::

    [aliases]
    "alice@example.com" = ["alice@old-job.com", "Alice@Example.COM "]
    "bob@example.com" = "bob.smith@users.noreply.github.com"

Group keys are applied in sorted order so conflicting declarations resolve
the same way on every run, whatever order the file lists them in.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Optional, Union

from ..config import load_toml_file
from ..exceptions import AliasFileError
from ..logging_config import get_logger

logger = get_logger(__name__)


def normalize_identifier(raw: str) -> str:
    return raw.strip().lower()


@dataclass(frozen=True)
class AliasTable:
    """Read-only mapping of normalized raw id -> normalized canonical id.

    No canonical value is ever also a key: chains are collapsed when the
    table is built, so resolution is always a single lookup.
    """

    mapping: Mapping[str, str] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()
    source: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, raw_id: object) -> bool:
        return raw_id in self.mapping

    def canonical_ids(self) -> set[str]:
        return set(self.mapping.values())


EMPTY_ALIAS_TABLE = AliasTable()


def resolve(raw_id: str, table: AliasTable) -> str:
    """Return the canonical id for ``raw_id``.

    Unknown ids are their own canonical id. Resolving a canonical id again
    returns it unchanged.
    """
    normalized = normalize_identifier(raw_id)
    return table.mapping.get(normalized, normalized)


def build_alias_table(
    groups: Mapping[str, Iterable[str]], source: Optional[str] = None
) -> AliasTable:
    """Invert ``canonical -> [alias, ...]`` groups into an AliasTable.

    Conflicts never abort the build. Each one is logged as a warning and
    recorded on the returned table:

    - a canonical already registered as someone else's alias is ignored as a
      canonical, along with its whole group;
    - an alias claimed by two canonicals goes to the group applied last;
    - an alias that is also declared as a canonical is used as an alias;
    - chains left over (``a -> b`` and ``b -> c``) collapse to ``a -> c``.
    """
    warnings: list[str] = []

    def warn(message: str) -> None:
        warnings.append(message)
        logger.warning(message)

    # Normalize keys first; two spellings of the same canonical merge.
    normalized_groups: dict[str, list[str]] = {}
    for canonical, aliases in groups.items():
        key = normalize_identifier(canonical)
        if not key:
            continue
        normalized_groups.setdefault(key, []).extend(
            normalize_identifier(alias) for alias in aliases
        )

    declared_canonicals = set(normalized_groups)
    alias_map: dict[str, str] = {}

    for canonical in sorted(normalized_groups):
        if canonical in alias_map:
            warn(
                f"Canonical email '{canonical}' is already listed as an alias for "
                f"'{alias_map[canonical]}'; ignoring it as a canonical. "
                "Check your aliases file."
            )
            continue

        for alias in normalized_groups[canonical]:
            if not alias or alias == canonical:
                continue

            existing = alias_map.get(alias)
            if existing is not None and existing != canonical:
                warn(
                    f"Alias '{alias}' is mapped to multiple canonical emails "
                    f"('{existing}' and '{canonical}'). Using '{canonical}'. "
                    "Check your aliases file."
                )
            if alias in declared_canonicals:
                warn(
                    f"Email '{alias}' is listed both as an alias (for '{canonical}') "
                    "and as a canonical email itself. Using it as an alias."
                )
            alias_map[alias] = canonical

    for alias in sorted(alias_map):
        target = _follow_chain(alias, alias_map)
        if target != alias_map[alias]:
            warn(
                f"Alias '{alias}' points at '{alias_map[alias]}', which is itself an "
                f"alias; collapsing to '{target}'."
            )
            alias_map[alias] = target

    return AliasTable(mapping=alias_map, warnings=tuple(warnings), source=source)


def _follow_chain(alias: str, alias_map: Mapping[str, str]) -> str:
    seen = {alias}
    current = alias_map[alias]
    while current in alias_map and current not in seen:
        seen.add(current)
        current = alias_map[current]
    return current


def load_alias_table(path: Optional[Union[str, Path]]) -> AliasTable:
    """Load an alias file into an AliasTable.

    A missing file is not an error: a warning is logged and an empty table
    returned. A file that exists but cannot be read or parsed raises.

    Raises:
        AliasFileError: If the file is unreadable, not valid TOML, or its
            ``[aliases]`` table is malformed.
    """
    if path is None or str(path) == "":
        return EMPTY_ALIAS_TABLE

    path = Path(path)
    logger.info("Loading aliases from %s", path)

    if not path.exists():
        message = f"Alias file not found at {path}, proceeding without aliases."
        logger.warning(message)
        return AliasTable(warnings=(message,), source=None)

    try:
        document = load_toml_file(path)
    except (OSError, ValueError) as e:
        # tomllib.TOMLDecodeError subclasses ValueError
        raise AliasFileError(path, str(e))

    groups = _parse_alias_groups(document, path)
    table = build_alias_table(groups, source=str(path))
    logger.info("Loaded %d alias mappings", len(table))
    return table


def _parse_alias_groups(document: Mapping, path: Path) -> dict[str, list[str]]:
    section = document.get("aliases")
    if section is None:
        logger.debug("No [aliases] table in %s", path)
        return {}
    if not isinstance(section, Mapping):
        raise AliasFileError(path, "'aliases' must be a table of canonical = [aliases]")

    groups: dict[str, list[str]] = {}
    for canonical, aliases in section.items():
        if isinstance(aliases, str):
            aliases = [aliases]
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise AliasFileError(
                path, f"aliases for '{canonical}' must be a string or a list of strings"
            )
        groups[canonical] = aliases
    return groups
