"""
Shader groups and group resolution.

Every discovered function ends up in a group, which becomes one generated
enum. A group is either derived from the function's qualifier or named by the
nearest `//MTLShaderGroup:` marker comment above the declaration.
"""

import bisect
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum, auto

from loguru import logger

from shader_enums.generator.constants import (
    COMPUTE_GROUP_NAME,
    FRAGMENT_GROUP_NAME,
    SWIFT_RESERVED_TYPE_NAMES,
    UNKNOWN_DOCUMENT,
    UNKNOWN_GROUP_NAME,
    VERTEX_GROUP_NAME,
)
from shader_enums.generator.errors import InvalidGroupNameError
from shader_enums.generator.models import Declaration, MarkerComment, Qualifier


class GroupKind(Enum):
    """Kinds of shader groups."""

    VERTEX = auto()
    FRAGMENT = auto()
    COMPUTE = auto()
    UNKNOWN = auto()
    CUSTOM = auto()


DEFAULT_GROUP_NAMES: dict[GroupKind, str] = {
    GroupKind.VERTEX: VERTEX_GROUP_NAME,
    GroupKind.FRAGMENT: FRAGMENT_GROUP_NAME,
    GroupKind.COMPUTE: COMPUTE_GROUP_NAME,
    GroupKind.UNKNOWN: UNKNOWN_GROUP_NAME,
}

QUALIFIER_GROUPS: dict[Qualifier, GroupKind] = {
    Qualifier.VERTEX: GroupKind.VERTEX,
    Qualifier.FRAGMENT: GroupKind.FRAGMENT,
    Qualifier.KERNEL: GroupKind.COMPUTE,
    Qualifier.COMPUTE: GroupKind.COMPUTE,
}


def find_invalid_character(name: str) -> str | None:
    """Return the first character of `name` that is not a basic Latin letter."""
    for ch in name:
        if not ("A" <= ch <= "Z" or "a" <= ch <= "z"):
            return ch
    return None


@dataclass(frozen=True, eq=False)
class ShaderGroup:
    """A named bucket of shader functions.

    Groups are equal, hashed and ordered by their display name, so a custom
    group spelled like a default one is the same group.

    Attributes:
        kind: What the group was derived from
        custom_name: Validated name for custom groups, None otherwise
    """

    kind: GroupKind
    custom_name: str | None = None

    @classmethod
    def for_qualifier(cls, qualifier: Qualifier | None) -> "ShaderGroup":
        """Return the default group of a qualifier (unknown for None)."""
        if qualifier is None:
            return cls(GroupKind.UNKNOWN)
        return cls(QUALIFIER_GROUPS[qualifier])

    @classmethod
    def custom(
        cls, name: str, document_id: str = UNKNOWN_DOCUMENT, line: int = 0
    ) -> "ShaderGroup":
        """Create a custom group from a marker's raw group name.

        Args:
            name: Raw group name candidate
            document_id: Origin of the document, for error reporting
            line: Line of the marker, for error reporting

        Returns:
            Custom group with the trimmed name

        Raises:
            InvalidGroupNameError: If the trimmed name is empty or contains
                anything other than A-Z and a-z, or is reserved for Swift
                metatypes (`Type`, `Protocol`)
        """
        trimmed = name.strip()
        if not trimmed:
            raise InvalidGroupNameError(document_id, line, name, None)
        invalid = find_invalid_character(trimmed)
        if invalid is not None:
            raise InvalidGroupNameError(document_id, line, name, invalid)
        if trimmed in SWIFT_RESERVED_TYPE_NAMES:
            raise InvalidGroupNameError(
                document_id,
                line,
                name,
                None,
                reason=f"{trimmed!r} cannot name a nested Swift type",
            )
        return cls(GroupKind.CUSTOM, trimmed)

    @property
    def display_name(self) -> str:
        if self.kind is GroupKind.CUSTOM:
            return self.custom_name or ""
        return DEFAULT_GROUP_NAMES[self.kind]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShaderGroup):
            return NotImplemented
        return self.display_name == other.display_name

    def __lt__(self, other: "ShaderGroup") -> bool:
        return self.display_name < other.display_name

    def __hash__(self) -> int:
        return hash(self.display_name)

    def __str__(self) -> str:
        return self.display_name


class GroupTable:
    """Function names collected per group.

    A group only appears in the table once a function has been added to it.
    """

    def __init__(self) -> None:
        self._functions: dict[ShaderGroup, set[str]] = {}

    def add(self, group: ShaderGroup, name: str) -> None:
        """Add a function name to a group."""
        self._functions.setdefault(group, set()).add(name)

    def merge(self, other: "GroupTable") -> None:
        """Union another table into this one, group by group."""
        for group, names in other._functions.items():
            self._functions.setdefault(group, set()).update(names)

    def groups(self) -> list[ShaderGroup]:
        """Groups sorted by display name."""
        return sorted(self._functions)

    def functions(self, group: ShaderGroup) -> list[str]:
        """Function names of a group, sorted."""
        return sorted(self._functions.get(group, ()))

    def __contains__(self, group: object) -> bool:
        return group in self._functions

    def __iter__(self) -> Iterator[tuple[ShaderGroup, list[str]]]:
        for group in self.groups():
            yield group, self.functions(group)

    def __len__(self) -> int:
        return len(self._functions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupTable):
            return NotImplemented
        return self._functions == other._functions

    def __repr__(self) -> str:
        body = ", ".join(f"{group}: {names}" for group, names in self)
        return f"GroupTable({{{body}}})"


def resolve_groups(
    declarations: Iterable[Declaration],
    markers: Iterable[MarkerComment],
    document_id: str = UNKNOWN_DOCUMENT,
) -> GroupTable:
    """Assign every declaration to a group.

    The nearest marker at or above a declaration's line names its group;
    declarations with no marker above them use their qualifier's default group.

    Args:
        declarations: Declarations found in one document
        markers: Markers found in the same document
        document_id: Origin of the document, for error reporting

    Returns:
        Table of the document's functions grouped by group

    Raises:
        InvalidGroupNameError: If a marker that applies to a declaration names
            an invalid group
    """
    ordered = sorted(markers, key=lambda marker: marker.line)
    lines = [marker.line for marker in ordered]
    resolved: dict[int, ShaderGroup] = {}
    table = GroupTable()

    for declaration in declarations:
        if not declaration.name:
            continue
        index = bisect.bisect_right(lines, declaration.line) - 1
        if index < 0:
            group = ShaderGroup.for_qualifier(declaration.qualifier)
        else:
            if index not in resolved:
                marker = ordered[index]
                resolved[index] = ShaderGroup.custom(
                    marker.group_name, document_id, marker.line
                )
            group = resolved[index]
        table.add(group, declaration.name)

    logger.debug(f"Resolved groups for {document_id}: {table!r}")
    return table
