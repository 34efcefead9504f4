#
#
#

"""Pipe-delimited permission strings.

Zone permission endpoints exchange user and group permissions as one flat
string::

    admin|true|true|true|guest|true|false|false

i.e. ``name|canView|canModify|canDelete`` groups joined with ``|``. Sections
that also carry ``canCreate`` use 5-field groups.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

SEPARATOR = '|'


@dataclass(frozen=True)
class Permission:
    name: str
    can_view: bool = False
    can_modify: bool = False
    can_delete: bool = False
    can_create: Optional[bool] = None

    @property
    def width(self) -> int:
        return 4 if self.can_create is None else 5


def _flag(text: str) -> bool:
    return text.strip().lower() == 'true'


def _text(flag: bool) -> str:
    return 'true' if flag else 'false'


def parse_permissions(text: Optional[str], fields: int = 4) -> List[Permission]:
    """Parse a permission string into a list of permissions.

    A trailing group with fewer than ``fields`` items is dropped, not
    reported: the server has been seen to truncate these strings.

    Args:
        text: The pipe-delimited string, None or empty for no permissions
        fields: Group width, 4 or 5 (with canCreate)

    Returns:
        List of Permission, in string order

    Raises:
        ValueError: If fields is not 4 or 5
    """
    if fields not in (4, 5):
        raise ValueError(f'fields must be 4 or 5, not {fields}')
    if not text:
        return []

    parts = text.split(SEPARATOR)
    ret = []
    i = 0
    while i + fields <= len(parts):
        name, view, modify, delete = parts[i : i + 4]
        create = _flag(parts[i + 4]) if fields == 5 else None
        ret.append(
            Permission(
                name=name,
                can_view=_flag(view),
                can_modify=_flag(modify),
                can_delete=_flag(delete),
                can_create=create,
            )
        )
        i += fields
    return ret


def format_permissions(permissions: Iterable[Permission]) -> str:
    permissions = list(permissions)
    widths = set(p.width for p in permissions)
    if len(widths) > 1:
        raise ValueError('cannot mix 4 and 5 field permissions')

    groups = []
    for p in permissions:
        if SEPARATOR in p.name:
            raise ValueError(f'permission name {p.name!r} contains {SEPARATOR}')
        group = [p.name, _text(p.can_view), _text(p.can_modify)]
        group.append(_text(p.can_delete))
        if p.can_create is not None:
            group.append(_text(p.can_create))
        groups.append(SEPARATOR.join(group))
    return SEPARATOR.join(groups)
