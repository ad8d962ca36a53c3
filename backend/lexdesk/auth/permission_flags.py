"""
Permission flag tables: how the integer fields of a permission profile
decode into view / create / update / delete switches.

Documents, clients, sessions and finance use a 4-bit value (0-15):

    PERM_CREATE = 1, PERM_UPDATE = 2, PERM_DELETE = 4, PERM_VIEW = 8

Cases and tasks split visibility from data changes: a view level (0-3)
and a 3-bit DML value (0-7):

    DML_CREATE = 1, DML_UPDATE = 2, DML_DELETE = 4

Decoding goes through explicit lookup tables rather than bit tests, so an
out-of-range value is clamped into the table before it is read.
"""

from typing import NamedTuple

PERM_CREATE = 1
PERM_UPDATE = 2
PERM_DELETE = 4
PERM_VIEW = 8

DML_CREATE = 1
DML_UPDATE = 2
DML_DELETE = 4

LABEL_VIEW = "عرض"
LABEL_CREATE = "إنشاء"
LABEL_UPDATE = "تحديث"
LABEL_DELETE = "حذف"
LABEL_NONE = "لا يوجد"
LABEL_UNKNOWN = "—"
LABEL_SEPARATOR = "، "


class CrudFlags(NamedTuple):
    view: bool
    create: bool
    update: bool
    delete: bool


class DmlFlags(NamedTuple):
    create: bool
    update: bool
    delete: bool


BITWISE_FLAGS: tuple[tuple[int, str], ...] = (
    (PERM_CREATE, LABEL_CREATE),
    (PERM_UPDATE, LABEL_UPDATE),
    (PERM_DELETE, LABEL_DELETE),
    (PERM_VIEW, LABEL_VIEW),
)

DML_FLAGS: tuple[tuple[int, str], ...] = (
    (DML_CREATE, LABEL_CREATE),
    (DML_UPDATE, LABEL_UPDATE),
    (DML_DELETE, LABEL_DELETE),
)

# All 16 combinations, indexed by value
PERMISSION_LOOKUP: dict[int, CrudFlags] = {
    0: CrudFlags(view=False, create=False, update=False, delete=False),
    1: CrudFlags(view=False, create=True, update=False, delete=False),
    2: CrudFlags(view=False, create=False, update=True, delete=False),
    3: CrudFlags(view=False, create=True, update=True, delete=False),
    4: CrudFlags(view=False, create=False, update=False, delete=True),
    5: CrudFlags(view=False, create=True, update=False, delete=True),
    6: CrudFlags(view=False, create=False, update=True, delete=True),
    7: CrudFlags(view=False, create=True, update=True, delete=True),
    8: CrudFlags(view=True, create=False, update=False, delete=False),
    9: CrudFlags(view=True, create=True, update=False, delete=False),
    10: CrudFlags(view=True, create=False, update=True, delete=False),
    11: CrudFlags(view=True, create=True, update=True, delete=False),
    12: CrudFlags(view=True, create=False, update=False, delete=True),
    13: CrudFlags(view=True, create=True, update=False, delete=True),
    14: CrudFlags(view=True, create=False, update=True, delete=True),
    15: CrudFlags(view=True, create=True, update=True, delete=True),
}

DML_PERMISSION_LOOKUP: dict[int, DmlFlags] = {
    0: DmlFlags(create=False, update=False, delete=False),
    1: DmlFlags(create=True, update=False, delete=False),
    2: DmlFlags(create=False, update=True, delete=False),
    3: DmlFlags(create=True, update=True, delete=False),
    4: DmlFlags(create=False, update=False, delete=True),
    5: DmlFlags(create=True, update=False, delete=True),
    6: DmlFlags(create=False, update=True, delete=True),
    7: DmlFlags(create=True, update=True, delete=True),
}

# Cases & tasks view levels
VIEW_LEVEL_OPTIONS: tuple[tuple[int, str], ...] = (
    (0, "بدون وصول"),
    (1, "عرض البيانات الوصفية"),
    (2, "عرض المعين له"),
    (3, "عرض الكل"),
)


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, int(value)))


def get_permission(value: int) -> CrudFlags:
    """Decode a 0-15 permission value. Out-of-range values are clamped."""
    return PERMISSION_LOOKUP[_clamp(value, 15)]


def decode_bitwise(value: int) -> CrudFlags:
    return get_permission(value)


def encode_bitwise(flags: CrudFlags) -> int:
    value = 0
    if flags.view:
        value |= PERM_VIEW
    if flags.create:
        value |= PERM_CREATE
    if flags.update:
        value |= PERM_UPDATE
    if flags.delete:
        value |= PERM_DELETE
    return value


def has_flag(value: int, flag: int) -> bool:
    p = get_permission(value)
    if flag == PERM_VIEW:
        return p.view
    if flag == PERM_CREATE:
        return p.create
    if flag == PERM_UPDATE:
        return p.update
    if flag == PERM_DELETE:
        return p.delete
    return False


def add_flag(value: int, flag: int) -> int:
    return value | flag


def remove_flag(value: int, flag: int) -> int:
    return value & ~flag


def toggle_flag(value: int, flag: int) -> int:
    return value ^ flag


def get_bitwise_label(value: int) -> str:
    """Human-readable label, e.g. 8 → "عرض", 0 → "لا يوجد"."""
    p = get_permission(value)
    parts = [
        label
        for enabled, label in (
            (p.view, LABEL_VIEW),
            (p.create, LABEL_CREATE),
            (p.update, LABEL_UPDATE),
            (p.delete, LABEL_DELETE),
        )
        if enabled
    ]
    if not parts:
        return LABEL_NONE
    return LABEL_SEPARATOR.join(parts)


def get_view_level_label(value: int) -> str:
    for level, label in VIEW_LEVEL_OPTIONS:
        if level == value:
            return label
    return LABEL_UNKNOWN


def get_dml_permission(value: int) -> DmlFlags:
    """Decode a 0-7 DML value. Out-of-range values are clamped."""
    return DML_PERMISSION_LOOKUP[_clamp(value, 7)]


def has_dml_flag(value: int, flag: int) -> bool:
    p = get_dml_permission(value)
    if flag == DML_CREATE:
        return p.create
    if flag == DML_UPDATE:
        return p.update
    if flag == DML_DELETE:
        return p.delete
    return False


def get_dml_label(value: int) -> str:
    p = get_dml_permission(value)
    parts = [
        label
        for enabled, label in (
            (p.create, LABEL_CREATE),
            (p.update, LABEL_UPDATE),
            (p.delete, LABEL_DELETE),
        )
        if enabled
    ]
    if not parts:
        return LABEL_NONE
    return LABEL_SEPARATOR.join(parts)
