"""Tests for permission flag decoding and labels."""

from lexdesk.auth.permission_flags import (
    DML_CREATE,
    DML_DELETE,
    PERM_CREATE,
    PERM_DELETE,
    PERM_UPDATE,
    PERM_VIEW,
    CrudFlags,
    DmlFlags,
    add_flag,
    encode_bitwise,
    get_bitwise_label,
    get_dml_label,
    get_dml_permission,
    get_permission,
    get_view_level_label,
    has_dml_flag,
    has_flag,
    remove_flag,
    toggle_flag,
)


class TestCrudLookup:
    def test_view_only(self):
        assert get_permission(8) == CrudFlags(view=True, create=False, update=False, delete=False)

    def test_full_access(self):
        assert get_permission(15) == CrudFlags(True, True, True, True)

    def test_lookup_agrees_with_bits(self):
        for value in range(16):
            p = get_permission(value)
            assert p.view == bool(value & PERM_VIEW)
            assert p.create == bool(value & PERM_CREATE)
            assert p.update == bool(value & PERM_UPDATE)
            assert p.delete == bool(value & PERM_DELETE)

    def test_out_of_range_is_clamped(self):
        assert get_permission(-3) == get_permission(0)
        assert get_permission(99) == get_permission(15)

    def test_encode_matches_value(self):
        for value in range(16):
            assert encode_bitwise(get_permission(value)) == value

    def test_has_flag(self):
        assert has_flag(9, PERM_VIEW)
        assert has_flag(9, PERM_CREATE)
        assert not has_flag(9, PERM_DELETE)
        assert not has_flag(15, 16)

    def test_flag_arithmetic(self):
        assert add_flag(8, PERM_CREATE) == 9
        assert remove_flag(9, PERM_CREATE) == 8
        assert toggle_flag(8, PERM_VIEW) == 0
        assert toggle_flag(0, PERM_UPDATE) == 2


class TestDmlLookup:
    def test_values(self):
        assert get_dml_permission(5) == DmlFlags(create=True, update=False, delete=True)
        assert get_dml_permission(12) == get_dml_permission(7)

    def test_has_dml_flag(self):
        assert has_dml_flag(5, DML_DELETE)
        assert has_dml_flag(1, DML_CREATE)
        assert not has_dml_flag(7, 8)


class TestLabels:
    def test_bitwise_label_order(self):
        assert get_bitwise_label(15) == "عرض، إنشاء، تحديث، حذف"
        assert get_bitwise_label(8) == "عرض"

    def test_empty_labels(self):
        assert get_bitwise_label(0) == "لا يوجد"
        assert get_dml_label(0) == "لا يوجد"

    def test_dml_label(self):
        assert get_dml_label(6) == "تحديث، حذف"

    def test_view_level_label(self):
        assert get_view_level_label(0) == "بدون وصول"
        assert get_view_level_label(3) == "عرض الكل"
        assert get_view_level_label(9) == "—"
