import struct

import pytest

from c3lsp.type_size import (
    SymbolCategory,
    describe_size,
    has_size,
    language_type_size,
)


def test_bool_and_chars_are_one_byte():
    assert language_type_size("bool") == 1
    assert language_type_size("char") == 1
    assert language_type_size("ichar") == 1


def test_int_is_four_bytes():
    assert language_type_size("int") == 4


@pytest.mark.parametrize(
    "signed, unsigned",
    [("short", "ushort"), ("int", "uint"), ("long", "ulong"), ("int128", "uint128"), ("iptr", "uptr"), ("isz", "usz")],
)
def test_signed_and_unsigned_share_size(signed, unsigned):
    assert language_type_size(signed, 8) == language_type_size(unsigned, 8)


def test_integer_sizes_double_with_width():
    short = language_type_size("short")
    assert language_type_size("int") == 2 * short
    assert language_type_size("long") == 2 * language_type_size("int")
    assert language_type_size("int128") == 2 * language_type_size("long")
    assert short == 2 * language_type_size("char")


def test_pointer_sized_integers_follow_given_pointer_size():
    assert language_type_size("iptr", 4) == 4
    assert language_type_size("uptr", 8) == 8


def test_pointer_sized_default_is_native():
    assert language_type_size("iptr") == struct.calcsize("P")


@pytest.mark.parametrize("name", ["isz", "usz", "float", "double", "MyStruct", ""])
def test_unsized_types_are_zero(name):
    assert language_type_size(name) == 0


@pytest.mark.parametrize(
    "category",
    [
        SymbolCategory.VARIABLE,
        SymbolCategory.STRUCT,
        SymbolCategory.STRUCT_MEMBER,
        SymbolCategory.BITSTRUCT,
        SymbolCategory.FAULT,
        SymbolCategory.ENUM,
    ],
)
def test_sizeable_categories(category):
    assert has_size(category) is True


def test_unknown_category_has_no_size():
    assert has_size(SymbolCategory.UNKNOWN) is False


@pytest.mark.parametrize("category", [SymbolCategory.VARIABLE, SymbolCategory.STRUCT_MEMBER])
def test_pointer_takes_pointer_size(category):
    assert describe_size(category, "int", True, False, 4) == "4"
    assert describe_size(category, "Foo", True, False, 8) == "8"


@pytest.mark.parametrize("category", [SymbolCategory.VARIABLE, SymbolCategory.STRUCT_MEMBER])
def test_base_type_matches_language_size(category):
    for name in ["bool", "short", "int", "long", "int128", "usz"]:
        assert describe_size(category, name, False, True, 8) == str(language_type_size(name, 8))


def test_non_base_type_variable_is_unknown():
    assert describe_size(SymbolCategory.VARIABLE, "Color", False, False, 8) == "?"


@pytest.mark.parametrize(
    "category",
    [
        SymbolCategory.STRUCT,
        SymbolCategory.BITSTRUCT,
        SymbolCategory.FAULT,
        SymbolCategory.ENUM,
        SymbolCategory.UNKNOWN,
    ],
)
def test_other_categories_are_unknown(category):
    assert describe_size(category, "int", False, True, 8) == "?"
    assert describe_size(category, "int", True, False, 8) == "?"


def test_pointer_default_is_native():
    assert describe_size(SymbolCategory.VARIABLE, "int", True, False) == str(struct.calcsize("P"))