import xml.etree.ElementTree as ET

import pytest

from xlsxparts.color import Argb, XlsxColor, from_argb_string, to_argb_string


def test_parse_eight_digit_string():
    assert from_argb_string("FF112233") == Argb(0xFF, 0x11, 0x22, 0x33)


def test_six_digit_string_has_zero_alpha():
    color = from_argb_string("112233")
    assert color == Argb(0, 0x11, 0x22, 0x33)


@pytest.mark.parametrize("text", ["", "123", "1234567", "123456789"])
def test_other_lengths_give_all_zero(text):
    assert from_argb_string(text) == Argb(0, 0, 0, 0)


def test_non_hex_pair_reads_as_zero():
    assert from_argb_string("FFZZ2233") == Argb(0xFF, 0, 0x22, 0x33)


@pytest.mark.parametrize("text", ["FF112233", "00ABCDEF", "80000000", "FFFFFFFF"])
def test_argb_string_round_trip(text):
    assert to_argb_string(from_argb_string(text)) == text


def test_lower_case_input_formats_upper_case():
    assert to_argb_string(from_argb_string("ffabcdef")) == "FFABCDEF"


def test_argb_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Argb(256, 0, 0, 0)
    with pytest.raises(ValueError):
        Argb(0, -1, 0, 0)


def test_argb_rejects_non_int():
    with pytest.raises(TypeError):
        Argb(1.5, 0, 0, 0)


def test_kind_predicates():
    rgb = XlsxColor(from_argb_string("FF000000"))
    indexed = XlsxColor(7)
    theme = XlsxColor(("1", "0.5"))
    invalid = XlsxColor()
    assert [rgb.is_rgb_color(), rgb.is_indexed_color(), rgb.is_theme_color(), rgb.is_invalid()] == [
        True, False, False, False]
    assert [indexed.is_rgb_color(), indexed.is_indexed_color(), indexed.is_theme_color()] == [
        False, True, False]
    assert [theme.is_rgb_color(), theme.is_indexed_color(), theme.is_theme_color()] == [
        False, False, True]
    assert invalid.is_invalid() is True


def test_accessors_fall_back():
    rgb = XlsxColor(from_argb_string("FF010203"))
    assert rgb.indexed_color == -1
    assert rgb.theme_color == ()
    assert XlsxColor(4).rgb_color is None
    assert XlsxColor(4).indexed_color == 4


def test_theme_list_becomes_tuple():
    assert XlsxColor(["2", ""]).theme_color == ("2", "")


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        XlsxColor("red")
    with pytest.raises(TypeError):
        XlsxColor(True)


def test_rgb_element():
    element = XlsxColor(from_argb_string("FF112233")).to_element("fgColor")
    assert element.tag == "fgColor"
    assert element.attrib == {"rgb": "FF112233"}


def test_default_node_name_and_auto():
    element = XlsxColor().to_element("")
    assert element.tag == "color"
    assert element.attrib == {"auto": "1"}


def test_theme_element_omits_empty_tint():
    assert XlsxColor(("3", "")).to_element("color").attrib == {"theme": "3"}
    assert XlsxColor(("3", "0.4")).to_element("color").attrib == {"theme": "3", "tint": "0.4"}


def test_indexed_element():
    assert XlsxColor(64).to_element("bgColor").attrib == {"indexed": "64"}


@pytest.mark.parametrize(
    "color",
    [
        XlsxColor(from_argb_string("FF112233")),
        XlsxColor(12),
        XlsxColor(("5", "-0.25")),
        XlsxColor(("5", "")),
    ],
)
def test_element_round_trip(color):
    assert XlsxColor.from_element(color.to_element("color")) == color


def test_from_element_without_known_attributes_is_invalid():
    assert XlsxColor.from_element(ET.Element("color", {"auto": "1"})).is_invalid()


def test_from_element_bad_index_reads_zero():
    color = XlsxColor.from_element(ET.Element("color", {"indexed": "x"}))
    assert color.indexed_color == 0