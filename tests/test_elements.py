import pytest

from lazaretto.config import MapError
from lazaretto.elements import (
    Elements,
    check_texture_paths,
    parse_color_component,
    parse_color_spec,
    parse_colors,
    parse_elements,
)

LINES = [
    "NO ./north.png",
    "SO ./south.png",
    "WE ./west.png",
    "EA ./east.png",
    "F 220,100,0",
    "C 225,30,0",
    "111",
    "1N1",
    "111",
]


def test_component_plain_digits():
    assert parse_color_component("220") == 220


def test_component_plus_and_whitespace():
    assert parse_color_component(" +42") == 42


def test_component_empty_is_zero():
    assert parse_color_component("") == 0


@pytest.mark.parametrize("text", ["-1", "12a", "1 2", "x"])
def test_component_invalid(text):
    with pytest.raises(MapError):
        parse_color_component(text)


def test_color_spec_strips_whitespace():
    assert parse_color_spec("F 220, 100 ,\t0", 1) == ["220", "100", "0"]


def test_color_spec_drops_empty_components():
    assert parse_color_spec("F 1,,2", 1) == ["1", "2"]


@pytest.mark.parametrize("line", ["F 1,2", "F 1,2,3,4", "F ,,"])
def test_color_spec_invalid(line):
    with pytest.raises(MapError):
        parse_color_spec(line, 1)


def test_parse_elements_valid():
    elements = parse_elements(LINES)
    assert elements.texture_paths == (
        "./north.png",
        "./south.png",
        "./west.png",
        "./east.png",
    )
    assert elements.floor == ["220", "100", "0"]
    assert elements.ceiling == ["225", "30", "0"]


def test_parse_elements_leading_whitespace():
    lines = ["  " + line for line in LINES[:6]]
    assert parse_elements(lines).north == "./north.png"


def test_parse_elements_duplicate_texture():
    with pytest.raises(MapError):
        parse_elements(LINES + ["NO ./other.png"])


def test_parse_elements_duplicate_color():
    with pytest.raises(MapError):
        parse_elements(LINES + ["F 1,2,3"])


def test_parse_elements_missing_identifier():
    with pytest.raises(MapError):
        parse_elements([line for line in LINES if not line.startswith("C")])


def test_parse_elements_extra_word():
    lines = ["NO ./north.png extra"] + LINES[1:]
    with pytest.raises(MapError):
        parse_elements(lines)


def test_parse_elements_tab_after_color_id_not_recognised():
    lines = LINES[:4] + ["F\t1,2,3"] + LINES[5:]
    with pytest.raises(MapError):
        parse_elements(lines)


def test_parse_colors_valid():
    floor, ceiling = parse_colors(parse_elements(LINES))
    assert floor == (220, 100, 0)
    assert ceiling == (225, 30, 0)


def test_parse_colors_out_of_range():
    elements = Elements("a", "b", "c", "d", ["256", "0", "0"], ["1", "2", "3"])
    with pytest.raises(MapError):
        parse_colors(elements)


def test_parse_colors_missing_component():
    elements = Elements("a", "b", "c", "d", ["1", "2"], ["1", "2", "3"])
    with pytest.raises(MapError):
        parse_colors(elements)


def test_check_texture_paths_missing(tmp_path):
    present = tmp_path / "a.png"
    present.write_bytes(b"x")
    with pytest.raises(MapError):
        check_texture_paths([present, tmp_path / "missing.png"])