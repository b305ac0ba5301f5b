import pytest

from termsweeper.canvas import CanvasElement, ColorRole, TextAlignment, Vector2D


def test_vector_arithmetic_and_area():
    a = Vector2D(3, 4)
    b = Vector2D(1, 2)
    assert a + b == Vector2D(4, 6)
    assert a - b == Vector2D(2, 2)
    assert a.area() == 12
    assert tuple(a) == (3, 4)


def test_vector_comparisons_are_any_component():
    wide = Vector2D(3, 1)
    tall = Vector2D(1, 3)
    assert wide > tall
    assert tall > wide
    assert wide < tall
    assert not (Vector2D(2, 2) > Vector2D(2, 2))
    assert Vector2D(2, 2) >= Vector2D(2, 2)


def test_vector_division_truncates_toward_zero():
    assert Vector2D(-3, 3) // 2 == Vector2D(-1, 1)


def test_vector_modulo_invariant():
    a = Vector2D(-7, 11)
    b = Vector2D(3, 4)
    rem = a % b
    quotient_x = (a.x - rem.x) // b.x
    assert quotient_x * b.x + rem.x == a.x
    assert abs(rem.x) < abs(b.x) and abs(rem.y) < abs(b.y)
    assert rem.x <= 0 and rem.y >= 0


def test_from_text_empty():
    el = CanvasElement.from_text("")
    assert el.size == Vector2D(0, 0)
    assert el.chars == ""
    assert el.roles == []


def test_from_text_single_line():
    el = CanvasElement.from_text("hello")
    assert el.chars == "hello"
    assert el.size == Vector2D(len("hello"), 1)
    assert el.roles == [ColorRole.Text] * len("hello")


def test_from_text_multiline_dimensions_and_role():
    lines = ["first", "a", "second line"]
    el = CanvasElement.from_text("\n".join(lines), "\n", ColorRole.Mine)
    assert el.width == max(len(line) for line in lines)
    assert el.height == len(lines)
    assert len(el.chars) == el.total_length == len(el.roles)
    assert set(el.roles) == {ColorRole.Mine}


def test_from_text_custom_delimiter():
    el = CanvasElement.from_text("ab|cd", "|")
    assert el.size == Vector2D(2, 2)
    assert el.to_printable_string("\n") == "ab\ncd\n"


def test_from_text_center_alignment():
    el = CanvasElement.from_text("abc\na", alignment=TextAlignment.Center)
    second = el.to_printable_string("\n").split("\n")[1]
    assert second.strip() == "a"
    assert second.startswith(" ") and second.endswith(" ")
    assert len(second) == len("abc")


def test_from_text_right_alignment():
    el = CanvasElement.from_text("abcd\nab", alignment=TextAlignment.Right)
    rows = el.to_printable_string("\n").split("\n")
    assert rows[1].endswith("ab")
    assert rows[1].lstrip() == "ab"


def test_from_text_left_alignment_odd_difference_pads_left():
    el = CanvasElement.from_text("ab\nc")
    rows = el.to_printable_string("\n").split("\n")
    assert rows[1] == " c"


def test_from_text_left_alignment_even_difference_pads_right():
    el = CanvasElement.from_text("abc\na")
    rows = el.to_printable_string("\n").split("\n")
    assert rows[1].startswith("a")
    assert len(rows[1]) == len("abc")


def test_filled_and_empty():
    size = Vector2D(3, 2)
    el = CanvasElement.filled("abcdef", size, ColorRole.Flag)
    assert el.roles == [ColorRole.Flag] * size.area()
    blank = CanvasElement.empty(size, "#")
    assert blank.chars == "#" * size.area()
    assert blank.roles == [ColorRole.Default] * size.area()


def test_to_printable_string_rows():
    el = CanvasElement.filled("abcdef", Vector2D(3, 2))
    text = el.to_printable_string("|")
    assert text.endswith("|")
    assert text.split("|")[:-1] == ["abc", "def"]


def test_fill_to_size_grows():
    el = CanvasElement.from_text("ab\ncd")
    target = Vector2D(4, 3)
    filled = el.fill_to_size(target, ".")
    assert filled.size == target
    rows = filled.to_printable_string("\n").split("\n")[:-1]
    assert rows[0] == "ab" + ".."
    assert rows[1] == "cd" + ".."
    assert rows[2] == "." * 4
    assert filled.roles[0] == ColorRole.Text
    assert filled.roles[2] == ColorRole.Default
    assert len(filled.roles) == target.area()


def test_fill_to_size_larger_element_unchanged():
    el = CanvasElement.from_text("abc")
    result = el.fill_to_size(Vector2D(2, 5), ".")
    assert result == el
    assert result is not el


def test_merge_below_and_above():
    top = CanvasElement.filled("ab", Vector2D(2, 1), ColorRole.Mine)
    bottom = CanvasElement.filled("cd", Vector2D(2, 1), ColorRole.Flag)
    below = CanvasElement(top.chars, list(top.roles), top.size)
    below.merge_below(bottom)
    assert below.chars == "abcd"
    assert below.size == Vector2D(2, 2)
    assert below.roles == [ColorRole.Mine] * 2 + [ColorRole.Flag] * 2

    above = CanvasElement(top.chars, list(top.roles), top.size)
    above.merge_above(bottom)
    assert above.chars == "cdab"
    assert above.roles == [ColorRole.Flag] * 2 + [ColorRole.Mine] * 2


def test_merge_right_and_left():
    left = CanvasElement.filled("abcd", Vector2D(2, 2), ColorRole.Mine)
    right = CanvasElement.filled("xy", Vector2D(1, 2), ColorRole.Flag)
    merged = CanvasElement(left.chars, list(left.roles), left.size)
    merged.merge_right(right)
    assert merged.size == Vector2D(3, 2)
    assert merged.to_printable_string("|") == "abx|cdy|"
    assert merged.roles[2] == ColorRole.Flag

    merged_left = CanvasElement(left.chars, list(left.roles), left.size)
    merged_left.merge_left(right)
    assert merged_left.to_printable_string("|") == "xab|ycd|"
    assert merged_left.roles[0] == ColorRole.Flag


@pytest.mark.parametrize("method", ["merge_below", "merge_above"])
def test_vertical_merge_width_mismatch(method):
    el = CanvasElement.filled("ab", Vector2D(2, 1))
    other = CanvasElement.filled("abc", Vector2D(3, 1))
    with pytest.raises(ValueError):
        getattr(el, method)(other)
    assert el.chars == "ab"


@pytest.mark.parametrize("method", ["merge_right", "merge_left"])
def test_horizontal_merge_height_mismatch(method):
    el = CanvasElement.filled("ab", Vector2D(1, 2))
    other = CanvasElement.filled("a", Vector2D(1, 1))
    with pytest.raises(ValueError):
        getattr(el, method)(other)
    assert el.size == Vector2D(1, 2)


def test_str_replaces_non_ascii():
    el = CanvasElement.from_text("a\u2593b")
    text = str(el)
    assert text[0] == "a" and text[2] == "b"
    assert text[1] == "?"