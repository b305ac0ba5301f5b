from unittest import mock

from termsweeper.canvas import ColorRole
from termsweeper.colors import (
    ColorTable,
    get_all_colors,
    get_all_colors_except_black,
    init_terminal_colors,
)


def test_fresh_table_maps_everything_to_zero():
    table = ColorTable()
    assert [table.color_for_role(role) for role in range(int(ColorRole.Count))] == [0] * int(ColorRole.Count)


def test_set_colored_assigns_source_pairs():
    table = ColorTable()
    table.set_colored()
    assert table.color_for_role(ColorRole.Default) == 1
    assert table.color_for_role(ColorRole.Mine) == 3
    assert table.color_for_role(ColorRole.Number8) == 13
    assert table.color_for_role(ColorRole.Text) == table.color_for_role(ColorRole.Default)


def test_unknown_role_falls_back_to_default():
    table = ColorTable()
    table.set_colored()
    assert table.color_for_role(200) == table.color_for_role(ColorRole.Default)
    assert table.color_for_role(int(ColorRole.Count)) == table.color_for_role(ColorRole.Default)


def test_set_monochrome_uses_one_pair():
    table = ColorTable()
    table.set_colored()
    table.set_monochrome(7)
    assert {table.color_for_role(role) for role in range(int(ColorRole.Count))} == {7}


def test_init_without_color_support_leaves_table_untouched():
    table = ColorTable()
    with mock.patch("termsweeper.colors.curses") as fake_curses:
        fake_curses.has_colors.return_value = False
        init_terminal_colors(table)
    fake_curses.start_color.assert_not_called()
    fake_curses.init_pair.assert_not_called()
    assert table.pairs == ColorTable().pairs


def test_init_with_color_support_registers_pairs():
    table = ColorTable()
    with mock.patch("termsweeper.colors.curses") as fake_curses:
        fake_curses.has_colors.return_value = True
        init_terminal_colors(table)
    fake_curses.start_color.assert_called_once()
    fake_curses.use_default_colors.assert_called_once()
    assert fake_curses.init_pair.call_count == 13
    pair_numbers = [call.args[0] for call in fake_curses.init_pair.call_args_list]
    assert pair_numbers == list(range(1, 14))
    assert all(call.args[2] == -1 for call in fake_curses.init_pair.call_args_list)
    expected = ColorTable()
    expected.set_colored()
    assert table.pairs == expected.pairs


def test_all_colors_lists_distinct_roles():
    colors = get_all_colors()
    assert len(colors) == len(set(colors))
    assert colors[0] is ColorRole.Default
    assert ColorRole.Number7 in colors


def test_except_black_drops_only_black():
    colors = get_all_colors()
    without_black = get_all_colors_except_black()
    assert ColorRole.Number7 not in without_black
    assert [role for role in colors if role is not ColorRole.Number7] == without_black