"""Tests for the Screen grid and its drawing methods."""

import pytest

from ascii_graphics.core.border import BorderStyle
from ascii_graphics.core.screen import Screen, _round_half_away, create


class TestGrid:
    """Tests for construction and cell access."""

    def test_create(self) -> None:
        screen = create(10, 4)
        assert screen.width == 10
        assert screen.height == 4
        assert all(char == ' ' for _, _, char in screen.cells())

    def test_render_shape(self) -> None:
        rows = Screen(7, 3, '.').render()
        assert rows == ['.......'] * 3

    def test_from_size(self) -> None:
        screen = Screen.from_size((10, 20))
        assert (screen.width, screen.height) == (10, 20)

    def test_non_positive_size(self) -> None:
        with pytest.raises(ValueError):
            Screen(0, 5)
        with pytest.raises(ValueError):
            Screen(5, -1)

    def test_get_set(self) -> None:
        screen = Screen(5, 5, '*')
        screen.set(0, 0, 'a')
        screen[1, 4] = 'b'
        assert screen.get(0, 0) == 'a'
        assert screen[1, 4] == 'b'

    def test_set_does_not_alias_rows(self) -> None:
        screen = Screen(4, 3, '.')
        screen.set(3, 1, 'x')
        assert screen.render() == ['....', '...x', '....']

    @pytest.mark.parametrize("x, y", [(5, 0), (0, 4), (5, 4), (-1, 0), (0, -1)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        screen = Screen(5, 4)
        with pytest.raises(IndexError, match="index out of bounds"):
            screen.get(x, y)
        with pytest.raises(IndexError):
            screen.set(x, y, 'x')

    def test_set_rejects_strings(self) -> None:
        screen = Screen(5, 5)
        with pytest.raises(ValueError):
            screen.set(0, 0, 'ab')

    @pytest.mark.parametrize("value", ['\n', '\r', '\x0b', ' '])
    def test_rejects_line_breaks(self, value: str) -> None:
        screen = Screen(3, 3)
        with pytest.raises(ValueError):
            screen.set(0, 0, value)
        with pytest.raises(ValueError):
            screen.background(value)
        with pytest.raises(ValueError):
            screen.fill(value)
        with pytest.raises(ValueError):
            screen.stroke(value)
        with pytest.raises(ValueError):
            Screen(3, 3, value)
        assert screen.render() == ['   '] * 3

    def test_text_with_line_break_fails(self) -> None:
        with pytest.raises(ValueError):
            Screen(5, 1).text("a\nb", 0, 0)

    def test_str(self) -> None:
        screen = Screen(2, 2, 'o')
        assert str(screen) == "oo\noo"

    def test_copy_is_independent(self) -> None:
        screen = Screen(3, 3).fill('#')
        other = screen.copy()
        other.set(0, 0, 'x')
        assert screen.get(0, 0) == ' '
        assert other.fill_enabled is True
        assert other.fill_char == '#'


class TestShiftLeft:
    """Pins down the swap-based shift, which does not clear vacated columns."""

    def test_shift_by_one_rotates(self) -> None:
        screen = create(5, 5).solid_border('*')
        screen.shift_left(1)
        assert screen.render() == [
            '*****',
            '   **',
            '   **',
            '   **',
            '*****',
        ]

    def test_shift_by_two_keeps_trailing_content(self) -> None:
        screen = create(5, 5).solid_border('*')
        screen.shift_left(2)
        assert screen.render()[1] == '  * *'

    def test_shift_pattern(self) -> None:
        screen = Screen(5, 1)
        screen.text("abcde", 0, 0)
        screen.shift_left(2)
        assert screen.render() == ['cdeba']

    def test_shift_operator(self) -> None:
        screen = Screen(3, 1)
        screen.text("abc", 0, 0)
        screen <<= 1
        assert screen.render() == ['bca']

    def test_shift_by_width_is_noop(self) -> None:
        screen = Screen(3, 1)
        screen.text("abc", 0, 0)
        screen.shift_left(3).shift_left(0)
        assert screen.render() == ['abc']

    def test_shift_too_far(self) -> None:
        with pytest.raises(IndexError):
            Screen(3, 3).shift_left(4)
        with pytest.raises(IndexError):
            Screen(3, 3).shift_left(-1)


class TestDrawState:
    """Tests for fill and stroke toggles."""

    def test_defaults(self) -> None:
        screen = create(3, 3)
        assert screen.fill_enabled is False
        assert screen.stroke_enabled is False

    def test_toggles_keep_character(self) -> None:
        screen = create(3, 3).fill('#').stroke('*')
        screen.no_fill().no_stroke()
        assert screen.fill_char == '#'
        assert screen.stroke_char == '*'
        screen.fill().stroke()
        assert screen.fill_enabled and screen.stroke_enabled
        assert screen.fill_char == '#'
        assert screen.stroke_char == '*'

    def test_toggles_do_not_draw(self) -> None:
        screen = create(3, 3).fill('#').stroke('*').no_fill()
        assert screen.render() == ['   '] * 3


class TestBackgroundAndBorders:
    """Tests for whole-screen drawing."""

    def test_background(self) -> None:
        screen = create(4, 4).background('#')
        assert screen.render() == ['####'] * 4

    def test_background_idempotent(self) -> None:
        once = create(4, 3).background('x')
        twice = create(4, 3).background('x').background('x')
        assert once.render() == twice.render()

    def test_solid_border(self) -> None:
        screen = create(5, 5).solid_border('*')
        assert screen.render() == [
            '*****',
            '*   *',
            '*   *',
            '*   *',
            '*****',
        ]

    def test_solid_border_matches_border(self) -> None:
        solid = create(6, 4).solid_border('@')
        styled = create(6, 4).border(BorderStyle.full('@', '@', '@', '@', '@'))
        assert solid.render() == styled.render()

    def test_border(self) -> None:
        screen = create(5, 4).border(BorderStyle.full('+', 't', 'b', 'l', 'r'))
        assert screen.render() == [
            '+ttt+',
            'l   r',
            'l   r',
            '+bbb+',
        ]

    def test_border_symmetric(self) -> None:
        screen = create(5, 5).border(BorderStyle.symmetric('+', '-', '|'))
        assert screen.render() == [
            '+---+',
            '|   |',
            '|   |',
            '|   |',
            '+---+',
        ]

    def test_box_border(self) -> None:
        screen = create(4, 3).box_border("single")
        assert screen.render() == ['┌──┐', '│  │', '└──┘']

    def test_box_border_double(self) -> None:
        screen = create(3, 3).box_border("double")
        assert screen.render() == ['╔═╗', '║ ║', '╚═╝']

    def test_box_border_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown box style"):
            create(3, 3).box_border("round")


class TestText:
    """Tests for text placement and truncation."""

    def test_text(self, dashes: Screen) -> None:
        dashes.text("hello", 0, 3)
        assert dashes.render() == ['-----', '-----', '-----', 'hello', '-----']

    def test_text_truncates(self, dashes: Screen) -> None:
        dashes.text("hello world", 0, 3)
        assert dashes.render()[3] == 'hello'

    def test_text_offset_truncates(self, dashes: Screen) -> None:
        dashes.text("abc", 3, 0)
        assert dashes.render()[0] == '---ab'

    def test_text_past_right_edge_writes_nothing(self, dashes: Screen) -> None:
        dashes.text("abc", 5, 99)
        assert dashes.render() == ['-----'] * 5

    def test_empty_text(self, dashes: Screen) -> None:
        dashes.text("", 0, 99)
        assert dashes.render() == ['-----'] * 5

    def test_text_bad_row(self, dashes: Screen) -> None:
        with pytest.raises(IndexError):
            dashes.text("abc", 0, 5)


class TestRect:
    """Tests for rectangle rasterization."""

    def test_fill_and_stroke(self, dashes: Screen) -> None:
        dashes.fill('#').stroke('*').rect(2, 2, 2, 2)
        assert dashes.render() == [
            '-----',
            '-***-',
            '-*#*-',
            '-***-',
            '-----',
        ]

    def test_fill_only(self, dashes: Screen) -> None:
        dashes.fill('#').rect(2, 2, 2, 2)
        assert dashes.render()[1:4] == ['-###-'] * 3

    def test_stroke_only(self, dashes: Screen) -> None:
        dashes.stroke('*').rect(2, 2, 4, 4)
        assert dashes.render() == [
            '*****',
            '*---*',
            '*---*',
            '*---*',
            '*****',
        ]

    def test_odd_size_rounds_down(self, dashes: Screen) -> None:
        dashes.fill('#').rect(2, 2, 3, 1)
        assert dashes.render()[1:4] == ['-----', '-###-', '-----']

    def test_nothing_enabled(self, dashes: Screen) -> None:
        dashes.rect(2, 2, 2, 2)
        assert dashes.render() == ['-----'] * 5

    def test_out_of_bounds(self, dashes: Screen) -> None:
        with pytest.raises(IndexError):
            dashes.fill('#').rect(0, 0, 2, 2)


class TestLine:
    """Tests for slope-stepping line rasterization."""

    def _marked(self, screen: Screen) -> set[tuple[int, int]]:
        return {(x, y) for x, y, char in screen.cells() if char == '*'}

    def test_no_stroke_is_noop(self) -> None:
        screen = create(5, 5).line(0, 1, 3, 4)
        assert self._marked(screen) == set()

    def test_diagonal(self) -> None:
        screen = create(5, 5).stroke('*').line(0, 1, 3, 4)
        assert self._marked(screen) == {(0, 1), (1, 2), (2, 3), (3, 4)}

    def test_one_cell_per_column(self) -> None:
        screen = create(10, 10).stroke('*').line(0, 1, 9, 6)
        marked = sorted(self._marked(screen))
        assert [x for x, _ in marked] == list(range(10))
        ys = [y for _, y in marked]
        assert ys == sorted(ys)

    def test_endpoint_order_does_not_matter(self) -> None:
        a = create(5, 5).stroke('*').line(0, 1, 3, 4)
        b = create(5, 5).stroke('*').line(3, 4, 0, 1)
        assert a.render() == b.render()

    def test_negative_slope(self) -> None:
        screen = create(5, 5).stroke('*').line(0, 3, 3, 0)
        assert self._marked(screen) == {(0, 3), (1, 2), (2, 1), (3, 0)}

    def test_rounds_half_away_from_zero(self) -> None:
        screen = create(3, 3).stroke('*').line(0, 0, 2, 1)
        assert self._marked(screen) == {(0, 0), (1, 1), (2, 1)}

    def test_horizontal(self) -> None:
        screen = create(5, 3).stroke('*').line(1, 1, 3, 1)
        assert screen.render() == ['     ', ' *** ', '     ']

    def test_steep_line_has_gaps(self) -> None:
        screen = create(5, 5).stroke('*').line(0, 0, 1, 4)
        assert self._marked(screen) == {(0, 0), (1, 4)}

    def test_vertical_line_is_one_cell(self) -> None:
        down = create(5, 5).stroke('*').line(2, 1, 2, 4)
        up = create(5, 5).stroke('*').line(2, 4, 2, 1)
        assert self._marked(down) == {(2, 1)}
        assert self._marked(up) == {(2, 4)}

    def test_single_precision_rounds_down_near_half(self) -> None:
        screen = create(7, 5).stroke('*').line(0, 3, 6, 2)
        assert self._marked(screen) == {
            (0, 3), (1, 3), (2, 3), (3, 2), (4, 2), (5, 2), (6, 2),
        }

    def test_single_precision_rounds_up_near_half(self) -> None:
        screen = create(7, 5).stroke('*').line(0, 3, 6, 4)
        assert (3, 4) in self._marked(screen)
        assert (3, 3) not in self._marked(screen)

    @pytest.mark.parametrize("value, expected", [
        (0.49999999999999994, 0),
        (0.5, 1),
        (2.5, 3),
        (-2.5, -3),
        (-0.49999999999999994, 0),
        (1.4, 1),
    ])
    def test_round_half_away(self, value: float, expected: int) -> None:
        assert _round_half_away(value) == expected

    def test_single_point(self) -> None:
        screen = create(3, 3).stroke('*').line(1, 1, 1, 1)
        assert self._marked(screen) == {(1, 1)}

    def test_out_of_bounds(self) -> None:
        with pytest.raises(IndexError):
            create(5, 5).stroke('*').line(0, 0, 5, 0)


class TestCircle:
    """Tests for squared-distance circle rasterization."""

    @staticmethod
    def _dist(i: int, j: int) -> int:
        return (i - 5) ** 2 + (j - 5) ** 2

    def test_fill_and_stroke(self) -> None:
        screen = Screen(11, 11, '-').fill('#').stroke('*').circle(5, 5, 3)
        for x, y, char in screen.cells():
            d = self._dist(x, y)
            if d < 9:
                assert char == '#', (x, y)
            elif d in (9, 10):
                assert char == '*', (x, y)
            else:
                assert char == '-', (x, y)

    def test_stroke_only(self) -> None:
        screen = Screen(11, 11, '-').stroke('*').circle(5, 5, 3)
        for x, y, char in screen.cells():
            assert (char == '*') == (self._dist(x, y) in (9, 10)), (x, y)

    def test_fill_only(self) -> None:
        screen = Screen(11, 11, '-').fill('#').circle(5, 5, 3)
        for x, y, char in screen.cells():
            assert (char == '#') == (self._dist(x, y) < 9), (x, y)

    def test_ring_cells(self) -> None:
        screen = Screen(11, 11, '-').stroke('*').circle(5, 5, 3)
        # d == 9 on the axes, d == 10 at the (3, 1) offsets
        assert screen.get(8, 5) == '*'
        assert screen.get(5, 2) == '*'
        assert screen.get(8, 6) == '*'
        assert screen.get(7, 7) == '-'

    def test_out_of_bounds(self) -> None:
        with pytest.raises(IndexError):
            create(5, 5).fill('#').circle(1, 1, 3)


class TestChaining:
    """The fluent interface returns the same screen."""

    def test_methods_return_self(self) -> None:
        screen = create(10, 10)
        result = (screen
            .background(' ')
            .border(BorderStyle.symmetric('+', '-', '|'))
            .stroke('0')
            .line(2, 6, 6, 2)
            .text("hello", 2, 8))
        assert result is screen
        assert screen.render() == [
            '+--------+',
            '|        |',
            '|     0  |',
            '|    0   |',
            '|   0    |',
            '|  0     |',
            '| 0      |',
            '|        |',
            '| hello  |',
            '+--------+',
        ]
