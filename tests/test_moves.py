"""Tests for move parsing and labels."""

import pytest

from xi_tui.commands.errors import ExpectedArgument, TooManyArguments, UnknownCommand
from xi_tui.commands.moves import (
    ABSOLUTE_MOVES,
    RELATIVE_MOVES,
    absolute_move_label,
    parse_absolute_move,
    parse_relative_move,
    relative_move_label,
)
from xi_tui.commands.types import (
    AbsoluteMove,
    AbsoluteMovePoint,
    LineNumber,
    RelativeMove,
    RelativeMoveDistance,
)


class TestParseRelativeMove:
    """Test the move argument grammar."""

    @pytest.mark.parametrize(
        "token,by,forward",
        [
            ("d", RelativeMoveDistance.LINES, True),
            ("down", RelativeMoveDistance.LINES, True),
            ("u", RelativeMoveDistance.LINES, False),
            ("up", RelativeMoveDistance.LINES, False),
            ("r", RelativeMoveDistance.CHARACTERS, True),
            ("right", RelativeMoveDistance.CHARACTERS, True),
            ("l", RelativeMoveDistance.CHARACTERS, False),
            ("left", RelativeMoveDistance.CHARACTERS, False),
            ("pd", RelativeMoveDistance.PAGES, True),
            ("page-down", RelativeMoveDistance.PAGES, True),
            ("pu", RelativeMoveDistance.PAGES, False),
            ("page-up", RelativeMoveDistance.PAGES, False),
        ],
    )
    def test_directions(self, token, by, forward):
        """Every direction token should map to its distance."""
        assert parse_relative_move(token) == RelativeMove(by=by, forward=forward)

    @pytest.mark.parametrize("token", sorted(RELATIVE_MOVES))
    @pytest.mark.parametrize("second", ["e", "extend", "no", "0"])
    def test_extend_ignores_second_token(self, token, second):
        """Any second token extends; otherwise the result is the same."""
        plain = parse_relative_move(token)
        extended = parse_relative_move(f"{token} {second}")
        assert plain.extend is False
        assert extended.extend is True
        assert (extended.by, extended.forward) == (plain.by, plain.forward)

    def test_empty(self):
        """Empty arguments should ask for one."""
        with pytest.raises(ExpectedArgument) as exc:
            parse_relative_move("")
        assert exc.value.cmd == "move"

    def test_too_many(self):
        """Three tokens are too many."""
        with pytest.raises(TooManyArguments) as exc:
            parse_relative_move("d e e")
        assert (exc.value.cmd, exc.value.expected, exc.value.found) == ("move", 2, 3)

    def test_double_space_counts_empty_token(self):
        """Tokens are split on single spaces."""
        with pytest.raises(TooManyArguments):
            parse_relative_move("d  e")

    def test_unknown(self):
        """Unknown tokens should be reported."""
        with pytest.raises(UnknownCommand) as exc:
            parse_relative_move("sideways")
        assert exc.value.token == "sideways"

    def test_case_sensitive(self):
        """Tokens are matched exactly."""
        with pytest.raises(UnknownCommand):
            parse_relative_move("D")


class TestParseAbsoluteMove:
    """Test the move_to argument grammar."""

    @pytest.mark.parametrize(
        "token,point",
        [
            ("bof", AbsoluteMovePoint.BOF),
            ("beginning-of-file", AbsoluteMovePoint.BOF),
            ("eof", AbsoluteMovePoint.EOF),
            ("end-of-file", AbsoluteMovePoint.EOF),
            ("bol", AbsoluteMovePoint.BOL),
            ("beginning-of-line", AbsoluteMovePoint.BOL),
            ("eol", AbsoluteMovePoint.EOL),
            ("end-of-line", AbsoluteMovePoint.EOL),
        ],
    )
    def test_points(self, token, point):
        """Every named point should parse."""
        assert parse_absolute_move(token) == AbsoluteMove(to=point)

    def test_point_extend(self):
        """A second token extends named points."""
        assert parse_absolute_move("bol x") == AbsoluteMove(
            to=AbsoluteMovePoint.BOL, extend=True
        )

    def test_line_number(self):
        """Numbers become line targets."""
        assert parse_absolute_move("42") == AbsoluteMove(to=LineNumber(42))
        assert parse_absolute_move("0") == AbsoluteMove(to=LineNumber(0))

    def test_line_number_never_extends(self):
        """Line targets ignore the second token."""
        assert parse_absolute_move("42 e").extend is False

    @pytest.mark.parametrize("token", ["abc", "-1", "4.2", "", "18446744073709551616"])
    def test_not_a_line_number(self, token):
        """Anything but an unsigned 64-bit number is unknown."""
        with pytest.raises(UnknownCommand) as exc:
            parse_absolute_move(f"{token} e")
        assert exc.value.token == token

    def test_brackets_not_parsed(self):
        """Brackets are only reachable from the keymap."""
        assert "brackets" not in ABSOLUTE_MOVES
        with pytest.raises(UnknownCommand):
            parse_absolute_move("brackets")

    def test_empty(self):
        """Empty arguments should ask for one."""
        with pytest.raises(ExpectedArgument) as exc:
            parse_absolute_move("")
        assert exc.value.cmd == "move_to"

    def test_too_many(self):
        """Three tokens are too many."""
        with pytest.raises(TooManyArguments) as exc:
            parse_absolute_move("eof a b")
        assert exc.value == TooManyArguments("move_to", 2, 3)


class TestMoveLabels:
    """Test status-line labels for moves."""

    @pytest.mark.parametrize(
        "by,forward,label",
        [
            (RelativeMoveDistance.CHARACTERS, True, "move left"),
            (RelativeMoveDistance.CHARACTERS, False, "move right"),
            (RelativeMoveDistance.LINES, True, "move down"),
            (RelativeMoveDistance.LINES, False, "move up"),
            (RelativeMoveDistance.WORDS, True, "move wordleft"),
            (RelativeMoveDistance.WORDS, False, "move wordright"),
            (RelativeMoveDistance.WORD_ENDS, True, "move wendleft"),
            (RelativeMoveDistance.WORD_ENDS, False, "move wendright"),
            (RelativeMoveDistance.SUBWORDS, True, "move subwordleft"),
            (RelativeMoveDistance.SUBWORDS, False, "move subwordright"),
            (RelativeMoveDistance.SUBWORD_ENDS, True, "move subwendleft"),
            (RelativeMoveDistance.SUBWORD_ENDS, False, "move subwendright"),
            (RelativeMoveDistance.PAGES, True, "move page-down"),
            (RelativeMoveDistance.PAGES, False, "move page-up"),
        ],
    )
    def test_relative_labels(self, by, forward, label):
        """Each distance and direction has a label."""
        assert relative_move_label(RelativeMove(by=by, forward=forward)) == label

    def test_relative_extend(self):
        """Extending moves are marked."""
        move = RelativeMove(by=RelativeMoveDistance.PAGES, forward=False, extend=True)
        assert relative_move_label(move) == "move page-up (e)xtend"

    def test_absolute_labels(self):
        """Named points show their short name."""
        assert absolute_move_label(AbsoluteMove(to=AbsoluteMovePoint.BOF)) == "move bof"
        assert absolute_move_label(AbsoluteMove(to=AbsoluteMovePoint.BRACKETS)) == "move brackets"
        assert (
            absolute_move_label(AbsoluteMove(to=AbsoluteMovePoint.EOL, extend=True))
            == "move eol (e)xtend"
        )

    def test_absolute_line_placeholder(self):
        """Line targets show a placeholder, not the number."""
        assert absolute_move_label(AbsoluteMove(to=LineNumber(42))) == "move <line>"
