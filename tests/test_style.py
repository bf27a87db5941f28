# test_style.py

import io
import pytest
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from rich.style import Style as RichStyle

from crayon.style import Style, Fixed, Rgb, RED, BLUE, BLACK

ESC = '\x1b'
ATTRIBUTE_CODES = [("bold", 1), ("dimmed", 2), ("italic", 3), ("underline", 4),
                   ("blink", 5), ("reverse", 6), ("hidden", 7)]


class TestPlainStyle:

    def test_plain_passes_text_through(self):
        assert str(Style().paint("TEST")) == "TEST"

    def test_plain_keeps_control_bytes(self):
        text = f"a{ESC}[31mb\n\t"
        assert str(Style.new().paint(text)) == text

    def test_plain_has_empty_prefix_and_suffix(self):
        style = Style.new()
        assert style.is_plain()
        assert style.prefix() == ""
        assert style.suffix() == ""
        assert style.codes() == []

    def test_styled_is_not_plain(self):
        assert not Style.new().bold().is_plain()
        assert not Style.new().background(RED).is_plain()


class TestSerialization:

    @pytest.mark.parametrize("name,code", ATTRIBUTE_CODES)
    def test_single_attribute(self, name, code):
        style = getattr(Style.new(), name)()
        assert str(style.paint("TEST")) == f"{ESC}[{code}mTEST{ESC}[0m"

    def test_attribute_order_is_fixed(self):
        style = Style.new().hidden().bold().underline().dimmed()
        assert style.codes() == ["1", "2", "4", "7"]
        assert style.prefix() == f"{ESC}[1;2;4;7m"

    def test_all_attributes_then_colors(self):
        style = (Style.new().background(Fixed(245)).reverse().foreground(RED)
                 .blink().italic().hidden().underline().dimmed().bold())
        assert str(style.paint("X")) == f"{ESC}[1;2;3;4;5;6;7;31;48;5;245mX{ESC}[0m"

    def test_attribute_then_foreground(self):
        assert str(RED.bold().paint("X")) == f"{ESC}[1;31mX{ESC}[0m"

    def test_background_only(self):
        assert str(Style.new().background(BLUE).paint("X")) == f"{ESC}[44mX{ESC}[0m"

    def test_attribute_then_background(self):
        assert str(Style.new().underline().background(Rgb(1, 2, 3)).paint("X")) \
            == f"{ESC}[4;48;2;1;2;3mX{ESC}[0m"

    def test_blinking_red_on_black(self):
        assert str(RED.on(BLACK).blink().paint("Hello world!")) \
            == f"{ESC}[5;31;40mHello world!{ESC}[0m"

    def test_call_order_does_not_matter(self):
        color_first = Style.new().foreground(RED).background(BLUE).bold().italic()
        attribute_first = Style.new().italic().bold().background(BLUE).foreground(RED)
        assert color_first == attribute_first
        assert str(color_first.paint("X")) == str(attribute_first.paint("X"))


class TestBuilder:

    def test_builder_does_not_mutate_receiver(self):
        a = Style.new()
        b = a.bold()
        assert a.is_plain()
        assert b == Style(is_bold=True)

    def test_setting_twice_is_idempotent(self):
        assert Style.new().bold().bold() == Style.new().bold()
        assert RED.italic().italic() == RED.italic()

    def test_foreground_replaces_previous(self):
        assert Style.new().foreground(RED).foreground(BLUE) == Style(fg=BLUE)

    def test_setter_requires_color(self):
        with pytest.raises(TypeError):
            Style.new().foreground("red")

    @pytest.mark.parametrize("fields", [{"fg": "red"}, {"bg": 41}, {"fg": RED, "bg": "blue"}])
    def test_constructor_requires_color(self, fields):
        with pytest.raises(TypeError):
            Style(**fields)

    def test_style_is_hashable(self):
        assert len({Style.new().bold(), Style(is_bold=True)}) == 1


class TestWriting:

    def test_write_prefix_and_suffix(self):
        buf = io.StringIO()
        style = RED.underline()
        style.write_prefix(buf)
        buf.write("X")
        style.write_suffix(buf)
        assert buf.getvalue() == f"{ESC}[4;31mX{ESC}[0m"

    def test_plain_writes_nothing(self):
        out = Mock()
        Style.new().write_prefix(out)
        Style.new().write_suffix(out)
        out.write.assert_not_called()

    def test_write_errors_propagate(self):
        out = Mock()
        out.write.side_effect = OSError("No space left on device")
        with pytest.raises(OSError, match="No space left"):
            RED.normal().write_prefix(out)


class TestInterop:

    def test_to_rich(self):
        style = RED.on(Fixed(245)).bold().hidden()
        assert style.to_rich() == RichStyle(
            color=RED.to_rich(), bgcolor=Fixed(245).to_rich(), bold=True, conceal=True
        )

    def test_plain_to_rich_is_null(self):
        assert Style.new().to_rich() == RichStyle()

    def test_to_prompt_toolkit(self):
        style = Style.new().underline().bold().foreground(RED).background(Rgb(0, 0, 255))
        assert style.to_prompt_toolkit() == "bold underline fg:ansired bg:#0000ff"

    def test_prompt_toolkit_skips_dim(self):
        assert Style.new().dimmed().to_prompt_toolkit() == ""
