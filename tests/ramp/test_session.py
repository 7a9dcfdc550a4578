from __future__ import annotations

"""入力状態を保持する `RampSession` のテスト。"""

import pytest

from ramp import RampSession, generate_ramp


@pytest.mark.smoke
def test_defaults() -> None:
    """既定のシードと背景色で両ランプを返す。"""
    session = RampSession()
    assert session.current_color == "#1677ff"
    assert session.background_color == "#141414"
    assert session.is_valid_color and session.is_valid_background_color
    assert session.light_colors == generate_ramp("#1677ff")
    assert session.dark_colors == generate_ramp("#1677ff", "dark", "#141414")


def test_text_formats_accepted() -> None:
    """hex・rgb()・hsl() を受け付け、前後の空白は除去する。"""
    session = RampSession()
    assert session.set_color("rgb(255, 0, 0)")
    assert session.current_color == "#ff0000"
    assert session.set_color("hsl(120, 100%, 50%)")
    assert session.current_color == "#00ff00"
    assert session.set_background_color("#000")
    assert session.background_color == "#000000"
    assert session.set_color("  #52C41A\n")
    assert session.current_color == "#52c41a"


def test_invalid_input_keeps_previous_value() -> None:
    """不正な入力は直前の値を保ち、該当ランプを空にする。"""
    session = RampSession()
    assert not session.set_color("not-a-color")
    assert not session.is_valid_color
    assert session.current_color == "#1677ff"
    assert session.light_colors == []
    assert session.dark_colors == []

    assert session.set_color("#52c41a")
    assert not session.set_background_color("#12")
    assert session.light_colors == generate_ramp("#52c41a")
    assert session.dark_colors == []


def test_invalid_initial_values_flagged() -> None:
    """不正な初期値は既定値に置き換えて無効フラグを立てる。"""
    session = RampSession("oops", "#141414")
    assert not session.is_valid_color
    assert session.current_color == "#1677ff"


def test_reverse_sets_seed() -> None:
    """reverse は逆算したシードを現在の色にする。"""
    session = RampSession("#52c41a")
    light = session.light_colors
    assert session.reverse(light[5], 5) == "#52c41a"
    dark = session.dark_colors
    assert session.reverse(dark[5], 5, "dark") == "#52c41a"
    assert session.current_color == "#52c41a"

    session.set_color("bad")
    recovered = session.reverse("#0958d9", 6)
    assert session.is_valid_color
    assert session.current_color == recovered
