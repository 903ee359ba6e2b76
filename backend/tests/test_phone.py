from __future__ import annotations

from student_tracker.services.phone import (
    COUNTRY_CODE_PREFIX,
    add_country_code,
    ensure_country_code,
    strip_country_code,
)


def test_prefix_constant() -> None:
    assert COUNTRY_CODE_PREFIX == "+267 "


def test_create_path_always_prefixes() -> None:
    assert add_country_code("72254856") == "+267 72254856"


def test_update_path_prefixes_raw_digits() -> None:
    assert ensure_country_code("71234567") == "+267 71234567"


def test_update_path_does_not_double_prefix() -> None:
    assert ensure_country_code("+267 71234567") == "+267 71234567"


def test_update_path_restores_missing_space() -> None:
    assert ensure_country_code("+26771234567") == "+267 71234567"


def test_strip_country_code() -> None:
    assert strip_country_code("+267 71234567") == "71234567"
    assert strip_country_code("71234567") == "71234567"
    assert strip_country_code("") == ""
