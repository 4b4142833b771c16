import math
from chromacss.css.tokens import (
    parse_number, parse_percentage, parse_number_255, parse_alpha, parse_hue,
)

def test_parse_number():
    assert parse_number("0") == 0.0
    assert parse_number("-1.25") == -1.25
    assert parse_number("+.5") == 0.5
    assert parse_number("1e2") == 100.0
    assert parse_number("2.5E-1") == 0.25

def test_parse_number_rejects_malformed():
    for token in ["", "abc", "1.", ".", "1..2", "1e", "50%", "1 2", "--1", "inf", "nan"]:
        assert parse_number(token) is None, token

def test_parse_number_rejects_overflow():
    assert parse_number("1e400") is None

def test_parse_percentage():
    assert parse_percentage("50%") == 50.0
    assert parse_percentage("-10%") == -10.0
    assert parse_percentage("150%") == 150.0
    assert parse_percentage("50") is None
    assert parse_percentage("%") is None

def test_parse_number_255():
    assert parse_number_255("128") == 128.0
    assert parse_number_255("100%") == 255.0
    assert abs(parse_number_255("50%") - 127.5) < 1e-12
    assert parse_number_255("300") == 300.0
    assert parse_number_255("x%") is None

def test_parse_alpha_clamps():
    assert parse_alpha("0.5") == 0.5
    assert parse_alpha("50%") == 0.5
    assert parse_alpha("2") == 1.0
    assert parse_alpha("-1") == 0.0
    assert parse_alpha("150%") == 1.0
    assert parse_alpha("half") is None

def test_parse_hue_units():
    assert parse_hue("120") == 120.0
    assert parse_hue("120deg") == 120.0
    assert abs(parse_hue(f"{math.pi}rad") - 180.0) < 1e-9
    assert abs(parse_hue("100grad") - 90.0) < 1e-9
    assert parse_hue("0.25turn") == 90.0

def test_parse_hue_units_case_insensitive():
    assert parse_hue("90DEG") == 90.0
    assert parse_hue("0.5Turn") == 180.0

def test_parse_hue_wraps():
    assert parse_hue("-30") == 330.0
    assert parse_hue("360") == 0.0
    assert parse_hue("720deg") == 0.0
    assert parse_hue("1.5turn") == 180.0

def test_parse_hue_rejects_malformed():
    for token in ["", "deg", "12px", "1 deg", "10%"]:
        assert parse_hue(token) is None, token
