import pytest

from vttscan import ScannerConfig, Time


def test_time_defaults_to_zero():
    assert Time().presentation() == 0
    assert str(Time()) == "00:00:00.000"


def test_time_rejects_denormalized_fields():
    with pytest.raises(ValueError):
        Time(0, 60, 0, 0)
    with pytest.raises(ValueError):
        Time(0, 0, 60, 0)
    with pytest.raises(ValueError):
        Time(0, 0, 0, 1000)
    with pytest.raises(ValueError):
        Time(-1, 0, 0, 0)


def test_presentation():
    assert Time(1, 2, 3, 456).presentation() == ((1 * 60 + 2) * 60 + 3) * 1000 + 456


def test_from_presentation_normalizes():
    assert Time.from_presentation(3725500) == Time(1, 2, 5, 500)
    assert Time.from_presentation(999) == Time(0, 0, 0, 999)
    assert Time.from_presentation(100 * 3600 * 1000) == Time(100, 0, 0, 0)


def test_from_presentation_negative_is_zero():
    assert Time.from_presentation(-5) == Time()


def test_presentation_round_trip():
    for ms in (0, 1, 59999, 60000, 3599999, 3600000, 86400123, 2 ** 40):
        t = Time.from_presentation(ms)
        assert t.presentation() == ms
        assert Time.from_presentation(t.presentation()) == t


def test_order_matches_presentation():
    times = [
        Time(0, 0, 0, 0),
        Time(0, 0, 0, 999),
        Time(0, 0, 1, 0),
        Time(0, 59, 59, 999),
        Time(1, 0, 0, 0),
        Time(1, 0, 0, 1),
    ]
    for a in times:
        for b in times:
            assert (a < b) == (a.presentation() < b.presentation())
            assert (a <= b) == (a.presentation() <= b.presentation())
            assert (a == b) == (a.presentation() == b.presentation())


def test_arithmetic():
    t = Time(0, 0, 59, 500)
    assert t + 500 == Time(0, 1, 0, 0)
    assert t - 500 == Time(0, 0, 59, 0)
    assert Time(0, 1, 0, 0) - t == 500
    assert t - Time(0, 1, 0, 0) == -500


def test_arithmetic_clamps_at_zero():
    assert Time(0, 0, 1, 0) - 5000 == Time()
    assert Time(0, 0, 1, 0) + (-5000) == Time()


def test_str_wide_hours():
    assert str(Time(123, 4, 5, 6)) == "123:04:05.006"


def test_time_rejects_non_integer_fields():
    with pytest.raises(TypeError):
        Time(0, 1.5, 0, 0)
    with pytest.raises(TypeError):
        Time(0, 0, 0, "5")
    with pytest.raises(TypeError):
        Time(True, 0, 0, 0)


def test_scanner_config_rejects_non_ascii_compatible_encodings():
    for encoding in ("utf-16", "utf-16-le", "utf-32", "cp037"):
        with pytest.raises(ValueError):
            ScannerConfig(encoding=encoding)
    with pytest.raises(ValueError):
        ScannerConfig(encoding="no-such-codec")


def test_scanner_config_accepts_ascii_compatible_encodings():
    assert ScannerConfig().encoding == "utf-8"
    assert ScannerConfig(encoding="latin-1").encoding == "latin-1"
    assert ScannerConfig(encoding="cp1252", errors="replace").errors == "replace"
