from datetime import date

from boxoffice.dates import default_target_date, is_target_date, normalize_date, to_input_value


def test_default_target_date_is_yesterday():
    assert default_target_date(date(2024, 3, 1)) == date(2024, 2, 29)
    assert default_target_date(date(2024, 1, 1)) == date(2023, 12, 31)


def test_normalize_date_input_value():
    assert normalize_date("2024-03-15") == "20240315"


def test_normalize_date_object():
    assert normalize_date(date(2024, 3, 5)) == "20240305"


def test_normalize_date_passes_through_future_dates():
    # No range check; KOBIS answers for those dates itself
    assert normalize_date("2999-12-31") == "29991231"


def test_is_target_date():
    assert is_target_date("20240315")
    assert not is_target_date("2024-03-15")
    assert not is_target_date("2024031")
    assert not is_target_date("２０２４０３１５")


def test_to_input_value():
    assert to_input_value("20240315") == date(2024, 3, 15)
