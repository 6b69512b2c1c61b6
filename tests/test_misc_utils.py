import pytest

from tba_rankings.utils.misc_utils import format_record, format_team_key, parse_year


class TestParseYear:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (2019, 2019),
            ("2019", 2019),
            ("  2022 ", 2022),
            ("2018abc", 2018),
            ("+2019", 2019),
            (2019.9, 2019),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
            ("9" * 5000, None),
            ("2019" + "0" * 20, None),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_year(value) == expected


class TestFormatting:
    def test_team_key(self):
        assert format_team_key(254) == "frc254"
        assert format_team_key("1678") == "frc1678"

    def test_record(self):
        assert format_record(12, 3, 1) == "12-3-1"
        assert format_record(0, 0, 0) == "0-0-0"
