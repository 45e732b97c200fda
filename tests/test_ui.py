import pytest

from spiral_catalog.models.records import Car
from spiral_catalog.ui.cards import build_cards
from spiral_catalog.ui.shell import SAMPLE_CARS, sample_folder
from spiral_catalog.utils import parse_id


class TestCards:
    def test_build_from_records_and_dicts(self):
        cards = build_cards(
            [
                Car(id=1, name="Supra", year=1998, engine="2JZ", hp=320, features=["Targa"]),
                {"id": 2, "name": "Golf", "year": 2019, "engine": "TSI", "hp": 150, "features": []},
            ]
        )

        assert [c.key for c in cards] == [1, 2]
        assert cards[0].horsepower == "320 HP"
        assert cards[0].has_features
        assert not cards[1].has_features

    def test_empty(self):
        assert build_cards([]) == []


class TestSamples:
    def test_sample_folder(self):
        assert sample_folder(2) == {
            "name": "Folder 3",
            "url": "https://example.com/folder-3",
            "isPrivate": False,
        }

    def test_sample_cars_are_complete(self):
        for car in SAMPLE_CARS:
            assert {"name", "year", "engine", "hp", "features"} <= car.keys()


class TestParseId:
    @pytest.mark.parametrize("raw, expected", [("1", 1), ("042", 42), ("-3", -3), ("+7", 7)])
    def test_valid(self, raw, expected):
        assert parse_id(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "12abc", " 1", "1_000"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_id(raw)
