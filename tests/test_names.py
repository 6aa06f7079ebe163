import pytest

from gedcom_tree.registry import Name, parse_name


@pytest.mark.parametrize(
    "value, expected",
    [
        ("John /Doe/ Jr.", Name(full="John Doe Jr.", given="John", surname="Doe", suffix="Jr.")),
        ("John /Doe/", Name(full="John Doe", given="John", surname="Doe", suffix="")),
        ("/Colleen/", Name(full="Colleen", given="", surname="Colleen", suffix="")),
        ("John /Doe", Name(full="John Doe", given="John", surname="Doe", suffix="")),
        ("  Madonna  ", Name(full="Madonna", given="Madonna", surname="", suffix="")),
        ("Jean /de la Fontaine/", Name(full="Jean de la Fontaine", given="Jean", surname="de la Fontaine", suffix="")),
        ("//", Name(full="", given="", surname="", suffix="")),
        ("", Name(full="", given="", surname="", suffix="")),
    ],
)
def test_parse_name(value, expected):
    assert parse_name(value) == expected


def test_parse_name_extra_slashes_stay_in_suffix():
    name = parse_name("A /B/ C/D")
    assert name.given == "A"
    assert name.surname == "B"
    assert name.suffix == "C/D"
    assert name.full == "A B CD"
