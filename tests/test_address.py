"""Address formatting across the stored address shapes."""

import pytest

from backoffice.services.address import (
    LegacyCapitalizedAddress,
    LegacyLowercaseAddress,
    NewAddress,
    PlainAddress,
    RawJson,
    format_address,
    get_bairro_from_address,
    parse_address,
    resolve_order_bairro,
)


def test_array_wrapped_capitalized_address_drops_blank_complemento() -> None:
    address = [{"Logradouro": "Rua X", "Número": "10", "Complemento": ""}]

    assert isinstance(parse_address(address), LegacyCapitalizedAddress)
    assert format_address(address) == "Rua X, 10"


def test_capitalized_address_keeps_complemento() -> None:
    address = [{"Logradouro": "Rua X", "Número": "10", "Complemento": " Apto 3 ", "Bairro": "Vila Nova"}]

    assert format_address(address) == "Rua X, 10, Apto 3"
    assert get_bairro_from_address(address) == "Vila Nova"


def test_new_array_shape_and_bairro() -> None:
    address = [{"endereco": "Av Y", "numero": "20", "bairro": "Centro"}]

    assert isinstance(parse_address(address), NewAddress)
    assert format_address(address) == "Av Y, 20"
    assert get_bairro_from_address(address) == "Centro"


def test_new_shape_omits_empty_number() -> None:
    assert format_address([{"endereco": "Av Y", "numero": ""}]) == "Av Y"


def test_plain_string_is_returned_verbatim() -> None:
    assert isinstance(parse_address("Rua Z, 5"), PlainAddress)
    assert format_address("Rua Z, 5") == "Rua Z, 5"
    assert get_bairro_from_address("Rua Z, 5") == ""


def test_null_address() -> None:
    assert parse_address(None) is None
    assert format_address(None) == "N/A"
    assert get_bairro_from_address(None) == ""


def test_unrecognized_object_falls_back_to_json_text() -> None:
    assert isinstance(parse_address({"foo": "bar"}), RawJson)
    assert format_address({"foo": "bar"}) == '{"foo":"bar"}'
    assert get_bairro_from_address({"foo": "bar"}) == ""


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ({"logradouro": "Rua A", "numero": "1", "complemento": "Casa"}, "Rua A, 1, Casa"),
        ({"endereco": "Rua B", "número": "2"}, "Rua B, 2"),
        ({"LOGRADOURO": "Rua C", "Numero": "3"}, "Rua C, 3"),
        ({"Logradouro": "Rua D", "Número": "4", "Complemento": "  "}, "Rua D, 4"),
        ({"numero": "5"}, "5"),
    ],
)
def test_plain_object_shapes(address: dict, expected: str) -> None:
    assert isinstance(parse_address(address), LegacyLowercaseAddress)
    assert format_address(address) == expected


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ([{"endereco": "Av Y", "numero": 0}], "Av Y"),
        ([{"endereco": "Av Y", "numero": 0.0}], "Av Y"),
        ([{"Logradouro": "Rua X", "Número": 0, "Complemento": 0}], "Rua X"),
        ({"logradouro": "Rua A", "numero": 0, "complemento": 0}, "Rua A"),
        ({"endereco": "Rua B", "numero": "", "complemento": None}, "Rua B"),
    ],
)
def test_falsy_parts_are_dropped(address, expected: str) -> None:
    assert format_address(address) == expected


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ([{"endereco": "Av Y", "numero": 10.0}], "Av Y, 10"),
        ({"logradouro": "Rua A", "numero": 12.5}, "Rua A, 12.5"),
        ({"logradouro": "Rua A", "numero": 7}, "Rua A, 7"),
    ],
)
def test_numeric_street_numbers(address, expected: str) -> None:
    assert format_address(address) == expected


def test_object_bairro_prefers_lowercase_key() -> None:
    assert get_bairro_from_address({"bairro": "Centro", "Bairro": "Outro"}) == "Centro"
    assert get_bairro_from_address({"Bairro": "Jardim"}) == "Jardim"


def test_array_with_unknown_entry_falls_back_to_json_text() -> None:
    assert format_address([{"rua": "X"}]) == '[{"rua":"X"}]'
    assert format_address([]) == "[]"


def test_non_dict_array_entry_never_raises() -> None:
    assert format_address(["Rua solta"]) == '["Rua solta"]'
    assert get_bairro_from_address(["Rua solta"]) == ""
    assert get_bairro_from_address([]) == ""


def test_numbers_and_accents_are_kept_in_json_fallback() -> None:
    assert format_address(42) == "42"
    assert format_address({"região": "Sul"}) == '{"região":"Sul"}'


def test_resolve_order_bairro_prefers_column_then_address() -> None:
    address = [{"endereco": "Av Y", "numero": "20", "bairro": "Centro"}]

    assert resolve_order_bairro("Vila", address) == "Vila"
    assert resolve_order_bairro(None, address) == "Centro"
    assert resolve_order_bairro("", None) == "N/A"
