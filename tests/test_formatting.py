from datetime import date, datetime
from decimal import Decimal

from backoffice.services.formatting import (
    format_currency,
    format_order_date,
    format_order_items,
    format_phone,
    format_scheduled_date,
)
from backoffice.services.order_status import status_label


def test_format_currency() -> None:
    assert format_currency(Decimal("12.5")) == "R$ 12,50"
    assert format_currency(3) == "R$ 3,00"
    assert format_currency(None) == "R$ 0,00"
    assert format_currency("abc") == "R$ 0,00"


def test_format_order_date() -> None:
    assert format_order_date(datetime(2024, 3, 7, 9, 5)) == "07/03/2024 09:05"
    assert format_order_date("2024-03-07T21:30:00") == "07/03/2024 21:30"
    assert format_order_date("ontem") == "Data inválida"
    assert format_order_date(None) == ""


def test_format_scheduled_date() -> None:
    assert format_scheduled_date(date(2024, 12, 24)) == "24/12/2024"
    assert format_scheduled_date("2024-12-24") == "24/12/2024"
    assert format_scheduled_date(None) == ""


def test_format_phone_from_whatsapp_id() -> None:
    assert format_phone("554398237354@s.whatsapp.net") == "(43) 9823-7354"
    assert format_phone("5543998237354") == "(43) 99823-7354"
    assert format_phone("4332221111") == "(43) 3222-1111"


def test_format_phone_keeps_unparseable_values() -> None:
    assert format_phone("") == ""
    assert format_phone("4") == "4"


def test_format_order_items() -> None:
    assert format_order_items([]) == "Nenhum item"
    assert format_order_items(None) == "Nenhum item"
    assert format_order_items([{"name": "Pizza", "quantity": 2}, {"name": "Refrigerante"}]) == "2x Pizza, 1x Refrigerante"
    assert format_order_items([{"quantity": 1}]) == "1x Item sem nome"
    assert format_order_items('[{"name": "Pastel", "quantity": 3}]') == "3x Pastel"
    assert format_order_items("Marmita grande") == "Marmita grande"


def test_status_labels() -> None:
    assert status_label("pending") == "Pendente"
    assert status_label("confirmed") == "Confirmado"
    assert status_label("delivered") == "Entregue"
    assert status_label("canceled") == "Cancelado"
    assert status_label("unknown") == "unknown"
