"""Delivery address parsing and display.

Addresses were stored in several shapes over time and old rows were never
migrated, so the shape is detected from the keys present:

* ``[{"endereco", "numero", "bairro", "cidade", "uf", "CEP"}]`` (current)
* ``{"Logradouro", "Número", "Complemento", "Bairro", ...}`` (legacy, capitalized)
* ``{"logradouro", "numero", "complemento", "bairro", ...}`` (legacy, lowercase)
* a ready-made string, or null.

Anything else is shown as its JSON text. Nothing in this module raises on
malformed input.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

MISSING_ADDRESS: str = "N/A"
STREET_KEYS: frozenset[str] = frozenset({"logradouro", "endereco", "numero", "número"})


def _part(value: Any) -> str:
    """Display text for one address part; falsy values (``0`` included) are dropped."""
    if not value:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _join(*parts: Any) -> str:
    return ", ".join(text for text in (_part(part) for part in parts) if text)


def _json_text(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


class NewAddress(BaseModel):
    """Array-wrapped shape; both ``endereco`` and ``numero`` keys are required."""

    model_config = ConfigDict(extra="ignore")

    endereco: Any
    numero: Any
    bairro: Any = None
    cidade: Any = None
    uf: Any = None
    CEP: Any = None

    def display(self) -> str:
        return _join(self.endereco, self.numero)


class LegacyCapitalizedAddress(BaseModel):
    """Capitalized Portuguese keys; ``Logradouro`` and ``Número`` are required."""

    model_config = ConfigDict(extra="ignore")

    logradouro: Any = Field(alias="Logradouro")
    numero: Any = Field(alias="Número")
    complemento: Any = Field(default=None, alias="Complemento")
    bairro: Any = Field(default=None, alias="Bairro")
    localidade: Any = Field(default=None, alias="Localidade")
    uf: Any = Field(default=None, alias="UF")
    cep: Any = Field(default=None, alias="CEP")

    def display(self) -> str:
        return _join(self.logradouro, self.numero, self.complemento)


class LegacyLowercaseAddress(BaseModel):
    """Plain object keyed in any case; built from lower-cased keys."""

    model_config = ConfigDict(extra="ignore")

    logradouro: Any = None
    endereco: Any = None
    numero: Any = None
    numero_acentuado: Any = Field(default=None, alias="número")
    complemento: Any = None
    bairro: Any = None

    def display(self) -> str:
        street = _part(self.logradouro) or _part(self.endereco)
        number = _part(self.numero) or _part(self.numero_acentuado)
        return _join(street, number, self.complemento)


class PlainAddress(BaseModel):
    text: str

    def display(self) -> str:
        return self.text


class RawJson(BaseModel):
    """Fallback for values matching no known shape."""

    text: str

    def display(self) -> str:
        return self.text


AddressValue = Union[NewAddress, LegacyCapitalizedAddress, LegacyLowercaseAddress, PlainAddress, RawJson]


def _parse_first_entry(entry: Any) -> AddressValue | None:
    if not isinstance(entry, dict):
        return None
    for shape in (NewAddress, LegacyCapitalizedAddress):
        try:
            return shape.model_validate(entry)
        except ValidationError:
            continue
    return None


def _parse_object(raw: dict[Any, Any]) -> AddressValue | None:
    lowered = {key.lower(): value for key, value in raw.items() if isinstance(key, str)}
    if not STREET_KEYS & lowered.keys():
        return None
    return LegacyLowercaseAddress.model_validate(lowered)


def parse_address(value: Any) -> AddressValue | None:
    """Classify a stored address into one of the known shapes.

    Returns None only for a null address; unrecognised values become RawJson.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return PlainAddress(text=value)

    parsed: AddressValue | None = None
    try:
        if isinstance(value, list):
            if value:
                parsed = _parse_first_entry(value[0])
        elif isinstance(value, dict):
            parsed = _parse_object(value)
    except Exception:
        logger.debug("[ADDRESS] Unparseable address value; falling back to JSON text.", exc_info=True)
        parsed = None

    return parsed if parsed is not None else RawJson(text=_json_text(value))


def format_address(address: Any) -> str:
    """Return a one-line display string for an address of any stored shape."""
    parsed = parse_address(address)
    if parsed is None:
        return MISSING_ADDRESS
    return parsed.display()


def get_bairro_from_address(address: Any) -> str:
    """Extract the neighbourhood name, or an empty string when absent."""
    if address is None:
        return ""
    try:
        source = address[0] if isinstance(address, list) else address
        if not isinstance(source, dict):
            return ""
        bairro = source.get("bairro") or source.get("Bairro")
    except Exception:
        logger.debug("[ADDRESS] Could not read bairro from address.", exc_info=True)
        return ""
    return str(bairro) if bairro else ""


def resolve_order_bairro(bairro: str | None, address: Any) -> str:
    """Bairro shown on receipts: explicit column first, then the address, else N/A."""
    return bairro or get_bairro_from_address(address) or MISSING_ADDRESS
