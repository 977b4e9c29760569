"""
Correios service codes.

Each code has an internal name (used in operator logs) and a public name
(shown to customers). Contract and counter variants of one product share
a public name.
"""
from typing import Dict, NamedTuple


class CorreiosService(NamedTuple):
    code: str
    name: str
    public_name: str


CORREIOS_SERVICES: Dict[str, CorreiosService] = {
    service.code: service
    for service in (
        CorreiosService("40010", "SEDEX sem contrato", "SEDEX"),
        CorreiosService("40096", "SEDEX com contrato", "SEDEX"),
        CorreiosService("40436", "SEDEX com contrato", "SEDEX"),
        CorreiosService("40444", "SEDEX com contrato", "SEDEX"),
        CorreiosService("40568", "SEDEX com contrato", "SEDEX"),
        CorreiosService("04014", "SEDEX à vista", "SEDEX"),
        CorreiosService("04162", "SEDEX contrato agência", "SEDEX"),
        CorreiosService("40045", "SEDEX a Cobrar sem contrato", "SEDEX a Cobrar"),
        CorreiosService("40126", "SEDEX a Cobrar com contrato", "SEDEX a Cobrar"),
        CorreiosService("40215", "SEDEX 10 sem contrato", "SEDEX 10"),
        CorreiosService("40290", "SEDEX Hoje sem contrato", "SEDEX Hoje"),
        CorreiosService("81019", "e-SEDEX com contrato", "e-SEDEX"),
        CorreiosService("41106", "PAC sem contrato", "PAC"),
        CorreiosService("41068", "PAC com contrato", "PAC"),
        CorreiosService("04510", "PAC à vista", "PAC"),
        CorreiosService("04669", "PAC contrato agência", "PAC"),
    )
}


def _normalize_code(code) -> str:
    text = str(code).strip()
    # The web service drops leading zeros on some codes
    if text.isdigit() and len(text) < 5:
        text = text.zfill(5)
    return text


def get_service_name(code) -> str:
    """Internal service name; unknown codes fall back to the code."""
    service = CORREIOS_SERVICES.get(_normalize_code(code))
    return service.name if service else str(code)


def get_service_public_name(code) -> str:
    """Customer-facing service name; unknown codes fall back to the code."""
    service = CORREIOS_SERVICES.get(_normalize_code(code))
    return service.public_name if service else str(code)
