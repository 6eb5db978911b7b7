"""Read-only magnitude registry — maps magnitude_tag to contract instance."""

from .base import MagnitudeContract


class UnitsContract(MagnitudeContract):
    magnitude_tag = "units"
    column_count = 1


class TensContract(MagnitudeContract):
    magnitude_tag = "tens"
    column_count = 2


class HundredsContract(MagnitudeContract):
    magnitude_tag = "hundreds"
    column_count = 3


class ThousandsContract(MagnitudeContract):
    magnitude_tag = "thousands"
    column_count = 4


class TenThousandsContract(MagnitudeContract):
    magnitude_tag = "ten_thousands"
    column_count = 5


class HundredThousandsContract(MagnitudeContract):
    magnitude_tag = "hundred_thousands"
    column_count = 6


MAGNITUDE_REGISTRY = {
    "units": UnitsContract(),
    "tens": TensContract(),
    "hundreds": HundredsContract(),
    "thousands": ThousandsContract(),
    "ten_thousands": TenThousandsContract(),
    "hundred_thousands": HundredThousandsContract(),
}


def contract_for(magnitude_tag: str) -> MagnitudeContract:
    return MAGNITUDE_REGISTRY[magnitude_tag]


def contract_for_columns(column_count: int) -> MagnitudeContract:
    for contract in MAGNITUDE_REGISTRY.values():
        if contract.column_count == column_count:
            return contract
    raise KeyError(column_count)
