from .drill_metadata import label_for
from .registry import MAGNITUDE_REGISTRY, contract_for, contract_for_columns

__all__ = ["MAGNITUDE_REGISTRY", "contract_for", "contract_for_columns", "label_for"]
