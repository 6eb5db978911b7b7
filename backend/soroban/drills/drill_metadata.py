MAGNITUDE_LABELS = {
    "units": "Units (1 digit)",
    "tens": "Tens (2 digits)",
    "hundreds": "Hundreds (3 digits)",
    "thousands": "Thousands (4 digits)",
    "ten_thousands": "Ten thousands (5 digits)",
    "hundred_thousands": "Hundred thousands (6 digits)",
}


def label_for(magnitude_tag: str) -> str:
    return MAGNITUDE_LABELS.get(magnitude_tag, "Unknown")
