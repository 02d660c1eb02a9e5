import math
from ..models import NoiseLevel

NOISE_LEVEL_COLORS = {
    NoiseLevel.LOW.value: "green",
    NoiseLevel.MODERATE.value: "yellow",
    NoiseLevel.HIGH.value: "orange",
    NoiseLevel.VERY_HIGH.value: "red",
}

FILE_SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]

def format_file_size(size: int) -> str:
    """Human readable size, e.g. 1536 -> '1.5 KB'."""
    if size <= 0:
        return "0 Bytes"
    k = 1024
    i = 0
    while i < len(FILE_SIZE_UNITS) - 1 and size >= math.pow(k, i + 1):
        i += 1
    value = ("%.2f" % (size / math.pow(k, i))).rstrip("0").rstrip(".")
    return f"{value} {FILE_SIZE_UNITS[i]}"

def format_label(label: str) -> str:
    return label.replace("_", " ", 1)

def format_percent(score: float) -> str:
    return f"{score * 100:.1f}%"

def noise_level_color(label: str) -> str:
    return NOISE_LEVEL_COLORS.get(label, "gray")
