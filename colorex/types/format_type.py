# No dependencies
from enum import Enum
import numpy as np

class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"

channel_maxima = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

# Luma midpoint used by the brightness test
channel_midpoints = {
    FormatType.INT: 127.5,
    FormatType.FLOAT: 0.5,
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}

format_valid_types = {
    FormatType.INT: (int, np.integer),
    FormatType.FLOAT: (int, float, np.integer, np.floating),
}

BYTE_MAX = 255
UINT32_MAX = 0xFFFFFFFF
