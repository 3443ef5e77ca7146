from enum import Enum


class AirlineBrand(str, Enum):
    """提携航空会社（ファクトリのディスパッチキー）"""

    CANADA = "Canada"
    TURKISH = "Turkish"
