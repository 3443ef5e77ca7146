from enum import Enum


class HotelBrand(str, Enum):
    """提携ホテルチェーン（ファクトリのディスパッチキー）"""

    HILTON = "Hilton"
    MARRIOTT = "Marriott"
