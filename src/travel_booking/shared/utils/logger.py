import sys

from aws_lambda_powertools import Logger

from travel_booking.config import settings


def get_logger(service_name: str) -> Logger:
    """サービス名ごとの構造化ロガーを返す

    コンソール出力と混ざらないよう stderr に書き出す。
    """
    return Logger(
        service=f"{settings.service_name}.{service_name}",
        level=settings.log_level,
        stream=sys.stderr,
    )
