from travel_booking.console import build_travel_agency
from travel_booking.shared.utils import get_logger

logger = get_logger("main")


def main() -> None:
    """対話型の旅行予約システムを起動する"""
    agency = build_travel_agency()
    try:
        agency.run()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, exiting")


if __name__ == "__main__":
    main()
