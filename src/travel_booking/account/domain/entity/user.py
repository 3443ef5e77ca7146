from functools import reduce

from travel_booking.itinerary.domain import Itinerary
from travel_booking.shared.domain import Currency, Money


class User:
    """利用者アカウント

    - ユーザー名で同一性を判定する
    - 保存した旅程は複製であり、組み立て中の旅程とは独立している
    """

    def __init__(self, username: str, password: str, email: str) -> None:
        self._username = username
        self._password = password
        self._email = email
        self._itineraries: list[Itinerary] = []

    @property
    def id(self) -> str:
        return self._username

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def itineraries(self) -> tuple[Itinerary, ...]:
        return tuple(self._itineraries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self._username == other._username

    def __hash__(self) -> int:
        return hash(self._username)

    def check_password(self, password: str) -> bool:
        return self._password == password

    def add_itinerary(self, itinerary: Itinerary) -> None:
        """旅程の複製を保存する

        旅程以外の予約は保存できない。
        """
        if not isinstance(itinerary, Itinerary):
            raise TypeError(
                f"Only itineraries can be stored, got {type(itinerary).__name__}"
            )
        self._itineraries.append(itinerary.clone())

    def remove_itinerary(self, itinerary: Itinerary) -> None:
        """保存済みの旅程（同一インスタンス）を削除する。無ければ何もしない"""
        for index, stored in enumerate(self._itineraries):
            if stored is itinerary:
                del self._itineraries[index]
                return

    def total_cost(self) -> Money:
        """保存済み旅程すべての合計金額（旅程が無ければ既定通貨で 0）"""
        costs = [itinerary.cost() for itinerary in self._itineraries]
        if not costs:
            return Money.zero(Currency.default())
        return reduce(Money.add, costs)

    def view_profile(self) -> str:
        return (
            "User's Profile:\n"
            "----------------------\n\n"
            f"Name: {self._username}\n"
            f"Email: {self._email}\n"
        )

    def view_itineraries(self) -> str:
        sections = [itinerary.describe() for itinerary in self._itineraries]
        sections.append(f"Total Cost for All Itineraries: {self.total_cost()}")
        return "\n".join(sections)
