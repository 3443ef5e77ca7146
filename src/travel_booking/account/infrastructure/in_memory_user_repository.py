from travel_booking.account.domain import User, UserRepository
from travel_booking.shared.domain import DuplicateResourceException


class InMemoryUserRepository(UserRepository):
    """プロセス内だけで保持する UserRepository の具象実装

    終了時にすべてのアカウントは破棄される。
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def save(self, user: User) -> None:
        """アカウントを登録する"""
        if user.username in self._users:
            raise DuplicateResourceException(f"User already exists: {user.username}")
        self._users[user.username] = user

    def find_by_id(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    def find_all(self) -> list[User]:
        return list(self._users.values())
