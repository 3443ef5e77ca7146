from abc import abstractmethod

from travel_booking.account.domain.entity import User
from travel_booking.shared.domain import Repository


class UserRepository(Repository[User, str]):
    """利用者アカウントのレポジトリ"""

    @abstractmethod
    def save(self, user: User) -> None:
        """保存する（同じユーザー名は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, username: str) -> User | None:
        """ユーザー名で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_email(self, email: str) -> User | None:
        """メールアドレスで検索"""
        raise NotImplementedError
