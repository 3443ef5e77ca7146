from travel_booking.account.domain import User, UserRepository
from travel_booking.itinerary.domain import Itinerary
from travel_booking.shared.utils import get_logger

logger = get_logger("account")


class AccountService:
    """アカウント管理サービス

    - 登録・認証・ログアウト
    - ログイン中の利用者の旅程の追加・削除
    同時にログインできるのは1アカウントのみ。
    """

    def __init__(self, repository: UserRepository) -> None:
        self._repository = repository
        self._current_user: User | None = None

    @property
    def current_user(self) -> User | None:
        return self._current_user

    def username_exists(self, username: str) -> bool:
        return self._repository.find_by_id(username) is not None

    def email_exists(self, email: str) -> bool:
        return self._repository.find_by_email(email) is not None

    def register(self, username: str, password: str, email: str) -> bool:
        """新規登録する。ユーザー名・メールアドレスが既存なら False"""
        if self.username_exists(username) or self.email_exists(email):
            logger.info("Registration rejected", extra={"username": username})
            return False

        self._repository.save(User(username=username, password=password, email=email))
        logger.info("User registered", extra={"username": username})
        return True

    def authenticate(self, username: str, password: str) -> User | None:
        """認証に成功したらログイン状態にして利用者を返す"""
        user = self._repository.find_by_id(username)
        if user is None or not user.check_password(password):
            logger.info("Authentication failed", extra={"username": username})
            return None

        self._current_user = user
        logger.info("User signed in", extra={"username": username})
        return user

    def logout(self) -> None:
        self._current_user = None

    def add_itinerary(self, itinerary: Itinerary) -> None:
        """ログイン中の利用者に旅程（の複製）を保存する"""
        if self._current_user is None:
            return
        self._current_user.add_itinerary(itinerary)

    def remove_itinerary(self, itinerary: Itinerary) -> None:
        if self._current_user is None:
            return
        self._current_user.remove_itinerary(itinerary)

    def view_profile(self) -> str | None:
        if self._current_user is None:
            return None
        return self._current_user.view_profile()

    def view_itineraries(self) -> str | None:
        if self._current_user is None:
            return None
        return self._current_user.view_itineraries()
