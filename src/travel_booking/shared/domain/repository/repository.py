from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - 集約の保管を抽象化する（本システムではプロセス内のみ）
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[T]:
        """保存済みの集約を登録順で返す"""
        raise NotImplementedError
