class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class DuplicateResourceException(DomainException):
    """同じキーのアカウントを二重に登録しようとした場合"""

    pass


class IncompleteReservationException(DomainException):
    """予約に必要な顧客情報・選択済みオファーが揃っていない場合

    呼び出し側のプログラミングミスを即座に検出するための例外。
    """

    pass
