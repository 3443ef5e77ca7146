import json


class SquarePaymentAPI:
    """Square の決済 API（スタブ）

    JSON 文字列の問い合わせのみを受け付ける。
    """

    def withdraw_money(self, json_query: str) -> bool:
        query = json.loads(json_query)
        return "Payment_money" in query
