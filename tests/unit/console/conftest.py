from collections import deque

import pytest

from travel_booking.console import Terminal, build_travel_agency


class ScriptedTerminal(Terminal):
    """あらかじめ用意した入力を順に返し、出力を記録する端末"""

    def __init__(self, answers):
        self._answers = deque(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self._answers.popleft()

    def show(self, text: str) -> None:
        self.output.append(text)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def create_agency():
    """入力スクリプトから TravelAgency と端末を生成する Factory fixture"""

    def _factory(*answers: str):
        terminal = ScriptedTerminal(answers)
        return build_travel_agency(terminal), terminal

    return _factory


# 画面操作の入力スクリプト
SIGN_UP = ["1", "mostafa", "mostafa@example.com", "secret"]
SIGN_IN = ["2", "mostafa", "secret"]
FLIGHT = ["1", "Cairo", "25-01-2022", "Istanbul", "10-02-2022", "2", "1", "0"]
HOTEL = ["2", "Turkey", "Istanbul", "29-01-2022", "10-02-2022", "2", "1", "2", "5"]
PAYPAL = ["1", "Mostafa", "Cairo", "4111-1111", "12-2026", "123"]


@pytest.fixture
def scripts():
    return {
        "sign_up": SIGN_UP,
        "sign_in": SIGN_IN,
        "flight": FLIGHT,
        "hotel": HOTEL,
        "paypal": PAYPAL,
    }
