from abc import ABC, abstractmethod

from rich.console import Console


class Terminal(ABC):
    """対話入出力の抽象"""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def show(self, text: str) -> None:
        raise NotImplementedError


class RichTerminal(Terminal):
    """rich の Console を使った端末入出力"""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def ask(self, prompt: str) -> str:
        return self._console.input(f"[bold cyan]{prompt}[/] ").strip()

    def show(self, text: str) -> None:
        # 予約明細の角括弧をマークアップとして解釈させない
        self._console.print(text, markup=False, highlight=False)
