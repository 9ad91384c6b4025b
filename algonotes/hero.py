"""A game hero with a password-protected balance."""

from __future__ import annotations

from dataclasses import dataclass, field

PASSWORD = "password"


class WrongPasswordError(PermissionError):
    """Raised when the balance is accessed with the wrong password."""


@dataclass
class Hero:
    """A hero with a name, health and level, and a balance behind a password."""

    name: str = ""
    health: int = 0
    level: str = ""
    password: str = field(default=PASSWORD, repr=False)
    _balance: int = field(default=0, init=False, repr=False)

    def info(self) -> str:
        return f"Name: {self.name}, Health: {self.health}, Level: {self.level}"

    def _check(self, password: str) -> None:
        if password != self.password:
            raise WrongPasswordError("wrong password")

    def balance_for(self, password: str) -> int:
        """The balance, if ``password`` is right."""
        self._check(password)
        return self._balance

    def store_balance(self, amount: int, password: str) -> None:
        """Replace the balance with ``amount``, if ``password`` is right."""
        self._check(password)
        self._balance = amount