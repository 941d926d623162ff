"""Examples of subclasses that keep or break their parent's contract."""

from __future__ import annotations

from typing import ClassVar

SPEED_STEP = 20
CHARGE_STEP = 10


class Car:
    """A car whose speed always drops when it brakes."""

    def __init__(self) -> None:
        self.speed = 0

    def accelerate(self) -> None:
        print("Accelerating")
        self.speed += SPEED_STEP

    def brake(self) -> None:
        print("Applying brakes")
        self.speed -= SPEED_STEP


class HybridCar(Car):
    """Strengthens the postcondition: braking also charges the battery."""

    def __init__(self) -> None:
        super().__init__()
        self.charge = 0

    def brake(self) -> None:
        super().brake()
        self.charge += CHARGE_STEP


class PasswordUser:
    """A user whose password must meet a minimum length."""

    min_length: ClassVar[int] = 8

    def set_password(self, password: str) -> str:
        if len(password) < self.min_length:
            raise ValueError(
                f"Password must be at least {self.min_length} characters long!"
            )
        message = "Password set successfully"
        print(message)
        return message


class AdminUser(PasswordUser):
    """Weakens the precondition: shorter passwords are accepted."""

    min_length = 6


class InsufficientFundsError(RuntimeError):
    """Raised when a withdrawal would overdraw an account."""


class BankAccount:
    """An account whose balance never goes negative."""

    def __init__(self, balance: float) -> None:
        if balance < 0:
            raise ValueError("Balance can't be negative")
        self.balance = balance

    def _report(self) -> float:
        print(f"Amount withdrawn. Remaining balance is {self.balance:g}")
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Withdraw ``amount`` and return the remaining balance."""
        if self.balance - amount < 0:
            raise InsufficientFundsError("Insufficient funds")
        self.balance -= amount
        return self._report()


class CheatAccount(BankAccount):
    """Breaks the invariant: the balance may go negative."""

    def withdraw(self, amount):
        self.balance -= amount
        return self._report()


class FixedDepositAccount(BankAccount):
    """Breaks the history constraint: withdrawals are refused outright."""

    def withdraw(self, amount):
        raise RuntimeError("Withdraw not allowed in Fixed Deposit")


class ValueSource:
    """Fails with a lookup error."""

    def get_value(self):
        raise LookupError("Parent error")


class NarrowValueSource(ValueSource):
    """Fails with a narrower error than its parent."""

    def get_value(self):
        raise IndexError("Child error")


def take_value(source: ValueSource) -> str:
    """Ask ``source`` for a value, reporting the lookup error it raises."""
    try:
        return str(source.get_value())
    except LookupError as error:
        message = f"Logic error exception occured : {error.args[0]}"
        print(message)
        return message


class Printer:
    def print_message(self, message: str) -> str:
        text = f"Parent: {message}"
        print(text)
        return text


class ChildPrinter(Printer):
    def print_message(self, message: str) -> str:
        text = f"Child: {message}"
        print(text)
        return text


def print_hello(printer: Printer) -> str:
    return printer.print_message("Hello")


class Animal:
    """Any animal."""


class Dog(Animal):
    """A dog."""


class AnimalProvider:
    def get_animal(self) -> Animal:
        print("Parent : Returning Animal instance")
        return Animal()


class DogProvider(AnimalProvider):
    """Returns a narrower type than its parent."""

    def get_animal(self) -> Dog:
        print("Child : Returning Dog instance")
        return Dog()