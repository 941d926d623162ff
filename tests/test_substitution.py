import pytest

from patternbook.substitution import (
    AdminUser,
    Animal,
    AnimalProvider,
    BankAccount,
    Car,
    ChildPrinter,
    CheatAccount,
    Dog,
    DogProvider,
    FixedDepositAccount,
    HybridCar,
    InsufficientFundsError,
    NarrowValueSource,
    PasswordUser,
    Printer,
    ValueSource,
    take_value,
    print_hello,
)


@pytest.mark.parametrize("cls", [Car, HybridCar])
def test_brake_reduces_speed(cls):
    car = cls()
    car.accelerate()
    fast = car.speed
    car.brake()
    assert car.speed < fast
    assert car.speed == 0


def test_hybrid_brake_charges():
    car = HybridCar()
    before = car.charge
    car.brake()
    assert car.charge > before


def test_admin_accepts_shorter_password():
    assert AdminUser().set_password("secret") == "Password set successfully"


def test_user_rejects_short_password():
    with pytest.raises(ValueError, match="at least 8 characters"):
        PasswordUser().set_password("secret")


def test_both_reject_very_short_password():
    with pytest.raises(ValueError, match="at least 6 characters"):
        AdminUser().set_password("token")


def test_user_accepts_long_password():
    assert PasswordUser().set_password("password") == "Password set successfully"


def test_negative_opening_balance():
    with pytest.raises(ValueError, match="Balance can't be negative"):
        BankAccount(-1)


def test_withdraw_all():
    account = BankAccount(100)
    assert account.withdraw(100) == 0
    assert account.balance == 0


def test_overdraw_raises_and_keeps_balance():
    account = BankAccount(100)
    with pytest.raises(InsufficientFundsError, match="Insufficient funds"):
        account.withdraw(150)
    assert account.balance == 100


def test_cheat_account_goes_negative():
    account = CheatAccount(100)
    assert account.withdraw(150) < 0


def test_fixed_deposit_refuses():
    account = FixedDepositAccount(100)
    with pytest.raises(RuntimeError, match="Withdraw not allowed in Fixed Deposit"):
        account.withdraw(10)
    assert account.balance == 100


def test_take_value_parent():
    assert take_value(ValueSource()) == "Logic error exception occured : Parent error"


def test_take_value_child_narrower_error_still_caught():
    assert take_value(NarrowValueSource()) == "Logic error exception occured : Child error"


def test_print_hello():
    assert print_hello(Printer()) == "Parent: Hello"
    assert print_hello(ChildPrinter()) == "Child: Hello"


def test_animal_providers(capsys):
    animal = AnimalProvider().get_animal()
    dog = DogProvider().get_animal()
    assert type(animal) is Animal
    assert isinstance(dog, Dog)
    out = capsys.readouterr().out
    assert "Child : Returning Dog instance" in out