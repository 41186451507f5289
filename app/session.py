"""Account session - who is making the current request."""

from abc import ABC, abstractmethod

from app.models.visualization import AccountType


class Session(ABC):
    """Session provider interface. The host supplies one per request."""

    @abstractmethod
    def get_account_type(self) -> str: ...

    @abstractmethod
    def get_account_id(self) -> int: ...

    @property
    def is_client(self) -> bool:
        return self.get_account_type() == AccountType.CLIENT


class StaticSession(Session):
    """Session for a fixed, already authenticated account."""

    def __init__(self, account_id: int, account_type: str = AccountType.ADMIN):
        self._account_id = account_id
        self._account_type = account_type

    def get_account_type(self) -> str:
        return self._account_type

    def get_account_id(self) -> int:
        return self._account_id

    def __repr__(self) -> str:
        return f"StaticSession(account_id={self._account_id}, account_type={self._account_type!r})"
