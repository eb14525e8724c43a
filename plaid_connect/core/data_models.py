"""Value objects returned by the Connect endpoints."""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Variant tags
CONNECT = "connect"
MFA_QUESTION = "mfa_question"
MFA_MESSAGE = "mfa_message"
MFA_MASK = "mfa_mask"
MESSAGE = "message"
ERROR = "error"


class Credentials(BaseModel):
    """Plaid API keys sent with every request."""

    client_id: Optional[str] = None
    secret: Optional[str] = None

    def __repr__(self) -> str:
        return f"Credentials(client_id={self.client_id!r}, secret={'***' if self.secret else None})"


class Account(BaseModel):
    """An account record as returned by Connect. Values are kept as sent; unknown keys too."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
    item: Any = Field(default=None, alias="_item")
    user: Any = Field(default=None, alias="_user")
    balance: Any = None
    institution_type: Any = None
    meta: Any = None
    type: Any = None
    subtype: Any = None


class Transaction(BaseModel):
    """A transaction record as returned by Connect.

    Every value, amounts and dates included, is passed through untouched.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(default=None, alias="_id")
    account: Any = Field(default=None, alias="_account")
    amount: Any = None
    date: Any = None
    name: Any = None
    meta: Any = None
    pending: Any = None
    type: Any = None
    category: Any = None
    category_id: Any = None
    score: Any = None


class Connect(BaseModel):
    """Linked user with accounts and transactions."""

    kind: ClassVar[str] = CONNECT

    accounts: List[Account]
    access_token: str
    transactions: List[Transaction] = Field(default_factory=list)


class MfaQuestion(BaseModel):
    kind: ClassVar[str] = MFA_QUESTION

    type: str = "questions"
    mfa: List[Dict[str, Any]]
    access_token: Optional[str] = None


class MfaMessage(BaseModel):
    """Instruction for the user, e.g. where a one-time code was sent."""

    kind: ClassVar[str] = MFA_MESSAGE

    message: str
    type: Optional[str] = None
    access_token: Optional[str] = None


class MfaMask(BaseModel):
    """Masked delivery destinations the user must choose from."""

    kind: ClassVar[str] = MFA_MASK

    type: str = "list"
    mfa: List[Dict[str, Any]]
    access_token: Optional[str] = None


class Message(BaseModel):
    kind: ClassVar[str] = MESSAGE

    message: str


class PlaidError(BaseModel):
    """Error body returned by the Plaid API."""

    kind: ClassVar[str] = ERROR

    code: Optional[Union[int, str]] = None
    message: Optional[str] = None
    resolve: Optional[str] = None
    display_message: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    error_type: Optional[str] = None
    request_id: Optional[str] = None
