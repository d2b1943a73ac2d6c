"""Typed errors raised by the mortgage engine.

The engine never clamps or defaults bad input. Every precondition violation
surfaces as a MortgageEngineError carrying an ErrorKind, and the caller decides
whether to correct the input and call again.
"""

from enum import Enum


class ErrorKind(Enum):
    UNKNOWN_STATE = "unknown_state"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_TERM = "invalid_term"
    INVALID_FEE = "invalid_fee"
    INVALID_RATE = "invalid_rate"
    INVALID_HOME_PRICE = "invalid_home_price"
    INVALID_DOWN_PAYMENT = "invalid_down_payment"


class MortgageEngineError(ValueError):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"MortgageEngineError({self.kind.name}, {self.message!r})"
