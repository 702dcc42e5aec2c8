"""History persistence exceptions."""

from .base import UnitConverterException


class MalformedLedgerError(UnitConverterException):
    """Raised when persisted history cannot be decoded into records.

    HistoryStore absorbs this and treats the ledger as empty.
    """

    pass
