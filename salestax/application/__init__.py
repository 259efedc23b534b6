"""Application workflows."""

from salestax.application.receipt import (
    ReceiptRequest,
    ReceiptResult,
    ReceiptStatus,
    build_receipt,
    run_receipt,
)

__all__ = [
    "ReceiptRequest",
    "ReceiptResult",
    "ReceiptStatus",
    "build_receipt",
    "run_receipt",
]
