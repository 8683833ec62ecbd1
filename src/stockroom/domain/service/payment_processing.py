"""Domain service: Payment Processing.

Every payment channel applies the same validation; channels differ only
in how the processed payment is described.
"""

from __future__ import annotations

import logging
from enum import Enum

from stockroom.domain.model.finance import Transaction

logger = logging.getLogger(__name__)


class PaymentChannel(Enum):
    BANK_TRANSFER = "BANK_TRANSFER"
    MOBILE_MONEY = "MOBILE_MONEY"
    CRYPTO_WALLET = "CRYPTO_WALLET"


_RECEIPT_TEMPLATES: dict[PaymentChannel, str] = {
    PaymentChannel.BANK_TRANSFER: "[BankTransfer] Processed bank transfer of {amount} for '{category}' (Id: {id}).",
    PaymentChannel.MOBILE_MONEY: "[MobileMoney] Mobile money payment of {amount} recorded for '{category}' (Id: {id}).",
    PaymentChannel.CRYPTO_WALLET: "[CryptoWallet] Crypto wallet transfer: {amount} for '{category}' (Id: {id}).",
}


def process_payment(transaction: Transaction, channel: PaymentChannel) -> str:
    """Process ``transaction`` through ``channel`` and return its receipt line.

    Amount and category are already guaranteed valid by ``Transaction``
    and ``Money``, so processing cannot fail once a transaction exists.
    """
    receipt = _RECEIPT_TEMPLATES[channel].format(
        amount=transaction.amount,
        category=transaction.category,
        id=transaction.id,
    )
    logger.debug("Processed transaction %s via %s", transaction.id, channel.value)
    return receipt
