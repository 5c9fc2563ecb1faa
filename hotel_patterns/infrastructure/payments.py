"""
Заглушка сторонней платежной системы.
"""

import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional
from uuid import uuid4

from hotel_patterns.domain.interfaces import IOutput


class PaymentSystem:
    """Заглушка сторонней платежной системы для демонстрации.

    ``success_rate`` задает долю успешных платежей: 1.0 (по умолчанию)
    означает, что платеж проходит всегда, 0.0 - что всегда отклоняется.
    """

    def __init__(
        self,
        output: IOutput,
        success_rate: float = 1.0,
        rng: Optional[random.Random] = None,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")
        self._output = output
        self.success_rate = success_rate
        self._rng = rng or random.Random()
        self.processed_payments: Dict[str, Dict[str, Any]] = {}

    def make_payment(self, amount: Decimal, currency: str) -> Dict[str, Any]:
        """Проводит платеж и возвращает ответ платежной системы."""
        transaction_id = f"TXN-{uuid4().hex[:8].upper()}"
        success = self._rng.random() < self.success_rate

        result = {
            "transaction_id": transaction_id,
            "status": "completed" if success else "failed",
            "amount": amount,
            "currency": currency,
            "processed_at": datetime.now(timezone.utc).isoformat(),
        }
        if not success:
            result["reason"] = "declined by the third-party payment system"

        self.processed_payments[transaction_id] = result

        display = f"${amount:.2f}" if currency == "USD" else f"{amount:.2f} {currency}"
        if success:
            self._output.write(
                f"Payment of {display} processed in the third-party payment system."
            )
        else:
            self._output.write(
                f"Payment of {display} declined by the third-party payment system."
            )
        return result
