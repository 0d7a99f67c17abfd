"""
Reward Dispatcher

Delivers a reward through an injected dispatch capability, or logs the
intended transfer when no capability is available. Dispatch never raises:
a failed transfer is logged and the caller carries on with the next event.
"""

from __future__ import annotations

import enum
import inspect
import logging
from typing import Any, Optional, Protocol, TypedDict, runtime_checkable

from . import metrics
from .exceptions import DispatchError

logger = logging.getLogger(__name__)


class TransferRequest(TypedDict):
    """Payload handed to ``DispatchCapability.send``."""

    to: str
    amount: float
    token: str
    memo: str


@runtime_checkable
class DispatchCapability(Protocol):
    """Anything able to perform a real token transfer.

    ``send`` may be a plain function or a coroutine function.
    """

    def send(self, request: TransferRequest) -> Any:
        ...


class DispatchOutcome(str, enum.Enum):
    SENT = "sent"
    FAILED = "failed"
    SIMULATED = "simulated"


def _forward(log: Any, level: str, message: str) -> None:
    method = getattr(log, level, None) if log is not None else None
    if callable(method):
        method(message)


def _send_operation(capability: Any) -> Optional[Any]:
    send = getattr(capability, "send", None) if capability is not None else None
    return send if callable(send) else None


class RewardDispatcher:
    """Sends rewards in a single token.

    Args:
        token: Token symbol used for every transfer (e.g. ``UOMI``).
    """

    def __init__(self, token: str) -> None:
        self._token = token

    @property
    def token(self) -> str:
        return self._token

    async def dispatch(
        self,
        capability: Optional[DispatchCapability],
        recipient: str,
        amount: float,
        reason: str,
        log: Any = None,
    ) -> DispatchOutcome:
        """Attempt one transfer and emit exactly one log record about it.

        The outcome of a real transfer is also reported to *log*, the
        platform logger handed over with the event, when it has callable
        ``info`` / ``error`` methods.
        """
        send = _send_operation(capability)
        if send is None:
            logger.info(
                "(SIMULATION) Would send %s %s to %s — %s",
                amount, self._token, recipient, reason,
            )
            metrics.record_reward(DispatchOutcome.SIMULATED.value)
            return DispatchOutcome.SIMULATED

        request: TransferRequest = {
            "to": recipient,
            "amount": amount,
            "token": self._token,
            "memo": reason,
        }
        try:
            result = send(request)
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            error = DispatchError(recipient, amount, exc)
            logger.error("Failed to send reward: %s", error, exc_info=exc)
            _forward(log, "error", f"Failed to send reward: {error}")
            metrics.record_reward(DispatchOutcome.FAILED.value)
            return DispatchOutcome.FAILED

        logger.info("Sent %s %s to %s — %s", amount, self._token, recipient, reason)
        _forward(log, "info", f"Sent {amount} {self._token} to {recipient} — {reason}")
        metrics.record_reward(DispatchOutcome.SENT.value)
        return DispatchOutcome.SENT
