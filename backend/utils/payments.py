import http.client
import json
import logging
from urllib import request, error, parse

from fastapi import HTTPException

from config.env import STRIPE_SK_KEY, PAYMENT_CURRENCY

logger = logging.getLogger(__name__)

STRIPE_API_BASE = "https://api.stripe.com/v1"


def _require_stripe_config() -> str:
    if not STRIPE_SK_KEY:
        raise HTTPException(status_code=500, detail="Stripe key is not configured")
    return STRIPE_SK_KEY


def amount_to_cents(amount: float) -> int:
    return int(round(float(amount) * 100))


def create_payment_intent(*, amount_cents: int, currency: str = PAYMENT_CURRENCY) -> dict:
    secret_key = _require_stripe_config()

    payload = {
        "amount": amount_cents,
        "currency": currency,
        "automatic_payment_methods[enabled]": "true",
    }

    req = request.Request(
        url=f"{STRIPE_API_BASE}/payment_intents",
        data=parse.urlencode(payload).encode("utf-8"),
        headers={
            "Content-Type": "application/x-www-form-urlencoded",
            "Authorization": f"Bearer {secret_key}",
        },
        method="POST",
    )

    try:
        with request.urlopen(req, timeout=15) as resp:
            body = resp.read().decode("utf-8")
            return json.loads(body)
    except error.HTTPError as e:
        details = e.read().decode("utf-8", errors="ignore")
        logger.error("STRIPE_INTENT_FAILED status=%s body=%s", e.code, details)
        raise HTTPException(status_code=502, detail="Payment intent create failed")
    except (http.client.HTTPException, OSError, ValueError):
        logger.exception("STRIPE_INTENT_FAILED")
        raise HTTPException(status_code=502, detail="Payment intent create failed")
