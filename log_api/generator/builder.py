"""Builds realistic payment-service log documents."""

import random
import string
from datetime import datetime, timedelta, timezone

from log_api.generator.templates import (
    AMOUNTS,
    BROWSER_AGENTS,
    CLIENT_AGENTS,
    ERROR_CODES,
    EVENTS,
    HTTP_STATUS,
    ORDERS,
    TEMPLATES,
    TRANSACTION_STATUS,
    USERS,
)

DEFAULT_SOURCE = "payment-service"
DEFAULT_WEIGHTS = {"debug": 80, "info": 15, "warn": 4, "error": 1}

_TOKEN_ALPHABET = string.ascii_lowercase + string.digits


def _token(length: int) -> str:
    return "".join(random.choices(_TOKEN_ALPHABET, k=length))


def _iso(ts: datetime) -> str:
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _compact(section: dict) -> dict:
    """Drop keys whose value is None so they are absent from the JSON document."""
    return {k: v for k, v in section.items() if v is not None}


def select_level(weights: dict) -> str:
    """Weighted random selection of log level."""
    levels = list(weights.keys())
    return random.choices(levels, weights=list(weights.values()), k=1)[0]


def map_event(level: str) -> str:
    return random.choice(EVENTS[level])


def render_message(template: str) -> str:
    """Fill the first occurrence of each placeholder with sample data."""
    replacements = [
        ("%USER%", lambda: random.choice(USERS)),
        ("%AMOUNT%", lambda: str(random.choice(AMOUNTS))),
        ("%TIME%", lambda: str(random.randint(50, 5000))),
        ("%PERCENT%", lambda: str(random.randint(50, 100))),
        ("%ERROR%", lambda: random.choice(ERROR_CODES)),
        ("%ORDER%", lambda: random.choice(ORDERS)),
        ("%RETRY%", lambda: str(random.randint(1, 5))),
    ]
    message = template
    for placeholder, value in replacements:
        if placeholder in message:
            message = message.replace(placeholder, value(), 1)
    return message


def create_realistic_log(source: str = DEFAULT_SOURCE, weights: dict = None) -> dict:
    """Return one structured log document with application, user and business context."""
    level = select_level(weights or DEFAULT_WEIGHTS)
    message = render_message(random.choice(TEMPLATES[level]))

    now = datetime.now(timezone.utc)
    timestamp = _iso(now)
    event_time = _iso(now - timedelta(milliseconds=random.randint(0, 5000)))

    log = {
        "source": source,
        "level": level,
        "message": message,
        "event": map_event(level),
        "timestamp": timestamp,
        "app": {
            "name": source,
            "version": "2.3.1",
            "environment": "n/a",
            "commit_hash": f"abc{_token(5)}",
            "instance_id": f"instance-{random.randint(1, 10)}",
        },
        "transaction": _compact({
            "id": f"txn_{_token(7)}",
            "type": random.choice(["payment", "refund", "subscription", "verification"]),
            "amount": random.choice(AMOUNTS) if level in ("info", "error") else None,
            "currency": random.choice(["USD", "EUR", "GBP", "CAD", "AUD"]),
            "status": TRANSACTION_STATUS[level],
            "initiated_at": event_time,
            "completed_at": timestamp if level == "info" else None,
        }),
        "user": {
            "id": random.choice(USERS),
            "session_id": f"sess_{_token(10)}",
            "ip_address": ".".join(
                [str(random.randint(192, 203))] + [str(random.randint(0, 255)) for _ in range(3)]
            ),
            "user_agent": random.choice(BROWSER_AGENTS),
        },
        "payment_method": _compact({
            "type": random.choice(["credit_card", "debit_card", "paypal", "bank_transfer", "wallet"]),
            "last_four": str(random.randint(1000, 9999)) if level != "debug" else None,
            "brand": random.choice(["visa", "mastercard", "amex", "discover"]),
            "expiry_month": random.randint(1, 12) if level != "debug" else None,
            "expiry_year": random.randint(2024, 2030) if level != "debug" else None,
        }),
        "metrics": {
            "duration_ms": random.randint(10, 3000),
            "database_query_time": random.randint(5, 500),
            "external_api_time": random.randint(50, 2000),
            "memory_usage_mb": random.randint(100, 512),
            "cpu_percent": random.randint(5, 95),
        },
        "http": {
            "method": random.choice(["POST", "GET", "PUT", "DELETE"]),
            "path": random.choice(["/api/payments", "/api/refunds", "/api/subscriptions", "/api/webhook"]),
            "status_code": HTTP_STATUS[level],
            "request_id": f"req_{_token(10)}",
            "user_agent": random.choice(CLIENT_AGENTS),
        },
        "geo": {
            "country": random.choice(["US", "GB", "CA", "AU", "DE", "FR", "JP"]),
            "city": random.choice(["New York", "London", "Toronto", "Sydney", "Berlin", "Paris", "Tokyo"]),
            "timezone": random.choice(["America/New_York", "Europe/London", "Australia/Sydney", "Asia/Tokyo"]),
        },
        "business": _compact({
            "merchant_id": f"merch_{random.randint(10000, 99999)}",
            "store_id": random.choice(["store-001", "store-002", "store-003"]),
            "terminal_id": f"term-{random.randint(1, 50)}" if level == "debug" else None,
            "order_id": random.choice(ORDERS),
            "invoice_number": f"INV-{random.randint(100000, 999999)}",
        }),
        "metadata": {
            "correlation_id": f"corr_{_token(14)}",
            "feature_flags": {
                "new_ui": random.random() > 0.5,
                "fast_checkout": random.random() > 0.3,
                "advanced_fraud": random.random() > 0.7,
            },
            "tags": [level, map_event(level).lower(), source],
        },
    }

    if level == "error":
        log["error"] = {
            "code": random.choice(ERROR_CODES),
            "message": message,
            "stack_trace": (
                f"Error: {message}\n"
                f"    at processPayment (payment.js:{random.randint(100, 200)}:{random.randint(10, 50)})\n"
                f"    at Module.execute (module.js:{random.randint(50, 150)}:{random.randint(10, 30)})"
            ),
            "fatal": random.random() > 0.8,
        }

    return log
