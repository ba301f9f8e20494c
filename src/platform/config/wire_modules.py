"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    create_event_use_case,
    decide_transaction_use_case,
    register_user_use_case,
    reserve_seat_use_case,
    submit_payment_proof_use_case,
    update_event_use_case,
)
from src.service.ticketing.app.query import (
    get_event_use_case,
    list_events_use_case,
    list_transactions_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    reserve_seat_use_case,
    submit_payment_proof_use_case,
    decide_transaction_use_case,
    create_event_use_case,
    update_event_use_case,
    register_user_use_case,
    get_event_use_case,
    list_events_use_case,
    list_transactions_use_case,
    user_controller,
]
