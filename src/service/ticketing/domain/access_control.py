"""
Role-based access to ticketing operations.

Every guarded operation is listed once in CAPABILITIES; the HTTP layer asks
AccessControlGate before any use case runs. Ownership (my transaction, my
event) is a separate, per-record check made by the use cases themselves.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping

from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.domain.error.ticketing_error import AuthorizationDeniedError


class Operation(StrEnum):
    RESERVE_SEAT = 'reserve_seat'
    SUBMIT_PROOF = 'submit_proof'
    DECIDE_TRANSACTION = 'decide_transaction'
    LIST_MY_TRANSACTIONS = 'list_my_transactions'
    LIST_ORGANIZER_TRANSACTIONS = 'list_organizer_transactions'
    CREATE_EVENT = 'create_event'
    UPDATE_EVENT = 'update_event'
    LIST_ORGANIZER_EVENTS = 'list_organizer_events'


CAPABILITIES: Mapping[UserRole, frozenset[Operation]] = MappingProxyType(
    {
        UserRole.CUSTOMER: frozenset(
            {
                Operation.RESERVE_SEAT,
                Operation.SUBMIT_PROOF,
                Operation.LIST_MY_TRANSACTIONS,
            }
        ),
        UserRole.ORGANIZER: frozenset(
            {
                Operation.DECIDE_TRANSACTION,
                Operation.LIST_MY_TRANSACTIONS,
                Operation.LIST_ORGANIZER_TRANSACTIONS,
                Operation.CREATE_EVENT,
                Operation.UPDATE_EVENT,
                Operation.LIST_ORGANIZER_EVENTS,
            }
        ),
    }
)


class AccessControlGate:
    def __init__(self, capabilities: Mapping[UserRole, frozenset[Operation]] = CAPABILITIES):
        self._capabilities = capabilities

    def is_allowed(self, role: UserRole, operation: Operation) -> bool:
        return operation in self._capabilities.get(role, frozenset())

    def authorize(self, user: UserEntity, operation: Operation) -> UserEntity:
        if not self.is_allowed(user.role, operation):
            raise AuthorizationDeniedError(
                f'Role {user.role.value} is not allowed to {operation.value.replace("_", " ")}'
            )
        return user


access_control_gate = AccessControlGate()
