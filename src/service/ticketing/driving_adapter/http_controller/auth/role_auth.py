from typing import Callable, Coroutine, Any

from fastapi import Depends
from opentelemetry import trace

from src.service.ticketing.domain.access_control import Operation, access_control_gate
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.user_controller import (
    get_current_user,
)


def require(operation: Operation) -> Callable[..., Coroutine[Any, Any, UserEntity]]:
    """
    Route dependency: the authenticated user, if their role may perform `operation`.

    Raises AuthorizationDeniedError (403) before the route body runs otherwise.
    """

    async def _authorized_user(
        current_user: UserEntity = Depends(get_current_user),
    ) -> UserEntity:
        tracer = trace.get_tracer(__name__)
        with tracer.start_as_current_span(
            'auth.require',
            attributes={
                'user.id': current_user.id or 0,
                'user.role': current_user.role.value,
                'operation': operation.value,
            },
        ):
            return access_control_gate.authorize(current_user, operation)

    return _authorized_user
