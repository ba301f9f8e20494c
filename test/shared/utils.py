from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import (
    EVENT_CREATE,
    TRANSACTION_MANAGE,
    TRANSACTION_RESERVE,
    TRANSACTION_UPLOAD,
    USER_CREATE,
    USER_LOGIN,
)
from test.constants import (
    DEFAULT_BANK_ACCOUNT,
    DEFAULT_END_DATE,
    DEFAULT_EVENT_NAME,
    DEFAULT_EVENT_PRICE,
    DEFAULT_PASSWORD,
    DEFAULT_START_DATE,
    PROOF_BYTES,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def create_user(
    client: TestClient, email: str, password: str, name: str, role: str
) -> Dict[str, Any]:
    user_data = {
        'email': email,
        'password': password,
        'name': name,
        'role': role,
    }
    response = client.post(USER_CREATE, json=user_data)
    assert_response_status(response, 201, f'Failed to create {role} user')
    return response.json()


def login_user(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> Any:
    """Log in and keep the auth cookie on the client."""
    client.cookies.clear()
    login_response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(login_response, 200, f'Login failed: {login_response.text}')
    client.cookies.set(settings.AUTH_COOKIE_NAME, login_response.json()['access_token'])
    return login_response


def bearer_headers(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> dict:
    """Log in without keeping a cookie and return an Authorization header."""
    response = client.post(USER_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200)
    client.cookies.clear()
    return {'Authorization': f'Bearer {response.json()["access_token"]}'}


def create_event(
    client: TestClient,
    *,
    available_seats: int = 10,
    name: str = DEFAULT_EVENT_NAME,
    price: int = DEFAULT_EVENT_PRICE,
    headers: dict | None = None,
) -> Dict[str, Any]:
    event_data = {
        'name': name,
        'description': 'Amazing live music performance',
        'price': price,
        'available_seats': available_seats,
        'start_date': DEFAULT_START_DATE,
        'end_date': DEFAULT_END_DATE,
        'bank_account_number': DEFAULT_BANK_ACCOUNT,
    }
    response = client.post(EVENT_CREATE, json=event_data, headers=headers)
    assert_response_status(response, 201, 'Failed to create event')
    return response.json()


def reserve_seat(client: TestClient, event_id: int, headers: dict | None = None) -> Any:
    return client.post(TRANSACTION_RESERVE, json={'event_id': event_id}, headers=headers)


def upload_proof(
    client: TestClient,
    transaction_id: str,
    content: bytes = PROOF_BYTES,
    content_type: str = 'image/png',
    headers: dict | None = None,
) -> Any:
    return client.patch(
        TRANSACTION_UPLOAD.format(transaction_id=transaction_id),
        files={'proof': ('proof.png', content, content_type)},
        headers=headers,
    )


def decide(
    client: TestClient, transaction_id: str, decision: str, headers: dict | None = None
) -> Any:
    return client.patch(
        TRANSACTION_MANAGE.format(transaction_id=transaction_id),
        json={'decision': decision},
        headers=headers,
    )
