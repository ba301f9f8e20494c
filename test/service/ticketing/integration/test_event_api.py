from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    EVENT_CREATE,
    EVENT_GET,
    EVENT_LIST,
    EVENT_ORGANIZER,
    EVENT_UPDATE,
)
from test.constants import (
    ANOTHER_ORGANIZER_EMAIL,
    DEFAULT_END_DATE,
    DEFAULT_START_DATE,
    TEST_CUSTOMER_EMAIL,
    TEST_ORGANIZER_EMAIL,
    TEST_ORGANIZER_NAME,
)
from test.shared.utils import assert_response_status, bearer_headers, create_event


@pytest.mark.integration
class TestEventAPI:
    def test_organizer_creates_event(
        self, client: TestClient, organizer_user: dict[str, Any]
    ) -> None:
        headers = bearer_headers(client, TEST_ORGANIZER_EMAIL)

        event = create_event(client, available_seats=100, headers=headers)

        assert event['organizer_id'] == organizer_user['id']
        assert event['available_seats'] == 100
        assert event['bank_account_number'] == '1234567890'

    def test_customer_cannot_create_event(
        self, client: TestClient, customer_user: dict[str, Any]
    ) -> None:
        headers = bearer_headers(client, TEST_CUSTOMER_EMAIL)

        response = client.post(
            EVENT_CREATE,
            json={
                'name': 'Concert',
                'price': 100,
                'available_seats': 10,
                'start_date': DEFAULT_START_DATE,
                'end_date': DEFAULT_END_DATE,
                'bank_account_number': '1',
            },
            headers=headers,
        )

        assert_response_status(response, 403)
        assert response.json()['code'] == 'AUTHORIZATION_DENIED'

    @pytest.mark.parametrize(
        'overrides',
        [
            {'available_seats': 0},
            {'price': -1},
            {'end_date': '2030-11-30T00:00:00Z'},
        ],
    )
    def test_invalid_event_is_400(
        self, client: TestClient, organizer_user: dict[str, Any], overrides: dict
    ) -> None:
        headers = bearer_headers(client, TEST_ORGANIZER_EMAIL)
        payload = {
            'name': 'Concert',
            'price': 100,
            'available_seats': 10,
            'start_date': DEFAULT_START_DATE,
            'end_date': DEFAULT_END_DATE,
            'bank_account_number': '1',
        } | overrides

        response = client.post(EVENT_CREATE, json=payload, headers=headers)

        assert_response_status(response, 400)

    def test_public_listing_and_detail(
        self, client: TestClient, organizer_user: dict[str, Any]
    ) -> None:
        headers = bearer_headers(client, TEST_ORGANIZER_EMAIL)
        event = create_event(client, headers=headers)

        listing = client.get(EVENT_LIST)
        detail = client.get(EVENT_GET.format(event_id=event['id']))

        assert_response_status(listing, 200)
        assert [e['id'] for e in listing.json()] == [event['id']]
        assert listing.json()[0]['organizer_name'] == TEST_ORGANIZER_NAME
        assert 'bank_account_number' not in listing.json()[0]
        assert_response_status(detail, 200)
        assert detail.json()['name'] == event['name']

    def test_unknown_event_is_404(self, client: TestClient) -> None:
        response = client.get(EVENT_GET.format(event_id=999))

        assert_response_status(response, 404)
        assert response.json()['code'] == 'EVENT_NOT_FOUND'

    def test_owner_updates_event(self, client: TestClient, organizer_user: dict[str, Any]) -> None:
        headers = bearer_headers(client, TEST_ORGANIZER_EMAIL)
        event = create_event(client, available_seats=10, headers=headers)

        response = client.patch(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'price': 175000, 'available_seats': 0},
            headers=headers,
        )

        assert_response_status(response, 200)
        assert response.json()['price'] == 175000
        assert response.json()['available_seats'] == 0
        assert response.json()['name'] == event['name']

    def test_other_organizer_cannot_update(
        self,
        client: TestClient,
        organizer_user: dict[str, Any],
        another_organizer_user: dict[str, Any],
    ) -> None:
        event = create_event(client, headers=bearer_headers(client, TEST_ORGANIZER_EMAIL))

        response = client.patch(
            EVENT_UPDATE.format(event_id=event['id']),
            json={'price': 1},
            headers=bearer_headers(client, ANOTHER_ORGANIZER_EMAIL),
        )

        assert_response_status(response, 404)

    def test_list_organizer_events(
        self,
        client: TestClient,
        organizer_user: dict[str, Any],
        another_organizer_user: dict[str, Any],
    ) -> None:
        mine = create_event(client, headers=bearer_headers(client, TEST_ORGANIZER_EMAIL))
        create_event(client, headers=bearer_headers(client, ANOTHER_ORGANIZER_EMAIL))

        response = client.get(
            EVENT_ORGANIZER, headers=bearer_headers(client, TEST_ORGANIZER_EMAIL)
        )

        assert_response_status(response, 200)
        assert [e['id'] for e in response.json()] == [mine['id']]
