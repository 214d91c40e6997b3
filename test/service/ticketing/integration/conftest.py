"""
Integration fixtures: build venues, events and ticket types through the HTTP API.

Factories are plain fixtures returning callables, so each test picks its own
seats and prices while sharing the request boilerplate.
"""

from collections.abc import Callable
from typing import Any, Dict, List, Optional

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    EVENT_BASE,
    EVENT_TICKETS,
    EVENT_TICKET_TYPES,
    VENUE_BASE,
)


DEFAULT_SEATS = ['A-1', 'A-2', 'A-3', 'A-4', 'B-1', 'B-2', 'B-3', 'B-4']


@pytest.fixture
def event_payload() -> Callable[..., Dict[str, Any]]:
    def _payload(venue_id: str, **overrides: Any) -> Dict[str, Any]:
        payload = {
            'venue_id': venue_id,
            'name': 'Spring Concert',
            'description': 'Open air',
            'event_start': '2026-06-01T19:00:00Z',
            'event_end': '2026-06-01T22:00:00Z',
            'for_sale_start': '2026-05-01T00:00:00Z',
            'for_sale_end': '2026-06-01T18:00:00Z',
        }
        payload.update(overrides)
        return payload

    return _payload


@pytest.fixture
def create_venue(client: TestClient) -> Callable[..., Dict[str, Any]]:
    def _create(name: str = 'Main Hall', seats: Optional[List[str]] = None) -> Dict[str, Any]:
        response = client.post(
            VENUE_BASE, json={'name': name, 'seats': DEFAULT_SEATS if seats is None else seats}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_event(
    client: TestClient,
    create_venue: Callable[..., Dict[str, Any]],
    event_payload: Callable[..., Dict[str, Any]],
) -> Callable[..., Dict[str, Any]]:
    def _create(venue_id: Optional[str] = None, **overrides: Any) -> Dict[str, Any]:
        if venue_id is None:
            venue_id = create_venue()['id']
        response = client.post(EVENT_BASE, json=event_payload(venue_id, **overrides))
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_ticket_type(client: TestClient) -> Callable[..., Dict[str, Any]]:
    def _create(
        event_id: str,
        name: str = 'Standard',
        price: str = '50.00',
        seats: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        response = client.post(
            EVENT_TICKET_TYPES.format(event_id=event_id),
            json={'name': name, 'price': price, 'seats': seats or ['A-1', 'A-2', 'A-3']},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def list_tickets(client: TestClient) -> Callable[..., List[Dict[str, Any]]]:
    def _list(event_id: str, **params: Any) -> List[Dict[str, Any]]:
        params.setdefault('page_size', 100)
        response = client.get(EVENT_TICKETS.format(event_id=event_id), params=params)
        assert response.status_code == 200, response.text
        return response.json()['items']

    return _list


@pytest.fixture
def on_sale(
    create_event: Callable[..., Dict[str, Any]],
    create_ticket_type: Callable[..., Dict[str, Any]],
    list_tickets: Callable[..., List[Dict[str, Any]]],
) -> Dict[str, Any]:
    """One event with a Standard type on A-1..A-3; returns the event, type and tickets by seat."""
    event = create_event()
    ticket_type = create_ticket_type(event['id'])
    tickets = {t['seat']: t for t in list_tickets(event['id'])}
    return {'event': event, 'ticket_type': ticket_type, 'tickets': tickets}
