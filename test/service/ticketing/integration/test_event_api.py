from uuid import uuid4

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    EVENT_BASE,
    EVENT_GET,
    EVENT_TICKET_TYPE_GET,
    EVENT_TICKET_TYPES,
    EVENT_TICKETS,
    TICKET_RESERVATIONS,
)


@pytest.mark.integration
class TestEventApi:
    def test_create_and_get_event(self, client: TestClient, create_venue, event_payload) -> None:
        venue = create_venue()

        response = client.post(EVENT_BASE, json=event_payload(venue['id']))

        assert response.status_code == 201
        event = response.json()
        assert event['venue_id'] == venue['id']
        assert event['description'] == 'Open air'
        assert client.get(EVENT_GET.format(event_id=event['id'])).json() == event

    def test_event_at_unknown_venue(self, client: TestClient, event_payload, assert_error) -> None:
        response = client.post(EVENT_BASE, json=event_payload(str(uuid4())))
        assert_error(response, 404, 'not_found')

    @pytest.mark.parametrize(
        'overrides',
        [
            {'event_end': '2026-06-01T18:00:00Z'},
            {'for_sale_end': '2026-04-01T00:00:00Z'},
            {'name': ' '},
        ],
    )
    def test_invalid_event(
        self, client: TestClient, create_venue, event_payload, assert_error, overrides
    ) -> None:
        venue = create_venue()
        response = client.post(EVENT_BASE, json=event_payload(venue['id'], **overrides))
        assert_error(response, 400, 'invalid_argument')

    def test_update_event(self, client: TestClient, create_event, event_payload) -> None:
        event = create_event()

        response = client.put(
            EVENT_GET.format(event_id=event['id']),
            json=event_payload(event['venue_id'], name='Summer Concert'),
        )

        assert response.status_code == 200
        assert response.json()['name'] == 'Summer Concert'
        assert response.json()['id'] == event['id']

    def test_venue_change_refused_once_ticket_types_exist(
        self,
        client: TestClient,
        create_venue,
        create_event,
        create_ticket_type,
        event_payload,
        assert_error,
    ) -> None:
        event = create_event()
        other_venue = create_venue(name='Annex')
        moved = client.put(
            EVENT_GET.format(event_id=event['id']), json=event_payload(other_venue['id'])
        )
        assert moved.status_code == 200

        create_ticket_type(event['id'])
        response = client.put(
            EVENT_GET.format(event_id=event['id']), json=event_payload(event['venue_id'])
        )
        assert_error(response, 409, 'conflict')

    def test_list_events_is_paged_in_creation_order(self, client: TestClient, create_event) -> None:
        ids = [create_event(name=f'Event {i}')['id'] for i in range(3)]

        first = client.get(EVENT_BASE, params={'page': 1, 'page_size': 2}).json()
        second = client.get(EVENT_BASE, params={'page': 2, 'page_size': 2}).json()

        assert [e['id'] for e in first['items']] == ids[:2]
        assert [e['id'] for e in second['items']] == ids[2:]
        assert first['total_items'] == 3
        assert first['total_pages'] == 2

    def test_list_events_errors(self, client: TestClient, create_event, assert_error) -> None:
        create_event()

        assert_error(client.get(EVENT_BASE, params={'page': 0}), 400, 'invalid_argument')
        assert_error(client.get(EVENT_BASE, params={'page_size': 0}), 400, 'invalid_argument')
        assert_error(client.get(EVENT_BASE, params={'page': 5}), 400, 'out_of_range')

    def test_no_events_yields_an_empty_page(self, client: TestClient) -> None:
        body = client.get(EVENT_BASE).json()
        assert body['items'] == []
        assert body['total_pages'] == 0


@pytest.mark.integration
class TestTicketTypeApi:
    def test_create_ticket_type_creates_tickets(
        self, client: TestClient, create_event, list_tickets
    ) -> None:
        event = create_event()

        response = client.post(
            EVENT_TICKET_TYPES.format(event_id=event['id']),
            json={'name': 'VIP', 'price': '120.00', 'seats': ['B-1', 'B-2']},
        )

        assert response.status_code == 201
        ticket_type = response.json()
        assert ticket_type['price'] == '120.00'
        tickets = list_tickets(event['id'])
        assert [t['seat'] for t in tickets] == ['B-1', 'B-2']
        assert {t['status'] for t in tickets} == {'available'}
        assert {t['ticket_type_id'] for t in tickets} == {ticket_type['id']}

    def test_get_and_list_ticket_types(
        self, client: TestClient, create_event, create_ticket_type
    ) -> None:
        event = create_event()
        standard = create_ticket_type(event['id'])
        vip = create_ticket_type(event['id'], name='VIP', price='99', seats=['B-1'])

        listed = client.get(EVENT_TICKET_TYPES.format(event_id=event['id'])).json()
        fetched = client.get(
            EVENT_TICKET_TYPE_GET.format(event_id=event['id'], ticket_type_id=vip['id'])
        ).json()

        assert [t['id'] for t in listed] == [standard['id'], vip['id']]
        assert fetched == vip

    def test_seat_outside_venue(self, client: TestClient, create_event, assert_error) -> None:
        event = create_event()
        response = client.post(
            EVENT_TICKET_TYPES.format(event_id=event['id']),
            json={'name': 'VIP', 'price': '10', 'seats': ['Z-9']},
        )
        assert_error(response, 409, 'conflict')

    def test_seat_already_used_by_another_type(
        self, client: TestClient, create_event, create_ticket_type, list_tickets, assert_error
    ) -> None:
        event = create_event()
        create_ticket_type(event['id'])

        response = client.post(
            EVENT_TICKET_TYPES.format(event_id=event['id']),
            json={'name': 'VIP', 'price': '10', 'seats': ['A-3', 'A-4']},
        )

        assert_error(response, 409, 'conflict')
        assert len(list_tickets(event['id'])) == 3
        assert len(client.get(EVENT_TICKET_TYPES.format(event_id=event['id'])).json()) == 1

    def test_negative_price(self, client: TestClient, create_event, assert_error) -> None:
        event = create_event()
        response = client.post(
            EVENT_TICKET_TYPES.format(event_id=event['id']),
            json={'name': 'VIP', 'price': '-1', 'seats': ['A-1']},
        )
        assert_error(response, 400, 'invalid_argument')

    def test_update_ticket_type_reconciles_seats(
        self, client: TestClient, on_sale, list_tickets
    ) -> None:
        event_id = on_sale['event']['id']
        ticket_type = on_sale['ticket_type']
        before = on_sale['tickets']

        response = client.put(
            EVENT_TICKET_TYPE_GET.format(event_id=event_id, ticket_type_id=ticket_type['id']),
            json={'name': 'Standard', 'price': '55.00', 'seats': ['A-2', 'A-3', 'A-4']},
        )

        assert response.status_code == 200
        assert response.json()['price'] == '55.00'
        after = {t['seat']: t for t in list_tickets(event_id)}
        assert set(after) == {'A-2', 'A-3', 'A-4'}
        assert after['A-2']['id'] == before['A-2']['id']
        assert after['A-3']['id'] == before['A-3']['id']

    def test_update_blocked_by_reserved_seat(
        self, client: TestClient, on_sale, list_tickets, assert_error
    ) -> None:
        event_id = on_sale['event']['id']
        ticket_type = on_sale['ticket_type']
        held = on_sale['tickets']['A-1']
        client.post(TICKET_RESERVATIONS.format(ticket_id=held['id']), json={'user_id': 'alice'})

        response = client.put(
            EVENT_TICKET_TYPE_GET.format(event_id=event_id, ticket_type_id=ticket_type['id']),
            json={'name': 'Renamed', 'price': '1.00', 'seats': ['A-2', 'A-3']},
        )

        assert_error(response, 409, 'conflict')
        assert len(list_tickets(event_id)) == 3
        stored = client.get(
            EVENT_TICKET_TYPE_GET.format(event_id=event_id, ticket_type_id=ticket_type['id'])
        ).json()
        assert stored == ticket_type

    def test_unknown_event_or_ticket_type(
        self, client: TestClient, create_event, assert_error
    ) -> None:
        event = create_event()

        assert_error(
            client.get(EVENT_TICKET_TYPES.format(event_id=uuid4())), 404, 'not_found'
        )
        assert_error(
            client.get(
                EVENT_TICKET_TYPE_GET.format(event_id=event['id'], ticket_type_id=uuid4())
            ),
            404,
            'not_found',
        )
        assert_error(client.get(EVENT_TICKETS.format(event_id=uuid4())), 404, 'not_found')
