from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import ErrorKind
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.ticketing_error import (
    AlreadySoldError,
    InvalidArgumentError,
    PageOutOfRangeError,
    TicketNotFoundError,
    TicketUnavailableError,
)


class _Body(BaseModel):
    amount: int


@pytest.fixture(scope='module')
def error_client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/not-found')
    def not_found() -> None:
        raise TicketNotFoundError('01900000-0000-7000-8000-000000000001')  # type: ignore[arg-type]

    @app.get('/conflict')
    def conflict() -> None:
        raise AlreadySoldError('01900000-0000-7000-8000-000000000001')  # type: ignore[arg-type]

    @app.get('/invalid')
    def invalid() -> None:
        raise InvalidArgumentError('user_id is required')

    @app.get('/out-of-range')
    def out_of_range() -> None:
        raise PageOutOfRangeError(9, 2)

    @app.post('/body')
    def body(request: _Body) -> int:
        return request.amount

    @app.get('/boom')
    def boom() -> None:
        raise RuntimeError('unexpected')

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestErrorKinds:
    def test_every_domain_error_carries_its_kind(self) -> None:
        assert TicketNotFoundError('x').kind is ErrorKind.NOT_FOUND  # type: ignore[arg-type]
        assert InvalidArgumentError('x').kind is ErrorKind.INVALID_ARGUMENT
        assert PageOutOfRangeError(2, 1).kind is ErrorKind.OUT_OF_RANGE
        unavailable = TicketUnavailableError('x', TicketStatus.SOLD)  # type: ignore[arg-type]
        assert unavailable.kind is ErrorKind.CONFLICT
        assert 'sold' in unavailable.message


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'path, status_code, kind',
        [
            ('/not-found', 404, 'not_found'),
            ('/conflict', 409, 'conflict'),
            ('/invalid', 400, 'invalid_argument'),
            ('/out-of-range', 400, 'out_of_range'),
            ('/boom', 500, 'internal'),
        ],
    )
    def test_error_body(
        self, error_client: TestClient, path: str, status_code: int, kind: str
    ) -> None:
        response = error_client.get(path)

        assert response.status_code == status_code
        assert response.json()['kind'] == kind
        assert response.json()['detail']

    def test_request_validation_is_invalid_argument(self, error_client: TestClient) -> None:
        response = error_client.post('/body', json={'amount': 'lots'})

        assert response.status_code == 400
        assert response.json()['kind'] == 'invalid_argument'
        assert response.json()['detail'][0]['loc'] == ['body', 'amount']
