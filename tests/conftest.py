import pytest

from mizu.network import Network
from mizu.session import Session

from tests.factories import APP_ID, ENDPOINTS, USER_ID, RecordingExecutor, make_token


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def session() -> Session:
    return Session(APP_ID, Network.TESTNET, endpoints=ENDPOINTS)


@pytest.fixture
def logged_in_session(session: Session) -> Session:
    session.establish(USER_ID, make_token())
    return session
