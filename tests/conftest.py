import pytest
from sqlmodel import Session

from community.core.content_filter import ProfanityFilter
from community.services import ConversationAggregator, MessagingService, UserDirectory
from factories import RecordingPushChannel, create_user, make_engine


@pytest.fixture
def engine():
    engine = make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def push():
    return RecordingPushChannel()


@pytest.fixture
def content_filter():
    return ProfanityFilter(["badword", "nasty"])


@pytest.fixture
def service(session, content_filter, push):
    return MessagingService(session, content_filter, push)


@pytest.fixture
def directory(session):
    return UserDirectory(session)


@pytest.fixture
def aggregator(session):
    return ConversationAggregator(session)


@pytest.fixture
def alice(session):
    return create_user(session, "a@x", "Alice")


@pytest.fixture
def bob(session, alice):
    return create_user(session, "b@x", "Bob", profile_photo="bob.png")


@pytest.fixture
def carol(session, bob):
    return create_user(
        session, "c@x", "Carol", profile_photo="https://cdn.example.com/carol.jpg"
    )
