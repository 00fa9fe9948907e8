"""
Property-based tests for blocking and read-marking.

Each example builds its own in-memory database so hypothesis can run many
independent scenarios without sharing state between them.
"""

from contextlib import contextmanager

import pytest
from hypothesis import given, settings, strategies as st
from sqlmodel import Session

from community.core.content_filter import ProfanityFilter
from community.core.errors import Forbidden, InvalidArgument
from community.services import ConversationAggregator, MessagingService, UserDirectory
from factories import RecordingPushChannel, create_user, make_engine


@contextmanager
def world(user_count: int = 2):
    engine = make_engine()
    try:
        with Session(engine) as session:
            users = [
                create_user(session, f"u{i}@x", f"User {i}") for i in range(user_count)
            ]
            service = MessagingService(
                session, ProfanityFilter([]), RecordingPushChannel()
            )
            yield session, service, UserDirectory(session), users
    finally:
        engine.dispose()


@given(a_blocks_b=st.booleans(), b_blocks_a=st.booleans())
@settings(max_examples=20, deadline=None)
def test_send_allowed_only_without_blocks(a_blocks_b, b_blocks_a):
    with world() as (session, service, directory, (a, b)):
        if a_blocks_b:
            directory.block(a.email, b.id)
        if b_blocks_a:
            directory.block(b.email, a.id)

        for sender, recipient in ((a, b), (b, a)):
            if a_blocks_b or b_blocks_a:
                with pytest.raises(Forbidden):
                    service.send("hi", sender.email, recipient.id)
            else:
                service.send("hi", sender.email, recipient.id)

        expected = 0 if (a_blocks_b or b_blocks_a) else 2
        assert len(service.find_between(a.id, b.id)) == expected


@given(b_still_blocks=st.booleans())
@settings(max_examples=10, deadline=None)
def test_unblock_restores_sending_unless_other_side_blocks(b_still_blocks):
    with world() as (session, service, directory, (a, b)):
        directory.block(a.email, b.id)
        if b_still_blocks:
            directory.block(b.email, a.id)

        directory.unblock(a.email, b.id)

        if b_still_blocks:
            with pytest.raises(Forbidden):
                service.send("hi", a.email, b.id)
        else:
            assert service.send("hi", a.email, b.id).content == "hi"


@given(directions=st.lists(st.booleans(), min_size=0, max_size=12))
@settings(max_examples=25, deadline=None)
def test_mark_read_is_idempotent_and_never_increases_count(directions):
    with world() as (session, service, directory, (a, b)):
        for a_to_b in directions:
            if a_to_b:
                service.send("ping", a.email, b.id)
            else:
                service.send("pong", b.email, a.id)

        before = service.count_unread(b.email)
        service.mark_conversation_read(b.email, a.id)
        once = service.count_unread(b.email)
        service.mark_conversation_read(b.email, a.id)
        twice = service.count_unread(b.email)

        assert once == twice == 0
        assert once <= before
        # messages addressed to a are untouched
        assert service.count_unread(a.email) == directions.count(False)


@given(
    blocks=st.lists(
        st.tuples(st.integers(min_value=1, max_value=4), st.booleans()),
        max_size=6,
    )
)
@settings(max_examples=25, deadline=None)
def test_summaries_never_include_blocked_peers(blocks):
    with world(user_count=5) as (session, service, directory, users):
        me = users[0]
        for peer in users[1:]:
            service.send("hello", peer.email, me.id)

        hidden = set()
        for index, i_block in blocks:
            peer = users[index]
            if i_block:
                directory.block(me.email, peer.id)
            else:
                directory.block(peer.email, me.id)
            hidden.add(peer.id)

        summaries = ConversationAggregator(session).summarize(me.email)

        peer_ids = {s.peer_id for s in summaries}
        assert peer_ids == {u.id for u in users[1:]} - hidden
        assert len(summaries) == len(peer_ids)


@given(existing=st.sampled_from(["none", "blocked_other", "blocked_by_other"]))
@settings(max_examples=6, deadline=None)
def test_self_block_always_invalid(existing):
    with world() as (session, service, directory, (a, b)):
        if existing == "blocked_other":
            directory.block(a.email, b.id)
        elif existing == "blocked_by_other":
            directory.block(b.email, a.id)

        with pytest.raises(InvalidArgument):
            directory.block(a.email, a.id)
