from factories import add_block, create_user


def test_one_summary_per_peer_with_latest_message(service, aggregator, alice, bob, carol):
    service.send("a->b 1", "a@x", bob.id)
    service.send("c->a 1", "c@x", alice.id)
    service.send("b->a 2", "b@x", alice.id)

    summaries = aggregator.summarize("a@x")

    assert [s.peer_id for s in summaries] == [bob.id, carol.id]
    latest_with_bob = summaries[0]
    assert latest_with_bob.last_message_content == "b->a 2"
    assert latest_with_bob.last_message_sender_id == bob.id
    assert latest_with_bob.peer_name == "Bob"
    assert latest_with_bob.peer_email == "b@x"


def test_latest_message_sent_by_user_counts(service, aggregator, alice, bob):
    service.send("question", "b@x", alice.id)
    answer = service.send("answer", "a@x", bob.id)

    (summary,) = aggregator.summarize("a@x")

    assert summary.last_message_id == answer.id
    assert summary.last_message_sender_id == alice.id


def test_summaries_hide_peers_blocked_either_way(session, service, aggregator, alice, bob, carol):
    dave = create_user(session, "d@x", "Dave")
    service.send("to bob", "a@x", bob.id)
    service.send("to carol", "a@x", carol.id)
    service.send("from dave", "d@x", alice.id)

    add_block(session, alice, bob)
    add_block(session, carol, alice)

    summaries = aggregator.summarize("a@x")

    assert [s.peer_id for s in summaries] == [dave.id]


def test_blocked_peer_hidden_even_with_newest_message(session, service, aggregator, alice, bob, carol):
    service.send("older", "c@x", alice.id)
    service.send("newest", "b@x", alice.id)
    add_block(session, bob, alice)

    summaries = aggregator.summarize("a@x")

    assert [s.peer_id for s in summaries] == [carol.id]


def test_avatar_urls(session, service, aggregator, alice, bob, carol):
    dave = create_user(session, "d@x", "Dave", profile_photo="   ")
    service.send("hi bob", "a@x", bob.id)
    service.send("hi carol", "a@x", carol.id)
    service.send("hi dave", "a@x", dave.id)

    photos = {s.peer_id: s.peer_photo_url for s in aggregator.summarize("a@x")}

    assert photos[bob.id] == "/api/files/bob.png"
    assert photos[carol.id] == "https://cdn.example.com/carol.jpg"
    assert photos[dave.id] == "/images/default-avatar.jpg"


def test_no_conversations(aggregator, alice):
    assert aggregator.summarize("a@x") == []


def test_deleted_conversation_disappears(service, aggregator, alice, bob):
    service.send("hello", "a@x", bob.id)
    service.delete_conversation("b@x", alice.id)

    assert aggregator.summarize("a@x") == []
    assert aggregator.summarize("b@x") == []
