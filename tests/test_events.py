"""Tests for the event emitter, session and store publishing."""

from pronet.events import EventEmitter
from pronet.session import Session
from pronet.stores import JobStore, PostStore
from pronet.stores.base import CHANGED


class TestEventEmitter:
    def test_emit_calls_handlers_in_order(self):
        emitter = EventEmitter()
        calls = []
        emitter.subscribe("changed", lambda payload: calls.append(("a", payload)))
        emitter.subscribe("changed", lambda payload: calls.append(("b", payload)))

        assert emitter.emit("changed", 1) == 2
        assert calls == [("a", 1), ("b", 1)]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        calls = []
        unsubscribe = emitter.subscribe("changed", calls.append)
        unsubscribe()
        unsubscribe()
        assert emitter.emit("changed", 1) == 0
        assert calls == []
        assert emitter.handler_count("changed") == 0

    def test_events_are_independent(self):
        emitter = EventEmitter()
        calls = []
        emitter.subscribe("message", calls.append)
        emitter.emit("notification", "x")
        assert calls == []


class TestStorePublishing:
    def test_shared_emitter(self, session, generator):
        emitter = EventEmitter()
        jobs = JobStore(session, generator, events=emitter)
        posts = PostStore(session, generator, events=emitter)
        states = []
        emitter.subscribe(CHANGED, states.append)

        jobs.save_job(jobs.results[0].id)
        posts.share_post(posts.results[0].id)

        assert len(states) == 2
        assert states[0].analytics == jobs.analytics
        assert states[1].analytics == posts.analytics

    def test_state_is_a_snapshot(self, job_store):
        state = job_store.state()
        job_store.results.pop()
        assert len(state.results) == 10

    def test_subscribe_returns_unsubscribe(self, job_store):
        states = []
        unsubscribe = job_store.subscribe(states.append)
        job_store.publish()
        unsubscribe()
        job_store.publish()
        assert len(states) == 1


class TestSession:
    def test_sign_in_and_out(self, user):
        session = Session()
        assert not session.is_authenticated
        assert session.user_id is None

        session.sign_in(user)
        assert session.is_authenticated
        assert session.user_id == user.id

        session.sign_out()
        assert session.current_user is None

    def test_stores_share_session(self, session, generator, user):
        jobs = JobStore(session, generator)
        session.sign_out()
        assert jobs.apply_to_job(jobs.results[0].id) is False
        session.sign_in(user)
        assert jobs.apply_to_job(jobs.results[0].id) is True
