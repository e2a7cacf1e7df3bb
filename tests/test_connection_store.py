"""Tests for the network store."""

import pytest

from pronet.models import ConnectionStatus
from pronet.session import Session
from pronet.stores import ConnectionStore, MutationKind


class TestSuggestions:
    def test_initial_state(self, connection_store):
        analytics = connection_store.analytics
        assert analytics.suggestions == 10
        assert analytics.connections == 3
        assert analytics.pending_requests == 2
        assert analytics.sent_requests == 0

    def test_anonymous_has_no_pending_requests(self, generator):
        assert ConnectionStore(Session(), generator).pending_requests == []

    def test_search_users(self, connection_store):
        found = connection_store.search_users("ENGINEER")
        assert {user.full_name for user in found} == {"Alice Cooper", "Grace Wilson"}
        assert connection_store.results == found

    def test_search_matches_bio(self, connection_store):
        found = connection_store.search_users("frontiers")
        assert [user.full_name for user in found] == ["Jack Anderson"]

    def test_empty_query_restores_suggestions(self, connection_store):
        connection_store.search_users("alice")
        connection_store.search_users("")
        assert len(connection_store.results) == 10

    @pytest.mark.asyncio
    async def test_fetch_users_excludes_requested(self, connection_store):
        target = connection_store.results[0]
        connection_store.send_connection_request(target.id)
        assert await connection_store.fetch_users()
        assert target not in connection_store.results
        assert len(connection_store.results) == 9


class TestRequests:
    def test_connect(self, connection_store, user):
        target = connection_store.results[0]
        assert connection_store.mutate(target.id, MutationKind.CONNECT, {"message": "Hi!"})

        sent = connection_store.sent_requests[0]
        assert sent.from_user_id == user.id
        assert sent.to_user_id == target.id
        assert sent.request_message == "Hi!"
        assert sent.status is ConnectionStatus.PENDING
        assert target not in connection_store.results
        assert connection_store.analytics.sent_requests == 1
        assert connection_store.connection_status(target.id) is ConnectionStatus.PENDING

    def test_connect_unknown_user(self, connection_store):
        assert connection_store.mutate("missing", MutationKind.CONNECT) is False
        assert connection_store.sent_requests == []

    def test_connect_to_member_hidden_by_search(self, connection_store):
        grace = next(u for u in connection_store.results if u.full_name == "Grace Wilson")
        connection_store.search_users("alice")
        assert grace not in connection_store.results

        assert connection_store.mutate(grace.id, MutationKind.CONNECT)

        assert connection_store.sent_requests[0].to_user_id == grace.id
        assert connection_store.connection_status(grace.id) is ConnectionStatus.PENDING
        assert connection_store.send_connection_request(grace.id) is False
        assert len(connection_store.sent_requests) == 1

    def test_connect_to_existing_connection(self, connection_store):
        friend = connection_store.connections[0]
        assert connection_store.mutate(friend.id, MutationKind.CONNECT) is False
        assert connection_store.sent_requests == []

    def test_accept(self, connection_store):
        request = connection_store.pending_requests[0]
        assert connection_store.mutate(request.id, MutationKind.ACCEPT)

        assert request.connection.status is ConnectionStatus.ACCEPTED
        assert request.connection.accepted_at is not None
        assert request.from_user in connection_store.connections
        assert connection_store.analytics.pending_requests == 1
        assert connection_store.analytics.connections == 4
        assert connection_store.connection_status(request.from_user.id) is ConnectionStatus.ACCEPTED

    def test_decline(self, connection_store):
        request = connection_store.pending_requests[0]
        assert connection_store.mutate(request.id, MutationKind.DECLINE)
        assert request.connection.status is ConnectionStatus.DECLINED
        assert request.from_user not in connection_store.connections
        assert connection_store.mutate(request.id, MutationKind.DECLINE) is False

    def test_remove_connection(self, connection_store):
        friend = connection_store.connections[0]
        assert connection_store.mutate(friend.id, MutationKind.REMOVE)
        assert friend not in connection_store.connections
        assert connection_store.connection_status(friend.id) is None

    def test_withdraw_request(self, connection_store):
        target = connection_store.results[0]
        connection_store.send_connection_request(target.id)
        connection = connection_store.sent_requests[0]

        assert connection_store.mutate(connection.id, MutationKind.WITHDRAW)
        assert connection.status is ConnectionStatus.WITHDRAWN
        assert connection_store.sent_requests == []

    def test_unsupported_kind_raises(self, connection_store):
        with pytest.raises(ValueError):
            connection_store.mutate("anything", MutationKind.LIKE)
