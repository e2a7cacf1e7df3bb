"""Tests for the feed store."""

import pytest

from pronet.session import Session
from pronet.stores import MutationKind, PostStore, ReportReason


class TestFeedPaging:
    def test_starts_with_featured_posts(self, post_store):
        assert len(post_store.results) == 3
        assert post_store.results[0].author_name == "Sarah Johnson"
        assert post_store.analytics.total_posts == 3

    @pytest.mark.asyncio
    async def test_first_page_replaces_featured(self, post_store):
        assert await post_store.fetch_posts()
        assert post_store.results == post_store.catalog[:20]

    @pytest.mark.asyncio
    async def test_paging_reproduces_catalog(self, post_store):
        while post_store.has_more:
            await post_store.fetch_posts()
        assert post_store.results == post_store.catalog
        assert await post_store.fetch_posts() is False
        assert post_store.results == post_store.catalog

    @pytest.mark.asyncio
    async def test_refresh_starts_over(self, post_store):
        await post_store.fetch_posts()
        await post_store.fetch_posts()
        assert len(post_store.results) == 40
        assert await post_store.refresh()
        assert post_store.results == post_store.catalog[:20]
        assert post_store.has_more


class TestAuthoring:
    def test_create_post(self, post_store, user):
        post = post_store.create_post("Hello @Jordan, loving #Python and #AI")
        assert post_store.results[0] is post
        assert post.author_id == user.id
        assert post.hashtags == ["#python", "#ai"]
        assert post.mentions == ["@jordan"]
        assert post_store.analytics.total_posts == 4

    def test_create_post_requires_user(self, generator):
        store = PostStore(Session(), generator)
        assert store.create_post("hi") is None

    def test_edit(self, post_store):
        post = post_store.results[0]
        assert post_store.mutate(post.id, MutationKind.EDIT, {"content": "Updated #News"})
        assert post.is_edited
        assert post.hashtags == ["#news"]

    def test_delete(self, post_store):
        post = post_store.results[0]
        assert post_store.mutate(post.id, MutationKind.DELETE)
        assert post_store.get_by_id(post.id) is None
        assert post_store.mutate(post.id, MutationKind.DELETE) is False


class TestEngagement:
    def test_like_toggles(self, post_store, user):
        post = post_store.results[0]
        likes = post.like_count

        post_store.mutate(post.id, MutationKind.LIKE)
        assert post.is_liked_by(user.id)
        assert post.like_count == likes + 1
        assert post_store.analytics.total_likes == sum(p.like_count for p in post_store.results)

        post_store.mutate(post.id, MutationKind.LIKE)
        assert post.like_count == likes

    def test_comment_and_reply(self, post_store, user):
        post = post_store.results[0]
        comments = post.comment_count

        assert post_store.mutate(post.id, MutationKind.COMMENT, {"content": "Congrats!"})
        assert post.comment_count == comments + 1
        comment = post.comments[-1]
        assert comment.author_id == user.id

        assert post_store.mutate(
            post.id, MutationKind.REPLY, {"comment_id": comment.id, "content": "Thanks"}
        )
        assert comment.replies[0].content == "Thanks"

    def test_like_comment_toggles(self, post_store):
        post = post_store.results[0]
        comment = post.comments[0]
        post_store.mutate(post.id, MutationKind.LIKE_COMMENT, {"comment_id": comment.id})
        assert comment.like_count == 1
        post_store.mutate(post.id, MutationKind.LIKE_COMMENT, {"comment_id": comment.id})
        assert comment.like_count == 0

    def test_unknown_comment(self, post_store):
        post = post_store.results[0]
        assert post_store.like_comment(post.id, "missing") is False

    def test_share(self, post_store):
        post = post_store.results[0]
        shares = post.share_count
        assert post_store.mutate(post.id, MutationKind.SHARE)
        assert post.share_count == shares + 1

    def test_save_once(self, post_store):
        post = post_store.results[0]
        assert post_store.mutate(post.id, MutationKind.SAVE)
        assert post_store.mutate(post.id, MutationKind.SAVE) is False
        assert post_store.saved_post_ids == [post.id]

    def test_report(self, post_store):
        post = post_store.results[0]
        assert post_store.mutate(post.id, MutationKind.REPORT, {"reason": "spam"})
        assert post_store.reports == [(post.id, ReportReason.SPAM)]

    def test_unknown_post_is_noop(self, post_store):
        shown = list(post_store.results)
        assert post_store.mutate("missing", MutationKind.LIKE) is False
        assert post_store.results == shown

    def test_unsupported_kind_raises(self, post_store):
        with pytest.raises(ValueError):
            post_store.mutate(post_store.results[0].id, MutationKind.APPLY)


class TestDiscovery:
    def test_search_posts(self, post_store):
        found = post_store.search_posts("HACKATHON")
        assert [post.author_name for post in found] == ["David Chen"]

    def test_posts_by_hashtag(self, post_store):
        assert len(post_store.posts_by_hashtag("Innovation")) == 2
        assert post_store.posts_by_hashtag("#innovation") == post_store.posts_by_hashtag("innovation")

    def test_trending_hashtags(self, post_store):
        trending = post_store.trending_hashtags()
        assert trending[0] == ("#innovation", 2)

    def test_recommended_posts(self, post_store):
        recommended = post_store.recommended_posts()
        assert recommended
        dates = [post.created_at for post in recommended]
        assert dates == sorted(dates, reverse=True)

    def test_post_detail_analytics(self, post_store):
        post = post_store.results[0]
        detail = post_store.post_detail_analytics(post.id)
        assert detail.likes == post.like_count
        assert post.like_count * 10 <= detail.impressions <= post.like_count * 50
        assert len(detail.views_by_hour) == 24
        assert post_store.post_detail_analytics("missing") is None


class TestModeration:
    def test_clean_content_approved(self):
        result = PostStore.moderate_content("Sharing some thoughts on distributed systems")
        assert result.is_approved
        assert result.suggested_actions == []

    def test_flagged_words(self):
        result = PostStore.moderate_content("This is a total scam, avoid it")
        assert not result.is_approved
        assert result.suggested_actions == ["review_content"]

    def test_short_content_looks_like_spam(self):
        result = PostStore.moderate_content("buy now")
        assert not result.is_approved
        assert result.spam_score == 0.7
