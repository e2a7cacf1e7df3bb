"""Feed store: paging, posting and engagement."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..analytics import (
    PostAnalytics,
    PostDetailAnalytics,
    compute_post_analytics,
    trending_hashtags,
)
from ..filters import post_matches
from ..models import Comment, Post, Reply
from ..pagination import PaginationCursor
from ..sample_data import INAPPROPRIATE_WORDS
from ..text_utils import extract_hashtags, extract_mentions
from .base import MutationKind, ObservableStore

logger = logging.getLogger(__name__)

# Stand-in for a member's interaction history
DEFAULT_INTEREST_HASHTAGS = ["#technology", "#innovation", "#leadership", "#growth"]


class ReportReason(str, Enum):
    SPAM = "spam"
    HARASSMENT = "harassment"
    INAPPROPRIATE = "inappropriate"
    MISINFORMATION = "misinformation"
    COPYRIGHT = "copyright"
    OTHER = "other"


@dataclass(frozen=True)
class ModerationResult:
    is_approved: bool
    profanity_score: float
    spam_score: float
    suggested_actions: List[str]


class PostStore(ObservableStore[Post]):
    """The home feed."""

    name = "posts"

    def __init__(
        self,
        session,
        generator,
        events=None,
        page_size: int = 20,
        catalog_size: int = 100,
        delay: float = 0.0,
    ):
        super().__init__(session, generator, events=events, delay=delay)
        self.cursor = PaginationCursor(page_size)
        self.catalog: List[Post] = generator.generate_posts(catalog_size)
        self.saved_post_ids: List[str] = []
        self.reports: List[Tuple[str, ReportReason]] = []

        self.results = generator.featured_posts()
        self.cache_entities(self.results)
        self.analytics = self.compute_analytics()

    def compute_analytics(self) -> PostAnalytics:
        return compute_post_analytics(self.results)

    def mutation_handlers(self):
        return {
            MutationKind.LIKE: self.like_post,
            MutationKind.COMMENT: self.add_comment,
            MutationKind.LIKE_COMMENT: self.like_comment,
            MutationKind.REPLY: self.reply_to_comment,
            MutationKind.SHARE: self.share_post,
            MutationKind.EDIT: self.update_post,
            MutationKind.DELETE: self.delete_post,
            MutationKind.SAVE: self.save_post,
            MutationKind.REPORT: self.report_post,
        }

    # Paging

    async def fetch_posts(self) -> bool:
        """
        Load the next page of the feed.

        The first page replaces whatever is shown; later pages are appended.

        Returns:
            True if a page was delivered.
        """
        if self.is_loading or not self.has_more:
            return False

        generation = self._begin_loading()
        await self._simulate_latency()
        if self._is_stale(generation):
            return False

        first_page = self.cursor.current_page == 0
        page = self.cursor.next_page(self.catalog)
        if first_page:
            self.results = page
        else:
            self.results.extend(page)
        self.has_more = self.cursor.has_more
        self.cache_entities(page)
        self._finish_loading()
        return bool(page)

    async def refresh(self) -> bool:
        """Drop everything loaded so far and fetch the first page again."""
        self.cursor.reset()
        self.has_more = True
        self.cache.clear()
        self.is_loading = False
        self._generation += 1
        return await self.fetch_posts()

    # Authoring

    def create_post(
        self,
        content: str,
        image_urls: Optional[List[str]] = None,
        video_url: Optional[str] = None,
    ) -> Optional[Post]:
        """Publish a post by the session user at the top of the feed."""
        user = self.session.current_user
        if user is None:
            return None

        post = Post(
            id=self.generator.new_id(),
            author_id=user.id,
            author_name=user.full_name,
            content=content,
            author_headline=user.headline,
            author_profile_image_url=user.profile_image_url,
            image_urls=list(image_urls or []),
            video_url=video_url,
            hashtags=extract_hashtags(content),
            mentions=extract_mentions(content),
            created_at=self.generator.now(),
            updated_at=self.generator.now(),
        )
        self.results.insert(0, post)
        self.cache[post.id] = post
        logger.info(f"Post created - {post.id}")
        self.commit()
        return post

    def update_post(self, post_id: str, content: str) -> bool:
        post = self.get_by_id(post_id)
        if post is None:
            return False
        post.content = content
        post.updated_at = self.generator.now()
        post.is_edited = True
        post.hashtags = extract_hashtags(content)
        post.mentions = extract_mentions(content)
        self.cache[post.id] = post
        self.commit()
        return True

    def delete_post(self, post_id: str) -> bool:
        if self.get_by_id(post_id) is None:
            return False
        self.results = [post for post in self.results if post.id != post_id]
        self.cache.pop(post_id, None)
        logger.info(f"Post deleted - {post_id}")
        self.commit()
        return True

    # Engagement

    def like_post(self, post_id: str) -> bool:
        """Toggle the session user's like on a post."""
        user_id = self._current_user_id()
        post = self.get_by_id(post_id)
        if user_id is None or post is None:
            return False
        if post.is_liked_by(user_id):
            post.liked_by_user_ids.discard(user_id)
        else:
            post.liked_by_user_ids.add(user_id)
            logger.info(f"like on post {post_id}")
        self.commit()
        return True

    def share_post(self, post_id: str) -> bool:
        post = self.get_by_id(post_id)
        if post is None:
            return False
        post.share_count += 1
        logger.info(f"share on post {post_id}")
        self.commit()
        return True

    def add_comment(self, post_id: str, content: str) -> bool:
        user = self.session.current_user
        post = self.get_by_id(post_id)
        if user is None or post is None:
            return False
        post.comments.append(
            Comment(
                id=self.generator.new_id(),
                author_id=user.id,
                author_name=user.full_name,
                author_profile_image_url=user.profile_image_url,
                content=content,
                created_at=self.generator.now(),
                updated_at=self.generator.now(),
            )
        )
        logger.info(f"comment on post {post_id}")
        self.commit()
        return True

    def like_comment(self, post_id: str, comment_id: str) -> bool:
        """Toggle the session user's like on a comment."""
        user_id = self._current_user_id()
        post = self.get_by_id(post_id)
        comment = post.find_comment(comment_id) if post else None
        if user_id is None or comment is None:
            return False
        if user_id in comment.liked_by_user_ids:
            comment.liked_by_user_ids.discard(user_id)
        else:
            comment.liked_by_user_ids.add(user_id)
        self.commit()
        return True

    def reply_to_comment(self, post_id: str, comment_id: str, content: str) -> bool:
        user = self.session.current_user
        post = self.get_by_id(post_id)
        comment = post.find_comment(comment_id) if post else None
        if user is None or comment is None:
            return False
        comment.replies.append(
            Reply(
                id=self.generator.new_id(),
                author_id=user.id,
                author_name=user.full_name,
                author_profile_image_url=user.profile_image_url,
                content=content,
                created_at=self.generator.now(),
            )
        )
        comment.updated_at = self.generator.now()
        self.commit()
        return True

    def save_post(self, post_id: str) -> bool:
        if self.get_by_id(post_id) is None or post_id in self.saved_post_ids:
            return False
        self.saved_post_ids.append(post_id)
        logger.info(f"Post {post_id} saved")
        self.commit()
        return True

    def report_post(self, post_id: str, reason: ReportReason = ReportReason.OTHER) -> bool:
        if self.get_by_id(post_id) is None:
            return False
        reason = ReportReason(reason)
        self.reports.append((post_id, reason))
        logger.info(f"Post {post_id} reported for: {reason.value}")
        self.commit()
        return True

    # Discovery

    def search_posts(self, query: str) -> List[Post]:
        return [post for post in self.results if post_matches(post, query)]

    def posts_by_hashtag(self, hashtag: str) -> List[Post]:
        tag = hashtag.lower()
        if not tag.startswith("#"):
            tag = f"#{tag}"
        return [post for post in self.results if tag in (h.lower() for h in post.hashtags)]

    def trending_hashtags(self, limit: int = 10) -> List[Tuple[str, int]]:
        return trending_hashtags(self.results, limit)

    def recommended_posts(self, user_id: Optional[str] = None) -> List[Post]:
        """Posts sharing a hashtag with the member's interests, newest first."""
        interests = set(DEFAULT_INTEREST_HASHTAGS)
        matched = [post for post in self.results if interests.intersection(post.hashtags)]
        return sorted(matched, key=lambda post: post.created_at, reverse=True)

    # Insights

    def post_detail_analytics(self, post_id: str) -> Optional[PostDetailAnalytics]:
        post = self.get_by_id(post_id)
        if post is None:
            return None
        rng = self.generator.rng
        impressions = rng.randint(post.like_count * 10, post.like_count * 50) if post.like_count else 0
        engagement = post.like_count + post.comment_count + post.share_count
        return PostDetailAnalytics(
            post_id=post_id,
            impressions=impressions,
            likes=post.like_count,
            comments=post.comment_count,
            shares=post.share_count,
            engagement_rate=engagement / impressions * 100 if impressions else 0.0,
            demographics={
                "age_groups": {
                    "18-24": rng.randint(10, 25),
                    "25-34": rng.randint(30, 45),
                    "35-44": rng.randint(20, 35),
                    "45+": rng.randint(5, 20),
                },
                "locations": {
                    "United States": rng.randint(40, 60),
                    "Europe": rng.randint(20, 35),
                    "Asia": rng.randint(15, 30),
                    "Other": rng.randint(5, 15),
                },
                "industries": {
                    "Technology": rng.randint(30, 50),
                    "Finance": rng.randint(15, 25),
                    "Healthcare": rng.randint(10, 20),
                    "Other": rng.randint(15, 25),
                },
            },
            views_by_hour=[rng.randint(5, 50) for _ in range(24)],
        )

    @staticmethod
    def moderate_content(content: str) -> ModerationResult:
        """Score a draft for blocked words and very short (spam-like) text."""
        lowered = content.lower()
        flagged = any(word in lowered for word in INAPPROPRIATE_WORDS)
        profanity_score = 0.8 if flagged else 0.1
        spam_score = 0.7 if len(content) < 10 else 0.1
        return ModerationResult(
            is_approved=profanity_score < 0.5 and spam_score < 0.5,
            profanity_score=profanity_score,
            spam_score=spam_score,
            suggested_actions=["review_content"] if profanity_score > 0.5 else [],
        )
