"""The seeding reconciler: converges the database onto the Collabia fixtures.

Phases run strictly in order, each one depending on rows created by the
previous ones:

1. Users               (UpsertOverwrite on the discovery fields)
2. Structured interests (CreateIfAbsent keyed by user)
3. Posts               (CreateIfAbsent keyed by author + title)
4. Interest posts      (CreateIfAbsent keyed by author + content, plus like fan-out)
5. Interest comments   (CreateIfAbsent keyed by post + commenter + content)

The store is committed after each phase. A fault aborts the run immediately;
phases that already committed stay committed.

Every store call is awaited one at a time.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any

from src.collabia_seed.fixtures import (
    SEED_INTEREST_COMMENTS,
    SEED_INTEREST_POSTS,
    SEED_POSTS,
    SEED_STRUCTURED_INTERESTS,
    SEED_USERS,
)
from src.collabia_seed.models import DISCOVERY_FIELDS
from src.collabia_seed.policies import CreateIfAbsent, Outcome, UpsertOverwrite

logger = logging.getLogger(__name__)

# Inclusive bounds on the number of likes given to a newly created interest post.
MIN_FANOUT_LIKES = 1
MAX_FANOUT_LIKES = 4

# Structured interest kind -> SeedStore repository attribute.
_STRUCTURED_REPOSITORIES: dict[str, str] = {
    "book": "current_books",
    "skill": "current_skills",
    "game": "current_games",
}


@dataclass
class EntityTally:
    created: int = 0
    updated: int = 0
    existing: int = 0
    skipped: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.CREATED:
            self.created += 1
        elif outcome is Outcome.UPDATED:
            self.updated += 1
        else:
            self.existing += 1


@dataclass
class SeedReport:
    users: EntityTally = field(default_factory=EntityTally)
    current_books: EntityTally = field(default_factory=EntityTally)
    current_skills: EntityTally = field(default_factory=EntityTally)
    current_games: EntityTally = field(default_factory=EntityTally)
    posts: EntityTally = field(default_factory=EntityTally)
    interest_posts: EntityTally = field(default_factory=EntityTally)
    interest_likes: EntityTally = field(default_factory=EntityTally)
    interest_comments: EntityTally = field(default_factory=EntityTally)

    def as_dict(self) -> dict[str, dict[str, int]]:
        return asdict(self)


class Reconciler:
    """Seeds a SeedStore from fixture data.

    Args:
        store: SeedStore (or any object with the same repositories and commit()).
        password_hash: Precomputed hash stored on every created user.
        rng: Source of randomness for the like fan-out. Pass a seeded
            random.Random for reproducible runs.
        users, structured_interests, posts, interest_posts, comments:
            Fixture overrides. Default to the canonical Collabia fixtures.
    """

    def __init__(
        self,
        store: Any,
        *,
        password_hash: str,
        rng: random.Random | None = None,
        users: Sequence[Mapping[str, Any]] = SEED_USERS,
        structured_interests: Mapping[str, Mapping[str, Mapping[str, Any]]] = SEED_STRUCTURED_INTERESTS,
        posts: Sequence[Mapping[str, Any]] = SEED_POSTS,
        interest_posts: Sequence[Mapping[str, Any]] = SEED_INTEREST_POSTS,
        comments: Sequence[Mapping[str, Any]] = SEED_INTEREST_COMMENTS,
    ) -> None:
        self._store = store
        self._password_hash = password_hash
        self._rng = rng if rng is not None else random.Random()
        self._users = users
        self._structured_interests = structured_interests
        self._posts = posts
        self._interest_posts = interest_posts
        self._comments = comments

        self._discovery_policy = UpsertOverwrite(fields=DISCOVERY_FIELDS)
        self._write_once_policy = CreateIfAbsent()
        self.user_ids: dict[str, str] = {}
        self.report = SeedReport()

    async def run(self) -> SeedReport:
        """Execute all five phases in order and return the per-entity tallies."""
        for phase in (
            self.seed_users,
            self.seed_structured_interests,
            self.seed_posts,
            self.seed_interest_posts,
            self.seed_interest_comments,
        ):
            await phase()
            await self._store.commit()
        return self.report

    # ------------------------------------------------------------------
    # Phase 1: users
    # ------------------------------------------------------------------

    async def seed_users(self) -> None:
        for user_data in self._users:
            email = user_data["email"]
            data = {**user_data, "password": self._password_hash}
            result = await self._discovery_policy.apply(
                self._store.users, {"email": email}, data
            )
            self.report.users.record(result.outcome)
            self.user_ids[email] = result.record.id
            if result.created:
                logger.info("Created user: %s", user_data["name"])
            else:
                logger.info("User already exists, refreshed discovery fields: %s", user_data["name"])

        logger.info("Seeded %d users", len(self._users))

    # ------------------------------------------------------------------
    # Phase 2: structured interests
    # ------------------------------------------------------------------

    async def seed_structured_interests(self) -> None:
        for email, kinds in self._structured_interests.items():
            user_id = await self._resolve_user_id(email)
            if user_id is None:
                logger.warning("Skipping structured interests: no user %s", email)
                for kind in kinds:
                    self._tally(kind).skipped += 1
                continue

            for kind, interest_data in kinds.items():
                repository = getattr(self._store, _STRUCTURED_REPOSITORIES[kind])
                result = await self._write_once_policy.apply(
                    repository, {"user_id": user_id}, interest_data
                )
                self._tally(kind).record(result.outcome)
                if result.created:
                    logger.info("Created current %s for %s", kind, email)

        logger.info("Seeded structured interests for %d users", len(self._structured_interests))

    def _tally(self, kind: str) -> EntityTally:
        return getattr(self.report, _STRUCTURED_REPOSITORIES[kind])

    # ------------------------------------------------------------------
    # Phase 3: legacy posts
    # ------------------------------------------------------------------

    async def seed_posts(self) -> None:
        for post_data in self._posts:
            author = await self._store.users.find_unique(email=post_data["author_email"])
            if author is None:
                logger.warning("Skipping post %r: no author %s", post_data["title"], post_data["author_email"])
                self.report.posts.skipped += 1
                continue

            result = await self._write_once_policy.apply(
                self._store.posts,
                {"author_id": author.id, "title": post_data["title"]},
                {
                    "description": post_data.get("description"),
                    "tags": list(post_data.get("tags", [])),
                    "interest_type": post_data.get("interest_type"),
                    "interest_value": post_data.get("interest_value"),
                    "progress_snapshot": post_data.get("progress_snapshot"),
                },
            )
            self.report.posts.record(result.outcome)
            if result.created:
                logger.info("Created post: %s", post_data["title"])

        logger.info("Seeded %d posts", len(self._posts))

    # ------------------------------------------------------------------
    # Phase 4: interest posts + like fan-out
    # ------------------------------------------------------------------

    async def seed_interest_posts(self) -> None:
        for post_data in self._interest_posts:
            author = await self._store.users.find_unique(email=post_data["author_email"])
            if author is None:
                logger.warning("Skipping interest post: no author %s", post_data["author_email"])
                self.report.interest_posts.skipped += 1
                continue

            result = await self._write_once_policy.apply(
                self._store.interest_posts,
                {"user_id": author.id, "content": post_data["content"]},
                {
                    "type": post_data["type"],
                    "interest_value": post_data["interest_value"],
                    "progress_snapshot": post_data.get("progress_snapshot"),
                },
            )
            self.report.interest_posts.record(result.outcome)
            if not result.created:
                continue

            likes = await self._fan_out_likes(result.record.id, author.id)
            logger.info(
                "Created %s post for %s with %d likes",
                post_data["type"],
                post_data["author_email"],
                likes,
            )

        logger.info("Seeded %d interest posts", len(self._interest_posts))

    async def _fan_out_likes(self, post_id: str, author_id: str) -> int:
        """Like a new post from a random number of other users; return the like count."""
        count = self._rng.randint(MIN_FANOUT_LIKES, MAX_FANOUT_LIKES)
        likers = await self._store.users.find_many(exclude={"id": author_id}, take=count)
        for liker in likers:
            await self._store.interest_likes.create(post_id=post_id, user_id=liker.id)
            self.report.interest_likes.created += 1
            logger.debug("User %s liked post %s", liker.id, post_id)
        return len(likers)

    # ------------------------------------------------------------------
    # Phase 5: interest comments
    # ------------------------------------------------------------------

    async def seed_interest_comments(self) -> None:
        for comment_data in self._comments:
            # First match in the database's default order when the snippet is ambiguous.
            post = await self._store.interest_posts.find_first(
                contains={"content": comment_data["post_snippet"]}
            )
            commenter = await self._store.users.find_unique(email=comment_data["author_email"])
            if post is None or commenter is None:
                logger.warning(
                    "Skipping comment on %r by %s: post or commenter not found",
                    comment_data["post_snippet"],
                    comment_data["author_email"],
                )
                self.report.interest_comments.skipped += 1
                continue

            result = await self._write_once_policy.apply(
                self._store.interest_comments,
                {"post_id": post.id, "user_id": commenter.id, "content": comment_data["content"]},
                {},
            )
            self.report.interest_comments.record(result.outcome)
            if result.created:
                logger.info("Created comment by %s", comment_data["author_email"])

        logger.info("Seeded %d interest comments", len(self._comments))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _resolve_user_id(self, email: str) -> str | None:
        if email in self.user_ids:
            return self.user_ids[email]
        user = await self._store.users.find_unique(email=email)
        return user.id if user is not None else None
