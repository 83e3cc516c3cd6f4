"""Integrity checks on the literal seed fixtures.

The reconciler trusts these invariants; a fixture edit that breaks one of them
silently changes what gets seeded.
"""
from __future__ import annotations

from collections import Counter

import pytest

from src.collabia_seed.fixtures import (
    ALL_USER_EMAILS,
    SEED_INTEREST_COMMENTS,
    SEED_INTEREST_POSTS,
    SEED_POSTS,
    SEED_STRUCTURED_INTERESTS,
    SEED_USERS,
)
from src.collabia_seed.models import (
    DISCOVERY_FIELDS,
    BookStatus,
    GameFrequency,
    InterestType,
    LookingFor,
    SkillLevel,
    User,
)


pytestmark = pytest.mark.unit


class TestUserFixtures:
    def test_ten_users_with_unique_emails(self) -> None:
        emails = [user["email"] for user in SEED_USERS]
        assert len(emails) == 10
        assert len(set(emails)) == 10
        assert emails == ALL_USER_EMAILS

    def test_every_user_sets_all_discovery_fields(self) -> None:
        for user in SEED_USERS:
            for field in DISCOVERY_FIELDS:
                assert user.get(field), f"{user['email']} missing {field}"

    def test_looking_for_values_are_known(self) -> None:
        allowed = {member.value for member in LookingFor}
        assert {user["looking_for"] for user in SEED_USERS} <= allowed

    def test_user_keys_are_mapped_attributes(self) -> None:
        for user in SEED_USERS:
            for key in user:
                assert hasattr(User, key), f"User has no attribute {key!r}"

    def test_users_carry_no_password(self) -> None:
        assert all("password" not in user for user in SEED_USERS)


class TestStructuredInterestFixtures:
    def test_one_triple_per_user(self) -> None:
        assert set(SEED_STRUCTURED_INTERESTS) == set(ALL_USER_EMAILS)
        for kinds in SEED_STRUCTURED_INTERESTS.values():
            assert set(kinds) == {"book", "skill", "game"}

    def test_enum_values_are_known(self) -> None:
        statuses = {member.value for member in BookStatus}
        levels = {member.value for member in SkillLevel}
        frequencies = {member.value for member in GameFrequency} | {None}
        for kinds in SEED_STRUCTURED_INTERESTS.values():
            assert kinds["book"]["status"] in statuses
            assert kinds["skill"]["level"] in levels
            assert kinds["game"]["frequency"] in frequencies

    def test_pages_read_never_exceeds_total(self) -> None:
        for kinds in SEED_STRUCTURED_INTERESTS.values():
            book = kinds["book"]
            assert 0 <= book["pages_read"] <= book["total_pages"]


class TestPostFixtures:
    def test_counts(self) -> None:
        assert len(SEED_POSTS) == 8
        assert len(SEED_INTEREST_POSTS) == 18
        assert len(SEED_INTEREST_COMMENTS) == 6

    def test_authors_are_seeded_users(self) -> None:
        emails = set(ALL_USER_EMAILS)
        for record in [*SEED_POSTS, *SEED_INTEREST_POSTS, *SEED_INTEREST_COMMENTS]:
            assert record["author_email"] in emails

    def test_post_titles_unique_per_author(self) -> None:
        keys = Counter((post["author_email"], post["title"]) for post in SEED_POSTS)
        assert max(keys.values()) == 1

    def test_interest_post_content_unique_per_author(self) -> None:
        keys = Counter((post["author_email"], post["content"]) for post in SEED_INTEREST_POSTS)
        assert max(keys.values()) == 1

    def test_interest_types_are_known(self) -> None:
        types = {member.value for member in InterestType}
        assert {post["type"] for post in SEED_INTEREST_POSTS} <= types
        assert {post["interest_type"] for post in SEED_POSTS if "interest_type" in post} <= types

    def test_progress_snapshot_only_on_book_posts(self) -> None:
        for post in SEED_INTEREST_POSTS:
            if post.get("progress_snapshot") is not None:
                assert post["type"] == "book"


class TestCommentSnippets:
    def test_each_snippet_matches_exactly_one_interest_post(self) -> None:
        """A snippet shared by two posts would attach the comment to whichever comes first."""
        for comment in SEED_INTEREST_COMMENTS:
            matches = [post for post in SEED_INTEREST_POSTS if comment["post_snippet"] in post["content"]]
            assert len(matches) == 1, f"snippet {comment['post_snippet']!r} matched {len(matches)} posts"

    def test_commenters_do_not_comment_on_their_own_posts(self) -> None:
        for comment in SEED_INTEREST_COMMENTS:
            (post,) = [p for p in SEED_INTEREST_POSTS if comment["post_snippet"] in p["content"]]
            assert post["author_email"] != comment["author_email"]
