"""Unit tests for bulletin.services.moderation: transitions and guards."""

import unittest
from types import SimpleNamespace

from bulletin.core.enums import PostStatus, UserRole
from bulletin.core.errors import (
    ConflictError,
    InputValidationError,
    InsufficientRole,
    ResourceNotFound,
)
from bulletin.schemas.auth import Identity
from bulletin.services.moderation import (
    ALREADY_MODERATED_MESSAGE,
    can_transition,
    moderate,
)

ADMIN = Identity(subject_id=1, email="admin@example.com", role=UserRole.ADMIN)
ORGANIZER = Identity(subject_id=2, email="org@example.com", role=UserRole.ORGANIZER)


class FakePostStore:
    """In-memory store with the same conditional-update contract as PostRepository."""

    def __init__(self, *posts: SimpleNamespace) -> None:
        self.posts = {p.id: p for p in posts}
        self.transitions: list[tuple[int, PostStatus, PostStatus]] = []
        self.lose_race = False

    def get(self, post_id: int):
        return self.posts.get(post_id)

    def transition_status(self, post_id: int, expected: PostStatus, target: PostStatus) -> bool:
        self.transitions.append((post_id, expected, target))
        post = self.posts.get(post_id)
        if self.lose_race or post is None or post.status != expected.value:
            return False
        post.status = target.value
        return True


def _post(post_id: int = 10, status: PostStatus = PostStatus.PENDING) -> SimpleNamespace:
    return SimpleNamespace(id=post_id, status=status.value, author_id=5)


class TestTransitionTable(unittest.TestCase):
    def test_only_pending_moves(self) -> None:
        self.assertTrue(can_transition(PostStatus.PENDING, PostStatus.APPROVED))
        self.assertTrue(can_transition(PostStatus.PENDING, PostStatus.REJECTED))
        self.assertFalse(can_transition(PostStatus.PENDING, PostStatus.PENDING))
        for terminal in (PostStatus.APPROVED, PostStatus.REJECTED):
            for target in PostStatus:
                with self.subTest(current=terminal, target=target):
                    self.assertFalse(can_transition(terminal, target))


class TestModerate(unittest.TestCase):
    def test_approve_pending_post(self) -> None:
        store = FakePostStore(_post())
        result = moderate(store, 10, PostStatus.APPROVED, ADMIN)
        self.assertEqual(result.status, "approved")
        self.assertEqual(store.transitions, [(10, PostStatus.PENDING, PostStatus.APPROVED)])

    def test_reject_pending_post(self) -> None:
        store = FakePostStore(_post())
        self.assertEqual(moderate(store, 10, PostStatus.REJECTED, ADMIN).status, "rejected")

    def test_non_admin_rejected_before_store_access(self) -> None:
        store = FakePostStore()
        with self.assertRaises(InsufficientRole):
            moderate(store, 999, PostStatus.APPROVED, ORGANIZER)
        self.assertEqual(store.transitions, [])

    def test_pending_is_not_a_decision(self) -> None:
        store = FakePostStore(_post())
        with self.assertRaises(InputValidationError):
            moderate(store, 10, PostStatus.PENDING, ADMIN)
        self.assertEqual(store.transitions, [])

    def test_unknown_post(self) -> None:
        with self.assertRaises(ResourceNotFound) as ctx:
            moderate(FakePostStore(), 42, PostStatus.APPROVED, ADMIN)
        self.assertEqual(ctx.exception.message, "Post not found")

    def test_second_decision_is_conflict_and_keeps_first(self) -> None:
        store = FakePostStore(_post(status=PostStatus.APPROVED))
        with self.assertRaises(ConflictError) as ctx:
            moderate(store, 10, PostStatus.REJECTED, ADMIN)
        self.assertEqual(ctx.exception.message, ALREADY_MODERATED_MESSAGE)
        self.assertEqual(store.get(10).status, "approved")
        self.assertEqual(store.transitions, [])

    def test_same_decision_twice_is_conflict(self) -> None:
        store = FakePostStore(_post(status=PostStatus.REJECTED))
        with self.assertRaises(ConflictError):
            moderate(store, 10, PostStatus.REJECTED, ADMIN)

    def test_lost_race_is_conflict(self) -> None:
        store = FakePostStore(_post())
        store.lose_race = True
        with self.assertRaises(ConflictError):
            moderate(store, 10, PostStatus.APPROVED, ADMIN)
        self.assertEqual(store.get(10).status, "pending")


if __name__ == "__main__":
    unittest.main()
