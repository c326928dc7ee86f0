"""Unit tests for FakeUserRepository — verifies Port contract compliance."""

import unittest

from adapter.fake.user_repository import FakeUserRepository
from domain.model.errors import DuplicateResourceError
from domain.model.user import User


class TestFakeUserRepository(unittest.TestCase):
    """Tests that FakeUserRepository correctly implements UserRepository Protocol."""

    def setUp(self):
        self.repo = FakeUserRepository()

    # ── create ────────────────────────────────────────────────

    def test_create_assigns_id_and_created_at(self):
        user = self.repo.create(name='Ana', email='ana@x.com', password_hash='$2b$hash')

        self.assertIsInstance(user, User)
        self.assertTrue(user.id)
        self.assertIsNotNone(user.created_at)
        self.assertIsNotNone(user.created_at.tzinfo)
        self.assertEqual(user.password_hash, '$2b$hash')

    def test_create_generates_unique_ids(self):
        a = self.repo.create(name='A', email='a@x.com', password_hash='h')
        b = self.repo.create(name='B', email='b@x.com', password_hash='h')
        self.assertNotEqual(a.id, b.id)

    def test_create_duplicate_email_raises(self):
        self.repo.create(name='Ana', email='ana@x.com', password_hash='h')

        with self.assertRaises(DuplicateResourceError):
            self.repo.create(name='Other', email='ana@x.com', password_hash='h2')

        self.assertEqual(len(self.repo.store), 1)

    # ── get_by_email ──────────────────────────────────────────

    def test_get_by_email_includes_hash(self):
        self.repo.create(name='Ana', email='ana@x.com', password_hash='h')

        user = self.repo.get_by_email('ana@x.com')

        self.assertEqual(user.name, 'Ana')
        self.assertEqual(user.password_hash, 'h')

    def test_get_by_email_is_exact_match(self):
        self.repo.create(name='Ana', email='ana@x.com', password_hash='h')
        self.assertIsNone(self.repo.get_by_email('ANA@x.com'))

    def test_get_by_email_returns_none_for_missing(self):
        self.assertIsNone(self.repo.get_by_email('nobody@x.com'))

    # ── get_by_id ─────────────────────────────────────────────

    def test_get_by_id_projects_out_hash(self):
        created = self.repo.create(name='Ana', email='ana@x.com', password_hash='h')

        user = self.repo.get_by_id(created.id)

        self.assertEqual(user.id, created.id)
        self.assertEqual(user.created_at, created.created_at)
        self.assertIsNone(user.password_hash)
        # stored record keeps its hash
        self.assertEqual(self.repo.store[created.id].password_hash, 'h')

    def test_get_by_id_returns_none_for_missing(self):
        self.assertIsNone(self.repo.get_by_id('nonexistent'))

    def test_returned_users_are_copies(self):
        created = self.repo.create(name='Ana', email='ana@x.com', password_hash='h')
        created.name = 'Changed'
        self.assertEqual(self.repo.get_by_id(created.id).name, 'Ana')


if __name__ == '__main__':
    unittest.main()
