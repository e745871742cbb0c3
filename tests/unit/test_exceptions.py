from unittest import TestCase
from nftregistry.exceptions import ErrorKind, RegistryError, NotOwner, NotOwnedToken, AlreadyMinted, NotFound, \
    RegistryExists, RegistryNotFound


class TestExceptions(TestCase):
    def test_messages_are_formatted(self):
        e = NotOwnedToken(token_id=95, caller='stu')

        self.assertEqual(str(e), "Token '95' is not owned by caller 'stu'")
        self.assertDictEqual(e.kwargs, {'token_id': 95, 'caller': 'stu'})

    def test_every_error_has_a_distinct_kind(self):
        errors = [NotOwner, NotOwnedToken, AlreadyMinted, NotFound, RegistryExists, RegistryNotFound]

        kinds = [e.kind for e in errors]

        self.assertEqual(len(set(kinds)), len(errors))
        self.assertSetEqual(set(kinds), set(ErrorKind))

    def test_errors_are_registry_errors(self):
        self.assertIsInstance(NotOwner(caller='stu'), RegistryError)

    def test_equality(self):
        self.assertEqual(NotOwner(caller='stu'), NotOwner(caller='stu'))
        self.assertNotEqual(NotOwner(caller='stu'), NotOwner(caller='raghu'))
        self.assertNotEqual(NotFound(variable='owners', key=1), AlreadyMinted(token_id=1))
