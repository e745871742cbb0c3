from unittest import TestCase
from nftregistry.db.driver import ContractDriver
from nftregistry.db.orm import Variable, Hash


class TestVariable(TestCase):
    def setUp(self):
        self.driver = ContractDriver()

    def test_set_get(self):
        v = Variable(contract='registry', name='__admin__', driver=self.driver)
        v.set('stu')

        self.assertEqual(v.get(), 'stu')
        self.assertEqual(self.driver.get('registry.__admin__'), 'stu')

    def test_typed_variable_rejects_wrong_type(self):
        v = Variable(contract='registry', name='__submitted__', driver=self.driver, t=str)

        with self.assertRaises(AssertionError):
            v.set(1)

        self.assertDictEqual(self.driver.pending_writes, {})

    def test_unset_is_none(self):
        v = Variable(contract='registry', name='__admin__', driver=self.driver)

        self.assertIsNone(v.get())


class TestHash(TestCase):
    def setUp(self):
        self.driver = ContractDriver()
        self.h = Hash(contract='registry', name='balances', driver=self.driver)

    def test_set_get(self):
        self.h['stu'] = 1

        self.assertEqual(self.h['stu'], 1)
        self.assertEqual(self.driver.get('registry.balances:stu'), 1)

    def test_int_keys(self):
        self.h[95] = 'stu'

        self.assertEqual(self.h[95], 'stu')
        self.assertEqual(self.driver.get('registry.balances:95'), 'stu')

    def test_missing_is_none(self):
        self.assertIsNone(self.h['nobody'])

    def test_contains(self):
        self.h['stu'] = 0

        self.assertIn('stu', self.h)
        self.assertNotIn('nobody', self.h)
