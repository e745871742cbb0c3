from nftregistry.db.driver import ContractDriver


class Variable:
    def __init__(self, contract, name, driver: ContractDriver, t=None):
        self._driver = driver
        self._key = driver.make_key(contract, name)
        self._type = t

    def set(self, value):
        if self._type is not None:
            assert isinstance(value, self._type), 'Wrong type passed to variable! Expected {}, got {}.'.format(
                self._type,
                type(value)
            )

        self._driver.set(self._key, value)

    def get(self):
        return self._driver.get(self._key)


class Hash:
    """
    One driver entry per key, stored at <contract>.<name>:<key>. Keys are
    stringified, so callers validate them before they get here.
    """
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._contract = contract
        self._name = name

    def _key_for(self, key):
        return self._driver.make_key(self._contract, self._name, [key])

    def __getitem__(self, key):
        return self._driver.get(self._key_for(key))

    def __setitem__(self, key, value):
        self._driver.set(self._key_for(key), value)

    def __contains__(self, key):
        return self[key] is not None
