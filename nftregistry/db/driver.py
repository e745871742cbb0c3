from nftregistry.db.encoder import encode, decode
from nftregistry import config
from nftregistry.logger import get_logger

log = get_logger('Driver')


class InMemDriver:
    """Committed state. Values are held encoded, as a byte oriented store would hold them."""
    def __init__(self):
        self.db = {}

    def get(self, key: str):
        return decode(self.db.get(key))

    def set(self, key: str, value):
        if value is None:
            self.db.pop(key, None)
        else:
            self.db[key] = encode(value).encode()

    def keys(self, prefix=''):
        return sorted(k for k in self.db if k.startswith(prefix))

    def flush(self):
        self.db.clear()


class ContractDriver:
    """
    Uncommitted writes layered over an InMemDriver. Registries read and
    write through this; nothing reaches storage until commit.
    """
    def __init__(self, driver=None):
        self.driver = driver or InMemDriver()
        self.pending_writes = {}

    def get(self, key: str):
        # A pending None is a pending delete and shadows storage
        if key in self.pending_writes:
            return self.pending_writes[key]

        return self.driver.get(key)

    def set(self, key: str, value):
        self.pending_writes[key] = value

    def commit(self):
        for k, v in self.pending_writes.items():
            self.driver.set(k, v)

        self.pending_writes = {}

    def rollback(self):
        self.pending_writes = {}

    def checkpoint(self):
        return dict(self.pending_writes)

    def revert(self, checkpoint):
        self.pending_writes = dict(checkpoint)

    def keys(self, prefix=''):
        keys = set(self.driver.keys(prefix))

        for k, v in self.pending_writes.items():
            if not k.startswith(prefix):
                continue
            if v is None:
                keys.discard(k)
            else:
                keys.add(k)

        return sorted(keys)

    def make_key(self, contract, variable, args=[]):
        contract_variable = config.INDEX_SEPARATOR.join((contract, variable))
        if args:
            return config.DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
        return contract_variable

    def get_var(self, contract, variable, arguments=[]):
        return self.get(self.make_key(contract, variable, arguments))

    def set_var(self, contract, variable, arguments=[], value=None):
        self.set(self.make_key(contract, variable, arguments), value)

    def get_admin(self, name):
        return self.get_var(name, config.ADMIN_KEY)

    def get_registry_keys(self, name):
        return self.keys(name + config.INDEX_SEPARATOR)

    def get_registries(self):
        suffix = config.INDEX_SEPARATOR + config.ADMIN_KEY
        return [k[:-len(suffix)] for k in self.driver.keys() if k.endswith(suffix)]

    def flush(self):
        log.debug('Flushing all registry state')
        self.driver.flush()
        self.rollback()
