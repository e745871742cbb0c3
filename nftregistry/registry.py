from nftregistry import config
from nftregistry.db.driver import ContractDriver
from nftregistry.db.orm import Variable, Hash
from nftregistry.events import EventLog, Mint, Transfer
from nftregistry.exceptions import NotOwner, NotOwnedToken, AlreadyMinted, NotFound, RegistryExists
from nftregistry.execution.decorators import export, construct
from nftregistry.execution.runtime import Context
from nftregistry.logger import get_logger

log = get_logger('Registry')


def validate_token_id(token_id):
    assert isinstance(token_id, int) and not isinstance(token_id, bool), \
        'Token id must be an integer, got {}.'.format(type(token_id).__name__)
    assert token_id >= 0, 'Token id must be unsigned, got {}.'.format(token_id)


def validate_identity(identity):
    # Identities are used verbatim as storage keys
    assert isinstance(identity, str) and identity != '', \
        'Identity must be a non-empty string, got {!r}.'.format(identity)
    assert config.DELIMITER not in identity and config.INDEX_SEPARATOR not in identity, \
        'Illegal character in identity {!r}.'.format(identity)
    assert len(identity) <= config.MAX_KEY_SIZE, \
        'Identity is too long ({}). Max is {}.'.format(len(identity), config.MAX_KEY_SIZE)


class Registry:
    """
    Non-fungible token ownership registry.

    State is kept in the driver under the registry's name:

        <name>.__admin__            identity allowed to mint
        <name>.__submitted__        ISO-8601 creation time
        <name>.owners:<token_id>    current owner of each minted token
        <name>.balances:<identity>  number of tokens each identity holds

    Every operation validates before it writes. A failing operation raises
    one of the errors in nftregistry.exceptions and leaves state untouched.
    Invocations are expected to be serialized by the caller; nothing here
    locks.
    """
    def __init__(self, driver: ContractDriver, ctx: Context, events: EventLog,
                 name=config.DEFAULT_REGISTRY_NAME):
        self.name = name
        self.ctx = ctx
        self.events = events

        self.admin = Variable(contract=name, name=config.ADMIN_KEY, driver=driver)
        self.submitted = Variable(contract=name, name=config.TIME_KEY, driver=driver, t=str)
        self.owners = Hash(contract=name, name=config.OWNERS_HASH, driver=driver)
        self.balances = Hash(contract=name, name=config.BALANCES_HASH, driver=driver)

    @construct
    def construct(self):
        if self.admin.get() is not None:
            raise RegistryExists(name=self.name)

        validate_identity(self.ctx.caller)

        self.admin.set(self.ctx.caller)
        self.submitted.set(self.ctx.now.isoformat())

        log.debug('Registry {} constructed by {}'.format(self.name, self.ctx.caller))

    @export
    def mint(self, receiver, token_id):
        if self.ctx.caller != self.admin.get():
            raise NotOwner(caller=self.ctx.caller)

        validate_token_id(token_id)
        validate_identity(receiver)

        if self.owners[token_id] is not None:
            raise AlreadyMinted(token_id=token_id)

        count = self.balances[receiver] or 0

        self.owners[token_id] = receiver
        self.balances[receiver] = count + 1

        self.events.emit(Mint(receiver=receiver, token_id=token_id))
        log.debug('Minted {} to {}'.format(token_id, receiver))

    @export
    def transfer(self, sender, to, token_id):
        validate_token_id(token_id)
        validate_identity(sender)
        validate_identity(to)

        owner = self.owners[token_id]
        if owner is None or owner != sender:
            raise NotOwnedToken(token_id=token_id, caller=self.ctx.caller)

        if self.ctx.caller != sender:
            raise NotOwnedToken(token_id=token_id, caller=self.ctx.caller)

        sender_count = self.balances[sender]
        assert sender_count is not None and sender_count >= 1, \
            'Count for {} is out of sync with token ownership.'.format(sender)

        self.owners[token_id] = to
        self.balances[sender] = sender_count - 1
        self.balances[to] = (self.balances[to] or 0) + 1

        self.events.emit(Transfer(sender=sender, to=to, token_id=token_id))
        log.debug('Transferred {} from {} to {}'.format(token_id, sender, to))

    @export
    def get_owner_of_token(self, token_id):
        validate_token_id(token_id)

        owner = self.owners[token_id]
        if owner is None:
            raise NotFound(variable=config.OWNERS_HASH, key=token_id)

        return owner

    @export
    def count_of_owner(self, identity):
        validate_identity(identity)

        count = self.balances[identity]
        if count is None:
            raise NotFound(variable=config.BALANCES_HASH, key=identity)

        return count

    @export
    def get_admin(self):
        return self.admin.get()

    @export
    def is_minted(self, token_id):
        validate_token_id(token_id)
        return token_id in self.owners
