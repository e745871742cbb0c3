from copy import deepcopy
import traceback

from nftregistry import config
from nftregistry.db.driver import ContractDriver
from nftregistry.events import EventLog
from nftregistry.exceptions import RegistryNotFound
from nftregistry.execution.decorators import decorator_of
from nftregistry.execution.runtime import Context
from nftregistry.logger import get_logger
from nftregistry.registry import Registry

log = get_logger('EXECUTOR')


class Executor:
    """
    The seam between the hosting environment and the registries it hosts.
    Each call to execute is one atomic invocation: it either applies all of
    its writes and releases its events, or applies and releases nothing.
    """
    def __init__(self, driver=None, event_sink=None):
        self.driver = driver

        if not self.driver:
            self.driver = ContractDriver()

        self.context = Context()
        self.events = EventLog(sink=event_sink)
        self.registries = {}

    def install(self, name=config.DEFAULT_REGISTRY_NAME) -> Registry:
        assert isinstance(name, str) and name != '', 'Registry name must be a non-empty string.'
        assert config.DELIMITER not in name and config.INDEX_SEPARATOR not in name, \
            'Illegal character in registry name {!r}.'.format(name)

        registry = self.registries.get(name)
        if registry is None:
            registry = Registry(driver=self.driver, ctx=self.context, events=self.events, name=name)
            self.registries[name] = registry
        return registry

    def get_registry(self, name):
        # Only constructed registries are addressable, including ones constructed
        # by another executor sharing the same storage
        if self.driver.get_admin(name) is None:
            return None

        return self.install(name)

    def _resolve(self, contract_name, function_name):
        assert not function_name.startswith(config.PRIVATE_METHOD_PREFIX), 'Private method not callable.'

        if function_name == config.INIT_FUNC_NAME:
            registry = self.install(contract_name)
        else:
            registry = self.get_registry(contract_name)

        if registry is None:
            raise RegistryNotFound(name=contract_name)

        func = getattr(registry, function_name, None)
        decorator = decorator_of(func)

        assert decorator in config.VALID_DECORATORS, \
            'Function {} is not exported by {}.'.format(function_name, contract_name)

        return func

    def execute(self, sender, contract_name, function_name, kwargs,
                environment={},
                auto_commit=True) -> dict:

        checkpoint = self.driver.checkpoint()
        writes = {}
        events = []

        try:
            func = self._resolve(contract_name, function_name)

            self.context._set_up(sender=sender, this=contract_name, now=environment.get('now'))

            status_code = 0
            result = func(**kwargs)

            writes = deepcopy(self.driver.pending_writes)

            if auto_commit:
                self.driver.commit()
        except Exception as e:
            result = e
            log.error(str(e))
            log.debug(traceback.format_exc())
            status_code = 1

            self.driver.revert(checkpoint)
            self.events.discard()
        finally:
            self.context._reset()

        if status_code == 0:
            events = list(self.events.pending)

            # State is already committed, so a failing sink is reported but does not fail the invocation
            try:
                self.events.release()
            except Exception as e:
                log.error('Event sink failed: {}'.format(e))
                log.debug(traceback.format_exc())

        output = {
            'status_code': status_code,
            'result': result,
            'events': events,
            'writes': writes,
        }

        return output
