from functools import partial

from nftregistry import config
from nftregistry.db.driver import ContractDriver
from nftregistry.execution.decorators import exported_functions
from nftregistry.execution.executor import Executor


class AbstractRegistry:
    def __init__(self, name, signer, environment, executor: Executor, funcs):
        self.name = name
        self.signer = signer
        self.environment = environment
        self.executor = executor
        self.functions = funcs

        # each function is a partial that allows kwarg overloading and overriding
        for func in funcs:
            setattr(self, func, partial(self._abstract_function_call,
                                        executor=self.executor,
                                        contract_name=self.name,
                                        func=func))

    def keys(self):
        return self.executor.driver.get_registry_keys(self.name)

    def quick_read(self, variable, key=None, args=None):
        a = []

        if key is not None:
            a.append(key)

        if args is not None and isinstance(args, list):
            for arg in args:
                a.append(arg)

        k = self.executor.driver.make_key(contract=self.name, variable=variable, args=a)
        return self.executor.driver.get(k)

    def _abstract_function_call(self, executor, contract_name, func, signer=None, environment=None, **kwargs):
        signer = signer or self.signer
        environment = environment or self.environment

        output = executor.execute(sender=signer,
                                  contract_name=contract_name,
                                  function_name=func,
                                  kwargs=kwargs,
                                  environment=environment)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']


class RegistryClient:
    def __init__(self, signer='sys', driver=None, event_sink=None, environment=None):
        self.raw_driver = driver or ContractDriver()
        self.executor = Executor(driver=self.raw_driver, event_sink=event_sink)
        self.signer = signer
        self.environment = environment or {}

    def flush(self):
        self.raw_driver.flush()
        self.executor.registries.clear()

    def deploy(self, name=config.DEFAULT_REGISTRY_NAME, signer=None, now=None):
        environment = dict(self.environment)
        if now is not None:
            environment['now'] = now

        output = self.executor.execute(sender=signer or self.signer,
                                       contract_name=name,
                                       function_name=config.INIT_FUNC_NAME,
                                       kwargs={},
                                       environment=environment)

        if output['status_code'] == 1:
            raise output['result']

        return self.get_registry(name)

    # Returns abstract registry which has partial methods mapped to each exported function.
    def get_registry(self, name=config.DEFAULT_REGISTRY_NAME):
        registry = self.executor.get_registry(name)

        if registry is None:
            return None

        return AbstractRegistry(name=name,
                                signer=self.signer,
                                environment=self.environment,
                                executor=self.executor,
                                funcs=exported_functions(registry))

    def get_registries(self):
        return self.raw_driver.get_registries()

    def get_var(self, contract, variable, arguments=[]):
        return self.raw_driver.get_var(contract, variable, arguments)

    def set_var(self, contract, variable, arguments=[], value=None):
        self.raw_driver.set_var(contract, variable, arguments, value)
        self.raw_driver.commit()
