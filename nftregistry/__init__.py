from nftregistry.client import RegistryClient, AbstractRegistry
from nftregistry.events import Mint, Transfer
from nftregistry.exceptions import (ErrorKind, RegistryError, NotOwner, NotOwnedToken, AlreadyMinted, NotFound,
                                    RegistryExists, RegistryNotFound)
from nftregistry.execution.executor import Executor
from nftregistry.registry import Registry

__version__ = '0.1.0'
