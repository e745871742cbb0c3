DELIMITER = ':'
INDEX_SEPARATOR = '.'

ADMIN_KEY = '__admin__'
TIME_KEY = '__submitted__'

OWNERS_HASH = 'owners'
BALANCES_HASH = 'balances'

DEFAULT_REGISTRY_NAME = 'registry'

MAX_KEY_SIZE = 1024

PRIVATE_METHOD_PREFIX = '_'
EXPORT_DECORATOR_STRING = 'export'
INIT_DECORATOR_STRING = 'construct'
INIT_FUNC_NAME = 'construct'
VALID_DECORATORS = {EXPORT_DECORATOR_STRING, INIT_DECORATOR_STRING}

# Marker attribute set on registry methods by the decorators in execution.decorators
DECORATOR_ATTR = '__registry_decorator__'
