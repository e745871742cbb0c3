from nftregistry import config


def _mark(decorator_name):
    def decorator(func):
        setattr(func, config.DECORATOR_ATTR, decorator_name)
        return func
    return decorator


export = _mark(config.EXPORT_DECORATOR_STRING)
construct = _mark(config.INIT_DECORATOR_STRING)


def decorator_of(func):
    return getattr(func, config.DECORATOR_ATTR, None)


def exported_functions(obj):
    """Names of every method on obj that may be invoked after deployment, sorted by name."""
    names = []
    for name in dir(type(obj)):
        if name.startswith(config.PRIVATE_METHOD_PREFIX):
            continue
        if decorator_of(getattr(type(obj), name)) == config.EXPORT_DECORATOR_STRING:
            names.append(name)
    return names
