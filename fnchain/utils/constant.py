class MetaConst(type):
    """Metaclass of read-only namespaces: bindings are fixed when the class is created."""

    def __setattr__(cls, key, value):
        if key[0] == '_':
            super().__setattr__(key, value)
        else:
            raise TypeError("namespace is read-only", key)

    def __delattr__(cls, key):
        raise TypeError("namespace is read-only", key)

    def __repr__(cls):
        return "<namespace {0}>".format(cls.__name__)


def namespace(name, **bindings):
    """Creates a read-only namespace exposing ``bindings`` as attributes."""
    body = {key: staticmethod(value) if callable(value) else value for key, value in bindings.items()}
    body["__slots__"] = ()
    return MetaConst(name, (object,), body)
