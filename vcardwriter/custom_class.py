class ParameterDict(dict):
    """
    Insertion ordered mapping of parameter names to values.

    Names are upper-cased on the way in. Setting a name that is already present
    replaces its value in place, so iteration order stays the order in which
    each name was first seen.
    """

    def __init__(self, *args, **kwds):
        super().__init__()
        self.update(*args, **kwds)

    def __setitem__(self, key, value):
        super().__setitem__(key.upper(), value)

    def __getitem__(self, key):
        return super().__getitem__(key.upper())

    def __contains__(self, key):
        return isinstance(key, str) and super().__contains__(key.upper())

    def get(self, key, default=None):
        return super().get(key.upper(), default)

    def update(self, *args, **kwds):
        for key, value in dict(*args, **kwds).items():
            self[key] = value

    def copy(self):
        return type(self)(self)

    def setdefault(self, key, default=None):
        return super().setdefault(key.upper(), default)

    def __delitem__(self, key):
        super().__delitem__(key.upper())
