class VCardError(Exception):
    def __init__(self, msg, field=None):
        super().__init__(msg)
        self.msg = msg
        self.field = field

    def __str__(self):
        if self.field is None:
            return repr(self.msg)
        return f"In field {self.field!s}: {self.msg!s}"


class RecordError(VCardError):
    pass
