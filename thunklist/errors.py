def _message(m):
    @classmethod
    def builder(cls, value, **format_vars):
        return cls(m.format(value=value, kind=type(value).__name__, **format_vars), value)
    return builder

class ThunkListError(Exception):
    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class InvalidInput(ThunkListError):
    not_sequence = _message('Expected a finite sequence, got {kind}: {value!r}')
    not_thunk = _message('List tail must be a Thunk, got {kind}: {value!r}')

class NonInvocable(ThunkListError):
    not_callable = _message('{kind} object is not callable: {value!r}')
    bad_arguments = _message('Cannot call {value!r} with {count} argument(s): {reason}')
    not_pair = _message('Expected a pair of results, got {kind}: {value!r}')
