from thunklist import Thunk, Node, END


class Recorder:
    """Counting list producer, optionally infinite (stop=None)."""
    def __init__(self, stop=None):
        self.stop = stop
        self.log = []

    def list(self, i=0):
        def force():
            self.log.append(i)
            if self.stop is not None and i >= self.stop:
                return END
            return Node(i, self.list(i + 1))
        return Thunk(force)
