from pipefitting.fitting import PipeFitting


class PipeListener(PipeFitting):
    """
    Allows a callable that does not implement PipeFitting to be the final recipient of
    the messages in a pipeline.

    :param callback: called with each message written to the listener
    """

    def __init__(self, callback):
        self.callback = callback

    def connect(self, output) -> bool:
        """ Nothing can be connected beyond a listener. """
        return False

    def disconnect(self):
        return None

    def write(self, message) -> bool:
        callback = self.callback
        if callback is None:
            return False
        callback(message)
        return True
