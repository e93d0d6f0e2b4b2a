from pipefitting.fitting import PipeFitting


class Pipe(PipeFitting):
    """
    The most basic fitting, allowing the connection of a single output fitting and
    writing of messages to that output.
    """

    def __init__(self, output: PipeFitting=None):
        self.output = None
        if output is not None:
            self.connect(output)

    def connect(self, output: PipeFitting) -> bool:
        """
        :return: True if no other fitting was already connected.
        """
        if self.output is not None:
            return False
        self.output = output
        return True

    def disconnect(self):
        disconnected, self.output = self.output, None
        return disconnected

    def write(self, message) -> bool:
        """
        :return: the result of the output's write, or False when nothing is connected.
        """
        return self._write_output(message)

    def _write_output(self, message):
        output = self.output
        return output.write(message) if output is not None else False
