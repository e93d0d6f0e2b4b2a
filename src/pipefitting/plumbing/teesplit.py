from pipefitting.fitting import PipeFitting


class TeeSplit(PipeFitting):
    """
    Writes input messages to multiple output fittings.

    :param outputs: fittings to connect as outputs, in order. Any number of outputs
        can be connected later by calling connect() repeatedly.
    """

    def __init__(self, *outputs):
        self._outputs = []
        for output in outputs:
            if output is not None:
                self.connect(output)

    @property
    def outputs(self):
        return tuple(self._outputs)

    def connect(self, output) -> bool:
        self._outputs.append(output)
        return True

    def disconnect(self):
        """
        Disconnects the most recently connected output (LIFO).
        To disconnect all outputs, call repeatedly until it returns None.
        """
        return self._outputs.pop() if self._outputs else None

    def disconnect_fitting(self, target):
        """
        Disconnects the given output fitting.
        :return: the fitting if it was connected as an output of this tee, otherwise None
        """
        for i, output in enumerate(self._outputs):
            if output is target:
                del self._outputs[i]
                return output
        return None

    def write(self, message) -> bool:
        """
        Writes the message to all connected outputs. Every output is written, even after
        one has failed.
        :return: False if any output returned False
        """
        success = True
        for output in list(self._outputs):
            if not output.write(message):
                success = False
        return success
