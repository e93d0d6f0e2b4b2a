from pipefitting.plumbing.pipe import Pipe


class TeeMerge(Pipe):
    """
    Writes the messages from multiple input pipelines into a single output fitting.

    The inputs are not tracked: each input simply has this tee connected as its output,
    and writes through it whenever it receives a message. Connect the output as for
    any other Pipe.

    :param inputs: fittings to connect as inputs
    """

    def __init__(self, *inputs):
        super().__init__()
        for input in inputs:
            if input is not None:
                self.connect_input(input)

    def connect_input(self, input) -> bool:
        """
        :return: the result of connecting this tee as the input's output. False if
            the input already has an output.
        """
        return input.connect(self)
