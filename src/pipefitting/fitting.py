from abc import abstractmethod

# notification names used by hosts that announce pipes through named notifications
ACCEPT_INPUT_PIPE = "acceptInputPipe"
ACCEPT_OUTPUT_PIPE = "acceptOutputPipe"


class PipeFitting:
    """
    A fitting can be connected to other fittings, forming a pipeline.

    Messages are written to one end of a pipeline by some client code and are then
    transferred synchronously from one fitting to the next. Any object providing
    connect(), disconnect() and write() can take part in a pipeline.
    """

    @abstractmethod
    def connect(self, output) -> bool:
        """
        Connects another fitting to the output.
        :return: True if no other fitting was already connected.
        """
        raise NotImplementedError

    @abstractmethod
    def disconnect(self):
        """
        Disconnects the fitting connected to the output.

        When splicing another fitting into a pipeline, keep (at least briefly) a
        reference to both sides of the pipeline in order to connect them to the input
        and output of the fitting being spliced in.
        :return: the now disconnected output fitting, or None
        """
        raise NotImplementedError

    @abstractmethod
    def write(self, message) -> bool:
        """
        Writes the message to the output.

        There may be subsequent filters and tees that the fitting writes to, so a message
        may branch and arrive in different forms at different endpoints.
        :return: False if any fitting down the chain failed. The client that wrote into the
            pipeline can then take action, such as rolling back changes.
        """
        raise NotImplementedError


class PipeAware:
    """
    Implemented by modules that communicate with other modules through pipes.
    The host calls these to hand a module its named input and output pipes.
    """

    @abstractmethod
    def accept_input_pipe(self, name, pipe: PipeFitting):
        raise NotImplementedError

    @abstractmethod
    def accept_output_pipe(self, name, pipe: PipeFitting):
        raise NotImplementedError
