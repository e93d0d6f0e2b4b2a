import logging

from pipefitting.fitting import PipeFitting
from pipefitting.plumbing.pipelistener import PipeListener

logger = logging.getLogger(__name__)


class JunctionType:
    INPUT = "input"
    OUTPUT = "output"


class Junction:
    """
    Manages the pipes for a module.

    A pipe is registered under a unique name as either an INPUT pipe or an OUTPUT pipe.
    Names are unique regardless of type: an INPUT and an OUTPUT pipe cannot share a name.

    Registered pipes can be retrieved or removed by name, and checked for existence and type.
    A listener can be added to a registered INPUT pipe, and a message sent on a
    registered OUTPUT pipe.
    """
    INPUT = JunctionType.INPUT
    OUTPUT = JunctionType.OUTPUT

    def __init__(self):
        self._input_pipes = set()
        self._output_pipes = set()
        self._pipes = dict()        # name to pipe
        self._pipe_types = dict()   # name to JunctionType

    @property
    def input_pipes(self):
        """ the names of the registered INPUT pipes """
        return frozenset(self._input_pipes)

    @property
    def output_pipes(self):
        """ the names of the registered OUTPUT pipes """
        return frozenset(self._output_pipes)

    def register_pipe(self, name, type, pipe: PipeFitting) -> bool:
        """
        Registers a pipe with the junction.

        A type other than INPUT or OUTPUT still claims the name, but the pipe is
        neither an input nor an output pipe, and False is returned.
        :return: True if registered. False if the name is empty or another pipe exists by that name.
        """
        if not name:
            return False
        if name in self._pipes:
            logger.debug("pipe '%s' is already registered" % name)
            return False
        self._pipes[name] = pipe
        self._pipe_types[name] = type
        names = self._names_for(type)
        if names is None:
            logger.warning("pipe '%s' registered with unknown type %s" % (name, type))
            return False
        names.add(name)
        return True

    def _names_for(self, type):
        if type == JunctionType.INPUT:
            return self._input_pipes
        if type == JunctionType.OUTPUT:
            return self._output_pipes
        return None

    def has_pipe(self, name) -> bool:
        return name in self._pipes

    def has_input_pipe(self, name) -> bool:
        return self.has_pipe(name) and self._pipe_types[name] == JunctionType.INPUT

    def has_output_pipe(self, name) -> bool:
        return self.has_pipe(name) and self._pipe_types[name] == JunctionType.OUTPUT

    def remove_pipe(self, name):
        """ Removes the pipe with this name if it is registered. """
        if not self.has_pipe(name):
            return
        names = self._names_for(self._pipe_types[name])
        if names is not None:
            names.discard(name)
        del self._pipes[name]
        del self._pipe_types[name]

    def retrieve_pipe(self, name):
        """
        :return: the pipe registered by the given name, or None
        """
        return self._pipes.get(name, None)

    def add_pipe_listener(self, input_pipe_name, listener) -> bool:
        """
        Adds a listener to an INPUT pipe.

        There can only be one listener per pipe, since the pipe takes a single output.
        :param listener: called with each message written to the pipe
        :return: False if the name is not an INPUT pipe or the pipe already has an output
        """
        if not self.has_input_pipe(input_pipe_name):
            logger.debug("no input pipe '%s' to listen to" % input_pipe_name)
            return False
        return self._pipes[input_pipe_name].connect(PipeListener(listener))

    def send_message(self, output_pipe_name, message) -> bool:
        """
        Sends a message on an OUTPUT pipe.
        :return: the result of writing to the pipe, or False if the name is not an OUTPUT pipe.
        """
        if not self.has_output_pipe(output_pipe_name):
            logger.debug("no output pipe '%s' to send on" % output_pipe_name)
            return False
        return self._pipes[output_pipe_name].write(message)
