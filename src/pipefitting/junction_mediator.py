"""
Connects a module's Junction to the host application.

The host hands a module its pipes either by calling accept_input_pipe()/accept_output_pipe()
directly (the PipeAware interface) or by firing ACCEPT_INPUT_PIPE/ACCEPT_OUTPUT_PIPE
notifications, with the pipe as the body and the pipe name as the type. Subscribe a mediator
to an EventSource with EventSource.add_mediator().
"""
import logging
from abc import abstractmethod

from pipefitting.fitting import PipeAware, PipeFitting, ACCEPT_INPUT_PIPE, ACCEPT_OUTPUT_PIPE
from pipefitting.junction import Junction, JunctionType
from pipefitting.support.events import Notification

logger = logging.getLogger(__name__)


class JunctionMediator(PipeAware):
    """
    Base class handling the pipe junction of a module.

    Input pipes are registered and this mediator set as their listener, so messages arriving
    on them are passed to handle_pipe_message(). Output pipes are registered so the module can
    send on them with junction.send_message().

    :param name: the mediator's name, for logging
    :param junction: the junction to manage. A new one is created when not given.
    """

    def __init__(self, name, junction: Junction=None):
        self.name = name
        self.junction = junction if junction is not None else Junction()

    def list_notification_interests(self):
        """
        The notifications handled by this base class. Subclasses extend the list
        with their own interests.
        """
        return [ACCEPT_INPUT_PIPE, ACCEPT_OUTPUT_PIPE]

    def handle_notification(self, notification: Notification):
        """
        Accepts input and output pipes. Subclasses handle their own notifications and
        call this for the rest.
        """
        if notification.name == ACCEPT_INPUT_PIPE:
            self.accept_input_pipe(notification.type, notification.body)
        elif notification.name == ACCEPT_OUTPUT_PIPE:
            self.accept_output_pipe(notification.type, notification.body)

    def accept_input_pipe(self, name, pipe: PipeFitting):
        """
        registers the pipe and, if successful, sets this mediator as its listener
        :return: True if the pipe was registered and the listener added
        """
        registered = self.junction.register_pipe(name, JunctionType.INPUT, pipe)
        listening = registered and self.junction.add_pipe_listener(name, self.handle_pipe_message)
        logger.debug("%s accepted input pipe '%s': %s" % (self.name, name, listening))
        return listening

    def accept_output_pipe(self, name, pipe: PipeFitting):
        registered = self.junction.register_pipe(name, JunctionType.OUTPUT, pipe)
        logger.debug("%s accepted output pipe '%s': %s" % (self.name, name, registered))
        return registered

    @abstractmethod
    def handle_pipe_message(self, message):
        """ Handles messages arriving on the input pipes. """
        raise NotImplementedError
