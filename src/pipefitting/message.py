"""
Messages are the unit of transport through a pipeline of fittings.

A message carries a type discriminator, an optional header and body (plain dicts, open-ended) and an
optional numeric priority. Control messages are messages whose type instructs a fitting to change
its behavior rather than carrying application data:

- FilterControlMessage - targets a single named Filter and may carry a replacement transform
  and/or parameters.
- QueueControlMessage - acted on by the first Queue in a pipeline. Queues are not named.

Messages are passed by reference. Fittings never copy a message, so a listener at the end of a
pipeline receives the very instance written at the head.
"""
from pipefitting.support.mixins import StringerMixin


class MessageTypeError(ValueError):
    """ Raised when a message is constructed with an unknown or mismatched type. """


class PipeMessageType:
    NORMAL = "NORMAL"


class FilterControlMessageType:
    """
    SET_PARAMS - the filter takes its parameters from the message.
    SET_FILTER - the filter takes its transform function from the message.
    BYPASS - the filter passes normal messages through unfiltered.
    FILTER - the filter transforms normal messages. This is the default mode, so
        FILTER need only be sent to cancel a previous BYPASS.
    """
    SET_PARAMS = "SET_PARAMS"
    SET_FILTER = "SET_FILTER"
    BYPASS = "BYPASS"
    FILTER = "FILTER"


class QueueControlMessageType:
    """
    FLUSH - write all stored messages to the output.
    SORT - sort subsequently stored messages by priority.
    FIFO - stop sorting; messages are released in arrival order.
    """
    FLUSH = "FLUSH"
    SORT = "SORT"
    FIFO = "FIFO"


class MessagePriority:
    """ Lower values are released first by a sorting Queue. """
    HIGH = 1
    MEDIUM = 2
    LOW = 3


def _type_values(constants):
    return frozenset(v for k, v in vars(constants).items() if k.isupper())


filter_control_types = _type_values(FilterControlMessageType)
queue_control_types = _type_values(QueueControlMessageType)
message_types = frozenset([PipeMessageType.NORMAL]) | filter_control_types | queue_control_types


def _check_type(type, allowed):
    if type not in allowed:
        raise MessageTypeError("unknown message type %s, expected one of %s" % (type, sorted(allowed)))


class Message(StringerMixin):
    """
    A message written into a pipeline.

    :param type: one of the message type constants. Defaults to PipeMessageType.NORMAL
    :param header: optional dict of metadata
    :param body: optional dict payload
    :param priority: optional number. Lower values have higher priority.
    """

    def __init__(self, type=PipeMessageType.NORMAL, header=None, body=None, priority=None):
        _check_type(type, message_types)
        self.type = type
        self.header = header
        self.body = body
        self.priority = priority


class FilterControlMessage(Message):
    """
    Controls the behavior of the Filter named by `name`. Filters with another name
    write the message through to their output unchanged.

    :param transform: the replacement transform for SET_FILTER, called as transform(message, params)
    :param params: the replacement parameters for SET_PARAMS
    """

    def __init__(self, type, name, transform=None, params=None, header=None, body=None, priority=None):
        _check_type(type, filter_control_types)
        super().__init__(type, header, body, priority)
        self.name = name
        self.transform = transform
        self.params = params


class QueueControlMessage(Message):

    def __init__(self, type, header=None, body=None, priority=None):
        _check_type(type, queue_control_types)
        super().__init__(type, header, body, priority)
