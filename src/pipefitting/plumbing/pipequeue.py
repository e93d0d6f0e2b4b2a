import logging
import math
from collections import deque

from pipefitting.config import defaults
from pipefitting.message import PipeMessageType, QueueControlMessageType
from pipefitting.plumbing.pipe import Pipe

logger = logging.getLogger(__name__)

# sort key for messages with no usable priority
unordered = (1, 0.0)


def priority_key(message):
    """
    Sort key placing lower priority values first. Messages without a numeric priority
    (None, non-numeric or NaN) are placed after all prioritized messages.
    """
    priority = message.priority
    if priority is None:
        return unordered
    try:
        value = float(priority)
    except (TypeError, ValueError):
        return unordered
    return unordered if math.isnan(value) else (0, value)


class Queue(Pipe):
    """
    Stores inbound messages until it is sent a FLUSH control message, at which point it
    writes its buffer to the output fitting.

    A SORT control message puts the queue into sort-by-priority mode; a FIFO control message
    cancels sort mode. Switching modes does not reorder messages already stored, although
    the next message stored in SORT mode sorts the whole buffer. Sorting continues after a
    FLUSH until a FIFO message is received.

    Only one queue in a pipeline is useful, since the first queue acts on every queue
    control message and does not pass them on. Queues are therefore not named.

    :param output: the output fitting
    :param mode: QueueControlMessageType.SORT or FIFO. Defaults to the configured queue mode.
    """

    def __init__(self, output=None, mode=None):
        super().__init__(output)
        self.mode = mode if mode is not None else defaults.queue_mode
        self.messages = deque()

    def write(self, message) -> bool:
        """
        Normal messages are stored, FLUSH writes them out, SORT and FIFO set the mode.
        Other messages are neither stored nor passed on.
        :return: for FLUSH, the result of the last write to the output; otherwise True.
        """
        type = message.type
        if type == PipeMessageType.NORMAL:
            self.store(message)
        elif type == QueueControlMessageType.FLUSH:
            return self.flush()
        elif type in (QueueControlMessageType.SORT, QueueControlMessageType.FIFO):
            logger.debug("queue mode %s" % type)
            self.mode = type
        return True

    def store(self, message):
        self.messages.append(message)
        if self.mode == QueueControlMessageType.SORT:
            ordered = sorted(self.messages, key=priority_key)
            self.messages.clear()
            self.messages.extend(ordered)

    def flush(self) -> bool:
        """
        Writes every stored message to the output, emptying the queue. A failed write
        does not stop the flush.
        :return: the result of the last write, True when the queue was empty
        """
        messages = self.messages
        logger.debug("flushing %d messages" % len(messages))
        success = True
        while messages:
            success = self._write_output(messages.popleft())
        return success
