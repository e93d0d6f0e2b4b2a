import logging

from pipefitting.config import defaults
from pipefitting.message import PipeMessageType, FilterControlMessageType
from pipefitting.plumbing.pipe import Pipe

logger = logging.getLogger(__name__)


class Filter(Pipe):
    """
    Filters may modify the contents of messages before writing them to their output fitting.

    The transform is called as transform(message, params) and modifies the message in place.
    Its return value is not used; raising an exception drops the message.

    The parameters and the transform can be replaced by SET_PARAMS and SET_FILTER control
    messages, and the Bypass/Filter mode toggled by BYPASS and FILTER control messages.
    A filter only acts on a control message whose name is its own. Other control messages
    are written through to the output unchanged.

    :param name: identifies the filter to control messages. Defaults to the configured filter name.
    :param output: the output fitting
    :param transform: the transform function
    :param params: the parameters passed to the transform
    """

    def __init__(self, name=None, output=None, transform=None, params=None):
        super().__init__(output)
        self.name = name if name is not None else defaults.filter_name
        self.transform = transform
        self.params = params if params is not None else {}
        self.mode = FilterControlMessageType.FILTER

    def write(self, message) -> bool:
        """
        Normal messages are transformed (unless in bypass mode) and written to the output.
        Control messages for this filter are applied and not written on.

        :return: False if the transform raised an exception or the output write failed.
            True for a control message applied to this filter.
        """
        type = message.type
        if type == PipeMessageType.NORMAL:
            if not self._apply_transform(message):
                return False
        elif type == FilterControlMessageType.SET_PARAMS and self.is_target(message):
            self.params = message.params if message.params is not None else {}
            return True
        elif type == FilterControlMessageType.SET_FILTER and self.is_target(message):
            self.transform = message.transform
            return True
        elif type in (FilterControlMessageType.BYPASS, FilterControlMessageType.FILTER) \
                and self.is_target(message):
            logger.debug("filter '%s' mode %s" % (self.name, type))
            self.mode = type
            return True
        return self._write_output(message)

    def is_target(self, message) -> bool:
        """ Is the control message directed at this filter instance? """
        return getattr(message, 'name', None) == self.name

    def _apply_transform(self, message):
        """
        Transforms the message in place, unless bypassed or no transform is set.
        :return: False if the transform raised an exception
        """
        transform = self.transform
        if self.mode != FilterControlMessageType.FILTER or transform is None:
            return True
        try:
            transform(message, self.params)
        except Exception as e:
            if logger.isEnabledFor(logging.DEBUG):
                logger.exception(e)
            logger.debug("filter '%s' dropped message %s: %s" % (self.name, message, e))
            return False
        return True
