import unittest

from hamcrest import assert_that, is_, none, calling, raises, instance_of, starts_with

from pipefitting.message import Message, FilterControlMessage, QueueControlMessage, MessageTypeError, \
    PipeMessageType, FilterControlMessageType, QueueControlMessageType, MessagePriority, message_types


class MessageTest(unittest.TestCase):

    def test_defaults(self):
        sut = Message()
        assert_that(sut.type, is_(PipeMessageType.NORMAL))
        assert_that(sut.header, is_(none()))
        assert_that(sut.body, is_(none()))
        assert_that(sut.priority, is_(none()))

    def test_header_body_priority(self):
        header = {'testProp': 'testval'}
        body = {'width': 10}
        sut = Message(PipeMessageType.NORMAL, header, body, MessagePriority.HIGH)
        assert_that(sut.header, is_(header))
        assert_that(sut.body, is_(body))
        assert_that(sut.priority, is_(1))

    def test_header_and_body_are_mutable(self):
        sut = Message(header={'a': 1})
        sut.header['a'] = 2
        sut.body = {'b': 3}
        assert_that(sut.header, is_({'a': 2}))
        assert_that(sut.body, is_({'b': 3}))

    def test_unknown_type(self):
        assert_that(calling(Message).with_args("BOGUS"), raises(MessageTypeError))

    def test_type_error_is_value_error(self):
        assert_that(MessageTypeError(), instance_of(ValueError))

    def test_all_control_types_are_message_types(self):
        for type in ["NORMAL", "SET_PARAMS", "SET_FILTER", "BYPASS", "FILTER", "FLUSH", "SORT", "FIFO"]:
            assert_that(type in message_types, is_(True))
        assert_that(len(message_types), is_(8))

    def test_priority_order(self):
        assert_that(MessagePriority.HIGH < MessagePriority.MEDIUM < MessagePriority.LOW, is_(True))

    def test_str(self):
        assert_that(str(Message(header={'p': 1})), starts_with("Message:{'body': None, 'header': {'p': 1}"))


class FilterControlMessageTest(unittest.TestCase):

    def test_construct(self):
        def transform(message, params):
            return True
        params = {'factor': 10}
        sut = FilterControlMessage(FilterControlMessageType.SET_FILTER, "Scale", transform, params)
        assert_that(sut.type, is_(FilterControlMessageType.SET_FILTER))
        assert_that(sut.name, is_("Scale"))
        assert_that(sut.transform, is_(transform))
        assert_that(sut.params, is_(params))
        assert_that(sut, instance_of(Message))

    def test_defaults(self):
        sut = FilterControlMessage(FilterControlMessageType.BYPASS, "Scale")
        assert_that(sut.transform, is_(none()))
        assert_that(sut.params, is_(none()))

    def test_rejects_non_filter_types(self):
        assert_that(calling(FilterControlMessage).with_args(QueueControlMessageType.FLUSH, "Scale"),
                    raises(MessageTypeError))
        assert_that(calling(FilterControlMessage).with_args(PipeMessageType.NORMAL, "Scale"),
                    raises(MessageTypeError))


class QueueControlMessageTest(unittest.TestCase):

    def test_construct(self):
        for type in [QueueControlMessageType.FLUSH, QueueControlMessageType.SORT, QueueControlMessageType.FIFO]:
            assert_that(QueueControlMessage(type).type, is_(type))

    def test_rejects_non_queue_types(self):
        assert_that(calling(QueueControlMessage).with_args(FilterControlMessageType.FILTER),
                    raises(MessageTypeError))
