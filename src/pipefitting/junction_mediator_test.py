import unittest

from hamcrest import assert_that, is_, same_instance, contains_exactly, instance_of

from pipefitting.fitting import ACCEPT_INPUT_PIPE, ACCEPT_OUTPUT_PIPE, PipeAware
from pipefitting.junction import Junction
from pipefitting.junction_mediator import JunctionMediator
from pipefitting.message import Message
from pipefitting.plumbing.pipe import Pipe
from pipefitting.plumbing.pipelistener import PipeListener
from pipefitting.support.events import EventSource, Notification


class RecordingMediator(JunctionMediator):
    def __init__(self, junction=None):
        super().__init__("recording", junction)
        self.received = []

    def handle_pipe_message(self, message):
        self.received.append(message)


class JunctionMediatorTest(unittest.TestCase):

    def setUp(self):
        self.sut = RecordingMediator()

    def test_is_pipe_aware(self):
        assert_that(self.sut, instance_of(PipeAware))

    def test_creates_junction(self):
        assert_that(self.sut.junction, instance_of(Junction))

    def test_uses_given_junction(self):
        junction = Junction()
        assert_that(RecordingMediator(junction).junction, same_instance(junction))

    def test_notification_interests(self):
        assert_that(self.sut.list_notification_interests(), contains_exactly(ACCEPT_INPUT_PIPE, ACCEPT_OUTPUT_PIPE))

    def test_handle_pipe_message_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            JunctionMediator("base").handle_pipe_message(Message())

    def test_accept_input_pipe(self):
        pipe = Pipe()
        assert_that(self.sut.accept_input_pipe("in", pipe), is_(True))
        assert_that(self.sut.junction.has_input_pipe("in"), is_(True))
        assert_that(pipe.output, instance_of(PipeListener))

        message = Message()
        assert_that(pipe.write(message), is_(True))
        assert_that(self.sut.received, contains_exactly(message))

    def test_accept_input_pipe_already_connected(self):
        pipe = Pipe(Pipe())
        assert_that(self.sut.accept_input_pipe("in", pipe), is_(False))
        assert_that(self.sut.junction.has_input_pipe("in"), is_(True))

    def test_accept_input_pipe_duplicate_name_adds_no_listener(self):
        self.sut.accept_output_pipe("x", Pipe())
        pipe = Pipe()
        assert_that(self.sut.accept_input_pipe("x", pipe), is_(False))
        assert_that(pipe.output, is_(None))

    def test_accept_output_pipe(self):
        received = []
        pipe = Pipe(PipeListener(received.append))
        assert_that(self.sut.accept_output_pipe("out", pipe), is_(True))
        assert_that(self.sut.junction.has_output_pipe("out"), is_(True))
        message = Message()
        assert_that(self.sut.junction.send_message("out", message), is_(True))
        assert_that(received, contains_exactly(message))

    def test_handle_notifications(self):
        input = Pipe()
        output = Pipe()
        self.sut.handle_notification(Notification(ACCEPT_INPUT_PIPE, input, "in"))
        self.sut.handle_notification(Notification(ACCEPT_OUTPUT_PIPE, output, "out"))
        self.sut.handle_notification(Notification("somethingElse", Pipe(), "other"))
        assert_that(self.sut.junction.input_pipes, is_(frozenset(["in"])))
        assert_that(self.sut.junction.output_pipes, is_(frozenset(["out"])))

    def test_wired_through_event_source(self):
        events = EventSource()
        events.add_mediator(self.sut)
        pipe = Pipe()
        events.notify(ACCEPT_INPUT_PIPE, pipe, "in")
        assert_that(self.sut.junction.retrieve_pipe("in"), same_instance(pipe))

    def test_modules_connected_by_pipes(self):
        shell = RecordingMediator()
        module = RecordingMediator()
        to_module = Pipe()
        from_module = Pipe()
        shell.accept_output_pipe("toModule", to_module)
        module.accept_input_pipe("fromShell", to_module)
        module.accept_output_pipe("toShell", from_module)
        shell.accept_input_pipe("fromModule", from_module)

        request = Message(body={'q': 1})
        reply = Message(body={'a': 2})
        assert_that(shell.junction.send_message("toModule", request), is_(True))
        assert_that(module.junction.send_message("toShell", reply), is_(True))
        assert_that(module.received, contains_exactly(request))
        assert_that(shell.received, contains_exactly(reply))
        assert_that(shell.junction.send_message("fromModule", request), is_(False))
        assert_that(module.received, contains_exactly(request))
