"""

Message pipes for wiring modules together

- Message: the unit of transport. Has a type, an optional header and body, and an optional priority.
  Control messages (FilterControlMessage, QueueControlMessage) change the behavior of the fittings
  they reach instead of carrying application data.
- Fitting: anything that can be connected to, disconnected from and written to.
  Pipe, PipeListener, TeeSplit, TeeMerge, Queue and Filter are all fittings.
- Junction: a module's directory of named INPUT and OUTPUT pipes.
- JunctionMediator: registers the pipes handed to a module by the host, and listens to its input pipes.


## Delivery

Everything runs on the caller's thread. write() at the head of a pipeline returns only after every
fitting reachable from it has finished with the message, including every branch of a TeeSplit.
Messages are passed by reference and never copied.

Failures are reported as a False result from write(), aggregated back up the chain to the
producer. The only exceptions contained by the pipeline are those raised by a Filter's
transform; anything else raised downstream reaches the producer.

Fittings are not thread-safe. A host driving a pipeline from several threads must
serialize access to each Queue, Filter and Junction itself.


## Configuration

pipefitting.config.defaults holds the initial Queue mode and the default Filter name.
Call pipefitting.config.defaults.configure() to load them from pipefitting.cfg files.

"""
