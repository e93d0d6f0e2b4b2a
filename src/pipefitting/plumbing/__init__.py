"""
Pipe fittings.

- Pipe: the basic fitting, a single output.
- PipeListener: terminal fitting that hands messages to a callback.
- TeeSplit: writes each message to many outputs.
- TeeMerge: many upstream fittings write into one output.
- Queue: stores messages until flushed, optionally sorted by priority.
- Filter: named, transforms messages; controlled by FilterControlMessage.
"""
