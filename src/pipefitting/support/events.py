from pipefitting.support.mixins import StringerMixin


class Notification(StringerMixin):
    """
    A named notification.

    :param name: what happened, such as ACCEPT_INPUT_PIPE
    :param body: the subject of the notification, such as a pipe
    :param type: qualifies the notification, such as the name of the pipe
    """

    def __init__(self, name, body=None, type=None):
        self.name = name
        self.body = body
        self.type = type


class EventSource(object):
    """
    Delivers notifications synchronously to handlers, in the order the handlers were added.
    A handler added with names receives only notifications with one of those names.
    """

    def __init__(self):
        self._handlers = []     # (handler, names or None for all)

    def __iadd__(self, handler):
        return self.add(handler)

    def __isub__(self, handler):
        return self.remove(handler)

    def add(self, handler, *names):
        self._handlers.append((handler, frozenset(names) if names else None))
        return self

    def add_mediator(self, mediator):
        """ adds a mediator's handle_notification for the notifications it is interested in """
        return self.add(mediator.handle_notification, *mediator.list_notification_interests())

    def remove(self, handler):
        self._handlers = [h for h in self._handlers if h[0] != handler]
        return self

    def handlers(self):
        return tuple(h[0] for h in self._handlers)

    def fire(self, notification: Notification):
        for handler, names in list(self._handlers):
            if names is None or notification.name in names:
                handler(notification)

    def fire_all(self, notifications):
        for n in notifications:
            self.fire(n)

    def notify(self, name, body=None, type=None):
        """ creates and fires a notification """
        self.fire(Notification(name, body, type))
