def quote(val):
    return "'" + str(val) + "'" if isinstance(val, str) else str(val)


class StringerMixin:
    """
    Renders the class name and the instance attributes, in key sorted order.
    Used for value-like objects that appear in log output, such as messages.
    Equality is left as identity.
    """

    def __str__(self):
        return type(self).__name__ + ':' + self._sorted_items_string()

    def _sorted_items_string(self):
        return "{" + ", ".join(["'" + str(key) + "': " + quote(val)
                                for key, val in sorted(self.__dict__.items())]) + "}"
