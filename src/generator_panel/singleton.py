"""
Singleton metaclass shared by the logger.
"""


class Singleton(type):
    """
    Metaclass whose classes build one shared instance on their first call.

    Later calls return that instance and ignore their arguments.
    """

    def __init__(cls, name, bases, namespace):
        super().__init__(name, bases, namespace)
        cls._instance = None

    def __call__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__call__(*args, **kwargs)
        return cls._instance


__all__ = [
    'Singleton',
]
