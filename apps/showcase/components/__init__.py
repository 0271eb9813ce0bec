"""
Example page registry
Page classes register under a name; the index lists them in registration order.
"""
from collections import namedtuple

ExampleEntry = namedtuple('ExampleEntry', ['name', 'title', 'endpoint', 'description', 'page_class'])

PAGE_ATTRIBUTES = ('title', 'endpoint', 'description')


class ExampleRegistry:
    """Ordered registry of example pages"""

    def __init__(self):
        self._entries = {}

    def register(self, name, page_class):
        """Record page_class under name

        Registering the same class again is a no-op; a different class under
        a taken name is an error.
        """
        missing = [attr for attr in PAGE_ATTRIBUTES if not getattr(page_class, attr, None)]
        if missing:
            raise ValueError(f"Example page {name!r} is missing {', '.join(missing)}")
        existing = self._entries.get(name)
        if existing is not None:
            if existing.page_class is page_class:
                return existing
            raise ValueError(f"Example page {name!r} is already registered")
        entry = ExampleEntry(name, page_class.title, page_class.endpoint,
                             page_class.description, page_class)
        self._entries[name] = entry
        return entry

    def get(self, name):
        return self._entries.get(name)

    def entries(self):
        """Registered examples, in registration order"""
        return list(self._entries.values())

    def __contains__(self, name):
        return name in self._entries

# Global registry instance
registry = ExampleRegistry()

def register_component(name):
    """Decorator registering an example page class

    The class must define ``title``, ``endpoint`` and ``description``.
    """
    def decorator(page_class):
        registry.register(name, page_class)
        return page_class
    return decorator

__all__ = ['ExampleEntry', 'ExampleRegistry', 'registry', 'register_component']
