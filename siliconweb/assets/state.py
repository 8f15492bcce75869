from collections.abc import Iterable, Mapping

from django.template import Engine

COLLECTIONS_KEY = "siliconweb_collections"


def keyword_value(value):
    """Template values as keyword strings: booleans become "1"/"0"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class RenderState:
    """
    Keywords and collections of one render, stored in a django ``Context``.

    Keywords are plain context variables. Collections are kept in a dict at
    the bottom of the context stack, so anything pushed and popped by
    ``{% with %}``, ``{% block %}`` or ``{% include %}`` doesn't drop them.
    """

    def __init__(self, context):
        self.context = context

    @property
    def _globals(self):
        return self.context.dicts[0]

    def get_keyword(self, key):
        return keyword_value(self.context.get(key))

    def has_keyword(self, key):
        return self.get_keyword(key) is not None

    def set_global_keyword(self, key, value):
        self._globals[key] = value

    def _collections(self):
        return self._globals.setdefault(COLLECTIONS_KEY, {})

    def get_collection(self, name):
        collections = self._collections()
        if name in collections:
            return list(collections[name])

        value = self.context.get(name)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping)):
            return list(value)
        return []

    def add_to_collection(self, name, record):
        self._collections().setdefault(name, []).append(dict(record))

    def parse(self, template_text, **extra):
        template = self.context.template
        engine = template.engine if template is not None else Engine.get_default()
        compiled = engine.from_string(template_text)
        with self.context.push(**extra):
            return compiled.render(self.context)
