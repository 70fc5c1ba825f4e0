from typing import Dict, Optional

from emojiscript.types import Value


class Environment:
    """A scope frame mapping names to values, falling back to its parent."""
    def __init__(self, parent: Optional['Environment'] = None):
        self.parent = parent
        self.values: Dict[str, Value] = {}

    def get(self, name: str) -> Optional[Value]:
        if name in self.values:
            return self.values[name]
        if self.parent:
            return self.parent.get(name)
        return None

    def has(self, name: str) -> bool:
        if name in self.values:
            return True
        if self.parent:
            return self.parent.has(name)
        return False

    def set(self, name: str, value: Value):
        # Rebinding updates the frame that already owns the name; new names stay local
        if name in self.values or self.parent is None or not self.parent.has(name):
            self.values[name] = value
        else:
            self.parent.set(name, value)

    def define(self, name: str, value: Value):
        self.values[name] = value

    def child(self) -> 'Environment':
        return Environment(parent=self)

    def entries(self) -> Dict[str, Value]:
        merged = self.parent.entries() if self.parent else {}
        merged.update(self.values)
        return merged
