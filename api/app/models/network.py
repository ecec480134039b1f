from enum import Enum


class InvalidNetworkError(ValueError):
    """Raised when a network name is not one of the recognised networks."""

    def __init__(self, name):
        self.name = name
        super().__init__(f'Not a valid network {name}')


class Network(str, Enum):
    """Blockchain networks that partition wizard and challenge records."""
    MAINNET = 'mainnet'
    RINKEBY = 'rinkeby'

    @classmethod
    def parse(cls, name) -> 'Network':
        """Resolve a network name, raising InvalidNetworkError for unknown ones."""
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise InvalidNetworkError(name) from None
