# errors.py

class ThemelineError(Exception):
    """Base class for every error raised by themeline."""


class InvalidClassName(ThemelineError, ValueError):
    """A canonical class name could not be resolved to a color."""
    def __init__(self, class_name: str, reason: str = None):
        self.class_name = class_name
        message = f"Canonical class name must be in form 'mtk{{nonnegative integer}}'. Received '{class_name}'."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class NotRegistered(ThemelineError, KeyError):
    """A node was queried before it was registered."""
    def __init__(self, node):
        self.node = node
        super().__init__(f"Node {node!r} was never registered")

    def __str__(self) -> str:
        return self.args[0]


class TokenizationMismatch(ThemelineError, ValueError):
    """Per-theme tokenizations of one line do not cover the same range."""


class UnknownTheme(ThemelineError, KeyError):
    """A theme identifier has no registered color table."""
    def __init__(self, theme_identifier: str):
        self.theme_identifier = theme_identifier
        super().__init__(f"No color table registered for theme '{theme_identifier}'")

    def __str__(self) -> str:
        return self.args[0]


class RegistrationClosed(ThemelineError, RuntimeError):
    """A node was registered after class names were computed."""
