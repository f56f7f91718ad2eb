"""Generation-time errors. All of them abort the run before anything is written."""


class CompositeGenError(Exception):
    """Base class for generator failures."""


class CatalogError(CompositeGenError, ValueError):
    """The resource catalog could not be loaded or violates an invariant."""

    def __init__(self, message: str, problems: list[str] | None = None):
        self.problems = list(problems or [])
        if self.problems:
            message = message + ":\n" + "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(message)


class TemplateRenderError(CompositeGenError):
    """A Jinja template failed to parse or render."""


class FormatterError(CompositeGenError):
    """black rejected the rendered source."""
