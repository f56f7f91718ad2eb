"""Source formatting for generated modules."""

import black

from composite_gen.errors import FormatterError


def format_python_code(code: str, line_length: int = 100) -> str:
    """
    Format generated Python code with Black.

    A rendered module that Black cannot parse means a template bug, so the
    failure is raised rather than falling back to the unformatted text.
    """
    try:
        return black.format_str(code, mode=black.Mode(line_length=line_length))
    except black.InvalidInput as exc:
        raise FormatterError(f"black could not parse the generated source: {exc}") from exc
    except Exception as exc:
        raise FormatterError(f"black failed: {exc}") from exc
