from .formatters import format_python_code
from .headers import GENERATED_NOTICE, generation_year, license_header

__all__ = ["format_python_code", "GENERATED_NOTICE", "generation_year", "license_header"]
