"""License and do-not-edit headers for generated modules."""

from datetime import date
from typing import Optional

GENERATED_NOTICE = 'This file was generated by "composite-gen generate". Do not edit directly.'

LICENSE = """Copyright {year} The composite-gen Authors.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License."""


def generation_year(year: Optional[int] = None) -> int:
    return year if year is not None else date.today().year


def license_header(year: Optional[int] = None) -> str:
    """The license block plus the do-not-edit notice, as Python comments."""
    text = LICENSE.format(year=generation_year(year))
    lines = [f"# {line}".rstrip() for line in text.splitlines()]
    lines.append(f"# {GENERATED_NOTICE}")
    return "\n".join(lines) + "\n"
