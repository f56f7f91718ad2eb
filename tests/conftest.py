"""
Pytest configuration and shared fixtures for the composite-gen test suite.
"""

import importlib
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest

from composite_gen.api.generator import GeneratedSources, render_sources
from composite_gen.meta.catalog import load_catalog
from composite_gen.runtime import MetricsRecorder, set_recorder
from composite_gen.settings import GeneratorSettings
from composite_gen.validation import validate_catalog

GENERATED_PACKAGE = "generated_composite"
FIXED_YEAR = 2024


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir():
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def test_catalog_path(fixtures_dir):
    """Catalog matching the fake vendor modules in tests/fakecompute."""
    return fixtures_dir / "catalog.yaml"


@pytest.fixture(scope="session")
def catalog(test_catalog_path):
    return validate_catalog(load_catalog(test_catalog_path))


@pytest.fixture(scope="session")
def packaged_catalog():
    return validate_catalog(load_catalog())


@pytest.fixture(scope="session")
def generator_settings(test_catalog_path):
    return GeneratorSettings(
        catalog_path=test_catalog_path,
        vendor_package="fakecompute",
        wrapper_module=f"{GENERATED_PACKAGE}.gen",
    )


@pytest.fixture(scope="session")
def sources(catalog, generator_settings) -> GeneratedSources:
    return render_sources(catalog, generator_settings, year=FIXED_YEAR)


@dataclass
class GeneratedModules:
    wrapper: ModuleType
    tests: ModuleType


@pytest.fixture(scope="session")
def generated(sources, tmp_path_factory) -> GeneratedModules:
    """Write the rendered modules as an importable package and import them."""
    root = tmp_path_factory.mktemp("generated")
    package = root / GENERATED_PACKAGE
    package.mkdir()
    (package / "__init__.py").write_text("")
    (package / "gen.py").write_text(sources.wrapper)
    (package / "test_gen.py").write_text(sources.tests)

    sys.path.insert(0, str(root))
    try:
        wrapper = importlib.import_module(f"{GENERATED_PACKAGE}.gen")
        tests = importlib.import_module(f"{GENERATED_PACKAGE}.test_gen")
        yield GeneratedModules(wrapper=wrapper, tests=tests)
    finally:
        sys.path.remove(str(root))
        for name in [m for m in sys.modules if m == GENERATED_PACKAGE or m.startswith(f"{GENERATED_PACKAGE}.")]:
            del sys.modules[name]


@pytest.fixture(scope="session")
def gen(generated):
    """The emitted wrapper module."""
    return generated.wrapper


@dataclass
class Call:
    accessor: str
    method: str
    ctx: Any
    args: tuple


@dataclass
class StubCloud:
    """
    Records every vendor call made through ``cloud.compute().<accessor>().<method>(ctx, ...)``.

    Responses are looked up by (accessor, method); an exception instance is raised
    instead of returned.
    """

    calls: list = field(default_factory=list)
    responses: dict = field(default_factory=dict)

    def respond(self, accessor: str, method: str, value: Any) -> None:
        self.responses[(accessor, method)] = value

    def compute(self):
        return _StubCompute(self)

    @property
    def last(self) -> Call:
        assert self.calls, "no vendor call was made"
        return self.calls[-1]


class _StubCompute:
    def __init__(self, cloud: StubCloud):
        self._cloud = cloud

    def __getattr__(self, accessor: str):
        return lambda: _StubService(self._cloud, accessor)


class _StubService:
    def __init__(self, cloud: StubCloud, accessor: str):
        self._cloud = cloud
        self._accessor = accessor

    def __getattr__(self, method: str):
        def call(ctx, *args):
            self._cloud.calls.append(Call(self._accessor, method, ctx, args))
            response = self._cloud.responses.get((self._accessor, method))
            if isinstance(response, BaseException):
                raise response
            return response

        return call


@pytest.fixture
def cloud():
    return StubCloud()


@pytest.fixture
def recorder():
    """A fresh process-wide metrics recorder, restored afterwards."""
    fresh = MetricsRecorder()
    previous = set_recorder(fresh)
    yield fresh
    set_recorder(previous)


@pytest.fixture(autouse=True)
def restore_composite_logging():
    """Undo handlers and levels installed on the composite logger tree by CLI runs."""
    composite = logging.getLogger("composite")
    handlers, level = list(composite.handlers), composite.level
    yield
    composite.handlers[:] = handlers
    composite.setLevel(level)
