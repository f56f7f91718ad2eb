"""
Unit tests for formatting, headers, templates and conversion patch plans.
"""

import io
import logging

import pytest

from composite_gen.api.gen_logging import configure_logging, get_logger, log_level
from composite_gen.api.generators import PatchPlan, build_conversion_methods
from composite_gen.api.utils import GENERATED_NOTICE, format_python_code, license_header
from composite_gen.errors import FormatterError, TemplateRenderError
from composite_gen.meta import ForceSendPatch
from composite_gen.runtime import with_values
from composite_gen.templates import render


class TestFormatter:

    def test_formats_valid_code(self):
        assert format_python_code("x = {'a':1}\n") == 'x = {"a": 1}\n'

    def test_invalid_code_is_fatal(self):
        with pytest.raises(FormatterError):
            format_python_code("def broken(:\n    pass\n")


class TestHeaders:

    def test_license_header(self):
        header = license_header(2024)
        lines = header.splitlines()
        assert lines[0] == "# Copyright 2024 The composite-gen Authors."
        assert lines[-1] == f"# {GENERATED_NOTICE}"
        assert all(line.startswith("#") for line in lines)

    def test_blank_license_lines_have_no_trailing_space(self):
        assert "# \n" not in license_header(2024)


class TestTemplates:

    def test_missing_context_is_an_error(self):
        with pytest.raises(TemplateRenderError, match="conversions.jinja"):
            render("conversions.jinja")

    def test_missing_template(self):
        with pytest.raises(TemplateRenderError):
            render("nope.jinja")


class TestPatchPlan:

    def test_nested_path_condition(self):
        plan = PatchPlan(ForceSendPatch(path="cdn_policy.cache_key_policy", fields=("include_host",)))
        assert plan.condition("alpha") == "alpha.cdn_policy and alpha.cdn_policy.cache_key_policy"
        assert plan.value == "['include_host']"

    def test_append_keeps_the_composite_hints(self):
        plan = PatchPlan(ForceSendPatch(path="cdn_policy", fields=("negative_caching",), append=True))
        assert plan.value == "[*force_send_fields_of(self.cdn_policy), 'negative_caching']"

    def test_when_condition(self):
        plan = PatchPlan(ForceSendPatch(path="log_config", fields=("enable", "sample_rate"), when="enable"))
        assert plan.condition("ga") == "ga.log_config and ga.log_config.enable"

    def test_conversion_methods_context(self, catalog):
        context = build_conversion_methods(catalog.get("BackendService"), catalog)
        assert [p.path for p in context["patches"]] == [
            "cdn_policy.cache_key_policy", "cdn_policy", "iap", "log_config", "log_config",
        ]
        assert [r.lower for r in context["revisions"]] == ["alpha", "beta", "ga"]


class TestGenLogging:

    def test_generator_logger_names(self):
        assert get_logger("composite_gen.api.generators.type_generator").name == "composite.gen.type_generator"
        assert get_logger().name == "composite.gen"

    @pytest.mark.parametrize("verbose,quiet,level", [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
    ])
    def test_levels(self, verbose, quiet, level):
        assert log_level(verbose, quiet) == level

    def test_one_handler_for_generator_and_wrapper_logs(self):
        stream = io.StringIO()
        configure_logging(stream=stream)
        configure_logging(stream=stream)
        get_logger("composite_gen.api.generator").info("[PHASE 1] Rendering wrapper module...")
        with_values(None, name="bs").info("Creating ga BackendService")
        logging.getLogger("composite.metrics").debug("hidden at INFO")

        assert stream.getvalue().splitlines() == [
            "[PHASE 1] Rendering wrapper module...",
            "INFO composite: Creating ga BackendService name='bs'",
        ]

    def test_quiet_keeps_warnings(self):
        stream = io.StringIO()
        configure_logging(quiet=True, stream=stream)
        get_logger("composite_gen.api.generator").info("[GENERATED] gen.py")
        logging.getLogger("composite.metrics").warning("slow call")
        assert stream.getvalue() == "WARNING composite.metrics: slow call\n"
