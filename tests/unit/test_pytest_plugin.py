# tests/unit/test_pytest_plugin.py
"""Tests for the pytest plugin, run in isolated pytester sessions."""

import pytest

PLUGIN = ("-p", "propsuite.pytest_plugin")

SUITE = """
from hypothesis import strategies as st

from propsuite import PropertyTest, for_all, get_property_test, property_test_group


@for_all(xs=st.lists(st.integers()))
def sort_idempotent(xs):
    return sorted(sorted(xs)) == sorted(xs)


@for_all(x=st.integers(min_value=0, max_value=10_000))
def below_one_hundred(x):
    return x < 100


lists = property_test_group(
    "lists",
    [
        PropertyTest("sort", ["fast"], sort_idempotent),
        PropertyTest("constant", ["fast"], True),
    ],
)
bound = get_property_test(PropertyTest("bound", ["slow"], below_one_hundred))


def test_plain_function_still_collected():
    assert True
"""


@pytest.fixture
def suite(pytester: pytest.Pytester) -> pytest.Pytester:
    pytester.makepyfile(test_props=SUITE)
    return pytester


class TestCollection:
    def test_items_named_by_group_path(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "--collect-only", "-q")

        result.stdout.fnmatch_lines(
            [
                "test_props.py::lists/sort",
                "test_props.py::lists/constant",
                "test_props.py::bound",
                "test_props.py::test_plain_function_still_collected",
            ]
        )

    def test_tags_select_items(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "-k", "fast", "--property-option", "silent=True")
        result.assert_outcomes(passed=2)

    def test_property_marker(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "-m", "property", "--property-option", "maxSuccess=20", "-k", "not slow")
        result.assert_outcomes(passed=2)

    def test_not_collected_without_plugin(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest()
        result.assert_outcomes(passed=1)


class TestVerdicts:
    def test_pass_and_fail(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "--property-option", "maxSuccess=300", "--property-option", "silent=True")

        result.assert_outcomes(passed=3, failed=1)
        result.stdout.fnmatch_lines(["*Failure: a property failed*"])

    def test_gave_up_reported_as_failure(self, pytester: pytest.Pytester) -> None:
        pytester.makepyfile(
            test_discards="""
            from hypothesis import assume, strategies as st

            from propsuite import PropertyTest, for_all, get_property_test


            @for_all(x=st.integers())
            def never(x):
                assume(False)
                return True


            never_test = get_property_test(PropertyTest("never", [], never))
            """
        )

        result = pytester.runpytest(*PLUGIN, "--property-option", "silent=True")

        result.assert_outcomes(failed=1)
        result.stdout.fnmatch_lines(["*GaveUp: the property checker gave up*"])


class TestOptions:
    def test_ini_options(self, suite: pytest.Pytester) -> None:
        suite.makeini(
            """
            [pytest]
            property_options =
                maxSuccess=300
                verbosity=Silent
            """
        )

        result = suite.runpytest(*PLUGIN, "-k", "bound")
        result.assert_outcomes(failed=1)

    def test_command_line_overrides_ini(self, suite: pytest.Pytester) -> None:
        suite.makeini(
            """
            [pytest]
            property_options =
                noShrinking=True
            """
        )

        result = suite.runpytest(*PLUGIN, "-k", "fast", "--property-option", "noShrinking=False")
        result.assert_outcomes(passed=2)

    def test_settings_file(self, suite: pytest.Pytester) -> None:
        suite.makefile(".yaml", properties="verbosity: Silent\nmax_success: 300\n")
        suite.makeini(
            """
            [pytest]
            property_settings = properties.yaml
            """
        )

        result = suite.runpytest(*PLUGIN, "-k", "bound")
        result.assert_outcomes(failed=1)

    def test_missing_settings_file(self, suite: pytest.Pytester) -> None:
        suite.makeini(
            """
            [pytest]
            property_settings = missing.yaml
            """
        )

        result = suite.runpytest(*PLUGIN)

        assert result.ret == pytest.ExitCode.USAGE_ERROR
        result.stderr.fnmatch_lines(["*Invalid property settings*"])

    def test_unknown_option(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "--property-option", "maxSucess=300")

        assert result.ret != pytest.ExitCode.OK
        assert "Unknown option" in result.stdout.str() + result.stderr.str()

    def test_malformed_assignment(self, suite: pytest.Pytester) -> None:
        result = suite.runpytest(*PLUGIN, "--property-option", "maxSuccess")

        assert result.ret == pytest.ExitCode.USAGE_ERROR
        result.stderr.fnmatch_lines(["*NAME=VALUE*"])
