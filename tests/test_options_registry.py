"""
Unit tests for the static option registry.
"""

import unittest
from unittest import mock

from Options import registry
from Options.base import PipelineOptions
from Options.Models import OptionSpec
from Options.registry import get_all_option_specs, get_option_specs, property_name, register_options
from Options.StandardOptions import ApplicationOptions, ChannelOptions, DebugOptions, LoggingOptions


class TestPropertyName(unittest.TestCase):
    """Test cases for deriving property names from accessors."""

    def test_camel_case_accessors(self):
        """Test that the prefix is stripped and the next character lower-cased."""
        self.assertEqual(property_name("getJobName"), "jobName")
        self.assertEqual(property_name("isStreaming"), "streaming")
        self.assertEqual(property_name("getX"), "x")

    def test_snake_case_accessors(self):
        """Test that only the prefix is stripped from snake_case accessors."""
        self.assertEqual(property_name("get_temp_location"), "_temp_location")
        self.assertEqual(property_name("is_streaming"), "_streaming")

    def test_lower_case_remainders(self):
        """Test that any name after the prefix counts, even when it starts lower-case."""
        self.assertEqual(property_name("getfoo"), "foo")
        self.assertEqual(property_name("isolate"), "olate")
        self.assertEqual(property_name("getter"), "ter")
        self.assertEqual(property_name("get_"), "_")

    def test_non_getter_names(self):
        """Test that names without a getter prefix, or with nothing after it, are not getter-shaped."""
        for accessor in ("setJobName", "jobName", "get", "is", "Getfoo", "fooget"):
            self.assertIsNone(property_name(accessor), accessor)


class TestOptionRegistry(unittest.TestCase):
    """Test cases for option discovery over the registration table."""

    def setUp(self):
        """Isolate registrations made by a test."""
        patcher = mock.patch.dict(registry._OPTIONS_REGISTRY)
        patcher.start()
        self.addCleanup(patcher.stop)

    def names(self, specs):
        return {(spec.declaring_type.__name__, spec.name) for spec in specs}

    def test_single_type(self):
        """Test that a registered type yields one spec per getter-shaped accessor."""
        specs = get_option_specs(ApplicationOptions)
        self.assertEqual(
            specs,
            {
                OptionSpec(declaring_type=ApplicationOptions, name="jobName", accessor="getJobName", value_type=str),
                OptionSpec(declaring_type=ApplicationOptions, name="tempLocation", accessor="getTempLocation", value_type=str),
            },
        )

    def test_inherited_options_keep_their_declaring_type(self):
        """Test that options of ancestors are reported with the ancestor as declaring type."""
        self.assertEqual(
            self.names(get_option_specs(ChannelOptions)),
            {
                ("ApplicationOptions", "jobName"),
                ("ApplicationOptions", "tempLocation"),
                ("ChannelOptions", "defaultScheme"),
                ("ChannelOptions", "schemeAliases"),
                ("ChannelOptions", "readSeekEfficient"),
            },
        )

    def test_hidden_type_contributes_nothing(self):
        """Test that a hidden declaring type is filtered while its ancestors are not."""
        specs = get_option_specs(DebugOptions)
        self.assertNotIn("DebugOptions", {spec.declaring_type.__name__ for spec in specs})
        self.assertEqual(specs, get_option_specs(ChannelOptions))

    def test_subclass_of_hidden_type_is_visible(self):
        """Test that hiding applies to the declaring type only."""
        @register_options(getVerbosity=int)
        class TracingOptions(DebugOptions):
            pass

        names = self.names(get_option_specs(TracingOptions))
        self.assertIn(("TracingOptions", "verbosity"), names)
        self.assertNotIn(("DebugOptions", "dumpChannelsOnError"), names)

    def test_void_and_non_getter_accessors_are_skipped(self):
        """Test that only getter-shaped accessors with a return type count."""
        @register_options(getName=str, getNothing=None, setName=None, name=str, isEnabled=bool)
        class MixedOptions(PipelineOptions):
            pass

        self.assertEqual(
            self.names(get_option_specs(MixedOptions)),
            {("MixedOptions", "name"), ("MixedOptions", "enabled")},
        )

    def test_lower_case_getters_are_discovered(self):
        """Test that accessors like 'getfoo' and 'isolate' yield options."""
        @register_options(getfoo=str, isolate=bool)
        class LowerOptions(PipelineOptions):
            pass

        self.assertEqual(
            get_option_specs(LowerOptions),
            {
                OptionSpec(declaring_type=LowerOptions, name="foo", accessor="getfoo", value_type=str),
                OptionSpec(declaring_type=LowerOptions, name="olate", accessor="isolate", value_type=bool),
            },
        )

    def test_unregistered_ancestors_are_ignored(self):
        """Test that types in the MRO without a registration contribute nothing."""
        class Plain(ApplicationOptions):
            pass

        self.assertEqual(get_option_specs(Plain), get_option_specs(ApplicationOptions))

    def test_union_over_several_types(self):
        """Test that shared ancestors are reported once."""
        specs = get_all_option_specs([ChannelOptions, LoggingOptions])
        self.assertEqual(len(specs), 8)
        self.assertEqual(
            len([spec for spec in specs if spec.declaring_type is ApplicationOptions]), 2
        )
        self.assertEqual(get_all_option_specs([]), frozenset())

    def test_non_option_type_is_rejected(self):
        """Test that only PipelineOptions subclasses can be registered or queried."""
        with self.assertRaises(TypeError):
            register_options(getName=str)(dict)
        with self.assertRaises(TypeError):
            get_option_specs(dict)

    def test_describe(self):
        """Test the one-line rendering used by the CLI."""
        spec = OptionSpec(declaring_type=ChannelOptions, name="defaultScheme", accessor="getDefaultScheme", value_type=str)
        self.assertEqual(spec.describe(), "ChannelOptions.defaultScheme (accessor: getDefaultScheme, str)")


if __name__ == "__main__":
    unittest.main()
