"""
Unit tests for the DataManager.
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest import mock

import pandas as pd

from ChannelFactory import registry
from ChannelFactory.channels import ReadableChannel
from ChannelFactory.exceptions import ChannelNotFoundError
from ChannelFactory.local import LocalChannelFactory
from Configuration import MimeTypes
from DataManager import DataManager


class SequentialOnlyChannelFactory(LocalChannelFactory):
    """A local-backed factory that behaves like a backend where seeking is expensive."""

    def __init__(self):
        super().__init__()
        self.created = []

    def create(self, path, mime_type):
        self.created.append((path, mime_type))
        return super().create(path, mime_type)

    def open(self, path):
        # Hide seek/tell behind a plain sequential channel
        return ReadableChannel(super().open(path), path)

    def is_read_seek_efficient(self, path):
        return False


class TestDataManager(unittest.TestCase):
    """Test cases for the DataManager class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.manager = DataManager()

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.temp_dir)

    def path(self, *parts):
        return os.path.join(self.temp_dir, *parts)

    def test_bytes_round_trip_creates_directories(self):
        """Test that bytes are written under missing directories and read back."""
        target = self.path("out", "nested", "data.bin")
        self.manager.write_bytes(b"\x00\x01payload", target)

        self.assertTrue(os.path.isdir(self.path("out", "nested")))
        self.assertEqual(self.manager.read_bytes(target), b"\x00\x01payload")

    def test_read_bytes_missing_file(self):
        """Test that reading raw bytes of a missing file propagates NotFound."""
        with self.assertRaises(ChannelNotFoundError):
            self.manager.read_bytes(self.path("missing.bin"))

    def test_text_and_lines(self):
        """Test that text is written and read back as a string and as lines."""
        target = self.path("notes.txt")
        self.manager.write_text("first\nsecond\nthird\n", target)

        self.assertEqual(self.manager.read_text(target), "first\nsecond\nthird\n")
        self.assertEqual(self.manager.read_lines(target), ["first", "second", "third"])

    def test_json(self):
        """Test that JSON is written and read back."""
        target = self.path("config", "settings.json")
        data = {"name": "pipeline", "shards": 3, "tags": ["a", "b"]}

        self.manager.write_json(data, target)
        self.assertEqual(self.manager.read_json(target), data)

    def test_json_missing_and_invalid(self):
        """Test that a missing or invalid JSON file yields an empty dict."""
        self.assertEqual(self.manager.read_json(self.path("missing.json")), {})

        target = self.path("broken.json")
        self.manager.write_text("{not json", target)
        self.assertEqual(self.manager.read_json(target), {})

    def test_yaml(self):
        """Test that YAML is written and read back, and missing files are empty."""
        target = self.path("settings.yaml")
        data = {"scheme_aliases": {"disk": "file"}}

        self.manager.write_yaml(data, target)
        self.assertEqual(self.manager.read_yaml(target), data)
        self.assertEqual(self.manager.read_yaml(self.path("missing.yaml")), {})

    def test_csv(self):
        """Test that a DataFrame survives a CSV round trip."""
        target = self.path("tables", "costs.csv")
        df = pd.DataFrame({"resource": ["r1", "r2"], "cost": [1.5, 2.25]})

        self.manager.write_csv(df, target)
        pd.testing.assert_frame_equal(self.manager.read_csv(target), df)
        self.assertTrue(self.manager.read_csv(self.path("missing.csv")).empty)

    def test_parquet(self):
        """Test that a DataFrame survives a Parquet round trip."""
        target = self.path("tables", "costs.parquet")
        df = pd.DataFrame({"resource": ["r1", "r2", "r3"], "cost": [1.5, 2.25, 0.0]})

        self.manager.write_parquet(df, target)
        pd.testing.assert_frame_equal(self.manager.read_parquet(target), df)
        self.assertTrue(self.manager.read_parquet(self.path("missing.parquet")).empty)

    def test_copy_file(self):
        """Test that a file is copied byte for byte into a new directory."""
        source = self.path("source.bin")
        payload = os.urandom(3 * 1024 * 1024 + 17)
        self.manager.write_bytes(payload, source)

        copied = self.manager.copy_file(source, self.path("copies", "dest.bin"))

        self.assertEqual(copied, len(payload))
        self.assertEqual(self.manager.read_bytes(self.path("copies", "dest.bin")), payload)

    def test_copy_missing_source(self):
        """Test that copying a missing file raises NotFound and creates nothing."""
        with self.assertRaises(ChannelNotFoundError):
            self.manager.copy_file(self.path("missing.bin"), self.path("copies", "dest.bin"))
        self.assertFalse(os.path.exists(self.path("copies")))

    def test_match(self):
        """Test that match delegates to the factory."""
        for name in ("part-0.csv", "part-1.csv", "summary.txt"):
            self.manager.write_text(name, self.path(name))

        self.assertEqual(
            self.manager.match(self.path("part-*.csv")),
            {self.path("part-0.csv"), self.path("part-1.csv")},
        )

    def test_uses_registry_per_path(self):
        """Test that an unbound manager resolves the factory from the path's scheme."""
        fake = SequentialOnlyChannelFactory()
        with mock.patch.dict(registry._FACTORY_REGISTRY, {"seq": fake}):
            self.assertIs(self.manager.factory_for("seq:///tmp/x"), fake)
        self.assertIsInstance(self.manager.factory_for(self.path("x")), LocalChannelFactory)

    def test_seek_efficient_backend_reads_through_channel(self):
        """Test that a seek-efficient backend hands out a seekable buffered reader."""
        target = self.path("seekable.bin")
        self.manager.write_bytes(b"0123456789", target)

        with self.manager.open_reader(target) as stream:
            self.assertIsInstance(stream, io.BufferedReader)
            self.assertTrue(stream.seekable())
            stream.seek(4)
            self.assertEqual(stream.read(2), b"45")

    def test_sequential_backend_buffers_for_random_access(self):
        """Test that a non-seek-efficient backend is loaded into memory for random access."""
        factory = SequentialOnlyChannelFactory()
        manager = DataManager(factory)
        target = self.path("sequential.bin")
        manager.write_bytes(b"0123456789", target)

        with manager.open_reader(target) as stream:
            self.assertIsInstance(stream, io.BufferedReader)
            self.assertFalse(stream.seekable())
            self.assertEqual(stream.read(), b"0123456789")

        with manager.open_reader(target, random_access=True) as stream:
            self.assertIsInstance(stream, io.BytesIO)
            stream.seek(-3, io.SEEK_END)
            self.assertEqual(stream.read(), b"789")

    def test_sequential_backend_parquet(self):
        """Test that Parquet is readable from a backend where seeking is expensive."""
        factory = SequentialOnlyChannelFactory()
        manager = DataManager(factory)
        target = self.path("seq.parquet")
        df = pd.DataFrame({"a": [1, 2, 3]})

        manager.write_parquet(df, target)
        pd.testing.assert_frame_equal(manager.read_parquet(target), df)
        self.assertEqual(factory.created, [(target, MimeTypes.PARQUET)])

    def test_writes_use_format_mime_types(self):
        """Test that each writer passes its mime hint to the factory."""
        factory = SequentialOnlyChannelFactory()
        manager = DataManager(factory)

        manager.write_text("x", self.path("a.txt"))
        manager.write_json({}, self.path("a.json"))
        manager.write_yaml({"a": 1}, self.path("a.yaml"))
        manager.write_csv(pd.DataFrame({"a": [1]}), self.path("a.csv"))
        manager.write_bytes(b"x", self.path("a.bin"))

        self.assertEqual(
            [mime for _, mime in factory.created],
            [MimeTypes.TEXT, MimeTypes.JSON, MimeTypes.YAML, MimeTypes.CSV, MimeTypes.BINARY],
        )

    def test_channel_is_released_when_reader_fails(self):
        """Test that the channel is closed when the consumer raises."""
        target = self.path("data.bin")
        self.manager.write_bytes(b"data", target)
        opened = []
        factory = LocalChannelFactory()
        original_open = factory.open

        def tracking_open(path):
            channel = original_open(path)
            opened.append(channel)
            return channel

        factory.open = tracking_open
        manager = DataManager(factory)
        with self.assertRaises(RuntimeError):
            with manager.open_reader(target):
                raise RuntimeError("consumer failed")

        self.assertEqual(len(opened), 1)
        self.assertTrue(opened[0].closed)


if __name__ == "__main__":
    unittest.main()
