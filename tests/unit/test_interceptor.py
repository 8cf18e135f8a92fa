from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch

from confresolve import (
    ClassNotFoundError,
    ClassRegistry,
    ConfigurationReaderInterceptor,
    DefaultConfigurationReaderInterceptor,
    HomeFolder,
    ResourceConversionError,
    StandardEnvironment,
)
from confresolve.config import InterceptorSettings
from confresolve.home import HOME_ENV
from confresolve.resources import FileResource, InMemoryResource, InMemoryResourceTypeHandler, UrlResource
from tests.helpers import FakeEnvironmentLookup, make_interceptor, write_properties


class CreateFilenameTests(unittest.TestCase):
    def test_relative_names_resolve_against_home(self) -> None:
        interceptor = make_interceptor(Path("/srv/home"))
        for name, expected in [
            ("conf.xml", "/srv/home/conf.xml"),
            ("./data/../data/x.csv", "/srv/home/data/x.csv"),
            ("a//b/./c", "/srv/home/a/b/c"),
            ("../outside.txt", "/srv/outside.txt"),
        ]:
            with self.subTest(name=name):
                self.assertEqual(interceptor.create_filename(name), expected)

    def test_absolute_names_are_only_normalized(self) -> None:
        interceptor = make_interceptor(Path("/srv/home"))
        self.assertEqual(interceptor.create_filename("/etc/../opt/x"), "/opt/x")

    def test_none_returns_none(self) -> None:
        interceptor = make_interceptor(Path("/srv/home"))
        self.assertIsNone(interceptor.create_filename(None))

    def test_home_folder_is_read_on_every_call(self) -> None:
        homes = iter([Path("/first"), Path("/second")])
        interceptor = DefaultConfigurationReaderInterceptor(home_folder=lambda: next(homes))

        self.assertEqual(interceptor.create_filename("x"), "/first/x")
        self.assertEqual(interceptor.create_filename("x"), "/second/x")

    def test_default_home_comes_from_environment(self) -> None:
        interceptor = DefaultConfigurationReaderInterceptor()
        with patch.dict(os.environ, {HOME_ENV: "/env/home"}, clear=False):
            self.assertEqual(interceptor.get_home_folder(), HomeFolder(Path("/env/home")))
            self.assertEqual(interceptor.create_filename("y.txt"), "/env/home/y.txt")

        with patch.dict(os.environ, {HOME_ENV: ""}, clear=False):
            self.assertEqual(interceptor.get_home_folder().to_file(), Path.cwd())


class PropertyOverrideTests(unittest.TestCase):
    def test_explicit_overrides_win(self) -> None:
        interceptor = make_interceptor(Path("/h"), overrides={"a.b": "1"}, ambient={"a.b": "2", "c.d": "x"})

        self.assertEqual(interceptor.get_property_override("a.b"), "1")
        self.assertEqual(interceptor.get_property_override("c.d"), "x")
        self.assertIsNone(interceptor.get_property_override("e.f"))

    def test_properties_resource(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_properties(Path(tmpdir) / "override.properties", "a.b=from-file\n")
            interceptor = DefaultConfigurationReaderInterceptor(
                properties_resource=FileResource(path),
                environment_lookup=FakeEnvironmentLookup({"a.b": "ambient"}),
            )

        self.assertEqual(interceptor.get_property_override("a.b"), "from-file")

    def test_missing_resource_equals_no_overrides(self) -> None:
        lookup = FakeEnvironmentLookup({"a.b": "ambient"})
        from_missing = DefaultConfigurationReaderInterceptor(
            properties_resource=FileResource("/does/not/exist.properties"), environment_lookup=lookup
        )
        from_none = DefaultConfigurationReaderInterceptor(None, environment_lookup=lookup)

        for key in ("a.b", "c.d"):
            self.assertEqual(from_missing.get_property_override(key), from_none.get_property_override(key))
        self.assertEqual(len(from_missing.property_overrides), 0)

    def test_mapping_and_resource_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            DefaultConfigurationReaderInterceptor({"a": "1"}, properties_resource=InMemoryResource("x", b""))


class CreateResourceTests(unittest.TestCase):
    def test_file_resources_use_relative_parent_directory(self) -> None:
        interceptor = make_interceptor(Path("/srv/home"))
        resource = interceptor.create_resource("file://conf/app.yaml", None)
        self.assertIsInstance(resource, FileResource)
        self.assertEqual(resource.qualified_path, "/srv/home/conf/app.yaml")

        rooted = make_interceptor(Path("/srv/home"), relative_parent_directory=lambda: Path("/srv/root"))
        self.assertEqual(rooted.create_resource("conf/app.yaml", None).qualified_path, "/srv/root/conf/app.yaml")
        self.assertEqual(rooted.create_filename("conf/app.yaml"), "/srv/home/conf/app.yaml")

    def test_builtin_and_extra_handlers(self) -> None:
        handler = InMemoryResourceTypeHandler({"greeting": InMemoryResource("greeting", b"hi")})
        interceptor = make_interceptor(Path("/h"), extra_resource_type_handlers=[handler])

        self.assertIsInstance(interceptor.create_resource("https://example.com/x", None), UrlResource)
        self.assertEqual(interceptor.create_resource("mem://greeting", object()).read_bytes(), b"hi")
        self.assertEqual(interceptor.get_extra_resource_type_handlers(), [handler])

    def test_unmatched_scheme_fails(self) -> None:
        interceptor = make_interceptor(Path("/h"))
        with self.assertRaises(ResourceConversionError):
            interceptor.create_resource("mem://greeting", None)

    def test_subclass_can_contribute_handlers(self) -> None:
        class WithMemory(DefaultConfigurationReaderInterceptor):
            def get_extra_resource_type_handlers(self):
                return [InMemoryResourceTypeHandler()]

        resource = WithMemory(home_folder="/h").create_resource("mem://scratch", None)
        self.assertIsInstance(resource, InMemoryResource)
        self.assertFalse(resource.exists)

    def test_default_scheme_can_be_injected(self) -> None:
        interceptor = make_interceptor(
            Path("/h"), default_scheme="mem", extra_resource_type_handlers=[InMemoryResourceTypeHandler()]
        )
        self.assertIsInstance(interceptor.create_resource("plain", None), InMemoryResource)


class LoadClassTests(unittest.TestCase):
    def test_known_and_unknown_classes(self) -> None:
        interceptor = make_interceptor(Path("/h"))
        self.assertIs(interceptor.load_class("pathlib.PurePosixPath"), __import__("pathlib").PurePosixPath)
        with self.assertRaises(ClassNotFoundError):
            interceptor.load_class("does.not.Exist")

    def test_registry_is_consulted(self) -> None:
        registry = ClassRegistry({"custom.Analyzer": StandardEnvironment}, allow_import=False)
        interceptor = make_interceptor(Path("/h"), class_registry=registry)

        self.assertIs(interceptor.load_class("custom.Analyzer"), StandardEnvironment)
        with self.assertRaises(ClassNotFoundError):
            interceptor.load_class("pathlib.Path")


class EnvironmentAndTempTests(unittest.TestCase):
    def test_temporary_storage_directory(self) -> None:
        interceptor = make_interceptor(Path("/h"))
        tmp = interceptor.get_temporary_storage_directory()

        self.assertTrue(tmp)
        self.assertTrue(os.path.isabs(tmp))
        self.assertTrue(os.path.isdir(tmp))

    def test_base_environment_is_idempotent(self) -> None:
        default = make_interceptor(Path("/h"))
        self.assertIs(default.create_base_environment(), default.create_base_environment())
        self.assertIsInstance(default.create_base_environment(), StandardEnvironment)

        supplied = StandardEnvironment(name="custom", attributes={"workers": 4})
        interceptor = make_interceptor(Path("/h"), base_environment=supplied)
        self.assertIs(interceptor.create_base_environment(), supplied)

    def test_any_object_can_be_the_base_environment(self) -> None:
        supplied = object()
        interceptor = make_interceptor(Path("/h"), base_environment=supplied)
        self.assertIs(interceptor.create_base_environment(), supplied)

    def test_implements_interceptor_protocol(self) -> None:
        self.assertIsInstance(make_interceptor(Path("/h")), ConfigurationReaderInterceptor)


class FromSettingsTests(unittest.TestCase):
    def test_builds_from_settings(self) -> None:
        settings = InterceptorSettings(
            home_folder=Path("/srv/home"),
            property_overrides={"a.b": "1"},
            allow_import=False,
        )
        interceptor = DefaultConfigurationReaderInterceptor.from_settings(
            settings, environment_lookup=FakeEnvironmentLookup()
        )

        self.assertEqual(interceptor.create_filename("x"), "/srv/home/x")
        self.assertEqual(interceptor.get_property_override("a.b"), "1")
        with self.assertRaises(ClassNotFoundError):
            interceptor.load_class("pathlib.Path")

    def test_properties_file_setting(self) -> None:
        with TemporaryDirectory() as tmpdir:
            path = write_properties(Path(tmpdir) / "o.properties", "k=v\n")
            settings = InterceptorSettings(properties_file=path)
            interceptor = DefaultConfigurationReaderInterceptor.from_settings(
                settings, environment_lookup=FakeEnvironmentLookup()
            )

        self.assertEqual(interceptor.get_property_override("k"), "v")


if __name__ == "__main__":
    unittest.main()
