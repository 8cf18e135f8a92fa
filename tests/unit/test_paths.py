from __future__ import annotations

import os
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from confresolve.util.paths import FileResolver


class FileResolverTests(unittest.TestCase):
    def test_relative_name_is_joined_onto_base(self) -> None:
        resolver = FileResolver("/srv/app")
        self.assertEqual(resolver.to_file("conf/app.yaml"), Path("/srv/app/conf/app.yaml"))
        self.assertEqual(resolver.resolve("conf/app.yaml"), "/srv/app/conf/app.yaml")

    def test_absolute_name_is_kept(self) -> None:
        resolver = FileResolver("/srv/app")
        self.assertEqual(resolver.to_file("/etc/app.yaml"), Path("/etc/app.yaml"))
        self.assertEqual(resolver.resolve("/etc/./app.yaml"), "/etc/app.yaml")

    def test_dot_segments_are_collapsed(self) -> None:
        resolver = FileResolver("/srv/app")
        self.assertEqual(resolver.resolve("./conf/../data//x.csv"), "/srv/app/data/x.csv")
        self.assertEqual(resolver.resolve("../shared/x.csv"), "/srv/shared/x.csv")

    def test_none_passes_through(self) -> None:
        resolver = FileResolver("/srv/app")
        self.assertIsNone(resolver.to_file(None))
        self.assertIsNone(resolver.to_path(None))
        self.assertIsNone(resolver.resolve(None))

    def test_nonexistent_paths_do_not_raise(self) -> None:
        with TemporaryDirectory() as tmpdir:
            resolver = FileResolver(tmpdir)
            result = resolver.resolve("missing/file.txt")

        self.assertTrue(result.endswith("/missing/file.txt"))
        self.assertFalse(Path(result).exists())

    def test_relative_base_dir_is_made_absolute(self) -> None:
        resolver = FileResolver("relative/base")
        expected = Path(os.path.abspath("relative/base")).as_posix() + "/x.txt"
        self.assertEqual(resolver.resolve("x.txt"), expected)


if __name__ == "__main__":
    unittest.main()
