"""Environment directory lookups."""

from __future__ import annotations

import os
import tempfile
import unittest
from unittest import mock

from treepath import (
    DirectoryPath,
    FilePath,
    POSIX_POLICY,
    SystemPathError,
    create_temporary_file,
    locate_document_directory,
    locate_global_config_file,
    locate_temporary_directory,
    locate_user_config_file,
    locate_working_directory,
)


class LocateDirectoryTests(unittest.TestCase):
    def test_user_config_file_with_and_without_project(self) -> None:
        with mock.patch("treepath.locations.user_config_dir", return_value="/home/u/.config"):
            plain = locate_user_config_file("settings.json", policy=POSIX_POLICY)
            scoped = locate_user_config_file("settings.json", project="tool", policy=POSIX_POLICY)

        self.assertEqual(plain, FilePath("/home/u/.config/settings.json", POSIX_POLICY))
        self.assertEqual(scoped, FilePath("/home/u/.config/tool/settings.json", POSIX_POLICY))

    def test_global_config_file(self) -> None:
        with mock.patch("treepath.locations.site_config_dir", return_value="/etc/xdg"):
            path = locate_global_config_file("tool.conf", project="tool", policy=POSIX_POLICY)
        self.assertEqual(path.as_absolute_string(), "/etc/xdg/tool/tool.conf")

    def test_document_directory(self) -> None:
        with mock.patch("treepath.locations.user_documents_dir", return_value="/home/u/Documents"):
            self.assertEqual(
                locate_document_directory("reports", policy=POSIX_POLICY),
                DirectoryPath("/home/u/Documents/reports", POSIX_POLICY),
            )

    def test_unusable_environment_value_raises_system_error(self) -> None:
        with mock.patch("treepath.locations.user_documents_dir", return_value=""):
            with self.assertRaises(SystemPathError):
                locate_document_directory(policy=POSIX_POLICY)

    def test_temporary_directory(self) -> None:
        with mock.patch("treepath.locations.tempfile.gettempdir", return_value="/var/tmp/"):
            self.assertEqual(locate_temporary_directory(POSIX_POLICY), DirectoryPath("/var/tmp", POSIX_POLICY))

    def test_working_directory_matches_os(self) -> None:
        self.assertEqual(locate_working_directory(), DirectoryPath(os.getcwd()))


class TemporaryFileTests(unittest.TestCase):
    def test_create_temporary_file_inside_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = DirectoryPath(os.path.realpath(tmp))
            path, output = create_temporary_file(directory)
            with output:
                output.write("payload")

            self.assertEqual(path.directory(), directory)
            self.assertTrue(path.exists())
            with path.open_read() as handle:
                self.assertEqual(handle.read(), "payload")

    def test_create_temporary_file_in_missing_directory_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = DirectoryPath(os.path.realpath(tmp)).enter("missing")
            with self.assertRaises(SystemPathError):
                create_temporary_file(missing)

    def test_failed_open_closes_descriptor_and_removes_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            directory = DirectoryPath(os.path.realpath(tmp))
            real_close = os.close
            with (
                mock.patch("treepath.locations.os.fdopen", side_effect=OSError("no file objects")),
                mock.patch("treepath.locations.os.close", side_effect=real_close) as close,
            ):
                with self.assertRaises(SystemPathError):
                    create_temporary_file(directory)

            close.assert_called_once()
            self.assertEqual(os.listdir(directory), [])


if __name__ == "__main__":
    unittest.main()
