from __future__ import annotations

import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

import yaml
from pydantic import ValidationError

from pathconf.config import (
    ConfigError,
    PRESETS,
    ResolverOptions,
    dump_example_config,
    load_options,
    locate_config,
    read_paths_file,
    validate_paths,
)
from pathconf.errors import ConfigNotFound
from tests.helpers import SAMPLE_PATHS, write_paths_file


class LocateConfigTests(unittest.TestCase):
    def test_defaults_to_base_folder(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            expected = write_paths_file(base, SAMPLE_PATHS)
            self.assertEqual(locate_config(base), expected)
            self.assertEqual(locate_config(base, ""), expected)

    def test_existing_file_and_folder(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            expected = write_paths_file(base / "settings", SAMPLE_PATHS, name="paths.toml")

            self.assertEqual(locate_config(base, expected), expected)
            self.assertEqual(locate_config(base, base / "settings"), expected)

    def test_relative_folder_and_file(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            expected = write_paths_file(base / "settings", SAMPLE_PATHS)

            self.assertEqual(locate_config(base, "settings"), expected)
            self.assertEqual(locate_config(base, "settings/paths.yaml"), expected)

    def test_missing_config_lists_attempts(self) -> None:
        with TemporaryDirectory() as tmpdir:
            base = Path(tmpdir).resolve()
            with self.assertRaises(ConfigNotFound) as ctx:
                locate_config(base, "nowhere")
            self.assertIn(str(base / "nowhere" / "paths.yaml"), str(ctx.exception))

            with self.assertRaises(ConfigNotFound):
                locate_config(base, "nowhere/paths.json")

            with self.assertRaises(ConfigNotFound):
                locate_config(base, base)


class ReadPathsTests(unittest.TestCase):
    def test_reads_every_format(self) -> None:
        with TemporaryDirectory() as tmpdir:
            for name in ("paths.yaml", "paths.yml", "paths.toml", "paths.json"):
                with self.subTest(name=name):
                    dest = write_paths_file(Path(tmpdir) / name.replace(".", "_"), SAMPLE_PATHS, name=name)
                    self.assertEqual(read_paths_file(dest), SAMPLE_PATHS)

    def test_preserves_source_order(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = write_paths_file(Path(tmpdir), {"z": "z", "a": "a", "m": "m"})
            self.assertEqual(list(read_paths_file(dest)), ["z", "a", "m"])

    def test_rejects_nested_values(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "paths.yaml"
            dest.write_text("app:\n  nested: value\n", encoding="utf-8")
            with self.assertRaises(ConfigError) as ctx:
                read_paths_file(dest)
            self.assertIn(str(dest), str(ctx.exception))

    def test_rejects_non_mapping_and_bad_syntax(self) -> None:
        with TemporaryDirectory() as tmpdir:
            listing = Path(tmpdir) / "paths.yaml"
            listing.write_text("- app\n- public\n", encoding="utf-8")
            broken = Path(tmpdir) / "paths.json"
            broken.write_text("{not json", encoding="utf-8")
            unknown = Path(tmpdir) / "paths.ini"
            unknown.write_text("[paths]\n", encoding="utf-8")

            for dest in (listing, broken, unknown, Path(tmpdir) / "missing.yaml"):
                with self.subTest(dest=dest.name):
                    with self.assertRaises(ConfigError):
                        read_paths_file(dest)

    def test_empty_file_is_empty_mapping(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "paths.yaml"
            dest.write_text("", encoding="utf-8")
            self.assertEqual(read_paths_file(dest), {})

    def test_validate_paths_mapping(self) -> None:
        self.assertEqual(validate_paths({"a": "b"}), {"a": "b"})
        with self.assertRaises(ConfigError):
            validate_paths({"a": 1})


class OptionsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        options = ResolverOptions()
        self.assertTrue(options.convert_separators)
        self.assertTrue(options.trim_trailing_separators)
        self.assertFalse(options.verify_existence)
        self.assertFalse(options.allow_overwrite)
        self.assertIsNone(options.base_path)

    def test_convert_separators_values(self) -> None:
        self.assertEqual(ResolverOptions(convert_separators="auto").convert_separators, "auto")
        self.assertFalse(ResolverOptions(convert_separators=False).convert_separators)
        with self.assertRaises(ValidationError):
            ResolverOptions(convert_separators="yes")

    def test_assignment_is_validated(self) -> None:
        options = ResolverOptions()
        with self.assertRaises(ValidationError):
            options.separator = ":"
        with self.assertRaises(ValidationError):
            options.convert_separators = "sometimes"

    def test_load_options_from_nested_section(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "pathconf.yaml"
            dest.write_text(
                yaml.safe_dump({"options": {"allow_overwrite": True, "convert_separators": "auto"}}),
                encoding="utf-8",
            )
            options = load_options(dest)

        self.assertTrue(options.allow_overwrite)
        self.assertEqual(options.convert_separators, "auto")

    def test_load_options_rejects_unknown_keys(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "pathconf.json"
            dest.write_text(json.dumps({"mutable": True}), encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_options(dest)


class DumpExampleConfigTests(unittest.TestCase):
    def test_every_preset_dumps_as_yaml(self) -> None:
        with TemporaryDirectory() as tmpdir:
            for preset in PRESETS:
                with self.subTest(preset=preset):
                    dest = Path(tmpdir) / preset / "paths.yaml"
                    dump_example_config(dest, preset=preset)
                    data = read_paths_file(dest)
                    self.assertIn("storage", data)
                    self.assertIn("views", data)

    def test_laravel51_has_bootstrap(self) -> None:
        with TemporaryDirectory() as tmpdir:
            dest = Path(tmpdir) / "paths.json"
            dump_example_config(dest, preset="laravel51")
            data = json.loads(dest.read_text(encoding="utf-8"))

        self.assertEqual(data["bootstrap"], "support/storage/bootstrap")

    def test_rejects_toml_and_unknown_preset(self) -> None:
        with TemporaryDirectory() as tmpdir:
            with self.assertRaises(ConfigError):
                dump_example_config(Path(tmpdir) / "paths.toml")
            with self.assertRaises(ConfigError):
                dump_example_config(Path(tmpdir) / "paths.yaml", preset="rails")


if __name__ == "__main__":
    unittest.main()
