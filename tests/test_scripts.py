"""Tests for the command-line scripts under scripts/."""

from __future__ import annotations

import importlib.util
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from productstore.db.database import Database
from productstore.db.product_repo import ProductRepository

_SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def _load_script(name: str):
    module_spec = importlib.util.spec_from_file_location(f"scripts_{name}", _SCRIPTS / f"{name}.py")
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module


class TestInitDbScript(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.url = f"sqlite:///{(Path(self.tmpdir.name) / 'products.db').as_posix()}"
        self.init_db = _load_script("init_db")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_log_format_matches_example_usage(self):
        argv = ["init_db.py", "--database-url", self.url]
        with patch("sys.argv", argv), patch("logging.basicConfig") as basic_config:
            self.init_db.main()
        self.assertEqual(
            basic_config.call_args.kwargs["format"],
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    def test_seeds_example_file(self):
        seed = Path(__file__).resolve().parents[1] / "data" / "products.example.yaml"
        argv = ["init_db.py", "--database-url", self.url, "--seed-products", str(seed)]
        with patch("sys.argv", argv), patch("logging.basicConfig"):
            self.init_db.main()
        with Database(self.url) as db:
            self.assertEqual(len(ProductRepository(db).list_all()), 3)

    def test_bad_seed_file_exits_nonzero(self):
        seed = Path(self.tmpdir.name) / "bad.yaml"
        seed.write_text("- not a mapping\n", encoding="utf-8")
        argv = ["init_db.py", "--database-url", self.url, "--seed-products", str(seed)]
        with patch("sys.argv", argv), patch("logging.basicConfig"):
            with self.assertRaises(SystemExit) as ctx:
                self.init_db.main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
