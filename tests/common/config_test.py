# -*- coding: utf-8 -*-
"""Test for generator configs"""
import os
import tempfile
import unittest

from sudoku_csp.common.config import GeneratorConfig, load_config


class GeneratorConfigTest(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp_dir.cleanup()

    def _write(self, content: str) -> str:
        path = os.path.join(self.tmp_dir.name, "generator.yaml")
        with open(path, "w") as f:
            f.write(content)
        return path

    def test_defaults(self):
        config = GeneratorConfig()
        self.assertEqual(config.difficulty, "medium")
        self.assertEqual(config.random_provider, "python")
        self.assertEqual(config.removal_count("easy"), 30)
        self.assertEqual(config.removal_count("Medium"), 40)
        self.assertEqual(config.removal_count("HARD"), 50)
        self.assertEqual(config.removal_count("unknown"), 40)

    def test_load_config(self):
        path = self._write(
            "difficulty: Hard\n"
            "seed: 42\n"
            "random_provider: numpy\n"
            "removal_counts:\n"
            "  hard: 55\n"
        )
        config = load_config(path)
        self.assertEqual(config.difficulty, "hard")
        self.assertEqual(config.seed, 42)
        self.assertEqual(config.random_provider, "numpy")
        self.assertEqual(config.removal_count("hard"), 55)
        self.assertEqual(config.removal_count("easy"), 30)

    def test_invalid_field(self):
        path = self._write("seed: not_a_number\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_validate(self):
        config = GeneratorConfig(difficulty="expert", removal_counts={"hard": 90})
        with self.assertLogs("sudoku_csp.common.config", level="WARNING"):
            config.validate()
        self.assertEqual(config.difficulty, "medium")
        self.assertEqual(config.removal_count("hard"), 81)

        with self.assertRaises(ValueError):
            GeneratorConfig(removal_counts={"easy": -1}).validate()
        with self.assertRaises(ValueError):
            GeneratorConfig(removal_counts={"expert": 60}).validate()

    def test_example_config(self):
        path = os.path.join(
            os.path.dirname(__file__), "..", "..", "examples", "generator.yaml"
        )
        config = load_config(path)
        self.assertEqual(config.difficulty, "hard")
        self.assertEqual(config.random_provider, "numpy")

    def test_malformed_yaml(self):
        path = self._write("difficulty: [hard\nseed: 1\n")
        with self.assertRaises(ValueError):
            load_config(path)

    def test_random_provider_must_be_seeded(self):
        for name in ["sequence", "dice"]:
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    GeneratorConfig(random_provider=name).validate()
        path = self._write("random_provider: sequence\n")
        with self.assertRaises(ValueError):
            load_config(path)
