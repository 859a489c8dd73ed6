# -*- coding: utf-8 -*-
"""Test cases for the registry."""
import unittest

from sudoku_csp.utils.registry import Registry


class TestRegistry(unittest.TestCase):
    def test_register_module(self):
        registry = Registry("shapes")

        @registry.register_module("square")
        class Square:
            pass

        class Circle:
            pass

        registry.register_module("circle", Circle)
        self.assertEqual(registry.name, "shapes")
        self.assertEqual(len(registry), 2)
        self.assertIn("square", registry)
        self.assertIs(registry.get("square"), Square)
        self.assertIs(registry.get("circle"), Circle)
        self.assertIsNone(registry.get("triangle"))

    def test_duplicate_registration(self):
        registry = Registry("shapes")
        registry.register_module("square", object)
        with self.assertRaises(KeyError):
            registry.register_module("square", int)
        registry.register_module("square", int, force=True)
        self.assertIs(registry.get("square"), int)

    def test_invalid_name(self):
        registry = Registry("shapes")
        with self.assertRaises(TypeError):
            registry.register_module(1, object)
