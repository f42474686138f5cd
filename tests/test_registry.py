import pathlib
import sys
import threading
import unittest

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))
import biginteger
from biginteger import (
    BackendRegistry,
    GmpBigInteger,
    ImplementationAlreadySet,
    ImplementationNotSet,
    InvalidInput,
    NativeBigInteger,
)
from biginteger.registry import BACKEND_ENV, default_implementation


class RegistryTests(unittest.TestCase):
    def test_set_implementation_is_write_once(self):
        registry = BackendRegistry(NativeBigInteger)
        with self.assertRaisesRegex(ImplementationAlreadySet, "Implementation already set"):
            registry.set_implementation(GmpBigInteger)
        self.assertIs(registry.implementation, NativeBigInteger)
        registry.set_implementation(GmpBigInteger, replace=True)
        self.assertIs(registry.implementation, GmpBigInteger)
        self.assertIsInstance(registry.new(1), GmpBigInteger)

    def test_empty_registry(self):
        registry = BackendRegistry()
        self.assertIsNone(registry.implementation)
        with self.assertRaises(ImplementationNotSet):
            registry.new(1)
        registry.set_implementation(GmpBigInteger)
        self.assertEqual(registry.new("0x10").to_number(), 16)

    def test_rejects_non_backend_classes(self):
        registry = BackendRegistry()
        for bad in [int, object, NativeBigInteger(1), None]:
            with self.assertRaises(TypeError):
                registry.set_implementation(bad)
        self.assertIsNone(registry.implementation)

    def test_override_restores_previous(self):
        registry = BackendRegistry(NativeBigInteger)
        with registry.override(GmpBigInteger) as r:
            self.assertIs(r, registry)
            self.assertIsInstance(registry.new(1), GmpBigInteger)
        self.assertIs(registry.implementation, NativeBigInteger)
        with self.assertRaises(KeyError):
            with registry.override(GmpBigInteger):
                raise KeyError("boom")
        self.assertIs(registry.implementation, NativeBigInteger)

    def test_default_implementation_from_environment(self):
        self.assertIs(default_implementation({}), NativeBigInteger)
        self.assertIs(default_implementation({BACKEND_ENV: "native"}), NativeBigInteger)
        self.assertIs(default_implementation({BACKEND_ENV: "fallback"}), GmpBigInteger)
        self.assertIs(default_implementation({BACKEND_ENV: " GMP "}), GmpBigInteger)
        with self.assertRaises(InvalidInput):
            default_implementation({BACKEND_ENV: "bn.js"})

    def test_package_entry_points_share_default_registry(self):
        existing = biginteger.default_registry.implementation
        self.assertIsNotNone(existing)
        with self.assertRaises(ImplementationAlreadySet):
            biginteger.set_implementation(existing)
        for impl in [NativeBigInteger, GmpBigInteger]:
            with biginteger.override(impl):
                self.assertIsInstance(biginteger.new(1), impl)
        biginteger.set_implementation(existing, replace=True)
        self.assertIsInstance(biginteger.new(1), existing)

    def test_concurrent_installs_admit_one_winner(self):
        registry = BackendRegistry()
        errors = []
        barrier = threading.Barrier(8)

        def install(impl):
            barrier.wait()
            try:
                registry.set_implementation(impl)
            except ImplementationAlreadySet as e:
                errors.append(e)

        threads = [threading.Thread(target=install, args=([NativeBigInteger, GmpBigInteger][i % 2],)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(errors), 7)
        self.assertIn(registry.implementation, (NativeBigInteger, GmpBigInteger))

    def test_mixing_backends_is_rejected(self):
        a, b = NativeBigInteger(1), GmpBigInteger(1)
        with self.assertRaises(TypeError):
            a.add(b)
        with self.assertRaises(TypeError):
            b.equal(a)
        self.assertFalse(a == b)
        self.assertTrue(NativeBigInteger(b).equal(a))


if __name__ == "__main__":
    unittest.main()
