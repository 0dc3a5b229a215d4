import unittest
from conanbuild.errors import ConfigurationError, UnsupportedTargetError
from conanbuild.target import env_prefix, supported_targets, target_from_arch_and_os

class TestTarget(unittest.TestCase):

    def test_known_targets(self):
        self.assertEqual(target_from_arch_and_os("x86_64", "Linux"), "x86_64-unknown-linux-gnu")
        self.assertEqual(target_from_arch_and_os("x86", "Windows"), "i686-pc-windows-msvc")
        self.assertEqual(target_from_arch_and_os("armv8", "Macos"), "aarch64-apple-darwin")
        self.assertEqual(target_from_arch_and_os("armv8", "iOS"), "aarch64-apple-ios")
        self.assertEqual(target_from_arch_and_os("armv7", "Android"), "armv7-linux-androideabi")

    def test_deterministic(self):
        first = target_from_arch_and_os("x86_64", "Android")
        self.assertEqual(first, target_from_arch_and_os("x86_64", "Android"))

    def test_unknown_os(self):
        with self.assertRaises(UnsupportedTargetError) as cm:
            target_from_arch_and_os("x86_64", "FreeBSD")
        self.assertIn("FreeBSD", str(cm.exception))

    def test_unknown_arch_for_os(self):
        with self.assertRaises(UnsupportedTargetError) as cm:
            target_from_arch_and_os("armv7", "Macos")
        self.assertIn("armv7", str(cm.exception))

    def test_unsupported_target_is_configuration_error(self):
        self.assertTrue(issubclass(UnsupportedTargetError, ConfigurationError))

    def test_env_prefix(self):
        self.assertEqual(env_prefix("x86_64-unknown-linux-gnu"), "x86_64_unknown_linux_gnu")

    def test_supported_targets_cover_table(self):
        triples = [triple for _, _, triple in supported_targets()]
        self.assertIn("aarch64-linux-android", triples)
        self.assertEqual(len(triples), len(set(triples)))

if __name__ == "__main__":
    unittest.main()
