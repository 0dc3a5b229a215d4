import io
import json
import os
import tempfile
import unittest
from unittest.mock import MagicMock
from conanbuild.env_script import generate_env_source, write_env_source
from conanbuild.errors import BuildInfoIOError
from conanbuild.manifest import BuildInfo
from conanbuild.manifest_set import BuildInfoSet


class TestEnvScript(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.zmq_lib = os.path.join(self.root, "zmq", "lib")
        self.sodium_lib = os.path.join(self.root, "sodium", "lib")
        self.ssl_lib = os.path.join(self.root, "openssl", "lib")
        for directory in (self.zmq_lib, self.sodium_lib, self.ssl_lib):
            os.makedirs(directory)
        open(os.path.join(self.zmq_lib, "libzmq.so"), "w").close()
        open(os.path.join(self.sodium_lib, "libsodium.a"), "w").close()
        open(os.path.join(self.ssl_lib, "libssl.a"), "w").close()

    def tearDown(self):
        self._tmp.cleanup()

    def manifest(self, name, settings, dependencies):
        directory = os.path.join(self.root, name)
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, "conanbuildinfo.json")
        with open(path, "w") as f:
            json.dump({"settings": settings, "dependencies": dependencies}, f)
        return BuildInfo.read(path)

    def linux(self):
        return self.manifest("linux", {"arch": "x86_64", "os": "Linux"}, [
            {"name": "zeromq", "libs": ["zmq"], "lib_paths": [self.zmq_lib],
             "bin_paths": ["C:\\zmq\\bin"], "rootpath": os.path.join(self.root, "zmq")},
            {"name": "libsodium", "libs": ["sodium"], "lib_paths": [self.sodium_lib],
             "bin_paths": ["/sodium/bin"]},
            {"name": "openssl", "libs": ["ssl"], "lib_paths": [self.ssl_lib],
             "rootpath": "/opt/openssl"},
        ])

    def test_host(self):
        info = self.linux()
        sh, ps1 = io.StringIO(), io.StringIO()
        write_env_source(info, True, sh, ps1)
        self.assertEqual(sh.getvalue().splitlines(), [
            f"export x86_64_unknown_linux_gnu_CONANBUILDINFO={info.path}",
            f"export LD_LIBRARY_PATH={self.zmq_lib}",
            "export x86_64_unknown_linux_gnu_OPENSSL_DIR=/opt/openssl",
            "export OPENSSL_DIR=/opt/openssl",
        ])
        self.assertEqual(ps1.getvalue().splitlines(), [
            f"$env:x86_64_unknown_linux_gnu_CONANBUILDINFO=\"{info.path}\"",
            "$env:PATH=\"C:\\\\zmq\\\\bin;$env:PATH\"",
            "$env:x86_64_unknown_linux_gnu_OPENSSL_DIR=\"/opt/openssl\"",
            "$env:OPENSSL_DIR=\"/opt/openssl\"",
        ])

    def test_not_host(self):
        info = self.linux()
        sh, ps1 = io.StringIO(), io.StringIO()
        write_env_source(info, False, sh, ps1)
        self.assertEqual(sh.getvalue().splitlines(), [
            f"export x86_64_unknown_linux_gnu_CONANBUILDINFO={info.path}",
            "export x86_64_unknown_linux_gnu_OPENSSL_DIR=/opt/openssl",
        ])
        self.assertNotIn("PATH", ps1.getvalue())

    def test_host_without_prefix(self):
        info = self.linux()
        sh, ps1 = io.StringIO(), io.StringIO()
        write_env_source(info, True, sh, ps1, host_prefix=False)
        self.assertTrue(sh.getvalue().startswith(f"export CONANBUILDINFO={info.path}\n"))
        self.assertIn("export x86_64_unknown_linux_gnu_OPENSSL_DIR=/opt/openssl", sh.getvalue())

    def test_no_shared_dependencies(self):
        info = self.manifest("static", {"arch": "armv8", "os": "Android"}, [
            {"name": "libsodium", "libs": ["sodium"], "lib_paths": [self.sodium_lib], "bin_paths": ["/bin"]},
        ])
        sh, ps1 = io.StringIO(), io.StringIO()
        write_env_source(info, True, sh, ps1)
        self.assertEqual(sh.getvalue(), f"export aarch64_linux_android_CONANBUILDINFO={info.path}\n")
        self.assertEqual(ps1.getvalue(), f"$env:aarch64_linux_android_CONANBUILDINFO=\"{info.path}\"\n")

    def test_flushes(self):
        sh, ps1 = MagicMock(), MagicMock()
        write_env_source(self.linux(), True, sh, ps1)
        sh.flush.assert_called_once()
        ps1.flush.assert_called_once()

    def test_write_failure(self):
        sh, ps1 = MagicMock(), io.StringIO()
        sh.name = "env.sh"
        sh.write.side_effect = OSError("disk full")
        with self.assertRaises(BuildInfoIOError):
            write_env_source(self.linux(), True, sh, ps1)

    def test_write_failure_names_failing_script(self):
        sh, ps1 = io.StringIO(), MagicMock()
        ps1.name = "/out/env.ps1"
        ps1.write.side_effect = OSError("disk full")
        with self.assertRaises(BuildInfoIOError) as cm:
            write_env_source(self.linux(), True, sh, ps1)
        self.assertEqual(cm.exception.path, "/out/env.ps1")

    def test_paths_with_spaces_are_quoted(self):
        info = self.manifest("with space", {"arch": "x86_64", "os": "Linux"}, [
            {"name": "openssl", "libs": [], "rootpath": "/opt/my openssl"},
        ])
        sh, ps1 = io.StringIO(), io.StringIO()
        write_env_source(info, True, sh, ps1)
        self.assertEqual(sh.getvalue().splitlines(), [
            f"export x86_64_unknown_linux_gnu_CONANBUILDINFO='{info.path}'",
            "export x86_64_unknown_linux_gnu_OPENSSL_DIR='/opt/my openssl'",
            "export OPENSSL_DIR='/opt/my openssl'",
        ])
        self.assertIn("$env:OPENSSL_DIR=\"/opt/my openssl\"", ps1.getvalue())

    def test_generate_env_source(self):
        linux = self.linux()
        android = self.manifest("android", {"arch": "armv8", "os": "Android"}, [])
        build_info_set = BuildInfoSet({linux.target(): linux, android.target(): android})
        out_dir = os.path.join(self.root, "out")
        os.makedirs(out_dir)
        sh_path, ps1_path = generate_env_source(build_info_set, "x86_64-unknown-linux-gnu", out_dir)
        with open(sh_path) as f:
            sh = f.read()
        with open(ps1_path) as f:
            ps1 = f.read()
        self.assertIn(f"export aarch64_linux_android_CONANBUILDINFO={android.path}\n", sh)
        self.assertIn(f"export x86_64_unknown_linux_gnu_CONANBUILDINFO={linux.path}\n", sh)
        self.assertEqual(sh.count("LD_LIBRARY_PATH"), 1)
        self.assertEqual(ps1.count("$env:PATH=\"C:\\\\zmq\\\\bin;$env:PATH\"\n"), 1)

    def test_generate_env_source_overwrites(self):
        out_dir = os.path.join(self.root, "out")
        os.makedirs(out_dir)
        with open(os.path.join(out_dir, "env.sh"), "w") as f:
            f.write("stale\n")
        generate_env_source(BuildInfoSet(), "x86_64-unknown-linux-gnu", out_dir)
        with open(os.path.join(out_dir, "env.sh")) as f:
            self.assertEqual(f.read(), "")

    def test_generate_env_source_creates_output_dir(self):
        out_dir = os.path.join(self.root, "out", "nested")
        sh_path, ps1_path = generate_env_source(BuildInfoSet(), "x86_64-unknown-linux-gnu", out_dir)
        self.assertTrue(os.path.isfile(sh_path))
        self.assertTrue(os.path.isfile(ps1_path))

    def test_generate_env_source_unwritable(self):
        blocker = os.path.join(self.root, "blocker")
        open(blocker, "w").close()
        with self.assertRaises(BuildInfoIOError) as cm:
            generate_env_source(BuildInfoSet(), "x86_64-unknown-linux-gnu", blocker)
        self.assertEqual(cm.exception.path, blocker)


if __name__ == "__main__":
    unittest.main()
