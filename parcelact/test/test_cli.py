""" Test case for the ``run_activation`` command line script.
"""
import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock

from ..scripts.run_activation import run_activation
from . import fakes
from .test_namelist import NAMELIST


class TestRunActivation(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.fn = os.path.join(self.tmpdir, "config.yml")
        namelist = NAMELIST.replace("output_dir: out", "output_dir: %s" % self.tmpdir)
        with open(self.fn, "w") as f:
            f.write(namelist + "  format: csv\n")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def test_run(self):
        buf = io.StringIO()
        with mock.patch("parcelact.backend.PyrcelBackend", fakes.FakeBackend):
            with redirect_stdout(buf):
                status = run_activation([self.fn, "--quiet"])

        self.assertEqual(status, 0)
        self.assertIn("Done!", buf.getvalue())
        self.assertTrue(os.path.exists(os.path.join(self.tmpdir, "two_modes_parcel.csv")))
        self.assertTrue(os.path.exists(os.path.join(self.tmpdir, "two_modes_sulfate.csv")))

    def test_bad_namelist(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            status = run_activation([os.path.join(self.tmpdir, "missing.yml")])

        self.assertEqual(status, 1)
        self.assertIn("Something went wrong", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
