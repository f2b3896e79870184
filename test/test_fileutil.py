# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

import unittest
import io
import os
import pathlib
import random
import tempfile

from id3stack.fileutil import *

class FileutilTestCase(unittest.TestCase):
    def testXread(self):
        file = io.BytesIO(b"abcdef")
        self.assertEqual(xread(file, 4), b"abcd")
        self.assertRaises(EOFError, xread, file, 4)

    def testOpened(self):
        file = io.BytesIO(b"data")
        with opened(file, "rb") as f:
            self.assertIs(f, file)
        self.assertFalse(file.closed)

    def testOpenedPaths(self):
        file = tempfile.NamedTemporaryFile(prefix="id3stacktest-", suffix=".tmp", delete=False)
        try:
            file.write(b"data")
            file.close()
            for name in file.name, os.fsencode(file.name), pathlib.Path(file.name):
                with opened(name, "rb") as f:
                    self.assertEqual(f.read(), b"data")
                self.assertTrue(f.closed)
        finally:
            os.unlink(file.name)

    def testReplaceTail(self):
        def random_data(length):
            return bytes(random.randint(0, 255) for i in range(length))
        data = random_data(1000)
        file = tempfile.NamedTemporaryFile(prefix="id3stacktest-", suffix=".tmp", delete=False)
        try:
            filename = file.name
            file.write(data)
            file.close()
            # Append
            chunk = random_data(128)
            replace_tail(filename, 0, chunk)
            with opened(filename, "rb") as f:
                self.assertEqual(f.read(), data + chunk)
            # Replace
            chunk2 = random_data(128)
            replace_tail(filename, 128, chunk2)
            with opened(filename, "rb") as f:
                self.assertEqual(f.read(), data + chunk2)
            # Truncate
            replace_tail(filename, 128, b"")
            with opened(filename, "rb") as f:
                self.assertEqual(f.read(), data)
            self.assertRaises(ValueError, replace_tail, filename, 2000, b"")
        finally:
            os.unlink(filename)

    def testFileSize(self):
        file = io.BytesIO(b"x" * 42)
        self.assertEqual(file_size(file), 42)

suite = unittest.TestLoader().loadTestsFromTestCase(FileutilTestCase)

if __name__ == "__main__":
    unittest.main(defaultTest="suite")
